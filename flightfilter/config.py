"""
Configuration for flightfilter.

Loads and validates the environment variables that tune filter discovery,
the default ground-time limit, the timezone used for naive timestamps and
logging verbosity.
"""
import os
from pathlib import Path

import pytz
from dotenv import load_dotenv

# Load environment variables from .env.local
env_path = Path(__file__).parent.parent / '.env.local'
load_dotenv(dotenv_path=env_path)


class Config:
    """Centralized flightfilter configuration."""

    # Discovery scope used when FilterRegistry() is built without one.
    # Empty means "the registry's own package".
    FILTER_SCAN_SCOPE: str = os.getenv('FILTER_SCAN_SCOPE', '').strip()

    # Default threshold of GroundTimeLimitFilter
    GROUND_TIME_LIMIT_MINUTES: int = int(os.getenv('GROUND_TIME_LIMIT_MINUTES', '120'))

    # Timezone applied to naive segment timestamps and to "now"
    TIMEZONE: str = os.getenv('TIMEZONE', 'UTC')

    # Environment
    ENVIRONMENT: str = os.getenv('ENVIRONMENT', 'development')

    # Logging
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO').upper()

    @classmethod
    def validate(cls) -> None:
        """
        Validate the configured values.

        Raises:
            ValueError: If the timezone is unknown or the ground-time limit
                is not a positive number of minutes.
        """
        if cls.TIMEZONE not in pytz.all_timezones_set:
            raise ValueError(
                f"Unknown TIMEZONE '{cls.TIMEZONE}'. "
                f"Please check your .env.local file."
            )

        if cls.GROUND_TIME_LIMIT_MINUTES <= 0:
            raise ValueError(
                f"GROUND_TIME_LIMIT_MINUTES must be positive, "
                f"got {cls.GROUND_TIME_LIMIT_MINUTES}"
            )


# Global configuration instance
config = Config()
