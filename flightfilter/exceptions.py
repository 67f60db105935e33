"""
Custom exception hierarchy for flightfilter.

Every library exception inherits from FlightFilterException and carries a
machine-readable error_code plus a data dict with the offending values, so
callers and tests can assert on them without parsing messages.
"""
from typing import Optional, Any


class FlightFilterException(Exception):
    """
    Base exception for flightfilter.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        data: Optional[dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.data = data or {}
        super().__init__(self.message)


# ==================== CONFIGURATION ====================

class FilterConfigurationError(FlightFilterException):
    """Discovery scope handed to FilterRegistry cannot be used."""

    def __init__(self, scope: Any, reason: str):
        super().__init__(
            message=f"Scope {scope!r} cannot be used for filter discovery: {reason}",
            error_code="FILTER_SCOPE_INVALID",
            data={
                "scope": scope,
                "reason": reason
            }
        )


# ==================== LOOKUP / REGISTRATION ====================

class FilterNotFoundError(FlightFilterException):
    """Requested filter is neither registered nor resolvable."""

    def __init__(self, name: str, scope: Optional[str] = None):
        message = f"Filter '{name}' not found"
        if scope:
            message += f" (scope: {scope})"

        super().__init__(
            message=message,
            error_code="FILTER_NOT_FOUND",
            data={
                "name": name,
                "scope": scope
            }
        )


class FilterNullArgumentError(FlightFilterException):
    """A registration call received None (or a blank name)."""

    def __init__(self, argument: str):
        super().__init__(
            message=f"{argument} cannot be None or blank",
            error_code="FILTER_ARGUMENT_NULL",
            data={"argument": argument}
        )
