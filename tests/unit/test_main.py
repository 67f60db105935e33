"""
Unit tests for the flightfilter CLI.
"""
import logging
from unittest.mock import patch

from flightfilter.main import build_parser, main
from tests.fixtures.flights import PLUGINS_DIR

COMMON_FILTERS = "flightfilter.services.filters.common_filters"


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.scope is None
        assert args.register == []
        assert args.combined is False

    def test_register_is_repeatable(self):
        args = build_parser().parse_args(["--register", "A", "--register", "B"])
        assert args.register == ["A", "B"]


class TestMain:

    def test_default_run_prints_one_block_per_builtin_filter(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out

        assert "Filter: SegmentOrderFilter" in out
        assert "Filter: NotYetDepartedFilter" in out
        assert "Filter: GroundTimeLimitFilter\n" in out
        assert "Filtered out: 2" in out

    def test_logs_through_package_logger_factory(self):
        with patch("flightfilter.main.get_logger", wraps=logging.getLogger) as mock_get_logger:
            assert main([]) == 0
        mock_get_logger.assert_called_once_with("flightfilter.main")

    def test_combined(self, capsys):
        assert main(["--combined"]) == 0
        assert "Passing every filter (2/6):" in capsys.readouterr().out

    def test_directory_scope_with_manual_registration(self, capsys):
        code = main([
            "--scope", str(PLUGINS_DIR),
            "--register", f"{COMMON_FILTERS}.GroundTimeLimitFilter",
        ])
        out = capsys.readouterr().out

        assert code == 0
        assert "Filter: GoodPluginFilter" in out
        assert "Filter: GroundTimeLimitFilter" in out
        assert "Filter: NotYetDepartedFilter" not in out

    def test_invalid_scope_exits_with_error(self, caplog):
        assert main(["--scope", "/no/such/filter/dir"]) == 1
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "directory does not exist" in errors[0].getMessage()

    def test_unknown_filter_name_is_reported_once(self, caplog, capsys):
        assert main(["--register", "BarFilter"]) == 1

        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "Filter 'BarFilter' not found" in errors[0].getMessage()
        assert "BarFilter" not in capsys.readouterr().err
