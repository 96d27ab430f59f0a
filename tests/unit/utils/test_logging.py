"""Test structlog setup."""
import json
import structlog
from locale_number_parser.utils.logging import get_logger, setup_logging


class TestSetupLogging:
    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_output(self, capsys):
        setup_logging("INFO")
        get_logger("test").info("number_parsed", value=1.5)
        record = json.loads(capsys.readouterr().out.strip())
        assert record["event"] == "number_parsed"
        assert record["level"] == "info"
        assert record["value"] == 1.5

    def test_level_filters_debug(self, capsys):
        setup_logging("warning")
        get_logger("test").debug("hidden")
        assert capsys.readouterr().out == ""

    def test_unknown_level_falls_back_to_info(self, capsys):
        setup_logging("LOUD")
        logger = get_logger("test")
        logger.debug("hidden")
        logger.info("shown")
        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_console_output(self, capsys):
        setup_logging("INFO", json_output=False)
        get_logger("test").info("number_parsed")
        assert "number_parsed" in capsys.readouterr().out
