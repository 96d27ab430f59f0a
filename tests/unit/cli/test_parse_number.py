"""Test the parse_number command-line script."""
import structlog
from scripts.parse_number import main


class TestParseNumberScript:
    def teardown_method(self):
        structlog.reset_defaults()

    def test_prints_results(self, capsys):
        assert main(["1.234,56", "42"]) == 0
        out = capsys.readouterr().out
        assert "'1.234,56' -> 1234.56" in out
        assert "'42' -> 42" in out

    def test_unresolved_exit_status(self, capsys):
        assert main(["abc"]) == 1
        assert "'abc' -> None" in capsys.readouterr().out

    def test_prefer_locale_flag(self, capsys):
        assert main(["--prefer-locale", "--lang", "de", "--region", "DE", "1.234"]) == 0
        assert "'1.234' -> 1234" in capsys.readouterr().out
