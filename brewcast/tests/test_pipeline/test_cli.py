"""Tests for the CLI entry point."""

from pathlib import Path
from unittest.mock import patch

from brewcast.cli import main
from brewcast.errors import NotFoundError


class TestCLI:
    def test_success_returns_0(self, tmp_path: Path):
        with patch("brewcast.cli.SearchPipeline") as pipeline_cls:
            pipeline_cls.return_value.run.return_value = tmp_path / "resultsPage.html"
            assert main([]) == 0

    def test_error_message_printed(self, capsys):
        with patch("brewcast.cli.SearchPipeline") as pipeline_cls:
            pipeline_cls.return_value.run.side_effect = NotFoundError(
                "State code not found for 'Atlantis'"
            )
            assert main([]) == 1
        captured = capsys.readouterr()
        assert "State code not found" in captured.out

    def test_page_not_written_returns_1(self):
        with patch("brewcast.cli.SearchPipeline") as pipeline_cls:
            pipeline_cls.return_value.run.return_value = None
            assert main([]) == 1

    def test_overrides_reach_config(self, tmp_path: Path):
        out = str(tmp_path / "page.html")
        with patch("brewcast.cli.SearchPipeline") as pipeline_cls:
            pipeline_cls.return_value.run.return_value = Path(out)
            main(["--locale", "fr-fr", "--output", out])
        config = pipeline_cls.call_args.args[0]
        assert config.output.locale == "fr-fr"
        assert config.output.results_page == out

    def test_config_file(self, config_yaml_path: Path):
        with patch("brewcast.cli.SearchPipeline") as pipeline_cls:
            pipeline_cls.return_value.run.return_value = Path("x.html")
            assert main(["--config", str(config_yaml_path)]) == 0
        config = pipeline_cls.call_args.args[0]
        assert config.output.forecast_days == 3

    def test_missing_config_file(self, tmp_path: Path, capsys):
        assert main(["--config", str(tmp_path / "nope.yaml")]) == 1
        assert "Config error" in capsys.readouterr().out

    def test_bad_locale(self, capsys):
        assert main(["--locale", "xx-zz"]) == 1
        assert "unknown locale" in capsys.readouterr().out
