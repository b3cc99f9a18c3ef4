"""Tests for the command-line entry point."""

import json
from unittest.mock import patch

import pytest

from pr_approval_stats import cli
from pr_approval_stats.errors import ApiError, ConfigError, TransportError
from pr_approval_stats.models import RepoStats

STATS = {
    "https://api.github.com/repos/acme/b": RepoStats(1, 0),
    "https://api.github.com/repos/acme/a": RepoStats(1, 1),
}


@pytest.fixture(autouse=True)
def no_token_env(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GH_TOKEN", raising=False)


class TestMain:
    def test_missing_org_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main([])
        assert exc.value.code == 2
        assert "org" in capsys.readouterr().err

    def test_prints_report(self, capsys):
        with patch.object(cli, "collect_stats", return_value=STATS) as collect:
            assert cli.main(["acme", "--token", "t0k"]) == 0

        settings = collect.call_args.args[0]
        assert settings.org == "acme"
        assert settings.token == "t0k"

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "https://api.github.com/repos/acme/a: 2 total, 1 approved, 1 not approved, rate: 0.50",
            "https://api.github.com/repos/acme/b: 1 total, 1 approved, 0 not approved, rate: 1.00",
            "Total: 3 total, 2 approved, 1 not approved, rate: 0.67",
        ]

    @pytest.mark.parametrize("error", [ApiError(403, "API rate limit exceeded"), TransportError("dns failure")])
    def test_fetch_error_exits_nonzero(self, capsys, error):
        with patch.object(cli, "collect_stats", side_effect=error):
            assert cli.main(["acme"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error:" in captured.err

    def test_invalid_option_is_config_error(self, capsys):
        with patch.object(cli, "collect_stats") as collect:
            assert cli.main(["acme", "--max-concurrency", "0"]) == 2
        collect.assert_not_called()

    def test_org_with_space_is_usage_error(self):
        with patch.object(cli, "collect_stats") as collect:
            assert cli.main(["two words"]) == 2
        collect.assert_not_called()

    def test_config_error_from_pipeline_exits_2(self, capsys):
        with patch.object(cli, "collect_stats", side_effect=ConfigError("bad org")):
            assert cli.main(["acme"]) == 2
        assert "bad org" in capsys.readouterr().err

    def test_json_and_csv_out(self, tmp_path, capsys):
        json_path = tmp_path / "stats.json"
        csv_path = tmp_path / "stats.csv"
        with patch.object(cli, "collect_stats", return_value=STATS):
            assert cli.main(["acme", "--json-out", str(json_path), "--csv-out", str(csv_path)]) == 0
        assert len(json.loads(json_path.read_text(encoding="utf-8"))) == 2
        assert csv_path.read_text(encoding="utf-8").startswith("repository,")

    def test_keyboard_interrupt(self, capsys):
        with patch.object(cli, "collect_stats", side_effect=KeyboardInterrupt):
            assert cli.main(["acme"]) == 130
