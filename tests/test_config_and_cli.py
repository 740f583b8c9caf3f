"""Tests for configuration and the command line entry point."""

import json

from heatpump_monitor import cli
from heatpump_monitor.core.config import DEFAULT_SCRAPE_URL, MonitorConfig


class TestMonitorConfig:

    def test_defaults(self):
        config = MonitorConfig.from_env({})
        assert config.scrape_url == DEFAULT_SCRAPE_URL
        assert config.csv_path == "heat_pumps.csv"
        assert config.manufacturer == "Samsung"
        assert config.top_feature_limit == 5

    def test_environment_overrides(self):
        config = MonitorConfig.from_env({
            "HEATPUMP_SCRAPE_URL": "https://example.test",
            "HEATPUMP_CSV_PATH": "/data/pumps.csv",
            "HEATPUMP_TIMEOUT": "10",
            "HEATPUMP_MAX_RETRIES": "0",
        })
        assert config.scrape_url == "https://example.test"
        assert config.csv_path == "/data/pumps.csv"
        assert config.timeout == 10
        assert config.max_retries == 0


class TestCli:

    def test_summary_prints_json(self, write_csv, capsys, monkeypatch):
        monkeypatch.delenv("HEATPUMP_CSV_PATH", raising=False)
        path = write_csv(
            'Model1,PC1,Samsung,£2999.99,4.5,10,"Feature1,Feature1,Feature2",true,5 years\n'
            'Model2,PC2,Samsung,£3999.99,4.0,15,"Feature1,Feature2",true,7 years\n'
        )

        assert cli.main(["summary", "--csv", str(path), "--top", "1"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["totalProducts"] == 2
        assert output["averagePrice"] == 3499.99
        assert output["topFeatures"] == {"Feature1": 3}
        assert output["manufacturerCount"] == {"Samsung": 2}
        assert "generatedAt" in output

    def test_summary_missing_file(self, tmp_path, capsys):
        assert cli.main(["summary", "--csv", str(tmp_path / "missing.csv")]) == 1
        assert "Error" in capsys.readouterr().err

    def test_scrape_uses_monitor(self, tmp_path, sample_html, capsys, monkeypatch):
        from conftest import StubFetcher

        csv_path = tmp_path / "out.csv"
        monkeypatch.setattr(cli, "HeatPumpMonitor", _monitor_with(StubFetcher(html=sample_html)))

        assert cli.main(["scrape", "--csv", str(csv_path), "--url", "https://example.test"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["success"] is True
        assert output["count"] == 1
        assert csv_path.exists()


def _monitor_with(fetcher):
    from heatpump_monitor.core.monitor import HeatPumpMonitor

    def factory(config, log_level):
        return HeatPumpMonitor(config=config, fetcher=fetcher, log_level=log_level)
    return factory


class TestCliErrors:

    def test_bad_environment_value(self, tmp_path, capsys, monkeypatch):
        monkeypatch.setenv("HEATPUMP_TIMEOUT", "soon")

        assert cli.main(["summary", "--csv", str(tmp_path / "history.csv")]) == 1
        assert "Error" in capsys.readouterr().err

    def test_corrupt_table(self, write_csv, capsys):
        path = write_csv("M,PC,Samsung,1,4,1," + "x" * 200000 + ",True,g\n")

        assert cli.main(["summary", "--csv", str(path)]) == 1
        assert "Error" in capsys.readouterr().err

    def test_renamed_column(self, tmp_path, capsys):
        path = tmp_path / "renamed.csv"
        path.write_text("Model,ProductCode,Manufacturer,Price\nM,PC,Samsung,1\n", encoding="utf-8")

        assert cli.main(["summary", "--csv", str(path)]) == 1
        assert "missing columns" in capsys.readouterr().err
