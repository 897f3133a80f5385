"""Tests for the command-line driver."""
import logging
from unittest.mock import patch

import pytest
import main
from sample_data import create_sample_data


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    """Keep a developer's .env and environment out of the tests."""
    monkeypatch.delenv("WEATHER_DATA_FILE", raising=False)
    monkeypatch.delenv("WEATHER_THRESHOLD", raising=False)
    with patch("main.load_dotenv"), patch("main.signal.signal"), patch("main.setup_logging"):
        yield


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "weatherdata.csv"
    create_sample_data(str(path))
    return path


class TestLoadConfig:
    """Configuration from CLI flags and environment."""

    def test_defaults(self):
        data_file, threshold = main.load_config(main.parse_args([]))
        assert data_file == main.DEFAULT_DATA_FILE
        assert threshold == 25.0

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("WEATHER_DATA_FILE", "/data/other.csv")
        monkeypatch.setenv("WEATHER_THRESHOLD", "30")
        assert main.load_config(main.parse_args([])) == ("/data/other.csv", 30.0)

    def test_flags_override_environment(self, monkeypatch):
        monkeypatch.setenv("WEATHER_DATA_FILE", "/data/other.csv")
        monkeypatch.setenv("WEATHER_THRESHOLD", "30")
        args = main.parse_args(["--data-file", "mine.csv", "--threshold", "12.5"])
        assert main.load_config(args) == ("mine.csv", 12.5)

    def test_invalid_threshold(self, monkeypatch):
        monkeypatch.setenv("WEATHER_THRESHOLD", "hot")
        with pytest.raises(SystemExit):
            main.load_config(main.parse_args([]))


def test_run_in_worker_uses_separate_thread():
    import threading

    seen = []
    main.run_in_worker(lambda: seen.append(threading.current_thread().name))
    assert seen == ["weather-analysis"]


class TestMain:
    """End-to-end runs of the driver."""

    def test_sample_report(self, sample_file, capsys):
        assert main.main(["--data-file", str(sample_file)]) == main.EXIT_OK

        out = capsys.readouterr().out
        assert "Total records: 17" in out
        assert "Date range: 2023-01-01 to 2023-12-01" in out
        assert "Average Temperature: 16.65°C" in out
        assert "Rainy Days: 9" in out
        assert " - January: 4.5°C" in out
        assert " - December: 7.2°C" in out
        assert "Days with temperature above 25.0°C: 5" in out
        assert out.index("Days with temperature above") < out.index("Monthly Weather Report")
        assert "December:\n  Average Temperature: 7.2°C\n  Rainy Days: 1\n  Dominant Weather: Cool\n" in out

    def test_create_sample(self, tmp_path, capsys):
        path = tmp_path / "fresh.csv"
        assert main.main(["--data-file", str(path), "--create-sample"]) == main.EXIT_OK
        assert path.exists()
        assert "Total records: 17" in capsys.readouterr().out

    def test_missing_file_logs_error(self, tmp_path, capsys, caplog):
        with caplog.at_level(logging.ERROR):
            code = main.main(["--data-file", str(tmp_path / "missing.csv")])

        assert code == main.EXIT_OK
        assert capsys.readouterr().out == ""
        assert "Error analyzing weather data" in caplog.text
        assert len([r for r in caplog.records if r.levelno >= logging.ERROR]) == 1

    def test_malformed_file_prints_no_report(self, tmp_path, capsys, caplog):
        path = tmp_path / "bad.csv"
        path.write_text("date,temperature,humidity,precipitation\n2023-01-01,5,5,5\nnot-a-date,5,5,5\n")

        with caplog.at_level(logging.ERROR):
            main.main(["--data-file", str(path)])

        assert capsys.readouterr().out == ""
        assert "malformed date" in caplog.text
        assert len([r for r in caplog.records if r.levelno >= logging.ERROR]) == 1

    def test_interrupt_is_a_warning(self, sample_file, caplog):
        with patch("main.run_in_worker", side_effect=KeyboardInterrupt), caplog.at_level(logging.WARNING):
            code = main.main(["--data-file", str(sample_file)])

        assert code == main.EXIT_INTERRUPTED
        assert "Analysis interrupted" in caplog.text


def test_run_analysis_logs_source_error_once(tmp_path, caplog):
    from csv_weather_source import CsvWeatherSource
    from weather_service import WeatherAnalysisService

    service = WeatherAnalysisService(CsvWeatherSource(str(tmp_path / "missing.csv")))
    with caplog.at_level(logging.DEBUG):
        assert main.run_analysis(service) is None

    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert errors[0].getMessage().startswith("Error analyzing weather data")
