"""Tests for the CSV weather source."""
import pytest
from csv_weather_source import CsvWeatherSource
from observation_parser import ParseError
from sample_data import SAMPLE_LINES, create_sample_data
from weather_source import WeatherSourceBase, WeatherSourceError


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "weatherdata.csv"
    create_sample_data(str(path))
    return path


def test_csv_source_is_weather_source(sample_file):
    assert isinstance(CsvWeatherSource(str(sample_file)), WeatherSourceBase)


def test_read_lines_keeps_file_order(sample_file):
    assert CsvWeatherSource(str(sample_file)).read_lines() == SAMPLE_LINES


def test_load_parses_sample(sample_file):
    observations = CsvWeatherSource(str(sample_file)).load()
    assert len(observations) == 17
    assert str(observations[0].date) == "2023-01-01"


def test_missing_file_raises_source_error(tmp_path):
    source = CsvWeatherSource(str(tmp_path / "nope.csv"))
    with pytest.raises(WeatherSourceError) as exc_info:
        source.load()
    assert isinstance(exc_info.value, IOError)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_directory_raises_source_error(tmp_path):
    with pytest.raises(WeatherSourceError):
        CsvWeatherSource(str(tmp_path)).read_lines()


def test_malformed_file_raises_parse_error(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("date,temperature,humidity,precipitation\n2023-01-01,5,5\n")
    with pytest.raises(ParseError):
        CsvWeatherSource(str(path)).load()


def test_windows_line_endings(tmp_path):
    path = tmp_path / "crlf.csv"
    path.write_bytes(b"date,temperature,humidity,precipitation\r\n2023-01-01,5.5,80.0,2.1\r\n")
    observations = CsvWeatherSource(str(path)).load()
    assert observations[0].precipitation == 2.1


def test_create_sample_data_writes_all_lines(tmp_path):
    path = tmp_path / "sample.csv"
    create_sample_data(str(path))
    assert path.read_text().splitlines() == SAMPLE_LINES
    assert len(SAMPLE_LINES) == 18  # header + 17 days
