"""Parse delimited weather lines into WeatherData observations."""
import datetime
import logging
import re
from enum import Enum
from typing import Iterable, List, Optional

from weather_data import WeatherData

DELIMITER = ","
REQUIRED_FIELDS = 4  # date, temperature, humidity, precipitation

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


class ParseErrorKind(Enum):
    MALFORMED_DATE = "malformed date"
    MALFORMED_NUMBER = "malformed number"
    MISSING_FIELD = "missing field"


class ParseError(ValueError):
    """Raised when a data line does not match the expected layout."""

    def __init__(self, kind: ParseErrorKind, line: str, detail: str = "", line_number: Optional[int] = None):
        self.kind = kind
        self.line = line
        self.detail = detail
        self.line_number = line_number
        super().__init__(str(self))

    def __str__(self) -> str:
        where = f"line {self.line_number}" if self.line_number is not None else "line"
        msg = f"{where}: {self.kind.value} in {self.line!r}"
        if self.detail:
            msg += f" ({self.detail})"
        return msg


def _parse_date(text: str, line: str) -> datetime.date:
    if not _ISO_DATE.fullmatch(text):
        raise ParseError(ParseErrorKind.MALFORMED_DATE, line, f"expected YYYY-MM-DD, got {text!r}")
    try:
        return datetime.date.fromisoformat(text)
    except ValueError as e:
        raise ParseError(ParseErrorKind.MALFORMED_DATE, line, str(e)) from e


def _parse_number(text: str, name: str, line: str) -> float:
    # float() alone also takes nan, inf, underscores and non-ASCII digits
    if not _DECIMAL.fullmatch(text.strip()):
        raise ParseError(ParseErrorKind.MALFORMED_NUMBER, line, f"{name}={text!r}")
    try:
        return float(text)
    except ValueError as e:
        raise ParseError(ParseErrorKind.MALFORMED_NUMBER, line, f"{name}={text!r}") from e


def parse_line(line: str) -> WeatherData:
    """
    Parse one ``date,temperature,humidity,precipitation[,windSpeed]`` line.

    No quoting or escaping is supported. A missing or empty wind speed
    defaults to 0.0; columns past the fifth are ignored.

    Raises:
        ParseError: If the line is short, or a field does not parse
    """
    line = line.rstrip("\r\n")
    parts = line.split(DELIMITER)
    # Trailing empty columns count as absent.
    while parts and parts[-1] == "":
        parts.pop()
    if len(parts) < REQUIRED_FIELDS:
        raise ParseError(
            ParseErrorKind.MISSING_FIELD,
            line,
            f"expected at least {REQUIRED_FIELDS} fields, got {len(parts)}",
        )

    return WeatherData(
        date=_parse_date(parts[0], line),
        temperature=_parse_number(parts[1], "temperature", line),
        humidity=_parse_number(parts[2], "humidity", line),
        precipitation=_parse_number(parts[3], "precipitation", line),
        wind_speed=_parse_number(parts[4], "wind_speed", line) if len(parts) > 4 else 0.0,
    )


def parse_lines(lines: Iterable[str]) -> List[WeatherData]:
    """
    Parse a whole source, skipping the first line as the header.

    The first malformed line aborts the parse; nothing is skipped.

    Raises:
        ParseError: With ``line_number`` set to the 1-based position in the source
    """
    observations = []
    for line_number, line in enumerate(lines, start=1):
        if line_number == 1:
            logging.debug(f"Skipping header: {line.rstrip()!r}")
            continue
        try:
            observations.append(parse_line(line))
        except ParseError as e:
            e.line_number = line_number
            logging.debug(f"Failed to parse weather data: {e}")
            raise
    logging.info(f"Parsed {len(observations)} weather observations")
    return observations
