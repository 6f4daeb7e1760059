"""Fetch the current weather for a city from wttr.in and print it."""

from __future__ import annotations

import sys
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Sequence

from hwkit.weather_report import WeatherReportError, parse_report

CONNECT_TIMEOUT = 5  # seconds
MAX_CITY_LEN = 2048
MAX_BODY_SIZE = 5 * 1024 * 1024
URL_BEGIN = "https://wttr.in/"
URL_END = "?format=j1"
USER_AGENT = "weather-agent/1.0"
EXPECTED_CONTENT_TYPE = "application/json"


class WeatherFetchError(RuntimeError):
    """The weather service could not be reached or gave an unusable answer."""


def make_url(city: str, max_city_len: int = MAX_CITY_LEN) -> str:
    """Return the service URL for ``city``.

    Raises ValueError when the city takes ``max_city_len`` bytes or more.
    """
    if len(city.encode("utf-8")) >= max_city_len:
        raise ValueError("city name is too long")
    return URL_BEGIN + city + URL_END


def fetch_report(city: str, timeout: float = CONNECT_TIMEOUT) -> str:
    """Download the weather for ``city`` and return the report line."""
    url = urllib.parse.quote(make_url(city), safe=":/?=&%")
    request = urllib.request.Request(
        url,
        headers={"User-Agent": USER_AGENT, "Accept-Language": "ru"},
    )
    try:
        try:
            response = urllib.request.urlopen(request, timeout=timeout)
        except urllib.error.HTTPError as exc:
            response = exc
        with response:
            content_type = response.headers.get("Content-Type")
            body = response.read(MAX_BODY_SIZE)
    except OSError as exc:
        raise WeatherFetchError(str(exc)) from exc

    if len(body) >= MAX_BODY_SIZE:
        raise WeatherFetchError("answer is too large")
    if content_type != EXPECTED_CONTENT_TYPE:
        raise WeatherFetchError("unexpected content-type")
    return parse_report(body)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the current weather for the city given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: weather <city_string>")
        return 0

    city = args[0]
    try:
        make_url(city)
    except ValueError:
        print("Error: can't make url", file=sys.stderr)
        return -1

    try:
        report = fetch_report(city)
    except WeatherReportError as exc:
        print(f"Error parsing answer: {exc}", file=sys.stderr)
        return 0
    except WeatherFetchError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(report)
    return 0