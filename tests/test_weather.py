import json
import urllib.error
from unittest import mock

import pytest

from hwkit.weather import (
    MAX_CITY_LEN,
    WeatherFetchError,
    fetch_report,
    main,
    make_url,
)
from hwkit.weather_report import parse_report

ANSWER = {
    "nearest_area": [{"areaName": [{"value": "Moscow"}]}],
    "current_condition": [
        {
            "lang_ru": [{"value": "Ясно"}],
            "winddirDegree": "180",
            "windspeedKmph": "7",
            "temp_C": "12",
        }
    ],
}
ANSWER_BYTES = json.dumps(ANSWER).encode("utf-8")


class FakeResponse:
    def __init__(self, body, content_type="application/json"):
        self._body = body
        self.headers = {"Content-Type": content_type}

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def read(self, size=-1):
        return self._body if size < 0 else self._body[:size]


def test_make_url():
    assert make_url("Moscow") == "https://wttr.in/Moscow?format=j1"


def test_make_url_length_limit():
    city = "a" * (MAX_CITY_LEN - 1)
    assert make_url(city).endswith(city + "?format=j1")
    with pytest.raises(ValueError):
        make_url("a" * MAX_CITY_LEN)


def test_make_url_custom_limit():
    with pytest.raises(ValueError):
        make_url("abcd", 4)
    assert make_url("abc", 4) == "https://wttr.in/abc?format=j1"


def test_fetch_report_success():
    with mock.patch("urllib.request.urlopen", return_value=FakeResponse(ANSWER_BYTES)) as urlopen:
        report = fetch_report("Moscow")
    assert report == parse_report(ANSWER_BYTES)
    request = urlopen.call_args.args[0]
    assert request.full_url == "https://wttr.in/Moscow?format=j1"
    assert request.get_header("Accept-language") == "ru"


def test_fetch_report_quotes_city():
    with mock.patch("urllib.request.urlopen", return_value=FakeResponse(ANSWER_BYTES)) as urlopen:
        report = fetch_report("New York")
    assert report == parse_report(ANSWER_BYTES)
    assert urlopen.call_args.args[0].full_url == "https://wttr.in/New%20York?format=j1"


def test_fetch_report_wrong_content_type():
    response = FakeResponse(b"<html></html>", content_type="text/html")
    with mock.patch("urllib.request.urlopen", return_value=response):
        with pytest.raises(WeatherFetchError, match="content-type"):
            fetch_report("Moscow")


def test_fetch_report_network_error():
    error = urllib.error.URLError("no route")
    with mock.patch("urllib.request.urlopen", side_effect=error):
        with pytest.raises(WeatherFetchError):
            fetch_report("Moscow")


def test_main_usage(capsys):
    assert main([]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_main_city_too_long(capsys):
    assert main(["a" * MAX_CITY_LEN]) == -1
    assert "can't make url" in capsys.readouterr().err


def test_main_prints_report(capsys):
    with mock.patch("urllib.request.urlopen", return_value=FakeResponse(ANSWER_BYTES)):
        assert main(["Moscow"]) == 0
    assert capsys.readouterr().out.strip() == parse_report(ANSWER_BYTES)


def test_main_parse_error(capsys):
    with mock.patch("urllib.request.urlopen", return_value=FakeResponse(b"{}")):
        assert main(["Moscow"]) == 0
    assert "Error parsing answer" in capsys.readouterr().err


def test_main_network_error(capsys):
    with mock.patch("urllib.request.urlopen", side_effect=urllib.error.URLError("down")):
        assert main(["Moscow"]) == 1
    assert "Error" in capsys.readouterr().err