import json

import pytest

from hwkit.weather_report import REPORT_FORMAT, WeatherReportError, parse_report


def _answer(**overrides):
    condition = {
        "lang_ru": [{"value": "Ясно"}],
        "weatherDesc": [{"value": "Clear"}],
        "winddirDegree": "180",
        "windspeedKmph": "7",
        "temp_C": "12",
    }
    condition.update(overrides)
    return {
        "nearest_area": [{"areaName": [{"value": "Moscow"}]}],
        "current_condition": [condition],
    }


def test_full_report():
    report = parse_report(json.dumps(_answer()))
    assert report == REPORT_FORMAT.format(
        area="Moscow", descr="Ясно", wind_degree="180", wind_speed="7", temp_c="12"
    )


def test_report_text_shape():
    report = parse_report(json.dumps(_answer()))
    assert report.startswith("Moscow: Ясно, ветер в направлении 180°")
    assert report.endswith("температура 12℃")


def test_accepts_bytes():
    text = json.dumps(_answer(), ensure_ascii=False)
    assert parse_report(text.encode("utf-8")) == parse_report(text)


def test_invalid_json():
    with pytest.raises(WeatherReportError, match="can't parse JSON content"):
        parse_report("{not json")


def test_missing_area():
    answer = _answer()
    del answer["nearest_area"]
    with pytest.raises(WeatherReportError, match="nearest_area"):
        parse_report(json.dumps(answer))


def test_empty_area_list():
    answer = _answer()
    answer["nearest_area"] = []
    with pytest.raises(WeatherReportError, match="1st obj"):
        parse_report(json.dumps(answer))


def test_missing_russian_description():
    answer = _answer()
    del answer["current_condition"][0]["lang_ru"]
    with pytest.raises(WeatherReportError, match="lang_ru"):
        parse_report(json.dumps(answer))


def test_non_string_temperature():
    with pytest.raises(WeatherReportError, match="invalid type of 'temp_C'"):
        parse_report(json.dumps(_answer(temp_C=12)))


def test_missing_wind_speed():
    answer = _answer()
    del answer["current_condition"][0]["windspeedKmph"]
    with pytest.raises(WeatherReportError, match="windspeedKmph"):
        parse_report(json.dumps(answer))


def test_root_not_object():
    with pytest.raises(WeatherReportError, match="nearest_area"):
        parse_report("[1, 2]")