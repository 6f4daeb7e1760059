"""Turn a wttr.in JSON answer into a one-line weather report."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from hwkit.jsoncodec import JsonDecodeError, decode
from hwkit.jsonnode import JsonCheckError, JsonNode, JsonTag

REPORT_FORMAT = (
    "{area}: {descr}, ветер в направлении {wind_degree}° "
    "со скростью {wind_speed} км/ч, температура {temp_c}℃"
)

# One step of a lookup: a member name or an array index, and the message
# reported when the step finds nothing.
_Step = tuple[Union[str, int], str]


class WeatherReportError(ValueError):
    """The answer is not JSON or lacks a field the report needs."""


def _lookup(root: JsonNode, steps: Sequence[_Step], type_error: str) -> str:
    node: JsonNode | None = root
    for step, message in steps:
        if isinstance(step, int):
            node = node.find_element(step)
        else:
            node = node.find_member(step)
        if node is None:
            raise WeatherReportError(message)
    if node.tag != JsonTag.STRING:
        raise WeatherReportError(type_error)
    return node.value  # type: ignore[return-value]


def _current_condition(field: str) -> list[_Step]:
    return [
        ("current_condition", "can't find 'current_condition'"),
        (0, "can't find 1st obj in 'current_condition'"),
        (field, f"can't find '{field}'"),
    ]


def _find_area(root: JsonNode) -> str:
    return _lookup(
        root,
        [
            ("nearest_area", "can't find 'nearest_area'"),
            (0, "can't find 1st obj in 'neares_area'"),
            ("areaName", "can't find 'areaName'"),
            (0, "can't find 1st obj in 'areaName'"),
            ("value", "can't 'value' in 1st obj in 'areaName'"),
        ],
        "invalid type of 'value' in 'areaName'",
    )


def _find_descr(root: JsonNode, lang: str | None) -> str:
    name = lang or "weatherDesc"
    return _lookup(
        root,
        _current_condition(name)
        + [
            (0, "can't find 1st obj in 'weatherDesc'"),
            ("value", "can't 'value' in 1st obj in 'weatherDesc'"),
        ],
        "invalid type of 'value' in 'weatherDesc'",
    )


def _find_condition_field(root: JsonNode, field: str) -> str:
    return _lookup(root, _current_condition(field), f"invalid type of '{field}'")


def parse_report(json_text: str | bytes) -> str:
    """Build the Russian weather report line from a ``format=j1`` answer.

    Raises WeatherReportError when the text is not JSON or a field is missing
    or is not a string.
    """
    try:
        root = decode(json_text)
    except JsonDecodeError as exc:
        raise WeatherReportError("can't parse JSON content") from exc
    try:
        root.check()
    except JsonCheckError as exc:
        raise WeatherReportError(str(exc)) from exc

    area = _find_area(root)
    descr = _find_descr(root, "lang_ru")
    wind_degree = _find_condition_field(root, "winddirDegree")
    wind_speed = _find_condition_field(root, "windspeedKmph")
    temp_c = _find_condition_field(root, "temp_C")
    return REPORT_FORMAT.format(
        area=area,
        descr=descr,
        wind_degree=wind_degree,
        wind_speed=wind_speed,
        temp_c=temp_c,
    )