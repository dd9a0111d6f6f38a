from __future__ import annotations

import json
from pathlib import Path

import pytest

from envelope_coverage import InvalidRange, InvalidRectangle, Rectangle, TargetRegion, check_region
from envelope_coverage.data.io_utils import load_query, parse_bounds, parse_query, parse_target


def test_parse_query_camel_case(cameras) -> None:
    payload = {
        "target": {"distanceMin": 0, "distanceMax": 20, "lightMin": 0, "lightMax": 10},
        "rectangles": cameras,
    }
    target, rects = parse_query(payload)
    assert target == TargetRegion(0, 20, 0, 10)
    assert rects[0] == Rectangle(0, 10, 0, 5)
    assert check_region(target, rects) is True


def test_parse_query_snake_case_and_missing_rectangles() -> None:
    target, rects = parse_query(
        {"target": {"distance_min": 1, "distance_max": 2, "light_min": 3, "light_max": 4}}
    )
    assert target == TargetRegion(1, 2, 3, 4)
    assert rects == []


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"rectangles": []},
        {"target": {"distanceMin": 0}},
        {"target": [0, 1, 0, 1]},
        {"target": {"distanceMin": 0, "distanceMax": 1, "lightMin": 0, "lightMax": 1}, "rectangles": {}},
    ],
)
def test_parse_query_rejects_malformed_payloads(payload) -> None:
    with pytest.raises(ValueError):
        parse_query(payload)


def test_parse_query_propagates_domain_errors() -> None:
    with pytest.raises(InvalidRange):
        parse_target({"distanceMin": 5, "distanceMax": 1, "lightMin": 0, "lightMax": 1})
    with pytest.raises(InvalidRectangle):
        parse_query(
            {
                "target": {"distanceMin": 0, "distanceMax": 1, "lightMin": 0, "lightMax": 1},
                "rectangles": [{"dMin": 0, "dMax": 1, "lMin": 2, "lMax": 1}],
            }
        )


def test_load_query_reads_json(tmp_path: Path, cameras) -> None:
    path = tmp_path / "query.json"
    payload = {
        "target": {"distanceMin": 8, "distanceMax": 50, "lightMin": 0, "lightMax": 10},
        "rectangles": cameras,
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    target, rects = load_query(path)
    assert len(rects) == 3
    assert check_region(target, rects) is False


def test_parse_bounds() -> None:
    assert parse_bounds("0, 10,0,5") == (0, 10, 0, 5)
    assert parse_bounds("0,2.5,1,1") == (0, 2.5, 1, 1)
    assert isinstance(parse_bounds("1,2,3,4")[0], int)
    with pytest.raises(ValueError):
        parse_bounds("1,2,3")
    with pytest.raises(ValueError):
        parse_bounds("1,2,x,4")


@pytest.mark.parametrize("value", ["1,,2,3,4", "1,2,3,", ",1,2,3", "1, ,2,3", ""])
def test_parse_bounds_rejects_empty_parts(value: str) -> None:
    with pytest.raises(ValueError):
        parse_bounds(value)
