"""Unit tests for Highcharts options rendering."""

from __future__ import annotations

import json
from dataclasses import replace

import pytest

from core.charting.configs import BASE_CHART_CONFIG, build_y_axis
from core.charting.render import render_chart_options, render_chart_payload

pytestmark = pytest.mark.unit


def test_render_chart_options_matches_highcharts_shape() -> None:
    options = render_chart_options(BASE_CHART_CONFIG)

    assert options["chart"] == {"width": 800, "height": 600}
    assert options["title"] == {"text": "Logarithmic Axis Demo"}
    assert options["subtitle"] == {"text": "Demo of a logarithmic axis in Highcharts"}
    assert options["plotOptions"] == {"line": {"dataLabels": {"enabled": True}}}
    assert options["yAxis"] == {
        "type": "logarithmic",
        "title": {"text": "commits"},
        "tickInterval": 1,
        "gridLineWidth": 1,
        "opposite": True,
        "min": 1,
        "max": 100_000,
    }
    assert options["xAxis"] == {
        "title": {"text": "Weeks"},
        "tickInterval": 1,
        "plotBands": [{"label": {"text": "Team A"}, "color": "orange", "from": 3, "to": 6}],
        "plotLines": [{"color": "brown", "value": 7, "width": 20}],
    }


def test_render_chart_options_series() -> None:
    series = render_chart_options(BASE_CHART_CONFIG)["series"]

    assert series[0]["name"] == "Customer Services"
    assert series[0]["dashStyle"] == "ShortDot"
    assert series[0]["zones"][0] == {"value": 5, "color": "#f7a35c"}
    assert series[0]["data"][:3] == [[1, 1], [2, 2], [3, 4]]
    assert series[2] == {"name": "Check Point", "type": "line", "data": [[15, 85_000]], "color": "goldenrod"}
    assert "zones" not in series[1]


def test_render_omits_tick_interval_on_linear_axis() -> None:
    config = replace(BASE_CHART_CONFIG, y_axis=build_y_axis("linear", 2))

    y_axis = render_chart_options(config)["yAxis"]

    assert y_axis["type"] == "linear"
    assert "tickInterval" not in y_axis
    assert (y_axis["min"], y_axis["max"]) == (1, 100_000)


def test_render_returns_fresh_trees() -> None:
    first = render_chart_options(BASE_CHART_CONFIG)
    second = render_chart_options(BASE_CHART_CONFIG)

    first["yAxis"]["type"] = "linear"

    assert first is not second
    assert second["yAxis"]["type"] == "logarithmic"


def test_render_chart_payload_labels_every_week() -> None:
    payload = render_chart_payload(BASE_CHART_CONFIG)

    labels = payload["xAxisLabels"]
    assert list(labels) == [str(week) for week in range(1, 17)]
    assert labels["1"] == "1st Wk"
    assert labels["2"] == "2nd Wk"
    assert labels["3"] == "3th Wk"
    assert labels["11"] == "11th Wk"
    json.dumps(payload)
