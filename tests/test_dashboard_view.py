"""Django integration tests for the demo page and options endpoint."""

from __future__ import annotations

import json
import logging

import pytest
from django.urls import reverse

pytestmark = pytest.mark.integration


def _payload(response) -> dict:
    return response.context["chart_payload"]


def test_dashboard_renders_default_logarithmic_chart(client) -> None:
    response = client.get(reverse("core:dashboard"))

    assert response.status_code == 200
    options = _payload(response)["options"]
    assert options["yAxis"]["type"] == "logarithmic"
    assert options["yAxis"]["tickInterval"] == 1
    content = response.content.decode("utf-8")
    assert 'id="chart-payload"' in content
    assert 'name="tick_interval"' in content
    assert "code.highcharts.com" in content


def test_dashboard_applies_tick_interval(client) -> None:
    response = client.get(reverse("core:dashboard"), {"tick_interval": "0.2"})

    assert response.status_code == 200
    y_axis = _payload(response)["options"]["yAxis"]
    assert y_axis["tickInterval"] == 0.2
    assert (y_axis["min"], y_axis["max"], y_axis["gridLineWidth"]) == (1, 100_000, 1)


def test_dashboard_hides_tick_interval_selector_on_linear_axis(client) -> None:
    response = client.get(reverse("core:dashboard"), {"axis_type": "linear", "tick_interval": "5"})

    assert response.status_code == 200
    assert 'name="tick_interval"' not in response.content.decode("utf-8")
    y_axis = _payload(response)["options"]["yAxis"]
    assert y_axis["type"] == "linear"
    assert "tickInterval" not in y_axis


def test_dashboard_rejects_unknown_axis_type(client, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="core.views"):
        response = client.get(reverse("core:dashboard"), {"axis_type": "radial"})

    assert response.status_code == 400
    assert "Rejected axis_type='radial'" in caplog.text


def test_dashboard_rejects_non_numeric_tick_interval(client) -> None:
    response = client.get(reverse("core:dashboard"), {"tick_interval": "often"})

    assert response.status_code == 400


def test_dashboard_only_accepts_get(client) -> None:
    response = client.post(reverse("core:dashboard"), {"axis_type": "linear"})

    assert response.status_code == 405


def test_chart_options_endpoint_returns_payload(client) -> None:
    response = client.get(reverse("core:chart_options"), {"axis_type": "logarithmic", "tick_interval": "3"})

    assert response.status_code == 200
    body = json.loads(response.content)
    assert body["axisType"] == "logarithmic"
    assert body["tickInterval"] == 3.0
    assert body["controls"] == ["axis_type", "tick_interval"]
    assert body["payload"]["options"]["yAxis"]["tickInterval"] == 3.0
    assert body["payload"]["xAxisLabels"]["3"] == "3th Wk"


def test_chart_options_endpoint_lists_only_axis_type_on_linear_axis(client) -> None:
    response = client.get(reverse("core:chart_options"), {"axis_type": "linear"})

    body = json.loads(response.content)
    assert body["controls"] == ["axis_type"]
    assert body["tickInterval"] == 1


@pytest.mark.parametrize("tick_interval", ["inf", "1e400", "nan"])
def test_chart_options_rejects_non_finite_tick_interval(client, tick_interval: str) -> None:
    """Values that would serialize as bare Infinity/NaN never reach the payload."""

    response = client.get(reverse("core:chart_options"), {"tick_interval": tick_interval})

    assert response.status_code == 400


@pytest.mark.parametrize("tick_interval", ["0.0000001", "0.25", "10"])
def test_dashboard_rejects_tick_interval_outside_the_offered_options(client, tick_interval: str) -> None:
    response = client.get(reverse("core:dashboard"), {"tick_interval": tick_interval})

    assert response.status_code == 400


def test_chart_options_payload_is_strict_json(client) -> None:
    response = client.get(reverse("core:chart_options"), {"tick_interval": "0.5"})

    def _reject_constant(token: str) -> None:
        raise ValueError(token)

    body = json.loads(response.content, parse_constant=_reject_constant)
    assert body["payload"]["options"]["yAxis"]["tickInterval"] == 0.5
