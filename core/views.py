"""Views for the logarithmic axis demo page."""

from __future__ import annotations

import logging

from django.conf import settings
from django.core.exceptions import SuspiciousOperation
from django.http import HttpRequest, HttpResponse, JsonResponse, QueryDict
from django.shortcuts import render
from django.views.decorators.http import require_GET

from core.charting.render import ChartPayload, render_chart_payload
from core.charting.schema import ChartConfig
from core.controls import Selector, build_control_panel
from core.forms import AxisControlForm
from core.shell import ChartShell

logger = logging.getLogger(__name__)


@require_GET
def dashboard(request: HttpRequest) -> HttpResponse:
    """Render the demo chart with the axis controls selected in the query string."""

    shell, payloads = _shell_from_query(request.GET)
    panel = _control_panel(shell)
    context = {
        "control_form": AxisControlForm(panel=panel),
        "chart_payload": payloads[-1],
        "axis_type": shell.state.axis_type,
        "highcharts_url": settings.HIGHCHARTS_CDN_URL,
    }
    return render(request, "core/dashboard.html", context)


@require_GET
def chart_options(request: HttpRequest) -> JsonResponse:
    """Return the chart payload for the query-string selections as JSON."""

    shell, payloads = _shell_from_query(request.GET)
    return JsonResponse(
        {
            "axisType": shell.state.axis_type,
            "tickInterval": shell.state.tick_interval,
            "controls": [selector.key for selector in _control_panel(shell)],
            "payload": payloads[-1],
        }
    )


def _shell_from_query(query: QueryDict) -> tuple[ChartShell, list[ChartPayload]]:
    """Replay query-string selections through the control panel.

    The axis type is applied first; the tick interval is only applied when its
    selector is present afterwards (i.e. on a logarithmic axis).

    Returns:
        The shell and every payload it rendered, oldest first.

    Raises:
        SuspiciousOperation: If a submitted value is rejected by its selector.
    """

    payloads: list[ChartPayload] = []

    def renderer(config: ChartConfig) -> None:
        payloads.append(render_chart_payload(config))

    shell = ChartShell(renderer=renderer)
    for key in ("axis_type", "tick_interval"):
        raw = query.get(key)
        if raw is None:
            continue
        selector = _selector_for(shell, key)
        if selector is None:
            continue
        try:
            selector.handle_change(raw)
        except ValueError as exc:
            logger.warning("Rejected %s=%r: %s", key, raw, exc)
            raise SuspiciousOperation(f"Invalid {key}: {raw!r}") from exc
    return shell, payloads


def _control_panel(shell: ChartShell) -> tuple[Selector, ...]:
    return build_control_panel(
        shell.state,
        on_axis_type=shell.update_axis_type,
        on_tick_interval=shell.update_tick_interval,
    )


def _selector_for(shell: ChartShell, key: str) -> Selector | None:
    for selector in _control_panel(shell):
        if selector.key == key:
            return selector
    return None
