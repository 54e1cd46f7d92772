"""Forms for the demo page."""

from __future__ import annotations

from django import forms
from django.utils.html import format_html

from core.controls import Selector, TickIntervalSelector, format_option


class AxisControlForm(forms.Form):
    """Render the axis control panel as `<select>` elements.

    Fields are built from the selectors returned by `build_control_panel`, so
    a field only exists when its selector is part of the panel.
    """

    def __init__(self, *args, **kwargs) -> None:
        """Initialize fields from the selectors currently presented."""

        panel: tuple[Selector, ...] = kwargs.pop("panel")
        super().__init__(*args, **kwargs)
        for selector in panel:
            self.fields[selector.key] = _select_field(selector)
            self.initial[selector.key] = format_option(selector.selected)

    @property
    def has_tick_interval(self) -> bool:
        return TickIntervalSelector.key in self.fields


def _select_field(selector: Selector) -> forms.ChoiceField:
    """Build a ChoiceField that submits the form whenever it changes."""

    return forms.ChoiceField(
        choices=selector.choices(),
        label=selector.label,
        help_text=format_html('<a href="{}" target="_blank">{}</a>', selector.doc_url, _doc_name(selector)),
        widget=forms.Select(attrs={"onchange": "this.form.submit()"}),
    )


def _doc_name(selector: Selector) -> str:
    """Return the Highcharts option path documented at `doc_url`."""

    return selector.doc_url.rsplit("/", 1)[-1]
