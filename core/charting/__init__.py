"""Declarative chart configuration and rendering helpers.

The demo chart is driven by a `ChartConfig` value rather than bespoke view
logic. This package contains the schema, the built-in config, validation and
the Highcharts options renderer used by the dashboard view.
"""
