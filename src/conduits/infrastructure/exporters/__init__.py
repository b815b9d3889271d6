"""Exporter framework for routed wall-face connections.

Registered exporters:
- csv: One row per straight route segment
- json: Full routed face with bounds, obstacles, points and connections

Usage:
    from conduits.infrastructure.exporters import ExporterRegistry

    exporter = ExporterRegistry.get("json")()
    text = exporter.export_string(output)
"""

from conduits.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from conduits.infrastructure.exporters.csv_exporter import CsvRouteExporter
from conduits.infrastructure.exporters.json_exporter import JsonRouteExporter

__all__ = [
    "CsvRouteExporter",
    "Exporter",
    "ExportManager",
    "ExporterRegistry",
    "JsonRouteExporter",
]
