"""Infrastructure layer - formatters and exporters."""

from .exporters import (
    CsvRouteExporter,
    ExportManager,
    ExporterRegistry,
    JsonRouteExporter,
)
from .formatters import RouteReportFormatter, WallListFormatter

__all__ = [
    "CsvRouteExporter",
    "ExportManager",
    "ExporterRegistry",
    "JsonRouteExporter",
    "RouteReportFormatter",
    "WallListFormatter",
]
