"""Exporter protocol, format registry and multi-format export."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from conduits.application.dtos import WallFaceRoutingOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """A routed wall face rendered as text in one file format."""

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    def export(self, output: WallFaceRoutingOutput, path: Path) -> None: ...

    def export_string(self, output: WallFaceRoutingOutput) -> str: ...


class ExporterRegistry:
    """Maps format names to exporter classes.

    Exporter modules register their class with ``@ExporterRegistry.register``
    when they are imported.
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> Callable[[type], type]:
        def decorator(exporter_class: type) -> type:
            if format_name in cls._exporters:
                logger.warning(f"Replacing exporter for format '{format_name}'")
            cls._exporters[format_name] = exporter_class
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Exporter class for a format.

        Raises:
            KeyError: If the format is unknown.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            available = ", ".join(cls.available_formats()) or "none"
            raise KeyError(
                f"Unknown export format '{format_name}'. Available formats: {available}"
            ) from None

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Writes one routed face to several formats in a directory."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: WallFaceRoutingOutput,
        project_name: str = "routes",
    ) -> dict[str, Path]:
        """Export to every format as ``<project_name>_<format>.<extension>``.

        Formats are resolved before anything is written, so an unknown
        format leaves the directory untouched.

        Returns:
            Format name to written file.

        Raises:
            KeyError: If any format is not registered.
        """
        exporters = {name: ExporterRegistry.get(name)() for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written: dict[str, Path] = {}
        for name, exporter in exporters.items():
            target = self.output_dir / f"{project_name}_{name}.{exporter.file_extension}"
            logger.info(f"Writing {name} export to {target}")
            exporter.export(output, target)
            written[name] = target
        return written
