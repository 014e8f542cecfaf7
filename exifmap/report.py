import json
from collections.abc import Iterable

from loguru import logger
from pydantic import BaseModel

from .errors import SerializationError
from .formatter import format_or_fallback
from .geo import GpsAccumulator
from .values import MetadataEntry


MAP_LINK_KEY = "GoogleMapsLink"
TRUNCATED_SUFFIX = " ...[truncated]"


class ReportField(BaseModel):
    name: str
    value: str
    type_name: str
    # message of the FormatError that forced the fallback string
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class Report(BaseModel):
    entries: list[ReportField] = []
    map_link: str | None = None

    def text_lines(self) -> list[str]:
        lines = []
        for field in self.entries:
            lines.append(f"{field.name}: {field.value}")
            if field.failed:
                lines.append(f"Failed to format, type: {field.type_name}")
        if self.map_link is not None:
            lines.append(f"Google Maps Link: {self.map_link}")
        return lines

    def as_dict(self) -> dict[str, str]:
        result = {field.name: field.value for field in self.entries}
        if self.map_link is not None:
            result[MAP_LINK_KEY] = self.map_link
        return result

    def to_json(self, indent: int = 2) -> str:
        try:
            return json.dumps(self.as_dict(), indent=indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize report: {e}") from e


def truncate(text: str, max_length: int | None) -> str:
    if max_length is None or len(text) <= max_length:
        return text
    return text[:max_length] + TRUNCATED_SUFFIX


def assemble(
    entries: Iterable[MetadataEntry],
    want_map_link: bool = False,
    max_value_length: int | None = None,
) -> Report:
    """
    Format every entry, in order, into a `Report`.

    Entries that cannot be formatted keep their fallback string, so the
    report always has one field per input entry. With `want_map_link`, the
    GPS tags are collected on the way and a Google Maps link is added once
    both latitude and longitude were seen.
    """
    report = Report()
    gps = GpsAccumulator() if want_map_link else None

    for entry in entries:
        display, error = format_or_fallback(entry.value)
        if error is not None:
            logger.debug(
                f"Failed to format {entry.name} ({entry.value.type_name}): {error}"
            )
        report.entries.append(
            ReportField(
                name=entry.name,
                value=truncate(display, max_value_length),
                type_name=entry.value.type_name,
                error=None if error is None else str(error),
            )
        )
        if gps is not None:
            gps.feed(entry)

    if gps is not None:
        report.map_link = gps.map_link()
        if report.map_link is None:
            logger.info("No usable GPS coordinates found")
    return report
