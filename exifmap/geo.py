from collections.abc import Sequence

from loguru import logger

from .errors import FormatError, UnsupportedValue
from .values import MetadataEntry, Rational


GOOGLE_MAPS_URL = "https://www.google.com/maps?q={lat:f},{lon:f}"

LATITUDE_TAG = "GPSLatitude"
LONGITUDE_TAG = "GPSLongitude"
LATITUDE_REF_TAG = "GPSLatitudeRef"
LONGITUDE_REF_TAG = "GPSLongitudeRef"
NEGATIVE_REFS = {"S", "W"}


def dms_to_decimal(triple: Sequence[Rational]) -> float:
    """Convert (degrees, minutes, seconds) rationals to decimal degrees."""
    if len(triple) != 3:
        raise UnsupportedValue("RationalSeq", len(triple))
    degrees = triple[0].to_float()
    minutes = triple[1].to_float()
    seconds = triple[2].to_float()
    return degrees + minutes / 60.0 + seconds / 3600.0


def apply_hemisphere(value: float, ref: str) -> float:
    if ref.strip(" \x00") in NEGATIVE_REFS:
        return -value
    return value


def google_maps_link(latitude: float, longitude: float) -> str:
    return GOOGLE_MAPS_URL.format(lat=latitude, lon=longitude)


class GpsAccumulator:
    """
    Collects the four GPS tags while entries stream past.

    Coordinates and hemisphere references are kept apart and combined in
    `resolve`, so a reference tag may come before or after its coordinate.
    """

    def __init__(self):
        self.latitude = 0.0
        self.longitude = 0.0
        self.latitude_ref = ""
        self.longitude_ref = ""
        self.have_latitude = False
        self.have_longitude = False

    def feed(self, entry: MetadataEntry):
        """Record `entry` if it is one of the GPS tags, ignore it otherwise."""
        if entry.name == LATITUDE_TAG:
            value = self._decimal(entry)
            if value is not None:
                self.latitude = value
                self.have_latitude = True
        elif entry.name == LONGITUDE_TAG:
            value = self._decimal(entry)
            if value is not None:
                self.longitude = value
                self.have_longitude = True
        elif entry.name == LATITUDE_REF_TAG:
            self.latitude_ref = entry.value.display_string()
        elif entry.name == LONGITUDE_REF_TAG:
            self.longitude_ref = entry.value.display_string()

    @staticmethod
    def _decimal(entry: MetadataEntry) -> float | None:
        if entry.value.kind != "rational":
            logger.warning(
                f"{entry.name} is a {entry.value.type_name}, expected a rational triple"
            )
            return None
        try:
            return dms_to_decimal(entry.value.values)
        except FormatError as e:
            logger.warning(f"Ignoring {entry.name}: {e}")
            return None

    @property
    def complete(self) -> bool:
        return self.have_latitude and self.have_longitude

    def resolve(self) -> tuple[float, float] | None:
        if not self.complete:
            return None
        return (
            apply_hemisphere(self.latitude, self.latitude_ref),
            apply_hemisphere(self.longitude, self.longitude_ref),
        )

    def map_link(self) -> str | None:
        coords = self.resolve()
        if coords is None:
            return None
        return google_maps_link(*coords)
