from .decoder import read_entries, iter_entries, load_exif_dict
from .errors import (
    ExifMapError,
    DecodeError,
    FormatError,
    UnsupportedValue,
    InvalidRational,
    SerializationError,
    ConfigError,
)
from .formatter import format_value, format_or_fallback
from .geo import apply_hemisphere, dms_to_decimal, google_maps_link
from .report import Report, ReportField, assemble
from .values import (
    MetadataEntry,
    Opaque,
    Rational,
    RationalSeq,
    SignedRationalSeq,
    SmallIntSeq,
    UintSeq,
)


__all__ = [
    "read_entries",
    "iter_entries",
    "load_exif_dict",
    "ExifMapError",
    "DecodeError",
    "FormatError",
    "UnsupportedValue",
    "InvalidRational",
    "SerializationError",
    "ConfigError",
    "format_value",
    "format_or_fallback",
    "apply_hemisphere",
    "dms_to_decimal",
    "google_maps_link",
    "Report",
    "ReportField",
    "assemble",
    "MetadataEntry",
    "Opaque",
    "Rational",
    "RationalSeq",
    "SignedRationalSeq",
    "SmallIntSeq",
    "UintSeq",
]
