import struct
from collections.abc import Callable, Iterator, Sequence
from typing import Any

import piexif
import piexif.helper
from loguru import logger
from PIL import Image

from .errors import DecodeError
from .values import (
    BaseValue,
    MetadataEntry,
    Opaque,
    RationalSeq,
    SignedRationalSeq,
    SmallIntSeq,
    UintSeq,
)


DEFAULT_IFDS = ("0th", "Exif", "GPS", "Interop", "1st")

# Pointers to sub-IFDs, not metadata of their own
POINTER_TAGS = {
    ("0th", piexif.ImageIFD.ExifTag),
    ("0th", piexif.ImageIFD.GPSTag),
    ("Exif", piexif.ExifIFD.InteroperabilityTag),
}


def load_exif_dict(path: str) -> dict:
    """
    Read the EXIF block of an image into piexif's dict form.

    Pillow locates the block for every format it can open; files it exposes
    no ``exif`` info for (bare TIFF, for example) are handed to piexif as is.
    """
    try:
        with Image.open(path) as image:
            exif_data = (image.info or {}).get("exif")
    except OSError as e:
        raise DecodeError(f"Failed to open {path}: {e}") from e

    try:
        exif = piexif.load(exif_data if exif_data else path)
    except (OSError, ValueError, struct.error) as e:
        raise DecodeError(f"Failed to extract/find exif in {path}: {e}") from e

    if not any(exif.get(ifd) for ifd in DEFAULT_IFDS):
        raise DecodeError(f"No exif found in {path}")
    return exif


def _ints(raw: Any) -> list[int]:
    if isinstance(raw, int):
        return [raw]
    return list(raw)


def _pairs(raw: Any) -> list[tuple[int, int]]:
    # piexif gives a bare (num, den) for a single rational
    if len(raw) == 2 and all(isinstance(x, int) for x in raw):
        return [tuple(raw)]
    return [tuple(pair) for pair in raw]


def _ascii(raw: Any) -> Opaque:
    if isinstance(raw, bytes):
        raw = raw.rstrip(b"\x00").decode("utf-8", errors="replace")
    return Opaque(value=raw)


CONVERTERS: dict[int, Callable[[Any], BaseValue]] = {
    piexif.TYPES.Byte: lambda raw: UintSeq.of(8, *_ints(raw)),
    piexif.TYPES.Short: lambda raw: UintSeq.of(16, *_ints(raw)),
    piexif.TYPES.Long: lambda raw: UintSeq.of(32, *_ints(raw)),
    piexif.TYPES.Rational: lambda raw: RationalSeq.of(*_pairs(raw)),
    piexif.TYPES.SByte: lambda raw: SmallIntSeq.of(*_ints(raw)),
    piexif.TYPES.SShort: lambda raw: SmallIntSeq.of(*_ints(raw)),
    piexif.TYPES.SLong: lambda raw: SmallIntSeq.of(*_ints(raw)),
    piexif.TYPES.SRational: lambda raw: SignedRationalSeq.of(*_pairs(raw)),
    piexif.TYPES.Ascii: _ascii,
}


def read_user_comment(raw: bytes) -> str:
    try:
        return piexif.helper.UserComment.load(raw)
    except ValueError:
        return raw.decode("utf8", errors="ignore")


def to_decoded_value(tag_type: int, raw: Any) -> BaseValue:
    """Wrap a raw piexif value into the variant its declared type maps to."""
    converter = CONVERTERS.get(tag_type)
    if converter is None:
        return Opaque(value=raw)
    try:
        return converter(raw)
    except (TypeError, ValueError) as e:
        # the stored type may differ from the declared one
        logger.debug(f"Keeping {raw!r} opaque: {e}")
        return Opaque(value=raw)


def iter_entries(
    exif: dict, ifds: Sequence[str] = DEFAULT_IFDS
) -> Iterator[MetadataEntry]:
    for ifd in ifds:
        tags = exif.get(ifd) or {}
        if not tags:
            logger.debug(f"IFD {ifd} is empty or missing")
            continue
        for tag, raw in tags.items():
            if (ifd, tag) in POINTER_TAGS:
                continue
            info = piexif.TAGS[ifd].get(tag)
            if info is None:
                logger.debug(f"Skipping unknown tag {tag:#06x} in {ifd}")
                continue
            if ifd == "Exif" and tag == piexif.ExifIFD.UserComment:
                value = Opaque(value=read_user_comment(raw))
            else:
                value = to_decoded_value(info["type"], raw)
            yield MetadataEntry(name=info["name"], value=value, ifd=ifd)


def read_entries(path: str, ifds: Sequence[str] = DEFAULT_IFDS) -> list[MetadataEntry]:
    exif = load_exif_dict(path)
    entries = list(iter_entries(exif, ifds))
    logger.debug(f"Decoded {len(entries)} tags from {path}")
    return entries
