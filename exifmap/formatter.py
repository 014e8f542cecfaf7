from collections.abc import Callable

from .errors import FormatError, InvalidRational, UnsupportedValue
from .geo import dms_to_decimal
from .values import (
    BaseValue,
    Opaque,
    RationalSeq,
    SignedRationalSeq,
    SmallIntSeq,
    UintSeq,
    plain_float,
)


def _format_rational(value: RationalSeq) -> str:
    if len(value.values) == 3:
        return plain_float(dms_to_decimal(value.values))
    elif len(value.values) == 1:
        return plain_float(value.values[0].to_float())
    raise UnsupportedValue(value.type_name, len(value.values))


def _format_srational(value: SignedRationalSeq) -> str:
    if len(value.values) == 1:
        return plain_float(value.values[0].to_float())
    raise UnsupportedValue(value.type_name, len(value.values))


def _format_uint(value: UintSeq) -> str:
    if len(value.values) == 1:
        return str(value.values[0])
    elif len(value.values) == 2:
        num, den = value.values
        if den == 0:
            raise InvalidRational(num, den)
        return plain_float(num / den)
    return value.display_string()


def _format_int(value: SmallIntSeq) -> str:
    if len(value.values) == 1:
        return str(value.values[0])
    raise UnsupportedValue(value.type_name, len(value.values))


def _format_opaque(value: Opaque) -> str:
    return value.display_string()


FORMATTERS: dict[str, Callable[..., str]] = {
    "rational": _format_rational,
    "srational": _format_srational,
    "uint": _format_uint,
    "int": _format_int,
    "opaque": _format_opaque,
}


def format_value(value: BaseValue) -> str:
    """
    Turn a decoded value into its display string.

    Raises:
        UnsupportedValue: no rule for this variant and sequence length.
        InvalidRational: a rational (or uint pair) with a zero denominator.
    """
    return FORMATTERS[value.kind](value)


def format_or_fallback(value: BaseValue) -> tuple[str, FormatError | None]:
    try:
        return format_value(value), None
    except FormatError as e:
        return value.display_string(), e
