import math
from decimal import Decimal
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import InvalidRational


def plain_float(x: float) -> str:
    """
    Render a float with the fewest digits that still round-trip, without
    exponent notation or trailing zeros (``40``, ``0.5``, ``0.00001``).
    """
    if not math.isfinite(x):
        return repr(x)
    return format(Decimal(repr(x)).normalize(), "f")


class Rational(BaseModel):
    model_config = ConfigDict(frozen=True)

    num: int
    den: int

    def to_float(self) -> float:
        if self.den == 0:
            raise InvalidRational(self.num, self.den)
        return self.num / self.den

    def __str__(self) -> str:
        return f"{self.num}/{self.den}"


def _join(items: list) -> str:
    if len(items) == 1:
        return str(items[0])
    return "[" + ", ".join(str(i) for i in items) + "]"


class BaseValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def type_name(self) -> str:
        return type(self).__name__

    def display_string(self) -> str:
        raise NotImplementedError


class RationalSeq(BaseValue):
    kind: Literal["rational"] = "rational"
    values: list[Rational]

    @field_validator("values")
    @classmethod
    def _unsigned(cls, values: list[Rational]):
        for r in values:
            if r.num < 0 or r.den < 0:
                raise ValueError(f"unsigned rational expected, got {r}")
        return values

    @classmethod
    def of(cls, *pairs: tuple[int, int]):
        return cls(values=[Rational(num=n, den=d) for n, d in pairs])

    def display_string(self) -> str:
        return _join(self.values)


class SignedRationalSeq(BaseValue):
    kind: Literal["srational"] = "srational"
    values: list[Rational]

    @classmethod
    def of(cls, *pairs: tuple[int, int]):
        return cls(values=[Rational(num=n, den=d) for n, d in pairs])

    def display_string(self) -> str:
        return _join(self.values)


class UintSeq(BaseValue):
    kind: Literal["uint"] = "uint"
    width: Literal[8, 16, 32, 64]
    values: list[Annotated[int, Field(ge=0)]]

    @model_validator(mode="after")
    def _fits_width(self):
        limit = 1 << self.width
        for v in self.values:
            if v >= limit:
                raise ValueError(f"{v} does not fit in {self.width} bits")
        return self

    @classmethod
    def of(cls, width: int, *values: int):
        return cls(width=width, values=list(values))

    @property
    def type_name(self) -> str:
        return f"UintSeq{self.width}"

    def display_string(self) -> str:
        return _join(self.values)


class SmallIntSeq(BaseValue):
    kind: Literal["int"] = "int"
    values: list[int]

    @classmethod
    def of(cls, *values: int):
        return cls(values=list(values))

    def display_string(self) -> str:
        return _join(self.values)


class Opaque(BaseValue):
    kind: Literal["opaque"] = "opaque"
    value: Any

    def display_string(self) -> str:
        value = self.value
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray)):
            text = bytes(value).rstrip(b"\x00")
            if text.isascii() and all(32 <= b < 127 for b in text):
                return text.decode("ascii")
            return text.hex(" ")
        if isinstance(value, float):
            return plain_float(value)
        return str(value)


DecodedValue = Annotated[
    RationalSeq | SignedRationalSeq | UintSeq | SmallIntSeq | Opaque,
    Field(discriminator="kind"),
]


class MetadataEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: DecodedValue
    # IFD the tag was read from ("0th", "Exif", "GPS", ...), empty when unknown
    ifd: str = ""
