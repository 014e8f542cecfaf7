class ExifMapError(Exception):
    pass


class DecodeError(ExifMapError):
    """The image could not be opened or holds no readable EXIF block."""


class FormatError(ExifMapError):
    pass


class UnsupportedValue(FormatError):
    """No formatting rule exists for this variant/length combination."""

    def __init__(self, kind: str, length: int):
        super().__init__(f"no formatting rule for {kind} of length {length}")
        self.kind = kind
        self.length = length


class InvalidRational(FormatError):
    def __init__(self, num: int, den: int):
        super().__init__(f"rational {num}/{den} has a zero denominator")
        self.num = num
        self.den = den


class SerializationError(ExifMapError):
    pass


class ConfigError(ExifMapError):
    pass
