"""Exceptions raised by map generation."""


class HexMapError(Exception):
    """Base class for map generation errors."""


class InvalidParameter(HexMapError, ValueError):
    """A generation parameter is out of range (negative radius, zero size, ...)."""


class NoiseEvaluationFailure(HexMapError):
    """The noise function produced a value that cannot be classified."""

    def __init__(self, coord, value) -> None:
        super().__init__(f"noise at {tuple(coord)} returned {value!r}")
        self.coord = coord
        self.value = value
