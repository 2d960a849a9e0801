"""
Exception and warning types raised while building or querying a detector.
"""

from __future__ import annotations


class DetectorConfigError(Exception):
    """Base class for every error raised while constructing a detector."""


class UnrecognizedUnitError(DetectorConfigError, ValueError):
    """A unit symbol is unknown, or belongs to a different quantity kind."""

    def __init__(self, quantity: str, symbol: str):
        self.quantity = quantity
        self.symbol = symbol
        super().__init__(f"Unrecognized {quantity} unit '{symbol}'")


class UnsupportedCoordinateSystemError(DetectorConfigError, ValueError):
    """The grid coordinate tag is neither 'Cylindrical' nor 'Cartesian'."""

    def __init__(self, tag):
        self.tag = tag
        super().__init__(
            f"Grid coordinates must be 'Cylindrical' or 'Cartesian', got {tag!r}"
        )


class MissingConfigFieldError(DetectorConfigError, KeyError):
    """A required key is absent from the configuration tree."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Missing required configuration field '{path}'")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class UnknownMaterialError(DetectorConfigError, KeyError):
    """A material name is not present in the material table."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown material '{name}'")

    def __str__(self) -> str:
        return self.args[0]


class UnknownShapeError(DetectorConfigError, ValueError):
    """A geometry description names an unsupported primitive type."""

    def __init__(self, shape_type):
        self.shape_type = shape_type
        super().__init__(f"Unsupported geometry type {shape_type!r}")


class UnrecognizedObjectClassError(UserWarning):
    """Warning category for objects whose 'class' is not recognised.

    This is emitted with :func:`warnings.warn`, never raised: the object is
    skipped and detector construction continues.
    """


class SamplingBudgetExceededError(RuntimeError):
    """The rejection sampler used up its explicit attempt budget."""

    def __init__(self, n_accepted: int, n_requested: int, n_attempts: int):
        self.n_accepted = n_accepted
        self.n_requested = n_requested
        self.n_attempts = n_attempts
        super().__init__(
            f"Accepted only {n_accepted} of {n_requested} points "
            f"after {n_attempts} attempts"
        )
