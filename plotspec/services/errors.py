from __future__ import annotations


class SpecError(ValueError):
    """Base error for specification mutations."""


class MultiAxisError(SpecError):
    """Raised when a single-axis mutation finds more than one x-axis."""


class InvalidOptionError(SpecError):
    """Raised when an enumerated option receives a value outside its set."""


class DeprecatedOptionError(SpecError):
    """Raised on demand when collected deprecations are escalated."""
