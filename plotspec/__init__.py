"""Layout, range-slider and config mutators for plotly-style visualization specs."""

from .services import (
    DeprecatedOptionError,
    InvalidOptionError,
    MultiAxisError,
    SpecError,
    Specification,
    add_range_slider,
    deep_merge,
    finalize,
    set_config,
    set_layout,
)

__all__ = [
    "DeprecatedOptionError",
    "InvalidOptionError",
    "MultiAxisError",
    "SpecError",
    "Specification",
    "add_range_slider",
    "deep_merge",
    "finalize",
    "set_config",
    "set_layout",
]
