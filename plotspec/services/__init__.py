from .dependencies import append_if_absent, upsert_singleton
from .diagnostics import Diagnostic, DiagnosticLog
from .errors import DeprecatedOptionError, InvalidOptionError, MultiAxisError, SpecError
from .finalizer import finalize
from .layout import add_range_slider, set_layout
from .merge import deep_merge
from .plot_config import set_config
from .scoped_attrs import finalize_layout, record
from .specification import Dependency, Specification

__all__ = [
    "append_if_absent",
    "upsert_singleton",
    "Diagnostic",
    "DiagnosticLog",
    "DeprecatedOptionError",
    "InvalidOptionError",
    "MultiAxisError",
    "SpecError",
    "finalize",
    "add_range_slider",
    "set_layout",
    "deep_merge",
    "set_config",
    "finalize_layout",
    "record",
    "Dependency",
    "Specification",
]
