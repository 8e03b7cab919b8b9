from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .errors import MultiAxisError
from .scoped_attrs import _UNSET, record
from .specification import Specification
from .timeconv import to_milliseconds

logger = logging.getLogger(__name__)

_XAXIS_PATTERN = re.compile(r"^xaxis")
_SIZE_KEYS = ("height", "width")


def set_layout(
    spec: Specification | Sequence[Any],
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    scope: Optional[str] = _UNSET,
    **attrs: Any,
):
    """Queue layout options for the given (or current) data scope.

    A list of specifications is handled element-wise, each one under its own
    current scope; non-specification items are passed through.
    """

    if isinstance(spec, (list, tuple)):
        return [set_layout(item, overrides, **attrs) if isinstance(item, Specification) else item for item in spec]

    merged: Dict[str, Any] = dict(overrides or {})
    merged.update(attrs)
    record(spec, merged, scope)
    if any(merged.get(key) is not None for key in _SIZE_KEYS):
        spec.diagnostics.deprecate(
            "layout-size",
            "Specifying width/height in layout is deprecated; set the figure size when the specification is built.",
        )
    return spec


def xaxis_keys(layout: Mapping[str, Any]) -> List[str]:
    return [key for key in layout if _XAXIS_PATTERN.match(str(key))]


def add_range_slider(spec: Specification, start: Any = None, end: Any = None, **options: Any) -> Specification:
    """Pin the x-axis range to ``[start, end]`` and show a range slider under it."""

    axes = xaxis_keys(spec.layout)
    if len(axes) > 1:
        raise MultiAxisError(f"Can only add a rangeslider to a plot with one x-axis (found {', '.join(axes)})")

    bounds = [to_milliseconds(start), to_milliseconds(end)]

    xaxis = spec.layout.get("xaxis")
    if not isinstance(xaxis, dict):
        xaxis = spec.layout["xaxis"] = {}
    xaxis["range"] = bounds
    xaxis["rangeslider"] = {"visible": True, **options}
    logger.debug("range slider attached with range %s", bounds)
    return spec
