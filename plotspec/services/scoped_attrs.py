from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidOptionError
from .merge import merge_into
from .specification import DEFAULT_SCOPE_KEY, Specification

logger = logging.getLogger(__name__)

_UNSET: Any = object()


def record(spec: Specification, overrides: Mapping[str, Any], scope: Optional[str] = _UNSET) -> Specification:
    """Queue layout overrides under ``scope`` (defaults to the spec's current scope).

    Nothing is merged into ``spec.layout`` here; :func:`finalize_layout` applies
    the queued overrides in registration order. ``"__default__"`` is reserved
    for the ``None`` scope in the wire format and is rejected.
    """

    if scope is _UNSET:
        scope = spec.current_scope
    if scope == DEFAULT_SCOPE_KEY:
        raise InvalidOptionError(f"scope {DEFAULT_SCOPE_KEY!r} is reserved for the default scope")
    pending = spec.layout_overrides_by_scope.setdefault(scope, [])
    pending.append(deepcopy(dict(overrides or {})))
    logger.debug("queued layout override #%d for scope %r", len(pending), scope)
    return spec


def pending_overrides(spec: Specification, scope: Optional[str] = _UNSET) -> list:
    if scope is _UNSET:
        scope = spec.current_scope
    return list(spec.layout_overrides_by_scope.get(scope, []))


def finalize_layout(spec: Specification) -> Dict[str, Any]:
    """Flatten every queued override into ``spec.layout`` and clear the queue."""

    for scope, entries in spec.layout_overrides_by_scope.items():
        for entry in entries:
            merge_into(spec.layout, entry)
        logger.debug("applied %d layout override(s) for scope %r", len(entries), scope)
    spec.layout_overrides_by_scope.clear()
    return spec.layout
