from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Dict, Optional

from .errors import InvalidOptionError
from .specification import Dependency, Specification

logger = logging.getLogger(__name__)

PLACEMENTS = ("append", "prepend")


def find(spec: Specification, name: Optional[str]) -> Optional[int]:
    """Index of the descriptor called ``name``; unnamed descriptors never match."""

    if name is None:
        return None
    for idx, dep in enumerate(spec.dependencies):
        if dep.name == name:
            return idx
    return None


def upsert_singleton(
    spec: Specification,
    name: Optional[str],
    payload: Dict[str, Any],
    placement: str = "append",
    kind: Optional[str] = None,
) -> Dependency:
    """Replace the payload of ``name`` in place, or insert a new descriptor.

    New descriptors go to the front for ``placement="prepend"`` (load-order
    priority) and to the back for ``placement="append"``.
    """

    if placement not in PLACEMENTS:
        raise InvalidOptionError(f"placement must be one of {list(PLACEMENTS)}, got {placement!r}")

    idx = find(spec, name)
    if idx is not None:
        dep = spec.dependencies[idx]
        dep.payload = deepcopy(payload)
        if kind is not None:
            dep.kind = kind
        logger.debug("replaced dependency %r at position %d", name, idx)
        return dep

    dep = Dependency(name=name, payload=deepcopy(payload), kind=kind)
    if placement == "prepend":
        spec.dependencies.insert(0, dep)
    else:
        spec.dependencies.append(dep)
    logger.debug("registered dependency %r (%s)", name, placement)
    return dep


def append_if_absent(
    spec: Specification,
    name: Optional[str],
    payload: Dict[str, Any],
    kind: Optional[str] = None,
) -> Dependency:
    idx = find(spec, name)
    if idx is not None:
        logger.debug("dependency %r already registered", name)
        return spec.dependencies[idx]
    dep = Dependency(name=name, payload=deepcopy(payload), kind=kind)
    spec.dependencies.append(dep)
    logger.debug("appended dependency %r", name)
    return dep
