from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict

from .scoped_attrs import finalize_layout
from .specification import Specification


def finalize(spec: Specification) -> Dict[str, Any]:
    """Flatten queued layout overrides and return the document handed to the renderer."""

    layout = finalize_layout(spec)
    return {
        "data": deepcopy(spec.data),
        "layout": deepcopy(layout),
        "config": deepcopy(spec.config),
        "dependencies": [dep.to_dict() for dep in spec.dependencies],
    }
