from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .bundles import (
    canonical_locale,
    check_locale,
    check_mathjax,
    is_bundled_locale,
    locale_bundle,
    mathjax_bundle,
)
from .dependencies import append_if_absent, upsert_singleton
from .merge import merge_into
from .specification import Specification


RETIRED_OPTIONS = {
    "collaborate": "The collaborate button is no longer supported",
}


def set_config(
    spec: Specification,
    options: Optional[Mapping[str, Any]] = None,
    *,
    locale: Optional[str] = None,
    mathjax: Optional[str] = None,
    cloud: bool = False,
    show_send_to_cloud: Optional[bool] = None,
    **extra: Any,
) -> Specification:
    """Merge rendering options into ``spec.config`` and register the bundles they need.

    ``locale`` adds a locale script unless it is one of the bundled English
    variants. ``mathjax`` ("cdn" or "local") registers a single MathJax
    descriptor ahead of every other dependency. ``cloud`` is the deprecated
    spelling of ``show_send_to_cloud``.
    """

    # Validate everything up front so a bad value leaves the spec untouched.
    if locale is not None:
        check_locale(locale)
    if mathjax is not None:
        check_mathjax(mathjax)

    if locale is not None:
        spec.config["locale"] = locale
        if not is_bundled_locale(locale):
            append_if_absent(spec, canonical_locale(locale), locale_bundle(locale), kind="locale")

    if mathjax is not None:
        upsert_singleton(spec, "mathjax", mathjax_bundle(mathjax), placement="prepend", kind="mathjax")

    merged: Dict[str, Any] = dict(options or {})
    merged.update(extra)
    for key, message in RETIRED_OPTIONS.items():
        if key in merged:
            merged.pop(key)
            spec.diagnostics.deprecate(f"config-{key}", message)
    merge_into(spec.config, merged)

    if cloud:
        spec.diagnostics.deprecate("config-cloud", "The `cloud` argument is deprecated. Use `show_send_to_cloud` instead.")
    if show_send_to_cloud is None:
        show_send_to_cloud = bool(cloud)
    spec.config["showSendToCloud"] = show_send_to_cloud
    return spec
