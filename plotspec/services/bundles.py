from __future__ import annotations

from typing import Any, Dict, List

from ..core.settings import get_settings
from .errors import InvalidOptionError

# Shipped with the standard plotly.js bundle; no extra script needed.
BUNDLED_LOCALES = ("en", "en-US")

SUPPORTED_LOCALES = (
    "af", "am", "ar", "ar-dz", "ar-eg", "az", "bg", "bs", "ca", "cs", "cy", "da", "de",
    "de-ch", "el", "eo", "es", "es-ar", "es-pe", "et", "eu", "fa", "fi", "fo", "fr",
    "fr-ch", "gl", "he", "hi-in", "hr", "hu", "hy", "id", "is", "it", "ja", "ka", "km",
    "ko", "lt", "lv", "me", "me-me", "mk", "ml", "ms", "mt", "nl", "nl-be", "no", "pl",
    "pt-br", "pt-pt", "ro", "ru", "sk", "sl", "sq", "sr", "sr-sr", "sv", "sw", "ta",
    "th", "tr", "tt", "uk", "ur", "vi", "zh-cn", "zh-hk", "zh-tw",
)

MATHJAX_MODES = ("cdn", "local")
MATHJAX_SCRIPT = "MathJax.js?config=TeX-AMS-MML_SVG"


def is_bundled_locale(code: str) -> bool:
    return code.lower() in {bundled.lower() for bundled in BUNDLED_LOCALES}


def canonical_locale(code: str) -> str:
    """Lower-cased code; plotly.js ships its locale files under these names."""

    return code.lower()


def check_locale(code: Any) -> str:
    if not isinstance(code, str) or not code:
        raise InvalidOptionError("locale must be a non-empty string")
    if is_bundled_locale(code):
        return code
    if code.lower() not in SUPPORTED_LOCALES:
        raise InvalidOptionError(
            f"Invalid locale: '{code}'. Supported locales include: {', '.join(SUPPORTED_LOCALES)}"
        )
    return code


def check_mathjax(mode: Any) -> str:
    if mode not in MATHJAX_MODES:
        raise InvalidOptionError(f"mathjax must be one of {list(MATHJAX_MODES)}, got {mode!r}")
    if mode == "local" and not get_settings().mathjax_path:
        raise InvalidOptionError(
            "Please specify the location of MathJax via the PLOTLY_MATHJAX_PATH environment variable"
        )
    return mode


def locale_bundle(code: str) -> Dict[str, Any]:
    """Payload for a locale script; regional codes also pull in their base language."""

    check_locale(code)
    settings = get_settings()
    scripts: List[str] = [f"{code.lower()}.js"]
    base, sep, _region = code.partition("-")
    if sep and base.lower() in SUPPORTED_LOCALES:
        scripts.append(f"{base.lower()}.js")
    return {
        "version": settings.plotlyjs_version,
        "src": {"file": settings.locale_dir},
        "script": scripts,
    }


def mathjax_bundle(mode: str) -> Dict[str, Any]:
    check_mathjax(mode)
    settings = get_settings()
    if mode == "cdn":
        src = {"href": settings.mathjax_cdn}
    else:
        src = {"file": settings.mathjax_path}
    return {
        "version": settings.mathjax_version,
        "src": src,
        "script": [MATHJAX_SCRIPT],
    }
