from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


@dataclass
class Settings:
    mathjax_path: str | None
    mathjax_cdn: str
    mathjax_version: str
    plotlyjs_version: str
    locale_dir: str
    storage_root: Path


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    mathjax_version = os.getenv("PLOTSPEC_MATHJAX_VERSION", "2.7.5")
    return Settings(
        mathjax_path=os.getenv("PLOTLY_MATHJAX_PATH") or None,
        mathjax_cdn=os.getenv(
            "PLOTSPEC_MATHJAX_CDN", f"https://cdnjs.cloudflare.com/ajax/libs/mathjax/{mathjax_version}"
        ),
        mathjax_version=mathjax_version,
        plotlyjs_version=os.getenv("PLOTSPEC_PLOTLYJS_VERSION", "2.11.1"),
        locale_dir=os.getenv("PLOTSPEC_LOCALE_DIR", "htmlwidgets/lib/plotlyjs/locales"),
        storage_root=Path(os.getenv("PLOTSPEC_STORAGE_ROOT", "runs")).resolve(),
    )
