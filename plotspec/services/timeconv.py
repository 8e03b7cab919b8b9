from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any, Optional

import numpy as np
import pandas as pd

from .errors import InvalidOptionError

_EPOCH = pd.Timestamp("1970-01-01", tz="UTC")


def _timestamp_ms(ts: pd.Timestamp) -> float:
    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    else:
        ts = ts.tz_convert("UTC")
    return (ts - _EPOCH) / pd.Timedelta(milliseconds=1)


def to_milliseconds(value: Any) -> Optional[float]:
    """Epoch milliseconds for date-like values; numbers pass through.

    ``None`` (and NaT/NaN) stays ``None`` so the engine picks the bound itself.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidOptionError(f"cannot convert {value!r} to an axis bound")
    if isinstance(value, (int, float, np.integer, np.floating)):
        if pd.isna(value):
            return None
        return value.item() if isinstance(value, np.generic) else value
    if value is pd.NaT:
        return None
    if isinstance(value, (pd.Timestamp, datetime, np.datetime64)):
        ts = pd.Timestamp(value)
        if pd.isna(ts):
            return None
        return _timestamp_ms(ts)
    if isinstance(value, date):
        return _timestamp_ms(pd.Timestamp(value.year, value.month, value.day))
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            pass
        else:
            if math.isnan(number):
                return None
            if math.isinf(number):
                raise InvalidOptionError(f"cannot convert {value!r} to an axis bound")
            return number
        try:
            ts = pd.Timestamp(text)
        except (ValueError, TypeError) as exc:
            raise InvalidOptionError(f"cannot convert {value!r} to an axis bound") from exc
        if pd.isna(ts):
            return None
        return _timestamp_ms(ts)
    raise InvalidOptionError(f"cannot convert {type(value).__name__} to an axis bound")
