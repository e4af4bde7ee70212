from __future__ import annotations

import math
from typing import Iterable, List, Union

import numpy as np
import pandas as pd


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def round_half_up(x: float) -> Union[int, float]:
    """
    Round to the nearest integer, halves towards +inf (2.5 -> 3, -2.5 -> -2).
    inf and nan are returned unchanged.
    """
    x = float(x)
    if not math.isfinite(x):
        return x
    return int(math.floor(x + 0.5))


def running_total(values: Iterable[float]) -> List[float]:
    """Left-to-right cumulative sum as plain floats."""
    arr = np.asarray(list(values), dtype=float)
    return np.cumsum(arr).tolist()
