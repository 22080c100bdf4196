"""Helpers for working with data frames."""

from __future__ import annotations

import math

import pandas as pd


def _round_half_away(x: float) -> float:
    """Round to the nearest integer, ties away from zero."""
    if math.isnan(x) or math.isinf(x):
        return x
    a = abs(x)
    r = math.floor(a)
    if a - r >= 0.5:
        r += 1
    return math.copysign(float(r), x)


def truncate_df(df: pd.DataFrame, column: str, precision: int) -> None:
    """Reduce, in place, the precision of a floating-point column.

    A precision of 3 rounds 1.0011 to 1.001.
    """
    if column not in df.columns:
        raise KeyError(column)
    if not pd.api.types.is_float_dtype(df[column]):
        raise TypeError(f"column {column!r} is not of a floating-point type")
    factor = 10.0 ** precision
    df[column] = df[column].map(lambda v: _round_half_away(v * factor) / factor)