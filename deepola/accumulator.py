"""Accumulating aggregates over a stream of data frames."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

_AGG_NAMES = {"n_unique": "nunique"}


class SumAccumulator:
    """Keeps running sums, optionally grouped by key columns.

    Each call to :meth:`accumulate` aggregates the new frame, stacks the result
    under what has been accumulated so far, and aggregates again.
    """

    def __init__(
        self,
        group_key: Sequence[str] | None = None,
        aggregates: Sequence[tuple[str, Sequence[str]]] | None = None,
    ) -> None:
        self.group_key: list[str] = list(group_key or [])
        self.aggregates: list[tuple[str, list[str]]] = [
            (column, list(funcs)) for column, funcs in (aggregates or [])
        ]
        self.accumulated = pd.DataFrame()

    def _aggregate(self, df: pd.DataFrame, accumulator: bool) -> pd.DataFrame:
        if not self.group_key:
            return pd.DataFrame({c: [df[c].sum()] for c in df.columns})
        grouped = df.groupby(self.group_key, as_index=False, sort=False)
        if accumulator:
            return grouped.sum()
        if not self.aggregates:
            result = grouped.sum()
            return result.rename(
                columns={
                    c: f"{c}_sum" for c in result.columns if c not in self.group_key
                }
            )
        named = {
            f"{column}_{func}": (column, _AGG_NAMES.get(func, func))
            for column, funcs in self.aggregates
            for func in funcs
        }
        return grouped.agg(**named)

    def accumulate(self, df: pd.DataFrame) -> pd.DataFrame:
        """Fold ``df`` into the accumulation and return the updated result."""
        df_agg = self._aggregate(df, accumulator=False)
        if self.accumulated.columns.empty:
            stacked = df_agg
        else:
            if list(self.accumulated.columns) != list(df_agg.columns):
                raise ValueError(
                    "cannot stack frames with different columns: "
                    f"{list(self.accumulated.columns)} vs {list(df_agg.columns)}"
                )
            stacked = pd.concat([self.accumulated, df_agg], ignore_index=True)
        result = self._aggregate(stacked, accumulator=True).reset_index(drop=True)
        self.accumulated = result.copy()
        return result

    def process_msg(self, df: pd.DataFrame) -> pd.DataFrame:
        """Handle one incoming frame; same as :meth:`accumulate`."""
        return self.accumulate(df)