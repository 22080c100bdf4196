"""Inner hash join of a streamed left side against a materialised right side."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd


class HashJoin:
    """Collects right-side frames, then joins each left-side frame against them.

    Right key columns are merged into the left key columns; other right columns
    whose names clash with left columns get a ``_right`` suffix.
    """

    def __init__(self, left_on: Sequence[str], right_on: Sequence[str]) -> None:
        self.left_on = list(left_on)
        self.right_on = list(right_on)
        if len(self.left_on) != len(self.right_on):
            raise ValueError(
                f"left_on and right_on differ in length: "
                f"{len(self.left_on)} != {len(self.right_on)}"
            )
        self.right_df = pd.DataFrame()

    def pre_process(self, right_df: pd.DataFrame) -> None:
        """Append a right-side partition to the materialised right table."""
        if self.right_df.columns.empty:
            self.right_df = right_df.copy()
            return
        if list(self.right_df.columns) != list(right_df.columns):
            raise ValueError(
                "cannot stack frames with different columns: "
                f"{list(self.right_df.columns)} vs {list(right_df.columns)}"
            )
        self.right_df = pd.concat([self.right_df, right_df], ignore_index=True)

    def process(self, left_df: pd.DataFrame) -> pd.DataFrame:
        """Inner-join ``left_df`` with everything collected on the right."""
        missing_left = [c for c in self.left_on if c not in left_df.columns]
        if missing_left:
            raise KeyError(f"left frame lacks join columns {missing_left}")
        missing_right = [c for c in self.right_on if c not in self.right_df.columns]
        if missing_right:
            raise KeyError(f"right frame lacks join columns {missing_right}")
        right = self.right_df.rename(columns=dict(zip(self.right_on, self.left_on)))
        return pd.merge(
            left_df,
            right,
            on=self.left_on,
            how="inner",
            suffixes=("", "_right"),
        ).reset_index(drop=True)