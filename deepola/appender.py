"""Memoryless frame-to-frame transformations."""

from __future__ import annotations

from collections.abc import Callable

import pandas as pd


def _copy_frame(df: pd.DataFrame) -> pd.DataFrame:
    return df.copy()


class MapAppender:
    """Applies a function to every incoming frame.

    Suited to stateless operations such as row filtering, column projection or
    adding derived columns. Without a mapper, frames pass through unchanged.
    """

    def __init__(self, mapper: Callable[[pd.DataFrame], pd.DataFrame] | None = None) -> None:
        self.mapper = mapper if mapper is not None else _copy_frame

    def map(self, df: pd.DataFrame) -> pd.DataFrame:
        """Transform one frame."""
        return self.mapper(df)

    def process_msg(self, df: pd.DataFrame) -> pd.DataFrame:
        """Handle one incoming frame; same as :meth:`map`."""
        return self.map(df)