"""Reading CSV files named in the rows of a data frame."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

import pandas as pd


class CSVReader:
    """Reads CSV files into data frames.

    Without headers, columns are named ``column_1``, ``column_2`` and so on,
    after their position in the file. ``projected_cols`` selects columns by
    position. ``column_names`` renames the columns that were read.
    """

    def __init__(
        self,
        delimiter: str = ",",
        has_headers: bool = False,
        column_names: Sequence[str] | None = None,
        projected_cols: Sequence[int] | None = None,
    ) -> None:
        if len(delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
        self.delimiter = delimiter
        self.has_headers = has_headers
        self.column_names = list(column_names) if column_names is not None else None
        self.projected_cols = list(projected_cols) if projected_cols is not None else None

    def read(self, filename: str) -> pd.DataFrame:
        """Read one CSV file into a data frame."""
        df = pd.read_csv(
            filename,
            sep=self.delimiter,
            header=0 if self.has_headers else None,
            usecols=self.projected_cols,
        )
        if not self.has_headers:
            df.columns = [f"column_{position + 1}" for position in df.columns]
        if self.column_names is not None:
            if len(self.column_names) != df.shape[1]:
                raise ValueError(
                    f"{len(self.column_names)} column names given for "
                    f"{df.shape[1]} columns"
                )
            df.columns = self.column_names
        return df

    def read_all(self, files_df: pd.DataFrame) -> Iterator[pd.DataFrame]:
        """Yield one data frame per file name found in the columns of ``files_df``."""
        for column in files_df.columns:
            for filename in files_df[column]:
                if filename is None or (isinstance(filename, float) and pd.isna(filename)):
                    raise ValueError(f"missing file name in column {column!r}")
                if not isinstance(filename, str):
                    raise TypeError(
                        f"column {column!r} holds {type(filename).__name__}, not file names"
                    )
                yield self.read(filename)