"""Forecasting every cell of a row, one estimator per cell."""

from __future__ import annotations

from collections.abc import Sequence

from deepola.cell import CellEstimator
from deepola.series import TimeValue


class RowForecast:
    """Holds one estimator per value column of a row."""

    def __init__(self) -> None:
        self.cell_estimators: list[CellEstimator] = []

    def push_estimator(self, estimator: CellEstimator) -> None:
        """Append the estimator for the next cell."""
        self.cell_estimators.append(estimator)

    def fit_transform(
        self, values: Sequence[float], time: float, final_time: float
    ) -> list[float]:
        """Feed each cell value observed at ``time``; return predictions at ``final_time``."""
        if len(values) != len(self.cell_estimators):
            raise ValueError(
                f"expected {len(self.cell_estimators)} values, got {len(values)}"
            )
        predictions = []
        for estimator, value in zip(self.cell_estimators, values):
            estimator.consume(TimeValue(time, value))
            predictions.append(estimator.produce().predict(float(final_time)))
        return predictions