"""Information criteria balancing model complexity against fitness."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from deepola.series import Series

if TYPE_CHECKING:
    from deepola.cell import CellForecast


def _fdiv(a: float, b: float) -> float:
    """IEEE-style division: zero divisors give infinities or NaN."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _ln(x: float) -> float:
    """Natural logarithm following IEEE rules at the edges."""
    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    if math.isinf(x):
        return math.inf
    return math.log(x)


@dataclass
class Score:
    """Complexity, log-likelihood and sample count of a fitted model."""

    complexity: float
    log_likelihood: float
    num_samples: float

    def aic(self) -> float:
        """Akaike information criterion: 2k - 2 ln(L)."""
        return 2.0 * self.complexity - 2.0 * self.log_likelihood

    def aicc(self) -> float:
        """AIC corrected for small sample sizes."""
        ll = self.log_likelihood
        numerator = 2.0 * ll * ll + 2.0 * ll
        denominator = self.num_samples - ll - 1.0
        return self.aic() + _fdiv(numerator, denominator)

    def bic(self) -> float:
        """Bayesian information criterion: k ln(n) - 2 ln(L)."""
        return self.complexity * _ln(self.num_samples) - 2.0 * self.log_likelihood


def least_square(complexity: float, forecast: CellForecast, series: Series) -> Score:
    """Score a forecast assuming i.i.d. normally distributed errors."""
    rss = 0.0
    for tv in series:
        diff = tv.v - forecast.predict(tv.t)
        rss += diff * diff
    n = float(len(series))
    log_likelihood = -n * _ln(_fdiv(rss, n)) / 2.0
    return Score(complexity, log_likelihood, n)