"""Forecasters and online estimators for single-valued time series."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from deepola.series import Series, TimeValue


def _fdiv(a: float, b: float) -> float:
    """IEEE-style division: zero divisors give infinities or NaN."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _pow(base: float, exponent: float) -> float:
    try:
        return base**exponent
    except OverflowError:
        return math.inf
    except ZeroDivisionError:
        return math.inf


class CellForecast(ABC):
    """Predicts the value of a series at a given time."""

    @abstractmethod
    def predict(self, time: float) -> float:
        """Value predicted at ``time``."""

    @abstractmethod
    def complexity(self) -> float:
        """Number of parameters of this forecaster."""


class CellEstimator(ABC):
    """Consumes observations one at a time and produces a forecaster."""

    @abstractmethod
    def consume(self, tv: TimeValue) -> None:
        """Take the next observation into account."""

    @abstractmethod
    def produce(self) -> CellForecast:
        """The current best forecaster."""

    def fit(self, series: Series) -> CellForecast:
        """Consume every observation of ``series`` and produce a forecaster."""
        for tv in series:
            self.consume(tv)
        return self.produce()


class Averager(ABC):
    """Consumes observations and keeps an average of their values."""

    @abstractmethod
    def consume(self, tv: TimeValue) -> None:
        """Take the next observation into account."""

    @abstractmethod
    def average(self) -> float:
        """Average of the values seen so far."""


@dataclass
class ConstantForecast(CellForecast):
    """Predicts the same value at every time."""

    mean: float

    def predict(self, time: float) -> float:
        return self.mean

    def complexity(self) -> float:
        return 1.0


@dataclass
class AffineForecast(CellForecast):
    """Predicts ``slope * time + intercept``."""

    slope: float
    intercept: float

    def predict(self, time: float) -> float:
        return time * self.slope + self.intercept

    def complexity(self) -> float:
        return 2.0


@dataclass
class TailEstimator(CellEstimator, Averager):
    """Averages by remembering only the last value."""

    last_value: float = 0.0

    def consume(self, tv: TimeValue) -> None:
        self.last_value = tv.v

    def average(self) -> float:
        return self.last_value

    def produce(self) -> CellForecast:
        return ConstantForecast(self.average())


@dataclass
class MeanEstimator(CellEstimator, Averager):
    """Averages over all observations equally."""

    sum: float = 0.0
    total_weight: float = 0.0

    def consume(self, tv: TimeValue) -> None:
        self.sum += tv.v
        self.total_weight += 1.0

    def average(self) -> float:
        return _fdiv(self.sum, self.total_weight)

    def produce(self) -> CellForecast:
        return ConstantForecast(self.average())


class SimpleExponentSmoothEstimator(CellEstimator, Averager):
    """Exponentially weighted average; the first time seen sets the period.

    A high ``alpha`` relies more on past observations.
    """

    def __init__(self, alpha: float) -> None:
        if not 0.0 < alpha < 1.0:
            raise ValueError(f"alpha must lie strictly between 0 and 1, got {alpha}")
        self.alpha = alpha
        self.freq: float | None = None
        self.last_time = 0.0
        self.sum = 0.0
        self.total_weight = 0.0

    def consume(self, tv: TimeValue) -> None:
        if self.freq is None:
            self.freq = tv.t
        p_delta = _fdiv(tv.t - self.last_time, self.freq)
        alpha_delta = _pow(self.alpha, p_delta)
        self.last_time = tv.t
        self.sum = self.sum * alpha_delta + tv.v
        self.total_weight = self.total_weight * alpha_delta + 1.0

    def average(self) -> float:
        return _fdiv(self.sum, self.total_weight)

    def produce(self) -> CellForecast:
        return ConstantForecast(self.average())

    def __repr__(self) -> str:
        return (
            f"SimpleExponentSmoothEstimator(alpha={self.alpha!r}, freq={self.freq!r}, "
            f"last_time={self.last_time!r}, sum={self.sum!r}, "
            f"total_weight={self.total_weight!r})"
        )


@dataclass
class LeastSquareAffineEstimator(CellEstimator):
    """Online ordinary least-squares fit of a line through the observations."""

    var_t: float = 0.0
    cov_tv: float = 0.0
    mean_t: float = 0.0
    mean_v: float = 0.0
    n: float = 0.0

    def consume(self, tv: TimeValue) -> None:
        self.n += 1.0
        dt = tv.t - self.mean_t
        dv = tv.v - self.mean_v
        correction = (self.n - 1.0) / self.n
        self.var_t += (correction * dt * dt - self.var_t) / self.n
        self.cov_tv += (correction * dt * dv - self.cov_tv) / self.n
        self.mean_t += dt / self.n
        self.mean_v += dv / self.n

    def produce(self) -> CellForecast:
        if self.var_t == 0.0:
            return AffineForecast(0.0, self.mean_v)
        slope = _fdiv(self.cov_tv, self.var_t)
        intercept = self.mean_v - slope * self.mean_t
        return AffineForecast(slope, intercept)


class AverageTrendAffineEstimator(CellEstimator):
    """Extends the last value along an averaged trend."""

    def __init__(self, trend_estimator: Averager) -> None:
        self.trend_estimator = trend_estimator
        self.last_t = 0.0
        self.last_v = 0.0

    @classmethod
    def with_tail(cls) -> AverageTrendAffineEstimator:
        return cls(TailEstimator())

    @classmethod
    def with_mean(cls) -> AverageTrendAffineEstimator:
        return cls(MeanEstimator())

    @classmethod
    def with_ses(cls, alpha: float) -> AverageTrendAffineEstimator:
        return cls(SimpleExponentSmoothEstimator(alpha))

    def consume(self, tv: TimeValue) -> None:
        dt = tv.t - self.last_t
        dv = tv.v - self.last_v
        self.trend_estimator.consume(TimeValue(tv.t, _fdiv(dv, dt)))
        self.last_t = tv.t
        self.last_v = tv.v

    def produce(self) -> CellForecast:
        slope = self.trend_estimator.average()
        intercept = self.last_v - slope * self.last_t
        return AffineForecast(slope, intercept)

    def __repr__(self) -> str:
        return (
            f"AverageTrendAffineEstimator(trend_estimator={self.trend_estimator!r}, "
            f"last_t={self.last_t!r}, last_v={self.last_v!r})"
        )


@dataclass
class _ScoredEstimator:
    """An estimator together with a rolling average of its squared error."""

    estimator: CellEstimator
    rolling_err: SimpleExponentSmoothEstimator = field(
        default_factory=lambda: SimpleExponentSmoothEstimator(0.75)
    )

    def consume_eval(self, train_tv: TimeValue, eval_tv: TimeValue) -> None:
        self.estimator.consume(train_tv)
        pred_v = self.estimator.produce().predict(eval_tv.t)
        diff = eval_tv.v - pred_v
        self.rolling_err.consume(TimeValue(train_tv.t, diff * diff))

    def produce_with_error(self) -> tuple[CellForecast, float]:
        return self.estimator.produce(), self.rolling_err.average()


class ForecastSelector(CellEstimator):
    """Picks, among candidate estimators, the one with the lowest rolling error.

    Each observation is held back and used to train the candidates only once
    the next one arrives, which then serves to evaluate them.
    """

    def __init__(self) -> None:
        self._scored: list[_ScoredEstimator] = []
        self._hot_sample: TimeValue | None = None
        self._num_samples = 0.0

    def include(self, estimator: CellEstimator) -> None:
        """Add a candidate estimator."""
        self._scored.append(_ScoredEstimator(estimator))

    @classmethod
    def with_default_candidates(cls) -> ForecastSelector:
        """A selector over the standard set of constant and affine estimators."""
        selector = cls()
        selector.include(TailEstimator())
        selector.include(MeanEstimator())
        selector.include(SimpleExponentSmoothEstimator(0.75))
        selector.include(LeastSquareAffineEstimator())
        selector.include(AverageTrendAffineEstimator.with_tail())
        selector.include(AverageTrendAffineEstimator.with_mean())
        selector.include(AverageTrendAffineEstimator.with_ses(0.5))
        return selector

    def consume(self, tv: TimeValue) -> None:
        if self._hot_sample is not None:
            for scored in self._scored:
                scored.consume_eval(self._hot_sample, tv)
            self._num_samples += 1.0
        self._hot_sample = tv

    def produce(self) -> CellForecast:
        if self._num_samples == 0.0:
            value = 0.0 if self._hot_sample is None else self._hot_sample.v
            return ConstantForecast(value)
        if not self._scored:
            raise ValueError("No estimator installed with this ForecastSelector")
        candidates = [
            (forecast, -err)
            for forecast, err in (s.produce_with_error() for s in self._scored)
        ]
        if len(candidates) > 1 and any(math.isnan(score) for _, score in candidates):
            raise ValueError("Candidate errors cannot be compared: NaN encountered")
        best_forecast, best_score = candidates[0]
        for forecast, score in candidates[1:]:
            if score >= best_score:
                best_forecast, best_score = forecast, score
        return best_forecast

    def __repr__(self) -> str:
        names = [type(s.estimator).__name__ for s in self._scored]
        return f"ForecastSelector(candidates={names!r}, samples={self._num_samples!r})"