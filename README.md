# deepola

Building blocks for progressive, online query answering:

- **Online forecasting.** Estimators take `(time, value)` observations one at a
  time and produce forecasts of where each value is heading.
- **Incremental DataFrame operations.** pandas-based operators that are fed
  partial DataFrames one at a time and keep an up-to-date result.

## Installation

```
pip install deepola
```

## Forecasting

`deepola.series.Series(times, values)` pairs times with values (both must have
the same length, otherwise `ValueError`). Iterating over it yields
`TimeValue(t, v)` items. Estimators in `deepola.cell` consume these items with
`consume()` and produce a `CellForecast` with `produce()`; `fit(series)` does
both in one call:

```python
from deepola.series import Series
from deepola.cell import LeastSquareAffineEstimator, ForecastSelector

series = Series([1.0, 2.0, 3.0, 5.0], [11.0, 12.0, 13.0, 15.0])
forecast = LeastSquareAffineEstimator().fit(series)
forecast.predict(10.0)          # 20.0

selector = ForecastSelector.with_default_candidates()
best = selector.fit(series)     # the candidate with the lowest rolling error
best.predict(10.0)
```

Forecasters:

- `ConstantForecast(mean)`: the same value at every time.
- `AffineForecast(slope, intercept)`: `slope * time + intercept`.

Estimators:

- `TailEstimator`: the last value seen.
- `MeanEstimator`: the mean of all values.
- `SimpleExponentSmoothEstimator(alpha)`: an exponentially weighted mean; the
  first time seen sets the period, and `alpha` must lie strictly between 0 and 1.
- `LeastSquareAffineEstimator`: an online ordinary least-squares line.
- `AverageTrendAffineEstimator`: a line through the last point with an averaged
  slope. Build it with `with_tail()`, `with_mean()` or `with_ses(alpha)`.
- `ForecastSelector`: chooses among the estimators added with `include()`,
  scoring each by an exponentially smoothed squared error of its one-step-ahead
  predictions. Before it has seen two observations it predicts the last value
  seen (or 0.0).

`RowForecast` in `deepola.row` holds one estimator per column and forecasts a
whole row at once:

```python
from deepola.row import RowForecast
from deepola.cell import MeanEstimator

row = RowForecast()
row.push_estimator(MeanEstimator())
row.push_estimator(MeanEstimator())
row.fit_transform([1.0, 2.0], time=1.0, final_time=10.0)   # [1.0, 2.0]
```

`deepola.score` provides `Score(complexity, log_likelihood, num_samples)` with
the information criteria `aic()`, `aicc()` and `bic()`, and
`least_square(complexity, forecast, series)` to score a forecast against a
series assuming normally distributed errors.

## DataFrame operations

```python
import pandas as pd
from deepola.accumulator import SumAccumulator
from deepola.appender import MapAppender
from deepola.hash_join import HashJoin
from deepola.csvreader import CSVReader
from deepola.frame_util import truncate_df

acc = SumAccumulator(group_key=["date"])
acc.accumulate(pd.DataFrame({"date": ["a", "a"], "temp": [1, 2]}))
# date="a", temp_sum=3; later calls add to the running sums

keep_my = MapAppender(lambda df: df[df["col2"] == "my"])
keep_my.map(pd.DataFrame({"col1": ["hello", "world"], "col2": ["my", "name"]}))

join = HashJoin(left_on=["id"], right_on=["id"])
join.pre_process(pd.DataFrame({"id": [1, 2], "x": [10, 20]}))  # right side first
joined = join.process(pd.DataFrame({"id": [2, 3], "y": [5, 6]}))

reader = CSVReader(delimiter=",", has_headers=True)
frame = reader.read("data.csv")
```

- `SumAccumulator(group_key=None, aggregates=None)`: without a group key the
  result is one row of column sums under the original names. With a group key,
  value columns are summed per group and named `<column>_sum`; or, when
  `aggregates` such as `[("temp", ["sum", "mean"])]` is given, named
  `<column>_<func>`. The running result is kept in `accumulated`.
- `MapAppender(mapper=None)`: applies `mapper` to each frame; without one,
  frames are copied unchanged.
- `HashJoin(left_on, right_on)`: `pre_process()` collects right-side frames,
  `process()` inner-joins a left frame against all of them. Right key columns
  are merged into the left ones; other clashing right columns get a `_right`
  suffix.
- `CSVReader(delimiter=",", has_headers=False, column_names=None,
  projected_cols=None)`: `read(filename)` reads one file; without headers the
  columns are named `column_1`, `column_2`, and so on. `projected_cols` picks
  columns by position and `column_names` renames them. `read_all(files_df)`
  yields one frame per file name held in the cells of `files_df`.
- `truncate_df(df, column, precision)` rounds a float column in place (ties
  away from zero), handy for comparing results approximately.

Every operator also has `process_msg(df)`, the same as its main method, for use
as a per-message handler.

## What this package does not do

There is no execution graph, channel or scheduler here: the operators do not
run in threads or pass messages to each other. Call their methods directly and
wire them together in your own code. There is no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```