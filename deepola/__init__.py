"""Online forecasting estimators and incremental pandas DataFrame operations."""

__version__ = "0.1.0"