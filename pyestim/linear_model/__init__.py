"""Linear estimators written against the ``fit``/``predict`` contract."""
from .least_squares import LinearRegression, OnlineLinearRegression
from .logistic import LogisticRegression

__all__ = ["LinearRegression",
           "LogisticRegression",
           "OnlineLinearRegression"]
