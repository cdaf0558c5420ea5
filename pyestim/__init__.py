"""Base classes and conventions for estimators, transformers and
decomposition models."""
from .base import (AbstractModel, AbstractEstimator, AbstractTransformer,
                   OnlineMixin, is_estimator, is_transformer, is_decomposer,
                   is_online)
from .decomposition import (AbstractDecompositionModel, TruncatedSVD,
                            IncrementalSVD)
from .exceptions import (ShapeMismatch, NotFittedError,
                         UnsupportedFormatError, TypeMismatch)
from .linear_model import (LinearRegression, OnlineLinearRegression,
                           LogisticRegression)
from .pipeline import Pipeline, make_pipeline
from .preprocessing import Standardizer
from .validation import as_dense, as_sparse, check_matrix


__all__ = ["AbstractModel",
           "AbstractEstimator",
           "AbstractTransformer",
           "AbstractDecompositionModel",
           "OnlineMixin",
           "is_estimator",
           "is_transformer",
           "is_decomposer",
           "is_online",
           "TruncatedSVD",
           "IncrementalSVD",
           "LinearRegression",
           "OnlineLinearRegression",
           "LogisticRegression",
           "Standardizer",
           "Pipeline",
           "make_pipeline",
           "ShapeMismatch",
           "NotFittedError",
           "UnsupportedFormatError",
           "TypeMismatch",
           "as_dense",
           "as_sparse",
           "check_matrix"]

name = "pyestim"
