"""Errors raised when a model is used outside of its calling contract."""
from sklearn.exceptions import NotFittedError as _SkNotFittedError


class ShapeMismatch(ValueError):
    """Raised when dimensions disagree.

    This covers a design matrix and target with different numbers of rows,
    new data whose number of columns differs from the fitted one, inputs that
    are not two-dimensional or have no rows, and pipeline stages that change
    the number of rows.
    """


class NotFittedError(_SkNotFittedError):
    """Raised when ``predict`` or ``transform`` is called before fitting.

    Subclasses ``sklearn.exceptions.NotFittedError`` so code written against
    scikit-learn catches it too.
    """


class UnsupportedFormatError(TypeError):
    """Raised when a matrix format is not one a model declares it accepts."""


class TypeMismatch(TypeError):
    """Raised when an input is neither a dense nor a sparse matrix."""
