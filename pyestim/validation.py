"""Input checks shared by every model.

A matrix is either dense (a ``numpy.ndarray``) or sparse (a ``scipy.sparse``
matrix or array). Models declare which of these they accept and which one
they compute on; :func:`check_matrix` enforces the declaration and performs
the conversion.
"""
import numpy as np
import scipy.sparse as sp

from sklearn.utils import check_array
from sklearn.utils.validation import FLOAT_DTYPES

from .exceptions import (NotFittedError, ShapeMismatch, TypeMismatch,
                         UnsupportedFormatError)

DENSE = 'dense'
SPARSE = 'sparse'
SPARSE_FORMATS = ('csr', 'csc', 'coo', 'lil', 'dok', 'bsr', 'dia')


def matrix_format(X):
    """Name the representation of a matrix.

    Parameters
    ----------
    X : object
        The candidate matrix.

    Returns
    -------
    fmt : str
        ``'dense'`` for numpy arrays, otherwise the scipy sparse format name
        (``'csr'``, ``'csc'``, ``'coo'``, ...).

    Raises
    ------
    TypeMismatch
        If *X* is neither a numpy array nor a scipy sparse matrix.
    """
    if sp.issparse(X):
        return X.format
    if isinstance(X, np.ndarray):
        return DENSE
    raise TypeMismatch(
        'Expected a dense (numpy.ndarray) or sparse (scipy.sparse) matrix, '
        'got %s.' % type(X).__name__)


def format_accepted(fmt, accepted_formats):
    """Whether the format *fmt* is in *accepted_formats*.

    ``'sparse'`` in *accepted_formats* stands for every sparse format.
    """
    if fmt in accepted_formats:
        return True
    return fmt != DENSE and SPARSE in accepted_formats


def _check_format_name(name, allow_none=False):
    if name is None and allow_none:
        return
    if name not in (DENSE, SPARSE) + SPARSE_FORMATS:
        raise ValueError('Unknown matrix format: %r' % (name,))


def _convert(X, fmt, preferred_format):
    """Convert *X*, currently in format *fmt*, to *preferred_format*."""
    if preferred_format is None or fmt == preferred_format:
        return X
    if preferred_format == DENSE:
        return X.toarray()
    if preferred_format == SPARSE:
        if fmt == DENSE:
            return sp.csr_matrix(X)
        return X
    if fmt == DENSE:
        return sp.csr_matrix(X).asformat(preferred_format)
    return X.asformat(preferred_format)


def check_matrix(X, accepted_formats=(DENSE, SPARSE), preferred_format=None,
                 dtype=FLOAT_DTYPES):
    """Validate a matrix and convert it to the preferred representation.

    Parameters
    ----------
    X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
        The matrix to validate.
    accepted_formats : tuple of str
        Formats the caller can handle. ``'sparse'`` accepts any sparse
        format.
    preferred_format : str or None
        Format to convert to before returning. ``None`` keeps the
        representation that was supplied.
    dtype : dtype, tuple of dtypes or None
        Passed to ``sklearn.utils.check_array``. By default integer and
        boolean data are cast to float64.

    Returns
    -------
    X : ndarray or scipy.sparse matrix
        The validated matrix.

    Raises
    ------
    TypeMismatch
        If *X* is not a recognized matrix or holds non-numeric data.
    UnsupportedFormatError
        If the format of *X* is not in *accepted_formats*.
    ShapeMismatch
        If *X* is not two-dimensional or has no rows or no columns.
    """
    for name in accepted_formats:
        _check_format_name(name)
    _check_format_name(preferred_format, allow_none=True)

    fmt = matrix_format(X)
    if not format_accepted(fmt, accepted_formats):
        raise UnsupportedFormatError(
            "Matrix format '%s' is not accepted; expected one of %s."
            % (fmt, ', '.join(accepted_formats)))

    if not (np.issubdtype(X.dtype, np.number) or X.dtype == np.bool_):
        raise TypeMismatch('Expected numeric data, got dtype %s.' % X.dtype)

    if X.ndim != 2:
        raise ShapeMismatch('Expected a 2-dimensional matrix, got %d '
                            'dimension(s).' % X.ndim)
    n_samples, n_features = X.shape
    if n_samples == 0:
        raise ShapeMismatch('Matrix of shape %s has no rows.' % (X.shape,))
    if n_features == 0:
        raise ShapeMismatch('Matrix of shape %s has no columns.'
                            % (X.shape,))

    if isinstance(X, np.matrix):
        X = np.asarray(X)
    X = _convert(X, fmt, preferred_format)
    return check_array(X, accept_sparse=True, dtype=dtype)


def check_target(y, n_samples, y_numeric=False):
    """Validate a target against the number of rows it must align with.

    Parameters
    ----------
    y : array-like, shape (n_samples,) or (n_samples, n_targets)
        The target. May be numeric or categorical.
    n_samples : int
        The number of rows of the associated design matrix.
    y_numeric : bool
        If True, the target is cast to float64.

    Returns
    -------
    y : ndarray
    """
    if y is None:
        raise ShapeMismatch('A target y with %d entries is required.'
                            % n_samples)
    if sp.issparse(y):
        y = y.toarray()
    y = np.asarray(y)
    if y.ndim not in (1, 2):
        raise ShapeMismatch('y should either have shape (n_samples,) or '
                            '(n_samples, n_targets), got %s.' % (y.shape,))
    if y.shape[0] != n_samples:
        raise ShapeMismatch(
            'Found %d rows in X but %d entries in y.' % (n_samples,
                                                        y.shape[0]))
    if y_numeric:
        y = check_array(y, ensure_2d=False, dtype=np.float64)
    return y


def check_X_y(X, y, accepted_formats=(DENSE, SPARSE), preferred_format=None,
              y_numeric=False):
    """Validate a design matrix and a target together.

    See :func:`check_matrix` and :func:`check_target`.
    """
    X = check_matrix(X, accepted_formats=accepted_formats,
                     preferred_format=preferred_format)
    y = check_target(y, X.shape[0], y_numeric=y_numeric)
    return X, y


def check_n_features(X, n_features):
    """Raise ``ShapeMismatch`` unless *X* has *n_features* columns."""
    if X.shape[1] != n_features:
        raise ShapeMismatch(
            'X has %d features, but %d features were used for fitting.'
            % (X.shape[1], n_features))


def check_fitted(model, attributes=None):
    """Raise ``NotFittedError`` if *model* has not been fitted.

    Parameters
    ----------
    model : object
        The model to check.
    attributes : str, list of str, or None
        Learned attributes that must exist. If None, the model is fitted
        when it has any public attribute ending with an underscore.
    """
    if attributes is None:
        fitted = any(k.endswith('_') and not k.startswith('_')
                     for k in vars(model))
    else:
        if isinstance(attributes, str):
            attributes = [attributes]
        fitted = all(hasattr(model, attr) for attr in attributes)

    if not fitted:
        raise NotFittedError(
            'This %s instance is not fitted yet. Fit it with appropriate '
            'arguments before using this method.' % type(model).__name__)


def as_dense(X):
    """Return *X* as a dense ``numpy.ndarray``."""
    fmt = matrix_format(X)
    if fmt == DENSE:
        return np.asarray(X)
    return X.toarray()


def as_sparse(X, format='csr'):
    """Return *X* as a scipy sparse matrix in *format*."""
    _check_format_name(format)
    if format == SPARSE:
        format = 'csr'
    fmt = matrix_format(X)
    if fmt == DENSE:
        return sp.csr_matrix(X).asformat(format)
    return X.asformat(format)
