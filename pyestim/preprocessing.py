"""Feature scaling written against the ``fit_transform``/``transform``
contract."""
import numpy as np

from sklearn.preprocessing import StandardScaler

from .base import AbstractTransformer, OnlineMixin
from .utils import set_verbosity
from .validation import DENSE, SPARSE


def _copy(value):
    if value is None:
        return None
    return np.array(value, copy=True)


class Standardizer(OnlineMixin, AbstractTransformer):
    """Removes the mean of every column and scales it to unit variance.

    Statistics can be accumulated from batches with ``partial_fit``. Sparse
    matrices cannot be centered without densifying them, so they are only
    accepted when ``with_mean=False``.

    Parameters
    ----------
    with_mean : bool
        If True, center the data before scaling.
    with_std : bool
        If True, scale the data to unit variance.
    logger : Logger
        The logger to use for messages when ``verbose=True``. If *None* is
        passed, a logger that writes to ``sys.stdout`` will be used.

    Attributes
    ----------
    mean_ : ndarray, shape (n_features,) or None
        Per-column mean of the data seen so far.
    var_ : ndarray, shape (n_features,) or None
        Per-column variance of the data seen so far.
    scale_ : ndarray, shape (n_features,) or None
        Per-column scaling factor.
    n_samples_seen_ : int or ndarray
        Number of samples seen so far.
    n_features_in_ : int
        Number of columns, fixed by the first batch.
    """

    def __init__(self, with_mean=True, with_std=True, logger=None):
        self.with_mean = with_mean
        self.with_std = with_std
        self.logger = logger

    @property
    def accepted_formats(self):
        if self.with_mean:
            return (DENSE,)
        return (DENSE, SPARSE)

    def partial_fit(self, X, y=None, verbose=False):
        """Update the column statistics with a batch of rows.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            A batch of data.
        y : ignored
        verbose : bool
            If True, outputs status updates.

        Returns
        -------
        self : object
            Returns the instance itself.
        """
        logger = set_verbosity(self._logger, verbose)
        X = self._check_input(X)
        self._check_partial_fit_features(X)

        if not hasattr(self, 'scaler_'):
            self.scaler_ = StandardScaler(with_mean=self.with_mean,
                                          with_std=self.with_std)
        self.scaler_.partial_fit(X)

        self.mean_ = _copy(self.scaler_.mean_)
        self.var_ = _copy(self.scaler_.var_)
        self.scale_ = _copy(self.scaler_.scale_)
        self.n_samples_seen_ = _copy(self.scaler_.n_samples_seen_)
        logger.info('batch of %d rows, %s rows seen'
                    % (X.shape[0], self.n_samples_seen_))
        return self

    def fit_transform(self, X, verbose=False):
        """Compute the column statistics of X and standardize it.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            Data to standardize.
        verbose : bool
            If True, outputs status updates.

        Returns
        -------
        X_new : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            The standardized data.
        """
        X = self._check_input(X)
        self._reset()
        self.partial_fit(X, verbose=verbose)
        return self.transform(X)

    def transform(self, X):
        """Standardize X with the fitted statistics.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            Data to standardize.

        Returns
        -------
        X_new : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            The standardized data, in the representation of X.
        """
        self._check_fitted(['scaler_'])
        X = self._check_input(X)
        self._check_features(X)
        return self.scaler_.transform(X, copy=True)

    def inverse_transform(self, X_new):
        """Undo the standardization.

        Parameters
        ----------
        X_new : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            Standardized data.

        Returns
        -------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
        """
        self._check_fitted(['scaler_'])
        X_new = self._check_input(X_new)
        self._check_features(X_new)
        return self.scaler_.inverse_transform(X_new, copy=True)
