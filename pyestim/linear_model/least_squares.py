import numbers

import numpy as np
from scipy import linalg

from sklearn.linear_model import LinearRegression as _LinearRegression
from sklearn.utils.extmath import safe_sparse_dot

from ..base import AbstractEstimator, OnlineMixin
from ..exceptions import ShapeMismatch
from ..utils import set_verbosity


class LinearModelMixin(object):
    """Prediction shared by the linear estimators."""

    def predict(self, X):
        """Predicts responses given a design matrix.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            The design matrix.

        Returns
        -------
        y : ndarray, shape (n_samples,) or (n_samples, n_targets)
            Predicted response.
        """
        self._check_fitted(['coef_', 'intercept_'])
        X = self._check_input(X)
        self._check_features(X)
        return safe_sparse_dot(X, self.coef_.T,
                               dense_output=True) + self.intercept_


class LinearRegression(LinearModelMixin, AbstractEstimator):
    """Ordinary least squares regression.

    Parameters
    ----------
    fit_intercept : bool
        Whether to calculate the intercept for this model. If set to False,
        no intercept will be used in calculations (e.g. data is expected to be
        already centered).
    logger : Logger
        The logger to use for messages when ``verbose=True`` in ``fit``.
        If *None* is passed, a logger that writes to ``sys.stdout`` will be
        used.

    Attributes
    ----------
    coef_ : ndarray, shape (n_features,) or (n_targets, n_features)
        Estimated coefficients for the linear regression problem.
    intercept_ : float or ndarray, shape (n_targets,)
        Independent term in the linear model.
    n_features_in_ : int
        Number of columns seen during fitting.
    """

    def __init__(self, fit_intercept=True, logger=None):
        self.fit_intercept = fit_intercept
        self.logger = logger

    def fit(self, X, y, verbose=False):
        """Fit the least squares coefficients.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            The design matrix.
        y : ndarray, shape (n_samples,) or (n_samples, n_targets)
            Response vector.
        verbose : bool
            A switch indicating whether the fitting should print out messages
            displaying progress.
        """
        logger = set_verbosity(self._logger, verbose)
        X, y = self._check_input_target(X, y, y_numeric=True)
        self._reset()

        lm = _LinearRegression(fit_intercept=self.fit_intercept)
        lm.fit(X, y)
        logger.info('fit %d coefficients on %d samples'
                    % (lm.coef_.size, X.shape[0]))

        # copies, the solver's arrays are not shared
        self.coef_ = np.array(lm.coef_, copy=True)
        self.intercept_ = np.array(lm.intercept_, copy=True)
        if self.intercept_.ndim == 0:
            self.intercept_ = float(self.intercept_)
        self.n_features_in_ = X.shape[1]
        return self


class OnlineLinearRegression(OnlineMixin, LinearModelMixin,
                             AbstractEstimator):
    """Least squares regression fitted from batches of samples.

    The model keeps the sufficient statistics of least squares (sample
    count, column sums and the cross products ``X^T X`` and ``X^T y``) and
    re-solves the normal equations after every batch. Its coefficients after
    any sequence of batches equal those of :class:`LinearRegression` fitted on
    all the samples at once (when ``alpha=0``).

    Parameters
    ----------
    fit_intercept : bool
        Whether to calculate the intercept for this model.
    alpha : float
        Ridge penalty added to the diagonal of the normal equations.
    logger : Logger
        The logger to use for messages when ``verbose=True``. If *None* is
        passed, a logger that writes to ``sys.stdout`` will be used.

    Attributes
    ----------
    coef_ : ndarray, shape (n_features,) or (n_targets, n_features)
        Estimated coefficients for the linear regression problem.
    intercept_ : float or ndarray, shape (n_targets,)
        Independent term in the linear model.
    n_samples_seen_ : int
        Number of samples seen so far.
    n_features_in_ : int
        Number of columns, fixed by the first batch.
    """

    def __init__(self, fit_intercept=True, alpha=0., logger=None):
        if not isinstance(alpha, numbers.Real) or alpha < 0:
            raise ValueError('alpha must be a non-negative number, got %r.'
                             % (alpha,))
        self.fit_intercept = fit_intercept
        self.alpha = alpha
        self.logger = logger

    def fit(self, X, y, verbose=False):
        """Fit the model on X and y alone, discarding previous batches.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            The design matrix.
        y : ndarray, shape (n_samples,) or (n_samples, n_targets)
            Response vector.
        verbose : bool
            If True, outputs status updates.
        """
        X, y = self._check_input_target(X, y, y_numeric=True)
        self._reset()
        return self.partial_fit(X, y, verbose=verbose)

    def partial_fit(self, X, y=None, verbose=False):
        """Update the model with a batch of samples.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            A batch of the design matrix.
        y : ndarray, shape (n_samples,) or (n_samples, n_targets)
            The responses for the batch.
        verbose : bool
            If True, outputs status updates.
        """
        logger = set_verbosity(self._logger, verbose)
        X, y = self._check_input_target(X, y, y_numeric=True)

        if hasattr(self, 'y_sum_') and y.shape[1:] != self.y_sum_.shape:
            raise ShapeMismatch(
                'y has shape %s, earlier batches had targets of shape %s.'
                % (y.shape[1:], self.y_sum_.shape))
        self._check_partial_fit_features(X)

        n_samples, n_features = X.shape
        if not hasattr(self, 'n_samples_seen_'):
            self.n_samples_seen_ = 0
            self.x_sum_ = np.zeros(n_features)
            self.y_sum_ = np.zeros(y.shape[1:])
            self.xtx_ = np.zeros((n_features, n_features))
            self.xty_ = np.zeros((n_features,) + y.shape[1:])

        self.n_samples_seen_ += n_samples
        self.x_sum_ += np.asarray(X.sum(axis=0)).ravel()
        self.y_sum_ += y.sum(axis=0)
        self.xtx_ += safe_sparse_dot(X.T, X, dense_output=True)
        self.xty_ += safe_sparse_dot(X.T, y, dense_output=True)
        logger.info('batch of %d samples, %d samples seen'
                    % (n_samples, self.n_samples_seen_))

        self._solve()
        return self

    def _solve(self):
        """Solve the normal equations from the running statistics."""
        n = self.n_samples_seen_
        n_features = self.x_sum_.size
        if self.fit_intercept:
            x_mean = self.x_sum_ / n
            y_mean = self.y_sum_ / n
            gram = self.xtx_ - n * np.outer(x_mean, x_mean)
            cross = self.xty_ - n * np.multiply.outer(x_mean, y_mean)
        else:
            gram = self.xtx_
            cross = self.xty_
        if self.alpha:
            gram = gram + self.alpha * np.eye(n_features)

        coef = linalg.lstsq(gram, cross)[0]
        self.coef_ = coef.T
        if self.fit_intercept:
            self.intercept_ = y_mean - np.dot(x_mean, coef)
        else:
            self.intercept_ = np.zeros(self.y_sum_.shape)
        if np.ndim(self.intercept_) == 0:
            self.intercept_ = float(self.intercept_)
