"""Abstract base classes for estimators, transformers and online models.

Every model in ``pyestim`` follows the same two-phase life cycle:

1. Construction fixes the hyperparameters. Nothing data dependent happens in
   ``__init__`` and the hyperparameters cannot be changed afterwards;
   :meth:`AbstractModel.with_params` returns a new, unfitted model instead.
2. A training call (``fit``, ``fit_transform`` or ``partial_fit``) moves the
   model into the fitted state. Learned parameters are stored as public
   attributes with a trailing underscore (``coef_``, ``components_``, ...)
   and are owned by the instance.

Models are mutable and are not safe to call concurrently from several
threads. Callers must serialize calls on a single instance.
"""
import abc as _abc

from sklearn.base import BaseEstimator

from .utils import check_logger
from .validation import (DENSE, SPARSE, check_fitted, check_matrix,
                         check_n_features, check_X_y)


class AbstractModel(BaseEstimator, metaclass=_abc.ABCMeta):
    """Shared behavior of all models.

    Subclasses declare the matrix representations they accept in
    ``_accepted_formats`` and the one they compute on in
    ``_preferred_format`` (``None`` keeps the representation supplied by the
    caller). Subclasses whose accepted formats depend on hyperparameters
    override the :attr:`accepted_formats` property.
    """

    _accepted_formats = (DENSE, SPARSE)
    _preferred_format = None

    @property
    def accepted_formats(self):
        """Matrix formats this model accepts."""
        return self._accepted_formats

    @property
    def preferred_format(self):
        """Matrix format inputs are converted to before computation."""
        return self._preferred_format

    def set_params(self, **params):
        """Hyperparameters are fixed at construction, use ``with_params``."""
        raise AttributeError(
            '%s hyperparameters are fixed at construction; use '
            'with_params() to obtain a reconfigured copy.'
            % type(self).__name__)

    def with_params(self, **params):
        """Return a new, unfitted model with some hyperparameters replaced.

        Parameters
        ----------
        **params : dict
            Hyperparameter values to change.

        Returns
        -------
        model : AbstractModel
            A new instance of the same class.
        """
        current = self.get_params(deep=False)
        for key in params:
            if key not in current:
                raise ValueError('Invalid parameter %s for %s.'
                                 % (key, type(self).__name__))
        current.update(params)
        return type(self)(**current)

    @property
    def _logger(self):
        return check_logger(getattr(self, 'logger', None),
                            'pyestim.%s' % type(self).__name__)

    def _reset(self):
        """Discard all learned state."""
        for key in list(vars(self)):
            if key.endswith('_') and not key.startswith('_'):
                delattr(self, key)

    def _check_input(self, X):
        return check_matrix(X, accepted_formats=self.accepted_formats,
                            preferred_format=self.preferred_format)

    def _check_input_target(self, X, y, y_numeric=False):
        return check_X_y(X, y, accepted_formats=self.accepted_formats,
                         preferred_format=self.preferred_format,
                         y_numeric=y_numeric)

    def _check_fitted(self, attributes=None):
        check_fitted(self, attributes)

    def _check_features(self, X):
        check_n_features(X, self.n_features_in_)


class AbstractEstimator(AbstractModel):
    """Models trained on a design matrix and a target that make predictions.
    """

    @_abc.abstractmethod
    def fit(self, X, y, verbose=False):
        """Fit the model.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            The design matrix.
        y : array-like, shape (n_samples,) or (n_samples, n_targets)
            The target.
        verbose : bool
            If True, log progress messages.

        Returns
        -------
        self : object
            Returns the instance itself.
        """
        pass

    @_abc.abstractmethod
    def predict(self, X):
        """Predict targets for X.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            The design matrix.

        Returns
        -------
        y_pred : ndarray, shape (n_samples,) or (n_samples, n_targets)
            One prediction per row of X.
        """
        pass


class AbstractTransformer(AbstractModel):
    """Models that map a matrix to a matrix with the same number of rows."""

    @_abc.abstractmethod
    def fit_transform(self, X, verbose=False):
        """Fit the model with X and return the transformed X.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            Training data.
        verbose : bool
            If True, log progress messages.

        Returns
        -------
        X_new : ndarray or scipy.sparse matrix, shape (n_samples, n_out)
            The transformed data.
        """
        pass

    @_abc.abstractmethod
    def transform(self, X):
        """Apply the fitted transformation to X.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            Data to transform.

        Returns
        -------
        X_new : ndarray or scipy.sparse matrix, shape (n_samples, n_out)
            The transformed data.
        """
        pass


class OnlineMixin(metaclass=_abc.ABCMeta):
    """Mixin for models that can be trained incrementally.

    The first call to ``partial_fit`` fixes the number of features; every
    later batch must have the same number of columns.
    """

    @_abc.abstractmethod
    def partial_fit(self, X, y=None, verbose=False):
        """Update the learned state with a batch of data.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            A batch of training data.
        y : array-like, shape (n_samples,) or None
            The target for the batch, for estimators.
        verbose : bool
            If True, log progress messages.

        Returns
        -------
        self : object
            Returns the instance itself.
        """
        pass

    def _check_partial_fit_features(self, X):
        """Record the number of features on the first batch, check it after.
        """
        if hasattr(self, 'n_features_in_'):
            check_n_features(X, self.n_features_in_)
        else:
            self.n_features_in_ = X.shape[1]


def is_estimator(model):
    """Whether *model* supports ``fit``/``predict``."""
    return isinstance(model, AbstractEstimator)


def is_transformer(model):
    """Whether *model* supports ``fit_transform``/``transform``."""
    return isinstance(model, AbstractTransformer)


def is_decomposer(model):
    """Whether *model* is a matrix decomposition model."""
    # imported here, decomposition.base depends on this module
    from .decomposition.base import AbstractDecompositionModel
    return isinstance(model, AbstractDecompositionModel)


def is_online(model):
    """Whether *model* supports ``partial_fit``."""
    return isinstance(model, OnlineMixin)
