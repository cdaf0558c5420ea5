import abc as _abc

import numpy as np

from ..base import AbstractTransformer
from ..exceptions import ShapeMismatch
from .utils import project


class AbstractDecompositionModel(AbstractTransformer, metaclass=_abc.ABCMeta):
    """Base class for models that factor a data matrix as ``X ~ P Q``.

    ``fit_transform`` returns the factor P and stores the factor Q in
    ``components_``, an array of shape (n_components, n_features) whose
    columns line up with the columns of the training data. ``transform``
    then finds, for new data, the P' that best reconstructs it from the
    stored components in the least-squares sense.

    Subclasses may define a non-negative ``alpha`` hyperparameter, used as a
    ridge penalty when projecting new data.
    """

    @_abc.abstractmethod
    def fit_transform(self, X, verbose=False):
        """Fit the decomposition and return the factor P.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            Data matrix to be decomposed.
        verbose : bool
            If True, log progress messages.

        Returns
        -------
        X_new : ndarray, shape (n_samples, n_components)
            Transformed data.
        """
        pass

    def transform(self, X):
        """Apply dimensionality reduction to X.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            Data matrix to be transformed.

        Returns
        -------
        X_new : ndarray, shape (n_samples, n_components)
            The transformed data matrix.
        """
        self._check_fitted(['components_'])
        X = self._check_input(X)
        n_features = self.components_.shape[1]

        if X.shape[1] != n_features:
            raise ShapeMismatch(
                'Incompatible shape: cannot project %s onto components %s'
                % (X.shape, self.components_.shape))

        return project(X, self.components_, alpha=getattr(self, 'alpha', 0.))

    def inverse_transform(self, X_new):
        """Transform data back to its original space.

        Parameters
        ----------
        X_new : array-like, shape (n_samples, n_components)
            Transformed data matrix.

        Returns
        -------
        X : ndarray, shape (n_samples, n_features)
            Data matrix of original shape.
        """
        self._check_fitted(['components_'])
        X_new = np.asarray(X_new)
        n_components = self.components_.shape[0]

        if X_new.ndim != 2 or X_new.shape[1] != n_components:
            raise ShapeMismatch(
                'Incompatible shape: cannot multiply %s with %s.'
                % (X_new.shape, self.components_.shape))

        return np.matmul(X_new, self.components_)
