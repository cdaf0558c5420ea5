import numbers

import numpy as np
from scipy import linalg
from scipy.sparse.linalg import svds

from sklearn.utils import check_random_state
from sklearn.utils.extmath import safe_sparse_dot, svd_flip

from .base import AbstractDecompositionModel
from .utils import explained_variance_ratio, flip_signs
from ..base import OnlineMixin
from ..exceptions import ShapeMismatch
from ..utils import set_verbosity
from ..validation import DENSE, as_dense


def _check_n_components(n_components):
    if (not isinstance(n_components, numbers.Integral)
            or isinstance(n_components, bool) or n_components < 1):
        raise ValueError('n_components must be a positive integer, got %r.'
                         % (n_components,))


def _check_alpha(alpha):
    if not isinstance(alpha, numbers.Real) or alpha < 0:
        raise ValueError('alpha must be a non-negative number, got %r.'
                         % (alpha,))


class TruncatedSVD(AbstractDecompositionModel):
    """Rank-k singular value decomposition ``X ~ (U S) V``.

    ``fit_transform`` returns ``U S`` and stores ``V`` in ``components_``.
    The data is not centered, so sparse matrices can be decomposed without
    densifying them when ``algorithm='arpack'``.

    Parameters
    ----------
    n_components : int
        Rank of the decomposition. Must not exceed the smaller dimension of
        the training data.
    algorithm : string, 'full' | 'arpack'
        SVD solver to use. 'full' runs LAPACK on a dense copy of the data,
        'arpack' uses the ARPACK wrapper in SciPy (scipy.sparse.linalg.svds)
        and works directly on sparse matrices.
    tol : float
        Tolerance for ARPACK. 0 means machine precision. Ignored by the full
        solver.
    alpha : float
        Ridge penalty used by ``transform`` when projecting new data onto the
        components.
    random_state : int, RandomState instance, or None
        Seeds the ARPACK starting vector. If int, random_state is the seed
        used by the random number generator; If RandomState instance,
        random_state is the random number generator; If None, the random
        number generator is the RandomState instance used by ``np.random``.
    logger : Logger
        The logger to use for messages when ``verbose=True`` in
        ``fit_transform``. If *None* is passed, a logger that writes to
        ``sys.stdout`` will be used.

    Attributes
    ----------
    components_ : ndarray, shape (n_components, n_features)
        The right singular vectors.
    singular_values_ : ndarray, shape (n_components,)
        The singular values, in decreasing order.
    explained_variance_ratio_ : ndarray, shape (n_components,)
        Fraction of the variance of the training data captured by each
        component.
    n_features_in_ : int
        Number of columns seen during fitting.
    """

    _valid_algorithms = ('full', 'arpack')

    def __init__(self, n_components=2, algorithm='full', tol=0., alpha=0.,
                 random_state=None, logger=None):
        _check_n_components(n_components)
        _check_alpha(alpha)
        if algorithm not in self._valid_algorithms:
            raise ValueError("invalid algorithm: '%s'" % algorithm)
        self.n_components = n_components
        self.algorithm = algorithm
        self.tol = tol
        self.alpha = alpha
        self.random_state = random_state
        self.logger = logger

    @property
    def preferred_format(self):
        """LAPACK needs a dense copy, ARPACK works on the input as is."""
        if self.algorithm == 'full':
            return DENSE
        return None

    def fit_transform(self, X, verbose=False):
        """Compute the decomposition of X and return ``U S``.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            Data matrix to be decomposed.
        verbose : bool
            If True, outputs status updates.

        Returns
        -------
        X_new : ndarray, shape (n_samples, n_components)
            Transformed data.
        """
        logger = set_verbosity(self._logger, verbose)
        X = self._check_input(X)

        n_samples, n_features = X.shape
        k = self.n_components
        max_rank = min(n_samples, n_features)
        if k > max_rank:
            raise ShapeMismatch(
                'n_components=%d must be at most min(n_samples, n_features)'
                '=%d.' % (k, max_rank))
        self._reset()

        if self.algorithm == 'arpack' and k < max_rank:
            logger.info('arpack svd of %s matrix, rank %d' % (X.shape, k))
            rng = check_random_state(self.random_state)
            v0 = rng.uniform(-1, 1, size=max_rank)
            U, S, VT = svds(X, k=k, tol=self.tol, v0=v0)
            # svds returns singular values in increasing order
            S = S[::-1]
            U, VT = U[:, ::-1], VT[::-1]
        else:
            logger.info('full svd of %s matrix, rank %d' % (X.shape, k))
            # arpack cannot compute a full rank decomposition
            U, S, VT = linalg.svd(as_dense(X), full_matrices=False)
            U, S, VT = U[:, :k], S[:k], VT[:k]

        U, VT = svd_flip(U, VT, u_based_decision=False)

        self.components_ = VT
        self.singular_values_ = S
        self.n_features_in_ = n_features

        if self.alpha:
            X_new = self.transform(X)
        else:
            X_new = U * S
        self.explained_variance_ratio_ = explained_variance_ratio(X, X_new)
        return X_new


class IncrementalSVD(OnlineMixin, AbstractDecompositionModel):
    """Rank-k singular value decomposition learned from batches of rows.

    Each call to ``partial_fit`` adds the batch to a running Gram matrix
    ``X^T X`` of all rows seen so far. The components are its leading
    eigenvectors, which are the right singular vectors of the stacked
    batches, so after any sequence of batches the components agree (up to
    sign) with a :class:`TruncatedSVD` fitted on all the rows at once.
    Memory use grows with ``n_features ** 2`` and not with the number of
    rows.

    Parameters
    ----------
    n_components : int
        Rank of the decomposition. Must not exceed the number of features.
    alpha : float
        Ridge penalty used by ``transform`` when projecting new data onto the
        components.
    logger : Logger
        The logger to use for messages when ``verbose=True``. If *None* is
        passed, a logger that writes to ``sys.stdout`` will be used.

    Attributes
    ----------
    components_ : ndarray, shape (n_components, n_features)
        The right singular vectors of the data seen so far.
    singular_values_ : ndarray, shape (n_components,)
        The singular values of the data seen so far, in decreasing order.
    gram_ : ndarray, shape (n_features, n_features)
        Running ``X^T X``.
    n_samples_seen_ : int
        Number of rows seen so far.
    n_features_in_ : int
        Number of columns, fixed by the first batch.
    """

    def __init__(self, n_components=2, alpha=0., logger=None):
        _check_n_components(n_components)
        _check_alpha(alpha)
        self.n_components = n_components
        self.alpha = alpha
        self.logger = logger

    def _check_rank(self, X):
        if self.n_components > X.shape[1]:
            raise ShapeMismatch(
                'n_components=%d must be at most n_features=%d.'
                % (self.n_components, X.shape[1]))

    def partial_fit(self, X, y=None, verbose=False):
        """Update the decomposition with a batch of rows.

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
        self._check_rank(X)
        self._check_partial_fit_features(X)
        n_samples, n_features = X.shape

        if not hasattr(self, 'gram_'):
            self.gram_ = np.zeros((n_features, n_features))
            self.n_samples_seen_ = 0

        self.gram_ += safe_sparse_dot(X.T, X, dense_output=True)
        self.n_samples_seen_ += n_samples
        logger.info('batch of %d rows, %d rows seen'
                    % (n_samples, self.n_samples_seen_))

        # eigh returns eigenvalues in increasing order
        eigvals, eigvecs = linalg.eigh(self.gram_)
        top = np.argsort(eigvals)[::-1][:self.n_components]
        self.singular_values_ = np.sqrt(np.clip(eigvals[top], 0., None))
        self.components_ = flip_signs(eigvecs[:, top].T)
        return self

    def fit_transform(self, X, verbose=False):
        """Fit the decomposition on X alone and return its coefficients.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            Data matrix to be decomposed.
        verbose : bool
            If True, outputs status updates.

        Returns
        -------
        X_new : ndarray, shape (n_samples, n_components)
            Transformed data.
        """
        X = self._check_input(X)
        self._check_rank(X)
        self._reset()
        self.partial_fit(X, verbose=verbose)
        return self.transform(X)
