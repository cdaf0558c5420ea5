import numpy as np

from sklearn.linear_model import LogisticRegression as _LogisticRegression
from sklearn.utils.extmath import safe_sparse_dot
from sklearn.utils.multiclass import check_classification_targets

from ..base import AbstractEstimator
from ..exceptions import ShapeMismatch
from ..utils import set_verbosity, sigmoid, softmax


class LogisticRegression(AbstractEstimator):
    """L2-regularized logistic regression classifier.

    Binary problems use a single logistic output, problems with more than two
    classes use the multinomial (softmax) model. The optimization is done by
    ``scikit-learn``'s L-BFGS solver.

    Parameters
    ----------
    C : float
        Inverse of the regularization strength.
    fit_intercept : bool
        Whether to calculate the intercept for this model.
    max_iter : int
        Maximum number of iterations of the solver.
    tol : float
        Stopping tolerance of the solver.
    random_state : int, RandomState instance, or None
        Passed to the solver.
    logger : Logger
        The logger to use for messages when ``verbose=True`` in ``fit``.
        If *None* is passed, a logger that writes to ``sys.stdout`` will be
        used.

    Attributes
    ----------
    classes_ : ndarray, shape (n_classes,)
        The class labels, sorted.
    coef_ : ndarray, shape (1, n_features) or (n_classes, n_features)
        Coefficients of the decision function.
    intercept_ : ndarray, shape (1,) or (n_classes,)
        Intercepts of the decision function.
    n_iter_ : int
        Number of solver iterations.
    n_features_in_ : int
        Number of columns seen during fitting.
    """

    def __init__(self, C=1., fit_intercept=True, max_iter=100, tol=1e-4,
                 random_state=None, logger=None):
        if C <= 0:
            raise ValueError('C must be positive, got %r.' % (C,))
        self.C = C
        self.fit_intercept = fit_intercept
        self.max_iter = max_iter
        self.tol = tol
        self.random_state = random_state
        self.logger = logger

    def fit(self, X, y, verbose=False):
        """Fit the classifier.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            The design matrix.
        y : array-like, shape (n_samples,)
            Class labels, numeric or categorical.
        verbose : bool
            A switch indicating whether the fitting should print out messages
            displaying progress.
        """
        logger = set_verbosity(self._logger, verbose)
        X, y = self._check_input_target(X, y)
        if y.ndim == 2:
            if y.shape[1] > 1:
                raise ShapeMismatch('y should either have shape ' +
                                    '(n_samples, ) or (n_samples, 1).')
            y = y.ravel()
        check_classification_targets(y)
        self._reset()

        lr = _LogisticRegression(C=self.C,
                                 fit_intercept=self.fit_intercept,
                                 max_iter=self.max_iter,
                                 tol=self.tol,
                                 solver='lbfgs',
                                 random_state=self.random_state)
        lr.fit(X, y)

        self.classes_ = np.array(lr.classes_, copy=True)
        self.coef_ = np.array(lr.coef_, copy=True)
        self.intercept_ = np.array(lr.intercept_, copy=True)
        self.n_iter_ = int(np.max(lr.n_iter_))
        self.n_features_in_ = X.shape[1]
        logger.info('fit %d classes in %d iterations'
                    % (self.classes_.size, self.n_iter_))
        return self

    def decision_function(self, X):
        """Linear scores of each sample.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            The design matrix.

        Returns
        -------
        scores : ndarray, shape (n_samples,) or (n_samples, n_classes)
            A single column of log-odds for binary problems.
        """
        self._check_fitted(['coef_', 'intercept_', 'classes_'])
        X = self._check_input(X)
        self._check_features(X)
        scores = safe_sparse_dot(X, self.coef_.T,
                                 dense_output=True) + self.intercept_
        if scores.shape[1] == 1:
            return scores.ravel()
        return scores

    def predict_proba(self, X):
        """Class probabilities of each sample.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            The design matrix.

        Returns
        -------
        proba : ndarray, shape (n_samples, n_classes)
            Columns follow the order of ``classes_``.
        """
        scores = self.decision_function(X)
        if scores.ndim == 1:
            p = sigmoid(scores)
            return np.column_stack([1. - p, p])
        return softmax(scores, axis=1)

    def predict(self, X):
        """Predict class labels.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            The design matrix.

        Returns
        -------
        y_pred : ndarray, shape (n_samples,)
            One label from ``classes_`` per row.
        """
        scores = self.decision_function(X)
        if scores.ndim == 1:
            indices = (scores > 0).astype(int)
        else:
            indices = np.argmax(scores, axis=1)
        return self.classes_[indices]
