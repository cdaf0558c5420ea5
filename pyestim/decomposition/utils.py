import numpy as np
from scipy import linalg
from scipy.sparse import issparse, csr_matrix

from sklearn.utils.extmath import safe_sparse_dot
from sklearn.utils.sparsefuncs import mean_variance_axis


def project(X, components, alpha=0.):
    """Least-squares coefficients of X in the basis of the components.

    Solves ``min_P ||X - P Q||^2 + alpha ||P||^2`` through the normal
    equations ``(Q Q^T + alpha I) P^T = Q X^T``.

    Parameters
    ----------
    X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
        Data matrix to project.
    components : ndarray, shape (n_components, n_features)
        The components Q.
    alpha : float
        Ridge penalty on the coefficients.

    Returns
    -------
    P : ndarray, shape (n_samples, n_components)
        The coefficients of each sample.
    """
    n_components = components.shape[0]
    gram = np.dot(components, components.T)
    if alpha:
        gram = gram + alpha * np.eye(n_components)
    rhs = safe_sparse_dot(X, components.T, dense_output=True)
    # lstsq rather than solve, rank deficient components have a singular gram
    P_t = linalg.lstsq(gram, np.asarray(rhs).T)[0]
    return P_t.T


def flip_signs(components):
    """Make the largest absolute entry of every component positive.

    Parameters
    ----------
    components : ndarray, shape (n_components, n_features)

    Returns
    -------
    components : ndarray, shape (n_components, n_features)
    """
    max_abs_cols = np.argmax(np.abs(components), axis=1)
    signs = np.sign(components[np.arange(components.shape[0]),
                               max_abs_cols])
    signs[signs == 0] = 1.
    return components * signs[:, np.newaxis]


def explained_variance_ratio(X, X_new):
    """Fraction of the per-feature variance of X captured by each column of
    X_new.

    Parameters
    ----------
    X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
        Original data.
    X_new : ndarray, shape (n_samples, n_components)
        Transformed data.

    Returns
    -------
    ratio : ndarray, shape (n_components,)
    """
    explained_variance = np.var(X_new, axis=0)
    if issparse(X):
        _, full_var = mean_variance_axis(csr_matrix(X), axis=0)
        full_var = full_var.sum()
    else:
        full_var = np.var(X, axis=0).sum()
    if full_var == 0:
        return np.zeros_like(explained_variance)
    return explained_variance / full_var
