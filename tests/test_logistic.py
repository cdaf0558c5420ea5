import pytest
import numpy as np
import scipy.sparse as sp

from numpy.testing import assert_allclose, assert_array_equal, assert_raises
from sklearn.datasets import make_classification
from sklearn.linear_model import LogisticRegression as SkLogisticRegression

from pyestim.linear_model import LogisticRegression
from pyestim.exceptions import ShapeMismatch


def test_binary_scenario(int_data):
    """Tests fit/predict on 100 rows of integers with binary labels."""
    X, y = int_data
    lr = LogisticRegression(max_iter=1000)
    assert lr.fit(X, y) is lr
    y_pred = lr.predict(X)
    assert y_pred.shape == (100,)
    assert set(np.unique(y_pred)) <= {0, 1}
    assert_array_equal(lr.classes_, [0, 1])
    assert lr.coef_.shape == (1, 10)


def test_matches_sklearn():
    """Tests predictions against scikit-learn's classifier."""
    X, y = make_classification(n_samples=200, n_features=6,
                               random_state=7)
    lr = LogisticRegression(max_iter=1000).fit(X, y)
    sk = SkLogisticRegression(max_iter=1000).fit(X, y)
    assert_allclose(lr.coef_, sk.coef_, rtol=1e-6)
    assert_array_equal(lr.predict(X), sk.predict(X))
    assert_allclose(lr.predict_proba(X), sk.predict_proba(X), rtol=1e-6)


def test_multiclass_and_string_labels():
    """Tests a multinomial problem with categorical labels."""
    X, y = make_classification(n_samples=300, n_features=6, n_informative=4,
                               n_classes=3, random_state=1)
    labels = np.array(['a', 'b', 'c'])[y]
    lr = LogisticRegression(max_iter=1000).fit(X, labels)
    assert_array_equal(lr.classes_, ['a', 'b', 'c'])
    proba = lr.predict_proba(X)
    assert proba.shape == (300, 3)
    assert_allclose(proba.sum(axis=1), 1.)
    y_pred = lr.predict(X)
    assert set(y_pred) <= {'a', 'b', 'c'}
    assert_array_equal(y_pred, lr.classes_[np.argmax(proba, axis=1)])
    sk = SkLogisticRegression(max_iter=1000).fit(X, labels)
    assert_array_equal(y_pred, sk.predict(X))
    assert np.mean(y_pred == labels) >= 0.7


def test_column_target():
    """Tests that a (n_samples, 1) target is accepted."""
    X, y = make_classification(n_samples=50, n_features=4, random_state=2)
    lr = LogisticRegression().fit(X, y[:, np.newaxis])
    assert lr.predict(X).shape == (50,)
    assert_raises(ShapeMismatch, LogisticRegression().fit, X,
                  np.column_stack([y, y]))


def test_continuous_target_rejected():
    """Tests that a continuous target is not a classification problem."""
    rng = np.random.RandomState(0)
    X = rng.normal(size=(20, 3))
    assert_raises(ValueError, LogisticRegression().fit, X, rng.normal(size=20))


def test_sparse_input():
    """Tests that sparse input gives the same classifier as dense input."""
    X, y = make_classification(n_samples=100, n_features=5, random_state=4)
    dense = LogisticRegression(max_iter=1000, tol=1e-8).fit(X, y)
    sparse = LogisticRegression(max_iter=1000, tol=1e-8).fit(
        sp.csr_matrix(X), y)
    assert_allclose(dense.coef_, sparse.coef_, rtol=1e-3, atol=1e-4)
    assert_array_equal(dense.predict(X), sparse.predict(sp.csr_matrix(X)))


def test_invalid_C():
    """Tests hyperparameter validation at construction."""
    assert_raises(ValueError, LogisticRegression, C=0.)


def test_predict_column_mismatch(int_data):
    """Tests that predict checks the number of columns."""
    X, y = int_data
    lr = LogisticRegression(max_iter=1000).fit(X, y)
    assert_raises(ShapeMismatch, lr.predict, X[:, :9])
