import pytest
import numpy as np
import scipy.sparse as sp

from numpy.testing import assert_allclose, assert_array_equal, assert_raises

from pyestim import (IncrementalSVD, LinearRegression, LogisticRegression,
                     OnlineLinearRegression, Standardizer, TruncatedSVD,
                     make_pipeline)
from pyestim.functional import (chain, fit, fit_transform, partial_fit,
                                predict, transform)


@pytest.mark.fast
def test_classification_scenario(int_data):
    """Tests that both call forms predict the same 100 labels."""
    X, y = int_data
    direct = LogisticRegression(max_iter=1000)
    direct.fit(X, y)
    subject_first = fit(X, LogisticRegression(max_iter=1000), y)

    y_direct = direct.predict(X)
    y_subject = predict(X, subject_first)
    assert y_direct.shape == (100,)
    assert_array_equal(y_subject, y_direct)
    assert_array_equal(predict(X, direct), direct.predict(X))


@pytest.mark.parametrize('model', [LinearRegression(),
                                   OnlineLinearRegression(),
                                   LogisticRegression(max_iter=1000)])
def test_estimators_identical(model, int_data):
    """Tests that the subject-first form is the method call."""
    X, y = int_data
    assert fit(X, model, y) is model
    for X_new in (X, X[:7], sp.csr_matrix(X)):
        assert_array_equal(predict(X_new, model), model.predict(X_new))


@pytest.mark.parametrize('klass', [Standardizer, TruncatedSVD,
                                   IncrementalSVD])
def test_transformers_identical(klass, int_data):
    """Tests fit_transform and transform in both forms."""
    X, _ = int_data
    a, b = klass(), klass()
    assert_allclose(fit_transform(X, a), b.fit_transform(X), rtol=1e-10, atol=1e-12)
    assert_array_equal(transform(X[:10], a), a.transform(X[:10]))


def test_partial_fit_identical(int_data):
    """Tests partial_fit in both forms."""
    X, y = int_data
    a, b = OnlineLinearRegression(), OnlineLinearRegression()
    assert partial_fit(X[:50], a, y[:50]) is a
    b.partial_fit(X[:50], y[:50])
    partial_fit(X[50:], a, y[50:])
    b.partial_fit(X[50:], y[50:])
    assert_array_equal(a.coef_, b.coef_)

    svd = IncrementalSVD()
    partial_fit(X, svd)
    assert svd.n_samples_seen_ == 100


def test_left_to_right_composition(int_data):
    """Tests nesting subject-first calls."""
    X, y = int_data
    scale, svd = Standardizer(), TruncatedSVD(n_components=3)
    P = fit_transform(fit_transform(X, scale), svd)
    lr = fit(P, LinearRegression(), y)
    y_nested = predict(transform(transform(X, scale), svd), lr)
    assert_array_equal(y_nested, lr.predict(svd.transform(scale.transform(X))))
    assert_array_equal(chain(X, scale, svd, lr), y_nested)


def test_chain_estimator_must_be_last(int_data):
    """Tests that an estimator cannot feed another stage."""
    X, y = int_data
    lr = LinearRegression().fit(X, y)
    scale = Standardizer()
    scale.fit_transform(X)
    assert_raises(TypeError, chain, X, lr, scale)
    assert_array_equal(chain(X, scale), scale.transform(X))
    assert_array_equal(chain(X), X)


def test_chain_with_pipelines(int_data):
    """Tests that fitted pipelines are chained by what they can do."""
    X, y = int_data
    front = make_pipeline(Standardizer(), TruncatedSVD(n_components=3))
    P = front.fit_transform(X)
    back = make_pipeline(Standardizer(), LinearRegression()).fit(P, y)

    assert_array_equal(chain(X, front, back), back.predict(front.transform(X)))
    assert_raises(TypeError, chain, X, back, front)
    assert_raises(TypeError, chain, X, object())
