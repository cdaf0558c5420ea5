import pytest
import numpy as np

from numpy.testing import assert_allclose, assert_array_equal, assert_raises

from pyestim import (IncrementalSVD, LinearRegression, LogisticRegression,
                     OnlineLinearRegression, Pipeline, Standardizer,
                     TruncatedSVD, make_pipeline)
from pyestim.base import AbstractTransformer
from pyestim.exceptions import (NotFittedError, ShapeMismatch,
                                TypeMismatch)


class DropFirstRow(AbstractTransformer):
    """Misbehaving stage that loses a row."""

    def __init__(self, logger=None):
        self.logger = logger

    def fit_transform(self, X, verbose=False):
        self.n_features_in_ = X.shape[1]
        return X[1:]

    def transform(self, X):
        return X[1:]


def test_fit_predict(regression_data):
    """Tests a standardize, decompose, regress pipeline."""
    X, y, _ = regression_data
    pipe = Pipeline([('scale', Standardizer()),
                     ('svd', TruncatedSVD(n_components=3)),
                     ('ols', LinearRegression())])
    assert pipe.fit(X, y) is pipe
    y_pred = pipe.predict(X)
    assert y_pred.shape == (X.shape[0],)

    # the same stages applied by hand
    scale = Standardizer()
    svd = TruncatedSVD(n_components=3)
    ols = LinearRegression()
    P = svd.fit_transform(scale.fit_transform(X))
    ols.fit(P, y)
    assert_allclose(y_pred, ols.predict(svd.transform(scale.transform(X))))


def test_fit_transform_and_transform(int_data):
    """Tests a pipeline that ends with a transformer."""
    X, _ = int_data
    pipe = make_pipeline(Standardizer(), TruncatedSVD(n_components=2))
    P = pipe.fit_transform(X)
    assert P.shape == (100, 2)
    assert_allclose(pipe.transform(X), P, atol=1e-8)
    assert not hasattr(pipe, 'predict')


def test_available_operations():
    """Tests that operations depend on the kind of the stages."""
    estimating = make_pipeline(Standardizer(), LinearRegression())
    assert hasattr(estimating, 'predict')
    assert not hasattr(estimating, 'transform')
    assert not hasattr(estimating, 'fit_transform')
    assert not hasattr(estimating, 'partial_fit')

    online = make_pipeline(Standardizer(), IncrementalSVD(),
                           OnlineLinearRegression())
    assert hasattr(online, 'partial_fit')
    assert hasattr(online, 'predict')


def test_partial_fit():
    """Tests batch updates through a pipeline of online stages."""
    rng = np.random.RandomState(1)
    X = rng.normal(size=(90, 5))
    y = np.dot(X, rng.normal(size=5))
    pipe = make_pipeline(Standardizer(), IncrementalSVD(n_components=5),
                         OnlineLinearRegression())
    for idxs in np.array_split(np.arange(90), 3):
        assert pipe.partial_fit(X[idxs], y[idxs]) is pipe
    assert pipe['standardizer'].n_samples_seen_ == 90
    assert pipe['incrementalsvd'].n_samples_seen_ == 90
    assert pipe['onlinelinearregression'].n_samples_seen_ == 90
    assert pipe.predict(X).shape == (90,)


def test_predict_before_fit(regression_data):
    """Tests that an unfitted pipeline cannot predict."""
    X, _, _ = regression_data
    pipe = make_pipeline(Standardizer(), LinearRegression())
    assert_raises(NotFittedError, pipe.predict, X)


def test_row_count_is_preserved(regression_data):
    """Tests that a stage dropping rows is rejected."""
    X, y, _ = regression_data
    pipe = make_pipeline(DropFirstRow(), LinearRegression())
    assert_raises(ShapeMismatch, pipe.fit, X, y)


def test_errors_propagate(regression_data):
    """Tests that stage errors reach the caller unchanged."""
    X, y, _ = regression_data
    pipe = make_pipeline(Standardizer(), LinearRegression())
    assert_raises(TypeMismatch, pipe.fit, X.tolist(), y)
    assert_raises(ShapeMismatch, pipe.fit, X, y[:-1])
    pipe.fit(X, y)
    assert_raises(ShapeMismatch, pipe.predict, X[:, :4])


def test_construction_errors():
    """Tests validation of the stage list."""
    assert_raises(ValueError, Pipeline, [])
    assert_raises(TypeError, Pipeline, [('ols', LinearRegression()),
                                        ('scale', Standardizer())])
    assert_raises(ValueError, Pipeline, [('a', Standardizer()),
                                         ('a', LinearRegression())])
    assert_raises(ValueError, Pipeline, [Standardizer()])
    assert_raises(TypeError, Pipeline, [('x', np.zeros(3))])


def test_make_pipeline_names():
    """Tests generated stage names."""
    pipe = make_pipeline(TruncatedSVD(n_components=3),
                         TruncatedSVD(n_components=2),
                         LogisticRegression())
    names = [name for name, _ in pipe.steps]
    assert names == ['truncatedsvd-1', 'truncatedsvd-2',
                     'logisticregression']
    assert len(pipe) == 3
    assert pipe[0] is pipe['truncatedsvd-1']
    assert pipe.named_steps['logisticregression'] is pipe[-1]
