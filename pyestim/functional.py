"""Subject-first call forms.

``predict(X, model)`` is exactly ``model.predict(X)``, and likewise for the
other operations. Putting the data first lets stages be composed left to
right without naming intermediate results::

    P = transform(X_test, fit(X, model, y))
"""


def fit(X, model, y=None, **kwargs):
    """Call ``model.fit(X, y, **kwargs)`` and return the fitted model."""
    return model.fit(X, y, **kwargs)


def partial_fit(X, model, y=None, **kwargs):
    """Call ``model.partial_fit(X, y, **kwargs)`` and return the model."""
    return model.partial_fit(X, y, **kwargs)


def fit_transform(X, model, **kwargs):
    """Return ``model.fit_transform(X, **kwargs)``."""
    return model.fit_transform(X, **kwargs)


def transform(X, model):
    """Return ``model.transform(X)``."""
    return model.transform(X)


def predict(X, model):
    """Return ``model.predict(X)``."""
    return model.predict(X)


def chain(X, *stages):
    """Apply fitted stages to X from left to right.

    Stages with a ``transform`` method (transformers, and pipelines ending
    in one) are applied with ``transform``. Stages that can only
    ``predict`` (estimators, and pipelines ending in one) must be the last
    stage.

    Parameters
    ----------
    X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
        Input of the first stage.
    *stages : fitted models

    Returns
    -------
    out : ndarray or scipy.sparse matrix
        Output of the last stage.
    """
    for idx, stage in enumerate(stages):
        if hasattr(stage, 'transform'):
            X = transform(X, stage)
        elif hasattr(stage, 'predict'):
            if idx != len(stages) - 1:
                raise TypeError('Only the last stage may be an estimator, '
                                'got %s at position %d.'
                                % (type(stage).__name__, idx))
            X = predict(X, stage)
        else:
            raise TypeError('Stage %d has neither transform nor predict: %r'
                            % (idx, stage))
    return X
