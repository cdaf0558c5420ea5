"""Composition of models into an ordered sequence of stages.

Every stage consumes the matrix produced by the previous one, so stages only
have to agree on the matrix they pass along. Row ``i`` of every
intermediate matrix refers to the same observation as row ``i`` of the
input; a stage that changes the number of rows is rejected.
"""
from collections import Counter

from sklearn.base import BaseEstimator
from sklearn.utils.metaestimators import available_if

from .base import AbstractModel, is_estimator, is_online, is_transformer
from .exceptions import ShapeMismatch
from .utils import check_logger, set_verbosity
from .validation import matrix_format


def _final_is_estimator(pipeline):
    return is_estimator(pipeline._final_stage)


def _final_is_transformer(pipeline):
    return is_transformer(pipeline._final_stage)


def _all_online(pipeline):
    return all(is_online(stage) for _, stage in pipeline.steps)


def _n_rows(X):
    matrix_format(X)
    return X.shape[0]


def _check_rows(name, X, n_rows):
    if X.shape[0] != n_rows:
        raise ShapeMismatch(
            "Stage '%s' returned %d rows for an input of %d rows."
            % (name, X.shape[0], n_rows))


class Pipeline(BaseEstimator):
    """An ordered sequence of stages applied one after the other.

    All stages but the last must be transformers (or decomposers). The last
    stage may be an estimator, in which case the pipeline supports ``fit``
    and ``predict``, or a transformer, in which case it supports
    ``fit_transform`` and ``transform``. ``partial_fit`` is available when
    every stage is an online model.

    Parameters
    ----------
    steps : list of (str, model) tuples
        The stages, in the order they are applied. Names must be unique.
    logger : Logger
        The logger to use for messages when ``verbose=True``. If *None* is
        passed, a logger that writes to ``sys.stdout`` will be used.
    """

    def __init__(self, steps, logger=None):
        self.steps = list(steps)
        self.logger = logger
        self._validate_steps()

    def _validate_steps(self):
        if len(self.steps) == 0:
            raise ValueError('A pipeline needs at least one stage.')
        names = []
        for step in self.steps:
            if not (isinstance(step, tuple) and len(step) == 2):
                raise ValueError('Pipeline steps must be (name, model) '
                                 'tuples, got %r.' % (step,))
            name, stage = step
            if not isinstance(stage, AbstractModel):
                raise TypeError("Stage '%s' is not a model: %r"
                                % (name, stage))
            names.append(name)
        duplicates = [n for n, count in Counter(names).items() if count > 1]
        if duplicates:
            raise ValueError('Stage names must be unique, got duplicates %s'
                             % duplicates)
        for name, stage in self.steps[:-1]:
            if not is_transformer(stage):
                raise TypeError("Intermediate stage '%s' must be a "
                                "transformer, got %s."
                                % (name, type(stage).__name__))

    @property
    def named_steps(self):
        """Stages keyed by name."""
        return dict(self.steps)

    @property
    def _final_stage(self):
        return self.steps[-1][1]

    @property
    def _logger(self):
        return check_logger(self.logger, 'pyestim.Pipeline')

    def __len__(self):
        return len(self.steps)

    def __getitem__(self, ind):
        if isinstance(ind, str):
            return self.named_steps[ind]
        return self.steps[ind][1]

    def _fit_intermediate(self, X, verbose):
        logger = set_verbosity(self._logger, verbose)
        n_rows = _n_rows(X)
        Xt = X
        for name, stage in self.steps[:-1]:
            logger.info("fitting stage '%s'" % name)
            Xt = stage.fit_transform(Xt, verbose=verbose)
            _check_rows(name, Xt, n_rows)
        return Xt, n_rows

    def _transform_intermediate(self, X):
        n_rows = _n_rows(X)
        Xt = X
        for name, stage in self.steps[:-1]:
            Xt = stage.transform(Xt)
            _check_rows(name, Xt, n_rows)
        return Xt, n_rows

    def fit(self, X, y=None, verbose=False):
        """Fit every stage in turn.

        Intermediate stages are fit with ``fit_transform``; the last stage
        with ``fit(Xt, y)`` if it is an estimator and ``fit_transform(Xt)``
        otherwise.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            Training data.
        y : array-like, shape (n_samples,) or None
            Target, passed to a final estimator.
        verbose : bool
            If True, outputs status updates.

        Returns
        -------
        self : object
            Returns the instance itself.
        """
        Xt, _ = self._fit_intermediate(X, verbose)
        name, final = self.steps[-1]
        self._logger.info("fitting stage '%s'" % name)
        if is_estimator(final):
            final.fit(Xt, y, verbose=verbose)
        else:
            final.fit_transform(Xt, verbose=verbose)
        return self

    @available_if(_final_is_transformer)
    def fit_transform(self, X, verbose=False):
        """Fit every stage and return the output of the last one.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            Training data.
        verbose : bool
            If True, outputs status updates.

        Returns
        -------
        X_new : ndarray or scipy.sparse matrix, shape (n_samples, n_out)
        """
        Xt, n_rows = self._fit_intermediate(X, verbose)
        name, final = self.steps[-1]
        self._logger.info("fitting stage '%s'" % name)
        Xt = final.fit_transform(Xt, verbose=verbose)
        _check_rows(name, Xt, n_rows)
        return Xt

    @available_if(_all_online)
    def partial_fit(self, X, y=None, verbose=False):
        """Update every stage with a batch of rows.

        Each intermediate stage is updated with the batch and then transforms
        it for the next stage.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            A batch of training data.
        y : array-like, shape (n_samples,) or None
            Target for the batch, passed to a final estimator.
        verbose : bool
            If True, outputs status updates.

        Returns
        -------
        self : object
            Returns the instance itself.
        """
        logger = set_verbosity(self._logger, verbose)
        n_rows = _n_rows(X)
        Xt = X
        for name, stage in self.steps[:-1]:
            logger.info("updating stage '%s'" % name)
            Xt = stage.partial_fit(Xt, verbose=verbose).transform(Xt)
            _check_rows(name, Xt, n_rows)
        name, final = self.steps[-1]
        logger.info("updating stage '%s'" % name)
        final.partial_fit(Xt, y, verbose=verbose)
        return self

    @available_if(_final_is_estimator)
    def predict(self, X):
        """Transform X through the intermediate stages and predict with the
        last one.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            Data to predict on.

        Returns
        -------
        y_pred : ndarray, shape (n_samples,) or (n_samples, n_targets)
        """
        Xt, n_rows = self._transform_intermediate(X)
        y_pred = self._final_stage.predict(Xt)
        _check_rows(self.steps[-1][0], y_pred, n_rows)
        return y_pred

    @available_if(_final_is_transformer)
    def transform(self, X):
        """Transform X through every stage.

        Parameters
        ----------
        X : ndarray or scipy.sparse matrix, shape (n_samples, n_features)
            Data to transform.

        Returns
        -------
        X_new : ndarray or scipy.sparse matrix, shape (n_samples, n_out)
        """
        Xt, n_rows = self._transform_intermediate(X)
        Xt = self._final_stage.transform(Xt)
        _check_rows(self.steps[-1][0], Xt, n_rows)
        return Xt


def _name_stages(stages):
    """Generate names for stages from their class names."""
    names = [type(stage).__name__.lower() for stage in stages]
    counts = Counter(names)
    seen = Counter()
    result = []
    for name, stage in zip(names, stages):
        if counts[name] > 1:
            seen[name] += 1
            name = '%s-%d' % (name, seen[name])
        result.append((name, stage))
    return result


def make_pipeline(*stages, logger=None):
    """Build a :class:`Pipeline`, naming stages after their classes.

    Parameters
    ----------
    *stages : models
        The stages, in the order they are applied.
    logger : Logger or None
        Passed to the pipeline.

    Returns
    -------
    pipeline : Pipeline
    """
    return Pipeline(_name_stages(stages), logger=logger)
