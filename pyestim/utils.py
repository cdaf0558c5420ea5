import logging
import sys

import numpy as np

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def check_logger(logger, name='pyestim'):
    """Return *logger*, or a logger writing to ``sys.stdout`` if it is None.

    Parameters
    ----------
    logger : Logger or None
        A user supplied logger.
    name : str
        Name of the logger to create when *logger* is None.

    Returns
    -------
    logger : Logger
    """
    ret = logger
    if ret is None:
        ret = logging.getLogger(name=name)
        # loggers are process-wide, only attach the handler once
        if not any(getattr(h, '_pyestim', False) for h in ret.handlers):
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(_FORMAT))
            handler._pyestim = True
            ret.addHandler(handler)
    return ret


def set_verbosity(logger, verbose):
    """Set *logger* to DEBUG when *verbose*, otherwise to WARNING.

    The level belongs to the logger, not to the model. Models of the same
    class share the default logger ``pyestim.<ClassName>``, so a quiet fit
    of one instance also silences another instance that is fitting
    verbosely. Pass a separate ``logger`` to each model to keep them apart.
    """
    if verbose:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)
    return logger


def softmax(y, axis=-1):
    """Calculates the softmax distribution.

    Parameters
    ----------
    y : ndarray
        Log-probabilities.
    """
    yp = y - y.max(axis=axis, keepdims=True)
    epy = np.exp(yp)
    return epy / np.sum(epy, axis=axis, keepdims=True)


def sigmoid(x):
    """Calculates the bernoulli distribution.

    Parameters
    ----------
    x : ndarray
        Log-probabilities.
    """
    return np.exp(-np.logaddexp(0, -x))
