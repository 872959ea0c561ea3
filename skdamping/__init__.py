# flake8: noqa

import importlib.metadata

from skdamping import bound
from skdamping import config
from skdamping import errors
from skdamping import math
from skdamping import registry
from skdamping import signal
from skdamping import task
from skdamping import utils


__all__ = [
    "bound",
    "config",
    "errors",
    "math",
    "registry",
    "signal",
    "task",
    "utils",
]
_version = None


def __getattr__(name):
    global _version
    if name == "__version__":
        if _version is None:
            _version = importlib.metadata.version('scikit-damping')
        return _version
    raise AttributeError(
        "module {} has no attribute {}".format(__name__, name))
