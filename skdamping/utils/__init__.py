# flake8: noqa

from skdamping.utils.type_check import jacobianp
from skdamping.utils.type_check import position3p
