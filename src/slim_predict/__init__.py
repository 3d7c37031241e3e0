"""slim-predict — command-line front end for SLIM top-N prediction.

Turns the process arguments into a validated :class:`PredictConfig`
that the prediction engine consumes.
"""

from slim_predict.api import interpret, parse
from slim_predict.core.models import InputFormat, PredictConfig
from slim_predict.version import __version__

__all__: list[str] = [
    "InputFormat",
    "PredictConfig",
    "__version__",
    "interpret",
    "parse",
]
