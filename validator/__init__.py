"""respec-validator — validate a ReSpec document for publication.

Public re-exports so callers can write::

    from validator import ValidationPipeline, ValidationRequest
"""

__version__ = "0.1.0"

from validator.models import (  # noqa: E402
    CommandResult,
    ConfigurationError,
    Outcome,
    ServerError,
    Stage,
    StageFailedError,
    ValidationRequest,
    ValidatorError,
)
from validator.pipeline import ValidationPipeline  # noqa: E402

__all__ = [
    "__version__",
    "CommandResult",
    "ConfigurationError",
    "Outcome",
    "ServerError",
    "Stage",
    "StageFailedError",
    "ValidationPipeline",
    "ValidationRequest",
    "ValidatorError",
]
