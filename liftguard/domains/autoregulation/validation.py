"""Input validation for the autoregulation engine.

Every failure is logged before the coded error is raised.
"""

import math
from typing import NoReturn

from loguru import logger

from liftguard.errors import AutoregulationError

INVALID_RECOVERY_RATE = "INVALID_RECOVERY_RATE"
INVALID_INPUT = "INVALID_INPUT"


def raise_input_error(code: str, detail: str, **context: str | int | float | None) -> NoReturn:
    """Log and raise an AutoregulationError.

    Raises:
        AutoregulationError: Always
    """
    err = AutoregulationError(code, [detail])
    logger.error("AUTOREGULATION_INPUT_REJECTED", code=err.code, details=err.details, **context)
    raise err


def validate_recovery_rate(recovery_rate: float) -> None:
    """Reject recovery rates that would divide by zero or flip signs.

    Raises:
        AutoregulationError: INVALID_RECOVERY_RATE if not finite and > 0
    """
    if not math.isfinite(recovery_rate) or recovery_rate <= 0:
        raise_input_error(
            INVALID_RECOVERY_RATE,
            f"Recovery rate must be a positive number, got: {recovery_rate}",
            recovery_rate=recovery_rate,
        )


def validate_positive(value: float, field: str) -> None:
    """Reject zero, negative or non-finite values.

    Raises:
        AutoregulationError: INVALID_INPUT if not finite and > 0
    """
    if not math.isfinite(value) or value <= 0:
        raise_input_error(INVALID_INPUT, f"{field} must be > 0, got: {value}", field=field)
