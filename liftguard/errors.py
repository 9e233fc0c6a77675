"""Error types for liftguard.

Autoregulation input errors carry a stable code so callers can map them
to user-facing messages:
- INVALID_RECOVERY_RATE: recovery rate is zero, negative or not finite
- INVALID_INPUT: weight, week or threshold is out of range, or the
  fatigue discount collapsed the load to zero
"""


class LiftguardError(Exception):
    """Base exception for all liftguard errors."""

    pass


class AutoregulationError(LiftguardError, ValueError):
    """Raised when an autoregulation input is rejected.

    Attributes:
        code: Error code ("INVALID_RECOVERY_RATE" or "INVALID_INPUT")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")


class TaxonomyError(LiftguardError):
    """Raised when the exercise taxonomy document is missing or malformed."""

    pass
