"""Cumulative fatigue and RPE trend tracking.

Both functions are pure: the caller persists the returned fatigue score
and RPE history and passes them back on the next call.
"""

from liftguard.domains.autoregulation.models import RPETrend
from liftguard.domains.autoregulation.validation import validate_recovery_rate

FATIGUE_DECAY_RATE = 0.3
MIN_TREND_POINTS = 3
TREND_THRESHOLD_RPE = 1.0


def track_cumulative_fatigue(
    cumulative_fatigue: float,
    new_session_fatigue: float,
    recovery_rate: float,
) -> float:
    """Decay existing fatigue and add the latest session's fatigue.

    decayed = cumulative * (1 - 0.3 / recovery_rate)

    Args:
        cumulative_fatigue: Fatigue score carried from the previous call
        new_session_fatigue: Fatigue added by the latest session
        recovery_rate: User recovery multiplier (> 0)

    Returns:
        Updated cumulative fatigue score

    Raises:
        AutoregulationError: INVALID_RECOVERY_RATE if recovery_rate <= 0
    """
    validate_recovery_rate(recovery_rate)
    decayed = cumulative_fatigue * (1 - FATIGUE_DECAY_RATE * (1 / recovery_rate))
    return decayed + new_session_fatigue


def analyze_rpe_trend(rpe_history: list[float]) -> RPETrend:
    """Classify the RPE trend from oldest to newest.

    Only the first and last values are compared; fewer than three data
    points is always stable.
    """
    if len(rpe_history) < MIN_TREND_POINTS:
        return RPETrend.STABLE

    first = rpe_history[0]
    last = rpe_history[-1]

    if last > first + TREND_THRESHOLD_RPE:
        return RPETrend.INCREASING
    if last < first - TREND_THRESHOLD_RPE:
        return RPETrend.DECREASING
    return RPETrend.STABLE
