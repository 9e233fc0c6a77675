"""Deload recommendations.

Deloads are triggered by cumulative fatigue exceeding the user's threshold
or by a rising RPE trend on a primary lift. Triggers are checked in
priority order and never combined.
"""

from loguru import logger

from liftguard.domains.autoregulation.models import (
    DeloadRecommendation,
    DeloadType,
    DetailedDeloadProtocol,
    PeriodizationPhase,
    PrimaryAdaptation,
    RecoveryProfile,
    RPETrend,
)
from liftguard.domains.autoregulation.validation import validate_positive

DELOAD_DURATION_DAYS = 7
FATIGUE_DELOAD_REDUCTION = 50
TREND_DELOAD_REDUCTION = 20

PASSIVE_FATIGUE_RATIO = 1.2
PASSIVE_RECOVERY_RATE = 0.8


def determine_deload_need(
    cumulative_fatigue: float,
    fatigue_threshold: float,
    rpe_trend: RPETrend = RPETrend.STABLE,
) -> DeloadRecommendation:
    """Decide whether a deload is needed.

    Priority:
    1. Cumulative fatigue above threshold → 7-day volume deload (-50%)
    2. Increasing RPE trend → 7-day intensity deload (-20%)
    3. Otherwise no deload

    Args:
        cumulative_fatigue: Current fatigue score
        fatigue_threshold: User's fatigue ceiling
        rpe_trend: RPE trend of a primary lift

    Returns:
        Exactly one DeloadRecommendation
    """
    if cumulative_fatigue > fatigue_threshold:
        logger.info(
            "Deload recommended",
            trigger="fatigue",
            cumulative_fatigue=cumulative_fatigue,
            fatigue_threshold=fatigue_threshold,
        )
        return DeloadRecommendation(
            is_needed=True,
            reason=(
                f"Cumulative fatigue ({cumulative_fatigue:.0f}) has exceeded "
                f"your threshold of {fatigue_threshold:g}."
            ),
            type=DeloadType.VOLUME,
            duration_days=DELOAD_DURATION_DAYS,
            reduction_percentage=FATIGUE_DELOAD_REDUCTION,
        )

    if rpe_trend == RPETrend.INCREASING:
        logger.info("Deload recommended", trigger="rpe_trend", rpe_trend=rpe_trend.value)
        return DeloadRecommendation(
            is_needed=True,
            reason="RPE for a primary exercise has been consistently increasing, indicating a need for recovery.",
            type=DeloadType.INTENSITY,
            duration_days=DELOAD_DURATION_DAYS,
            reduction_percentage=TREND_DELOAD_REDUCTION,
        )

    return DeloadRecommendation(
        is_needed=False,
        reason=f"Fatigue level ({cumulative_fatigue:.0f}) is within tolerance ({fatigue_threshold:g}).",
    )


def calculate_optimal_deload(
    cumulative_fatigue: float,
    recovery_profile: RecoveryProfile,
    last_phase: PeriodizationPhase,
) -> DetailedDeloadProtocol:
    """Prescribe a deload protocol after a training phase.

    Very high fatigue (over 120% of threshold) or poor recovery (rate
    under 0.8) calls for passive rest; otherwise an active deload, deeper
    after a peaking phase.

    Raises:
        AutoregulationError: INVALID_INPUT if fatigue_threshold <= 0
    """
    validate_positive(recovery_profile.fatigue_threshold, "fatigue_threshold")
    fatigue_ratio = cumulative_fatigue / recovery_profile.fatigue_threshold

    if fatigue_ratio > PASSIVE_FATIGUE_RATIO or recovery_profile.recovery_rate < PASSIVE_RECOVERY_RATE:
        return DetailedDeloadProtocol(
            type="passive",
            duration_days=3,
            volume_reduction_percent=100,
            intensity_reduction_percent=100,
            specialization_focus="Complete rest and recovery.",
        )

    volume_reduction = 50
    intensity_reduction = 40
    if last_phase.primary_adaptation == PrimaryAdaptation.PEAKING:
        volume_reduction = 60
        intensity_reduction = 50

    return DetailedDeloadProtocol(
        type="active",
        duration_days=DELOAD_DURATION_DAYS,
        volume_reduction_percent=volume_reduction,
        intensity_reduction_percent=intensity_reduction,
        specialization_focus="Technique refinement with light loads.",
    )
