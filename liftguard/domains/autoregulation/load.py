"""Adaptive load calculation.

Combines two autoregulation principles:
1. Proactive fatigue management: load is tempered as fatigue accumulates
   across a mesocycle, faster for users who recover slowly
2. Reactive RPE adjustment: load follows how hard the last session felt

Every applied adjustment is recorded in reasoning so users can audit
why their assigned weight changed.
"""

from loguru import logger

from liftguard.domains.autoregulation.models import LoadRecommendation, RecoveryProfile, SessionFeedback
from liftguard.domains.autoregulation.validation import (
    INVALID_INPUT,
    raise_input_error,
    validate_positive,
    validate_recovery_rate,
)
from liftguard.utils.rounding import round_to_increment

WEEKLY_FATIGUE_DISCOUNT = 0.05
HIGH_RPE = 8.5
LOW_RPE = 7.5
HIGH_RPE_MULTIPLIER = 0.95
LOW_RPE_MULTIPLIER = 1.03
PLATE_INCREMENT = 2.5


def calculate_adaptive_load(
    base_weight: float,
    week_in_mesocycle: int,
    recovery_profile: RecoveryProfile,
    previous_session_feedback: SessionFeedback,
) -> LoadRecommendation:
    """Recommend a working weight for the next session.

    Args:
        base_weight: Planned starting weight in kg (> 0)
        week_in_mesocycle: Current week, 1-based
        recovery_profile: User's recovery profile
        previous_session_feedback: Feedback from the last session of this exercise

    Returns:
        LoadRecommendation rounded to the nearest 2.5kg, with the change
        relative to base_weight and the ordered reasoning

    Raises:
        AutoregulationError: INVALID_INPUT for a non-positive weight, a week
            before 1, a discount that collapses the load or a load that
            rounds to 0kg;
            INVALID_RECOVERY_RATE for a non-positive recovery rate
    """
    validate_positive(base_weight, "base_weight")
    if week_in_mesocycle < 1:
        raise_input_error(
            INVALID_INPUT,
            f"week_in_mesocycle must be >= 1, got: {week_in_mesocycle}",
            field="week_in_mesocycle",
        )
    validate_recovery_rate(recovery_profile.recovery_rate)

    adjusted_weight = base_weight
    reasoning: list[str] = [f"Base weight set to {base_weight}kg."]

    # 1. Proactive fatigue discount
    fatigue_reduction = (week_in_mesocycle - 1) * WEEKLY_FATIGUE_DISCOUNT * (1 / recovery_profile.recovery_rate)
    if fatigue_reduction > 0:
        adjusted_weight *= 1 - fatigue_reduction
        if adjusted_weight <= 0:
            raise_input_error(
                INVALID_INPUT,
                f"Fatigue reduction of {fatigue_reduction:.0%} for week {week_in_mesocycle} leaves no load",
                week_in_mesocycle=week_in_mesocycle,
                recovery_rate=recovery_profile.recovery_rate,
            )
        reasoning.append(f"Applied a {fatigue_reduction:.1%} fatigue reduction for week {week_in_mesocycle}.")

    # 2. Reactive RPE adjustment
    rpe = previous_session_feedback.last_session_rpe
    if rpe > HIGH_RPE:
        adjusted_weight *= HIGH_RPE_MULTIPLIER
        reasoning.append(f"Reduced load by 5% due to high RPE ({rpe}) in the last session.")
    elif rpe < LOW_RPE:
        adjusted_weight *= LOW_RPE_MULTIPLIER
        reasoning.append(f"Increased load by 3% due to low RPE ({rpe}) in the last session.")
    else:
        reasoning.append(f"Maintained load as last session RPE ({rpe}) was within the target range.")

    percentage_change = (adjusted_weight - base_weight) / base_weight * 100
    recommended_weight = round_to_increment(adjusted_weight, PLATE_INCREMENT)
    if recommended_weight <= 0:
        raise_input_error(
            INVALID_INPUT,
            f"Adjusted load of {adjusted_weight:.2f}kg rounds to 0kg at {PLATE_INCREMENT}kg increments",
            base_weight=base_weight,
            week_in_mesocycle=week_in_mesocycle,
        )

    logger.debug(
        "Adaptive load calculated",
        base_weight=base_weight,
        week_in_mesocycle=week_in_mesocycle,
        last_session_rpe=rpe,
        recommended_weight=recommended_weight,
        percentage_change=round(percentage_change, 2),
    )

    return LoadRecommendation(
        recommended_weight=recommended_weight,
        percentage_change=percentage_change,
        reasoning=reasoning,
    )
