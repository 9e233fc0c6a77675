"""Periodization models and week-by-week progressions.

Pre-built phase sequences for each primary focus, plus helpers to expand
a phase into weekly volume/intensity targets and to project the expected
1RM adaptation once it is complete.
"""

from liftguard.domains.autoregulation.models import (
    PeriodizationPhase,
    PrimaryAdaptation,
    VolumeProgression,
    WeeklyProgression,
)
from liftguard.domains.program.enums import PrimaryFocus
from liftguard.utils.rounding import round_half_up

PERIODIZATION_MODELS: dict[str, tuple[PeriodizationPhase, ...]] = {
    # Long accumulation block, then convert new muscle into strength.
    "hypertrophy_focused": (
        PeriodizationPhase(
            name="Volume Accumulation",
            duration_weeks=3,
            intensity_range=(65, 80),
            volume_progression=VolumeProgression.RAMPING,
            primary_adaptation=PrimaryAdaptation.HYPERTROPHY,
        ),
        PeriodizationPhase(
            name="Intensification",
            duration_weeks=2,
            intensity_range=(80, 90),
            volume_progression=VolumeProgression.STABLE,
            primary_adaptation=PrimaryAdaptation.STRENGTH,
        ),
        PeriodizationPhase(
            name="Realization",
            duration_weeks=1,
            intensity_range=(90, 95),
            volume_progression=VolumeProgression.LINEAR,
            primary_adaptation=PrimaryAdaptation.PEAKING,
        ),
    ),
    # Short base, long heavy block, true peak for 1RM testing.
    "strength_focused": (
        PeriodizationPhase(
            name="Base Volume",
            duration_weeks=2,
            intensity_range=(70, 85),
            volume_progression=VolumeProgression.STABLE,
            primary_adaptation=PrimaryAdaptation.HYPERTROPHY,
        ),
        PeriodizationPhase(
            name="Strength Intensification",
            duration_weeks=3,
            intensity_range=(85, 95),
            volume_progression=VolumeProgression.RAMPING,
            primary_adaptation=PrimaryAdaptation.STRENGTH,
        ),
        PeriodizationPhase(
            name="Peaking",
            duration_weeks=1,
            intensity_range=(95, 102.5),
            volume_progression=VolumeProgression.LINEAR,
            primary_adaptation=PrimaryAdaptation.PEAKING,
        ),
    ),
    "general_fitness": (
        PeriodizationPhase(
            name="Linear Progression Block",
            duration_weeks=4,
            intensity_range=(75, 85),
            volume_progression=VolumeProgression.LINEAR,
            primary_adaptation=PrimaryAdaptation.STRENGTH,
        ),
    ),
}

_MODEL_BY_FOCUS: dict[PrimaryFocus, str] = {
    PrimaryFocus.HYPERTROPHY: "hypertrophy_focused",
    PrimaryFocus.STRENGTH: "strength_focused",
    PrimaryFocus.GENERAL_FITNESS: "general_fitness",
}

_ADAPTATION_MULTIPLIERS: dict[PrimaryAdaptation, float] = {
    PrimaryAdaptation.STRENGTH: 1.025,
    PrimaryAdaptation.PEAKING: 1.03,
    PrimaryAdaptation.HYPERTROPHY: 1.01,
}


def periodization_model_for(primary_focus: PrimaryFocus) -> list[PeriodizationPhase]:
    """Return the phase sequence for a primary focus."""
    return list(PERIODIZATION_MODELS[_MODEL_BY_FOCUS[primary_focus]])


def generate_phase_progression(phase: PeriodizationPhase, base_volume_sets: float) -> list[WeeklyProgression]:
    """Expand a phase into weekly volume and intensity targets.

    Volume:
    - ramping: 80% of base rising to 110% by the last week
    - stable: base every week
    - linear: base tapering by up to 10% as intensity rises

    Intensity moves linearly from the start to the end of the phase range.

    Args:
        phase: Phase to expand
        base_volume_sets: Baseline weekly sets (e.g. the user's MAV)

    Returns:
        One WeeklyProgression per week of the phase
    """
    weeks = phase.duration_weeks
    span = max(weeks - 1, 1)
    start_intensity, end_intensity = phase.intensity_range
    progression: list[WeeklyProgression] = []

    for week in range(1, weeks + 1):
        if phase.volume_progression == VolumeProgression.RAMPING:
            volume = base_volume_sets * (0.8 + 0.3 * (week / weeks))
        elif phase.volume_progression == VolumeProgression.STABLE:
            volume = base_volume_sets
        else:
            volume = base_volume_sets * (1 - 0.1 * ((week - 1) / span))

        intensity = start_intensity + (end_intensity - start_intensity) * ((week - 1) / span)

        progression.append(
            WeeklyProgression(
                week_in_phase=week,
                target_volume_sets=round_half_up(volume),
                target_intensity_percent=round(intensity, 1),
                focus=f"Focus on {phase.primary_adaptation.value} at {intensity:.0f}% intensity.",
            )
        )
    return progression


def project_adaptation(current_1rm: float, phase: PeriodizationPhase) -> float:
    """Project the 1RM after completing a phase.

    Strength phases add 2.5%, peaking 3%, hypertrophy 1%; recovery adds
    nothing.
    """
    multiplier = _ADAPTATION_MULTIPLIERS.get(phase.primary_adaptation, 1.0)
    return round(current_1rm * multiplier, 1)
