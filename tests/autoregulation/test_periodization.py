"""Tests for periodization models and phase progressions."""

import pytest

from liftguard.domains.autoregulation.models import (
    PeriodizationPhase,
    PrimaryAdaptation,
    VolumeProgression,
)
from liftguard.domains.autoregulation.periodization import (
    PERIODIZATION_MODELS,
    generate_phase_progression,
    periodization_model_for,
    project_adaptation,
)
from liftguard.domains.program.enums import PrimaryFocus


def _phase(weeks: int, progression: VolumeProgression, intensity: tuple[float, float] = (75, 85)) -> PeriodizationPhase:
    return PeriodizationPhase(
        name="Test Block",
        duration_weeks=weeks,
        intensity_range=intensity,
        volume_progression=progression,
        primary_adaptation=PrimaryAdaptation.STRENGTH,
    )


@pytest.mark.parametrize(
    ("focus", "names"),
    [
        (PrimaryFocus.HYPERTROPHY, ["Volume Accumulation", "Intensification", "Realization"]),
        (PrimaryFocus.STRENGTH, ["Base Volume", "Strength Intensification", "Peaking"]),
        (PrimaryFocus.GENERAL_FITNESS, ["Linear Progression Block"]),
    ],
)
def test_model_per_focus(focus: PrimaryFocus, names: list[str]) -> None:
    """Test the phase sequence chosen for each primary focus."""
    assert [phase.name for phase in periodization_model_for(focus)] == names


def test_phase_intensity_never_drops() -> None:
    """Test that every model's intensity never drops from one phase to the next."""
    for phases in PERIODIZATION_MODELS.values():
        starts = [phase.intensity_range[0] for phase in phases]
        assert starts == sorted(starts)


def test_ramping_progression() -> None:
    """Test volume ramping from 90% to 110% over three weeks."""
    progression = generate_phase_progression(PERIODIZATION_MODELS["hypertrophy_focused"][0], 10)

    assert [w.week_in_phase for w in progression] == [1, 2, 3]
    assert [w.target_volume_sets for w in progression] == [9, 10, 11]
    assert [w.target_intensity_percent for w in progression] == [65.0, 72.5, 80.0]
    assert progression[0].focus == "Focus on hypertrophy at 65% intensity."


def test_stable_progression() -> None:
    """Test constant volume for a stable phase."""
    progression = generate_phase_progression(_phase(2, VolumeProgression.STABLE), 12)

    assert [w.target_volume_sets for w in progression] == [12, 12]
    assert [w.target_intensity_percent for w in progression] == [75.0, 85.0]


def test_linear_progression_tapers_volume() -> None:
    """Test volume tapering as intensity climbs."""
    progression = generate_phase_progression(_phase(4, VolumeProgression.LINEAR), 20)

    assert [w.target_volume_sets for w in progression] == [20, 19, 19, 18]
    assert [w.target_intensity_percent for w in progression] == [75.0, 78.3, 81.7, 85.0]


def test_single_week_phase() -> None:
    """Test that a one-week phase uses the start of its intensity range."""
    progression = generate_phase_progression(PERIODIZATION_MODELS["hypertrophy_focused"][2], 10)

    assert len(progression) == 1
    assert progression[0].target_volume_sets == 10
    assert progression[0].target_intensity_percent == 90.0


@pytest.mark.parametrize(
    ("adaptation", "expected"),
    [
        (PrimaryAdaptation.STRENGTH, 102.5),
        (PrimaryAdaptation.PEAKING, 103.0),
        (PrimaryAdaptation.HYPERTROPHY, 101.0),
        (PrimaryAdaptation.RECOVERY, 100.0),
    ],
)
def test_project_adaptation(adaptation: PrimaryAdaptation, expected: float) -> None:
    """Test projected 1RM gains per adaptation."""
    phase = PeriodizationPhase(
        name="Block",
        duration_weeks=3,
        intensity_range=(70, 80),
        volume_progression=VolumeProgression.STABLE,
        primary_adaptation=adaptation,
    )

    assert project_adaptation(100, phase) == pytest.approx(expected)
