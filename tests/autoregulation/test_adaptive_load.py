"""Tests for adaptive load calculation.

Tests verify:
- RPE-driven adjustments and their reasoning
- Mesocycle fatigue discount scaled by recovery rate
- Rounding to the nearest 2.5kg
- Higher last-session RPE never yields a heavier load
- Coded errors for invalid inputs
"""

import pytest
from pydantic import ValidationError

from liftguard.domains.autoregulation.load import calculate_adaptive_load
from liftguard.domains.autoregulation.models import RecoveryProfile, SessionFeedback
from liftguard.errors import AutoregulationError


def _profile(recovery_rate: float = 1.0) -> RecoveryProfile:
    return RecoveryProfile(recovery_rate=recovery_rate, fatigue_threshold=100)


def _feedback(rpe: float) -> SessionFeedback:
    return SessionFeedback(last_session_rpe=rpe, total_volume=24)


def test_in_range_rpe_maintains_load() -> None:
    """Test that week 1 with a target RPE keeps the base weight."""
    result = calculate_adaptive_load(100, 1, _profile(), _feedback(8))

    assert result.recommended_weight == 100.0
    assert result.percentage_change == 0
    assert result.reasoning == [
        "Base weight set to 100kg.",
        "Maintained load as last session RPE (8.0) was within the target range.",
    ]


def test_high_rpe_reduces_load() -> None:
    """Test the 5% reduction after a hard session."""
    result = calculate_adaptive_load(100, 1, _profile(), _feedback(9))

    assert result.recommended_weight == 95.0
    assert result.percentage_change == pytest.approx(-5.0)
    assert result.reasoning[-1] == "Reduced load by 5% due to high RPE (9.0) in the last session."


def test_low_rpe_increases_load() -> None:
    """Test the 3% increase after an easy session, rounded to 2.5kg."""
    result = calculate_adaptive_load(100, 1, _profile(), _feedback(7))

    assert result.recommended_weight == 102.5
    assert result.percentage_change == pytest.approx(3.0)
    assert result.reasoning[-1] == "Increased load by 3% due to low RPE (7.0) in the last session."


@pytest.mark.parametrize(("rpe", "expected"), [(7.5, 100.0), (8.5, 100.0)])
def test_rpe_boundaries_maintain_load(rpe: float, expected: float) -> None:
    """Test that RPE exactly at 7.5 or 8.5 is within the target range."""
    assert calculate_adaptive_load(100, 1, _profile(), _feedback(rpe)).recommended_weight == expected


def test_fatigue_discount_by_week() -> None:
    """Test the 5% per week discount for an average recoverer."""
    result = calculate_adaptive_load(100, 3, _profile(1.0), _feedback(8))

    assert result.recommended_weight == 90.0
    assert result.reasoning[1] == "Applied a 10.0% fatigue reduction for week 3."
    assert len(result.reasoning) == 3


def test_fast_recovery_halves_discount() -> None:
    """Test that a recovery rate of 2 halves the weekly discount."""
    result = calculate_adaptive_load(100, 3, _profile(2.0), _feedback(8))

    assert result.recommended_weight == 95.0
    assert result.percentage_change == pytest.approx(-5.0)


def test_adjustments_compound() -> None:
    """Test fatigue and RPE multipliers applied together."""
    result = calculate_adaptive_load(100, 2, _profile(), _feedback(9))

    assert result.percentage_change == pytest.approx(-9.75)
    assert result.recommended_weight == 90.0
    assert len(result.reasoning) == 3


@pytest.mark.parametrize("base_weight", [60, 100, 140])
def test_load_never_increases_across_weeks(base_weight: float) -> None:
    """Test that later weeks never recommend more than earlier ones."""
    weights = [
        calculate_adaptive_load(base_weight, week, _profile(), _feedback(8)).recommended_weight
        for week in range(1, 5)
    ]

    assert weights == sorted(weights, reverse=True)


@pytest.mark.parametrize("recovery_rate", [0.8, 1.0, 1.5])
@pytest.mark.parametrize("week", [1, 2, 3, 4])
def test_high_rpe_recommends_less_than_low_rpe(week: int, recovery_rate: float) -> None:
    """Test that a hard last session gives a strictly lighter load than an easy one."""
    hard = calculate_adaptive_load(100, week, _profile(recovery_rate), _feedback(9))
    target = calculate_adaptive_load(100, week, _profile(recovery_rate), _feedback(8))
    easy = calculate_adaptive_load(100, week, _profile(recovery_rate), _feedback(7))

    assert hard.recommended_weight < easy.recommended_weight
    assert hard.recommended_weight <= target.recommended_weight <= easy.recommended_weight
    assert hard.percentage_change < target.percentage_change < easy.percentage_change


@pytest.mark.parametrize("base_weight", [42.0, 57.3, 101.25, 180])
def test_recommended_weight_is_plate_multiple(base_weight: float) -> None:
    """Test that recommendations are multiples of 2.5kg."""
    result = calculate_adaptive_load(base_weight, 2, _profile(1.3), _feedback(7.9))

    assert (result.recommended_weight / 2.5) == pytest.approx(round(result.recommended_weight / 2.5))


@pytest.mark.parametrize(
    ("base_weight", "week"),
    [(0, 1), (-5, 1), (100, 0)],
)
def test_invalid_input_rejected(base_weight: float, week: int) -> None:
    """Test INVALID_INPUT for a non-positive weight or week before 1."""
    with pytest.raises(AutoregulationError) as exc_info:
        calculate_adaptive_load(base_weight, week, _profile(), _feedback(8))

    assert exc_info.value.code == "INVALID_INPUT"


@pytest.mark.parametrize("recovery_rate", [0, -1.0])
def test_invalid_recovery_rate_rejected(recovery_rate: float) -> None:
    """Test INVALID_RECOVERY_RATE for a non-positive recovery rate."""
    with pytest.raises(AutoregulationError) as exc_info:
        calculate_adaptive_load(100, 2, _profile(recovery_rate), _feedback(8))

    assert exc_info.value.code == "INVALID_RECOVERY_RATE"


@pytest.mark.parametrize("week", [21, 25])
def test_collapsed_load_rejected(week: int) -> None:
    """Test that a discount of 100% or more is rejected instead of returning zero."""
    with pytest.raises(AutoregulationError) as exc_info:
        calculate_adaptive_load(100, week, _profile(), _feedback(8))

    assert exc_info.value.code == "INVALID_INPUT"


def test_rpe_out_of_scale_rejected() -> None:
    """Test that feedback RPE must be within 0-10."""
    with pytest.raises(ValidationError):
        SessionFeedback(last_session_rpe=11, total_volume=10)


def test_rejection_is_logged(log_records) -> None:
    """Test that rejected input is logged with its code."""
    with pytest.raises(AutoregulationError):
        calculate_adaptive_load(100, 1, _profile(0), _feedback(8))

    rejected = [r for r in log_records if r["message"] == "AUTOREGULATION_INPUT_REJECTED"]
    assert len(rejected) == 1
    assert rejected[0]["extra"]["code"] == "INVALID_RECOVERY_RATE"
    assert rejected[0]["level"].name == "ERROR"


def test_camel_case_inputs() -> None:
    """Test that camelCase payloads validate."""
    profile = RecoveryProfile.model_validate({"recoveryRate": 1.0, "fatigueThreshold": 80, "sleepQuality": 7})
    feedback = SessionFeedback.model_validate({"lastSessionRPE": 9, "totalVolume": 30})

    assert calculate_adaptive_load(100, 1, profile, feedback).recommended_weight == 95.0


@pytest.mark.parametrize("base_weight", [0.5, 1.0])
def test_load_rounding_to_zero_rejected(base_weight: float) -> None:
    """Test INVALID_INPUT when the recommendation would round to 0kg."""
    with pytest.raises(AutoregulationError) as exc_info:
        calculate_adaptive_load(base_weight, 1, _profile(), _feedback(8))

    assert exc_info.value.code == "INVALID_INPUT"


def test_smallest_plate_load_accepted() -> None:
    """Test that a load rounding up to one increment is still recommended."""
    assert calculate_adaptive_load(1.25, 1, _profile(), _feedback(8)).recommended_weight == 2.5
