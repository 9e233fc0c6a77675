"""Autoregulation models.

Inputs are per-call values supplied by the caller; nothing here is
persisted or cached between calls. Fatigue and RPE history are threaded
through explicitly by the caller.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class RPETrend(StrEnum):
    """Direction of RPE over recent sessions of one exercise."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class DeloadType(StrEnum):
    VOLUME = "volume"
    INTENSITY = "intensity"
    COMPLETE = "complete"


class VolumeProgression(StrEnum):
    LINEAR = "linear"
    RAMPING = "ramping"
    STABLE = "stable"


class PrimaryAdaptation(StrEnum):
    HYPERTROPHY = "hypertrophy"
    STRENGTH = "strength"
    PEAKING = "peaking"
    RECOVERY = "recovery"


class RecoveryProfile(BaseModel):
    """Per-user recovery characteristics.

    recovery_rate is validated by the engine (INVALID_RECOVERY_RATE),
    not here, so callers get a coded error instead of a schema error.
    """

    model_config = ConfigDict(populate_by_name=True)

    recovery_rate: float = Field(..., alias="recoveryRate", description=">1 means faster recovery")
    fatigue_threshold: float = Field(..., alias="fatigueThreshold", description="Cumulative fatigue ceiling")
    sleep_quality: int | None = Field(None, ge=1, le=10, alias="sleepQuality")
    recovery_modalities: list[str] = Field(default_factory=list, alias="recoveryModalities")


class SessionFeedback(BaseModel):
    """Outcome of the previous session of an exercise."""

    model_config = ConfigDict(populate_by_name=True)

    last_session_rpe: float = Field(..., ge=0, le=10, alias="lastSessionRPE")
    total_volume: float = Field(..., ge=0, alias="totalVolume", description="Sets x reps performed")
    notes: str | None = None


class LoadRecommendation(BaseModel):
    """Recommended load for the next session, with its audit trail."""

    recommended_weight: float
    percentage_change: float
    reasoning: list[str]


class DeloadRecommendation(BaseModel):
    is_needed: bool
    reason: str
    type: DeloadType | None = None
    duration_days: int | None = None
    reduction_percentage: int | None = None


class PeriodizationPhase(BaseModel):
    """One phase of a periodization model."""

    model_config = ConfigDict(frozen=True)

    name: str
    duration_weeks: int = Field(..., ge=1)
    intensity_range: tuple[float, float] = Field(..., description="Start/end intensity, % of 1RM")
    volume_progression: VolumeProgression
    primary_adaptation: PrimaryAdaptation


class WeeklyProgression(BaseModel):
    week_in_phase: int
    target_volume_sets: int
    target_intensity_percent: float
    focus: str


class DetailedDeloadProtocol(BaseModel):
    type: str = Field(..., description="active | passive")
    duration_days: int
    volume_reduction_percent: int
    intensity_reduction_percent: int
    specialization_focus: str
