"""Data models for training programs and guardian output.

Program models validate LLM output. Display fields the guardian does not
read (reps, load, rest, rpe, ids...) pass through untouched.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from liftguard.domains.program.enums import ExperienceLevel, Muscle, PrimaryFocus


class Exercise(BaseModel):
    """A single exercise prescription within a workout."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str = Field(..., min_length=1, description="Exercise name")
    sets: int = Field(..., ge=1, description="Number of working sets")
    reps: str | None = None
    rpe: str | None = None
    target_muscles: list[str] = Field(default_factory=list, alias="targetMuscles")


class Workout(BaseModel):
    """One training day."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str = Field(..., description="Human label, e.g. 'Monday - Push'")
    focus: str = Field(..., description="Free-text split label, e.g. 'Push', 'Upper'")
    main_exercises: list[Exercise] = Field(default_factory=list, alias="mainExercises")


class TrainingProgram(BaseModel):
    """A weekly program: one workout per training day, in order."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    workouts: list[Workout] = Field(default_factory=list)


class GuardianOptions(BaseModel):
    """Read-only user parameters the guardian corrects against."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    primary_focus: PrimaryFocus = Field(..., alias="primaryFocus")
    experience_level: ExperienceLevel = Field(..., alias="experienceLevel")
    training_days_per_week: int | None = Field(None, ge=2, le=6, alias="trainingDaysPerWeek")
    session_duration_minutes: float | None = Field(None, gt=0, alias="sessionDurationMinutes")


@dataclass(frozen=True)
class VolumeRange:
    """Weekly set-count target for one muscle.

    Attributes:
        min: Minimum weekly sets
        max: Maximum weekly sets
    """

    min: int
    max: int

    def contains(self, sets: int) -> bool:
        return self.min <= sets <= self.max

    def gap(self, sets: int) -> int:
        """Sets missing below min or in excess above max; 0 when in range."""
        if sets < self.min:
            return self.min - sets
        if sets > self.max:
            return sets - self.max
        return 0


@dataclass(frozen=True)
class ExerciseMapping:
    """Muscles trained by an exercise.

    An empty primary tuple means the exercise is not recognized.
    """

    primary: tuple[Muscle, ...]
    secondary: tuple[Muscle, ...] = ()

    def trains(self, muscle: Muscle) -> bool:
        return muscle in self.primary or muscle in self.secondary


class GuardianNotes(BaseModel):
    """Audit trail of guardian corrections."""

    corrections: list[str] = Field(default_factory=list)
    per_muscle_sets: dict[Muscle, int] = Field(default_factory=dict)


class GuardianResult(BaseModel):
    """Corrected program plus the notes explaining every correction."""

    program: TrainingProgram
    notes: GuardianNotes
