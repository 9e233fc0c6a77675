"""Weekly set-volume harmonization.

This module provides deterministic volume repair for LLM-generated
programs: per-muscle weekly sets are pulled into the target range by
adding or removing single sets on accessory exercises. Compound lifts are
never touched.
"""

from loguru import logger

from liftguard.domains.program.enums import ExperienceLevel, Muscle, PrimaryFocus
from liftguard.domains.program.models import (
    Exercise,
    GuardianOptions,
    TrainingProgram,
    VolumeRange,
    Workout,
)
from liftguard.domains.program.muscle_map import map_exercise_to_muscles, muscle_split
from liftguard.domains.program.taxonomy import Taxonomy, default_taxonomy
from liftguard.utils.rounding import round_half_up

MAX_ACCESSORY_SETS = 5
MIN_ACCESSORY_SETS = 2
SECONDARY_SET_WEIGHT = 0.5
TIME_CAP_MINUTES = 45
DEFAULT_SESSION_MINUTES = 60
MAX_HARMONIZE_PASSES = 10

_HYPERTROPHY_RANGES: dict[ExperienceLevel, VolumeRange] = {
    ExperienceLevel.BEGINNER: VolumeRange(min=12, max=14),
    ExperienceLevel.INTERMEDIATE: VolumeRange(min=12, max=18),
    ExperienceLevel.ADVANCED: VolumeRange(min=14, max=20),
}


def expected_volume(primary_focus: PrimaryFocus, experience_level: ExperienceLevel) -> VolumeRange:
    """Return the weekly per-muscle set target.

    Strength and general fitness ignore experience; hypertrophy scales
    within 12-20 sets.
    """
    if primary_focus == PrimaryFocus.STRENGTH:
        return VolumeRange(min=10, max=15)
    if primary_focus == PrimaryFocus.GENERAL_FITNESS:
        return VolumeRange(min=6, max=9)
    return _HYPERTROPHY_RANGES[experience_level]


def estimate_weekly_sets(program: TrainingProgram, taxonomy: Taxonomy | None = None) -> dict[Muscle, int]:
    """Compute weekly sets per muscle.

    Primary muscles count every set; secondary muscles count half the
    sets of each exercise, rounded half-up. Unrecognized exercises count
    for nothing.

    Args:
        program: Program to measure
        taxonomy: Taxonomy for exercise mapping (default: configured taxonomy)

    Returns:
        Set totals for every muscle
    """
    tax = taxonomy or default_taxonomy()
    totals = {muscle: 0 for muscle in Muscle}
    for workout in program.workouts:
        for exercise in workout.main_exercises:
            mapping = map_exercise_to_muscles(exercise.name, tax)
            for muscle in mapping.primary:
                totals[muscle] += exercise.sets
            for muscle in mapping.secondary:
                totals[muscle] += round_half_up(exercise.sets * SECONDARY_SET_WEIGHT)
    return totals


def is_time_capped(opts: GuardianOptions) -> bool:
    """Short sessions may only lose volume, never gain it."""
    minutes = opts.session_duration_minutes or DEFAULT_SESSION_MINUTES
    return minutes <= TIME_CAP_MINUTES


def find_adjustable_exercises(
    program: TrainingProgram,
    muscle: Muscle,
    taxonomy: Taxonomy | None = None,
) -> list[tuple[Workout, Exercise]]:
    """Find accessory exercises whose sets may be changed for a muscle.

    An exercise is adjustable when its workout's focus matches the muscle's
    split, its name looks like an accessory, and it trains the muscle.
    Exercises training the muscle as primary come first; otherwise program
    order is kept.

    Args:
        program: Program to search
        muscle: Target muscle
        taxonomy: Taxonomy (default: configured taxonomy)

    Returns:
        List of (workout, exercise) pairs
    """
    tax = taxonomy or default_taxonomy()
    split = muscle_split(muscle)
    primary: list[tuple[Workout, Exercise]] = []
    secondary: list[tuple[Workout, Exercise]] = []

    for workout in program.workouts:
        if not tax.focus_matches(workout.focus, split):
            continue
        for exercise in workout.main_exercises:
            if not tax.is_accessory(exercise.name):
                continue
            mapping = map_exercise_to_muscles(exercise.name, tax)
            if muscle in mapping.primary:
                primary.append((workout, exercise))
            elif muscle in mapping.secondary:
                secondary.append((workout, exercise))

    return primary + secondary


def _displaced_muscle(
    before: dict[Muscle, int],
    after: dict[Muscle, int],
    muscle: Muscle,
    volume_range: VolumeRange,
) -> Muscle | None:
    """Return a muscle other than the target that a step pushed further out of range."""
    for other in Muscle:
        if other == muscle:
            continue
        if volume_range.gap(after[other]) > volume_range.gap(before[other]):
            return other
    return None


def _adjust_muscle(
    program: TrainingProgram,
    muscle: Muscle,
    step: int,
    volume_range: VolumeRange,
    taxonomy: Taxonomy,
) -> list[str]:
    """Move a muscle's weekly sets toward its range one set at a time.

    Walks adjustable exercises round-robin until the range bound is reached
    or a full pass changes nothing. A step is skipped when the exercise is
    at its cap or floor, or when it would push another muscle out of range
    (or further out). Earlier corrections are never undone.
    """
    notes: list[str] = []
    target = volume_range.min if step > 0 else volume_range.max
    candidates = find_adjustable_exercises(program, muscle, taxonomy)

    def reached(total: int) -> bool:
        return total >= target if step > 0 else total <= target

    totals = estimate_weekly_sets(program, taxonomy)
    while not reached(totals[muscle]):
        changed = False
        for workout, exercise in candidates:
            before = exercise.sets
            if step > 0 and before >= MAX_ACCESSORY_SETS:
                continue
            if step < 0 and before <= MIN_ACCESSORY_SETS:
                continue

            exercise.sets = before + step
            updated = estimate_weekly_sets(program, taxonomy)
            displaced = _displaced_muscle(totals, updated, muscle, volume_range)
            if displaced is not None:
                exercise.sets = before
                logger.debug(
                    "Accessory adjustment skipped",
                    muscle=muscle.value,
                    exercise=exercise.name,
                    displaced_muscle=displaced.value,
                )
                continue

            totals = updated
            changed = True
            notes.append(f"Adjusted {exercise.name} sets {before}→{exercise.sets} on {workout.focus}")
            logger.debug(
                "Accessory sets adjusted",
                muscle=muscle.value,
                exercise=exercise.name,
                before=before,
                after=exercise.sets,
            )
            if reached(totals[muscle]):
                break

        if not changed:
            logger.debug(
                "No adjustable accessory left",
                muscle=muscle.value,
                total_sets=totals[muscle],
                target_sets=target,
            )
            break

    return notes


def _harmonize_pass(
    program: TrainingProgram,
    volume_range: VolumeRange,
    time_capped: bool,
    taxonomy: Taxonomy,
) -> list[str]:
    notes: list[str] = []
    for muscle in Muscle:
        total = estimate_weekly_sets(program, taxonomy)[muscle]
        if total < volume_range.min:
            if time_capped:
                logger.debug(
                    "Volume increase suppressed for time-capped session",
                    muscle=muscle.value,
                    total_sets=total,
                    min_sets=volume_range.min,
                )
                continue
            notes.extend(_adjust_muscle(program, muscle, +1, volume_range, taxonomy))
        elif total > volume_range.max:
            notes.extend(_adjust_muscle(program, muscle, -1, volume_range, taxonomy))
    return notes


def harmonize_volume(
    program: TrainingProgram,
    opts: GuardianOptions,
    taxonomy: Taxonomy | None = None,
) -> tuple[list[str], dict[Muscle, int]]:
    """Pull every muscle's weekly sets into its target range.

    Strategy:
    1. For each muscle (in Muscle order), recompute its weekly sets
    2. Under min: add sets to adjustable accessories (cap 5 per exercise),
       unless the session is time-capped
    3. Over max: remove sets from adjustable accessories (floor 2 per exercise)
    4. Never take a step that pushes another muscle out of range
    5. Repeat until a full pass over the muscles changes nothing

    A muscle may stay out of range when every adjustable accessory is at
    its cap or floor, or moving it would displace another muscle. Because
    the last pass changed nothing, running this again on the result is a
    no-op.

    Args:
        program: Program to correct (modified in place)
        opts: Guardian options
        taxonomy: Taxonomy (default: configured taxonomy)

    Returns:
        Tuple of (correction notes, final per-muscle set totals)
    """
    tax = taxonomy or default_taxonomy()
    notes: list[str] = []
    volume_range = expected_volume(opts.primary_focus, opts.experience_level)
    time_capped = is_time_capped(opts)

    passes = 0
    settled = False
    while passes < MAX_HARMONIZE_PASSES and not settled:
        passes += 1
        pass_notes = _harmonize_pass(program, volume_range, time_capped, tax)
        notes.extend(pass_notes)
        settled = not pass_notes

    if not settled:
        logger.warning(
            "Volume harmonization did not settle",
            passes=passes,
            adjustments=len(notes),
        )

    final_sets = estimate_weekly_sets(program, tax)

    logger.info(
        "Weekly volume harmonized",
        min_sets=volume_range.min,
        max_sets=volume_range.max,
        time_capped=time_capped,
        passes=passes,
        adjustments=len(notes),
    )
    return notes, final_sets
