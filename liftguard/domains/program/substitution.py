"""Banned exercise substitution."""

from loguru import logger

from liftguard.domains.program.models import TrainingProgram
from liftguard.domains.program.taxonomy import Taxonomy, default_taxonomy


def replace_banned_exercises(program: TrainingProgram, taxonomy: Taxonomy | None = None) -> list[str]:
    """Replace every banned exercise with its safe substitute.

    Args:
        program: Program to correct (modified in place)
        taxonomy: Taxonomy holding the denylist (default: configured taxonomy)

    Returns:
        One correction note per substitution
    """
    tax = taxonomy or default_taxonomy()
    notes: list[str] = []
    for workout in program.workouts:
        for exercise in workout.main_exercises:
            for banned in tax.banned_exercises:
                if not banned.pattern.search(exercise.name):
                    continue
                before = exercise.name
                exercise.name = banned.replacement
                notes.append(f'Replaced banned exercise "{before}" → "{exercise.name}"')
                logger.debug("Banned exercise replaced", before=before, after=exercise.name, workout=workout.name)
                break
    return notes
