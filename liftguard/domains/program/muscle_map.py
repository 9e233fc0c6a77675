"""Exercise name → muscles mapping.

Pure and total: unknown names map to no muscles instead of guessing,
so they contribute nothing to volume totals.
"""

from liftguard.domains.program.enums import Muscle, SplitType
from liftguard.domains.program.models import ExerciseMapping
from liftguard.domains.program.taxonomy import Taxonomy, default_taxonomy

_UNKNOWN = ExerciseMapping(primary=())

_LEG_MUSCLES = frozenset({Muscle.QUADS, Muscle.HAMSTRINGS, Muscle.GLUTES, Muscle.CALVES})
_PULL_MUSCLES = frozenset({Muscle.BACK, Muscle.BICEPS, Muscle.DELTS_REAR})


def map_exercise_to_muscles(exercise_name: str, taxonomy: Taxonomy | None = None) -> ExerciseMapping:
    """Map an exercise name to the muscles it trains.

    Matching is case-insensitive against the ordered taxonomy table;
    the first matching rule wins.

    Args:
        exercise_name: Free-text exercise name (e.g. "Barbell Back Squat")
        taxonomy: Taxonomy to match against (default: configured taxonomy)

    Returns:
        ExerciseMapping; primary is empty if the name is not recognized
    """
    tax = taxonomy or default_taxonomy()
    name = exercise_name.strip()
    for rule in tax.exercise_rules:
        if rule.pattern.search(name):
            return rule.mapping
    return _UNKNOWN


def muscle_split(muscle: Muscle) -> SplitType:
    """Return the split day a muscle is trained on."""
    if muscle in _LEG_MUSCLES:
        return SplitType.LEGS
    if muscle in _PULL_MUSCLES:
        return SplitType.PULL
    return SplitType.PUSH
