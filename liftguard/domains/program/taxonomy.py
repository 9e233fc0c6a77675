"""Exercise taxonomy loader.

The exercise-to-muscle table, accessory patterns, split aliases, day-split
templates and banned exercises are heuristics, so they live in a YAML
document rather than in code. The packaged default is
liftguard/data/taxonomy.yaml; LIFTGUARD_TAXONOMY_PATH points to a replacement.

If the document is invalid → raises TaxonomyError.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import yaml
from loguru import logger

from liftguard.config.settings import get_settings
from liftguard.domains.program.enums import ExperienceLevel, Muscle, PrimaryFocus, SplitType
from liftguard.domains.program.models import ExerciseMapping
from liftguard.errors import TaxonomyError

# Path from liftguard/domains/program/taxonomy.py to the package data dir:
# parent.parent.parent = liftguard/
DEFAULT_TAXONOMY_PATH = Path(__file__).parent.parent.parent / "data" / "taxonomy.yaml"

_REQUIRED_SECTIONS = ("exercises", "accessory_patterns", "split_aliases", "templates", "banned_exercises")


@dataclass(frozen=True)
class ExerciseRule:
    """One row of the exercise table: a name pattern and the muscles it trains."""

    pattern: re.Pattern[str]
    mapping: ExerciseMapping


@dataclass(frozen=True)
class BannedExercise:
    """An exercise that must be replaced, and its safe substitute."""

    pattern: re.Pattern[str]
    replacement: str


@dataclass(frozen=True)
class Taxonomy:
    """Parsed, validated taxonomy document."""

    exercise_rules: tuple[ExerciseRule, ...]
    accessory_pattern: re.Pattern[str]
    split_aliases: dict[SplitType, tuple[str, ...]]
    templates: dict[str, dict[str, dict[int, tuple[str, ...]]]]
    banned_exercises: tuple[BannedExercise, ...]

    def template_for(
        self,
        focus: PrimaryFocus,
        experience: ExperienceLevel,
        days: int | None,
    ) -> tuple[str, ...] | None:
        """Return the expected day labels, or None if no template applies.

        An experience-specific entry overrides the focus default.
        """
        if days is None:
            return None
        by_experience = self.templates.get(focus.value)
        if not by_experience:
            return None
        specific = by_experience.get(experience.value, {}).get(days)
        if specific is not None:
            return specific
        return by_experience.get("default", {}).get(days)

    def is_accessory(self, exercise_name: str) -> bool:
        return self.accessory_pattern.search(exercise_name) is not None

    def focus_matches(self, focus: str, split: SplitType) -> bool:
        lowered = focus.lower()
        return any(alias in lowered for alias in self.split_aliases.get(split, ()))


def _compile(pattern: object, where: str) -> re.Pattern[str]:
    if not isinstance(pattern, str) or not pattern:
        raise TaxonomyError(f"Missing regex in {where}")
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise TaxonomyError(f"Invalid regex in {where}: {pattern!r} ({e})") from e


def _muscles(values: object, where: str) -> tuple[Muscle, ...]:
    if values is None:
        return ()
    if not isinstance(values, list):
        raise TaxonomyError(f"Muscle list expected in {where}")
    try:
        return tuple(Muscle(v) for v in values)
    except ValueError as e:
        raise TaxonomyError(f"Unknown muscle in {where}: {e}") from e


def _parse_exercises(rows: object) -> tuple[ExerciseRule, ...]:
    if not isinstance(rows, list) or not rows:
        raise TaxonomyError("Taxonomy 'exercises' must be a non-empty list")

    rules: list[ExerciseRule] = []
    for i, row in enumerate(rows):
        where = f"exercises[{i}]"
        if not isinstance(row, dict):
            raise TaxonomyError(f"Invalid entry format in {where}")
        primary = _muscles(row.get("primary"), where)
        if not primary:
            raise TaxonomyError(f"No primary muscles in {where}")
        rules.append(
            ExerciseRule(
                pattern=_compile(row.get("match"), where),
                mapping=ExerciseMapping(primary=primary, secondary=_muscles(row.get("secondary"), where)),
            )
        )
    return tuple(rules)


def _parse_split_aliases(raw: object) -> dict[SplitType, tuple[str, ...]]:
    if not isinstance(raw, dict):
        raise TaxonomyError("Taxonomy 'split_aliases' must be a mapping")

    aliases: dict[SplitType, tuple[str, ...]] = {}
    for split in SplitType:
        values = raw.get(split.value)
        if not isinstance(values, list) or not values:
            raise TaxonomyError(f"No aliases for split '{split.value}'")
        aliases[split] = tuple(str(v).lower() for v in values)
    return aliases


def _parse_templates(raw: object) -> dict[str, dict[str, dict[int, tuple[str, ...]]]]:
    if not isinstance(raw, dict):
        raise TaxonomyError("Taxonomy 'templates' must be a mapping")

    templates: dict[str, dict[str, dict[int, tuple[str, ...]]]] = {}
    for focus, by_experience in raw.items():
        if focus not in {f.value for f in PrimaryFocus}:
            raise TaxonomyError(f"Unknown focus in templates: '{focus}'")
        if not isinstance(by_experience, dict):
            raise TaxonomyError(f"Invalid template format for focus '{focus}'")
        templates[focus] = {}
        for experience, by_days in by_experience.items():
            if experience != "default" and experience not in {e.value for e in ExperienceLevel}:
                raise TaxonomyError(f"Unknown experience level in templates: '{experience}'")
            if not isinstance(by_days, dict):
                raise TaxonomyError(f"Invalid template format for '{focus}.{experience}'")
            templates[focus][experience] = {}
            for days, labels in by_days.items():
                if not isinstance(days, int) or not isinstance(labels, list) or len(labels) != days:
                    raise TaxonomyError(
                        f"Template '{focus}.{experience}.{days}' must list one label per day"
                    )
                templates[focus][experience][days] = tuple(str(label) for label in labels)
    return templates


def _parse_banned(rows: object) -> tuple[BannedExercise, ...]:
    if not isinstance(rows, list):
        raise TaxonomyError("Taxonomy 'banned_exercises' must be a list")

    banned: list[BannedExercise] = []
    for i, row in enumerate(rows):
        where = f"banned_exercises[{i}]"
        if not isinstance(row, dict) or not row.get("replacement"):
            raise TaxonomyError(f"No replacement in {where}")
        banned.append(BannedExercise(pattern=_compile(row.get("match"), where), replacement=str(row["replacement"])))
    return tuple(banned)


@lru_cache(maxsize=8)
def load_taxonomy(path: Path | str | None = None) -> Taxonomy:
    """Load and validate a taxonomy document.

    Results are cached per path; the document is treated as immutable for
    the life of the process.

    Args:
        path: YAML file to load (default: packaged taxonomy)

    Returns:
        Parsed Taxonomy

    Raises:
        TaxonomyError: If the file is missing or any section is malformed
    """
    taxonomy_path = Path(path) if path is not None else DEFAULT_TAXONOMY_PATH
    if not taxonomy_path.exists():
        raise TaxonomyError(f"Taxonomy document missing: {taxonomy_path}")

    with taxonomy_path.open(encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise TaxonomyError(f"Taxonomy document is not valid YAML: {e}") from e

    if not isinstance(raw, dict):
        raise TaxonomyError("Invalid taxonomy document format")

    missing = [section for section in _REQUIRED_SECTIONS if section not in raw]
    if missing:
        raise TaxonomyError(f"Taxonomy document missing sections: {missing}")

    accessory = raw["accessory_patterns"]
    if not isinstance(accessory, list) or not accessory:
        raise TaxonomyError("Taxonomy 'accessory_patterns' must be a non-empty list")

    taxonomy = Taxonomy(
        exercise_rules=_parse_exercises(raw["exercises"]),
        accessory_pattern=_compile("|".join(f"(?:{p})" for p in accessory), "accessory_patterns"),
        split_aliases=_parse_split_aliases(raw["split_aliases"]),
        templates=_parse_templates(raw["templates"]),
        banned_exercises=_parse_banned(raw["banned_exercises"]),
    )

    logger.debug(
        "Taxonomy loaded",
        path=str(taxonomy_path),
        exercise_rules=len(taxonomy.exercise_rules),
        banned_exercises=len(taxonomy.banned_exercises),
    )
    return taxonomy


def default_taxonomy() -> Taxonomy:
    """Load the taxonomy at LIFTGUARD_TAXONOMY_PATH, or the packaged default."""
    return load_taxonomy(get_settings().taxonomy_path)
