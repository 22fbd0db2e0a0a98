"""Pull named attempt values out of a player's raw score record.

Field names follow the evaluation form's positional-suffix convention
(``power_strong_1`` .. ``power_strong_4``, ``onevone_round_N`` ...). Values are
coerced to finite floats; anything else becomes a missing attempt.
"""

import logging
import math
import re
from collections.abc import Iterator, Mapping
from typing import Any

from player_style.domain.attempts import (
    AgilityAttempts,
    AnkleDorsiflexionAttempts,
    Attempt,
    CorePlankAttempts,
    DoubleLegJumpAttempts,
    Figure8Attempts,
    JugglingAttempts,
    OneVOneAttempts,
    PassingGatesAttempts,
    PlayerAttempts,
    ReactionAttempts,
    ServeDistanceAttempts,
    ShotPowerAttempts,
    SingleLegHopAttempts,
    SkillMoveAttempts,
)
from player_style.domain.evaluation import Evaluation
from player_style.exceptions import MalformedEvaluationError, MalformedScoreRecordError

logger = logging.getLogger(__name__)

SINGLE_FIELDS = frozenset(
    {
        "figure8_strong",
        "figure8_weak",
        "figure8_both",
        "passing_strong",
        "passing_weak",
        "jumps_10s",
        "jumps_20s",
        "jumps_30s",
        "ankle_left",
        "ankle_right",
        "plank_time",
        "plank_form",
    }
)

# family prefix -> number of attempts recorded per player
FIXED_FAMILIES: dict[str, int] = {
    "power_strong": 4,
    "power_weak": 4,
    "serve_strong": 4,
    "serve_weak": 4,
    "juggling": 4,
    "agility": 3,
    "reaction_cue": 3,
    "reaction_total": 3,
    "hop_left": 3,
    "hop_right": 3,
}

# sized per evaluation by its configured counts
OPEN_FAMILIES = frozenset({"onevone_round", "skillmove"})

_INDEXED_FIELD = re.compile(r"^(?P<prefix>[a-z0-9_]+?)_(?P<index>[1-9][0-9]*)$")


def to_finite_number(value: Any) -> float | None:
    """Coerce a finite number or numeric string to float; anything else is missing."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return None
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def attempt_family(record: Mapping[str, Any], prefix: str, count: int) -> tuple[Attempt, ...]:
    """Read ``prefix_1 .. prefix_count``; an empty tuple when ``count`` is not positive."""
    if count <= 0:
        return ()
    return tuple(to_finite_number(record.get(f"{prefix}_{i}")) for i in range(1, count + 1))


def is_known_field(name: str) -> bool:
    if name in SINGLE_FIELDS:
        return True
    match = _INDEXED_FIELD.match(name)
    if match is None:
        return False
    prefix = match["prefix"]
    index = int(match["index"])
    if prefix in OPEN_FAMILIES:
        return True
    size = FIXED_FAMILIES.get(prefix)
    return size is not None and index <= size


def validate_record(player_id: str, record: Any, *, strict: bool = True) -> Mapping[str, Any]:
    if not isinstance(record, Mapping):
        raise MalformedScoreRecordError(player_id, f"expected a mapping of fields, got {type(record).__name__}")
    unknown = sorted(str(k) for k in record if not isinstance(k, str) or not is_known_field(k))
    if unknown:
        if strict:
            raise MalformedScoreRecordError(player_id, f"unknown field(s): {', '.join(unknown)}")
        logger.warning("Ignoring unknown score field(s) for player %s: %s", player_id, ", ".join(unknown))
    return record


def parse_player_attempts(
    player_id: str,
    record: Any,
    one_v_one_rounds: int,
    skill_moves_count: int,
    *,
    strict: bool = True,
) -> PlayerAttempts:
    fields = validate_record(player_id, record, strict=strict)

    def single(name: str) -> Attempt:
        return to_finite_number(fields.get(name))

    rounds = max(one_v_one_rounds, 0)
    moves = max(skill_moves_count, 0)
    return PlayerAttempts(
        shot_power=ShotPowerAttempts(
            strong=attempt_family(fields, "power_strong", 4),
            weak=attempt_family(fields, "power_weak", 4),
        ),
        serve_distance=ServeDistanceAttempts(
            strong=attempt_family(fields, "serve_strong", 4),
            weak=attempt_family(fields, "serve_weak", 4),
        ),
        figure8=Figure8Attempts(
            strong=single("figure8_strong"),
            weak=single("figure8_weak"),
            both=single("figure8_both"),
        ),
        passing_gates=PassingGatesAttempts(strong=single("passing_strong"), weak=single("passing_weak")),
        one_v_one=OneVOneAttempts(rounds=rounds, scores=attempt_family(fields, "onevone_round", rounds)),
        juggling=JugglingAttempts(attempts=attempt_family(fields, "juggling", 4)),
        skill_moves=SkillMoveAttempts(count=moves, ratings=attempt_family(fields, "skillmove", moves)),
        agility=AgilityAttempts(trials=attempt_family(fields, "agility", 3)),
        reaction=ReactionAttempts(
            reaction_times=attempt_family(fields, "reaction_cue", 3),
            total_times=attempt_family(fields, "reaction_total", 3),
        ),
        single_leg_hop=SingleLegHopAttempts(
            left=attempt_family(fields, "hop_left", 3),
            right=attempt_family(fields, "hop_right", 3),
        ),
        double_leg_jumps=DoubleLegJumpAttempts(
            at_10s=single("jumps_10s"),
            at_20s=single("jumps_20s"),
            at_30s=single("jumps_30s"),
        ),
        ankle_dorsiflexion=AnkleDorsiflexionAttempts(left_in=single("ankle_left"), right_in=single("ankle_right")),
        core_plank=CorePlankAttempts(hold_sec=single("plank_time"), form_flag=single("plank_form")),
    )


def evaluation_scores(evaluation: Evaluation) -> Mapping[str, Any]:
    """The evaluation's ``player id -> score record`` map, validated at the top level."""
    if not isinstance(evaluation.scores, Mapping):
        raise MalformedEvaluationError(evaluation.id, "scores must be a mapping of player id to score record")
    return evaluation.scores


def evaluation_attempts(evaluation: Evaluation, *, strict: bool = True) -> Iterator[tuple[str, PlayerAttempts]]:
    """Parse every player's attempts in ``evaluation`` using its configured round/move counts."""
    for player_id, record in evaluation_scores(evaluation).items():
        yield (
            str(player_id),
            parse_player_attempts(
                str(player_id),
                record,
                evaluation.one_v_one_rounds,
                evaluation.skill_moves_count,
                strict=strict,
            ),
        )
