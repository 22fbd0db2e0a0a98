"""Weighted composite "player style" scores.

Each composite is a weighted average of individual normalized features: a test
with more available features contributes proportionally more to both the
numerator and the denominator, so tests are not down-weighted when some of
their features are missing.
"""

import logging
import math
from collections.abc import Mapping

from player_style.domain.metrics import Composite, CompositeScore, CompositeScoreSet, ContributingTest
from player_style.scoring.optional import present

logger = logging.getLogger(__name__)

TEST_FEATURES: dict[str, tuple[str, ...]] = {
    "shot_power": (
        "shot_power_strong_avg_norm",
        "shot_power_weak_avg_norm",
        "shot_power_strong_max_norm",
        "shot_power_weak_max_norm",
    ),
    "serve_distance": (
        "serve_distance_strong_avg_norm",
        "serve_distance_weak_avg_norm",
        "serve_distance_strong_max_norm",
        "serve_distance_weak_max_norm",
    ),
    "figure8": ("figure8_loops_strong_norm", "figure8_loops_weak_norm", "figure8_loops_both_norm"),
    "passing_gates": (
        "passing_gates_strong_hits_norm",
        "passing_gates_weak_hits_norm",
        "passing_gates_total_hits_norm",
    ),
    "one_v_one": ("one_v_one_avg_score_norm", "one_v_one_rounds_played_norm"),
    "juggling": ("juggle_best_norm", "juggle_best2_sum_norm", "juggle_avg_all_norm"),
    "skill_moves": ("skill_moves_avg_rating_norm", "skill_moves_count_norm"),
    "agility": ("agility_5_10_5_best_time_norm", "agility_5_10_5_avg_time_norm"),
    "reaction": ("reaction_5m_reaction_time_avg_norm", "reaction_5m_total_time_avg_norm"),
    "single_leg_hop": (
        "single_leg_hop_left_norm",
        "single_leg_hop_right_norm",
        "single_leg_hop_asymmetry_pct_norm",
    ),
    "double_leg_jumps": (
        "double_leg_jumps_total_reps_norm",
        "double_leg_jumps_first10_norm",
        "double_leg_jumps_last10_norm",
        "double_leg_jumps_dropoff_pct_norm",
    ),
    "ankle_dorsiflexion": (
        "ankle_dorsiflex_left_cm_norm",
        "ankle_dorsiflex_right_cm_norm",
        "ankle_dorsiflex_avg_cm_norm",
        "ankle_dorsiflex_asymmetry_pct_norm",
    ),
    "core_plank": ("core_plank_hold_sec_norm", "core_plank_form_flag_norm"),
}

_PS = Composite.POWER_STRENGTH
_TC = Composite.TECHNIQUE_CONTROL
_MS = Composite.MOBILITY_STABILITY
_DC = Composite.DECISION_COGNITION

# (composite, test, weight); tests absent for a composite do not contribute to it
COMPOSITE_WEIGHTS: tuple[tuple[Composite, str, int], ...] = (
    (_PS, "shot_power", 3),
    (_PS, "serve_distance", 3),
    (_PS, "one_v_one", 1),
    (_PS, "agility", 2),
    (_PS, "reaction", 1),
    (_PS, "single_leg_hop", 2),
    (_PS, "double_leg_jumps", 3),
    (_PS, "core_plank", 2),
    (_TC, "shot_power", 1),
    (_TC, "serve_distance", 1),
    (_TC, "figure8", 3),
    (_TC, "passing_gates", 3),
    (_TC, "one_v_one", 2),
    (_TC, "juggling", 3),
    (_TC, "skill_moves", 3),
    (_TC, "ankle_dorsiflexion", 1),
    (_MS, "serve_distance", 2),
    (_MS, "figure8", 2),
    (_MS, "passing_gates", 1),
    (_MS, "one_v_one", 2),
    (_MS, "juggling", 1),
    (_MS, "skill_moves", 1),
    (_MS, "agility", 3),
    (_MS, "reaction", 2),
    (_MS, "single_leg_hop", 3),
    (_MS, "double_leg_jumps", 2),
    (_MS, "ankle_dorsiflexion", 3),
    (_MS, "core_plank", 3),
    (_DC, "shot_power", 1),
    (_DC, "figure8", 1),
    (_DC, "passing_gates", 2),
    (_DC, "one_v_one", 3),
    (_DC, "skill_moves", 2),
    (_DC, "agility", 1),
    (_DC, "reaction", 3),
)


def weights_for(composite: Composite) -> list[tuple[str, int]]:
    return [(test, weight) for c, test, weight in COMPOSITE_WEIGHTS if c is composite]


def composite_score(norm: Mapping[str, float | None], composite: Composite) -> CompositeScore:
    contributions: list[ContributingTest] = []
    for test, weight in weights_for(composite):
        values = present(norm.get(name) for name in TEST_FEATURES[test])
        contributions.append(
            ContributingTest(test=test, weight=weight, feature_sum=sum(values), feature_count=len(values))
        )
    denominator = sum(c.denominator for c in contributions)
    score: float | None = None
    if denominator > 0:
        # sum of (weight / denominator) * feature_sum keeps a lone feature exact
        score = math.fsum(c.weight / denominator * c.feature_sum for c in contributions)
    return CompositeScore(composite=composite, score=score, contributions=tuple(contributions))


def compute_composites(norm: Mapping[str, float | None]) -> CompositeScoreSet:
    scores = {c: composite_score(norm, c) for c in Composite}
    for result in scores.values():
        for term in result.contributions:
            logger.debug(
                "%s %s: sum=%.6f features=%d weight=%d contribution=%.6f denominator=%d",
                result.composite.value.upper(),
                term.test,
                term.feature_sum,
                term.feature_count,
                term.weight,
                term.contribution,
                term.denominator,
            )
    return CompositeScoreSet(
        ps=scores[_PS].score,
        tc=scores[_TC].score,
        ms=scores[_MS].score,
        dc=scores[_DC].score,
        breakdown=tuple(scores.values()),
    )
