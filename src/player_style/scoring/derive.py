import logging

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
from player_style.domain.metrics import DerivedMetricSet
from player_style.scoring.optional import fmap, map2
from player_style.scoring.reducers import (
    avg_all,
    consistency_range,
    max_all,
    max_of,
    mean4,
    min_all,
    safe_asymmetry_pct,
    safe_ratio,
    side_asymmetry_pct,
    sum_all,
    sum_top2_of4,
)

logger = logging.getLogger(__name__)

CM_PER_INCH = 2.54

type RawMetrics = dict[str, float | None]


def _strong_weak_metrics(prefix: str, strong: tuple[Attempt, ...], weak: tuple[Attempt, ...]) -> RawMetrics:
    strong_avg = mean4(strong)
    weak_avg = mean4(weak)
    strong_max = max_of(strong)
    weak_max = max_of(weak)
    return {
        f"{prefix}_strong_avg": strong_avg,
        f"{prefix}_weak_avg": weak_avg,
        f"{prefix}_strong_max": strong_max,
        f"{prefix}_weak_max": weak_max,
        f"{prefix}_weak_to_strong_ratio": safe_ratio(weak_avg, strong_avg),
        f"{prefix}_asymmetry_pct": safe_asymmetry_pct(strong_avg, weak_avg),
        f"{prefix}_weak_to_strong_ratio_max": safe_ratio(weak_max, strong_max),
        f"{prefix}_asymmetry_pct_max": safe_asymmetry_pct(strong_max, weak_max),
    }


def shot_power_metrics(a: ShotPowerAttempts) -> RawMetrics:
    return _strong_weak_metrics("shot_power", a.strong, a.weak)


def serve_distance_metrics(a: ServeDistanceAttempts) -> RawMetrics:
    return _strong_weak_metrics("serve_distance", a.strong, a.weak)


def figure8_metrics(a: Figure8Attempts) -> RawMetrics:
    return {
        "figure8_loops_strong": a.strong,
        "figure8_loops_weak": a.weak,
        "figure8_loops_both": a.both,
        "figure8_weak_to_strong_ratio": safe_ratio(a.weak, a.strong),
        "figure8_both_to_strong_ratio": safe_ratio(a.both, a.strong),
        "figure8_asymmetry_pct": safe_asymmetry_pct(a.strong, a.weak),
    }


def passing_gates_metrics(a: PassingGatesAttempts) -> RawMetrics:
    total = map2(a.strong, a.weak, lambda s, w: s + w)
    return {
        "passing_gates_strong_hits": a.strong,
        "passing_gates_weak_hits": a.weak,
        "passing_gates_total_hits": total,
        "passing_gates_weak_to_strong_ratio": safe_ratio(a.weak, a.strong),
        "passing_gates_asymmetry_pct": safe_asymmetry_pct(a.strong, a.weak),
        "passing_gates_weak_share_pct": fmap(safe_ratio(a.weak, total), lambda r: r * 100),
    }


def one_v_one_metrics(a: OneVOneAttempts) -> RawMetrics:
    # a zero round count means the test was not run, not that zero rounds were played
    return {
        "one_v_one_rounds_played": float(a.rounds) if a.rounds > 0 else None,
        "one_v_one_avg_score": avg_all(a.scores),
        "one_v_one_total_score": sum_all(a.scores),
        "one_v_one_best_round": max_all(a.scores),
        "one_v_one_worst_round": min_all(a.scores),
        "one_v_one_consistency_range": consistency_range(a.scores),
    }


def juggling_metrics(a: JugglingAttempts) -> RawMetrics:
    return {
        "juggle_best": max_all(a.attempts),
        "juggle_best2_sum": sum_top2_of4(a.attempts),
        "juggle_avg_all": mean4(a.attempts),
        "juggle_total": sum_all(a.attempts),
        "juggle_consistency_range": consistency_range(a.attempts),
    }


def skill_moves_metrics(a: SkillMoveAttempts) -> RawMetrics:
    return {
        "skill_moves_count": float(a.count) if a.count > 0 else None,
        "skill_moves_avg_rating": avg_all(a.ratings),
        "skill_moves_total_rating": sum_all(a.ratings),
        "skill_moves_best_rating": max_all(a.ratings),
        "skill_moves_worst_rating": min_all(a.ratings),
        "skill_moves_consistency_range": consistency_range(a.ratings),
    }


def agility_metrics(a: AgilityAttempts) -> RawMetrics:
    # times: the best trial is the smallest
    return {
        "agility_5_10_5_best_time": min_all(a.trials),
        "agility_5_10_5_avg_time": avg_all(a.trials),
        "agility_5_10_5_worst_time": max_all(a.trials),
        "agility_5_10_5_consistency_range": consistency_range(a.trials),
    }


def reaction_metrics(a: ReactionAttempts) -> RawMetrics:
    return {
        "reaction_5m_reaction_time_avg": avg_all(a.reaction_times),
        "reaction_5m_total_time_avg": avg_all(a.total_times),
        "reaction_5m_reaction_time_best": min_all(a.reaction_times),
        "reaction_5m_total_time_best": min_all(a.total_times),
        "reaction_5m_reaction_time_worst": max_all(a.reaction_times),
        "reaction_5m_total_time_worst": max_all(a.total_times),
        "reaction_5m_reaction_consistency_range": consistency_range(a.reaction_times),
        "reaction_5m_total_consistency_range": consistency_range(a.total_times),
    }


def single_leg_hop_metrics(a: SingleLegHopAttempts) -> RawMetrics:
    left = max_all(a.left)
    right = max_all(a.right)
    return {
        "single_leg_hop_left": left,
        "single_leg_hop_right": right,
        "single_leg_hop_asymmetry_pct": side_asymmetry_pct(left, right),
        "single_leg_hop_left_avg": avg_all(a.left),
        "single_leg_hop_right_avg": avg_all(a.right),
        "single_leg_hop_left_consistency_range": consistency_range(a.left),
        "single_leg_hop_right_consistency_range": consistency_range(a.right),
    }


def double_leg_jumps_metrics(a: DoubleLegJumpAttempts) -> RawMetrics:
    first10 = a.at_10s
    last10 = map2(a.at_30s, a.at_20s, lambda c30, c20: c30 - c20)
    dropoff = None
    if first10 is not None and last10 is not None and first10 != 0:
        dropoff = (first10 - last10) / first10 * 100
    return {
        "double_leg_jumps_first10": first10,
        "double_leg_jumps_total_reps": a.at_30s,
        "double_leg_jumps_last10": last10,
        "double_leg_jumps_dropoff_pct": dropoff,
        "double_leg_jumps_mid10": map2(a.at_20s, a.at_10s, lambda c20, c10: c20 - c10),
        "double_leg_jumps_first20": a.at_20s,
        "double_leg_jumps_last20": map2(a.at_30s, a.at_10s, lambda c30, c10: c30 - c10),
    }


def ankle_dorsiflexion_metrics(a: AnkleDorsiflexionAttempts) -> RawMetrics:
    left = fmap(a.left_in, lambda v: v * CM_PER_INCH)
    right = fmap(a.right_in, lambda v: v * CM_PER_INCH)
    return {
        "ankle_dorsiflex_left_cm": left,
        "ankle_dorsiflex_right_cm": right,
        "ankle_dorsiflex_avg_cm": map2(left, right, lambda lt, rt: (lt + rt) / 2),
        "ankle_dorsiflex_asymmetry_pct": side_asymmetry_pct(left, right),
        "ankle_dorsiflex_left_minus_right_cm": map2(left, right, lambda lt, rt: lt - rt),
    }


def core_plank_metrics(a: CorePlankAttempts) -> RawMetrics:
    return {
        "core_plank_hold_sec": a.hold_sec,
        "core_plank_form_flag": a.form_flag,
        "core_plank_hold_sec_if_good_form": map2(
            a.hold_sec, a.form_flag, lambda hold, flag: hold if flag == 1 else 0.0
        ),
    }


def attempt_inputs(a: PlayerAttempts) -> dict[str, object]:
    """The attempt values consumed by derivation, grouped per test."""
    return {
        "power": {"strong": list(a.shot_power.strong), "weak": list(a.shot_power.weak)},
        "serve": {"strong": list(a.serve_distance.strong), "weak": list(a.serve_distance.weak)},
        "figure8": {"strong": a.figure8.strong, "weak": a.figure8.weak, "both": a.figure8.both},
        "passing": {"strong": a.passing_gates.strong, "weak": a.passing_gates.weak},
        "onevone": {"rounds": a.one_v_one.rounds, "scores": list(a.one_v_one.scores)},
        "juggling": {"attempts": list(a.juggling.attempts)},
        "skillmoves": {"count": a.skill_moves.count, "ratings": list(a.skill_moves.ratings)},
        "agility": {"trials": list(a.agility.trials)},
        "reaction5m": {
            "reaction_times": list(a.reaction.reaction_times),
            "total_times": list(a.reaction.total_times),
        },
        "hop": {"left": list(a.single_leg_hop.left), "right": list(a.single_leg_hop.right)},
        "jumps": {
            "at_10s": a.double_leg_jumps.at_10s,
            "at_20s": a.double_leg_jumps.at_20s,
            "at_30s": a.double_leg_jumps.at_30s,
        },
        "ankle": {"left_in": a.ankle_dorsiflexion.left_in, "right_in": a.ankle_dorsiflexion.right_in},
        "plank": {"hold_sec": a.core_plank.hold_sec, "form_flag": a.core_plank.form_flag},
    }


def derive_metrics(attempts: PlayerAttempts) -> DerivedMetricSet:
    """Compute every cohort-independent raw metric for one player's attempts."""
    raw: RawMetrics = {}
    raw.update(shot_power_metrics(attempts.shot_power))
    raw.update(serve_distance_metrics(attempts.serve_distance))
    raw.update(figure8_metrics(attempts.figure8))
    raw.update(passing_gates_metrics(attempts.passing_gates))
    raw.update(one_v_one_metrics(attempts.one_v_one))
    raw.update(juggling_metrics(attempts.juggling))
    raw.update(skill_moves_metrics(attempts.skill_moves))
    raw.update(agility_metrics(attempts.agility))
    raw.update(reaction_metrics(attempts.reaction))
    raw.update(single_leg_hop_metrics(attempts.single_leg_hop))
    raw.update(double_leg_jumps_metrics(attempts.double_leg_jumps))
    raw.update(ankle_dorsiflexion_metrics(attempts.ankle_dorsiflexion))
    raw.update(core_plank_metrics(attempts.core_plank))
    logger.debug("Derived %d raw metrics (%d missing)", len(raw), sum(v is None for v in raw.values()))
    return DerivedMetricSet(inputs=attempt_inputs(attempts), raw=raw)
