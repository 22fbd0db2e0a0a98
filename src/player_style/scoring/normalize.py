"""Map raw derived metrics onto [0, 1] "player DNA" features.

Most features are min-max scaled against the player's birth-year cohort. A few
use fixed scales that do not depend on the cohort: rating averages on their
known scale, a pass-through form flag, and tolerance bands for imbalance and
fatigue percentages.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

from player_style.domain.metrics import CohortStats, MinMax
from player_style.scoring.optional import fmap
from player_style.scoring.reducers import clamp01


class Policy(StrEnum):
    HIGHER_IS_BETTER = "higher"
    LOWER_IS_BETTER = "lower"
    FIXED_SCALE = "fixed_scale"
    TOLERANCE = "tolerance"
    PASSTHROUGH = "passthrough"


@dataclass(frozen=True)
class NormalizedFeature:
    name: str
    source: str
    policy: Policy
    scale: tuple[float, float] | None = None
    tolerance_pct: float | None = None

    def __post_init__(self) -> None:
        if self.policy is Policy.FIXED_SCALE and self.scale is None:
            raise ValueError(f"{self.name}: fixed-scale features need a scale")
        if self.policy is Policy.TOLERANCE and self.tolerance_pct is None:
            raise ValueError(f"{self.name}: tolerance features need tolerance_pct")

    @property
    def cohort_relative(self) -> bool:
        return self.policy in (Policy.HIGHER_IS_BETTER, Policy.LOWER_IS_BETTER)


def min_max_normalize(value: float | None, lo: float | None, hi: float | None) -> float | None:
    if value is None or lo is None or hi is None:
        return None
    if hi == lo:
        return 1.0 if value == lo else 0.0
    return (value - lo) / (hi - lo)


def min_max_normalize_lower_better(value: float | None, lo: float | None, hi: float | None) -> float | None:
    if value is None or lo is None or hi is None:
        return None
    # a cohort of identical times is uniformly good
    if hi == lo:
        return 1.0
    return 1 - (value - lo) / (hi - lo)


def fixed_scale(value: float | None, low: float, high: float) -> float | None:
    return fmap(value, lambda v: (v - low) / (high - low))


def tolerance_score(pct: float | None, tolerance_pct: float) -> float | None:
    """1 at 0% imbalance, 0 at ``tolerance_pct`` or worse, linear in between."""
    return fmap(pct, lambda p: clamp01(1 - p / tolerance_pct))


def _higher(source: str) -> NormalizedFeature:
    return NormalizedFeature(f"{source}_norm", source, Policy.HIGHER_IS_BETTER)


def _lower(source: str) -> NormalizedFeature:
    return NormalizedFeature(f"{source}_norm", source, Policy.LOWER_IS_BETTER)


def _tolerance(source: str, pct: float) -> NormalizedFeature:
    return NormalizedFeature(f"{source}_norm", source, Policy.TOLERANCE, tolerance_pct=pct)


NORMALIZED_FEATURES: tuple[NormalizedFeature, ...] = (
    _higher("shot_power_strong_avg"),
    _higher("shot_power_weak_avg"),
    _higher("shot_power_strong_max"),
    _higher("shot_power_weak_max"),
    _higher("serve_distance_strong_avg"),
    _higher("serve_distance_weak_avg"),
    _higher("serve_distance_strong_max"),
    _higher("serve_distance_weak_max"),
    _higher("figure8_loops_strong"),
    _higher("figure8_loops_weak"),
    _higher("figure8_loops_both"),
    _higher("passing_gates_strong_hits"),
    _higher("passing_gates_weak_hits"),
    _higher("passing_gates_total_hits"),
    # rounds are scored 1 (loss) to 3 (win)
    NormalizedFeature("one_v_one_avg_score_norm", "one_v_one_avg_score", Policy.FIXED_SCALE, scale=(1.0, 3.0)),
    _higher("one_v_one_rounds_played"),
    _higher("juggle_best"),
    _higher("juggle_best2_sum"),
    _higher("juggle_avg_all"),
    # moves are rated 1 to 5
    NormalizedFeature("skill_moves_avg_rating_norm", "skill_moves_avg_rating", Policy.FIXED_SCALE, scale=(1.0, 5.0)),
    _higher("skill_moves_count"),
    _lower("agility_5_10_5_best_time"),
    _lower("agility_5_10_5_avg_time"),
    _lower("reaction_5m_reaction_time_avg"),
    _lower("reaction_5m_total_time_avg"),
    _higher("single_leg_hop_left"),
    _higher("single_leg_hop_right"),
    _tolerance("single_leg_hop_asymmetry_pct", 30.0),
    _higher("double_leg_jumps_first10"),
    _higher("double_leg_jumps_total_reps"),
    _higher("double_leg_jumps_last10"),
    _tolerance("double_leg_jumps_dropoff_pct", 60.0),
    _higher("ankle_dorsiflex_left_cm"),
    _higher("ankle_dorsiflex_right_cm"),
    _higher("ankle_dorsiflex_avg_cm"),
    _tolerance("ankle_dorsiflex_asymmetry_pct", 30.0),
    _higher("core_plank_hold_sec"),
    NormalizedFeature("core_plank_form_flag_norm", "core_plank_form_flag", Policy.PASSTHROUGH),
)

FEATURES_BY_NAME: dict[str, NormalizedFeature] = {f.name: f for f in NORMALIZED_FEATURES}


def normalize_feature(
    feature: NormalizedFeature,
    raw: Mapping[str, float | None],
    cohort: CohortStats,
) -> float | None:
    value = raw.get(feature.source)
    match feature.policy:
        case Policy.HIGHER_IS_BETTER:
            bounds = cohort.get(feature.source, MinMax())
            return min_max_normalize(value, bounds.min, bounds.max)
        case Policy.LOWER_IS_BETTER:
            bounds = cohort.get(feature.source, MinMax())
            return min_max_normalize_lower_better(value, bounds.min, bounds.max)
        case Policy.FIXED_SCALE if feature.scale is not None:
            return fixed_scale(value, *feature.scale)
        case Policy.TOLERANCE if feature.tolerance_pct is not None:
            return tolerance_score(value, feature.tolerance_pct)
        case Policy.PASSTHROUGH:
            return value
        case _:
            raise ValueError(f"{feature.name}: missing parameters for policy {feature.policy}")


def normalize(raw: Mapping[str, float | None], cohort: CohortStats | None) -> dict[str, float | None]:
    """Normalize every feature for one player; all None when the player has no cohort."""
    if cohort is None:
        return {f.name: None for f in NORMALIZED_FEATURES}
    return {f.name: normalize_feature(f, raw, cohort) for f in NORMALIZED_FEATURES}
