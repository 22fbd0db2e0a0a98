import pytest

from player_style.domain.attempts import (
    AgilityAttempts,
    AnkleDorsiflexionAttempts,
    CorePlankAttempts,
    DoubleLegJumpAttempts,
    Figure8Attempts,
    JugglingAttempts,
    OneVOneAttempts,
    PassingGatesAttempts,
    ReactionAttempts,
    ServeDistanceAttempts,
    ShotPowerAttempts,
    SingleLegHopAttempts,
    SkillMoveAttempts,
)
from player_style.scoring.derive import (
    agility_metrics,
    ankle_dorsiflexion_metrics,
    core_plank_metrics,
    derive_metrics,
    double_leg_jumps_metrics,
    figure8_metrics,
    juggling_metrics,
    one_v_one_metrics,
    passing_gates_metrics,
    reaction_metrics,
    serve_distance_metrics,
    shot_power_metrics,
    single_leg_hop_metrics,
    skill_moves_metrics,
)
from player_style.scoring.extract import parse_player_attempts
from tests.helpers import score_record


class TestShotPower:
    def test_strong_weak_scenario(self) -> None:
        metrics = shot_power_metrics(ShotPowerAttempts(strong=(10, 12, 14, 8), weak=(6, 7, 5, 6)))
        assert metrics["shot_power_strong_avg"] == 11.0
        assert metrics["shot_power_weak_avg"] == 6.0
        assert metrics["shot_power_strong_max"] == 14
        assert metrics["shot_power_weak_max"] == 7
        assert metrics["shot_power_weak_to_strong_ratio"] == pytest.approx(0.5454, rel=1e-3)
        assert metrics["shot_power_asymmetry_pct"] == pytest.approx(45.45, rel=1e-3)
        assert metrics["shot_power_weak_to_strong_ratio_max"] == pytest.approx(0.5)

    def test_missing_attempt_drops_average_not_max(self) -> None:
        metrics = shot_power_metrics(ShotPowerAttempts(strong=(10, None, 14, 8), weak=(6, 7, 5, 6)))
        assert metrics["shot_power_strong_avg"] is None
        assert metrics["shot_power_weak_to_strong_ratio"] is None
        assert metrics["shot_power_asymmetry_pct"] is None
        assert metrics["shot_power_strong_max"] == 14


def test_serve_distance_keys_are_prefixed() -> None:
    metrics = serve_distance_metrics(ServeDistanceAttempts(strong=(20, 22, 24, 18), weak=(12, 14, 10, 12)))
    assert metrics["serve_distance_strong_avg"] == 21.0
    assert metrics["serve_distance_weak_avg"] == 12.0
    assert all(key.startswith("serve_distance_") for key in metrics)


def test_figure8() -> None:
    metrics = figure8_metrics(Figure8Attempts(strong=8, weak=6, both=4))
    assert metrics["figure8_weak_to_strong_ratio"] == 0.75
    assert metrics["figure8_both_to_strong_ratio"] == 0.5
    assert metrics["figure8_asymmetry_pct"] == 25.0


class TestPassingGates:
    def test_totals_and_share(self) -> None:
        metrics = passing_gates_metrics(PassingGatesAttempts(strong=6, weak=4))
        assert metrics["passing_gates_total_hits"] == 10
        assert metrics["passing_gates_weak_share_pct"] == pytest.approx(40.0)

    def test_no_hits(self) -> None:
        metrics = passing_gates_metrics(PassingGatesAttempts(strong=0, weak=0))
        assert metrics["passing_gates_total_hits"] == 0
        assert metrics["passing_gates_weak_to_strong_ratio"] is None
        assert metrics["passing_gates_weak_share_pct"] is None


class TestOneVOne:
    def test_rounds(self) -> None:
        metrics = one_v_one_metrics(OneVOneAttempts(rounds=3, scores=(3, 1, 2)))
        assert metrics == {
            "one_v_one_rounds_played": 3.0,
            "one_v_one_avg_score": 2.0,
            "one_v_one_total_score": 6,
            "one_v_one_best_round": 3,
            "one_v_one_worst_round": 1,
            "one_v_one_consistency_range": 2,
        }

    def test_zero_rounds_all_missing_despite_stray_fields(self) -> None:
        attempts = parse_player_attempts("p1", score_record(), 0, 2)
        metrics = one_v_one_metrics(attempts.one_v_one)
        assert all(value is None for value in metrics.values())

    def test_missing_round_score(self) -> None:
        metrics = one_v_one_metrics(OneVOneAttempts(rounds=3, scores=(3, None, 2)))
        assert metrics["one_v_one_rounds_played"] == 3.0
        assert metrics["one_v_one_avg_score"] is None


def test_juggling() -> None:
    metrics = juggling_metrics(JugglingAttempts(attempts=(10, 25, 15, 5)))
    assert metrics["juggle_best"] == 25
    assert metrics["juggle_best2_sum"] == 40
    assert metrics["juggle_avg_all"] == 13.75
    assert metrics["juggle_total"] == 55
    assert metrics["juggle_consistency_range"] == 20


def test_skill_moves_zero_count() -> None:
    metrics = skill_moves_metrics(SkillMoveAttempts(count=0, ratings=()))
    assert all(value is None for value in metrics.values())


def test_agility_best_is_fastest() -> None:
    metrics = agility_metrics(AgilityAttempts(trials=(5.5, 5.25, 5.75)))
    assert metrics["agility_5_10_5_best_time"] == 5.25
    assert metrics["agility_5_10_5_worst_time"] == 5.75
    assert metrics["agility_5_10_5_avg_time"] == pytest.approx(5.5)
    assert metrics["agility_5_10_5_consistency_range"] == pytest.approx(0.5)


def test_reaction() -> None:
    metrics = reaction_metrics(ReactionAttempts(reaction_times=(0.5, 0.75, 0.625), total_times=(1.5, 1.75, 1.625)))
    assert metrics["reaction_5m_reaction_time_best"] == 0.5
    assert metrics["reaction_5m_total_time_worst"] == 1.75
    assert metrics["reaction_5m_reaction_time_avg"] == pytest.approx(0.625)


def test_single_leg_hop() -> None:
    metrics = single_leg_hop_metrics(SingleLegHopAttempts(left=(100, 110, 105), right=(90, 99, 95)))
    assert metrics["single_leg_hop_left"] == 110
    assert metrics["single_leg_hop_right"] == 99
    assert metrics["single_leg_hop_asymmetry_pct"] == pytest.approx(10.0)


class TestDoubleLegJumps:
    def test_cumulative_counts(self) -> None:
        metrics = double_leg_jumps_metrics(DoubleLegJumpAttempts(at_10s=12, at_20s=22, at_30s=30))
        assert metrics["double_leg_jumps_first10"] == 12
        assert metrics["double_leg_jumps_total_reps"] == 30
        assert metrics["double_leg_jumps_last10"] == 8
        assert metrics["double_leg_jumps_mid10"] == 10
        assert metrics["double_leg_jumps_first20"] == 22
        assert metrics["double_leg_jumps_last20"] == 18
        assert metrics["double_leg_jumps_dropoff_pct"] == pytest.approx(33.333, rel=1e-4)

    def test_no_first_interval_reps(self) -> None:
        metrics = double_leg_jumps_metrics(DoubleLegJumpAttempts(at_10s=0, at_20s=5, at_30s=9))
        assert metrics["double_leg_jumps_dropoff_pct"] is None


def test_ankle_converts_inches_to_cm() -> None:
    metrics = ankle_dorsiflexion_metrics(AnkleDorsiflexionAttempts(left_in=4, right_in=5))
    assert metrics["ankle_dorsiflex_left_cm"] == pytest.approx(10.16)
    assert metrics["ankle_dorsiflex_right_cm"] == pytest.approx(12.7)
    assert metrics["ankle_dorsiflex_avg_cm"] == pytest.approx(11.43)
    assert metrics["ankle_dorsiflex_asymmetry_pct"] == pytest.approx(20.0)
    assert metrics["ankle_dorsiflex_left_minus_right_cm"] == pytest.approx(-2.54)


class TestCorePlank:
    def test_good_form(self) -> None:
        assert core_plank_metrics(CorePlankAttempts(hold_sec=60, form_flag=1))["core_plank_hold_sec_if_good_form"] == 60

    def test_bad_form(self) -> None:
        assert core_plank_metrics(CorePlankAttempts(hold_sec=60, form_flag=0))["core_plank_hold_sec_if_good_form"] == 0.0

    def test_missing_flag(self) -> None:
        metrics = core_plank_metrics(CorePlankAttempts(hold_sec=60, form_flag=None))
        assert metrics["core_plank_hold_sec_if_good_form"] is None


class TestDeriveMetrics:
    def test_full_record(self) -> None:
        metrics = derive_metrics(parse_player_attempts("p1", score_record(), 3, 2))
        assert metrics.raw["shot_power_strong_avg"] == 11.0
        assert metrics.raw["skill_moves_avg_rating"] == 3.5
        assert metrics.inputs["power"] == {"strong": [10.0, 12.0, 14.0, 8.0], "weak": [6.0, 7.0, 5.0, 6.0]}
        assert metrics.norm == {}

    def test_empty_record_all_missing(self) -> None:
        metrics = derive_metrics(parse_player_attempts("p1", {}, 0, 0))
        assert metrics.raw
        assert all(value is None for value in metrics.raw.values())
