from typing import Any

from player_style.domain.metrics import MinMax
from player_style.scoring.cohort import build_cohort_stats, fold_into
from player_style.scoring.derive import derive_metrics
from player_style.scoring.extract import parse_player_attempts
from player_style.scoring.normalize import normalize
from tests.helpers import make_evaluation, score_record


def _power(strong: list[int]) -> dict[str, Any]:
    return score_record(**{f"power_strong_{i}": v for i, v in enumerate(strong, start=1)})


class TestMinMax:
    def test_including_widens(self) -> None:
        bounds = MinMax().including(5).including(2).including(9)
        assert bounds == MinMax(min=2, max=9)

    def test_missing_value_leaves_range(self) -> None:
        assert MinMax(1, 3).including(None) == MinMax(1, 3)


def test_fold_into_records_all_missing_metric() -> None:
    stats: dict[str, MinMax] = {}
    fold_into(stats, {"a": None, "b": 4.0})
    fold_into(stats, {"a": None, "b": 2.0})
    assert stats == {"a": MinMax(None, None), "b": MinMax(2.0, 4.0)}


class TestBuildCohortStats:
    def test_min_max_per_birth_year(self) -> None:
        evaluation = make_evaluation(scores={"p1": _power([11, 11, 11, 11]), "p2": _power([15, 15, 15, 15])})
        cohorts = build_cohort_stats([evaluation], {"p1": 2014, "p2": 2014})
        assert cohorts[2014]["shot_power_strong_avg"] == MinMax(11.0, 15.0)

    def test_endpoints_normalize_to_zero_and_one(self) -> None:
        scores = {"p1": _power([11, 11, 11, 11]), "p2": _power([15, 15, 15, 15])}
        evaluation = make_evaluation(scores=scores)
        cohorts = build_cohort_stats([evaluation], {"p1": 2014, "p2": 2014})
        low = normalize(derive_metrics(parse_player_attempts("p1", scores["p1"], 3, 2)).raw, cohorts[2014])
        high = normalize(derive_metrics(parse_player_attempts("p2", scores["p2"], 3, 2)).raw, cohorts[2014])
        assert low["shot_power_strong_avg_norm"] == 0.0
        assert high["shot_power_strong_avg_norm"] == 1.0

    def test_players_without_birth_year_are_excluded(self) -> None:
        evaluation = make_evaluation(scores={"p1": _power([30, 30, 30, 30]), "p2": _power([11, 11, 11, 11])})
        cohorts = build_cohort_stats([evaluation], {"p1": None, "p2": 2014})
        assert list(cohorts) == [2014]
        assert cohorts[2014]["shot_power_strong_avg"] == MinMax(11.0, 11.0)

    def test_unknown_player_is_excluded(self) -> None:
        evaluation = make_evaluation(scores={"ghost": score_record()})
        assert build_cohort_stats([evaluation], {}) == {}

    def test_birth_years_are_isolated(self) -> None:
        evaluation = make_evaluation(scores={"p1": _power([11, 11, 11, 11]), "p2": _power([15, 15, 15, 15])})
        cohorts = build_cohort_stats([evaluation], {"p1": 2013, "p2": 2014})
        assert cohorts[2013]["shot_power_strong_avg"] == MinMax(11.0, 11.0)
        assert cohorts[2014]["shot_power_strong_avg"] == MinMax(15.0, 15.0)

    def test_history_spans_all_evaluations(self) -> None:
        older = make_evaluation("e0", created_at="2023-09-01T10:00:00", scores={"p1": _power([20, 20, 20, 20])})
        latest = make_evaluation("e1", scores={"p1": _power([12, 12, 12, 12])})
        cohorts = build_cohort_stats([latest, older], {"p1": 2014})
        assert cohorts[2014]["shot_power_strong_avg"] == MinMax(12.0, 20.0)

    def test_metric_missing_for_everyone(self) -> None:
        evaluation = make_evaluation(scores={"p1": score_record(plank_time=None)})
        cohorts = build_cohort_stats([evaluation], {"p1": 2014})
        assert cohorts[2014]["core_plank_hold_sec"] == MinMax(None, None)
