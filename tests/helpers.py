import sqlite3
from typing import Any

from player_style.domain.evaluation import Evaluation
from player_style.domain.player import Coach, Player
from player_style.repos.evaluation_repo import SqliteEvaluationRepo
from player_style.repos.player_repo import SqliteCoachRepo, SqlitePlayerRepo


def score_record(**overrides: Any) -> dict[str, Any]:
    """A complete raw score record for an evaluation with 3 1v1 rounds and 2 skill moves.

    Keyword overrides replace individual fields; pass ``None`` to drop one.
    """
    record: dict[str, Any] = {
        "power_strong_1": 10,
        "power_strong_2": 12,
        "power_strong_3": 14,
        "power_strong_4": 8,
        "power_weak_1": 6,
        "power_weak_2": 7,
        "power_weak_3": 5,
        "power_weak_4": 6,
        "serve_strong_1": 20,
        "serve_strong_2": 22,
        "serve_strong_3": 24,
        "serve_strong_4": 18,
        "serve_weak_1": 12,
        "serve_weak_2": 14,
        "serve_weak_3": 10,
        "serve_weak_4": 12,
        "figure8_strong": 8,
        "figure8_weak": 6,
        "figure8_both": 5,
        "passing_strong": 6,
        "passing_weak": 4,
        "onevone_round_1": 3,
        "onevone_round_2": 1,
        "onevone_round_3": 2,
        "juggling_1": 10,
        "juggling_2": 25,
        "juggling_3": 15,
        "juggling_4": 5,
        "skillmove_1": 4,
        "skillmove_2": 3,
        "agility_1": 5.5,
        "agility_2": 5.25,
        "agility_3": 5.75,
        "reaction_cue_1": 0.5,
        "reaction_cue_2": 0.75,
        "reaction_cue_3": 0.625,
        "reaction_total_1": 1.5,
        "reaction_total_2": 1.75,
        "reaction_total_3": 1.625,
        "hop_left_1": 100,
        "hop_left_2": 110,
        "hop_left_3": 105,
        "hop_right_1": 90,
        "hop_right_2": 99,
        "hop_right_3": 95,
        "jumps_10s": 12,
        "jumps_20s": 22,
        "jumps_30s": 30,
        "ankle_left": 4,
        "ankle_right": 5,
        "plank_time": 60,
        "plank_form": 1,
    }
    for key, value in overrides.items():
        if value is None:
            record.pop(key, None)
        else:
            record[key] = value
    return record


def make_evaluation(
    evaluation_id: str = "e1",
    *,
    team_id: str = "t1",
    created_at: str = "2024-05-01T10:00:00",
    scores: dict[str, Any] | None = None,
    one_v_one_rounds: int = 3,
    skill_moves_count: int = 2,
    created_by: str | None = "c1",
    name: str = "Spring Evaluation",
) -> Evaluation:
    return Evaluation(
        id=evaluation_id,
        team_id=team_id,
        name=name,
        created_at=created_at,
        created_by=created_by,
        one_v_one_rounds=one_v_one_rounds,
        skill_moves_count=skill_moves_count,
        scores=scores if scores is not None else {},
    )


def seed_player(
    conn: sqlite3.Connection,
    player_id: str = "p1",
    *,
    team_id: str = "t1",
    first_name: str = "Test",
    last_name: str = "Player",
    birth_date: str | None = "2014-03-15",
) -> str:
    repo = SqlitePlayerRepo(conn)
    repo.upsert(
        Player(id=player_id, team_id=team_id, first_name=first_name, last_name=last_name, birth_date=birth_date)
    )
    conn.commit()
    return player_id


def seed_coach(conn: sqlite3.Connection, coach_id: str = "c1", name: str = "Coach Carter") -> str:
    SqliteCoachRepo(conn).upsert(Coach(id=coach_id, name=name))
    conn.commit()
    return coach_id


def seed_evaluation(conn: sqlite3.Connection, evaluation: Evaluation) -> str:
    SqliteEvaluationRepo(conn).upsert(evaluation)
    conn.commit()
    return evaluation.id
