import json
import sqlite3
from typing import Any

from player_style.domain.evaluation import Evaluation
from player_style.exceptions import MalformedEvaluationError

# creation times may carry different UTC offsets, so compare them as instants
_NEWEST_FIRST = " ORDER BY julianday(created_at) DESC, created_at DESC, id DESC"


class SqliteEvaluationRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def upsert(self, evaluation: Evaluation) -> str:
        self._conn.execute(
            "INSERT INTO evaluation"
            "    (id, team_id, created_by, name, created_at,"
            "     one_v_one_rounds, skill_moves_count, scores_json)"
            " VALUES (?, ?, ?, ?, ?, ?, ?, ?)"
            " ON CONFLICT(id) DO UPDATE SET"
            "    team_id=excluded.team_id,"
            "    created_by=excluded.created_by,"
            "    name=excluded.name,"
            "    created_at=excluded.created_at,"
            "    one_v_one_rounds=excluded.one_v_one_rounds,"
            "    skill_moves_count=excluded.skill_moves_count,"
            "    scores_json=excluded.scores_json",
            (
                evaluation.id,
                evaluation.team_id,
                evaluation.created_by,
                evaluation.name,
                evaluation.created_at,
                evaluation.one_v_one_rounds,
                evaluation.skill_moves_count,
                json.dumps(evaluation.scores),
            ),
        )
        return evaluation.id

    def get_by_id(self, evaluation_id: str) -> Evaluation | None:
        row = self._conn.execute(self._select_sql() + " WHERE id = ?", (evaluation_id,)).fetchone()
        return self._row_to_evaluation(row) if row else None

    def get_by_team(self, team_id: str) -> list[Evaluation]:
        """All evaluations for a team, most recently created first."""
        rows = self._conn.execute(
            self._select_sql() + " WHERE team_id = ?" + _NEWEST_FIRST,
            (team_id,),
        ).fetchall()
        return [self._row_to_evaluation(row) for row in rows]

    def get_latest(self, team_id: str) -> Evaluation | None:
        row = self._conn.execute(
            self._select_sql() + " WHERE team_id = ?" + _NEWEST_FIRST + " LIMIT 1",
            (team_id,),
        ).fetchone()
        return self._row_to_evaluation(row) if row else None

    @staticmethod
    def _select_sql() -> str:
        return (
            "SELECT id, team_id, created_by, name, created_at,"
            " one_v_one_rounds, skill_moves_count, scores_json"
            " FROM evaluation"
        )

    @staticmethod
    def _count(value: Any) -> int:
        # a count that is not a whole number is treated as "not configured"
        if isinstance(value, bool):
            return 0
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value if isinstance(value, int) else 0

    @classmethod
    def _row_to_evaluation(cls, row: sqlite3.Row) -> Evaluation:
        try:
            scores = json.loads(row["scores_json"]) if row["scores_json"] else {}
        except json.JSONDecodeError as exc:
            raise MalformedEvaluationError(row["id"], f"scores are not valid JSON ({exc.msg})") from exc
        return Evaluation(
            id=row["id"],
            team_id=row["team_id"],
            created_by=row["created_by"],
            name=row["name"],
            created_at=row["created_at"],
            one_v_one_rounds=cls._count(row["one_v_one_rounds"]),
            skill_moves_count=cls._count(row["skill_moves_count"]),
            scores=scores,
        )
