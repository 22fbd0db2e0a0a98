import sqlite3

from player_style.domain.evaluation import PlayerEvaluation


class SqlitePlayerEvaluationRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def upsert(self, player_evaluation: PlayerEvaluation) -> int:
        """Insert or refresh the row for (player, evaluation) and return its id.

        The id is stable across reruns since the conflict target is the natural key.
        """
        self._conn.execute(
            "INSERT INTO player_evaluation"
            "    (player_id, team_id, evaluation_id, name, coach_id, coach_name, created_at)"
            " VALUES (?, ?, ?, ?, ?, ?, ?)"
            " ON CONFLICT(player_id, evaluation_id) DO UPDATE SET"
            "    team_id=excluded.team_id,"
            "    name=excluded.name,"
            "    coach_id=excluded.coach_id,"
            "    coach_name=excluded.coach_name,"
            "    created_at=excluded.created_at",
            (
                player_evaluation.player_id,
                player_evaluation.team_id,
                player_evaluation.evaluation_id,
                player_evaluation.name,
                player_evaluation.coach_id,
                player_evaluation.coach_name,
                player_evaluation.created_at,
            ),
        )
        row = self._conn.execute(
            "SELECT id FROM player_evaluation WHERE player_id = ? AND evaluation_id = ?",
            (player_evaluation.player_id, player_evaluation.evaluation_id),
        ).fetchone()
        return row["id"]

    def get(self, player_id: str, evaluation_id: str) -> PlayerEvaluation | None:
        row = self._conn.execute(
            self._select_sql() + " WHERE player_id = ? AND evaluation_id = ?",
            (player_id, evaluation_id),
        ).fetchone()
        return self._row_to_player_evaluation(row) if row else None

    def get_by_evaluation(self, evaluation_id: str) -> list[PlayerEvaluation]:
        rows = self._conn.execute(
            self._select_sql() + " WHERE evaluation_id = ? ORDER BY name, player_id",
            (evaluation_id,),
        ).fetchall()
        return [self._row_to_player_evaluation(row) for row in rows]

    def get_latest_for_player(self, player_id: str) -> PlayerEvaluation | None:
        row = self._conn.execute(
            self._select_sql()
            + " WHERE player_id = ?"
            + " ORDER BY julianday(created_at) DESC, created_at DESC, id DESC LIMIT 1",
            (player_id,),
        ).fetchone()
        return self._row_to_player_evaluation(row) if row else None

    def count(self) -> int:
        return self._conn.execute("SELECT COUNT(*) FROM player_evaluation").fetchone()[0]

    @staticmethod
    def _select_sql() -> str:
        return (
            "SELECT id, player_id, team_id, evaluation_id, name, coach_id, coach_name, created_at"
            " FROM player_evaluation"
        )

    @staticmethod
    def _row_to_player_evaluation(row: sqlite3.Row) -> PlayerEvaluation:
        return PlayerEvaluation(
            id=row["id"],
            player_id=row["player_id"],
            team_id=row["team_id"],
            evaluation_id=row["evaluation_id"],
            name=row["name"],
            coach_id=row["coach_id"],
            coach_name=row["coach_name"],
            created_at=row["created_at"],
        )
