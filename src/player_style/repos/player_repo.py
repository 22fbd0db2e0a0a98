import sqlite3

from player_style.domain.player import Coach, Player


class SqlitePlayerRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def upsert(self, player: Player) -> str:
        self._conn.execute(
            "INSERT INTO player (id, team_id, first_name, last_name, birth_date)"
            " VALUES (?, ?, ?, ?, ?)"
            " ON CONFLICT(id) DO UPDATE SET"
            "    team_id=excluded.team_id,"
            "    first_name=excluded.first_name,"
            "    last_name=excluded.last_name,"
            "    birth_date=excluded.birth_date",
            (player.id, player.team_id, player.first_name, player.last_name, player.birth_date),
        )
        return player.id

    def get_by_id(self, player_id: str) -> Player | None:
        row = self._conn.execute("SELECT * FROM player WHERE id = ?", (player_id,)).fetchone()
        return self._row_to_player(row) if row else None

    def get_by_team(self, team_id: str) -> list[Player]:
        rows = self._conn.execute(
            "SELECT * FROM player WHERE team_id = ? ORDER BY last_name, first_name", (team_id,)
        ).fetchall()
        return [self._row_to_player(row) for row in rows]

    @staticmethod
    def _row_to_player(row: sqlite3.Row) -> Player:
        return Player(
            id=row["id"],
            team_id=row["team_id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            birth_date=row["birth_date"],
        )


class SqliteCoachRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def upsert(self, coach: Coach) -> str:
        self._conn.execute(
            "INSERT INTO coach (id, name) VALUES (?, ?) ON CONFLICT(id) DO UPDATE SET name=excluded.name",
            (coach.id, coach.name),
        )
        return coach.id

    def get_names(self, coach_ids: list[str]) -> dict[str, str]:
        if not coach_ids:
            return {}
        placeholders = ",".join("?" * len(coach_ids))
        rows = self._conn.execute(
            f"SELECT id, name FROM coach WHERE id IN ({placeholders})",
            coach_ids,
        ).fetchall()
        return {row["id"]: row["name"] or "Unknown Coach" for row in rows}
