import json
import sqlite3
from collections.abc import Mapping
from typing import Any


class _JsonDocumentRepo:
    """One JSON document per player evaluation, replaced wholesale on upsert."""

    _table: str
    _column: str

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def upsert(self, player_evaluation_id: int, document: Mapping[str, Any]) -> None:
        self._conn.execute(
            f"INSERT INTO {self._table} (player_evaluation_id, {self._column}) VALUES (?, ?)"
            f" ON CONFLICT(player_evaluation_id) DO UPDATE SET {self._column}=excluded.{self._column}",
            (player_evaluation_id, json.dumps(document)),
        )

    def get(self, player_evaluation_id: int) -> dict[str, Any] | None:
        raw = self.get_raw(player_evaluation_id)
        return json.loads(raw) if raw is not None else None

    def get_raw(self, player_evaluation_id: int) -> str | None:
        row = self._conn.execute(
            f"SELECT {self._column} FROM {self._table} WHERE player_evaluation_id = ?",
            (player_evaluation_id,),
        ).fetchone()
        return row[0] if row else None

    def count(self) -> int:
        return self._conn.execute(f"SELECT COUNT(*) FROM {self._table}").fetchone()[0]


class SqliteTestScoresRepo(_JsonDocumentRepo):
    _table = "test_scores"
    _column = "scores_json"


class SqliteOverallScoresRepo(_JsonDocumentRepo):
    _table = "overall_scores"
    _column = "scores_json"


class SqlitePlayerDnaRepo(_JsonDocumentRepo):
    _table = "player_dna"
    _column = "dna_json"


class SqlitePlayerClusterRepo(_JsonDocumentRepo):
    _table = "player_cluster"
    _column = "cluster_json"
