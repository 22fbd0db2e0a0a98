import json
import logging
import sqlite3
import time
from pathlib import Path
from typing import Any

from player_style.domain.errors import IngestError
from player_style.domain.fixture_import import FixtureImport
from player_style.domain.result import Err, ImportResult, Ok
from player_style.ingest.column_maps import coach_from_record, evaluation_from_record, player_from_record
from player_style.repos.protocols import CoachRepo, EvaluationRepo, PlayerRepo

logger = logging.getLogger(__name__)


def read_fixture(path: Path) -> dict[str, Any]:
    """Read a JSON fixture with optional ``coaches``, ``players`` and ``evaluations`` lists."""
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("fixture must be a JSON object")
    for section in ("coaches", "players", "evaluations"):
        if not isinstance(data.get(section, []), list):
            raise ValueError(f"fixture section '{section}' must be a list")
    return data


class FixtureLoader:
    def __init__(
        self,
        coach_repo: CoachRepo,
        player_repo: PlayerRepo,
        evaluation_repo: EvaluationRepo,
        *,
        conn: sqlite3.Connection,
    ) -> None:
        self._coach_repo = coach_repo
        self._player_repo = player_repo
        self._evaluation_repo = evaluation_repo
        self._conn = conn

    def load(self, path: Path) -> ImportResult:
        t0 = time.perf_counter()
        source_detail = str(path)
        logger.info("Importing fixture from %s", source_detail)

        try:
            data = read_fixture(path)
        except Exception as exc:
            logger.error("Reading fixture %s failed: %s", source_detail, exc)
            return Err(IngestError(message=str(exc), source_detail=source_detail))

        coaches = players = evaluations = 0
        try:
            for record in data.get("coaches", []):
                self._coach_repo.upsert(coach_from_record(record))
                coaches += 1
            for record in data.get("players", []):
                self._player_repo.upsert(player_from_record(record))
                players += 1
            for record in data.get("evaluations", []):
                self._evaluation_repo.upsert(evaluation_from_record(record))
                evaluations += 1
            self._conn.commit()
        except Exception as exc:
            logger.error("Import failed for %s after %d records: %s", source_detail, coaches + players + evaluations, exc)
            self._conn.rollback()
            message = f"missing required field {exc}" if isinstance(exc, KeyError) else str(exc)
            return Err(IngestError(message=message, source_detail=source_detail))

        logger.info(
            "Imported %d coach(es), %d player(s), %d evaluation(s) in %.1fs",
            coaches,
            players,
            evaluations,
            time.perf_counter() - t0,
        )
        return Ok(
            FixtureImport(
                source_detail=source_detail,
                coaches_loaded=coaches,
                players_loaded=players,
                evaluations_loaded=evaluations,
            )
        )
