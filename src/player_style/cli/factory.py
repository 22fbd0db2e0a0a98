import functools
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager

from player_style.config import Settings
from player_style.db.connection import create_connection
from player_style.ingest.fixture_loader import FixtureLoader
from player_style.repos.evaluation_repo import SqliteEvaluationRepo
from player_style.repos.player_evaluation_repo import SqlitePlayerEvaluationRepo
from player_style.repos.player_repo import SqliteCoachRepo, SqlitePlayerRepo
from player_style.repos.score_repo import (
    SqliteOverallScoresRepo,
    SqlitePlayerClusterRepo,
    SqlitePlayerDnaRepo,
    SqliteTestScoresRepo,
)
from player_style.services.compute_service import EvaluationComputeService
from player_style.services.result_writer import ResultWriter
from player_style.services.results_lookup import ResultsLookupService


class StyleContainer:
    """DI container shared by the CLI commands."""

    def __init__(self, conn: sqlite3.Connection, *, strict_fields: bool = True) -> None:
        self._conn = conn
        self._strict_fields = strict_fields

    @property
    def conn(self) -> sqlite3.Connection:
        return self._conn

    @functools.cached_property
    def player_repo(self) -> SqlitePlayerRepo:
        return SqlitePlayerRepo(self._conn)

    @functools.cached_property
    def coach_repo(self) -> SqliteCoachRepo:
        return SqliteCoachRepo(self._conn)

    @functools.cached_property
    def evaluation_repo(self) -> SqliteEvaluationRepo:
        return SqliteEvaluationRepo(self._conn)

    @functools.cached_property
    def player_evaluation_repo(self) -> SqlitePlayerEvaluationRepo:
        return SqlitePlayerEvaluationRepo(self._conn)

    @functools.cached_property
    def test_scores_repo(self) -> SqliteTestScoresRepo:
        return SqliteTestScoresRepo(self._conn)

    @functools.cached_property
    def overall_scores_repo(self) -> SqliteOverallScoresRepo:
        return SqliteOverallScoresRepo(self._conn)

    @functools.cached_property
    def player_dna_repo(self) -> SqlitePlayerDnaRepo:
        return SqlitePlayerDnaRepo(self._conn)

    @functools.cached_property
    def player_cluster_repo(self) -> SqlitePlayerClusterRepo:
        return SqlitePlayerClusterRepo(self._conn)

    @functools.cached_property
    def result_writer(self) -> ResultWriter:
        return ResultWriter(
            self.player_evaluation_repo,
            self.test_scores_repo,
            self.overall_scores_repo,
            self.player_dna_repo,
            self.player_cluster_repo,
        )

    @functools.cached_property
    def compute_service(self) -> EvaluationComputeService:
        return EvaluationComputeService(
            self.evaluation_repo,
            self.player_repo,
            self.coach_repo,
            self.result_writer,
            conn=self._conn,
            strict_fields=self._strict_fields,
        )

    @functools.cached_property
    def lookup_service(self) -> ResultsLookupService:
        return ResultsLookupService(
            self.player_repo,
            self.evaluation_repo,
            self.player_evaluation_repo,
            self.player_dna_repo,
            self.player_cluster_repo,
        )

    @functools.cached_property
    def fixture_loader(self) -> FixtureLoader:
        return FixtureLoader(self.coach_repo, self.player_repo, self.evaluation_repo, conn=self._conn)


@contextmanager
def build_style_container(settings: Settings) -> Iterator[StyleContainer]:
    """Composition-root context manager for all commands."""
    conn = create_connection(settings.db_path)
    try:
        yield StyleContainer(conn, strict_fields=settings.strict_fields)
    finally:
        conn.close()
