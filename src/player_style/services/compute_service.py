import logging
import sqlite3
import time

from player_style.domain.errors import ComputeError
from player_style.domain.evaluation import Evaluation
from player_style.domain.metrics import ComputeSummary
from player_style.domain.result import ComputeResult, Err, Ok
from player_style.repos.protocols import CoachRepo, EvaluationRepo, PlayerRepo
from player_style.scoring.cohort import build_cohort_stats
from player_style.scoring.engine import score_evaluation
from player_style.services.result_writer import ResultWriter

logger = logging.getLogger(__name__)

UNKNOWN_COACH = "Unknown Coach"


class EvaluationComputeService:
    """Scores a team's most recent evaluation against cohorts built from its full history."""

    def __init__(
        self,
        evaluation_repo: EvaluationRepo,
        player_repo: PlayerRepo,
        coach_repo: CoachRepo,
        writer: ResultWriter,
        *,
        conn: sqlite3.Connection,
        strict_fields: bool = True,
    ) -> None:
        self._evaluation_repo = evaluation_repo
        self._player_repo = player_repo
        self._coach_repo = coach_repo
        self._writer = writer
        self._conn = conn
        self._strict_fields = strict_fields

    def compute_latest(self, team_id: str) -> ComputeResult:
        t0 = time.perf_counter()
        logger.info("Computing latest evaluation for team %s", team_id)
        latest: Evaluation | None = None
        try:
            evaluations = self._evaluation_repo.get_by_team(team_id)
            if not evaluations:
                logger.info("Team %s has no evaluations; nothing to compute", team_id)
                return Ok(
                    ComputeSummary(
                        team_id=team_id,
                        evaluations_total=0,
                        evaluations_computed=0,
                        player_evaluations_upserted=0,
                    )
                )
            # get_by_team is ordered newest first
            latest = evaluations[0]

            birth_years = {player.id: player.birth_year for player in self._player_repo.get_by_team(team_id)}
            cohorts = build_cohort_stats(evaluations, birth_years, strict=self._strict_fields)
            results = score_evaluation(latest, birth_years, cohorts, strict=self._strict_fields)

            coach_name = UNKNOWN_COACH
            if latest.created_by:
                coach_name = self._coach_repo.get_names([latest.created_by]).get(latest.created_by, UNKNOWN_COACH)

            upserted = self._writer.write(latest, team_id, coach_name, results)
            self._conn.commit()
        except Exception as exc:
            evaluation_id = latest.id if latest is not None else None
            logger.error("Compute failed for team %s (evaluation %s): %s", team_id, evaluation_id, exc)
            self._conn.rollback()
            return Err(ComputeError(message=str(exc), team_id=team_id, evaluation_id=evaluation_id))

        summary = ComputeSummary(
            team_id=team_id,
            evaluations_total=len(evaluations),
            evaluations_computed=1,
            player_evaluations_upserted=upserted,
            evaluation_id=latest.id,
            cohort_years=tuple(sorted(cohorts)),
        )
        logger.info(
            "Computed evaluation %s for team %s: %d player evaluation(s) upserted in %.2fs",
            latest.id,
            team_id,
            upserted,
            time.perf_counter() - t0,
        )
        return Ok(summary)
