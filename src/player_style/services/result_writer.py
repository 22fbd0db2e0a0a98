import logging
from collections.abc import Sequence

from player_style.domain.evaluation import Evaluation, PlayerEvaluation
from player_style.domain.metrics import PlayerScoreResult
from player_style.repos.protocols import JsonDocumentRepo, PlayerEvaluationRepo

logger = logging.getLogger(__name__)


class ResultWriter:
    """Upserts the per-player records of one evaluation.

    Every record is keyed by the (player, evaluation) identity so a rerun
    overwrites in place. Committing is left to the caller.
    """

    def __init__(
        self,
        player_evaluation_repo: PlayerEvaluationRepo,
        test_scores_repo: JsonDocumentRepo,
        overall_scores_repo: JsonDocumentRepo,
        player_dna_repo: JsonDocumentRepo,
        player_cluster_repo: JsonDocumentRepo,
    ) -> None:
        self._player_evaluation_repo = player_evaluation_repo
        self._test_scores_repo = test_scores_repo
        self._overall_scores_repo = overall_scores_repo
        self._player_dna_repo = player_dna_repo
        self._player_cluster_repo = player_cluster_repo

    def write(
        self,
        evaluation: Evaluation,
        team_id: str,
        coach_name: str,
        results: Sequence[PlayerScoreResult],
    ) -> int:
        written = 0
        for result in results:
            player_evaluation_id = self._player_evaluation_repo.upsert(
                PlayerEvaluation(
                    player_id=result.player_id,
                    team_id=team_id,
                    evaluation_id=evaluation.id,
                    name=evaluation.name or "Evaluation",
                    coach_id=evaluation.created_by,
                    coach_name=coach_name,
                    created_at=evaluation.created_at,
                )
            )
            self._test_scores_repo.upsert(player_evaluation_id, result.raw_scores)
            self._overall_scores_repo.upsert(player_evaluation_id, result.metrics.raw)
            self._player_dna_repo.upsert(player_evaluation_id, result.metrics.norm)
            self._player_cluster_repo.upsert(player_evaluation_id, result.composites.to_record())
            logger.debug("Wrote results for player %s (player_evaluation %d)", result.player_id, player_evaluation_id)
            written += 1
        return written
