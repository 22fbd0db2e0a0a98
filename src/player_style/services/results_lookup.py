import logging

from player_style.domain.results import PlayerCluster, PlayerDna
from player_style.repos.protocols import EvaluationRepo, JsonDocumentRepo, PlayerEvaluationRepo, PlayerRepo

logger = logging.getLogger(__name__)


class ResultsLookupService:
    def __init__(
        self,
        player_repo: PlayerRepo,
        evaluation_repo: EvaluationRepo,
        player_evaluation_repo: PlayerEvaluationRepo,
        player_dna_repo: JsonDocumentRepo,
        player_cluster_repo: JsonDocumentRepo,
    ) -> None:
        self._player_repo = player_repo
        self._evaluation_repo = evaluation_repo
        self._player_evaluation_repo = player_evaluation_repo
        self._player_dna_repo = player_dna_repo
        self._player_cluster_repo = player_cluster_repo

    def player_dna(self, player_id: str, evaluation_id: str | None = None) -> PlayerDna | None:
        """Normalized features persisted for a player; the latest evaluation unless one is named."""
        logger.debug("DNA lookup: player=%s evaluation=%s", player_id, evaluation_id)
        if evaluation_id is None:
            player_evaluation = self._player_evaluation_repo.get_latest_for_player(player_id)
        else:
            player_evaluation = self._player_evaluation_repo.get(player_id, evaluation_id)
        if player_evaluation is None or player_evaluation.id is None:
            return None
        dna = self._player_dna_repo.get(player_evaluation.id)
        if dna is None:
            return None
        return PlayerDna(
            player_name=self._player_name(player_id),
            player_evaluation=player_evaluation,
            dna=dna,
        )

    def team_clusters(self, team_id: str, evaluation_id: str | None = None) -> list[PlayerCluster]:
        """Composite records for every player in one of the team's evaluations."""
        logger.debug("Cluster lookup: team=%s evaluation=%s", team_id, evaluation_id)
        if evaluation_id is None:
            latest = self._evaluation_repo.get_latest(team_id)
            if latest is None:
                return []
            evaluation_id = latest.id

        results: list[PlayerCluster] = []
        for player_evaluation in self._player_evaluation_repo.get_by_evaluation(evaluation_id):
            if player_evaluation.team_id != team_id or player_evaluation.id is None:
                continue
            cluster = self._player_cluster_repo.get(player_evaluation.id)
            if cluster is None:
                continue
            results.append(
                PlayerCluster(
                    player_name=self._player_name(player_evaluation.player_id),
                    player_evaluation=player_evaluation,
                    cluster=cluster,
                )
            )
        results.sort(key=lambda r: (r.player_name, r.player_evaluation.player_id))
        logger.debug("Cluster lookup returned %d results", len(results))
        return results

    def _player_name(self, player_id: str) -> str:
        player = self._player_repo.get_by_id(player_id)
        return player.name if player is not None else "Unknown Player"
