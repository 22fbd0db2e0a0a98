import logging
from collections.abc import Mapping

from player_style.domain.evaluation import Evaluation
from player_style.domain.metrics import CohortStats, PlayerScoreResult
from player_style.scoring.composite import compute_composites
from player_style.scoring.derive import derive_metrics
from player_style.scoring.extract import evaluation_attempts, evaluation_scores
from player_style.scoring.normalize import normalize

logger = logging.getLogger(__name__)


def score_evaluation(
    evaluation: Evaluation,
    birth_years: Mapping[str, int | None],
    cohorts: Mapping[int, CohortStats],
    *,
    strict: bool = True,
) -> list[PlayerScoreResult]:
    """Raw, normalized and composite scores for every player in one evaluation."""
    raw_scores = {str(pid): record for pid, record in evaluation_scores(evaluation).items()}
    results: list[PlayerScoreResult] = []
    for player_id, attempts in evaluation_attempts(evaluation, strict=strict):
        metrics = derive_metrics(attempts)
        birth_year = birth_years.get(player_id)
        cohort = cohorts.get(birth_year) if birth_year is not None else None
        if cohort is None:
            logger.debug("Player %s has no birth-year cohort; normalized scores left empty", player_id)
        metrics.norm = normalize(metrics.raw, cohort)
        composites = compute_composites(metrics.norm)
        results.append(
            PlayerScoreResult(
                player_id=player_id,
                birth_year=birth_year,
                raw_scores=dict(raw_scores[player_id]),
                metrics=metrics,
                composites=composites,
            )
        )
    return results
