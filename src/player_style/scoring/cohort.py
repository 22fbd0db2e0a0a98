import logging
from collections.abc import Iterable, Mapping

from player_style.domain.evaluation import Evaluation
from player_style.domain.metrics import CohortStats, MinMax
from player_style.scoring.derive import derive_metrics
from player_style.scoring.extract import evaluation_attempts

logger = logging.getLogger(__name__)


def fold_into(stats: CohortStats, raw: Mapping[str, float | None]) -> None:
    """Widen each metric's running range with one player's raw values."""
    for name, value in raw.items():
        stats[name] = stats.get(name, MinMax()).including(value)


def build_cohort_stats(
    evaluations: Iterable[Evaluation],
    birth_years: Mapping[str, int | None],
    *,
    strict: bool = True,
) -> dict[int, CohortStats]:
    """Min/max of every raw metric per birth year, across all of a team's evaluations.

    Players without a known birth year are left out of every cohort. Nothing is
    persisted; the table lives for one computation request.
    """
    cohorts: dict[int, CohortStats] = {}
    entries = 0
    for evaluation in evaluations:
        for player_id, attempts in evaluation_attempts(evaluation, strict=strict):
            birth_year = birth_years.get(player_id)
            if birth_year is None:
                continue
            metrics = derive_metrics(attempts)
            fold_into(cohorts.setdefault(birth_year, {}), metrics.raw)
            entries += 1
    logger.debug("Built cohort stats for %d birth year(s) from %d player entries", len(cohorts), entries)
    return cohorts
