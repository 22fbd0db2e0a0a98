from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


@dataclass(frozen=True)
class MinMax:
    min: float | None = None
    max: float | None = None

    def including(self, value: float | None) -> "MinMax":
        """Return the range widened to cover ``value``; missing values leave it unchanged."""
        if value is None:
            return self
        return MinMax(
            min=value if self.min is None else min(self.min, value),
            max=value if self.max is None else max(self.max, value),
        )


# metric name -> observed range, for one birth year
type CohortStats = dict[str, MinMax]


@dataclass
class DerivedMetricSet:
    inputs: dict[str, Any]
    raw: dict[str, float | None]
    norm: dict[str, float | None] = field(default_factory=dict)


class Composite(StrEnum):
    POWER_STRENGTH = "ps"
    TECHNIQUE_CONTROL = "tc"
    MOBILITY_STABILITY = "ms"
    DECISION_COGNITION = "dc"


@dataclass(frozen=True)
class ContributingTest:
    test: str
    weight: int
    feature_sum: float
    feature_count: int

    @property
    def contribution(self) -> float:
        return self.feature_sum * self.weight

    @property
    def denominator(self) -> int:
        return self.feature_count * self.weight


@dataclass(frozen=True)
class CompositeScore:
    composite: Composite
    score: float | None
    contributions: tuple[ContributingTest, ...]


@dataclass(frozen=True)
class CompositeScoreSet:
    ps: float | None
    tc: float | None
    ms: float | None
    dc: float | None
    breakdown: tuple[CompositeScore, ...] = ()

    @property
    def vector(self) -> list[float | None]:
        return [self.ps, self.tc, self.ms, self.dc]

    def to_record(self) -> dict[str, Any]:
        return {"ps": self.ps, "tc": self.tc, "ms": self.ms, "dc": self.dc, "vector": self.vector}


@dataclass(frozen=True)
class PlayerScoreResult:
    player_id: str
    birth_year: int | None
    raw_scores: dict[str, Any]
    metrics: DerivedMetricSet
    composites: CompositeScoreSet


@dataclass(frozen=True)
class ComputeSummary:
    team_id: str
    evaluations_total: int
    evaluations_computed: int
    player_evaluations_upserted: int
    evaluation_id: str | None = None
    cohort_years: tuple[int, ...] = ()
