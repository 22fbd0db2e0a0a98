from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Evaluation:
    id: str
    team_id: str
    name: str
    created_at: str
    created_by: str | None = None
    one_v_one_rounds: int = 0
    skill_moves_count: int = 0
    scores: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class PlayerEvaluation:
    player_id: str
    team_id: str
    evaluation_id: str
    name: str
    coach_id: str | None
    coach_name: str
    created_at: str | None
    id: int | None = None
