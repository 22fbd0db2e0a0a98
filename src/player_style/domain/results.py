from dataclasses import dataclass
from typing import Any

from player_style.domain.evaluation import PlayerEvaluation


@dataclass(frozen=True)
class PlayerDna:
    player_name: str
    player_evaluation: PlayerEvaluation
    dna: dict[str, Any]


@dataclass(frozen=True)
class PlayerCluster:
    player_name: str
    player_evaluation: PlayerEvaluation
    cluster: dict[str, Any]
