from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from player_style.domain.evaluation import Evaluation, PlayerEvaluation
from player_style.domain.player import Coach, Player


@runtime_checkable
class PlayerRepo(Protocol):
    def upsert(self, player: Player) -> str: ...

    def get_by_id(self, player_id: str) -> Player | None: ...

    def get_by_team(self, team_id: str) -> list[Player]: ...


@runtime_checkable
class CoachRepo(Protocol):
    def upsert(self, coach: Coach) -> str: ...

    def get_names(self, coach_ids: list[str]) -> dict[str, str]: ...


@runtime_checkable
class EvaluationRepo(Protocol):
    def upsert(self, evaluation: Evaluation) -> str: ...

    def get_by_id(self, evaluation_id: str) -> Evaluation | None: ...

    def get_by_team(self, team_id: str) -> list[Evaluation]: ...

    def get_latest(self, team_id: str) -> Evaluation | None: ...


@runtime_checkable
class PlayerEvaluationRepo(Protocol):
    def upsert(self, player_evaluation: PlayerEvaluation) -> int: ...

    def get(self, player_id: str, evaluation_id: str) -> PlayerEvaluation | None: ...

    def get_by_evaluation(self, evaluation_id: str) -> list[PlayerEvaluation]: ...

    def get_latest_for_player(self, player_id: str) -> PlayerEvaluation | None: ...


@runtime_checkable
class JsonDocumentRepo(Protocol):
    def upsert(self, player_evaluation_id: int, document: Mapping[str, Any]) -> None: ...

    def get(self, player_evaluation_id: int) -> dict[str, Any] | None: ...
