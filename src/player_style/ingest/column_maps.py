from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from player_style.domain.evaluation import Evaluation
from player_style.domain.player import Coach, Player
from player_style.exceptions import MalformedEvaluationError


def _to_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    s = str(value)
    if s == "":
        return None
    return s


def _to_count(value: Any) -> int:
    # configured counts that are missing or not whole numbers mean "not configured"
    if isinstance(value, bool):
        return 0
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value if isinstance(value, int) else 0


def _to_timestamp(evaluation_id: str, value: Any) -> str:
    """Validate an ISO 8601 creation time; offset-aware values are stored in UTC."""
    text = _to_optional_str(value)
    if text is None:
        raise MalformedEvaluationError(evaluation_id, "created_at is required")
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise MalformedEvaluationError(evaluation_id, f"created_at is not an ISO 8601 timestamp: {text!r}") from exc
    if parsed.tzinfo is None:
        return text
    return parsed.astimezone(UTC).isoformat()


def coach_from_record(record: Mapping[str, Any]) -> Coach:
    return Coach(id=str(record["id"]), name=str(record.get("name") or ""))


def player_from_record(record: Mapping[str, Any]) -> Player:
    return Player(
        id=str(record["id"]),
        team_id=str(record["team_id"]),
        first_name=str(record.get("first_name") or ""),
        last_name=str(record.get("last_name") or ""),
        birth_date=_to_optional_str(record.get("birth_date", record.get("dob"))),
    )


def evaluation_from_record(record: Mapping[str, Any]) -> Evaluation:
    evaluation_id = str(record["id"])
    scores = record.get("scores") or {}
    if not isinstance(scores, Mapping):
        raise MalformedEvaluationError(evaluation_id, "scores must be a mapping of player id to score record")
    return Evaluation(
        id=evaluation_id,
        team_id=str(record["team_id"]),
        name=str(record.get("name") or "Evaluation"),
        created_at=_to_timestamp(evaluation_id, record.get("created_at")),
        created_by=_to_optional_str(record.get("created_by")),
        one_v_one_rounds=_to_count(record.get("one_v_one_rounds")),
        skill_moves_count=_to_count(record.get("skill_moves_count")),
        scores={str(player_id): entry for player_id, entry in scores.items()},
    )
