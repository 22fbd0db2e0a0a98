class PlayerStyleException(Exception):
    """Base exception for all player_style errors."""


class MalformedEvaluationError(PlayerStyleException):
    """Raised when an evaluation record cannot be read as a raw-scores structure."""

    def __init__(self, evaluation_id: str, reason: str) -> None:
        self.evaluation_id = evaluation_id
        self.reason = reason
        super().__init__(f"Evaluation {evaluation_id}: {reason}")


class MalformedScoreRecordError(PlayerStyleException):
    """Raised when a player's raw score record fails schema validation."""

    def __init__(self, player_id: str, reason: str) -> None:
        self.player_id = player_id
        self.reason = reason
        super().__init__(f"Score record for player {player_id}: {reason}")
