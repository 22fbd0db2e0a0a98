import datetime
from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    id: str
    team_id: str
    first_name: str = ""
    last_name: str = ""
    birth_date: str | None = None

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or "Unknown Player"

    @property
    def birth_year(self) -> int | None:
        """Year component of ``birth_date``, or None when it is missing or unparseable."""
        if not self.birth_date:
            return None
        try:
            return datetime.date.fromisoformat(self.birth_date[:10]).year
        except ValueError:
            return None


@dataclass(frozen=True)
class Coach:
    id: str
    name: str
