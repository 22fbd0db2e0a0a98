from dataclasses import dataclass


@dataclass(frozen=True)
class StyleError:
    message: str


@dataclass(frozen=True)
class ComputeError(StyleError):
    team_id: str
    evaluation_id: str | None = None


@dataclass(frozen=True)
class IngestError(StyleError):
    source_detail: str
