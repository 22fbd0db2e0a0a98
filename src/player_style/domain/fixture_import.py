from dataclasses import dataclass


@dataclass(frozen=True)
class FixtureImport:
    source_detail: str
    coaches_loaded: int
    players_loaded: int
    evaluations_loaded: int
