from dataclasses import dataclass

from player_style.domain.errors import ComputeError, IngestError
from player_style.domain.fixture_import import FixtureImport
from player_style.domain.metrics import ComputeSummary


@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    error: E


type Result[T, E] = Ok[T] | Err[E]

type ComputeResult = Result[ComputeSummary, ComputeError]
type ImportResult = Result[FixtureImport, IngestError]
