"""Per-test attempt records extracted from a player's raw score entry.

Each test gets its own record so derivation code reads named sides/trials
instead of looking up loosely-typed keys. ``None`` marks a missing attempt.
"""

from dataclasses import dataclass

type Attempt = float | None


@dataclass(frozen=True)
class ShotPowerAttempts:
    strong: tuple[Attempt, ...]
    weak: tuple[Attempt, ...]


@dataclass(frozen=True)
class ServeDistanceAttempts:
    strong: tuple[Attempt, ...]
    weak: tuple[Attempt, ...]


@dataclass(frozen=True)
class Figure8Attempts:
    strong: Attempt
    weak: Attempt
    both: Attempt


@dataclass(frozen=True)
class PassingGatesAttempts:
    strong: Attempt
    weak: Attempt


@dataclass(frozen=True)
class OneVOneAttempts:
    rounds: int
    scores: tuple[Attempt, ...]


@dataclass(frozen=True)
class JugglingAttempts:
    attempts: tuple[Attempt, ...]


@dataclass(frozen=True)
class SkillMoveAttempts:
    count: int
    ratings: tuple[Attempt, ...]


@dataclass(frozen=True)
class AgilityAttempts:
    trials: tuple[Attempt, ...]


@dataclass(frozen=True)
class ReactionAttempts:
    reaction_times: tuple[Attempt, ...]
    total_times: tuple[Attempt, ...]


@dataclass(frozen=True)
class SingleLegHopAttempts:
    left: tuple[Attempt, ...]
    right: tuple[Attempt, ...]


@dataclass(frozen=True)
class DoubleLegJumpAttempts:
    # Cumulative rep counts at 10s, 20s and 30s.
    at_10s: Attempt
    at_20s: Attempt
    at_30s: Attempt


@dataclass(frozen=True)
class AnkleDorsiflexionAttempts:
    # Knee-to-wall distances in inches, as recorded.
    left_in: Attempt
    right_in: Attempt


@dataclass(frozen=True)
class CorePlankAttempts:
    hold_sec: Attempt
    form_flag: Attempt


@dataclass(frozen=True)
class PlayerAttempts:
    shot_power: ShotPowerAttempts
    serve_distance: ServeDistanceAttempts
    figure8: Figure8Attempts
    passing_gates: PassingGatesAttempts
    one_v_one: OneVOneAttempts
    juggling: JugglingAttempts
    skill_moves: SkillMoveAttempts
    agility: AgilityAttempts
    reaction: ReactionAttempts
    single_leg_hop: SingleLegHopAttempts
    double_leg_jumps: DoubleLegJumpAttempts
    ankle_dorsiflexion: AnkleDorsiflexionAttempts
    core_plank: CorePlankAttempts
