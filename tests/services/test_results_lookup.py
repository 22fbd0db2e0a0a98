from player_style.domain.evaluation import PlayerEvaluation
from player_style.domain.player import Player
from player_style.services.results_lookup import ResultsLookupService
from tests.fakes.repos import FakeEvaluationRepo, FakeJsonDocumentRepo, FakePlayerEvaluationRepo, FakePlayerRepo
from tests.helpers import make_evaluation


def _pe(player_id: str, evaluation_id: str, created_at: str, team_id: str = "t1") -> PlayerEvaluation:
    return PlayerEvaluation(
        player_id=player_id,
        team_id=team_id,
        evaluation_id=evaluation_id,
        name=f"Eval {evaluation_id}",
        coach_id="c1",
        coach_name="Coach Carter",
        created_at=created_at,
    )


class TestResultsLookupService:
    def setup_method(self) -> None:
        self.players = FakePlayerRepo(
            [
                Player(id="p1", team_id="t1", first_name="Zoe", last_name="Young"),
                Player(id="p2", team_id="t1", first_name="Amy", last_name="Adams"),
            ]
        )
        self.evaluations = FakeEvaluationRepo(
            [
                make_evaluation("e0", created_at="2024-01-01T00:00:00"),
                make_evaluation("e1", created_at="2024-05-01T00:00:00"),
            ]
        )
        self.pe_repo = FakePlayerEvaluationRepo()
        self.dna = FakeJsonDocumentRepo()
        self.cluster = FakeJsonDocumentRepo()
        for player_id in ("p1", "p2"):
            for evaluation_id, created_at in (("e0", "2024-01-01T00:00:00"), ("e1", "2024-05-01T00:00:00")):
                pe_id = self.pe_repo.upsert(_pe(player_id, evaluation_id, created_at))
                self.dna.upsert(pe_id, {"juggle_best_norm": 0.5 if evaluation_id == "e0" else 0.75})
                self.cluster.upsert(pe_id, {"ps": 0.1, "tc": 0.2, "ms": 0.3, "dc": 0.4, "vector": [0.1, 0.2, 0.3, 0.4]})
        self.service = ResultsLookupService(self.players, self.evaluations, self.pe_repo, self.dna, self.cluster)

    def test_player_dna_defaults_to_latest(self) -> None:
        dna = self.service.player_dna("p1")
        assert dna is not None
        assert dna.player_name == "Zoe Young"
        assert dna.player_evaluation.evaluation_id == "e1"
        assert dna.dna == {"juggle_best_norm": 0.75}

    def test_player_dna_for_named_evaluation(self) -> None:
        dna = self.service.player_dna("p1", "e0")
        assert dna is not None
        assert dna.dna == {"juggle_best_norm": 0.5}

    def test_player_dna_missing(self) -> None:
        assert self.service.player_dna("p9") is None
        assert self.service.player_dna("p1", "e9") is None

    def test_team_clusters_sorted_by_name(self) -> None:
        clusters = self.service.team_clusters("t1")
        assert [c.player_name for c in clusters] == ["Amy Adams", "Zoe Young"]
        assert all(c.player_evaluation.evaluation_id == "e1" for c in clusters)

    def test_team_clusters_for_named_evaluation(self) -> None:
        clusters = self.service.team_clusters("t1", "e0")
        assert {c.player_evaluation.evaluation_id for c in clusters} == {"e0"}

    def test_team_without_evaluations(self) -> None:
        assert self.service.team_clusters("t9") == []

    def test_unknown_player_name(self) -> None:
        self.pe_repo.upsert(_pe("p3", "e1", "2024-05-01T00:00:00"))
        pe = self.pe_repo.get("p3", "e1")
        assert pe is not None and pe.id is not None
        self.cluster.upsert(pe.id, {"ps": None, "tc": None, "ms": None, "dc": None, "vector": [None] * 4})
        names = [c.player_name for c in self.service.team_clusters("t1")]
        assert "Unknown Player" in names
