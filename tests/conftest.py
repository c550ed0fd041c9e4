# tests/conftest.py
import pytest

from bestmatch.models import MatchConfig
from bestmatch.scoring.distance import StringDistance


class RecordingDistance(StringDistance):
    """StringDistance qui garde la trace des seuils et résultats vus."""

    def __init__(self, early_exit: bool = False):
        super().__init__(early_exit=early_exit)
        self.calls = []

    def evaluate(self, query, candidate, config):
        result = super().evaluate(query, candidate, config)
        self.calls.append((candidate, config.threshold, result))
        return result


@pytest.fixture
def default_config():
    """Seuil 2, coûts par défaut (1, 1, 2)."""
    return MatchConfig(threshold=2)


@pytest.fixture
def recording_distance():
    """Évaluateur espion pour les tests du sélecteur."""
    return RecordingDistance()
