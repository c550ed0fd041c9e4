"""Recherche du label le plus proche par distance d'édition pondérée."""

from bestmatch.config import settings
from bestmatch.logger import setup_logging
from bestmatch.models import Candidate, DistanceResult, MatchConfig
from bestmatch.scoring.distance import StringDistance, evaluate
from bestmatch.search.selector import BestMatchSelector, best_match

__all__ = [
    "settings",
    "setup_logging",
    "Candidate",
    "DistanceResult",
    "MatchConfig",
    "StringDistance",
    "evaluate",
    "BestMatchSelector",
    "best_match",
]
