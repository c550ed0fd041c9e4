"""Calcul de distance Levenshtein pondérée et bornée par un seuil."""
from typing import List, Optional

from bestmatch.config import settings
from bestmatch.logger import logger
from bestmatch.models import DistanceResult, MatchConfig


def _cell(row: List[int], index: int, threshold: int) -> int:
    """Lit une cellule de la ligne ; une cellule absente vaut le seuil."""
    if index < len(row):
        return row[index]
    return threshold


class StringDistance:
    """Classe pour calculer les distances entre chaînes."""

    def __init__(self, early_exit: bool = settings.EARLY_EXIT):
        self.early_exit = early_exit

    def distance(self, query: str, candidate: str, config: MatchConfig) -> Optional[int]:
        """
        Calcule la distance d'édition pondérée entre la query et un candidat.

        La matrice est parcourue ligne par ligne (une ligne par caractère du
        candidat) : seules la ligne précédente et la ligne courante sont
        gardées en mémoire.

        Args:
            query: Chaîne recherchée
            candidate: Label du candidat
            config: Seuil et coûts d'opération

        Returns:
            La distance si elle est <= config.threshold, sinon None
        """
        if not query or not candidate:
            return None

        threshold = config.threshold
        insertion, deletion, substitution = config.costs()

        # Ligne 0 : suppressions cumulées des caractères de la query
        prev_row = [0]
        for i in range(1, len(query) + 1):
            prev_row.append(prev_row[i - 1] + deletion)

        for candidate_char in candidate:
            cur_row = [prev_row[0] + insertion]
            for i, query_char in enumerate(query):
                if query_char == candidate_char:
                    cost = _cell(prev_row, i, threshold)
                else:
                    cost = min(
                        _cell(cur_row, i, threshold) + deletion,
                        _cell(prev_row, i + 1, threshold) + insertion,
                        _cell(prev_row, i, threshold) + substitution,
                    )
                cur_row.append(cost)

            # Coûts positifs : aucune cellule suivante ne descend sous le min de la ligne
            if self.early_exit and min(cur_row) > threshold:
                return None
            prev_row = cur_row

        dist = prev_row[-1]
        if dist > threshold:
            return None
        return dist

    def evaluate(self, query: str, candidate: str, config: MatchConfig) -> Optional[DistanceResult]:
        """Évalue un candidat ; None si vide ou au-delà du seuil."""
        dist = self.distance(query, candidate, config)
        if dist is None:
            logger.trace("Candidat {candidate!r} rejeté (seuil={threshold})",
                         candidate=candidate, threshold=config.threshold)
            return None
        logger.trace("Candidat {candidate!r} accepté (distance={distance})",
                     candidate=candidate, distance=dist)
        return DistanceResult(label=candidate, distance=dist)


# Instance globale réutilisable
string_distance = StringDistance()


def evaluate(query: str, candidate: str, config: MatchConfig) -> Optional[DistanceResult]:
    """Raccourci vers l'instance globale."""
    return string_distance.evaluate(query, candidate, config)
