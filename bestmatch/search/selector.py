"""Sélection du meilleur candidat en une seule passe."""
from typing import Any, Iterable, Optional

from bestmatch.logger import logger
from bestmatch.models import Candidate, MatchConfig
from bestmatch.scoring.distance import StringDistance, string_distance


class BestMatchSelector:
    """Sélecteur « did you mean » au seuil décroissant."""

    def __init__(self, distance: Optional[StringDistance] = None):
        self.distance = distance or string_distance

    def best_match(
            self,
            query: str,
            candidates: Iterable[Candidate],
            config: MatchConfig) -> Optional[Any]:
        """
        Retourne le payload du candidat le plus proche de la query.

        Le seuil effectif est resserré à la distance de chaque candidat
        accepté : seuls les candidats au moins aussi bons passent ensuite.
        À distance égale, le dernier candidat de l'itération l'emporte.

        Args:
            query: Chaîne recherchée
            candidates: Paires (label, payload), parcourues une seule fois
            config: Seuil initial et coûts d'opération

        Returns:
            Le payload retenu (même objet, non copié), ou None
        """
        result = None
        found = False
        threshold = config.threshold

        for label, payload in candidates:
            match = self.distance.evaluate(query, label, config.with_threshold(threshold))
            if match is None:
                continue
            logger.debug(
                "Nouveau meilleur candidat {label!r} pour {query!r} (distance={distance}, seuil={threshold})",
                label=label, query=query, distance=match.distance, threshold=threshold
            )
            threshold = match.distance
            result = payload
            found = True

        if not found:
            logger.debug("Aucun candidat pour {query!r} (seuil={threshold})",
                         query=query, threshold=config.threshold)
        return result


# Instance globale réutilisable
selector = BestMatchSelector()


def best_match(query: str, candidates: Iterable[Candidate], config: MatchConfig) -> Optional[Any]:
    """Raccourci vers le sélecteur global."""
    return selector.best_match(query, candidates, config)
