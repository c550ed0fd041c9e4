"""Modèles pour la configuration du matching et ses résultats."""
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from bestmatch.config import settings

# (label, payload) : le payload n'est jamais copié, seulement renvoyé
Candidate = Tuple[str, Any]


class MatchConfig(BaseModel):  # pylint: disable=too-few-public-methods
    """Seuil et coûts d'opération pour un appel de matching.

    Les coûts absents prennent les valeurs par défaut de la configuration
    (1, 1, 2). Aucune borne n'est vérifiée : un coût négatif est une erreur
    de l'appelant.
    """
    threshold: int
    insertion_cost: Optional[int] = None
    deletion_cost: Optional[int] = None
    substitution_cost: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    def costs(self) -> Tuple[int, int, int]:
        """Retourne (insertion, suppression, substitution) résolus."""
        return (
            settings.DEFAULT_INSERTION_COST if self.insertion_cost is None else self.insertion_cost,
            settings.DEFAULT_DELETION_COST if self.deletion_cost is None else self.deletion_cost,
            settings.DEFAULT_SUBSTITUTION_COST if self.substitution_cost is None else self.substitution_cost,
        )

    def with_threshold(self, threshold: int) -> "MatchConfig":
        """Copie identique avec un autre seuil."""
        return self.model_copy(update={"threshold": threshold})


@dataclass(frozen=True)
class DistanceResult:
    """Résultat de l'évaluation d'un candidat."""
    label: str
    distance: int
