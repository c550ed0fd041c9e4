"""Configuration de la bibliothèque bestmatch."""
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuration de l'application."""

    # Coûts par défaut quand MatchConfig ne les précise pas
    DEFAULT_INSERTION_COST: int = 1
    DEFAULT_DELETION_COST: int = 1
    DEFAULT_SUBSTITUTION_COST: int = 2

    # Abandon d'un candidat dès qu'une ligne entière dépasse le seuil
    EARLY_EXIT: bool = False

    # Logs
    LOG_LEVEL: str = "WARNING"
    LOG_FILE: Optional[str] = None

    class Config:
        env_prefix = "BESTMATCH_"
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
