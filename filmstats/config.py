"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe FILMSTATS_,
et peut optionnellement être fournie via un fichier .env.

Le jeton API est optionnel : sans jeton, aucun header Authorization n'est envoyé,
le service refuse la requête et le catalogue reste vide.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de filmstats/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

DEFAULT_FILMS_ENDPOINT_URL = "https://toolbox.palette-adv.spectrocloud.com:5002/films"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe FILMSTATS_.
    Exemple : FILMSTATS_API_TOKEN=xxxx
    """

    model_config = SettingsConfigDict(
        env_prefix="FILMSTATS_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Service Films
    films_endpoint_url: str = Field(default=DEFAULT_FILMS_ENDPOINT_URL)
    api_token: Optional[str] = Field(default=None)
    request_timeout: float = Field(default=30.0, gt=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/filmstats.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def api_enabled(self) -> bool:
        """Vérifie si un jeton API est configuré."""
        return bool(self.api_token)
