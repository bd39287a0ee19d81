"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe
MOVIECACHE_, et peut optionnellement etre fournie via un fichier .env.

La cle API TMDB est optionnelle au chargement - les commandes qui appellent
l'API echouent avec un message explicite si elle n'est pas fournie.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Fichier .env a la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe MOVIECACHE_.
    Exemple : MOVIECACHE_CACHE_BACKEND=disk
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIECACHE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API TMDB
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3/")
    http_timeout: float = Field(default=30.0, gt=0)
    http_max_attempts: int = Field(default=5, ge=1)

    # Cache
    cache_backend: Literal["redis", "disk", "memory"] = Field(default="redis")
    redis_url: str = Field(default="redis://127.0.0.1:6379/0")
    cache_dir: Path = Field(default=Path(".cache/api"))
    cache_ttl: Optional[int] = Field(default=None, ge=1)
    coalesce_fetches: bool = Field(default=False)

    # Extraction
    id_marker: str = Field(default='"id":', min_length=1)

    # Logging (stderr + fichier optionnel, rotation 10MB, 5 fichiers de retention)
    # MOVIECACHE_LOG_FILE= (vide) desactive le fichier
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=Path("logs/moviecache.log"))
    log_json: bool = Field(default=True)
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("cache_dir", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_optional_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Chemin vide ou absent: pas de fichier de log."""
        if v is None or str(v).strip() == "":
            return None
        return Path(v).expanduser()

    @property
    def tmdb_enabled(self) -> bool:
        """Verifie si l'API TMDB est configuree."""
        return bool(self.tmdb_api_key)
