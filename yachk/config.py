"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le
prefixe YACHK_. Il n'y a pas de fichier de configuration.

L'API catalogue est optionnelle : sans URL ou sans client id, les noms sont
verifies en mode degrade (motif sur les champs techniques).
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Parametres de l'application.

    Tous les parametres peuvent etre surcharges via des variables
    d'environnement avec le prefixe YACHK_.
    Exemple : YACHK_CATALOG_CLIENT_ID=xxxx
    """

    model_config = SettingsConfigDict(
        env_prefix="YACHK_",
        case_sensitive=False,
    )

    # API catalogue (OPTIONNELLE - mode degrade si non definie)
    catalog_api_url: Optional[str] = Field(default=None)
    catalog_client_id: Optional[str] = Field(default=None)
    catalog_timeout: float = Field(default=30.0, gt=0)
    catalog_max_attempts: int = Field(default=3, ge=1)

    # Sonde ffmpeg
    ffmpeg_binary: str = Field(default="ffmpeg")
    probe_timeout: int = Field(default=120, ge=1)

    # Logging (stderr, et fichier JSON optionnel avec rotation)
    log_level: str = Field(default="WARNING")
    log_file: Optional[Path] = Field(default=None)
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Etend ~ vers le repertoire home."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.upper()

    @property
    def catalog_enabled(self) -> bool:
        """Verifie si l'API catalogue est configuree."""
        return bool(self.catalog_api_url) and bool(self.catalog_client_id)
