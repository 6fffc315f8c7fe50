"""
Objets valeur pour la convention de nommage et les metadonnees catalogue.

Contient les jetons extraits d'un nom de fichier, le type de contenu du
catalogue et la variante etiquetee CatalogLookup qui distingue
"metadonnees disponibles" de "catalogue indisponible" (mode degrade).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class NamingForm(Enum):
    """Forme de la convention reconnue dans le nom de fichier.

    Valeurs:
        LEGACY: Forme historique a underscores (..._coid123_..._q0...)
        HYPHEN: Forme a tirets (...coid-123-...-q0...)
    """

    LEGACY = "legacy"
    HYPHEN = "hyphen"


@dataclass(frozen=True)
class NamingTokens:
    """
    Jetons extraits d'un nom de fichier.

    Attributs:
        season_episode: Tag saison/episode "sNNeNNNN", chaine vide si absent
        catalog_id: Identifiant catalogue (chiffres, non vide)
        quality: Palier de qualite (chiffres, non vide)
        form: Forme de la convention reconnue
    """

    season_episode: str
    catalog_id: str
    quality: str
    form: NamingForm = NamingForm.LEGACY

    @property
    def quality_tier(self) -> int:
        """Palier de qualite sous forme d'entier."""
        return int(self.quality)

    @property
    def has_episode_tag(self) -> bool:
        return bool(self.season_episode)


class ContentType(Enum):
    """Type de contenu renvoye par le catalogue.

    Valeurs:
        MOVIE: Film
        SHOW: Serie (un tag saison/episode est obligatoire)
        OTHER: Toute autre valeur renvoyee par l'API
    """

    MOVIE = "MOVIE"
    SHOW = "SHOW"
    OTHER = "OTHER"

    @classmethod
    def from_api(cls, value: str) -> "ContentType":
        """Convertit la valeur brute de l'API, OTHER si inconnue."""
        try:
            return cls(value.upper())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class CatalogMetadata:
    """
    Fiche catalogue d'un titre.

    Attributs:
        title: Titre localise (peut etre vide)
        original_title: Titre original, utilise si le titre localise est vide
        years: Annees de sortie, la premiere fait foi
        content_type: Type de contenu
    """

    title: str
    original_title: str
    years: tuple[int, ...]
    content_type: ContentType

    @property
    def year(self) -> int:
        """Annee de reference (premier element de years)."""
        return self.years[0]

    @property
    def display_title(self) -> str:
        """Titre a translitterer : localise, sinon original."""
        return self.title or self.original_title


@dataclass(frozen=True)
class CatalogAvailable:
    """Metadonnees catalogue obtenues pour le fichier."""

    metadata: CatalogMetadata


@dataclass(frozen=True)
class CatalogUnavailable:
    """Catalogue indisponible, la comparaison passe en mode motif."""

    reason: str


CatalogLookup = Union[CatalogAvailable, CatalogUnavailable]
