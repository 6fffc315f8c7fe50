"""
Rapport de verification d'un fichier.

FileReport est la frontiere d'isolation entre fichiers : tout ce qui
concerne un fichier (jetons, flux, catalogue, verdict ou erreur) y est
range, rien ne remonte au-dela.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from yachk.core.exceptions import YachkError
from yachk.core.value_objects.naming import (
    CatalogAvailable,
    CatalogLookup,
    NamingTokens,
)
from yachk.core.value_objects.streams import AudioStream, VideoStream
from yachk.core.value_objects.verdict import Verdict


class ReportStatus(Enum):
    """Etat final du traitement d'un fichier.

    Valeurs:
        BAD_NAME: Le nom ne suit pas la convention id/qualite
        ERROR: Traitement interrompu par une erreur (parsing ffmpeg...)
        CHECKED: Un verdict a ete produit
    """

    BAD_NAME = "bad_name"
    ERROR = "error"
    CHECKED = "checked"


@dataclass
class FileReport:
    """
    Resultat du traitement d'un fichier.

    Attributs:
        path: Chemin tel que fourni en entree
        filename: Nom de base (sans repertoire)
        tokens: Jetons extraits, None si le nom ne suit pas la convention
        catalog: Resultat de la recherche catalogue
        video: Flux video parse
        audio: Flux audio parse
        notices: Degradations rencontrees (catalogue, probe)
        verdict: Verdict final quand la verification est allee au bout
        error: Erreur ayant interrompu le traitement du fichier
    """

    path: str
    filename: str
    tokens: Optional[NamingTokens] = None
    catalog: Optional[CatalogLookup] = None
    video: Optional[VideoStream] = None
    audio: Optional[AudioStream] = None
    notices: list[str] = field(default_factory=list)
    verdict: Optional[Verdict] = None
    error: Optional[YachkError] = None

    @property
    def status(self) -> ReportStatus:
        if self.tokens is None:
            return ReportStatus.BAD_NAME
        if self.verdict is None:
            return ReportStatus.ERROR
        return ReportStatus.CHECKED

    @property
    def passed(self) -> bool:
        return self.verdict is not None and self.verdict.passed

    @property
    def degraded(self) -> bool:
        """Vrai si la comparaison s'est faite sans metadonnees catalogue."""
        return not isinstance(self.catalog, CatalogAvailable)
