"""
Extraction des jetons de la convention de nommage.

Un nom conforme contient un identifiant catalogue et un palier de qualite,
precedes eventuellement d'un tag saison/episode :

- forme historique : Titre_s01e05_coid12345_2019__q0_r1920x1080p25_ar2.mp4
- forme a tirets : titre-s01e05-coid-12345-q1-....mp4

Si aucune forme ne correspond, les jetons sont absents (None) : c'est un
resultat de validation, pas une erreur.
"""

import re
from pathlib import PurePosixPath
from typing import Optional

from yachk.core.value_objects.naming import NamingForm, NamingTokens


SEASON_EPISODE = r"s\d{2}e\d{2,4}"

NAMING_PATTERNS: tuple[tuple[NamingForm, re.Pattern], ...] = (
    (
        NamingForm.LEGACY,
        re.compile(
            rf".*?(?P<se>{SEASON_EPISODE})?_?coid(?P<id>\d+).*_q(?P<quality>\d+).*"
        ),
    ),
    (
        NamingForm.HYPHEN,
        re.compile(
            rf".*?(?P<se>{SEASON_EPISODE})?_?coid-(?P<id>\d+).*-q(?P<quality>\d+).*"
        ),
    ),
)

# Rappel de la convention affiche quand le nom n'est pas conforme
CONVENTION_HINT = r".*coid(\d+)_q(\d+).*"


def base_name(path: str) -> str:
    """
    Retourne le nom de fichier sans repertoire.

    Les separateurs Windows sont convertis pour que "C:\\films\\a.mp4"
    donne "a.mp4" sur toutes les plateformes.
    """
    return PurePosixPath(path.replace("\\", "/")).name


def extract_tokens(filename: str) -> Optional[NamingTokens]:
    """
    Extrait les jetons d'un nom de fichier.

    Les formes sont essayees dans l'ordre (historique puis tirets) et
    doivent couvrir le nom entier.

    Args:
        filename: Nom de fichier sans repertoire

    Returns:
        NamingTokens, ou None si le nom ne suit pas la convention
    """
    for form, pattern in NAMING_PATTERNS:
        match = pattern.fullmatch(filename)
        if match is None:
            continue
        catalog_id = match.group("id") or ""
        quality = match.group("quality") or ""
        if not catalog_id or not quality:
            return None
        return NamingTokens(
            season_episode=match.group("se") or "",
            catalog_id=catalog_id,
            quality=quality,
            form=form,
        )
    return None


class NameTokenExtractor:
    """
    Extracteur de jetons de nommage.

    Sans etat, peut etre utilise comme singleton.
    """

    def extract(self, filename: str) -> Optional[NamingTokens]:
        """Voir extract_tokens()."""
        return extract_tokens(filename)

    def extract_from_path(self, path: str) -> Optional[NamingTokens]:
        """Retire le repertoire puis extrait les jetons."""
        return extract_tokens(base_name(path))
