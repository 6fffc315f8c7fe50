"""
Construction du nom de fichier canonique.

Format :
    Titre[_sNNeNN]_coid{id}_{annee}__q{palier}_r{L}x{H}p{fps}_a{langue}2.mp4

Exemple :
    Matrica_coid12345_1999__q0_r1920x1080p23976_ar2.mp4

Avec le catalogue, le nom est exact et compare par egalite. Sans catalogue
(mode degrade), titre et annee deviennent des jokers et le nom attendu est
un motif : seule la coherence des champs techniques est verifiee.
"""

from typing import Optional

from yachk.core.value_objects.naming import (
    CatalogAvailable,
    CatalogLookup,
    CatalogMetadata,
    ContentType,
    NamingTokens,
)
from yachk.core.value_objects.streams import AudioStream, VideoStream
from yachk.core.value_objects.verdict import ExpectedName, Finding, Verdict, VerdictKind
from yachk.services.transliteration import transliterate


EXTENSION = ".mp4"

# Seul le stereo passe les regles de coherence
STEREO_CHANNEL_DIGIT = "2"

# Segment inconnu en mode degrade
WILDCARD = None


def title_slug(metadata: CatalogMetadata) -> str:
    """Slug du titre localise, ou du titre original si le premier est vide."""
    return transliterate(metadata.display_title)


def build_expected_name(
    tokens: NamingTokens,
    video: VideoStream,
    audio: AudioStream,
    catalog: CatalogLookup,
) -> ExpectedName:
    """
    Construit le nom attendu pour un fichier.

    Args:
        tokens: Jetons extraits du nom de fichier
        video: Flux video parse
        audio: Flux audio parse
        catalog: Fiche catalogue disponible ou indisponible

    Returns:
        ExpectedName exact (catalogue disponible) ou motif (mode degrade)
    """
    width, height = video.resolution
    title: Optional[str] = WILDCARD
    year: Optional[str] = WILDCARD
    episode = ""
    if isinstance(catalog, CatalogAvailable):
        metadata = catalog.metadata
        title = title_slug(metadata)
        year = str(metadata.year)
        if metadata.content_type is ContentType.SHOW:
            episode = f"_{tokens.season_episode}"

    segments: list[Optional[str]] = [
        title,
        f"{episode}_coid{tokens.catalog_id}_",
        year,
        f"__q{tokens.quality}",
        f"_r{width}x{height}",
        f"p{video.fps_label}",
        f"_a{audio.lang[:1].lower()}{STEREO_CHANNEL_DIGIT}",
        EXTENSION,
    ]
    return ExpectedName.from_segments(segments)


def compare(
    filename: str,
    expected: ExpectedName,
    warnings: tuple[Finding, ...] = (),
) -> Verdict:
    """
    Compare le nom de fichier au nom attendu.

    Returns:
        OK / OK_WITH_WARNINGS si le nom correspond, MISMATCH sinon
    """
    if not expected.matches(filename):
        return Verdict(kind=VerdictKind.MISMATCH, warnings=warnings, expected=expected)
    kind = VerdictKind.OK_WITH_WARNINGS if warnings else VerdictKind.OK
    return Verdict(kind=kind, warnings=warnings, expected=expected)


class CanonicalNameBuilder:
    """
    Service de construction et de comparaison du nom canonique.

    Sans etat, peut etre utilise comme singleton.
    """

    def title_slug(self, metadata: CatalogMetadata) -> str:
        """Voir title_slug()."""
        return title_slug(metadata)

    def build(
        self,
        tokens: NamingTokens,
        video: VideoStream,
        audio: AudioStream,
        catalog: CatalogLookup,
    ) -> ExpectedName:
        """Voir build_expected_name()."""
        return build_expected_name(tokens, video, audio, catalog)

    def compare(
        self,
        filename: str,
        expected: ExpectedName,
        warnings: tuple[Finding, ...] = (),
    ) -> Verdict:
        """Voir compare()."""
        return compare(filename, expected, warnings)
