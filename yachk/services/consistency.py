"""
Regles de coherence entre les flux et les jetons du nom de fichier.

Les regles sont evaluees dans un ordre fixe. Un avertissement n'arrete
rien, un echec bloquant arrete l'evaluation : les regles suivantes ne
sont pas appliquees.

1. Palier de qualite vs resolution (avertissement)
2. Largeur 720, SAR suspect (avertissement)
3. Pixels carres, SAR 1:1 (echec)
4. Audio stereo (echec)
5. Tag saison/episode pour les series (echec)
"""

from typing import Callable, Optional

from yachk.core.value_objects.naming import ContentType, NamingTokens
from yachk.core.value_objects.streams import AudioStream, VideoStream
from yachk.core.value_objects.verdict import (
    ConsistencyReport,
    Finding,
    RuleCode,
    Severity,
)


# Seuils HD (tolerants pour les formats cinema recadres)
HD_MIN_WIDTH = 1900
HD_MIN_HEIGHT = 1040

SUSPECT_WIDTH = 720

Rule = Callable[
    [VideoStream, AudioStream, NamingTokens, Optional[ContentType]],
    Optional[Finding],
]


def is_hd(video: VideoStream) -> bool:
    """Vrai si la resolution est HD ou plus."""
    return video.width >= HD_MIN_WIDTH or video.height >= HD_MIN_HEIGHT


def check_quality_tier(
    video: VideoStream,
    audio: AudioStream,
    tokens: NamingTokens,
    content_type: Optional[ContentType],
) -> Optional[Finding]:
    """Compare le palier de qualite du nom a la resolution."""
    tier = tokens.quality_tier
    if not is_hd(video) and tier == 0:
        return Finding(
            code=RuleCode.QUALITY_TOO_HIGH,
            severity=Severity.WARNING,
            message="quality tier may be too high; expected > 0 for sub-HD",
            value=tokens.quality,
        )
    if is_hd(video) and tier > 0:
        return Finding(
            code=RuleCode.QUALITY_TOO_LOW,
            severity=Severity.WARNING,
            message="quality tier may be too low; expected 0 for HD-or-above",
            value=tokens.quality,
        )
    return None


def check_suspect_width(
    video: VideoStream,
    audio: AudioStream,
    tokens: NamingTokens,
    content_type: Optional[ContentType],
) -> Optional[Finding]:
    # Artefact frequent des sources a pixels non carres
    if video.width == SUSPECT_WIDTH:
        return Finding(
            code=RuleCode.SUSPECT_720,
            severity=Severity.WARNING,
            message="width is 720; sample aspect ratio may be miscomputed upstream",
            value=str(video.width),
        )
    return None


def check_square_pixels(
    video: VideoStream,
    audio: AudioStream,
    tokens: NamingTokens,
    content_type: Optional[ContentType],
) -> Optional[Finding]:
    if not video.is_square_pixel:
        return Finding(
            code=RuleCode.SAR_NOT_SQUARE,
            severity=Severity.FAILURE,
            message="sample aspect ratio is not 1:1",
            value=f"{video.sar[0]}:{video.sar[1]}",
        )
    return None


def check_stereo(
    video: VideoStream,
    audio: AudioStream,
    tokens: NamingTokens,
    content_type: Optional[ContentType],
) -> Optional[Finding]:
    if not audio.is_stereo:
        return Finding(
            code=RuleCode.NOT_STEREO,
            severity=Severity.FAILURE,
            message="audio track is not stereo",
            value=audio.channels,
        )
    return None


def check_episode_tag(
    video: VideoStream,
    audio: AudioStream,
    tokens: NamingTokens,
    content_type: Optional[ContentType],
) -> Optional[Finding]:
    """Exige le tag saison/episode quand le catalogue annonce une serie."""
    if content_type is ContentType.SHOW and not tokens.has_episode_tag:
        return Finding(
            code=RuleCode.EPISODE_TAG_MISSING,
            severity=Severity.FAILURE,
            message="season/episode tag required for episodic content, must match sNNeNNNN",
        )
    return None


RULES: tuple[Rule, ...] = (
    check_quality_tier,
    check_suspect_width,
    check_square_pixels,
    check_stereo,
    check_episode_tag,
)


def evaluate(
    video: VideoStream,
    audio: AudioStream,
    tokens: NamingTokens,
    content_type: Optional[ContentType] = None,
) -> ConsistencyReport:
    """
    Applique les regles de coherence dans l'ordre.

    Fonction pure : les memes entrees donnent toujours la meme liste
    ordonnee de constats.

    Args:
        video: Flux video parse
        audio: Flux audio parse
        tokens: Jetons extraits du nom de fichier
        content_type: Type de contenu du catalogue, None en mode degrade

    Returns:
        ConsistencyReport avec les avertissements et au plus un echec
    """
    findings: list[Finding] = []
    for rule in RULES:
        finding = rule(video, audio, tokens, content_type)
        if finding is None:
            continue
        findings.append(finding)
        if finding.is_failure:
            break
    return ConsistencyReport(findings=tuple(findings))


class ConsistencyRules:
    """
    Service d'evaluation des regles de coherence.

    Sans etat, peut etre utilise comme singleton.
    """

    def evaluate(
        self,
        video: VideoStream,
        audio: AudioStream,
        tokens: NamingTokens,
        content_type: Optional[ContentType] = None,
    ) -> ConsistencyReport:
        """Voir evaluate()."""
        return evaluate(video, audio, tokens, content_type)
