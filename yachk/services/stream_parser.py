"""
Parsing de la sortie de diagnostic d'ffmpeg.

Extrait les descriptions des flux video et audio du texte produit par
`ffmpeg -hide_banner -i <fichier>`. Chaque type de flux est decrit par
une grammaire fixe (expression reguliere a groupes nommes) et doit
apparaitre exactement une fois.

Exemple de lignes reconnues :
    Stream #0:0(und): Video: h264 (High) (avc1 / 0x31637661), yuv420p, \
1920x1080 [SAR 1:1 DAR 16:9], 4500 kb/s, 23.98 fps, 23.98 tbr, 24k tbn (default)
    Stream #0:1(rus): Audio: aac (LC) (mp4a / 0x6134706D), 48000 Hz, \
stereo, fltp, 192 kb/s (default)
        Metadata:
          handler_name    : Russian
"""

import re

from loguru import logger

from yachk.core.exceptions import MalformedField, MultipleStreamsFound, NoStreamFound
from yachk.core.value_objects.streams import AudioStream, VideoStream


# En-tete commun : "Stream #0:1", id optionnel "[0x2]", langue optionnelle "(rus)"
_STREAM_HEADER = (
    r"Stream #(?P<file>\d+):(?P<index>\d+)"
    r"(?:\[0x[0-9A-Fa-f]+\])?"
    r"(?:\((?P<lang>[A-Za-z]+)\))?"
)

# Reste de la ligne, ou figurent les drapeaux "(default)", "(forced)"...
_REST_AND_EOL = r"(?P<rest>[^\r\n]*)(?:\r?\n|\Z)"
DEFAULT_MARKER = "(default)"

VIDEO_PATTERN = re.compile(
    _STREAM_HEADER
    + r": Video: (?P<codec>\w+)[^\r\n]*?"
    # Format de pixel, qualificatif couleur optionnel : yuv420p(tv, bt709)
    + r", (?P<pix_fmt>\w+)(?:\([^)\r\n]*\))?"
    + r", (?P<width>\d+)x(?P<height>\d+)"
    + r" \[SAR (?P<sar_num>\d+):(?P<sar_den>\d+)"
    + r" DAR (?P<dar_num>\d+):(?P<dar_den>\d+)\]"
    + r"[^\r\n]*?, (?P<fps>\d+(?:\.\d+)?) fps,"
    + _REST_AND_EOL
)

AUDIO_PATTERN = re.compile(
    _STREAM_HEADER
    + r": Audio: (?P<codec>\w+)[^\r\n]*?"
    + r", (?P<sample_rate>\d+) Hz"
    + r", (?P<channels>[0-9A-Za-z.]+)"
    + _REST_AND_EOL
    # Bloc Metadata optionnel : seul le champ handler_name est retenu
    + r"(?:[ \t]+Metadata:[ \t]*\r?\n"
    + r"(?:[ \t]+(?!handler_name\b)\w+[ \t]*:[^\r\n]*\r?\n)*"
    + r"[ \t]+handler_name[ \t]*: (?P<name>[^\r\n]*))?"
)

VIDEO = "video"
AUDIO = "audio"


def _find_single(pattern: re.Pattern, text: str, kind: str) -> re.Match:
    """
    Retourne l'unique correspondance de la grammaire dans le texte.

    Raises:
        NoStreamFound: Aucune correspondance
        MultipleStreamsFound: Plusieurs correspondances (lignes jointes)
    """
    matches = list(pattern.finditer(text))
    if not matches:
        raise NoStreamFound(kind)
    if len(matches) > 1:
        lines = [m.group(0).rstrip("\r\n") for m in matches]
        logger.debug("Plusieurs flux trouves", kind=kind, count=len(lines))
        raise MultipleStreamsFound(kind, lines)
    return matches[0]


def _to_int(match: re.Match, name: str, kind: str) -> int:
    value = match.group(name)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise MalformedField(kind, name, str(value)) from None


def parse_video(text: str) -> VideoStream:
    """
    Extrait l'unique flux video de la sortie ffmpeg.

    Args:
        text: Sortie de diagnostic complete

    Returns:
        VideoStream decrivant le flux

    Raises:
        NoStreamFound, MultipleStreamsFound, MalformedField
    """
    match = _find_single(VIDEO_PATTERN, text, VIDEO)

    raw_fps = match.group("fps")
    try:
        fps = float(raw_fps)
    except ValueError:
        raise MalformedField(VIDEO, "fps", raw_fps) from None
    if fps <= 0:
        raise MalformedField(VIDEO, "fps", raw_fps)

    return VideoStream(
        stream=(_to_int(match, "file", VIDEO), _to_int(match, "index", VIDEO)),
        lang=match.group("lang") or "",
        codec=match.group("codec"),
        pix_fmt=match.group("pix_fmt"),
        width=_to_int(match, "width", VIDEO),
        height=_to_int(match, "height", VIDEO),
        sar=(_to_int(match, "sar_num", VIDEO), _to_int(match, "sar_den", VIDEO)),
        dar=(_to_int(match, "dar_num", VIDEO), _to_int(match, "dar_den", VIDEO)),
        fps=fps,
        is_default=DEFAULT_MARKER in match.group("rest"),
    )


def parse_audio(text: str) -> AudioStream:
    """
    Extrait l'unique flux audio de la sortie ffmpeg.

    La langue est obligatoire : son initiale fait partie du nom canonique.

    Args:
        text: Sortie de diagnostic complete

    Returns:
        AudioStream decrivant le flux

    Raises:
        NoStreamFound, MultipleStreamsFound, MalformedField
    """
    match = _find_single(AUDIO_PATTERN, text, AUDIO)

    lang = match.group("lang") or ""
    if not lang:
        raise MalformedField(AUDIO, "lang", lang)

    sample_rate = match.group("sample_rate")
    if _to_int(match, "sample_rate", AUDIO) <= 0:
        raise MalformedField(AUDIO, "sample_rate", sample_rate)

    return AudioStream(
        stream=(_to_int(match, "file", AUDIO), _to_int(match, "index", AUDIO)),
        lang=lang,
        codec=match.group("codec"),
        sample_rate=sample_rate,
        channels=match.group("channels"),
        is_default=DEFAULT_MARKER in match.group("rest"),
        name=(match.group("name") or "").strip(),
    )


class StreamDescriptionParser:
    """
    Parser de la sortie de diagnostic ffmpeg.

    Sans etat, peut etre utilise comme singleton.
    """

    def parse_video(self, text: str) -> VideoStream:
        """Voir parse_video()."""
        return parse_video(text)

    def parse_audio(self, text: str) -> AudioStream:
        """Voir parse_audio()."""
        return parse_audio(text)

    def parse(self, text: str) -> tuple[VideoStream, AudioStream]:
        """Extrait le flux video puis le flux audio."""
        return parse_video(text), parse_audio(text)
