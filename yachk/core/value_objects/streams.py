"""
Objets valeur pour les flux video et audio.

Descriptions immutables des flux extraits de la sortie de diagnostic
d'ffmpeg. Tous les objets valeur utilisent @dataclass(frozen=True).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class VideoStream:
    """
    Flux video tel que decrit par ffmpeg.

    Attributs :
        stream : Couple (index du conteneur, index du flux), ex: (0, 0)
        lang : Code langue a 3 lettres, chaine vide si absent
        codec : Nom du codec (ex: "h264")
        pix_fmt : Format de pixel (ex: "yuv420p")
        width : Resolution horizontale en pixels
        height : Resolution verticale en pixels
        sar : Sample aspect ratio (numerateur, denominateur)
        dar : Display aspect ratio (numerateur, denominateur)
        fps : Frequence d'images (> 0, entiere ou decimale)
        is_default : Flux marque "(default)"
    """

    stream: tuple[int, int]
    lang: str
    codec: str
    pix_fmt: str
    width: int
    height: int
    sar: tuple[int, int]
    dar: tuple[int, int]
    fps: float
    is_default: bool = False

    @property
    def resolution(self) -> tuple[int, int]:
        """Retourne le couple (largeur, hauteur)."""
        return (self.width, self.height)

    @property
    def is_square_pixel(self) -> bool:
        """Vrai si le SAR vaut 1:1."""
        return self.sar[0] == self.sar[1]

    @property
    def fps_label(self) -> str:
        """
        Frequence d'images sans point decimal, pour le nom de fichier.

        Utilise la representation decimale la plus courte : 23.976 -> "23976",
        25.0 -> "25".
        """
        if self.fps.is_integer():
            return str(int(self.fps))
        return repr(self.fps).replace(".", "")


@dataclass(frozen=True)
class AudioStream:
    """
    Flux audio tel que decrit par ffmpeg.

    Attributs :
        stream : Couple (index du conteneur, index du flux)
        lang : Code langue a 3 lettres (ex: "rus")
        codec : Nom du codec (ex: "aac")
        sample_rate : Frequence d'echantillonnage, gardee en texte (ex: "48000")
        channels : Disposition des canaux (ex: "stereo", "5.1")
        is_default : Flux marque "(default)"
        name : Nom de piste (handler_name), chaine vide si absent
    """

    stream: tuple[int, int]
    lang: str
    codec: str
    sample_rate: str
    channels: str
    is_default: bool = False
    name: str = ""

    @property
    def is_stereo(self) -> bool:
        return self.channels == "stereo"
