"""
Hierarchie des exceptions de yachk.

Toutes les erreurs levees par le domaine et les adaptateurs derivent de
YachkError. Elles sont limitees a un fichier : le FileNameChecker les
capture et les range dans le FileReport du fichier concerne, la boucle
continue avec le fichier suivant.

- StreamParseError : sortie ffmpeg inexploitable (aucun flux, plusieurs flux,
  champ mal forme)
- CollaboratorError : echec d'un collaborateur externe (ffmpeg, API catalogue)
- TransliterationError : texte impossible a reparer avant translitteration
"""

from typing import Optional


class YachkError(Exception):
    """Exception de base de yachk."""


# ============================================================================
# Parsing de la sortie ffmpeg
# ============================================================================


class StreamParseError(YachkError):
    """
    Erreur de parsing d'un type de flux dans la sortie ffmpeg.

    Attributes:
        kind: Type de flux concerne ("video" ou "audio")
    """

    def __init__(self, kind: str, message: str) -> None:
        self.kind = kind
        super().__init__(message)


class NoStreamFound(StreamParseError):
    """Aucune ligne de flux du type demande dans la sortie ffmpeg."""

    def __init__(self, kind: str) -> None:
        super().__init__(kind, f"No {kind} stream found.")


class MultipleStreamsFound(StreamParseError):
    """
    Plusieurs lignes de flux du meme type : le fichier doit en avoir un seul.

    Attributes:
        lines: Lignes brutes trouvees, a afficher pour diagnostic
    """

    def __init__(self, kind: str, lines: list[str]) -> None:
        self.lines = tuple(lines)
        super().__init__(kind, f"More than one {kind} stream ({len(lines)} found).")


class MalformedField(StreamParseError):
    """
    Champ capture mais inexploitable (valeur non numerique, fps nul...).

    Attributes:
        field: Nom du champ fautif
        value: Valeur brute capturee
    """

    def __init__(self, kind: str, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(kind, f"Could not parse {kind} stream: bad {field} {value!r}.")


# ============================================================================
# Collaborateurs externes
# ============================================================================


class CollaboratorError(YachkError):
    """Echec d'un collaborateur externe (probe ffmpeg ou API catalogue)."""


class CredentialsMissing(CollaboratorError):
    """URL ou client id de l'API catalogue non configure."""

    def __init__(self, message: str = "Catalog client id is not provided") -> None:
        super().__init__(message)


class NetworkError(CollaboratorError):
    """
    Echec reseau ou reponse HTTP en erreur de l'API catalogue.

    Attributes:
        status_code: Code HTTP si une reponse a ete recue, None sinon
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class DecodeError(CollaboratorError):
    """Reponse du catalogue illisible (encodage, JSON, fiche incomplete)."""


class ProbeInvocationFailed(CollaboratorError):
    """
    Le processus ffmpeg a echoue autrement que par le code de sortie 1 attendu.

    Attributes:
        path: Fichier sonde
        output: Sortie capturee malgre l'echec (peut etre vide)
        returncode: Code de sortie, None si le processus n'a pas pu tourner
    """

    def __init__(
        self,
        path: str,
        reason: str,
        output: str = "",
        returncode: Optional[int] = None,
    ) -> None:
        self.path = path
        self.output = output
        self.returncode = returncode
        super().__init__(reason)


# ============================================================================
# Translitteration
# ============================================================================


class TransliterationError(YachkError):
    """Le texte a translitterer contient une sequence irreparable."""
