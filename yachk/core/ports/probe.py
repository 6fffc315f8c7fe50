"""
Interface port pour la sonde de diagnostic des fichiers media.

Le domaine ne lance jamais de processus lui-meme : il recoit le texte
de diagnostic produit par une implementation de IProbeRunner.
"""

from abc import ABC, abstractmethod


class IProbeRunner(ABC):
    """
    Interface pour l'obtention du texte de diagnostic d'un fichier media.

    L'implementation concrete lance ffmpeg et renvoie sa sortie combinee
    (stdout + stderr).
    """

    @abstractmethod
    async def probe(self, path: str) -> str:
        """
        Sonde un fichier media.

        Args:
            path: Chemin du fichier tel que fourni en entree

        Retourne:
            Texte de diagnostic complet

        Raises:
            ProbeInvocationFailed: Si la sonde echoue autrement que par
                le code de sortie attendu (la sortie capturee est jointe)
        """
        ...
