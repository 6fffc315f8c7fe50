"""
Sonde de diagnostic des fichiers media via ffmpeg.

Lance `ffmpeg -hide_banner -i <fichier>` et renvoie sa sortie combinee.
Sans fichier de sortie, ffmpeg termine toujours avec le code 1 apres avoir
decrit les flux : ce code est donc le resultat normal. Tout autre echec
leve ProbeInvocationFailed avec la sortie capturee.
"""

import asyncio
import shutil

from loguru import logger

from yachk.core.exceptions import ProbeInvocationFailed
from yachk.core.ports.probe import IProbeRunner


# Code de sortie d'ffmpeg quand aucun fichier de sortie n'est demande
EXPECTED_EXIT_CODES = frozenset({0, 1})


class FFmpegProbeRunner(IProbeRunner):
    """
    Implementation de IProbeRunner basee sur ffmpeg.

    Exemple d'utilisation:
        runner = FFmpegProbeRunner()
        text = await runner.probe("film_coid12345_q0.mp4")
    """

    def __init__(self, binary: str = "ffmpeg", timeout: float = 120) -> None:
        """
        Args:
            binary: Executable ffmpeg (nom dans le PATH ou chemin)
            timeout: Duree maximale de la sonde en secondes
        """
        self._binary = binary
        self._timeout = timeout

    @property
    def available(self) -> bool:
        """Vrai si l'executable ffmpeg est trouvable."""
        return shutil.which(self._binary) is not None

    def command(self, path: str) -> list[str]:
        return [self._binary, "-hide_banner", "-i", path]

    async def probe(self, path: str) -> str:
        """
        Sonde un fichier et renvoie la sortie d'ffmpeg (stdout + stderr).

        Raises:
            ProbeInvocationFailed: Executable introuvable, timeout ou code
                de sortie inattendu
        """
        try:
            process = await asyncio.create_subprocess_exec(
                *self.command(path),
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as e:
            raise ProbeInvocationFailed(path, f"Cannot run {self._binary}: {e}") from e

        try:
            stdout, _ = await asyncio.wait_for(process.communicate(), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            process.kill()
            await process.wait()
            raise ProbeInvocationFailed(
                path, f"{self._binary} timed out after {self._timeout}s"
            ) from e

        output = stdout.decode("utf-8", errors="replace")
        if process.returncode not in EXPECTED_EXIT_CODES:
            logger.debug("Code de sortie ffmpeg inattendu", path=path, returncode=process.returncode)
            raise ProbeInvocationFailed(
                path,
                f"exit status {process.returncode}",
                output=output,
                returncode=process.returncode,
            )
        return output
