"""
Ports (interfaces abstraites) des collaborateurs externes.

Exports :
- IProbeRunner : Sonde de diagnostic d'un fichier media (ffmpeg)
- ICatalogClient : Recuperation de la fiche catalogue d'un titre
"""

from yachk.core.ports.catalog import ICatalogClient
from yachk.core.ports.probe import IProbeRunner

__all__ = ["ICatalogClient", "IProbeRunner"]
