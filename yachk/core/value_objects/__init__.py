"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- VideoStream, AudioStream : Flux decrits par ffmpeg
- NamingTokens, NamingForm : Jetons extraits du nom de fichier
- ContentType, CatalogMetadata : Fiche catalogue
- CatalogAvailable, CatalogUnavailable, CatalogLookup : Disponibilite du catalogue
- Finding, ConsistencyReport, ExpectedName, Verdict : Resultats de verification
- FileReport, ReportStatus : Rapport par fichier
"""

from yachk.core.value_objects.naming import (
    CatalogAvailable,
    CatalogLookup,
    CatalogMetadata,
    CatalogUnavailable,
    ContentType,
    NamingForm,
    NamingTokens,
)
from yachk.core.value_objects.report import FileReport, ReportStatus
from yachk.core.value_objects.streams import AudioStream, VideoStream
from yachk.core.value_objects.verdict import (
    ConsistencyReport,
    ExpectedName,
    Finding,
    RuleCode,
    Severity,
    Verdict,
    VerdictKind,
)

__all__ = [
    "AudioStream",
    "CatalogAvailable",
    "CatalogLookup",
    "CatalogMetadata",
    "CatalogUnavailable",
    "ConsistencyReport",
    "ContentType",
    "ExpectedName",
    "FileReport",
    "Finding",
    "NamingForm",
    "NamingTokens",
    "ReportStatus",
    "RuleCode",
    "Severity",
    "Verdict",
    "VerdictKind",
    "VideoStream",
]
