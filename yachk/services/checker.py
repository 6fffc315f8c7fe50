"""
Orchestration de la verification des noms de fichiers.

Pour chaque fichier, dans l'ordre :
1. Extraction des jetons du nom (arret si le nom n'est pas conforme)
2. Recherche de la fiche catalogue (mode degrade si indisponible)
3. Sonde ffmpeg et parsing des flux video/audio
4. Regles de coherence (arret au premier echec bloquant)
5. Construction du nom attendu et comparaison

Chaque fichier produit un FileReport ; une erreur sur un fichier n'empeche
jamais le traitement des suivants.
"""

from collections.abc import AsyncIterator, Iterable

from loguru import logger

from yachk.core.exceptions import (
    CollaboratorError,
    ProbeInvocationFailed,
    StreamParseError,
    TransliterationError,
    YachkError,
)
from yachk.core.ports.catalog import ICatalogClient
from yachk.core.ports.probe import IProbeRunner
from yachk.core.value_objects.naming import (
    CatalogAvailable,
    CatalogLookup,
    CatalogUnavailable,
    NamingTokens,
)
from yachk.core.value_objects.report import FileReport
from yachk.core.value_objects.verdict import Verdict
from yachk.services.canonical_name import CanonicalNameBuilder
from yachk.services.consistency import ConsistencyRules
from yachk.services.name_tokens import NameTokenExtractor, base_name
from yachk.services.stream_parser import StreamDescriptionParser


class FileNameChecker:
    """
    Service de verification des noms de fichiers.

    Traite les fichiers un par un, sequentiellement. Les collaborateurs
    (sonde ffmpeg, client catalogue) sont injectes.

    Exemple d'utilisation:
        checker = container.checker()
        async for report in checker.check_files(paths):
            display_report(report)
    """

    def __init__(
        self,
        probe_runner: IProbeRunner,
        catalog_client: ICatalogClient,
        extractor: NameTokenExtractor,
        parser: StreamDescriptionParser,
        rules: ConsistencyRules,
        builder: CanonicalNameBuilder,
    ) -> None:
        self._probe_runner = probe_runner
        self._catalog_client = catalog_client
        self._extractor = extractor
        self._parser = parser
        self._rules = rules
        self._builder = builder

    async def check_files(self, paths: Iterable[str]) -> AsyncIterator[FileReport]:
        """Verifie les fichiers dans l'ordre, un rapport par fichier."""
        for path in paths:
            yield await self.check_file(path)

    async def check_file(self, path: str) -> FileReport:
        """
        Verifie un fichier.

        Args:
            path: Chemin du fichier tel que fourni en entree

        Returns:
            FileReport avec le verdict, ou l'erreur ayant arrete le traitement
        """
        report = FileReport(path=path, filename=base_name(path))
        logger.info("Verification", filename=report.filename)

        report.tokens = self._extractor.extract(report.filename)
        if report.tokens is None:
            logger.info("Nom non conforme a la convention id/qualite", filename=report.filename)
            return report

        try:
            await self._run_checks(report, report.tokens)
        except YachkError as e:
            logger.warning("Verification interrompue: {}", e, filename=report.filename)
            report.error = e
        return report

    async def _run_checks(self, report: FileReport, tokens: NamingTokens) -> None:
        report.catalog = await self._lookup_catalog(report, tokens.catalog_id)

        output = await self._probe(report)
        try:
            report.video, report.audio = self._parser.parse(output)
        except StreamParseError as e:
            logger.info("Flux {} inexploitable: {}", e.kind, e, filename=report.filename)
            report.error = e
            return

        content_type = None
        if isinstance(report.catalog, CatalogAvailable):
            content_type = report.catalog.metadata.content_type

        consistency = self._rules.evaluate(report.video, report.audio, tokens, content_type)
        if consistency.failed:
            report.verdict = Verdict.hard_fail(consistency)
            return

        expected = self._builder.build(tokens, report.video, report.audio, report.catalog)
        report.verdict = self._builder.compare(report.filename, expected, consistency.warnings)
        logger.info(
            "Verdict",
            filename=report.filename,
            verdict=report.verdict.kind.value,
            pattern=expected.is_pattern,
            degraded=report.degraded,
        )

    async def _lookup_catalog(self, report: FileReport, catalog_id: str) -> CatalogLookup:
        """Recupere la fiche catalogue, ou bascule en mode degrade."""
        try:
            metadata = await self._catalog_client.fetch(catalog_id)
            slug = self._builder.title_slug(metadata)
        except (CollaboratorError, TransliterationError) as e:
            logger.warning("Catalogue indisponible: {}", e, catalog_id=catalog_id)
            report.notices.append(f"Could not get data from catalog: {e}")
            return CatalogUnavailable(reason=str(e))

        if not slug:
            reason = "catalog title has no transliterable character"
            report.notices.append(reason)
            return CatalogUnavailable(reason=reason)
        return CatalogAvailable(metadata=metadata)

    async def _probe(self, report: FileReport) -> str:
        """Sonde le fichier ; en cas d'echec, la sortie capturee est gardee."""
        try:
            return await self._probe_runner.probe(report.path)
        except ProbeInvocationFailed as e:
            logger.warning("Sonde en echec: {}", e, filename=report.filename)
            report.notices.append(f"Probe failed: {e}")
            return e.output
