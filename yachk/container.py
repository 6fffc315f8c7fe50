"""
Container d'injection de dependances via dependency-injector.

Fournit la configuration, les collaborateurs externes (ffmpeg, catalogue)
et les services de verification a l'interface CLI.
"""

from dependency_injector import containers, providers

from .adapters.api.catalog_client import CatalogClient
from .adapters.probe.ffmpeg_runner import FFmpegProbeRunner
from .config import Settings
from .services.canonical_name import CanonicalNameBuilder
from .services.checker import FileNameChecker
from .services.consistency import ConsistencyRules
from .services.name_tokens import NameTokenExtractor
from .services.stream_parser import StreamDescriptionParser


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        checker = container.checker()
        async for report in checker.check_files(paths):
            ...
        await container.catalog_client().close()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    probe_runner = providers.Singleton(
        FFmpegProbeRunner,
        binary=config.provided.ffmpeg_binary,
        timeout=config.provided.probe_timeout,
    )

    # Si l'URL ou le client id manquent, fetch() leve CredentialsMissing
    # et le checker passe en mode degrade
    catalog_client = providers.Singleton(
        CatalogClient,
        api_url=config.provided.catalog_api_url,
        client_id=config.provided.catalog_client_id,
        timeout=config.provided.catalog_timeout,
        max_attempts=config.provided.catalog_max_attempts,
    )

    # Services du domaine (stateless - Singletons)
    name_token_extractor = providers.Singleton(NameTokenExtractor)
    stream_parser = providers.Singleton(StreamDescriptionParser)
    consistency_rules = providers.Singleton(ConsistencyRules)
    canonical_name_builder = providers.Singleton(CanonicalNameBuilder)

    # Orchestrateur - Factory, nouvelle instance par commande
    checker = providers.Factory(
        FileNameChecker,
        probe_runner=probe_runner,
        catalog_client=catalog_client,
        extractor=name_token_extractor,
        parser=stream_parser,
        rules=consistency_rules,
        builder=canonical_name_builder,
    )
