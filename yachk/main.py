"""
Point d'entree CLI de yachk.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import check, translit
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="yachk",
    help="Verification des noms de fichiers video transcodes",
)
container = Container()


def _log_level(settings: Settings, verbose: int, quiet: bool) -> str:
    """Niveau console effectif selon les options de verbosite."""
    if quiet:
        return "ERROR"
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return settings.log_level


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """yachk - Verification des noms de fichiers video transcodes."""
    settings = get_config()
    configure_logging(
        log_level=_log_level(settings, verbose, quiet),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(check)
app.command()(translit)


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration yachk")
    typer.echo(f"API catalogue : {'activee' if config.catalog_enabled else 'desactivee (mode degrade)'}")
    if config.catalog_api_url:
        typer.echo(f"URL catalogue : {config.catalog_api_url}")
    found = "trouve" if container.probe_runner().available else "introuvable"
    typer.echo(f"ffmpeg : {config.ffmpeg_binary} ({found})")
    typer.echo(f"Timeout sonde : {config.probe_timeout}s")
    typer.echo(f"Niveau de log : {config.log_level}")
    if config.log_file:
        typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"yachk v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    app()


if __name__ == "__main__":
    main()
