"""
Commandes CLI de verification des noms de fichiers (check, translit).
"""

import asyncio
from typing import Annotated

import typer

from yachk.adapters.cli.display import console, display_report, display_summary
from yachk.adapters.cli.helpers import suppress_loguru, with_container
from yachk.core.value_objects.report import FileReport
from yachk.services.transliteration import transliterate


def check(
    files: Annotated[
        list[str],
        typer.Argument(help="Fichiers video a verifier", show_default=False),
    ],
    pause: Annotated[
        bool,
        typer.Option("--pause", help="Attendre Entree avant de quitter"),
    ] = False,
) -> None:
    """Verifie que le nom de chaque fichier suit la convention de nommage."""
    reports = asyncio.run(_check_async(files))

    if pause:
        typer.prompt("Press 'Enter' to continue...", default="", show_default=False)

    if not all(report.passed for report in reports):
        raise typer.Exit(code=1)


@with_container()
async def _check_async(container, files: list[str]) -> list[FileReport]:
    """Implementation async de la verification, un fichier apres l'autre."""
    checker = container.checker()

    reports: list[FileReport] = []
    async for report in checker.check_files(files):
        with suppress_loguru():
            display_report(report)
        reports.append(report)

    if len(reports) > 1:
        display_summary(reports)
    return reports


def translit(
    text: Annotated[str, typer.Argument(help="Titre a translitterer")],
) -> None:
    """Affiche le slug de nom de fichier d'un titre."""
    slug = transliterate(text)
    if not slug:
        console.print("[yellow]Aucun caractere translitterable.[/yellow]")
        raise typer.Exit(code=1)
    typer.echo(slug)
