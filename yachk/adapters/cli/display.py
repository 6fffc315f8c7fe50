"""
Affichage Rich des rapports de verification.

Un bloc par fichier :
    INPUT:  <nom>
    <degradations en jaune>
    <avertissements en jaune>
    <echec / erreur en rouge, ou nom attendu et conclusion>
"""

from rich.console import Console
from rich.markup import escape

from yachk.core.exceptions import MultipleStreamsFound
from yachk.core.value_objects.report import FileReport, ReportStatus
from yachk.core.value_objects.verdict import Finding, VerdictKind
from yachk.services.name_tokens import CONVENTION_HINT


# Console globale pour tous les affichages
console = Console(highlight=False)


def format_finding(finding: Finding) -> str:
    """Message d'un constat, avec la valeur fautive si elle est utile."""
    if finding.value is not None and finding.is_failure:
        return f"{finding.message} ({finding.value})"
    return finding.message


def _display_error(report: FileReport, out: Console) -> None:
    error = report.error
    if isinstance(error, MultipleStreamsFound):
        out.print(f"[bold red]More than one {error.kind} stream.[/bold red]")
        for line in error.lines:
            out.print(escape(line.strip()))
    else:
        out.print(f"[bold red]{escape(str(error))}[/bold red]")


def _display_verdict(report: FileReport, out: Console) -> None:
    verdict = report.verdict
    for warning in verdict.warnings:
        out.print(f"[bold yellow]{escape(format_finding(warning))}[/bold yellow]")

    if verdict.kind is VerdictKind.HARD_FAIL:
        out.print(f"[bold red]{escape(format_finding(verdict.reason))}[/bold red]")
        return

    expected = verdict.expected
    if verdict.kind is VerdictKind.MISMATCH:
        out.print(f"OUTPUT: {escape(expected.text)}")
        if expected.is_pattern:
            out.print("[bold red]Video or audio parameters in input filename are wrong.[/bold red]")
        else:
            out.print("[bold red]Filename is wrong.[/bold red]")
        return

    if expected.is_pattern:
        out.print("[bold green]Video and audio parameters in input filename are correct.[/bold green]")
    else:
        out.print("[bold green]Filename is correct.[/bold green]")


def display_report(report: FileReport, out: Console = console) -> None:
    """
    Affiche le rapport d'un fichier.

    Args:
        report: Rapport produit par FileNameChecker
        out: Console de sortie (console globale par defaut)
    """
    out.print(f"INPUT:  {escape(report.filename)}")

    if report.status is ReportStatus.BAD_NAME:
        out.print("[bold red]Filename does not follow required id/quality convention.[/bold red]")
        out.print(f"MUST BE: {escape(CONVENTION_HINT)}")
        out.print()
        return

    for notice in report.notices:
        out.print(f"[bold yellow]{escape(notice)}[/bold yellow]")

    if report.status is ReportStatus.ERROR:
        _display_error(report, out)
    else:
        _display_verdict(report, out)
    out.print()


def display_summary(reports: list[FileReport], out: Console = console) -> None:
    """Affiche le decompte final quand plusieurs fichiers ont ete verifies."""
    passed = sum(1 for report in reports if report.passed)
    failed = len(reports) - passed
    style = "green" if failed == 0 else "red"
    out.print(f"[bold {style}]{passed} passed, {failed} failed[/bold {style}]")
