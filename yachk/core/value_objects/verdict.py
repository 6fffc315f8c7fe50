"""
Objets valeur pour les constats de coherence et le verdict final.

Un Finding est le resultat d'une regle (avertissement ou echec bloquant),
ConsistencyReport les regroupe dans l'ordre d'evaluation, ExpectedName
porte le nom attendu (exact ou motif) et Verdict la conclusion pour un
fichier.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Severity(Enum):
    """Gravite d'un constat."""

    WARNING = "warning"
    FAILURE = "failure"


class RuleCode(Enum):
    """Identifiant stable de chaque regle de coherence."""

    QUALITY_TOO_HIGH = "quality_too_high"
    QUALITY_TOO_LOW = "quality_too_low"
    SUSPECT_720 = "suspect_720"
    SAR_NOT_SQUARE = "sar_not_square"
    NOT_STEREO = "not_stereo"
    EPISODE_TAG_MISSING = "episode_tag_missing"


@dataclass(frozen=True)
class Finding:
    """
    Constat produit par une regle.

    Attributs:
        code: Regle a l'origine du constat
        severity: Avertissement ou echec bloquant
        message: Description lisible
        value: Valeur fautive quand elle est utile (ex: "5.1")
    """

    code: RuleCode
    severity: Severity
    message: str
    value: Optional[str] = None

    @property
    def is_failure(self) -> bool:
        return self.severity is Severity.FAILURE


@dataclass(frozen=True)
class ConsistencyReport:
    """
    Constats ordonnes des regles de coherence.

    Contient zero ou plusieurs avertissements suivis d'au plus un echec :
    l'evaluation s'arrete au premier echec bloquant.
    """

    findings: tuple[Finding, ...] = ()

    @property
    def warnings(self) -> tuple[Finding, ...]:
        return tuple(f for f in self.findings if not f.is_failure)

    @property
    def failure(self) -> Optional[Finding]:
        for finding in self.findings:
            if finding.is_failure:
                return finding
        return None

    @property
    def failed(self) -> bool:
        return self.failure is not None


@dataclass(frozen=True)
class ExpectedName:
    """
    Nom de fichier attendu.

    En mode exact (catalogue disponible), text est le nom canonique et la
    comparaison est une egalite. En mode motif (catalogue indisponible),
    text contient des jokers "*" et pattern est l'expression reguliere
    equivalente, comparee au nom complet.

    Attributs:
        text: Nom attendu, avec "*" pour les segments inconnus en mode motif
        pattern: Expression compilee en mode motif, None en mode exact
    """

    text: str
    pattern: Optional[re.Pattern[str]] = field(default=None, compare=False)

    @property
    def is_pattern(self) -> bool:
        return self.pattern is not None

    def matches(self, filename: str) -> bool:
        """Compare le nom de fichier au nom attendu selon le mode."""
        if self.pattern is not None:
            return self.pattern.fullmatch(filename) is not None
        return filename == self.text

    @classmethod
    def from_segments(cls, segments: list[Optional[str]]) -> "ExpectedName":
        """
        Construit un nom attendu depuis des segments, None etant un joker.

        Sans joker, le nom est exact. Avec au moins un joker, le nom devient
        un motif ou chaque joker accepte n'importe quelle suite de caracteres
        et chaque segment litteral est echappe.
        """
        if all(segment is not None for segment in segments):
            return cls(text="".join(segments))
        text = "".join("*" if s is None else s for s in segments)
        regex = "".join(".*" if s is None else re.escape(s) for s in segments)
        return cls(text=text, pattern=re.compile(regex))


class VerdictKind(Enum):
    """Issue de la verification d'un fichier."""

    OK = "ok"
    OK_WITH_WARNINGS = "ok_with_warnings"
    HARD_FAIL = "hard_fail"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class Verdict:
    """
    Conclusion pour un fichier.

    Les avertissements sont conserves quel que soit le verdict, pour
    pouvoir les afficher avant un echec ou une difference de nom.

    Attributs:
        kind: Issue de la verification
        warnings: Avertissements accumules
        reason: Constat bloquant (HARD_FAIL uniquement)
        expected: Nom ou motif attendu (MISMATCH, et OK pour information)
    """

    kind: VerdictKind
    warnings: tuple[Finding, ...] = ()
    reason: Optional[Finding] = None
    expected: Optional[ExpectedName] = None

    @property
    def passed(self) -> bool:
        return self.kind in (VerdictKind.OK, VerdictKind.OK_WITH_WARNINGS)

    @classmethod
    def hard_fail(cls, report: ConsistencyReport) -> "Verdict":
        return cls(
            kind=VerdictKind.HARD_FAIL,
            warnings=report.warnings,
            reason=report.failure,
        )
