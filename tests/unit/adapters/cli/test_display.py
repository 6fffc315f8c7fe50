"""
Tests unitaires pour l'affichage des rapports.

La sortie Rich est capturee dans un StringIO, sans couleur.
"""

import io

import pytest
from rich.console import Console

from yachk.adapters.cli.display import display_report, display_summary, format_finding
from yachk.core.exceptions import MultipleStreamsFound, NoStreamFound
from yachk.core.value_objects import (
    ExpectedName,
    FileReport,
    Finding,
    NamingTokens,
    RuleCode,
    Severity,
    Verdict,
    VerdictKind,
)


MATRIX_NAME = "Matrica_coid12345_1999__q0_r1920x1080p23976_ar2.mp4"

TOO_HIGH = Finding(
    code=RuleCode.QUALITY_TOO_HIGH,
    severity=Severity.WARNING,
    message="quality tier may be too high; expected > 0 for sub-HD",
    value="0",
)

NOT_STEREO = Finding(
    code=RuleCode.NOT_STEREO,
    severity=Severity.FAILURE,
    message="audio track is not stereo",
    value="5.1",
)


@pytest.fixture
def out() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, highlight=False)


def _text(console: Console) -> str:
    return console.file.getvalue()


def _report(filename: str = MATRIX_NAME, **kwargs) -> FileReport:
    tokens = NamingTokens(season_episode="", catalog_id="12345", quality="0")
    return FileReport(path=f"/films/{filename}", filename=filename, tokens=tokens, **kwargs)


class TestFormatFinding:
    """Tests pour format_finding()."""

    def test_failure_shows_value(self) -> None:
        assert format_finding(NOT_STEREO) == "audio track is not stereo (5.1)"

    def test_warning_is_message_only(self) -> None:
        assert format_finding(TOO_HIGH) == TOO_HIGH.message


class TestDisplayReport:
    """Tests pour display_report()."""

    def test_bad_name(self, out) -> None:
        report = FileReport(path="The.Matrix.mp4", filename="The.Matrix.mp4")

        display_report(report, out)

        text = _text(out)
        assert "INPUT:  The.Matrix.mp4" in text
        assert "Filename does not follow required id/quality convention." in text
        assert "MUST BE: .*coid(\\d+)_q(\\d+).*" in text

    def test_exact_match(self, out) -> None:
        verdict = Verdict(kind=VerdictKind.OK, expected=ExpectedName(text=MATRIX_NAME))

        display_report(_report(verdict=verdict), out)

        text = _text(out)
        assert f"INPUT:  {MATRIX_NAME}" in text
        assert "Filename is correct." in text
        assert "OUTPUT:" not in text

    def test_pattern_match(self, out) -> None:
        expected = ExpectedName.from_segments([None, "_coid12345_", None, ".mp4"])
        verdict = Verdict(kind=VerdictKind.OK, expected=expected)

        display_report(_report(verdict=verdict), out)

        assert "Video and audio parameters in input filename are correct." in _text(out)

    def test_mismatch_shows_expected_name(self, out) -> None:
        verdict = Verdict(
            kind=VerdictKind.MISMATCH,
            warnings=(TOO_HIGH,),
            expected=ExpectedName(text=MATRIX_NAME),
        )

        display_report(_report("film_coid12345_q0.mp4", verdict=verdict), out)

        text = _text(out)
        assert TOO_HIGH.message in text
        assert f"OUTPUT: {MATRIX_NAME}" in text
        assert "Filename is wrong." in text
        assert text.index(TOO_HIGH.message) < text.index("OUTPUT:")

    def test_pattern_mismatch(self, out) -> None:
        expected = ExpectedName.from_segments([None, "_coid12345_", None, "__q0.mp4"])
        verdict = Verdict(kind=VerdictKind.MISMATCH, expected=expected)
        report = _report("film_coid12345_q0.mp4", verdict=verdict)
        report.notices.append("Could not get data from catalog: Catalog returned HTTP 500")

        display_report(report, out)

        text = _text(out)
        assert "Could not get data from catalog: Catalog returned HTTP 500" in text
        assert "OUTPUT: *_coid12345_*__q0.mp4" in text
        assert "Video or audio parameters in input filename are wrong." in text

    def test_hard_fail(self, out) -> None:
        verdict = Verdict(kind=VerdictKind.HARD_FAIL, reason=NOT_STEREO)

        display_report(_report(verdict=verdict), out)

        text = _text(out)
        assert "audio track is not stereo (5.1)" in text
        assert "OUTPUT:" not in text

    def test_multiple_streams_lists_lines(self, out) -> None:
        lines = [
            "Stream #0:1(rus): Audio: aac (LC), 48000 Hz, stereo [SAR 1:1]",
            "Stream #0:2(eng): Audio: aac (LC), 48000 Hz, stereo",
        ]
        report = _report(error=MultipleStreamsFound("audio", lines))

        display_report(report, out)

        text = _text(out)
        assert "More than one audio stream." in text
        assert lines[0] in text
        assert lines[1] in text

    def test_other_error(self, out) -> None:
        display_report(_report(error=NoStreamFound("video")), out)

        assert "No video stream found." in _text(out)


class TestDisplaySummary:
    """Tests pour display_summary()."""

    def test_counts(self, out) -> None:
        ok = _report(verdict=Verdict(kind=VerdictKind.OK, expected=ExpectedName(text=MATRIX_NAME)))
        bad = FileReport(path="x.mp4", filename="x.mp4")

        display_summary([ok, bad, ok], out)

        assert "2 passed, 1 failed" in _text(out)
