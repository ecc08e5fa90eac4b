"""Presenter — turns raw user input into a displayable check result."""

from __future__ import annotations

import logging
import re

from engine.errors import EmptyInputError
from engine.pipeline import analyze
from schemas.response import CheckResponse, CheckResult, ResultClass, Verdict, VerdictCategory

logger = logging.getLogger("newscheck.presenter")

_RESULT_CLASSES: dict[VerdictCategory, ResultClass] = {
    VerdictCategory.SUSPICIOUS: ResultClass.FAKE,
    VerdictCategory.RELIABLE: ResultClass.REAL,
    VerdictCategory.INCONCLUSIVE: ResultClass.NEUTRAL,
}

# Browser trim set: tab, VT, FF, space, NBSP, BOM, Unicode Zs and line terminators.
# Unlike str.strip this keeps \x1c-\x1f and \x85 but drops U+FEFF.
_TRIM_CHARS = "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_TRIM_RE = re.compile(rf"\A[{_TRIM_CHARS}]+|[{_TRIM_CHARS}]+\Z")


def prepare_input(raw: str) -> str:
    """Trim *raw* and reject it when nothing is left."""
    text = _TRIM_RE.sub("", raw)
    if not text:
        raise EmptyInputError()
    return text


def present(verdict: Verdict) -> CheckResult:
    return CheckResult(
        result_class=_RESULT_CLASSES[verdict.category],
        title=verdict.headline,
        text=verdict.detail,
        category=verdict.category,
        score=verdict.score,
    )


def empty_input_result() -> CheckResult:
    """The neutral panel shown instead of a verdict for empty input."""
    err = EmptyInputError()
    return CheckResult(result_class=ResultClass.NEUTRAL, title=err.title, text=err.message)


def check_text(raw: str, *, request_id: str | None = None) -> CheckResponse:
    """Validate, classify and present *raw*.

    Raises
    ------
    EmptyInputError
        If *raw* is empty or whitespace only.
    """
    text = prepare_input(raw)
    score, verdict = analyze(text)

    logger.info(
        "Checked %d chars — %s (fake=%d real=%d)",
        score.length,
        verdict.category.value,
        score.fake_score,
        score.real_score,
    )

    return CheckResponse(
        **present(verdict).model_dump(),
        fake_score=score.fake_score,
        real_score=score.real_score,
        suspicion_matches=list(score.suspicion_matches),
        credibility_matches=list(score.credibility_matches),
        request_id=request_id,
    )
