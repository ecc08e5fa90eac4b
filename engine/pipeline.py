"""Pipeline orchestrator — text → keyword score → verdict."""

from __future__ import annotations

import logging

from engine.scorer import score_text
from engine.verdict import determine_verdict
from schemas.response import KeywordScore, Verdict

logger = logging.getLogger("newscheck.pipeline")


def analyze(text: str) -> tuple[KeywordScore, Verdict]:
    """Score *text* and return both the raw counts and the verdict."""
    score = score_text(text)
    verdict = determine_verdict(score)
    logger.debug(
        "Scored %d chars — fake=%d real=%d → %s",
        score.length,
        score.fake_score,
        score.real_score,
        verdict.category.value,
    )
    return score, verdict


def classify(text: str) -> Verdict:
    """Classify *text* as suspicious, reliable or inconclusive.

    Total over all strings, including the empty string (which is
    inconclusive).  Input validation is the caller's job.
    """
    _, verdict = analyze(text)
    return verdict
