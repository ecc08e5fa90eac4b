"""Verdict categorisation."""

from __future__ import annotations

from schemas.response import KeywordScore, Verdict, VerdictCategory

SUSPICION_FLOOR = 2
LONG_TEXT_LENGTH = 100

SUSPICIOUS_HEADLINE = "❌ HIGHLY SUSPICIOUS"
RELIABLE_HEADLINE = "✅ MODERATE RELIABILITY"
INCONCLUSIVE_HEADLINE = "⚠ ANALYSIS INCONCLUSIVE"


def determine_verdict(score: KeywordScore) -> Verdict:
    """Map keyword counts to a verdict, first matching rule wins.

    fake > real and fake >= 2        → suspicious   (detail quotes fake_score)
    real > fake or length > 100      → reliable     (detail quotes real_score)
    otherwise                        → inconclusive (detail says "Low")

    Equal non-zero counts on short text fall through to inconclusive, and
    long text with equal counts (0/0 included) is reliable on length alone.
    """
    if score.fake_score > score.real_score and score.fake_score >= SUSPICION_FLOOR:
        return Verdict(
            category=VerdictCategory.SUSPICIOUS,
            headline=SUSPICIOUS_HEADLINE,
            detail=(
                "This text contains sensational and common clickbait phrases. "
                "*Verify the source and claims immediately.* "
                f"(Faux-ML Score: {score.fake_score})"
            ),
            score=score.fake_score,
        )
    elif score.real_score > score.fake_score or score.length > LONG_TEXT_LENGTH:
        return Verdict(
            category=VerdictCategory.RELIABLE,
            headline=RELIABLE_HEADLINE,
            detail=(
                "The language seems non-sensational and may contain references to official bodies. "
                "*Always check the source and citations.* "
                f"(Faux-ML Score: {score.real_score})"
            ),
            score=score.real_score,
        )
    else:
        return Verdict(
            category=VerdictCategory.INCONCLUSIVE,
            headline=INCONCLUSIVE_HEADLINE,
            detail=(
                "The text is too short, generic, or contains a mix of keywords. "
                "*Further analysis is required.* "
                "(Faux-ML Score: Low)"
            ),
        )
