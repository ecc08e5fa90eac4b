"""Keyword scoring.

Deterministic scorer — no model, no I/O.  Each phrase contributes at most one
point however often it recurs, and phrases are matched as plain substrings, so
``exposed`` also counts inside ``overexposed``.
"""

from __future__ import annotations

from engine.keywords import CREDIBILITY_PHRASES, SUSPICION_PHRASES
from schemas.response import KeywordScore


def _utf16_length(text: str) -> int:
    return len(text.encode("utf-16-le", errors="surrogatepass")) // 2


def _matches(haystack: str, phrases: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(phrase for phrase in phrases if phrase in haystack)


def score_text(
    text: str,
    *,
    suspicion_phrases: tuple[str, ...] = SUSPICION_PHRASES,
    credibility_phrases: tuple[str, ...] = CREDIBILITY_PHRASES,
) -> KeywordScore:
    """Count the suspicion and credibility phrases present in *text*.

    Scoring
    -------
    fake_score : distinct suspicion phrases found in the lowercased text
    real_score : distinct credibility phrases found in the lowercased text
    length     : UTF-16 code units in the text as given (not lowercased), so a
                 character outside the BMP such as an emoji counts twice
    """
    text_lower = text.lower()
    suspicion = _matches(text_lower, suspicion_phrases)
    credibility = _matches(text_lower, credibility_phrases)

    return KeywordScore(
        fake_score=len(suspicion),
        real_score=len(credibility),
        length=_utf16_length(text),
        suspicion_matches=suspicion,
        credibility_matches=credibility,
    )
