"""Static keyword sets used by the scorer.

Both tuples are lowercase and disjoint.  They are read-only for the lifetime of
the process; matching is plain substring search on lowercased text.
"""

from __future__ import annotations

# ── Suspicion phrases (clickbait / sensationalism) ─────────────────────

SUSPICION_PHRASES: tuple[str, ...] = (
    "shocking",
    "you won't believe",
    "secret truth",
    "exposed",
    "must see",
    "emergency warning",
    "breaking now",
    "the liberal agenda",
)

# ── Credibility phrases (typical of verified sources) ──────────────────

CREDIBILITY_PHRASES: tuple[str, ...] = (
    "according to cdc",
    "white house report",
    "official statement",
    "peer-reviewed study",
    "federal reserve",
    "statistical data",
)


def _check_keyword_sets() -> None:
    for phrase in SUSPICION_PHRASES + CREDIBILITY_PHRASES:
        if phrase != phrase.lower():
            raise ValueError(f"Keyword phrase must be lowercase: {phrase!r}")
    overlap = set(SUSPICION_PHRASES) & set(CREDIBILITY_PHRASES)
    if overlap:
        raise ValueError(f"Keyword sets overlap: {sorted(overlap)}")


_check_keyword_sets()
