"""Response schemas for the Newscheck engine and API."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ── Enums ──────────────────────────────────────────────────────────────

class VerdictCategory(str, Enum):
    SUSPICIOUS = "suspicious"
    RELIABLE = "reliable"
    INCONCLUSIVE = "inconclusive"


class ResultClass(str, Enum):
    """Display style hint for the result box (colour / border)."""

    FAKE = "fake"
    REAL = "real"
    NEUTRAL = "neutral"


# ── Engine records ─────────────────────────────────────────────────────

class KeywordScore(BaseModel):
    """Raw keyword counts for one piece of text."""

    model_config = ConfigDict(frozen=True)

    fake_score: int = Field(ge=0, description="Number of distinct suspicion phrases found.")
    real_score: int = Field(ge=0, description="Number of distinct credibility phrases found.")
    length: int = Field(ge=0, description="Length of the scored text in characters.")
    suspicion_matches: tuple[str, ...] = ()
    credibility_matches: tuple[str, ...] = ()


class Verdict(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: VerdictCategory
    headline: str = Field(description="Short human-readable label for the category.")
    detail: str = Field(description="Explanatory sentence including the faux-ML score.")
    score: int | None = Field(
        default=None,
        description="Faux-ML score quoted in the detail; None when the detail reports it as low.",
    )


# ── Presenter / API output ─────────────────────────────────────────────

class CheckResult(BaseModel):
    """What the page shows in its result box."""

    result_class: ResultClass
    title: str
    text: str
    category: VerdictCategory | None = Field(
        default=None,
        description="Verdict category; None when the input was rejected before scoring.",
    )
    score: int | None = None


class CheckResponse(CheckResult):
    """JSON body returned by ``POST /check``."""

    fake_score: int = Field(ge=0)
    real_score: int = Field(ge=0)
    suspicion_matches: list[str] = Field(default_factory=list)
    credibility_matches: list[str] = Field(default_factory=list)
    request_id: str | None = Field(default=None, description="Echo of caller's request ID.")


class ErrorResponse(BaseModel):
    error: str
    detail: str | None = None
