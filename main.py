"""Newscheck — keyword-based news credibility demo.

FastAPI application entry-point.
Serves the check page and a JSON endpoint around the same classifier.
"""

from __future__ import annotations

import logging
import secrets
import sys
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Form, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from config import settings
from engine.errors import InvalidInputError
from engine.keywords import CREDIBILITY_PHRASES, SUSPICION_PHRASES
from engine.page import render_page
from engine.presenter import check_text, empty_input_result
from schemas.request import CheckRequest
from schemas.response import CheckResponse, ErrorResponse

VERSION = "0.1.0"

# ── Logging ────────────────────────────────────────────────────────────

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(name)-30s | %(levelname)-7s | %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("newscheck")


# ── Internal-token auth dependency ─────────────────────────────────────

async def verify_internal_token(
    x_internal_token: str | None = Header(default=None),
) -> None:
    """Reject requests that don't carry the shared internal token.

    Skipped when ``INTERNAL_TOKEN`` is not configured (dev mode).
    """
    expected = settings.internal_token
    if not expected:
        return
    if not x_internal_token or not secrets.compare_digest(x_internal_token, expected):
        raise HTTPException(status_code=401, detail="Invalid or missing internal token.")


# ── Lifespan ───────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):  # noqa: ARG001
    logger.info(
        "Newscheck starting — %d suspicion / %d credibility phrases, auth=%s",
        len(SUSPICION_PHRASES),
        len(CREDIBILITY_PHRASES),
        "enabled" if settings.internal_token else "disabled (dev)",
    )
    yield
    logger.info("Newscheck shutting down.")


# ── App ────────────────────────────────────────────────────────────────

app = FastAPI(
    title="Newscheck",
    description="Keyword-based news credibility demo — flags clickbait and official-source phrasing.",
    version=VERSION,
    lifespan=lifespan,
)

_origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Routes ─────────────────────────────────────────────────────────────

@app.get("/health")
async def health():
    return {
        "status": "ok",
        "engine": "newscheck",
        "version": VERSION,
    }


@app.get("/", response_class=HTMLResponse)
async def page() -> str:
    return render_page()


@app.post("/", response_class=HTMLResponse)
async def submit_page(text: str = Form(default="")) -> str:
    try:
        result = check_text(text)
    except InvalidInputError:
        return render_page(empty_input_result())
    return render_page(result)


@app.post(
    "/check",
    response_model=CheckResponse,
    responses={401: {"model": ErrorResponse}, 422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Check news text",
    description="Classifies the text as suspicious, reliable or inconclusive from fixed keyword lists.",
    dependencies=[Depends(verify_internal_token)],
)
async def check(payload: CheckRequest) -> CheckResponse:
    try:
        return check_text(payload.text, request_id=payload.request_id)
    except InvalidInputError as exc:
        raise HTTPException(
            status_code=422,
            detail=ErrorResponse(error=exc.title, detail=exc.message).model_dump(),
        ) from exc
    except Exception as exc:
        logger.exception("Check failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


# ── Dev runner ─────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        reload=True,
    )
