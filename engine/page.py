"""HTML rendering for the check page."""

from __future__ import annotations

import html

from schemas.response import CheckResult

_STYLE = """
    body { font-family: Arial, sans-serif; max-width: 760px; margin: 40px auto; color: #222; }
    h1 { margin-bottom: 4px; }
    .meta { color: #666; margin-top: 0; }
    textarea { width: 100%; min-height: 160px; font-size: 15px; padding: 8px; box-sizing: border-box; }
    button { margin-top: 10px; padding: 8px 18px; font-size: 15px; cursor: pointer; }
    .result { margin-top: 24px; padding: 16px; border-radius: 6px; border: 2px solid #bbb; background: #f4f4f4; }
    .result.fake { border-color: #c0392b; background: #fdecea; }
    .result.real { border-color: #27ae60; background: #eafaf1; }
    .result.neutral { border-color: #b7950b; background: #fef9e7; }
    .result h2 { margin-top: 0; }
"""


def _escape(value: str) -> str:
    return html.escape(value, quote=True)


def _render_result(result: CheckResult) -> str:
    return (
        f"<section id=\"resultBox\" class=\"result {_escape(result.result_class.value)}\">\n"
        f"    <h2 id=\"resultTitle\">{_escape(result.title)}</h2>\n"
        f"    <p id=\"resultText\">{_escape(result.text)}</p>\n"
        "  </section>"
    )


def render_page(result: CheckResult | None = None) -> str:
    """Render the full page.

    The textarea is always rendered empty, so a submitted text is cleared
    once its result is shown.
    """
    result_html = _render_result(result) if result is not None else ""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>Newscheck</title>
  <style>{_STYLE}  </style>
</head>
<body>
  <h1>Newscheck</h1>
  <p class="meta">Keyword-based news credibility demo. Not a fact checker.</p>
  <form method="post" action="/">
    <textarea id="newsInput" name="text" placeholder="Paste a news article or headline..."></textarea>
    <button type="submit">Check News</button>
  </form>
  {result_html}
</body>
</html>
"""
