"""Shorts scraper CLI — entry-point for one-off scrapes and the API server.

Usage:
    python cli/main.py --help

Commands:
    scrape    → fetch YouTube and list the shorts it serves
    extract   → run the extractor over a saved HTML page (no network)
    serve     → run the HTTP API with uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from shorts_scraper.xxx
# import ...` works when the CLI is invoked as `python cli/main.py` from any
# working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from shorts_scraper.config import settings
from shorts_scraper.errors import ScrapeError
from shorts_scraper.scraper.extractor import extract_shorts
from shorts_scraper.scraper.models import ResultSet
from shorts_scraper.scraper.service import scrape_shorts

app = typer.Typer(
    name="shorts",
    help="YouTube shorts scraper CLI.",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""
    settings.configure_logging()


def _print_results(tag: str, result: ResultSet, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return
    typer.echo(f"[{tag}] Found {result.total} shorts")
    for r in result.records:
        typer.echo(f"  [{r.views}] {r.title}  {r.url}")


# ---------------------------------------------------------------------------
# Scrape commands
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    cookies: Optional[Path] = typer.Option(
        None,
        "--cookies",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Netscape cookies.txt file to send with the request.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON document."),
) -> None:
    """Fetch YouTube's landing page and list its shorts."""
    cookies_content = cookies.read_text(encoding="utf-8") if cookies else None

    if not as_json:
        typer.echo(f"[scrape] Fetching {settings.source_url!r} …")
    try:
        result = scrape_shorts(cookies_content)
    except ScrapeError as exc:
        typer.echo(f"[scrape] Error: {exc}", err=True)
        raise typer.Exit(1)

    _print_results("scrape", result, as_json)


@app.command("extract")
def extract(
    path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Saved HTML page."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON document."),
) -> None:
    """Extract shorts from a saved HTML page without touching the network."""
    html = path.read_text(encoding="utf-8")
    try:
        result = extract_shorts(html)
    except ScrapeError as exc:
        typer.echo(f"[extract] Error: {exc}", err=True)
        raise typer.Exit(1)

    _print_results("extract", result, as_json)


# ---------------------------------------------------------------------------
# API server
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind."),
    port: int = typer.Option(8000, help="Port to listen on."),
    reload: bool = typer.Option(False, help="Reload on source changes."),
) -> None:
    """Run the HTTP API."""
    import uvicorn  # noqa: PLC0415

    typer.echo(f"[serve] Listening on http://{host}:{port}/scrape")
    uvicorn.run("shorts_scraper.api.app:app", host=host, port=port, reload=reload)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
