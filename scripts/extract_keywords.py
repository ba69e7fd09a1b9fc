#!/usr/bin/env python3
"""
Extract ranked keywords from a job description.

Usage:
    python scripts/extract_keywords.py data/jobs/MLEng_AcmeCorp_10130042.md
    python scripts/extract_keywords.py posting.txt --json
    python scripts/extract_keywords.py posting.txt --log-dir outs/logs/keywords
    python scripts/extract_keywords.py posting.txt -v            # Debug detail, log under outs/logs/
"""

import json
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from atslens.contexts.intake import extract_keywords
from atslens.contexts.intake.logger import setup_intake_logger
from atslens.utils.logger import session_log_dir, setup_console_logger

app = typer.Typer(help="Extract ranked keywords from a job description.", add_completion=False)


@app.command()
def main(
    job_file: Annotated[Path, typer.Argument(help="Job description text or markdown file")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the full KeywordSet as JSON")] = False,
    log_dir: Annotated[
        Optional[Path], typer.Option("--log-dir", help="Write a detailed log to this directory")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log DEBUG detail to the console")] = False,
):
    """Print critical and optional keywords for a job description."""
    if not job_file.exists():
        typer.echo(f"ERROR: Job file not found: {job_file}", err=True)
        raise typer.Exit(1)

    if log_dir or verbose:
        setup_intake_logger(log_dir or session_log_dir("keywords"), job_path=job_file, verbose=verbose)
    else:
        setup_console_logger()

    keywords = extract_keywords(job_file.read_text(encoding="utf-8"))

    if as_json:
        typer.echo(json.dumps(keywords.to_dict(), indent=2))
        return

    typer.echo(f"\n=== Critical ({len(keywords.critical)}) ===")
    for rank, keyword in enumerate(keywords.critical, start=1):
        typer.echo(f"  {rank:>2}. {keyword}")

    typer.echo(f"\n=== Optional ({len(keywords.optional)}) ===")
    for rank, keyword in enumerate(keywords.optional, start=len(keywords.critical) + 1):
        typer.echo(f"  {rank:>2}. {keyword}")

    typer.echo(f"\n{len(keywords.all)} keywords ranked in total")


if __name__ == "__main__":
    app()
