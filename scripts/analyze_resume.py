#!/usr/bin/env python3
"""
Analyze a resume PDF for layout risks, keyword coverage, and next steps.

Loads the PDF, reports layout signals and the layout sub-score, scores keyword
coverage when a job description is given, and prints prioritized guidance.

Examples:\n

    analyze_resume.py resume.pdf                               # Layout only

    analyze_resume.py resume.pdf --job posting.md              # Layout + keyword coverage

    analyze_resume.py resume.pdf --job posting.md --json       # Machine-readable output

    analyze_resume.py resume.pdf --parse-health 55             # Use an externally computed score
"""

import json
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from atslens.contexts.guidance import GuidanceInput, GuidancePriority, generate_guidance
from atslens.contexts.intake import extract_keywords
from atslens.contexts.parsing import PdfParseError, calculate_layout_score, load_pdf
from atslens.contexts.parsing.logger import setup_parsing_logger
from atslens.contexts.targeting import calculate_coverage
from atslens.utils.logger import session_log_dir, setup_console_logger

PRIORITY_COLORS = {
    GuidancePriority.CRITICAL: typer.colors.RED,
    GuidancePriority.IMPORTANT: typer.colors.YELLOW,
    GuidancePriority.SUGGESTED: typer.colors.CYAN,
}

app = typer.Typer(
    help="Analyze a resume PDF for ATS layout risks and keyword coverage.", add_completion=False
)


@app.command()
def main(
    resume_pdf: Annotated[Path, typer.Argument(help="Resume PDF to analyze")],
    job: Annotated[
        Optional[Path], typer.Option("--job", "-j", help="Job description file to match against")
    ] = None,
    parse_health: Annotated[
        Optional[int],
        typer.Option("--parse-health", min=0, max=100, help="Parse health score (default: layout sub-score)"),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print results as JSON")] = False,
    log_dir: Annotated[
        Optional[Path], typer.Option("--log-dir", help="Write a detailed log to this directory")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log DEBUG detail to the console")] = False,
):
    """Load a resume, analyze its layout, and print guidance."""
    if log_dir or verbose:
        setup_parsing_logger(log_dir or session_log_dir("analyze"), pdf_path=resume_pdf, verbose=verbose)
    else:
        setup_console_logger()

    try:
        document = load_pdf(resume_pdf)
    except FileNotFoundError:
        typer.echo(f"ERROR: Resume not found: {resume_pdf}", err=True)
        raise typer.Exit(1)
    except PdfParseError as e:
        typer.echo(f"ERROR [{e.code}]: {e.message}", err=True)
        raise typer.Exit(1)

    signals = document.layout_signals
    layout_score = calculate_layout_score(signals)

    coverage = None
    if job is not None:
        if not job.exists():
            typer.echo(f"ERROR: Job file not found: {job}", err=True)
            raise typer.Exit(1)
        keywords = extract_keywords(job.read_text(encoding="utf-8"))
        coverage = calculate_coverage(document.extracted_text, keywords)

    guidance = generate_guidance(
        GuidanceInput(
            parse_health=parse_health if parse_health is not None else layout_score,
            keyword_coverage=coverage.score if coverage else None,
            has_job_description=job is not None,
        )
    )

    if as_json:
        result = {
            "file_name": document.file_name,
            "page_count": document.page_count,
            "char_count": document.char_count,
            "warnings": [w.message for w in document.warnings],
            "layout_signals": signals.to_dict(),
            "layout_score": layout_score,
            "coverage": coverage.to_dict() if coverage else None,
            "guidance": [item.to_dict() for item in guidance],
        }
        typer.echo(json.dumps(result, indent=2))
        return

    typer.echo(f"Loaded {document.file_name}: {document.page_count} page(s), {document.char_count} chars")
    for warning in document.warnings:
        typer.echo(f"  ! {warning.message}")

    typer.echo("\n=== Layout ===")
    typer.echo(f"  Columns:       {signals.estimated_columns}")
    typer.echo(f"  Merge risk:    {signals.column_merge_risk.value}")
    typer.echo(f"  Header risk:   {signals.header_contact_risk.value}")
    typer.echo(f"  Text density:  {signals.text_density.value}")
    typer.echo(f"  Layout score:  {layout_score}/100")

    if coverage:
        typer.echo("\n=== Keyword Coverage ===")
        typer.echo(f"  Score: {coverage.score}%")
        typer.echo(f"  Found ({len(coverage.found_keywords)}): {', '.join(coverage.found_keywords) or 'None'}")
        typer.echo(
            f"  Missing ({len(coverage.missing_keywords)}): {', '.join(coverage.missing_keywords) or 'None'}"
        )

    typer.echo("\n=== Guidance ===")
    for item in guidance:
        typer.secho(f"  [{item.priority.value}] {item.title}", fg=PRIORITY_COLORS[item.priority])
        typer.echo(f"      {item.description}")


if __name__ == "__main__":
    app()
