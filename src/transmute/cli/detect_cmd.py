"""transmute detect command."""

from __future__ import annotations

from pathlib import Path

import click

from transmute.analysis.detector import detect_language, score_languages
from transmute.core.output import console


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--scores", is_flag=True, help="Show the keyword score for every candidate")
def detect(source: Path, scores: bool):
    """Guess the language of SOURCE from keyword markers.

    The guess is advisory; pass --from to `transmute migrate` to override it.
    """
    code = source.read_text(errors="ignore")
    lang = detect_language(code)
    console.print(f"\n  Detected: [bold]{lang}[/bold]\n")

    if scores:
        for candidate, score in score_languages(code).items():
            marker = "[green]<-[/green]" if candidate == lang else ""
            console.print(f"  {candidate:<12} {score} {marker}")
        console.print()
