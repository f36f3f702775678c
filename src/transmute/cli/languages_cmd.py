"""transmute languages command."""

from __future__ import annotations

import click

from transmute.core.languages import EXAMPLE_SNIPPETS, LANGUAGES
from transmute.core.output import console


@click.command()
def languages():
    """List the supported source and target languages."""
    console.print(f"\n  [bold]{len(LANGUAGES)} supported languages[/bold]\n")
    for lang in LANGUAGES:
        example = "  [dim](example available)[/dim]" if lang in EXAMPLE_SNIPPETS else ""
        console.print(f"  {lang}{example}")
    console.print()
