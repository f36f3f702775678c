"""Click CLI entry point for Transmute."""

from __future__ import annotations

import click

from transmute._version import __version__
from transmute.core.output import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="transmute")
@click.option("--verbose", "-v", is_flag=True, help="Log pipeline steps to stderr")
def cli(verbose: bool):
    """Transmute - migrate source code between languages with an LLM.

    Local post-processing formats, documents, scans and diffs the result.
    """
    configure_logging(verbose)


# Import and register subcommands
from transmute.cli.migrate_cmd import migrate  # noqa: E402
from transmute.cli.detect_cmd import detect  # noqa: E402
from transmute.cli.analyze_cmd import analyze  # noqa: E402
from transmute.cli.languages_cmd import languages  # noqa: E402
from transmute.cli.session_cmd import session  # noqa: E402

cli.add_command(migrate)
cli.add_command(detect)
cli.add_command(analyze)
cli.add_command(languages)
cli.add_command(session)


if __name__ == "__main__":
    cli()
