"""transmute session command: interactive migration workspace."""

from __future__ import annotations

import asyncio
import shlex
from pathlib import Path

import click
from rich.markup import escape
from rich.prompt import Prompt

from transmute.analysis.detector import detect_language
from transmute.core.config import load_settings, parse_setting_value, update_settings
from transmute.core.errors import MigrationError, TransmuteError
from transmute.core.languages import resolve_language
from transmute.core.models import MigrationSettings
from transmute.core.output import (
    console,
    get_progress,
    print_history,
    print_migration_result,
    print_notification,
    print_settings,
)
from transmute.generation.client import GenerationClient
from transmute.migration.history import MigrationHistory
from transmute.migration.orchestrator import MigrationOrchestrator

HELP_TEXT = """\
  migrate FILE TO [FROM]   migrate FILE (FROM is auto-detected when omitted)
  detect FILE              guess the language of FILE
  history                  list this session's migrations, newest first
  settings                 show current settings
  set KEY VALUE            change a setting (e.g. set ai_config.temperature 0.2)
  export PATH              write the history to PATH as JSON
  help                     show this help
  quit                     leave the session
"""


class Session:
    """Holds settings and history for one interactive session.

    Settings are replaced, never mutated; each migration reads the value
    current when it starts.
    """

    def __init__(self, settings: MigrationSettings, client: GenerationClient):
        self.settings = settings
        self.client = client
        self.history = MigrationHistory()
        self.orchestrator = MigrationOrchestrator(client, history=self.history, notify=print_notification)
        # One loop for the whole session: the SDK client pools connections per loop.
        self._loop = asyncio.new_event_loop()

    def close(self) -> None:
        if self._loop.is_closed():
            return
        self._loop.run_until_complete(self.client.aclose())
        self._loop.close()

    def handle(self, line: str) -> bool:
        """Run one command line. Returns False when the session should end."""
        try:
            parts = shlex.split(line)
        except ValueError as e:
            console.print(f"  [red]{escape(str(e))}[/red]")
            return True
        if not parts:
            return True

        command, args = parts[0].lower(), parts[1:]
        if command in ("quit", "exit"):
            return False

        handler = getattr(self, f"cmd_{command}", None)
        if handler is None:
            console.print(f"  [red]Unknown command '{escape(command)}'. Type 'help'.[/red]")
            return True

        try:
            handler(args)
        except (TransmuteError, OSError, KeyError) as e:
            console.print(f"  [red]{escape(str(e))}[/red]")
        return True

    def cmd_help(self, args: list[str]) -> None:
        console.print(HELP_TEXT)

    def cmd_migrate(self, args: list[str]) -> None:
        if len(args) < 2:
            console.print("  Usage: migrate FILE TO [FROM]")
            return
        source = Path(args[0])
        code = source.read_text(errors="ignore")
        to_lang = resolve_language(args[1])
        from_lang = resolve_language(args[2]) if len(args) > 2 else detect_language(code)
        settings = self.settings

        task = self._loop.create_task(self.orchestrator.run_migration(code, from_lang, to_lang, settings))
        try:
            with get_progress() as progress:
                progress.add_task(f"Migrating {source.name} from {from_lang} to {to_lang}...", total=None)
                result = self._loop.run_until_complete(task)
        except MigrationError:
            # Already reported through the notification callback.
            return
        except KeyboardInterrupt:
            self._abandon(task, settings)
            return

        print_migration_result(result, settings)

    def _abandon(self, task: asyncio.Task, settings: MigrationSettings) -> None:
        """Cancel an interrupted run and let it unwind on the session loop."""
        if self.orchestrator.is_running:
            # no-op once the run is already in history
            self.orchestrator.cancel()
        else:
            task.cancel()
        try:
            result = self._loop.run_until_complete(task)
        except (MigrationError, asyncio.CancelledError):
            console.print("  [yellow]Migration abandoned.[/yellow]")
            return
        print_migration_result(result, settings)

    def cmd_detect(self, args: list[str]) -> None:
        if not args:
            console.print("  Usage: detect FILE")
            return
        code = Path(args[0]).read_text(errors="ignore")
        console.print(f"  Detected: [bold]{detect_language(code)}[/bold]")

    def cmd_history(self, args: list[str]) -> None:
        print_history(self.history.entries)
        if len(self.history):
            console.print(f"  Total estimated cost: ${self.history.total_cost():.4f}")

    def cmd_settings(self, args: list[str]) -> None:
        print_settings(self.settings)

    def cmd_set(self, args: list[str]) -> None:
        if len(args) != 2:
            console.print("  Usage: set KEY VALUE")
            return
        key, raw = args
        self.settings = update_settings(self.settings, **{key: parse_setting_value(key, raw)})
        console.print(f"  [green]{escape(key)} updated.[/green]")

    def cmd_export(self, args: list[str]) -> None:
        if not args:
            console.print("  Usage: export PATH")
            return
        path = self.history.export(Path(args[0]))
        console.print(f"  [dim]History written to {path}[/dim]")


@click.command()
def session():
    """Start an interactive session that keeps migration history."""
    settings = load_settings(Path.cwd())
    client = GenerationClient.from_env(settings.ai_config)
    current = Session(settings, client)

    console.print("\n  [bold]Transmute session[/bold]. Type 'help' for commands.\n")
    if not client.is_configured:
        console.print("  [yellow]No API key found; migrations will fail until one is set.[/yellow]\n")

    try:
        while True:
            try:
                line = Prompt.ask("[cyan]transmute[/cyan]", console=console)
            except (EOFError, KeyboardInterrupt):
                break
            if not current.handle(line):
                break
    finally:
        current.close()

    console.print("\n  Session ended.\n")
