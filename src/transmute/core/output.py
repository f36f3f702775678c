"""Rich terminal formatting for Transmute output."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from transmute.core.models import (
    CodeAnalysisReport,
    MigrationHistoryEntry,
    MigrationResult,
    MigrationSettings,
    MigrationStatus,
    Notification,
    Severity,
)

console = Console()
error_console = Console(stderr=True)

DEFAULT_COMPLEXITY_THRESHOLD = 5

SEVERITY_COLORS = {
    Severity.CRITICAL: "red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "blue",
    Severity.INFO: "dim",
}

NOTIFICATION_STYLES = {
    "success": ("green", "✅"),
    "info": ("blue", "ℹ️"),
    "warning": ("yellow", "⚠️"),
    "error": ("red", "❌"),
}

STATUS_COLORS = {
    MigrationStatus.SUCCESS: "green",
    MigrationStatus.PARTIAL: "yellow",
    MigrationStatus.FAILED: "red",
}

# Lexer names for rich.syntax where the catalog label differs.
LEXERS = {
    "C#": "csharp",
    "C++": "cpp",
    "F#": "fsharp",
    "Objective-C": "objective-c",
    "React": "jsx",
    "Next.js": "jsx",
    "NestJS": "typescript",
    "Django": "python",
    "Flask": "python",
    "FastAPI": "python",
    "Spring Boot": "java",
    "Tailwind CSS": "css",
    "PostgreSQL": "postgresql",
    "MySQL": "mysql",
    "Kubernetes YAML": "yaml",
    "Docker Compose": "yaml",
    "Ansible": "yaml",
    "AWS CloudFormation": "yaml",
    "Serverless Framework": "yaml",
    "Terraform": "terraform",
}


def lexer_for(lang: str) -> str:
    return LEXERS.get(lang, lang.lower())


def configure_logging(verbose: bool = False) -> None:
    """Send ``transmute.*`` log records to stderr through rich."""
    logger = logging.getLogger("transmute")
    logger.handlers.clear()
    handler = RichHandler(console=error_console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def print_notification(notification: Notification) -> None:
    color, icon = NOTIFICATION_STYLES.get(notification.level, ("white", "●"))
    console.print(f"  [{color}]{icon} {escape(notification.message)}[/{color}]")


def print_code(code: str, lang: str, title: str = "Output") -> None:
    console.print(Panel(
        Syntax(code, lexer_for(lang), line_numbers=True, word_wrap=True),
        title=f"[bold]{title} ({lang})[/bold]",
        border_style="cyan",
        padding=(0, 1),
    ))


def print_analysis_report(
    report: CodeAnalysisReport,
    title: str = "Analysis Report",
    complexity_threshold: int | None = None,
) -> None:
    """Print the report card for one code sample."""
    threshold = complexity_threshold or DEFAULT_COMPLEXITY_THRESHOLD
    complexity_color = "yellow" if report.cyclomatic_complexity > threshold else "green"

    lines = []
    lines.append("")
    lines.append(f"  Lang: [bold]{report.language_detected}[/bold]    LOC: {report.lines_of_code}")
    lines.append(f"  Comments: {report.comment_lines}    Blank: {report.blank_lines}")
    lines.append(
        f"  Complexity: [{complexity_color}]{report.cyclomatic_complexity}[/{complexity_color}]    "
        f"Maintainability: [green]{report.maintainability_index}[/green]    "
        f"Readability: [green]{report.readability_score}[/green]"
    )
    if report.placeholder_scores:
        lines.append("  [dim]Scores are placeholder values, not measured.[/dim]")

    if report.potential_security_issues:
        lines.append("")
        lines.append(f"  [red]{len(report.potential_security_issues)} Security Issues[/red]")
        for issue in report.potential_security_issues:
            color = SEVERITY_COLORS.get(issue.severity, "white")
            location = f" (line {issue.line})" if issue.line else ""
            lines.append(
                f"    [{color}]● {issue.severity.value.upper()}[/{color}] "
                f"{issue.vulnerability}{location}  [dim]{issue.tool.value}[/dim]"
            )
            lines.append(f"      {issue.description} Fix: {issue.recommendation}")

    if report.performance_insights:
        lines.append("")
        lines.append("  Performance")
        for insight in report.performance_insights:
            color = {"optimal": "green", "warning": "yellow"}.get(insight.status, "red")
            lines.append(
                f"    [{color}]{insight.metric}: {insight.value}[/{color}]  {insight.recommendation}"
            )

    lines.append("")
    console.print(Panel(
        "\n".join(lines),
        title=f"[bold]{title}[/bold]",
        border_style="blue",
        padding=(0, 1),
    ))


def print_diff(diff: str) -> None:
    if not diff:
        console.print("  [dim]No differences.[/dim]")
        return
    lines = []
    for diff_line in diff.splitlines():
        escaped = escape(diff_line)
        if diff_line.startswith("-"):
            lines.append(f"[red]{escaped}[/red]")
        elif diff_line.startswith("+"):
            lines.append(f"[green]{escaped}[/green]")
        elif diff_line.startswith("@@"):
            lines.append(f"[cyan]{escaped}[/cyan]")
        else:
            lines.append(escaped)
    console.print(Panel("\n".join(lines), title="[bold]Diff[/bold]", border_style="magenta", padding=(0, 1)))


def print_migration_result(result: MigrationResult, settings: MigrationSettings, show_code: bool = True) -> None:
    """Print output code, report, diff and summary line for a run."""
    entry = result.history_entry
    if show_code:
        print_code(result.output_code, entry.to_lang)
    print_analysis_report(
        result.output_report,
        title="Output Analysis",
        complexity_threshold=settings.complexity_threshold,
    )
    if result.diff is not None:
        print_diff(result.diff)

    color = STATUS_COLORS[entry.status]
    cost = f"${entry.cost_estimate_usd:.4f}" if entry.cost_estimate_usd is not None else "n/a"
    console.print(
        f"  [{color}]{entry.status.value}[/{color}]  {entry.from_lang} -> {entry.to_lang}  "
        f"{entry.duration_ms} ms  cost {cost}"
    )
    if result.failed_steps:
        console.print(f"  [yellow]Skipped steps: {', '.join(result.failed_steps)}[/yellow]")


def print_history(entries: list[MigrationHistoryEntry] | tuple[MigrationHistoryEntry, ...]) -> None:
    if not entries:
        console.print("\n  No migrations yet this session.\n")
        return

    table = Table(title="Migration History", show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Time")
    table.add_column("From -> To")
    table.add_column("Status")
    table.add_column("Duration", justify="right")
    table.add_column("Cost", justify="right")
    table.add_column("ID", style="dim")

    for i, entry in enumerate(entries, start=1):
        color = STATUS_COLORS[entry.status]
        cost = f"${entry.cost_estimate_usd:.4f}" if entry.cost_estimate_usd is not None else "-"
        table.add_row(
            str(i),
            entry.timestamp.strftime("%H:%M:%S"),
            f"{entry.from_lang} -> {entry.to_lang}",
            f"[{color}]{entry.status.value}[/{color}]",
            f"{entry.duration_ms} ms",
            cost,
            entry.id[:8],
        )
    console.print(table)


def print_settings(settings: MigrationSettings) -> None:
    table = Table(title="Settings", show_header=False)
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in settings.ai_config.to_dict().items():
        table.add_row(f"ai_config.{key}", str(value))
    for key, value in settings.to_dict().items():
        if key == "ai_config":
            continue
        table.add_row(key, str(value))
    console.print(table)


def get_progress() -> Progress:
    """Create a spinner for long-running steps."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    )
