"""transmute migrate command."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import click

from transmute.analysis.detector import detect_language
from transmute.analysis.metrics import CodeMetricsAnalyzer
from transmute.cli.options import apply_options, language_argument, settings_options
from transmute.core.config import load_settings
from transmute.core.errors import MigrationError, ValidationError
from transmute.core.models import CodeAnalysisReport, MigrationResult, Notification
from transmute.core.output import (
    console,
    get_progress,
    print_analysis_report,
    print_migration_result,
    print_notification,
)
from transmute.generation.client import GenerationClient
from transmute.migration.orchestrator import MigrationOrchestrator


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--from", "from_lang", help="Source language (auto-detected when omitted)")
@click.option("--to", "to_lang", required=True, help="Target language")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write the migrated code here")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--input-report/--no-input-report", default=True, help="Also report on the input code")
@settings_options
def migrate(
    source: Path,
    from_lang: str | None,
    to_lang: str,
    output: Path | None,
    as_json: bool,
    input_report: bool,
    **options,
):
    """Migrate SOURCE to another language using the configured model.

    Settings come from transmute.toml in the current directory; any option
    given here overrides the file for this run.
    """
    try:
        settings = apply_options(load_settings(Path.cwd()), options)
    except ValidationError as e:
        raise click.UsageError(str(e)) from None
    input_code = source.read_text(errors="ignore")

    to_lang = language_argument(to_lang)
    if from_lang:
        from_lang = language_argument(from_lang)
    else:
        from_lang = detect_language(input_code)
        if not as_json:
            console.print(f"  [dim]Detected source language: {from_lang}[/dim]")

    notifications: list[Notification] = []
    orchestrator = MigrationOrchestrator(
        GenerationClient.from_env(settings.ai_config),
        notify=notifications.append,
    )

    try:
        if as_json:
            result = asyncio.run(orchestrator.run_migration(input_code, from_lang, to_lang, settings))
        else:
            with get_progress() as progress:
                progress.add_task(
                    f"Migrating {source.name} from {from_lang} to {to_lang} with {settings.ai_config.model_name}...",
                    total=None,
                )
                result = asyncio.run(orchestrator.run_migration(input_code, from_lang, to_lang, settings))
    except MigrationError as e:
        if as_json:
            click.echo(json.dumps({"status": "failed", "error": str(e), "error_type": type(e).__name__}, indent=2))
        else:
            # the "Migration failed" notification is the single error line
            for n in notifications:
                print_notification(n)
        sys.exit(1)

    if output:
        output.write_text(result.output_code + "\n")

    in_report = CodeMetricsAnalyzer().analyze(input_code, from_lang) if input_report else None

    if as_json:
        click.echo(json.dumps(_result_to_dict(result, in_report), indent=2, default=str))
        return

    if in_report is not None:
        print_analysis_report(
            in_report,
            title=f"Input Analysis  {source.name}",
            complexity_threshold=settings.complexity_threshold,
        )
    print_migration_result(result, settings, show_code=output is None)
    if output:
        console.print(f"  [dim]Output written to {output}[/dim]")
    for n in result.notifications:
        print_notification(n)


def _report_to_dict(report: CodeAnalysisReport) -> dict:
    return {
        "language_detected": report.language_detected,
        "lines_of_code": report.lines_of_code,
        "comment_lines": report.comment_lines,
        "blank_lines": report.blank_lines,
        "cyclomatic_complexity": report.cyclomatic_complexity,
        "maintainability_index": report.maintainability_index,
        "readability_score": report.readability_score,
        "placeholder_scores": report.placeholder_scores,
        "security_issues": [
            {
                "tool": issue.tool.value,
                "severity": issue.severity.value,
                "vulnerability": issue.vulnerability,
                "description": issue.description,
                "recommendation": issue.recommendation,
                "line": issue.line,
                "cve": issue.cve,
            }
            for issue in report.potential_security_issues
        ],
        "performance_insights": [
            {
                "metric": insight.metric,
                "value": insight.value,
                "status": insight.status,
                "recommendation": insight.recommendation,
            }
            for insight in report.performance_insights
        ],
    }


def _result_to_dict(result: MigrationResult, input_report: CodeAnalysisReport | None = None) -> dict:
    """Convert a MigrationResult to a JSON-serializable dict."""
    return {
        "status": result.status.value,
        "output_code": result.output_code,
        "diff": result.diff,
        "failed_steps": result.failed_steps,
        "history_entry": result.history_entry.to_dict(),
        "input_report": _report_to_dict(input_report) if input_report is not None else None,
        "report": _report_to_dict(result.output_report),
        "notifications": [{"level": n.level, "message": n.message} for n in result.notifications],
    }
