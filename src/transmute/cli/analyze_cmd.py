"""transmute analyze command."""

from __future__ import annotations

from pathlib import Path

import click

from transmute.analysis.detector import detect_language
from transmute.analysis.metrics import CodeMetricsAnalyzer
from transmute.cli.options import language_argument
from transmute.core.config import load_settings, update_settings
from transmute.core.output import print_analysis_report
from transmute.services.performance import PerformanceOptimizer
from transmute.services.security import SecurityScanner


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--lang", help="Language of SOURCE (auto-detected when omitted)")
@click.option("--security", is_flag=True, help="Include the security scan")
@click.option("--performance", is_flag=True, help="Include loop-efficiency insights")
def analyze(source: Path, lang: str | None, security: bool, performance: bool):
    """Print a metrics report for SOURCE without calling the model."""
    code = source.read_text(errors="ignore")
    lang = language_argument(lang) if lang else detect_language(code)

    settings = update_settings(
        load_settings(Path.cwd()),
        enable_security_scan=security,
        enable_performance_opt=performance,
    )

    report = CodeMetricsAnalyzer().analyze(code, lang)
    report.potential_security_issues = SecurityScanner().scan(code, lang, settings)
    report.performance_insights = PerformanceOptimizer().analyze_and_suggest(code, lang, settings)

    print_analysis_report(
        report,
        title=f"Input Analysis  {source.name}",
        complexity_threshold=settings.complexity_threshold,
    )
