"""Migration orchestrator: runs one migration request end to end."""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable

from transmute.analysis.metrics import count_lines
from transmute.core.errors import (
    MigrationCancelledError,
    MigrationError,
    MigrationInProgressError,
    ValidationError,
)
from transmute.core.languages import is_supported
from transmute.core.models import (
    CodeAnalysisReport,
    MigrationHistoryEntry,
    MigrationResult,
    MigrationSettings,
    MigrationStatus,
    Notification,
    TestRunResult,
)
from transmute.generation.client import GenerationClient
from transmute.generation.prompt import build_prompt, extract_code_block
from transmute.migration.history import MigrationHistory
from transmute.services import MigrationServices
from transmute.services.context import DEFAULT_BRANCH, DEFAULT_PATH, DEFAULT_REPOSITORY
from transmute.services.formatter import DEFAULT_STYLE_GUIDE

logger = logging.getLogger(__name__)

NotifyCallback = Callable[[Notification], None]


@dataclass
class _RunState:
    notifications: list[Notification] = field(default_factory=list)
    failed_steps: list[str] = field(default_factory=list)


async def _call(fn: Callable[..., Any], *args: Any) -> Any:
    """Call a service that may be sync or async."""
    result = fn(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


class MigrationOrchestrator:
    """Builds the prompt, calls the generation client and post-processes.

    Steps run strictly in sequence. Prompt building and generation failures
    abort the run and nothing is recorded. Post-processing steps are
    best-effort: a failing step is logged, reported as a warning, and the
    run continues with the value it had before that step; the history entry
    is then marked ``partial``.

    Only one run may be in flight at a time; a concurrent call is rejected
    with :class:`MigrationInProgressError`.
    """

    def __init__(
        self,
        client: GenerationClient,
        services: MigrationServices | None = None,
        history: MigrationHistory | None = None,
        notify: NotifyCallback | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self.services = services or MigrationServices()
        self.history = history if history is not None else MigrationHistory()
        self.notify = notify
        self.clock = clock
        self._task: asyncio.Task | None = None
        self._cancel_requested = False
        self._committed = False

    @property
    def is_running(self) -> bool:
        return self._task is not None

    def cancel(self) -> bool:
        """Abandon the active run.

        Returns False if nothing is running, or if the run has already been
        written to history; such a run completes normally.
        """
        if self._task is None or self._task.done() or self._committed:
            return False
        self._cancel_requested = True
        self._task.cancel()
        return True

    async def run_migration(
        self,
        input_code: str,
        from_lang: str,
        to_lang: str,
        settings: MigrationSettings,
    ) -> MigrationResult:
        if self._task is not None:
            self._emit(None, "warning", "A migration is already running.")
            raise MigrationInProgressError("A migration is already running")

        self._task = asyncio.current_task()
        self._cancel_requested = False
        self._committed = False
        state = _RunState()
        try:
            result = await self._run(input_code, from_lang, to_lang, settings, state)
        except asyncio.CancelledError:
            if not self._cancel_requested:
                raise
            task = asyncio.current_task()
            if task is not None and hasattr(task, "uncancel"):
                task.uncancel()
            logger.info("Migration %s -> %s cancelled", from_lang, to_lang)
            self._emit(state, "info", "Migration cancelled.")
            raise MigrationCancelledError("Migration cancelled") from None
        except Exception as e:
            self._emit(state, "error", f"Migration failed: {e}")
            raise
        finally:
            self._task = None
            self._cancel_requested = False
            self._committed = False

        self._emit(state, "success", "Migration complete!")
        result.notifications = list(state.notifications)
        return result

    async def _run(
        self,
        input_code: str,
        from_lang: str,
        to_lang: str,
        settings: MigrationSettings,
        state: _RunState,
    ) -> MigrationResult:
        self._validate(input_code, from_lang, to_lang, settings)
        services = self.services
        start = self.clock()

        context = ""
        if settings.enable_contextual_analysis:
            logger.debug("Analyzing project context")
            try:
                context = await _call(
                    services.context.analyze_project, DEFAULT_REPOSITORY, DEFAULT_BRANCH, DEFAULT_PATH
                )
            except MigrationError:
                raise
            except Exception as e:
                raise MigrationError(f"Context analysis failed: {e}") from e

        prompt = build_prompt(input_code, from_lang, to_lang, settings, context)

        ai = settings.ai_config
        logger.debug("Generating code with %s", ai.model_name)
        generated = await self.client.generate(
            prompt, ai.model_name, ai.temperature, ai.max_tokens, ai.top_p
        )
        code = extract_code_block(generated)

        if settings.enable_auto_format:
            logger.debug("Formatting code")
            code = await self._best_effort(
                state, "format", code,
                services.formatter.format, code, to_lang, settings.code_style_guide or DEFAULT_STYLE_GUIDE,
            )

        if settings.generate_documentation:
            logger.debug("Generating documentation")
            docs = await self._best_effort(state, "documentation", None, services.documentor.generate_docs, code, to_lang)
            if docs is not None:
                code = docs + "\n\n" + code

        output_code = code

        report = await self._best_effort(state, "metrics", None, services.metrics.analyze, output_code, to_lang)
        if report is None:
            report = _empty_report(output_code, to_lang)

        if settings.enable_security_scan:
            issues = await self._best_effort(
                state, "security_scan", None, services.security.scan, output_code, to_lang, settings
            )
            if issues is not None:
                report.potential_security_issues = list(issues)
                if issues:
                    self._emit(state, "warning", f"Found {len(issues)} security issues.")

        if settings.enable_performance_opt:
            insights = await self._best_effort(
                state, "performance", None, services.performance.analyze_and_suggest, output_code, to_lang, settings
            )
            if insights is not None:
                report.performance_insights = list(insights)

        test_result: TestRunResult | None = None
        if settings.post_migration_testing:
            test_result = await self._best_effort(state, "testing", None, services.testing.run_tests, output_code, to_lang)
            if test_result is not None:
                if test_result.success:
                    self._emit(state, "success", "Automated tests passed.")
                else:
                    self._emit(state, "warning", "Automated tests failed.")

        cost = await self._best_effort(state, "cost_estimate", None, services.cost.estimate, input_code, output_code, settings)
        if cost is not None and settings.cost_limit_usd is not None and cost > settings.cost_limit_usd:
            self._emit(state, "warning", f"Estimated cost ${cost:.4f} exceeds limit ${settings.cost_limit_usd:.4f}.")

        status = MigrationStatus.PARTIAL if state.failed_steps else MigrationStatus.SUCCESS
        entry = MigrationHistoryEntry(
            input_code=input_code,
            output_code=output_code,
            from_lang=from_lang,
            to_lang=to_lang,
            settings=settings,
            status=status,
            duration_ms=int((self.clock() - start) * 1000),
            cost_estimate_usd=cost,
        )
        self.history.record(entry)
        self._committed = True
        logger.info("Migration %s -> %s recorded as %s", from_lang, to_lang, status.value)

        diff = None
        if settings.enable_diff_view:
            diff = await self._best_effort(state, "diff", None, services.diff.generate_unified_diff, input_code, output_code)

        return MigrationResult(
            output_code=output_code,
            output_report=report,
            history_entry=entry,
            diff=diff,
            failed_steps=list(state.failed_steps),
            test_result=test_result,
        )

    def _validate(self, input_code: str, from_lang: str, to_lang: str, settings: MigrationSettings) -> None:
        if not input_code.strip():
            raise ValidationError("Input code is empty")
        for lang in (from_lang, to_lang):
            if not is_supported(lang):
                raise ValidationError(f"Unsupported language: '{lang}'")
        settings.validate()

    async def _best_effort(self, state: _RunState, step: str, fallback: Any, fn: Callable[..., Any], *args: Any) -> Any:
        try:
            return await _call(fn, *args)
        except Exception as e:
            logger.warning("Post-processing step '%s' failed: %s", step, e)
            state.failed_steps.append(step)
            self._emit(state, "warning", f"Step '{step}' failed and was skipped: {e}")
            return fallback

    def _emit(self, state: _RunState | None, level: str, message: str) -> None:
        notification = Notification(level=level, message=message)
        if state is not None:
            state.notifications.append(notification)
        if self.notify is not None:
            self.notify(notification)


def _empty_report(code: str, lang: str) -> CodeAnalysisReport:
    """Counts-only report used when the metrics step itself failed."""
    total, comment, blank = count_lines(code)
    return CodeAnalysisReport(
        language_detected=lang,
        lines_of_code=total,
        comment_lines=comment,
        blank_lines=blank,
        cyclomatic_complexity=0,
        maintainability_index=0,
        readability_score=0,
    )
