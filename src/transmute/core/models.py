"""Shared data models used across Transmute modules."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from transmute.core.errors import ValidationError


class AIProvider(enum.Enum):
    CHATGPT = "ChatGPT (OpenAI)"
    GEMINI = "Gemini (Google)"
    CLAUDE = "Claude (Anthropic)"
    LLAMA = "Llama (Meta)"
    MISTRAL = "Mistral AI"
    GROK = "Grok (xAI)"
    FALCON = "Falcon (TII)"
    COHERE = "Cohere"
    AZURE_OPENAI = "Azure OpenAI"
    AWS_BEDROCK = "AWS Bedrock"
    GOOGLE_VERTEX_AI = "Google Vertex AI"
    CUSTOM_FINE_TUNED = "Custom Fine-Tuned Model"


class ExternalService(enum.Enum):
    GITHUB = "GitHub"
    GITLAB = "GitLab"
    AZURE_DEVOPS = "Azure DevOps"
    BITBUCKET = "Bitbucket"
    GITHUB_ACTIONS = "GitHub Actions"
    JENKINS = "Jenkins"
    GITLAB_CI = "GitLab CI"
    AZURE_PIPELINES = "Azure Pipelines"
    AWS = "Amazon Web Services"
    AZURE = "Microsoft Azure"
    GCP = "Google Cloud Platform"
    SNYK = "Snyk"
    SONARQUBE = "SonarQube"
    GITGUARDIAN = "GitGuardian"


class MigrationStrategy(enum.Enum):
    DIRECT = "direct"
    REFACTOR_THEN_MIGRATE = "refactor_then_migrate"
    INCREMENTAL = "incremental"


class Severity(enum.Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"


class MigrationStatus(enum.Enum):
    SUCCESS = "success"
    FAILED = "failed"
    PARTIAL = "partial"


@dataclass(frozen=True)
class AIModelConfig:
    """Model selection and generation parameters for one provider."""

    provider: AIProvider = AIProvider.CLAUDE
    model_name: str = "claude-sonnet-4-5"
    temperature: float = 0.7
    max_tokens: int = 4096
    top_p: float = 0.95
    cost_per_token_input: float | None = 0.0001
    cost_per_token_output: float | None = 0.0004
    max_retries: int = 3
    timeout_ms: int = 60000

    def validate(self) -> None:
        if not self.model_name.strip():
            raise ValidationError("Model name must not be empty")
        if not 0.0 <= self.temperature <= 2.0:
            raise ValidationError(f"Temperature must be within [0, 2], got {self.temperature}")
        if self.max_tokens <= 0:
            raise ValidationError(f"max_tokens must be positive, got {self.max_tokens}")
        if not 0.0 <= self.top_p <= 1.0:
            raise ValidationError(f"top_p must be within [0, 1], got {self.top_p}")
        if self.max_retries < 0:
            raise ValidationError(f"max_retries must not be negative, got {self.max_retries}")
        if self.timeout_ms <= 0:
            raise ValidationError(f"timeout_ms must be positive, got {self.timeout_ms}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "provider": self.provider.value,
            "model_name": self.model_name,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "top_p": self.top_p,
            "cost_per_token_input": self.cost_per_token_input,
            "cost_per_token_output": self.cost_per_token_output,
            "max_retries": self.max_retries,
            "timeout_ms": self.timeout_ms,
        }


@dataclass(frozen=True)
class MigrationSettings:
    """Configuration snapshot for one migration run.

    The boolean toggles are independent: enabling one never implies or
    excludes another. Instances are immutable; use
    :func:`transmute.core.config.update_settings` to derive a changed copy.
    """

    ai_config: AIModelConfig = field(default_factory=AIModelConfig)
    enable_auto_format: bool = True
    enable_lint_fix: bool = True
    enable_security_scan: bool = False
    enable_performance_opt: bool = False
    enable_diff_view: bool = True
    enable_contextual_analysis: bool = False
    post_migration_testing: bool = False
    generate_documentation: bool = False
    migration_strategy: MigrationStrategy = MigrationStrategy.DIRECT
    code_style_guide: str | None = "Airbnb"
    cost_limit_usd: float | None = None
    complexity_threshold: int | None = None
    custom_prompt_append: str | None = None
    target_vcs_integration: ExternalService | None = None
    target_ci_integration: ExternalService | None = None
    target_cloud_platform: ExternalService | None = None
    code_reviewer_ai: AIProvider | None = None

    def validate(self) -> None:
        self.ai_config.validate()
        if self.cost_limit_usd is not None and self.cost_limit_usd < 0:
            raise ValidationError(f"cost_limit_usd must not be negative, got {self.cost_limit_usd}")

    def to_dict(self) -> dict[str, Any]:
        def _value(member: enum.Enum | None) -> str | None:
            return member.value if member is not None else None

        return {
            "ai_config": self.ai_config.to_dict(),
            "enable_auto_format": self.enable_auto_format,
            "enable_lint_fix": self.enable_lint_fix,
            "enable_security_scan": self.enable_security_scan,
            "enable_performance_opt": self.enable_performance_opt,
            "enable_diff_view": self.enable_diff_view,
            "enable_contextual_analysis": self.enable_contextual_analysis,
            "post_migration_testing": self.post_migration_testing,
            "generate_documentation": self.generate_documentation,
            "migration_strategy": self.migration_strategy.value,
            "code_style_guide": self.code_style_guide,
            "cost_limit_usd": self.cost_limit_usd,
            "complexity_threshold": self.complexity_threshold,
            "custom_prompt_append": self.custom_prompt_append,
            "target_vcs_integration": _value(self.target_vcs_integration),
            "target_ci_integration": _value(self.target_ci_integration),
            "target_cloud_platform": _value(self.target_cloud_platform),
            "code_reviewer_ai": _value(self.code_reviewer_ai),
        }


@dataclass
class SecurityScanResult:
    """A single finding reported by the security scanner."""

    tool: ExternalService
    severity: Severity
    vulnerability: str
    description: str
    recommendation: str
    line: int | None = None
    cve: str | None = None


@dataclass
class PerformanceAnalysisResult:
    metric: str
    value: float | str
    status: str  # "optimal", "warning", "critical"
    recommendation: str
    unit: str | None = None
    threshold: float | None = None


@dataclass
class CodeSmell:
    description: str
    line: int
    severity: str


@dataclass
class CodeAnalysisReport:
    """Descriptive snapshot of one code sample.

    ``cyclomatic_complexity``, ``maintainability_index`` and
    ``readability_score`` are placeholder values when ``placeholder_scores``
    is set; they are not derived from parsing the code.
    """

    language_detected: str
    lines_of_code: int
    comment_lines: int
    blank_lines: int
    cyclomatic_complexity: int
    maintainability_index: int
    readability_score: int
    dependencies: list[str] = field(default_factory=list)
    potential_security_issues: list[SecurityScanResult] = field(default_factory=list)
    performance_insights: list[PerformanceAnalysisResult] = field(default_factory=list)
    code_smells: list[CodeSmell] = field(default_factory=list)
    architectural_suggestions: list[str] = field(default_factory=list)
    placeholder_scores: bool = True

    @property
    def code_lines(self) -> int:
        return self.lines_of_code - self.comment_lines - self.blank_lines


@dataclass(frozen=True)
class MigrationHistoryEntry:
    """Immutable record of one completed migration run."""

    input_code: str
    output_code: str
    from_lang: str
    to_lang: str
    settings: MigrationSettings
    status: MigrationStatus
    duration_ms: int
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = field(default_factory=datetime.now)
    cost_estimate_usd: float | None = None
    feedback: int | None = None
    error_message: str | None = None
    diff: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (datetime -> ISO string)."""
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "input_code": self.input_code,
            "output_code": self.output_code,
            "from_lang": self.from_lang,
            "to_lang": self.to_lang,
            "settings": self.settings.to_dict(),
            "status": self.status.value,
            "duration_ms": self.duration_ms,
            "cost_estimate_usd": self.cost_estimate_usd,
            "feedback": self.feedback,
            "error_message": self.error_message,
            "diff": self.diff,
        }


@dataclass
class TestRunResult:
    __test__ = False

    success: bool
    results: str


@dataclass(frozen=True)
class Notification:
    """A user-facing message emitted during a run."""

    level: str  # "success", "info", "warning", "error"
    message: str


@dataclass
class MigrationResult:
    """Everything a completed run hands back to the presentation layer."""

    output_code: str
    output_report: CodeAnalysisReport
    history_entry: MigrationHistoryEntry
    diff: str | None = None
    notifications: list[Notification] = field(default_factory=list)
    failed_steps: list[str] = field(default_factory=list)
    test_result: TestRunResult | None = None

    @property
    def status(self) -> MigrationStatus:
        return self.history_entry.status
