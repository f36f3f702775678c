"""Pattern-based security scan of migrated code.

Rules are plain regular expressions run over the raw text, so they apply
to any target language. Each rule is attributed to the external scanner
whose finding it imitates.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from transmute.core.models import ExternalService, MigrationSettings, SecurityScanResult, Severity


@dataclass(frozen=True)
class SecurityRule:
    rule_id: str
    tool: ExternalService
    severity: Severity
    vulnerability: str
    pattern: re.Pattern[str]
    description: str
    recommendation: str
    cve: str | None = None


RULES: list[SecurityRule] = [
    SecurityRule(
        rule_id="SEC-001",
        tool=ExternalService.SNYK,
        severity=Severity.CRITICAL,
        vulnerability="Unsafe Eval",
        pattern=re.compile(r"\beval\s*\("),
        description="Avoid usage of eval().",
        recommendation="Refactor to safe parsing.",
    ),
    SecurityRule(
        rule_id="SEC-002",
        tool=ExternalService.SNYK,
        severity=Severity.HIGH,
        vulnerability="Dynamic Code Execution",
        pattern=re.compile(r"\bexec\s*\(|\bnew\s+Function\s*\("),
        description="Executing dynamically built code allows code injection.",
        recommendation="Replace dynamic execution with explicit dispatch.",
    ),
    SecurityRule(
        rule_id="SEC-003",
        tool=ExternalService.GITGUARDIAN,
        severity=Severity.CRITICAL,
        vulnerability="Hardcoded Secret",
        pattern=re.compile(
            r"(?i)\b(api[_-]?key|secret[_-]?key|access[_-]?key|auth[_-]?token|password|passwd|private[_-]?key)\b"
            r"\s*[:=]\s*[\"'][^\"']{4,}[\"']"
        ),
        description="A credential is assigned from a string literal.",
        recommendation="Load the value from an environment variable or a secret manager.",
    ),
    SecurityRule(
        rule_id="SEC-004",
        tool=ExternalService.GITGUARDIAN,
        severity=Severity.CRITICAL,
        vulnerability="Exposed API Token",
        pattern=re.compile(r"sk-[a-zA-Z0-9]{20,}|ghp_[a-zA-Z0-9]{36}|AKIA[0-9A-Z]{16}"),
        description="A string matching a known provider token format was found.",
        recommendation="Revoke the token and move it out of source code.",
    ),
    SecurityRule(
        rule_id="SEC-005",
        tool=ExternalService.SONARQUBE,
        severity=Severity.CRITICAL,
        vulnerability="OS Command Injection",
        pattern=re.compile(r"shell\s*=\s*True|\bos\.system\s*\(|\bchild_process\.exec\s*\(|\bRuntime\.getRuntime\(\)\.exec\s*\("),
        description="Commands are passed through a shell.",
        recommendation="Pass arguments as a list and avoid shell interpretation.",
    ),
    SecurityRule(
        rule_id="SEC-006",
        tool=ExternalService.SNYK,
        severity=Severity.HIGH,
        vulnerability="Unsafe Deserialization",
        pattern=re.compile(r"\bpickle\.loads?\s*\(|\byaml\.load\s*\((?![^)]*Loader)|\bunserialize\s*\("),
        description="Deserializing untrusted data can execute arbitrary code.",
        recommendation="Use a safe loader or a data-only format such as JSON.",
    ),
    SecurityRule(
        rule_id="SEC-007",
        tool=ExternalService.SONARQUBE,
        severity=Severity.MEDIUM,
        vulnerability="Weak Hashing Algorithm",
        pattern=re.compile(r"(?i)\b(md5|sha1)\s*\("),
        description="MD5 and SHA-1 are not collision resistant.",
        recommendation="Use SHA-256 or a password hashing function such as bcrypt.",
    ),
    SecurityRule(
        rule_id="SEC-008",
        tool=ExternalService.SNYK,
        severity=Severity.HIGH,
        vulnerability="Cross-Site Scripting",
        pattern=re.compile(r"\.innerHTML\s*=|dangerouslySetInnerHTML|document\.write\s*\("),
        description="Untrusted content may be written into the DOM as HTML.",
        recommendation="Assign textContent or sanitize the markup first.",
    ),
    SecurityRule(
        rule_id="SEC-009",
        tool=ExternalService.SONARQUBE,
        severity=Severity.HIGH,
        vulnerability="SQL Injection",
        pattern=re.compile(r"(?i)[\"'](SELECT|INSERT|UPDATE|DELETE)\b[^\"']*[\"']\s*(\+|%|\.format\s*\()"),
        description="A SQL statement is built by string concatenation or formatting.",
        recommendation="Use parameterized queries.",
    ),
]


def _line_of(code: str, offset: int) -> int:
    return code.count("\n", 0, offset) + 1


class SecurityScanner:
    """Runs :data:`RULES` over code. Returns an empty list when disabled."""

    def __init__(self, rules: list[SecurityRule] | None = None):
        self.rules = rules if rules is not None else RULES

    def scan(self, code: str, lang: str, settings: MigrationSettings) -> list[SecurityScanResult]:
        if not settings.enable_security_scan:
            return []

        results: list[SecurityScanResult] = []
        for rule in self.rules:
            seen_lines: set[int] = set()
            for match in rule.pattern.finditer(code):
                line = _line_of(code, match.start())
                if line in seen_lines:
                    continue
                seen_lines.add(line)
                results.append(SecurityScanResult(
                    tool=rule.tool,
                    severity=rule.severity,
                    vulnerability=rule.vulnerability,
                    description=rule.description,
                    recommendation=rule.recommendation,
                    line=line,
                    cve=rule.cve,
                ))
        return results
