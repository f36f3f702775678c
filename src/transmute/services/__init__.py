"""Post-processing services applied around the generation call.

Each service is stateless. :class:`MigrationServices` bundles one instance
of each so the orchestrator can be handed replacements in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from transmute.analysis.metrics import CodeMetricsAnalyzer
from transmute.services.context import ProjectContextAnalyzer
from transmute.services.cost import CostEstimator
from transmute.services.diff import DiffGenerator
from transmute.services.documentor import CodeDocumentor
from transmute.services.formatter import CodeFormatter
from transmute.services.performance import PerformanceOptimizer
from transmute.services.security import SecurityScanner
from transmute.services.testing import PostMigrationTestingFramework


@dataclass
class MigrationServices:
    context: ProjectContextAnalyzer = field(default_factory=ProjectContextAnalyzer)
    formatter: CodeFormatter = field(default_factory=CodeFormatter)
    documentor: CodeDocumentor = field(default_factory=CodeDocumentor)
    metrics: CodeMetricsAnalyzer = field(default_factory=CodeMetricsAnalyzer)
    security: SecurityScanner = field(default_factory=SecurityScanner)
    performance: PerformanceOptimizer = field(default_factory=PerformanceOptimizer)
    testing: PostMigrationTestingFramework = field(default_factory=PostMigrationTestingFramework)
    cost: CostEstimator = field(default_factory=CostEstimator)
    diff: DiffGenerator = field(default_factory=DiffGenerator)


__all__ = [
    "CodeDocumentor",
    "CodeFormatter",
    "CodeMetricsAnalyzer",
    "CostEstimator",
    "DiffGenerator",
    "MigrationServices",
    "PerformanceOptimizer",
    "PostMigrationTestingFramework",
    "ProjectContextAnalyzer",
    "SecurityScanner",
]
