from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Sequence, Tuple


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class FileKind(Enum):
    MARKUP_COMPONENT = "markup-component"  # jsx, tsx
    SCRIPT = "script"  # js, ts
    PAGE_MARKUP = "page-markup"  # html, htm
    STYLESHEET = "stylesheet"  # css, scss
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Violation:
    id: str
    severity: Severity
    wcag_criteria: Tuple[str, ...]
    title: str
    description: str
    help: str
    line: int
    code: str
    fix_suggestions: Tuple[str, ...]
    tags: Tuple[str, ...] = ()
    column: int = 1

    def __post_init__(self):
        if not self.wcag_criteria:
            raise ValueError(f"{self.id}: at least one WCAG criterion is required")
        if not self.fix_suggestions:
            raise ValueError(f"{self.id}: at least one fix suggestion is required")
        if self.line < 1 or self.column < 1:
            raise ValueError(f"{self.id}: line and column are 1-based")


@dataclass(frozen=True)
class Rule:
    """Static description of one detector's finding.

    A detector turns a rule into concrete violations with ``violation()``,
    filling in the location, the excerpt and, where the rule interpolates
    matched values, a custom description or suggestion list.
    """

    id: str
    severity: Severity
    wcag_criteria: Tuple[str, ...]
    title: str
    description: str
    help: str
    fix_suggestions: Tuple[str, ...]
    tags: Tuple[str, ...] = ()

    def violation(
        self,
        line: int,
        code: str,
        column: int = 1,
        description: str = "",
        fix_suggestions: Sequence[str] = (),
    ) -> Violation:
        return Violation(
            id=self.id,
            severity=self.severity,
            wcag_criteria=self.wcag_criteria,
            title=self.title,
            description=description or self.description,
            help=self.help,
            line=line,
            column=column,
            code=code,
            fix_suggestions=tuple(fix_suggestions) or self.fix_suggestions,
            tags=self.tags,
        )


@dataclass(frozen=True)
class ScanStatistics:
    total_violations: int = 0
    errors: int = 0
    warnings: int = 0
    info: int = 0
    estimated_fix_minutes: int = 1

    @classmethod
    def from_violations(cls, violations: Sequence[Violation]) -> "ScanStatistics":
        counts: Dict[Severity, int] = {s: 0 for s in Severity}
        for v in violations:
            counts[v.severity] += 1
        return cls(
            total_violations=len(violations),
            errors=counts[Severity.ERROR],
            warnings=counts[Severity.WARNING],
            info=counts[Severity.INFO],
            # Rough linear estimate: two minutes per finding.
            estimated_fix_minutes=max(len(violations) * 2, 1),
        )

    @property
    def estimated_fix_time(self) -> str:
        return f"{self.estimated_fix_minutes} minutes"


@dataclass(frozen=True)
class ScanMetadata:
    line_count: int
    analyzed_at: str


@dataclass(frozen=True)
class ScanResult:
    file_path: str
    file_kind: FileKind
    file_type: str
    content: str
    violations: Tuple[Violation, ...] = ()
    statistics: ScanStatistics = field(default_factory=ScanStatistics)
    metadata: ScanMetadata = field(default_factory=lambda: ScanMetadata(0, ""))

    @property
    def has_violations(self) -> bool:
        return bool(self.violations)
