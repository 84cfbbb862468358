"""Single-file scan engine.

Classifies a file, runs the eligible detector groups in declared order and
wraps the findings in a ``ScanResult``. ``scan_file`` is the unit of work
reused by the CLI and by every batch job.
"""

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import FrozenSet, List, Mapping, Tuple

from a11y_scanner.checks import markup, page, stylesheet
from a11y_scanner.classifier import classify, file_type_label
from a11y_scanner.errors import NotFoundError, ScanError, UnknownRuleError
from a11y_scanner.models import (
    FileKind,
    Rule,
    ScanMetadata,
    ScanResult,
    ScanStatistics,
    Violation,
)


@dataclass(frozen=True)
class DetectorGroup:
    name: str
    kinds: FrozenSet[FileKind]
    module: object

    def applies_to(self, kind: FileKind) -> bool:
        return kind in self.kinds


DETECTOR_GROUPS: Tuple[DetectorGroup, ...] = (
    DetectorGroup(
        "markup",
        frozenset({FileKind.MARKUP_COMPONENT, FileKind.SCRIPT, FileKind.PAGE_MARKUP}),
        markup,
    ),
    DetectorGroup("page", frozenset({FileKind.PAGE_MARKUP}), page),
    DetectorGroup("stylesheet", frozenset({FileKind.STYLESHEET}), stylesheet),
)


@dataclass(frozen=True)
class FixSuggestion:
    rule_id: str
    title: str
    help: str
    wcag_criteria: Tuple[str, ...]
    fix_suggestions: Tuple[str, ...]
    code: str = ""


def rules() -> List[Rule]:
    """Every rule in the catalog, in detector-execution order."""
    catalog: List[Rule] = []
    for group in DETECTOR_GROUPS:
        catalog.extend(group.module.RULES)
    return catalog


def analyze(content: str, file_path: str) -> List[Violation]:
    kind = classify(file_path)
    violations: List[Violation] = []
    for group in DETECTOR_GROUPS:
        if group.applies_to(kind):
            violations.extend(group.module.run(content))
    return violations


def scan_content(content: str, file_path: str) -> ScanResult:
    violations = analyze(content, file_path)
    return ScanResult(
        file_path=file_path,
        file_kind=classify(file_path),
        file_type=file_type_label(file_path),
        content=content,
        violations=tuple(violations),
        statistics=ScanStatistics.from_violations(violations),
        metadata=ScanMetadata(
            line_count=content.count("\n") + 1,
            analyzed_at=datetime.now(timezone.utc).isoformat(),
        ),
    )


def scan_file(file_path: str) -> ScanResult:
    if not os.path.exists(file_path):
        raise NotFoundError(file_path)
    try:
        with open(file_path, "r", encoding="utf-8", errors="ignore") as f:
            content = f.read()
    except OSError as e:
        raise ScanError(f"Could not read {file_path}: {e}") from e
    return scan_content(content, file_path)


def scan_batch(files: Mapping[str, str]) -> List[ScanResult]:
    """Scan in-memory files given as ``{path: content}``."""
    return [scan_content(content, path) for path, content in files.items()]


def suggest_fix(rule_id: str, code: str = "") -> FixSuggestion:
    for rule in rules():
        if rule.id == rule_id:
            return FixSuggestion(
                rule_id=rule.id,
                title=rule.title,
                help=rule.help,
                wcag_criteria=rule.wcag_criteria,
                fix_suggestions=rule.fix_suggestions,
                code=code,
            )
    raise UnknownRuleError(rule_id)
