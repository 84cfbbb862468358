"""Human-readable and structured renderings of a scan result."""

import json
from typing import Any, Dict, List

from a11y_scanner.models import ScanResult, Violation


def format_human(result: ScanResult) -> str:
    lines = [
        "",
        f"📄 File: {result.file_path}",
        f"🗂️  File Type: {result.file_type.upper()}",
        f"📊 Lines: {result.metadata.line_count}",
    ]

    if not result.violations:
        lines.append("✅ Result: No accessibility violations found! 🎉")
    else:
        lines.append(
            f"❌ Result: Found {len(result.violations)} accessibility violation(s):"
        )
        lines.append("")
        for index, violation in enumerate(result.violations, start=1):
            lines.extend(_format_violation(index, violation))
            lines.append("")

        stats = result.statistics
        lines.extend([
            "",
            "📈 Statistics:",
            f"   Errors: {stats.errors}",
            f"   Warnings: {stats.warnings}",
            f"   Estimated fix time: {stats.estimated_fix_time}",
        ])

    lines.append("─" * 80)
    return "\n".join(lines)


def _format_violation(index: int, violation: Violation) -> List[str]:
    lines = [
        f"   {index}. [{violation.severity.value.upper()}] {violation.title}",
        f"      📍 Line: {violation.line}",
        f"      📝 {violation.description}",
        f"      🔧 {violation.help}",
        f"      📚 WCAG: {', '.join(violation.wcag_criteria)}",
    ]
    if violation.fix_suggestions:
        lines.append("      💡 Suggestions:")
        lines.extend(f"         - {s}" for s in violation.fix_suggestions)
    return lines


def to_structured(result: ScanResult) -> Dict[str, Any]:
    """Field-stable record consumed by CI and the review poster."""
    stats = result.statistics
    return {
        "file": result.file_path,
        "type": result.file_type,
        "violations": [
            {
                "id": v.id,
                "severity": v.severity.value,
                "title": v.title,
                "description": v.description,
                "line": v.line,
                "wcag": list(v.wcag_criteria),
                "fix": v.help,
            }
            for v in result.violations
        ],
        "summary": {
            "totalViolations": stats.total_violations,
            "errors": stats.errors,
            "warnings": stats.warnings,
            "info": stats.info,
            "estimatedFixTime": stats.estimated_fix_time,
        },
    }


def format_structured(result: ScanResult) -> str:
    return json.dumps(to_structured(result), indent=2, ensure_ascii=False)
