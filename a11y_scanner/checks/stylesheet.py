"""Stylesheet checks: focus indicators, text size, touch targets, hidden controls."""

import re
from typing import List, Tuple

from a11y_scanner.matching import Matches
from a11y_scanner.models import Rule, Severity, Violation

MISSING_FOCUS_STYLES = Rule(
    id="missing-focus-styles",
    severity=Severity.WARNING,
    wcag_criteria=("2.4.7",),
    title="No focus styles defined",
    description="CSS should include :focus styles for keyboard navigation",
    help="Add :focus and :focus-visible styles",
    fix_suggestions=(
        "Add :focus styles for interactive elements",
        "Use :focus-visible for better UX",
    ),
    tags=("wcag-aa", "focus", "keyboard"),
)

OUTLINE_NONE = Rule(
    id="outline-none-no-alternative",
    severity=Severity.ERROR,
    wcag_criteria=("2.4.7",),
    title="Removed focus outline without alternative",
    description=(
        "outline: none or outline: 0 removes keyboard focus indicator "
        "without providing an alternative"
    ),
    help="Provide alternative focus indicator (box-shadow, border, etc.)",
    fix_suggestions=(
        "Add custom focus style: button:focus { box-shadow: 0 0 0 3px rgba(0,0,255,0.3); }",
        "Or remove outline: none to keep default focus indicator",
    ),
    tags=("wcag-aa", "focus"),
)

FONT_SIZE_TOO_SMALL = Rule(
    id="font-size-too-small",
    severity=Severity.ERROR,
    wcag_criteria=("1.4.4",),
    title="Font size too small for readability",
    description="Font size is below minimum readable size (12px minimum, 16px recommended)",
    help="Increase font size to at least 12px, preferably 16px",
    fix_suggestions=(
        "Change font-size to at least 12px: font-size: 12px;",
        "For body text, use 16px or larger",
        "Use relative units (rem, em) for better scalability",
    ),
    tags=("wcag-aa", "typography"),
)

FONT_SIZE_SMALL = Rule(
    id="font-size-small",
    severity=Severity.WARNING,
    wcag_criteria=("1.4.4",),
    title="Font size may be too small",
    description="Font size is below recommended minimum (12px minimum, 16px recommended)",
    help="Consider increasing font size for better readability",
    fix_suggestions=(
        "Increase to at least 12px: font-size: 12px;",
        "For body text, use 16px or larger",
    ),
    tags=("wcag-aa", "typography"),
)

TOUCH_TARGET_TOO_SMALL = Rule(
    id="touch-target-too-small",
    severity=Severity.ERROR,
    wcag_criteria=("2.5.5",),
    title="Touch target too small",
    description="Size is below WCAG minimum of 44x44px for touch targets",
    help="Increase touch target size to at least 44x44px",
    fix_suggestions=(
        "Increase the dimension to at least 44px",
        "Add padding to increase effective touch target size",
        "Ensure both width and height meet 44px minimum",
    ),
    tags=("wcag-aa", "touch-targets"),
)

DISPLAY_NONE_INTERACTIVE = Rule(
    id="display-none-on-interactive",
    severity=Severity.WARNING,
    wcag_criteria=("2.1.1", "4.1.2"),
    title="display: none may hide interactive content from screen readers",
    description="Using display: none may hide content from assistive technologies",
    help="Use visually-hidden technique instead of display: none for screen reader content",
    fix_suggestions=(
        "Use .sr-only or visually-hidden class instead",
        "Example: .visually-hidden { position: absolute; width: 1px; height: 1px; "
        "clip: rect(0,0,0,0); overflow: hidden; }",
    ),
    tags=("wcag-a", "screen-readers"),
)

TEXT_TRANSPARENT = Rule(
    id="text-transparent",
    severity=Severity.ERROR,
    wcag_criteria=("1.4.3",),
    title="Text color is transparent",
    description="Transparent text color makes content invisible",
    help="Use visible text color or ensure content is accessible via other means",
    fix_suggestions=(
        "Use a visible color: color: #333;",
        "If hiding text visually, ensure it's available to screen readers",
    ),
    tags=("wcag-aa", "color"),
)

POINTER_EVENTS_NONE = Rule(
    id="pointer-events-none",
    severity=Severity.ERROR,
    wcag_criteria=("2.1.1", "2.5.3"),
    title="pointer-events: none disables keyboard interaction",
    description=(
        "pointer-events: none on interactive elements prevents keyboard "
        "and touch interaction"
    ),
    help="Remove pointer-events: none or use alternative method",
    fix_suggestions=(
        "Remove pointer-events: none from interactive elements",
        "Use disabled attribute for form elements instead",
        "Ensure keyboard navigation still works",
    ),
    tags=("wcag-a", "keyboard"),
)

RULES = (
    MISSING_FOCUS_STYLES,
    OUTLINE_NONE,
    FONT_SIZE_TOO_SMALL,
    FONT_SIZE_SMALL,
    TOUCH_TARGET_TOO_SMALL,
    DISPLAY_NONE_INTERACTIVE,
    TEXT_TRANSPARENT,
    POINTER_EVENTS_NONE,
)

FOCUS_SELECTOR = re.compile(r":focus", re.IGNORECASE)
OUTLINE_DISABLED = re.compile(r"outline\s*:\s*(none|0)(\s*!important)?\s*[;!]", re.IGNORECASE)
ALTERNATIVE_INDICATOR = re.compile(
    r"(box-shadow\s*:|border\s*[:\-]|outline\s*:\s*"
    r"(2|3|4|5|auto|dotted|dashed|solid|double|groove|ridge|inset|outset|\d+px))",
    re.IGNORECASE,
)
FOCUS_RULE_DISABLING_OUTLINE = re.compile(
    r":focus[^}]*\{[^}]*outline\s*:\s*(none|0)", re.IGNORECASE
)
FONT_SIZE_PX = re.compile(r"font-size\s*:\s*(\d+(?:\.\d+)?)\s*px", re.IGNORECASE)
DIMENSION_PX = re.compile(
    r"(width|height|min-width|min-height)\s*:\s*(\d+(?:\.\d+)?)\s*px", re.IGNORECASE
)
NESTED_BLOCK = re.compile(r"\{[^{}]*\}")
SELECTOR_OPENING = re.compile(r"([.#]?[\w-]+)\s*\{")
CLASS_DISPLAY_NONE = re.compile(r"\.([\w-]+)\s*\{[^}]*display\s*:\s*none", re.IGNORECASE)
COLOR_TRANSPARENT = re.compile(r"color\s*:\s*transparent", re.IGNORECASE)
INTERACTIVE_POINTER_EVENTS_NONE = re.compile(
    r"(button|a|input|select|textarea)[^}]*\{[^}]*pointer-events\s*:\s*none",
    re.IGNORECASE,
)

FALLBACK_WINDOW = 200
MIN_FONT_SIZE_PX = 10
RECOMMENDED_FONT_SIZE_PX = 12
MIN_TOUCH_TARGET_PX = 44
EXCERPT_LIMIT = 100

TOUCH_SELECTOR_TOKENS = ("button", "btn", "link", "a", "input", "click")
HIDDEN_CLASS_TOKENS = ("button", "btn", "link", "menu", "nav", "interactive")


def _enclosing_rule(content: str, index: int) -> Tuple[str, str, bool]:
    """Locate the rule block around ``index``.

    Returns ``(selector, block, matched)``. ``block`` runs from the nearest
    unmatched ``{`` before ``index`` to the next ``}`` after it, minus any
    nested child rules. When either brace is missing, ``block`` is a fixed
    window around ``index``, the selector is empty and ``matched`` is False.
    """
    depth = 0
    start = -1
    for i in range(index - 1, -1, -1):
        ch = content[i]
        if ch == "}":
            depth += 1
        elif ch == "{":
            if depth == 0:
                start = i
                break
            depth -= 1

    end = content.find("}", index)
    if start == -1 or end == -1:
        lo = max(0, index - FALLBACK_WINDOW)
        hi = min(len(content), index + FALLBACK_WINDOW)
        return "", content[lo:hi], False

    selector_start = max(
        content.rfind("}", 0, start),
        content.rfind("{", 0, start),
        content.rfind(";", 0, start),
    ) + 1
    return content[selector_start:start].strip(), _own_declarations(content[start:end]), True


def _own_declarations(block: str) -> str:
    """Drop nested child rules so only the block's own declarations remain."""
    body = block[1:]
    while True:
        stripped = NESTED_BLOCK.sub("", body)
        if stripped == body:
            return "{" + body
        body = stripped


def _selector_on_line(content: str, index: int) -> str:
    line_start = content.rfind("\n", 0, index) + 1
    match = SELECTOR_OPENING.search(content[line_start:index])
    return match.group(1) if match else "unknown"


def check_focus_styles(content: str) -> List[Violation]:
    if FOCUS_SELECTOR.search(content):
        return []
    return [MISSING_FOCUS_STYLES.violation(1, "")]


def check_outline_removal(content: str) -> List[Violation]:
    findings: List[Violation] = []
    for span in Matches(OUTLINE_DISABLED, content):
        selector, block, matched = _enclosing_rule(content, span.start)
        has_alternative = ALTERNATIVE_INDICATOR.search(block) is not None
        if matched:
            in_focus_rule = FOCUS_SELECTOR.search(selector) is not None
        else:
            in_focus_rule = FOCUS_RULE_DISABLING_OUTLINE.search(block) is not None
        if not has_alternative or in_focus_rule:
            findings.append(OUTLINE_NONE.violation(span.line, span.text, span.column))
    return findings


def check_font_sizes(content: str) -> List[Violation]:
    findings: List[Violation] = []
    for span in Matches(FONT_SIZE_PX, content):
        size = float(span.group(1))
        if size < MIN_FONT_SIZE_PX:
            findings.append(FONT_SIZE_TOO_SMALL.violation(
                span.line, span.text, span.column,
                description=(
                    f"Font size {size:g}px is below minimum readable size "
                    "(12px minimum, 16px recommended)"
                ),
            ))
        elif size < RECOMMENDED_FONT_SIZE_PX:
            findings.append(FONT_SIZE_SMALL.violation(
                span.line, span.text, span.column,
                description=(
                    f"Font size {size:g}px is below recommended minimum "
                    "(12px minimum, 16px recommended)"
                ),
            ))
    return findings


def check_touch_targets(content: str) -> List[Violation]:
    findings: List[Violation] = []
    for span in Matches(DIMENSION_PX, content):
        prop, size = span.group(1), float(span.group(2))
        if size >= MIN_TOUCH_TARGET_PX:
            continue
        selector = _selector_on_line(content, span.start)
        if not any(token in selector for token in TOUCH_SELECTOR_TOKENS):
            continue
        findings.append(TOUCH_TARGET_TOO_SMALL.violation(
            span.line, span.text, span.column,
            description=(
                f"{prop} of {size:g}px is below WCAG minimum of 44x44px for touch targets"
            ),
            fix_suggestions=(
                f"Increase {prop} to at least 44px: {prop}: 44px;",
                "Add padding to increase effective touch target size",
                "Ensure both width and height meet 44px minimum",
            ),
        ))
    return findings


def check_hidden_interactive(content: str) -> List[Violation]:
    findings: List[Violation] = []
    for span in Matches(CLASS_DISPLAY_NONE, content):
        class_name = span.group(1)
        if any(token in class_name for token in HIDDEN_CLASS_TOKENS):
            findings.append(DISPLAY_NONE_INTERACTIVE.violation(
                span.line, span.text, span.column,
                description=(
                    f'Using display: none on "{class_name}" may hide content '
                    "from assistive technologies"
                ),
            ))
    return findings


def check_transparent_text(content: str) -> List[Violation]:
    return [
        TEXT_TRANSPARENT.violation(span.line, span.text, span.column)
        for span in Matches(COLOR_TRANSPARENT, content)
    ]


def check_pointer_events(content: str) -> List[Violation]:
    span = Matches(INTERACTIVE_POINTER_EVENTS_NONE, content).first()
    if span is None:
        return []
    return [POINTER_EVENTS_NONE.violation(span.line, span.text[:EXCERPT_LIMIT], span.column)]


DETECTORS = (
    check_focus_styles,
    check_outline_removal,
    check_font_sizes,
    check_touch_targets,
    check_hidden_interactive,
    check_transparent_text,
    check_pointer_events,
)


def run(content: str) -> List[Violation]:
    findings: List[Violation] = []
    for detector in DETECTORS:
        findings.extend(detector(content))
    return findings
