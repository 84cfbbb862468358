"""Markup checks shared by components, scripts and HTML pages."""

import re
from typing import List

from a11y_scanner.matching import Matches
from a11y_scanner.models import Rule, Severity, Violation

IMG_MISSING_ALT = Rule(
    id="img-missing-alt",
    severity=Severity.ERROR,
    wcag_criteria=("1.1.1",),
    title="Image missing alt attribute",
    description="All images must have an alt attribute for screen readers",
    help="Add alt attribute with meaningful description",
    fix_suggestions=('Add alt="description" to the image tag',),
    tags=("wcag-a", "images"),
)

DIV_BUTTON = Rule(
    id="div-button",
    severity=Severity.ERROR,
    wcag_criteria=("1.3.1", "4.1.2"),
    title="Interactive div should be a button",
    description="Div with click handler should be a semantic button element",
    help="Replace with <button> or add proper ARIA role and keyboard support",
    fix_suggestions=(
        "Replace <div onClick> with <button>",
        'Add role="button" tabIndex="0" and keyboard handlers if div is required',
    ),
    tags=("wcag-a", "semantic-html", "keyboard"),
)

BUTTON_MISSING_NAME = Rule(
    id="button-missing-accessible-name",
    severity=Severity.ERROR,
    wcag_criteria=("4.1.2",),
    title="Button has no accessible name",
    description="Button must have text content or aria-label",
    help="Add visible text or aria-label attribute",
    fix_suggestions=(
        "Add text inside the button",
        'Add aria-label="description" attribute',
    ),
    tags=("wcag-a", "buttons"),
)

INPUT_MISSING_LABEL = Rule(
    id="input-missing-label",
    severity=Severity.ERROR,
    wcag_criteria=("1.3.1", "3.3.2"),
    title="Form input missing label",
    description="All form inputs must have an associated label",
    help="Add a <label> element or aria-label attribute",
    fix_suggestions=(
        '<label for="inputId">Label text</label>',
        'Add aria-label="description" to the input',
    ),
    tags=("wcag-a", "forms"),
)

INPUT_NO_ID_OR_LABEL = Rule(
    id="input-no-id-or-label",
    severity=Severity.ERROR,
    wcag_criteria=("1.3.1", "3.3.2"),
    title="Form input has no label or id",
    description="Input needs an id with matching label or aria-label",
    help="Add id and <label for> or aria-label",
    fix_suggestions=(
        'Add id="inputId" and <label for="inputId">Label</label>',
        'Add aria-label="description"',
    ),
    tags=("wcag-a", "forms"),
)

LINK_NON_DESCRIPTIVE = Rule(
    id="link-non-descriptive",
    severity=Severity.WARNING,
    wcag_criteria=("2.4.4",),
    title="Link text not descriptive",
    description="Link text is not meaningful out of context",
    help="Use descriptive link text that makes sense when read alone",
    fix_suggestions=(
        'Use descriptive text like "Read the full article" instead of "Read more"',
        "Add aria-label with descriptive text",
    ),
    tags=("wcag-aa", "links"),
)

RULES = (
    IMG_MISSING_ALT,
    DIV_BUTTON,
    BUTTON_MISSING_NAME,
    INPUT_MISSING_LABEL,
    INPUT_NO_ID_OR_LABEL,
    LINK_NON_DESCRIPTIVE,
)

IMG_TAG = re.compile(r"<img[^>]*>", re.IGNORECASE)
CLICKABLE_DIV = re.compile(r"<div[^>]*(onclick|onClick)[^>]*>", re.IGNORECASE)
BUTTON_ELEMENT = re.compile(r"<button[^>]*>([\s\S]*?)</button>", re.IGNORECASE)
INPUT_TAG = re.compile(r"<input[^>]*>", re.IGNORECASE)
LINK_ELEMENT = re.compile(r"<a[^>]*>(.*?)</a>", re.IGNORECASE)

HTML_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)
ANY_TAG = re.compile(r"<[^>]+>")
ID_ATTR = re.compile(r"""id=["']([^"']+)["']""")
TYPE_ATTR = re.compile(r"""type=["']([^"']+)["']""")

UNLABELED_INPUT_TYPES = {"hidden", "submit", "button"}
NON_DESCRIPTIVE_LINK_TEXT = {"click here", "here", "read more", "more", "link"}


def _strip_tags(markup: str) -> str:
    return ANY_TAG.sub("", markup).strip()


def check_images(content: str) -> List[Violation]:
    return [
        IMG_MISSING_ALT.violation(span.line, span.text, span.column)
        for span in Matches(IMG_TAG, content)
        if "alt=" not in span.text
    ]


def check_clickable_divs(content: str) -> List[Violation]:
    return [
        DIV_BUTTON.violation(span.line, span.text, span.column)
        for span in Matches(CLICKABLE_DIV, content)
    ]


def check_buttons(content: str) -> List[Violation]:
    findings: List[Violation] = []
    for span in Matches(BUTTON_ELEMENT, content):
        text = _strip_tags(HTML_COMMENT.sub("", span.group(1)))
        if not text and "aria-label" not in span.text:
            findings.append(BUTTON_MISSING_NAME.violation(span.line, span.text, span.column))
    return findings


def check_inputs(content: str) -> List[Violation]:
    findings: List[Violation] = []
    for span in Matches(INPUT_TAG, content):
        tag = span.text
        type_match = TYPE_ATTR.search(tag)
        input_type = type_match.group(1) if type_match else "text"
        if input_type in UNLABELED_INPUT_TYPES:
            continue
        if "aria-label" in tag or "aria-labelledby" in tag:
            continue

        id_match = ID_ATTR.search(tag)
        if id_match:
            input_id = id_match.group(1)
            label = re.compile(
                rf"""<label[^>]*for=["']{re.escape(input_id)}["'][^>]*>""",
                re.IGNORECASE,
            )
            if label.search(content):
                continue
            findings.append(INPUT_MISSING_LABEL.violation(
                span.line, tag, span.column,
                fix_suggestions=(
                    f'Add <label for="{input_id}">Label text</label>',
                    'Add aria-label="description" to the input',
                ),
            ))
        else:
            findings.append(INPUT_NO_ID_OR_LABEL.violation(span.line, tag, span.column))
    return findings


def check_links(content: str) -> List[Violation]:
    findings: List[Violation] = []
    for span in Matches(LINK_ELEMENT, content):
        link_text = _strip_tags(span.group(1)).lower()
        if link_text in NON_DESCRIPTIVE_LINK_TEXT:
            findings.append(LINK_NON_DESCRIPTIVE.violation(
                span.line, span.text, span.column,
                description=f'Link text "{link_text}" is not meaningful out of context',
            ))
    return findings


DETECTORS = (
    check_images,
    check_clickable_divs,
    check_buttons,
    check_inputs,
    check_links,
)


def run(content: str) -> List[Violation]:
    findings: List[Violation] = []
    for detector in DETECTORS:
        findings.extend(detector(content))
    return findings
