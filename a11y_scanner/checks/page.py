"""Document-level checks for full HTML pages."""

import re
from typing import List

from a11y_scanner.matching import Matches
from a11y_scanner.models import Rule, Severity, Violation

HTML_MISSING_LANG = Rule(
    id="html-missing-lang",
    severity=Severity.ERROR,
    wcag_criteria=("3.1.1",),
    title="HTML missing lang attribute",
    description="The <html> element must have a lang attribute",
    help="Add lang attribute to specify page language",
    fix_suggestions=('Add lang="en" to <html> tag',),
    tags=("wcag-a", "language"),
)

HTML_MISSING_TITLE = Rule(
    id="html-missing-title",
    severity=Severity.ERROR,
    wcag_criteria=("2.4.2",),
    title="Page missing title",
    description="Every HTML page must have a descriptive <title>",
    help="Add <title> element in <head>",
    fix_suggestions=("Add <title>Page Title</title> in the <head> section",),
    tags=("wcag-a", "title"),
)

IFRAME_MISSING_TITLE = Rule(
    id="iframe-missing-title",
    severity=Severity.ERROR,
    wcag_criteria=("2.4.1", "4.1.2"),
    title="Iframe missing title",
    description="All iframes must have a title attribute",
    help="Add title attribute describing iframe content",
    fix_suggestions=('Add title="description" to iframe',),
    tags=("wcag-a", "iframe"),
)

RULES = (HTML_MISSING_LANG, HTML_MISSING_TITLE, IFRAME_MISSING_TITLE)

HTML_TAG = re.compile(r"<html[^>]*>", re.IGNORECASE)
HTML_LANG = re.compile(r"<html[^>]*lang=", re.IGNORECASE)
TITLE_ELEMENT = re.compile(r"<title[^>]*>([\s\S]*?)</title>", re.IGNORECASE)
IFRAME_TAG = re.compile(r"<iframe[^>]*>", re.IGNORECASE)


def check_language(content: str) -> List[Violation]:
    if HTML_LANG.search(content):
        return []
    html_tag = HTML_TAG.search(content)
    return [HTML_MISSING_LANG.violation(1, html_tag.group(0) if html_tag else "<html>")]


def check_title(content: str) -> List[Violation]:
    for span in Matches(TITLE_ELEMENT, content):
        if span.group(1).strip():
            return []
    return [HTML_MISSING_TITLE.violation(1, "<head>")]


def check_iframes(content: str) -> List[Violation]:
    return [
        IFRAME_MISSING_TITLE.violation(span.line, span.text, span.column)
        for span in Matches(IFRAME_TAG, content)
        if "title=" not in span.text
    ]


DETECTORS = (check_language, check_title, check_iframes)


def run(content: str) -> List[Violation]:
    findings: List[Violation] = []
    for detector in DETECTORS:
        findings.extend(detector(content))
    return findings
