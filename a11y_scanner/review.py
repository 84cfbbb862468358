"""Pull-request glue for the accessibility scanner.

``a11y-review files`` prints the pull request's changed files that the scanner
understands, one per line, ready to feed to ``a11y-scan-parallel``.
``a11y-review post`` reads the structured artifacts of a batch run and posts
them back to the pull request as a review.
"""

import glob
import json
import os
import sys
from collections import Counter
from typing import Any, Dict, List

from github import Github, GithubException

from a11y_scanner.classifier import is_supported

SEVERITY_ORDER = {"error": 0, "warning": 1, "info": 2}
SEVERITY_ICONS = {"error": "🔴", "warning": "🟡", "info": "🔵"}


def changed_files(gh: Github, repo_name: str, pr_number: int) -> List[str]:
    """Supported files added or modified by the pull request."""
    pr = gh.get_repo(repo_name).get_pull(pr_number)
    return [
        f.filename for f in pr.get_files()
        if f.status != "removed" and is_supported(f.filename)
    ]


def load_reports(artifact_dir: str) -> List[Dict[str, Any]]:
    reports = []
    for path in sorted(glob.glob(os.path.join(artifact_dir, "*.json"))):
        try:
            with open(path, "r", encoding="utf-8") as f:
                reports.append(json.load(f))
        except (OSError, json.JSONDecodeError) as e:
            print(f"⚠️ Skipping unreadable report {path}: {e}")
    return reports


def _all_violations(reports: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [
        dict(v, file=report.get("file", "?"))
        for report in reports
        for v in report.get("violations", [])
    ]


def _severity_rows(violations: List[Dict[str, Any]]) -> List[str]:
    counts = Counter(v.get("severity", "info") for v in violations)
    rows = ["| Severity | Count |", "|---|---|"]
    for sev in sorted(counts, key=lambda s: SEVERITY_ORDER.get(s, 2)):
        rows.append(f"| {SEVERITY_ICONS.get(sev, '🔵')} {sev} | {counts[sev]} |")
    return rows


def _finding_line(v: Dict[str, Any]) -> str:
    icon = SEVERITY_ICONS.get(v.get("severity", "info"), "🔵")
    wcag = ", ".join(v.get("wcag", [])) or "n/a"
    return (
        f"- {icon} L{v.get('line', '?')} **{v.get('title', 'Issue')}** "
        f"(WCAG {wcag}): {v.get('description', '')} Fix: {v.get('fix', '')}"
    )


def build_review_body(reports: List[Dict[str, Any]], max_comments: int) -> str:
    """Markdown body: a severity table, then findings grouped by file.

    Only the first ``max_comments`` findings are listed; the rest are counted.
    """
    violations = _all_violations(reports)
    lines = ["## Accessibility Review", "", f"Scanned {len(reports)} file(s)."]
    if not violations:
        lines += ["", "✅ No accessibility issues found"]
        return "\n".join(lines) + "\n"

    lines += [""] + _severity_rows(violations)

    shown = violations[:max(0, max_comments)]
    current_file = None
    for v in shown:
        if v["file"] != current_file:
            current_file = v["file"]
            lines += ["", f"### `{current_file}`", ""]
        lines.append(_finding_line(v))

    hidden = len(violations) - len(shown)
    if hidden:
        lines += ["", f"{hidden} more finding(s) not shown."]
    return "\n".join(lines) + "\n"


def is_blocking(reports: List[Dict[str, Any]], fail_on: str) -> bool:
    threshold = SEVERITY_ORDER.get(fail_on, 0)
    return any(
        SEVERITY_ORDER.get(v.get("severity", "info"), 2) <= threshold
        for v in _all_violations(reports)
    )


def post_review(pr, reports: List[Dict[str, Any]], max_comments: int, fail_on: str) -> bool:
    """Post the batch findings on ``pr``.

    Returns False when the review could not be created and the body went out
    as a plain issue comment instead.
    """
    event = "REQUEST_CHANGES" if is_blocking(reports, fail_on) else "COMMENT"
    body = build_review_body(reports, max_comments)

    try:
        pr.create_review(body=body, event=event)
    except GithubException as e:
        print(f"⚠️ Could not create {event} review ({e}); posting as a comment instead.")
        pr.create_issue_comment(body)
        return False

    print(f"✅ {event} review posted for {len(_all_violations(reports))} finding(s)")
    return True


def main() -> None:
    command = sys.argv[1] if len(sys.argv) > 1 else ""
    if command not in ("files", "post"):
        print("Usage: a11y-review files|post")
        sys.exit(2)

    github_token = os.environ.get("GITHUB_TOKEN", "")
    repo_name = os.environ.get("REPO_FULL_NAME", "")
    pr_number = os.environ.get("PR_NUMBER", "")

    for name, value in (
        ("GITHUB_TOKEN", github_token),
        ("REPO_FULL_NAME", repo_name),
        ("PR_NUMBER", pr_number),
    ):
        if not value:
            print(f"Error: {name} environment variable is required.")
            sys.exit(1)

    gh = Github(github_token)

    if command == "files":
        try:
            for filename in changed_files(gh, repo_name, int(pr_number)):
                print(filename)
        except GithubException as e:
            print(f"Error fetching pull request files: {e}", file=sys.stderr)
            sys.exit(1)
        return

    artifact_dir = os.environ.get("ARTIFACT_DIR", "a11y-results")
    fail_on = os.environ.get("FAIL_ON", "error")
    max_comments = int(os.environ.get("MAX_COMMENTS", "10"))

    reports = load_reports(artifact_dir)
    print(f"📄 Loaded {len(reports)} report(s) from {artifact_dir}")

    try:
        pr = gh.get_repo(repo_name).get_pull(int(pr_number))
    except GithubException as e:
        print(f"Error accessing pull request {repo_name}#{pr_number}: {e}")
        sys.exit(1)

    post_review(pr, reports, max_comments, fail_on)


if __name__ == "__main__":
    main()
