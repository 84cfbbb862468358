"""Shared fixtures for the accessibility scanner test suite."""

import os
import tempfile

import pytest

from a11y_scanner.models import Rule, Severity


# ---------------------------------------------------------------------------
# Sample sources
# ---------------------------------------------------------------------------

ACCESSIBLE_PAGE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <title>Account settings</title>
</head>
<body>
  <img src="logo.png" alt="Company logo">
  <label for="email">Email</label>
  <input type="email" id="email">
  <button type="submit">Save</button>
  <a href="/privacy">Read the privacy policy</a>
</body>
</html>
"""

BROKEN_PAGE = """\
<html>
<head></head>
<body>
  <img src="hero.png">
  <div onclick="openMenu()">Menu</div>
  <button></button>
  <input type="text">
  <a href="/more">Read more</a>
  <iframe src="https://example.com/map"></iframe>
</body>
</html>
"""

BROKEN_COMPONENT = """\
export function Toolbar({ onClose }) {
  return (
    <div onClick={onClose}>
      <img src={icon} />
      <button><i className="icon-close" /></button>
    </div>
  );
}
"""

BROKEN_STYLESHEET = """\
.btn { width: 30px; }
.nav-menu { display: none; }
p { font-size: 9px; }
small { font-size: 11px; }
.ghost { color: transparent; }
button.disabled { pointer-events: none; }
.link { outline: none; }
"""

ACCESSIBLE_STYLESHEET = """\
body { font-size: 16px; color: #222; }
button:focus-visible { box-shadow: 0 0 0 3px rgba(0, 0, 255, 0.4); }
"""


@pytest.fixture
def accessible_page():
    return ACCESSIBLE_PAGE


@pytest.fixture
def broken_page():
    return BROKEN_PAGE


@pytest.fixture
def broken_component():
    return BROKEN_COMPONENT


@pytest.fixture
def broken_stylesheet():
    return BROKEN_STYLESHEET


@pytest.fixture
def accessible_stylesheet():
    return ACCESSIBLE_STYLESHEET


# ---------------------------------------------------------------------------
# Files on disk
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir():
    with tempfile.TemporaryDirectory() as tmp:
        yield tmp


@pytest.fixture
def write_file(workdir):
    """Write ``content`` to ``name`` inside the temp dir and return the path."""
    def _write(name: str, content: str) -> str:
        path = os.path.join(workdir, name)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path
    return _write


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_rule():
    return Rule(
        id="sample-rule",
        severity=Severity.WARNING,
        wcag_criteria=("1.1.1",),
        title="Sample",
        description="Default description",
        help="Do the thing",
        fix_suggestions=("First fix", "Second fix"),
        tags=("wcag-a",),
    )
