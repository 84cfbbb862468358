"""Tests for a11y_scanner.checks.stylesheet."""

from a11y_scanner.checks.stylesheet import (
    run,
    check_focus_styles,
    check_outline_removal,
    check_font_sizes,
    check_touch_targets,
    check_hidden_interactive,
    check_transparent_text,
    check_pointer_events,
)
from a11y_scanner.models import Severity


class TestFocusStyles:
    def test_missing_focus_styles(self):
        findings = check_focus_styles(".card { color: red; }")
        assert [f.id for f in findings] == ["missing-focus-styles"]
        assert findings[0].severity == Severity.WARNING
        assert findings[0].line == 1

    def test_focus_visible_counts(self):
        assert check_focus_styles("a:focus-visible { outline: 2px solid; }") == []


class TestOutlineRemoval:
    def test_outline_none_inside_focus_rule(self):
        findings = run("button:focus { outline: none; }")
        assert [f.id for f in findings] == ["outline-none-no-alternative"]
        assert findings[0].severity == Severity.ERROR

    def test_focus_rule_flagged_even_with_alternative(self):
        css = "a:focus { outline: none; box-shadow: 0 0 0 3px blue; }"
        assert len(check_outline_removal(css)) == 1

    def test_box_shadow_alternative_outside_focus_rule(self):
        css = ".card { outline: none; box-shadow: 0 0 0 3px blue; }"
        assert check_outline_removal(css) == []

    def test_border_alternative(self):
        css = ".field { outline: 0; border: 2px solid #005fcc; }"
        assert check_outline_removal(css) == []

    def test_outline_zero_important(self):
        findings = check_outline_removal("a { outline: 0 !important; }")
        assert len(findings) == 1
        assert findings[0].code == "outline: 0 !important;"

    def test_alternative_in_sibling_rule_does_not_count(self):
        css = ".a { border: 1px solid; }\n.b { outline: none; }"
        findings = check_outline_removal(css)
        assert len(findings) == 1
        assert findings[0].line == 2

    def test_nested_block_uses_enclosing_rule(self):
        css = ".nav {\n  .item { border: 1px solid; }\n  outline: none;\n}"
        findings = check_outline_removal(css)
        assert len(findings) == 1
        assert findings[0].line == 3

    def test_fallback_window_without_braces(self):
        assert len(check_outline_removal("outline: none;")) == 1
        assert check_outline_removal("outline: none; box-shadow: 0 0 2px red;") == []

    def test_non_zero_outline_not_matched(self):
        assert check_outline_removal(".a { outline: 2px solid; }") == []


class TestFontSizes:
    def test_eight_px_is_error(self):
        findings = check_font_sizes("p { font-size: 8px; }")
        assert [f.id for f in findings] == ["font-size-too-small"]
        assert findings[0].severity == Severity.ERROR
        assert "8px" in findings[0].description

    def test_eleven_px_is_warning(self):
        findings = check_font_sizes("small { font-size: 11px; }")
        assert [f.id for f in findings] == ["font-size-small"]
        assert findings[0].severity == Severity.WARNING

    def test_fourteen_px_is_fine(self):
        assert check_font_sizes("p { font-size: 14px; }") == []

    def test_boundaries(self):
        assert [f.id for f in check_font_sizes("a { font-size: 9.5px; }")] == ["font-size-too-small"]
        assert [f.id for f in check_font_sizes("a { font-size: 10px; }")] == ["font-size-small"]
        assert check_font_sizes("a { font-size: 12px; }") == []

    def test_relative_units_ignored(self):
        assert check_font_sizes("p { font-size: 0.5rem; }") == []


class TestTouchTargets:
    def test_small_button_flagged(self):
        findings = check_touch_targets(".btn { width: 30px; }")
        assert len(findings) == 1
        assert findings[0].id == "touch-target-too-small"
        assert findings[0].description.startswith("width of 30px")
        assert findings[0].fix_suggestions[0] == "Increase width to at least 44px: width: 44px;"

    def test_min_size_not_flagged(self):
        assert check_touch_targets(".btn { width: 44px; height: 48px; }") == []

    def test_non_interactive_selector_not_flagged(self):
        assert check_touch_targets(".box { width: 20px; }") == []

    def test_selector_must_be_on_same_line(self):
        assert check_touch_targets(".btn {\n  height: 20px;\n}") == []


class TestHiddenInteractive:
    def test_hidden_menu_flagged(self):
        findings = check_hidden_interactive(".nav-menu { display: none; }")
        assert len(findings) == 1
        assert '"nav-menu"' in findings[0].description

    def test_hidden_tooltip_not_flagged(self):
        assert check_hidden_interactive(".tooltip { display: none; }") == []


class TestTransparentText:
    def test_color_transparent(self):
        findings = check_transparent_text(".ghost { color: transparent; }")
        assert [f.id for f in findings] == ["text-transparent"]

    def test_any_transparent_color_property_flagged(self):
        css = ".x { background-color: transparent; }\n.y { border-color: transparent; }"
        findings = check_transparent_text(css)
        assert [f.line for f in findings] == [1, 2]
        assert findings[0].code == "color: transparent"

    def test_visible_color_not_flagged(self):
        assert check_transparent_text(".x { color: #333; }") == []


class TestPointerEvents:
    def test_only_first_match_reported(self):
        css = "button.disabled { pointer-events: none; }\ninput.off { pointer-events: none; }"
        findings = check_pointer_events(css)
        assert len(findings) == 1
        assert findings[0].line == 1

    def test_excerpt_truncated(self):
        css = "button" + ".x" * 80 + " { pointer-events: none; }"
        findings = check_pointer_events(css)
        assert len(findings[0].code) == 100

    def test_non_interactive_element(self):
        assert check_pointer_events("div { pointer-events: none; }") == []


class TestRun:
    def test_full_stylesheet(self, broken_stylesheet):
        findings = run(broken_stylesheet)
        assert [f.id for f in findings] == [
            "missing-focus-styles",
            "outline-none-no-alternative",
            "font-size-too-small",
            "font-size-small",
            "touch-target-too-small",
            "display-none-on-interactive",
            "text-transparent",
            "pointer-events-none",
        ]
        assert [f.line for f in findings] == [1, 7, 3, 4, 1, 2, 5, 6]

    def test_accessible_stylesheet_clean(self, accessible_stylesheet):
        assert run(accessible_stylesheet) == []

    def test_idempotent(self, broken_stylesheet):
        assert run(broken_stylesheet) == run(broken_stylesheet)
