"""Tests for post-render decision text styling."""

import pytest

from core.rendering.svg_styling import DECISION_WORDS, apply_decision_text_styling

RED = "#ff0000"


class TestEdgeLabelText:
    """SVG <text> edge labels."""

    def test_replaces_existing_fill(self):
        svg = '<text class="edgeLabel" fill="#000000">Go</text>'
        assert apply_decision_text_styling(svg, RED) == (
            f'<text class="edgeLabel" fill="{RED}">Go</text>'
        )

    def test_adds_missing_fill(self):
        svg = '<text class="label edgeLabel">Go</text>'
        assert apply_decision_text_styling(svg, RED) == (
            f'<text class="label edgeLabel" fill="{RED}">Go</text>'
        )


class TestDecisionWords:
    """Bare decision words outside edge labels."""

    @pytest.mark.parametrize("word", ["Yes", "no", " Maybe ", "FALSE"])
    def test_recolors_decision_words(self, word):
        svg = f'<text x="1">{word}</text>'
        assert apply_decision_text_styling(svg, RED) == f'<text x="1" fill="{RED}">{word}</text>'

    @pytest.mark.parametrize("word", ["Start", "Yesterday", "Nothing"])
    def test_leaves_other_text(self, word):
        svg = f'<text x="1">{word}</text>'
        assert apply_decision_text_styling(svg, RED) == svg

    def test_word_list(self):
        assert "Yes" in DECISION_WORDS
        assert "No" in DECISION_WORDS


class TestHtmlLabels:
    """Edge labels rendered as HTML spans."""

    def test_adds_style(self):
        svg = '<span class="edgeLabel">Yes</span>'
        assert apply_decision_text_styling(svg, RED) == (
            f'<span class="edgeLabel" style="color: {RED};">Yes</span>'
        )

    def test_replaces_color_keeps_other_rules(self):
        svg = '<span class="edgeLabel" style="color: blue; font-weight: bold">Yes</span>'
        assert apply_decision_text_styling(svg, RED) == (
            f'<span class="edgeLabel" style="font-weight: bold; color: {RED};">Yes</span>'
        )


def test_svg_without_labels_unchanged():
    svg = '<svg xmlns="http://www.w3.org/2000/svg"><rect width="10"/></svg>'
    assert apply_decision_text_styling(svg, RED) == svg
