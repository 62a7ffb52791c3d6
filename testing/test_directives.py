"""Tests for theme injection through the Mermaid init directive."""

import json
import logging

import pytest

from core.rendering.directives import (
    THEME_KEYS,
    apply_theme_directive,
    build_init_directive,
    build_theme_config,
    parse_directive_body,
    split_init_directive,
)
from core.theming import ThemeRequest, resolve_theme

BODY = "flowchart TD\n    A[Start] --> B[End]"


@pytest.fixture
def theme():
    return resolve_theme(ThemeRequest(preset_id="ocean"))


def _config(source):
    directive, rest = split_init_directive(source)
    assert directive is not None
    return json.loads(directive), rest


class TestBuildThemeConfig:
    """Tests for the directive built from a resolved theme."""

    def test_keys(self, theme):
        config = build_theme_config(theme)

        assert config["theme"] == "base"
        assert config["themeVariables"]["primaryColor"] == theme.node_fill
        assert config["fontFamily"] == theme.font_family
        assert config["flowchart"]["nodeSpacing"] == theme.node_spacing
        assert theme.edge_label_color in config["themeCSS"]
        assert set(THEME_KEYS) <= set(config)

    def test_directive_is_json(self, theme):
        directive = build_init_directive(theme)

        assert directive.startswith("%%{init: ")
        assert directive.endswith("}%%")
        config, rest = _config(directive)
        assert config == build_theme_config(theme)
        assert rest == ""


class TestApplyThemeDirective:
    """Tests for apply_theme_directive()."""

    def test_prefixes_plain_source(self, theme):
        themed = apply_theme_directive(BODY, theme)
        config, rest = _config(themed)

        assert rest == BODY
        assert config == build_theme_config(theme)

    def test_merges_model_directive(self, theme):
        source = (
            "%%{init: {'flowchart': {'nodeSpacing': 50, 'rankSpacing': 80, 'curve': 'basis'}}}%%\n"
            + BODY
        )
        themed = apply_theme_directive(source, theme)
        config, rest = _config(themed)

        assert themed.count("%%{init") == 1
        assert rest == BODY
        assert config["flowchart"]["nodeSpacing"] == 50
        assert config["flowchart"]["curve"] == "basis"
        assert config["flowchart"]["htmlLabels"] is True
        assert config["themeVariables"] == theme.to_theme_variables()

    def test_theme_keys_replaced_other_keys_kept(self, theme):
        source = '%%{init: {"theme": "dark", "securityLevel": "loose"}}%%\n' + BODY
        config, _ = _config(apply_theme_directive(source, theme))

        assert config["theme"] == "base"
        assert config["securityLevel"] == "loose"

    def test_initialize_spelling(self, theme):
        source = "%%{initialize: {'flowchart': {'curve': 'step'}}}%%\n" + BODY
        config, rest = _config(apply_theme_directive(source, theme))

        assert config["flowchart"]["curve"] == "step"
        assert rest == BODY

    def test_idempotent(self, theme):
        source = "%%{init: {'flowchart': {'nodeSpacing': 50}}}%%\n" + BODY
        once = apply_theme_directive(source, theme)

        assert apply_theme_directive(once, theme) == once
        assert apply_theme_directive(apply_theme_directive(BODY, theme), theme) == (
            apply_theme_directive(BODY, theme)
        )

    def test_unparseable_directive_replaced(self, theme, caplog):
        source = "%%{init: {not json}}%%\n" + BODY

        with caplog.at_level(logging.WARNING, logger="core.rendering.directives"):
            themed = apply_theme_directive(source, theme)

        config, rest = _config(themed)
        assert config == build_theme_config(theme)
        assert rest == BODY
        assert any("unparseable" in r.message for r in caplog.records)

    def test_new_theme_replaces_previous_theme(self, theme):
        other = resolve_theme(ThemeRequest(preset_id="forest"))
        themed = apply_theme_directive(apply_theme_directive(BODY, theme), other)
        config, _ = _config(themed)

        assert config["themeVariables"] == other.to_theme_variables()


class TestParseDirectiveBody:
    """Tests for parse_directive_body()."""

    @pytest.mark.parametrize(
        "body,expected",
        [
            ('{"theme": "dark"}', {"theme": "dark"}),
            ("{'theme': 'dark'}", {"theme": "dark"}),
            ("[1, 2]", None),
            ("{broken", None),
        ],
    )
    def test_parse(self, body, expected):
        assert parse_directive_body(body) == expected

    def test_split_without_directive(self):
        assert split_init_directive(BODY) == (None, BODY)
