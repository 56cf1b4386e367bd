# tests/test_config.py
"""
Tests for configuration loading and validation.
"""

import json

import pytest

from jsxcheck.config import (
    DEFAULT_CONFIG_NAME,
    LintConfig,
    RuleConfig,
    RuleOptions,
    Settings,
    find_default_config,
    is_valid_pragma,
    load_config,
    parse_level,
)
from jsxcheck.errors import ConfigError


class TestParseLevel:

    @pytest.mark.parametrize("raw,level", [
        ("off", None), (0, None),
        ("warn", "warning"), (1, "warning"),
        ("error", "error"), (2, "error"),
    ])
    def test_known_levels(self, raw, level):
        assert parse_level(raw) == level

    @pytest.mark.parametrize("raw", ["fatal", 3, True, None, "ERROR"])
    def test_rejects(self, raw):
        with pytest.raises(ConfigError, match="invalid rule level"):
            parse_level(raw, "rules.x")


class TestRuleOptions:

    def test_defaults(self):
        opts = RuleOptions.from_mapping(None)
        assert opts == RuleOptions()
        assert not (opts.allow_arrays or opts.allow_objects or opts.ignore_dom_components)

    def test_camel_case_keys(self):
        opts = RuleOptions.from_mapping(
            {"allowArrays": True, "allowObjects": False, "ignoreDOMComponents": True}
        )
        assert opts.allow_arrays and opts.ignore_dom_components
        assert not opts.allow_objects
        assert opts.to_mapping() == {
            "allowArrays": True,
            "allowObjects": False,
            "ignoreDOMComponents": True,
        }

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="unknown option 'allowStrings'"):
            RuleOptions.from_mapping({"allowStrings": True})

    @pytest.mark.parametrize("value", [1, "true", None])
    def test_non_boolean(self, value):
        with pytest.raises(ConfigError, match="must be a boolean"):
            RuleOptions.from_mapping({"allowArrays": value})

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError, match="must be an object"):
            RuleOptions.from_mapping([True], key="rules.x")

    def test_immutable(self):
        with pytest.raises(AttributeError):
            RuleOptions().allow_arrays = True


class TestSettings:

    def test_default_pragma(self):
        assert Settings.from_mapping(None).pragma == "React"
        assert Settings.from_mapping({"react": {}}).pragma == "React"

    def test_custom_pragma(self):
        assert Settings.from_mapping({"react": {"pragma": "h"}}).pragma == "h"

    @pytest.mark.parametrize("pragma", ["1abc", "a.b", "", 7])
    def test_invalid_pragma(self, pragma):
        with pytest.raises(ConfigError, match="settings.react.pragma"):
            Settings.from_mapping({"react": {"pragma": pragma}})

    def test_is_valid_pragma(self):
        assert is_valid_pragma("Preact")
        assert is_valid_pragma("$h")
        assert not is_valid_pragma("my-lib")


class TestLintConfig:

    def test_bare_level_entry(self):
        cfg = LintConfig.from_dict({"rules": {"no-allocation-in-props": "warn"}})
        rule = cfg.rule("no-allocation-in-props")
        assert rule == RuleConfig(level="warning", options={})
        assert rule.enabled

    def test_level_and_options(self):
        cfg = LintConfig.from_dict(
            {"rules": {"no-allocation-in-props": [2, {"allowArrays": True}]}}
        )
        rule = cfg.rule("no-allocation-in-props")
        assert rule.level == "error"
        assert rule.options == {"allowArrays": True}

    def test_off(self):
        cfg = LintConfig.from_dict({"rules": {"no-allocation-in-props": "off"}})
        assert not cfg.rule("no-allocation-in-props").enabled

    def test_absent_rule(self):
        assert LintConfig().rule("no-allocation-in-props") is None

    def test_unknown_top_level_key(self):
        with pytest.raises(ConfigError, match="unknown top-level keys: plugins"):
            LintConfig.from_dict({"plugins": []})

    @pytest.mark.parametrize("entry", [[], ["error", {}, 1], ["error", []]])
    def test_bad_rule_entries(self, entry):
        with pytest.raises(ConfigError, match="rules.no-allocation-in-props"):
            LintConfig.from_dict({"rules": {"no-allocation-in-props": entry}})

    def test_with_rule_options_merges(self):
        cfg = LintConfig.from_dict(
            {"rules": {"no-allocation-in-props": ["warn", {"allowArrays": True}]}}
        )
        cfg = cfg.with_rule_options("no-allocation-in-props", allowObjects=True)
        rule = cfg.rule("no-allocation-in-props")
        assert rule.level == "warning"
        assert rule.options == {"allowArrays": True, "allowObjects": True}

    def test_with_settings(self):
        cfg = LintConfig().with_settings(Settings(pragma="h"))
        assert cfg.settings.pragma == "h"


class TestLoadConfig:

    def test_load(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({
            "rules": {"no-allocation-in-props": ["error", {"ignoreDOMComponents": True}]},
            "settings": {"react": {"pragma": "Preact"}},
        }))
        cfg = load_config(path)
        assert cfg.source == str(path)
        assert cfg.settings.pragma == "Preact"
        assert cfg.rule("no-allocation-in-props").options == {"ignoreDOMComponents": True}

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text("{ rules: }")
        with pytest.raises(ConfigError, match="invalid JSON at line 1") as info:
            load_config(path)
        assert info.value.source == str(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="cannot read configuration"):
            load_config(tmp_path / "absent.json")

    def test_error_names_source_file(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"rules": {"no-allocation-in-props": "loud"}}))
        with pytest.raises(ConfigError) as info:
            load_config(path)
        assert str(info.value).startswith(str(path))

    def test_find_default_config(self, tmp_path):
        assert find_default_config(tmp_path) is None
        (tmp_path / DEFAULT_CONFIG_NAME).write_text("{}")
        assert find_default_config(tmp_path) == tmp_path / DEFAULT_CONFIG_NAME
