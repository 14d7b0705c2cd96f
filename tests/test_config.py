"""Tests for parse configuration."""

import pytest

from sexpline import PERMISSIVE, STRICT, ConfigError, ParseConfig, Parser, parse, resolve_config


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_is_strict(self) -> None:
        config = ParseConfig()
        assert config.disallow_newlines is True
        assert config.mode == "strict"
        assert config == STRICT

    def test_permissive_preset(self) -> None:
        assert PERMISSIVE.disallow_newlines is False
        assert PERMISSIVE.mode == "permissive"

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.disallow_newlines = False  # type: ignore[misc]


class TestFromDict:
    def test_known_field(self) -> None:
        assert ParseConfig.from_dict({"disallow_newlines": False}) == PERMISSIVE

    def test_unknown_keys_ignored(self) -> None:
        assert ParseConfig.from_dict({"unknown_key": 1}) == STRICT

    def test_mode_key(self) -> None:
        assert ParseConfig.from_dict({"mode": "permissive"}) == PERMISSIVE

    def test_bad_mode_key(self) -> None:
        with pytest.raises(ConfigError):
            ParseConfig.from_dict({"mode": "lenient"})


class TestResolveConfig:
    def test_none_is_strict(self) -> None:
        assert resolve_config(None) is STRICT

    def test_config_passes_through(self) -> None:
        config = ParseConfig(disallow_newlines=False)
        assert resolve_config(config) is config

    @pytest.mark.parametrize(("name", "expected"), [("strict", STRICT), ("PERMISSIVE", PERMISSIVE)])
    def test_names(self, name: str, expected: ParseConfig) -> None:
        assert resolve_config(name) == expected

    def test_unknown_name(self) -> None:
        with pytest.raises(ConfigError, match="Unknown parse mode"):
            resolve_config("loose")

    def test_wrong_type(self) -> None:
        with pytest.raises(ConfigError):
            resolve_config(True)  # type: ignore[arg-type]

    def test_config_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse("()", "loose")


class TestConfigIsolation:
    """Two parsers with different configs do not affect each other."""

    def test_independent_parsers(self) -> None:
        from sexpline import DisallowedNewlineError
        from sexpline.cursor import StringCursor

        strict = Parser(STRICT)
        permissive = Parser(PERMISSIVE)
        assert permissive.parse(StringCursor("(a\n)")) is not None
        with pytest.raises(DisallowedNewlineError):
            strict.parse(StringCursor("(a\n)"))
        assert permissive.parse(StringCursor("(a\n)")) is not None

    def test_repr(self) -> None:
        assert repr(Parser()) == "Parser(mode='strict')"
