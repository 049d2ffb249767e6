"""Tests for the token alphabet loader."""

import pytest

from inputmask.core.definitions import TokenType
from inputmask.core.exceptions import ConfigurationError
from inputmask.core import loader as loader_module
from inputmask.core.loader import TokenLoader


def test_default_alphabet():
    loader = TokenLoader()
    patterns = loader.get_patterns()

    assert set(patterns) == set(TokenType.ALL)
    assert patterns[TokenType.NUMERIC].fullmatch("7")
    assert not patterns[TokenType.NUMERIC].fullmatch("a")
    assert patterns[TokenType.ALPHA].fullmatch("Q")
    assert patterns[TokenType.ALPHANUMERIC].fullmatch("q")
    assert not patterns[TokenType.ALPHANUMERIC].fullmatch("_")
    assert patterns[TokenType.WILDCARD].fullmatch("\n")


def test_descriptions():
    loader = TokenLoader()
    assert loader.get_description(TokenType.NUMERIC) == "Numeric character (0-9)"
    assert loader.get_description("?") == ""


def test_get_patterns_returns_copy():
    loader = TokenLoader()
    loader.get_patterns().clear()
    assert loader.get_patterns()


def test_get_instance_is_shared():
    assert TokenLoader.get_instance() is TokenLoader.get_instance()


def test_reset_instance_reloads():
    first = TokenLoader.get_instance()
    TokenLoader.reset_instance()
    assert TokenLoader.get_instance() is not first


def test_custom_file(tokens_file):
    path = tokens_file('tokens:\n  "H":\n    description: Hex digit\n    regex: "[0-9a-fA-F]"\n')
    patterns = TokenLoader(path).get_patterns()

    assert list(patterns) == ["H"]
    assert patterns["H"].fullmatch("f")


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        TokenLoader(tmp_path / "absent.yaml")


def test_empty_file(tokens_file):
    with pytest.raises(ConfigurationError, match="empty"):
        TokenLoader(tokens_file(""))


def test_invalid_yaml(tokens_file):
    with pytest.raises(ConfigurationError, match="Failed to parse"):
        TokenLoader(tokens_file("tokens: [unclosed"))


def test_missing_tokens_section(tokens_file):
    with pytest.raises(ConfigurationError, match="'tokens'"):
        TokenLoader(tokens_file("patterns: {}\n"))


def test_multi_character_token(tokens_file):
    with pytest.raises(ConfigurationError, match="single characters"):
        TokenLoader(tokens_file('tokens:\n  "NN":\n    regex: "[0-9]"\n'))


def test_token_without_regex(tokens_file):
    with pytest.raises(ConfigurationError, match="no 'regex'"):
        TokenLoader(tokens_file('tokens:\n  "N":\n    description: digits\n'))


def test_invalid_regex(tokens_file):
    with pytest.raises(ConfigurationError, match="Invalid regex"):
        TokenLoader(tokens_file('tokens:\n  "N":\n    regex: "[0-9"\n'))


def test_bundled_file_must_define_default_alphabet(monkeypatch, tokens_file):
    path = tokens_file('tokens:\n  "N":\n    regex: "[0-9]"\n')
    monkeypatch.setattr(loader_module, "DEFAULT_TOKENS_PATH", path)

    with pytest.raises(ConfigurationError, match="missing tokens"):
        TokenLoader()


def test_custom_file_may_define_partial_alphabet(tokens_file):
    path = tokens_file('tokens:\n  "N":\n    regex: "[0-9]"\n')
    loader = TokenLoader(path)

    assert not loader.is_bundled
    assert list(loader.get_patterns()) == ["N"]


def test_bundled_file_defines_every_token_type():
    loader = TokenLoader()

    assert loader.is_bundled
    assert all(token in loader.get_patterns() for token in TokenType.ALL)
