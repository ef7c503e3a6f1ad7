import json

import pytest

from contrastlab.core.errors import ConfigError, DomainError, InvalidInputError
from contrastlab.core.palette import Rule, validate
from contrastlab.core.tokens import load_token_file, loads


def _write(tmp_path, data, name="tokens.json"):
    path = tmp_path / name
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return path


def test_load_token_file(tmp_path):
    path = _write(
        tmp_path,
        {
            "palette": {"fg": "oklch(0.30 0.03 260)", "bg": "oklch(0.97 0 0)", "accent": "#5b2be6"},
            "rules": [
                {"fg": "fg", "bg": "bg", "context": "body"},
                {"fg": "accent", "bg": "bg"},
            ],
        },
    )
    tokens = load_token_file(path)
    assert list(tokens.palette) == ["fg", "bg", "accent"]
    assert tokens.rules == (Rule("fg", "bg", "body"), Rule("accent", "bg", "body"))
    assert tokens.policy.thresholds == {"body": 4.5, "large": 3.0}
    assert tokens.source == str(path)
    assert all(r.passed for r in validate(tokens.palette, tokens.rules, tokens.policy))


def test_thresholds_and_gamut_are_read():
    tokens = loads(json.dumps({"palette": {}, "thresholds": {"large": 4.0}, "gamut": "fit"}))
    assert tokens.policy.thresholds == {"body": 4.5, "large": 4.0}
    assert tokens.policy.gamut == "fit"
    assert tokens.rules == ()


def test_duplicate_role_in_file_is_rejected():
    text = '{"palette": {"fg": "#000000", "fg": "#ffffff"}}'
    with pytest.raises(ConfigError, match="duplicate key 'fg'"):
        loads(text)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="cannot read"):
        load_token_file(tmp_path / "nope.json")


def test_invalid_json(tmp_path):
    path = _write(tmp_path, "{palette: ")
    with pytest.raises(ConfigError, match="invalid JSON"):
        load_token_file(path)


@pytest.mark.parametrize(
    "data, message",
    [
        ([], "top level"),
        ({"rules": []}, "missing 'palette'"),
        ({"palette": [], "rules": []}, "'palette' must be an object"),
        ({"palette": {}, "rules": {}}, "'rules' must be a list"),
        ({"palette": {}, "rules": [{"fg": "a"}]}, "missing 'bg'"),
        ({"palette": {}, "rules": [{"fg": "a", "bg": "b", "context": "huge"}]}, "unknown context"),
        ({"palette": {}, "rules": [{"fg": "a", "bg": "b", "weight": 1}]}, "unknown keys"),
        ({"palette": {}, "thresholds": {"body": 0}}, "positive"),
        ({"palette": {}, "thresholds": {"body": 1}}, "greater than 1"),
        ({"palette": {}, "gamut": "clip"}, "gamut"),
        ({"palette": {}, "theme": "dark"}, "unknown keys"),
    ],
)
def test_malformed_documents(data, message):
    with pytest.raises(ConfigError, match=message):
        loads(json.dumps(data))


def test_bad_color_names_the_role():
    with pytest.raises(InvalidInputError, match="role 'accent'"):
        loads(json.dumps({"palette": {"accent": "hotpink"}}))
    with pytest.raises(DomainError, match="role 'fg'"):
        loads(json.dumps({"palette": {"fg": "oklch(1.2 0 0)"}}))


def test_missing_role_is_caught_at_validation(tmp_path):
    path = _write(tmp_path, {"palette": {"fg": "#000000", "bg": "#ffffff"}, "rules": [{"fg": "accent", "bg": "bg"}]})
    tokens = load_token_file(path)
    with pytest.raises(ConfigError, match="accent"):
        validate(tokens.palette, tokens.rules, tokens.policy)


def test_non_utf8_file_is_a_config_error(tmp_path):
    path = tmp_path / "tokens.json"
    path.write_bytes(b'{"palette": {"fg": "#000000\xff"}}')
    with pytest.raises(ConfigError, match="UTF-8"):
        load_token_file(path)
