import pytest

from contrastlab.core.color import oklch, srgb
from contrastlab.core.contrast import (
    ContrastPair,
    ContrastPolicy,
    classify,
    contrast_ratio,
    evaluate,
    wcag_levels,
)
from contrastlab.core.errors import ConfigError, DomainError, InvalidInputError
from contrastlab.core.luminance import relative_luminance
from contrastlab.shared.parser import parse_color

WHITE = srgb(1, 1, 1)
BLACK = srgb(0, 0, 0)


def test_relative_luminance_monotonic():
    # White > Gray > Black
    gray = parse_color("#777777")
    assert relative_luminance(WHITE) > relative_luminance(gray) > relative_luminance(BLACK)


def test_white_on_black_is_21():
    ratio = contrast_ratio(parse_color("#ffffff"), parse_color("#000000"))
    assert abs(ratio - 21.0) < 0.01
    for context in ("body", "large"):
        assert evaluate(ContrastPair(WHITE, BLACK, context)).passed


def test_identical_colors_give_exactly_one_and_fail():
    assert contrast_ratio(WHITE, WHITE) == 1.0
    assert classify(1.0, "body") == (4.5, False)
    assert classify(1.0, "large") == (3.0, False)
    result = evaluate(ContrastPair(WHITE, WHITE, "large"))
    assert result.ratio == 1.0
    assert not result.passed


@pytest.mark.parametrize(
    "a, b",
    [
        ("#1f2937", "#f8f9fa"),
        ("#5b2be6", "#ffffff"),
        ("oklch(0.30 0.03 260)", "oklch(0.97 0 0)"),
        ("#ff00a8", "oklch(0.2 0.02 250)"),
    ],
)
def test_ratio_is_symmetric(a, b):
    ca, cb = parse_color(a), parse_color(b)
    assert contrast_ratio(ca, cb) == contrast_ratio(cb, ca)
    assert contrast_ratio(ca, cb) >= 1.0


def test_more_lightness_separation_never_lowers_contrast():
    bg = oklch(0.97, 0, 0)
    ratios = [contrast_ratio(oklch(L, 0.03, 260), bg, fit=True) for L in (0.9, 0.8, 0.7, 0.6, 0.5, 0.4, 0.3, 0.2, 0.1)]
    assert ratios == sorted(ratios)


def test_documented_fg_on_bg_pair_passes_body_text():
    fg = parse_color("oklch(0.30 0.03 260)")
    bg = parse_color("oklch(0.97 0 0)")
    result = evaluate(ContrastPair(fg, bg, "body"))
    assert result.ratio >= 4.5
    assert result.ratio == pytest.approx(12.5, abs=0.2)
    assert result.passed


def test_evaluate_labels_default_to_color_notation():
    result = evaluate(ContrastPair(parse_color("#FFFFFF"), BLACK))
    assert result.fg == "#ffffff"
    assert result.bg == "#000000"
    assert result.context == "body"
    record = result.as_record()
    assert record == {
        "fg": "#ffffff",
        "bg": "#000000",
        "context": "body",
        "ratio": 21.0,
        "threshold": 4.5,
        "pass": True,
    }


def test_transparent_foreground_is_rejected():
    with pytest.raises(InvalidInputError, match="foreground"):
        evaluate(ContrastPair(parse_color("#00000000"), WHITE))


def test_transparent_background_is_rejected():
    with pytest.raises(InvalidInputError, match="background"):
        evaluate(ContrastPair(BLACK, srgb(1, 1, 1, alpha=0.0)))


def test_custom_threshold_is_applied():
    policy = ContrastPolicy(thresholds={"body": 7.0})
    gray = parse_color("#595959")  # ~7.0:1 on white
    result = evaluate(ContrastPair(gray, WHITE, "body"), policy)
    assert result.threshold == 7.0
    assert policy.threshold_for("large") == 3.0


@pytest.mark.parametrize("value", [0, -1, 1.0, 0.5, float("inf"), "4.5", True])
def test_invalid_thresholds_raise_config_error(value):
    with pytest.raises(ConfigError):
        ContrastPolicy(thresholds={"body": value})


def test_non_positive_threshold_message():
    with pytest.raises(ConfigError, match="positive"):
        ContrastPolicy(thresholds={"large": 0})


def test_unknown_context_raises_config_error():
    with pytest.raises(ConfigError, match="unknown context"):
        ContrastPolicy(thresholds={"huge": 2.0})
    with pytest.raises(ConfigError):
        evaluate(ContrastPair(WHITE, BLACK, "huge"))


def test_out_of_gamut_color_is_strict_by_default():
    vivid = oklch(0.9, 0.35, 145)
    with pytest.raises(DomainError, match="gamut"):
        evaluate(ContrastPair(vivid, BLACK))
    result = evaluate(ContrastPair(vivid, BLACK), ContrastPolicy(gamut="fit"))
    assert result.passed


def test_unknown_gamut_mode():
    with pytest.raises(ConfigError):
        ContrastPolicy(gamut="clip")


def test_wcag_levels():
    assert wcag_levels(5.0) == {"AA-Large": "Pass", "AA": "Pass", "AAA-Large": "Pass", "AAA": "Fail"}
    assert wcag_levels(3.2) == {"AA-Large": "Pass", "AA": "Fail", "AAA-Large": "Fail", "AAA": "Fail"}
