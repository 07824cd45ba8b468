import math

import pytest

from renderers.stars import format_score, render_stars

FILLED = '<span class="star">★</span>'
EMPTY = '<span class="star empty">★</span>'


def _expected(filled: int, score_text: str) -> str:
    glyphs = FILLED * filled + EMPTY * (5 - filled)
    return f'<span class="stars">{glyphs}</span><span>({score_text})</span>'


@pytest.mark.parametrize("filled", range(0, 6))
def test_filled_prefix_then_empty(filled):
    html = render_stars(filled, 3.5)
    assert html == _expected(filled, "3.5")
    assert html.count("★") == 5


def test_zero_stars_zero_score():
    assert render_stars(0, 0) == _expected(0, "0")


def test_five_stars_five_score():
    assert render_stars(5, 5) == _expected(5, "5")


def test_three_stars_with_unrelated_rating():
    assert render_stars(3, 4.8) == _expected(3, "4.8")


def test_out_of_range_counts_are_bounded_by_the_loop():
    assert render_stars(9, 5) == _expected(5, "5")
    assert render_stars(-2, 1) == _expected(0, "1")


def test_fractional_filled_count():
    assert render_stars(2.5, 2.5) == _expected(2, "2.5")


def test_non_numeric_input_never_raises():
    assert render_stars("3", 4) == _expected(3, "4")
    assert render_stars("lots", "n/a") == _expected(0, "n/a")
    assert render_stars(None, None) == _expected(0, "null")


@pytest.mark.parametrize(
    "score,text",
    [
        (4.0, "4"),
        (4.8, "4.8"),
        (0, "0"),
        (-1.5, "-1.5"),
        (math.nan, "NaN"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (True, "true"),
        ("4,5", "4,5"),
    ],
)
def test_format_score(score, text):
    assert format_score(score) == text


def test_render_stars_is_deterministic():
    assert render_stars(4, 4.2) == render_stars(4, 4.2)


@pytest.mark.parametrize(
    "score,text",
    [
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (0.05, "0.05"),
        (123.0, "123"),
        (-0.0, "0"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1.5e22, "1.5e+22"),
        (-2.5e-8, "-2.5e-8"),
        (1234.5678, "1234.5678"),
    ],
)
def test_format_score_uses_browser_number_layout(score, text):
    assert format_score(score) == text


@pytest.mark.parametrize(
    "filled,expected",
    [
        (" 2 ", 2),
        ("", 0),
        ("0x3", 3),
        ("0b11", 3),
        ("Infinity", 5),
        ("4e0", 4),
        ("inf", 0),
        ("nan", 0),
        ("1_0", 0),
        ("0b12", 0),
        ("3 stars", 0),
    ],
)
def test_string_counts_follow_page_script_coercion(filled, expected):
    assert render_stars(filled, 1) == _expected(expected, "1")
