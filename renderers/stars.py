# renderers/stars.py
import math
import re
from typing import Any

MAX_STARS = 5
STAR_GLYPH = "★"

_DECIMAL = re.compile(r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)$")
_PREFIXED = re.compile(r"^0(?P<base>[xXoObB])(?P<digits>[0-9a-fA-F]+)$")
_BASES = {"x": 16, "o": 8, "b": 2}


def _as_number(value: Any) -> float:
    # Coerce the way a page script compares values: numeric strings parse,
    # null and blank strings count as zero, anything else is NaN.
    if value is None:
        return 0
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip()
    if not text:
        return 0
    if _DECIMAL.match(text):
        return float(text)
    prefixed = _PREFIXED.match(text)
    if prefixed:
        try:
            return int(prefixed.group("digits"), _BASES[prefixed.group("base").lower()])
        except ValueError:
            return math.nan
    return math.nan


def _format_float(value: float) -> str:
    # Shortest round-trip digits from repr, laid out with the browser's
    # thresholds: positional from 1e-6 up to 1e21, exponent otherwise.
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    mantissa, _, exp = repr(abs(value)).partition("e")
    int_part, _, frac = mantissa.partition(".")
    all_digits = int_part + frac
    digits = all_digits.lstrip("0")
    point = len(int_part) + (int(exp) if exp else 0) - (len(all_digits) - len(digits))
    digits = digits.rstrip("0")
    k = len(digits)

    if k <= point <= 21:
        return sign + digits + "0" * (point - k)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits
    e = point - 1
    exp_text = f"e+{e}" if e > 0 else f"e-{-e}"
    if k == 1:
        return sign + digits + exp_text
    return sign + digits[0] + "." + digits[1:] + exp_text


def format_score(score: Any) -> str:
    """
    Print a score the way a page script prints a number: 4.0 -> "4",
    4.8 -> "4.8", 1e-06 -> "0.000001", 1e-07 -> "1e-7", nan -> "NaN".
    """
    if score is None:
        return "null"
    if isinstance(score, bool):
        return "true" if score else "false"
    if isinstance(score, int):
        return str(score)
    if isinstance(score, float):
        if math.isnan(score):
            return "NaN"
        if math.isinf(score):
            return "Infinity" if score > 0 else "-Infinity"
        return _format_float(score)
    return str(score)


def render_stars(filled: Any, score: Any) -> str:
    filled_count = _as_number(filled)
    html = ""
    for i in range(1, MAX_STARS + 1):
        css = "star" if i <= filled_count else "star empty"
        html += f'<span class="{css}">{STAR_GLYPH}</span>'
    return f'<span class="stars">{html}</span><span>({format_score(score)})</span>'
