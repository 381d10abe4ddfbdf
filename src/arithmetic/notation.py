"""
Notation — Текстовые представления значений, колец и минимальных многочленов

Варианты:
- plain   — Unicode "√", например "1/2 + √(5)/2", "3 - 2√(10)"
- ascii   — "sqrt" вместо "√"
- alt     — θ-нотация для колец с half-integers (φ для d = 5):
            (a + b√d)/e = m + nθ, θ = (1 + √d)/2
- TeX     — "\\frac{1}{2} + \\frac{\\sqrt{5}}{2}", либо с одним знаменателем
- HTML    — "&radic;", "&minus;"

Рендеринг только читает regular_part, surd_part, denominator и
ring.radicand; обратного разбора текста нет.
"""

from typing import Final

from src.arithmetic.invariants import min_polynomial_coefficients
from src.core.domain.quadratic_value import QuadraticValue
from src.core.domain.ring import RealQuadraticRing

SQRT_SIGN: Final[str] = "√"
THETA: Final[str] = "θ"
PHI: Final[str] = "φ"

# Радиканд золотого сечения: θ обозначается φ
GOLDEN_RADICAND: Final[int] = 5


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def _term(coefficient: int, symbol: str, leading: bool) -> str:
    """
    Слагаемое coefficient·symbol с корректным знаком.

    Единичный коэффициент опускается; leading — первое слагаемое строки.
    """
    magnitude = abs(coefficient)
    body = symbol if magnitude == 1 else f"{magnitude}{symbol}"
    if leading:
        return f"-{body}" if coefficient < 0 else body
    return f" - {body}" if coefficient < 0 else f" + {body}"


def _alt_parts(x: QuadraticValue) -> tuple[int, int]:
    """Пара (m, n) такая, что x = m + nθ."""
    twice_a = x.regular_part * (2 // x.denominator)
    twice_b = x.surd_part * (2 // x.denominator)
    return ((twice_a - twice_b) // 2, twice_b)


def _theta_letter(ring: RealQuadraticRing) -> str:
    return PHI if ring.radicand == GOLDEN_RADICAND else THETA


# =============================================================================
# ЗНАЧЕНИЯ
# =============================================================================


def to_plain_string(x: QuadraticValue) -> str:
    """
    Представление с Unicode-знаком корня.

    Examples:
        (1 + √5)/2 → "1/2 + √(5)/2"
        -143 + 44√10 → "-143 + 44√(10)"
        -√7 → "-√(7)"
    """
    root = f"{SQRT_SIGN}({x.ring.radicand})"

    if x.denominator == 2:
        return f"{x.regular_part}/2" + _term(x.surd_part, root, leading=False) + "/2"

    if x.surd_part == 0:
        return str(x.regular_part)
    if x.regular_part == 0:
        return _term(x.surd_part, root, leading=True)
    return str(x.regular_part) + _term(x.surd_part, root, leading=False)


def to_ascii_string(x: QuadraticValue) -> str:
    """Представление только ASCII-символами: "1/2 + sqrt(5)/2"."""
    return to_plain_string(x).replace(SQRT_SIGN, "sqrt")


def to_alt_string(x: QuadraticValue) -> str:
    """
    θ-нотация для колец с half-integers, иначе plain.

    Examples:
        (1 + √5)/2 → "φ"
        (-3 + √5)/2 → "-2 + φ"
        4 + 2√13 → "2 + 4θ"
    """
    if not x.ring.has_half_integers:
        return to_plain_string(x)

    m, n = _alt_parts(x)
    letter = _theta_letter(x.ring)
    if n == 0:
        return str(m)
    if m == 0:
        return _term(n, letter, leading=True)
    return str(m) + _term(n, letter, leading=False)


def to_ascii_alt_string(x: QuadraticValue) -> str:
    """θ-нотация ASCII-символами: "phi", "theta"."""
    return to_alt_string(x).replace(PHI, "phi").replace(THETA, "theta").replace(
        SQRT_SIGN, "sqrt"
    )


def to_tex_string(x: QuadraticValue) -> str:
    """
    Представление для TeX.

    Examples:
        (1 - 3√13)/2 → "\\frac{1}{2} - \\frac{3 \\sqrt{13}}{2}"
        2 - √3 → "2 - \\sqrt{3}"
    """
    root = f"\\sqrt{{{x.ring.radicand}}}"

    if x.denominator == 2:
        a, b = x.regular_part, x.surd_part
        sign = "-" if a < 0 else ""
        surd_body = root if abs(b) == 1 else f"{abs(b)} {root}"
        joiner = " - " if b < 0 else " + "
        return f"{sign}\\frac{{{abs(a)}}}{{2}}{joiner}\\frac{{{surd_body}}}{{2}}"

    if x.surd_part == 0:
        return str(x.regular_part)
    surd_body = root if abs(x.surd_part) == 1 else f"{abs(x.surd_part)} {root}"
    if x.regular_part == 0:
        return f"-{surd_body}" if x.surd_part < 0 else surd_body
    joiner = " - " if x.surd_part < 0 else " + "
    return f"{x.regular_part}{joiner}{surd_body}"


def to_tex_string_single_denominator(x: QuadraticValue) -> str:
    """
    TeX с общей дробью для полуцелых: "\\frac{1 + \\sqrt{5}}{2}".

    Для знаменателя 1 совпадает с to_tex_string.
    """
    if x.denominator != 2:
        return to_tex_string(x)
    root = f"\\sqrt{{{x.ring.radicand}}}"
    surd_body = root if abs(x.surd_part) == 1 else f"{abs(x.surd_part)} {root}"
    joiner = " - " if x.surd_part < 0 else " + "
    return f"\\frac{{{x.regular_part}{joiner}{surd_body}}}{{2}}"


def to_tex_alt_string(x: QuadraticValue) -> str:
    """θ-нотация для TeX: "\\phi", "\\theta"."""
    if not x.ring.has_half_integers:
        return to_tex_string(x)
    return to_alt_string(x).replace(PHI, "\\phi").replace(THETA, "\\theta")


def to_html_string(x: QuadraticValue) -> str:
    """Представление для HTML: "&radic;", "&minus;"."""
    return to_plain_string(x).replace(SQRT_SIGN, "&radic;").replace("-", "&minus;")


def to_html_alt_string(x: QuadraticValue) -> str:
    """θ-нотация для HTML: "&phi;", "&theta;"."""
    if not x.ring.has_half_integers:
        return to_html_string(x)
    return (
        to_alt_string(x)
        .replace(PHI, "&phi;")
        .replace(THETA, "&theta;")
        .replace("-", "&minus;")
    )


# =============================================================================
# КОЛЬЦА
# =============================================================================


def ring_label(ring: RealQuadraticRing) -> str:
    """
    Обозначение кольца: "Z[√2]", "O_(Q(√13))", "Z[φ]".
    """
    if ring.radicand == GOLDEN_RADICAND:
        return f"Z[{PHI}]"
    if ring.has_half_integers:
        return f"O_(Q({SQRT_SIGN}{ring.radicand}))"
    return f"Z[{SQRT_SIGN}{ring.radicand}]"


def ring_ascii_label(ring: RealQuadraticRing) -> str:
    """ASCII-обозначение: "Z[sqrt(2)]", "O_(Q(sqrt(13)))", "Z[phi]"."""
    if ring.radicand == GOLDEN_RADICAND:
        return "Z[phi]"
    if ring.has_half_integers:
        return f"O_(Q(sqrt({ring.radicand})))"
    return f"Z[sqrt({ring.radicand})]"


def ring_tex_label(ring: RealQuadraticRing, blackboard_bold: bool = True) -> str:
    """
    TeX-обозначение кольца.

    Args:
        ring: Кольцо
        blackboard_bold: \\mathbb (True) или \\textbf (False) для Z и Q
    """
    q_char = "\\mathbb Q" if blackboard_bold else "\\textbf Q"
    z_char = "\\mathbb Z" if blackboard_bold else "\\textbf Z"
    if ring.radicand == GOLDEN_RADICAND:
        return f"{z_char}[\\phi]"
    if ring.has_half_integers:
        return f"\\mathcal O_{{{q_char}(\\sqrt{{{ring.radicand}}})}}"
    return f"{z_char}[\\sqrt{{{ring.radicand}}}]"


def ring_html_label(ring: RealQuadraticRing, blackboard_bold: bool = True) -> str:
    """HTML-обозначение кольца (ℤ/ℚ либо <b>Z</b>/<b>Q</b>)."""
    q_char = "ℚ" if blackboard_bold else "<b>Q</b>"
    z_char = "ℤ" if blackboard_bold else "<b>Z</b>"
    if ring.radicand == GOLDEN_RADICAND:
        return f"{z_char}[&phi;]"
    if ring.has_half_integers:
        return f"<i>O</i><sub>{q_char}(&radic;{ring.radicand})</sub>"
    return f"{z_char}[&radic;{ring.radicand}]"


def ring_filename_label(ring: RealQuadraticRing) -> str:
    """Обозначение для имён файлов: "Z2", "OQ13", "ZPhi"."""
    if ring.radicand == GOLDEN_RADICAND:
        return "ZPhi"
    prefix = "OQ" if ring.has_half_integers else "Z"
    return f"{prefix}{ring.radicand}"


# =============================================================================
# МИНИМАЛЬНЫЙ МНОГОЧЛЕН
# =============================================================================


def min_polynomial_tex(x: QuadraticValue) -> str:
    """
    Минимальный многочлен для TeX.

    Examples:
        (5 + √13)/2 → "x^2 - 5x + 3"
        -4 → "x + 4"
        0 → "x"
    """
    coeffs = min_polynomial_coefficients(x)
    if coeffs[2] == 0:
        if coeffs[0] == 0:
            return "x"
        return "x" + _constant_term(coeffs[0])

    text = "x^2"
    if coeffs[1] != 0:
        text += _term(coeffs[1], "x", leading=False)
    return text + _constant_term(coeffs[0])


def _constant_term(value: int) -> str:
    return f" - {-value}" if value < 0 else f" + {value}"


def min_polynomial_string(x: QuadraticValue) -> str:
    """Минимальный многочлен Unicode-символами: "x² − 5x + 3"."""
    return min_polynomial_tex(x).replace("^2", "²").replace("-", "−")


def min_polynomial_html(x: QuadraticValue) -> str:
    """Минимальный многочлен для HTML: "<i>x</i><sup>2</sup> &minus; 5<i>x</i> + 3"."""
    return (
        min_polynomial_tex(x)
        .replace("x", "<i>x</i>")
        .replace("^2", "<sup>2</sup>")
        .replace("-", "&minus;")
    )
