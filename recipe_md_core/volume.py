"""
recipe_md_core.volume
=====================

Motor de cantidades: parsing de montos y volúmenes, y render de un `Volume`
en fracciones "de cocina" (ej: "1 + 1/2 cups" en vez de "1.5 cups").

Render
------
Descomposición greedy, de la unidad más grande a la más chica, en tres grupos:

1) Tazas: enteras + a lo sumo una fracción (3/4, 2/3, 1/2, 1/3, 1/4)
2) Cucharadas: enteras + "1/2" solo si el resto cae en [1/2 tbsp, 2 tsp)
3) Cucharaditas: enteras + 1/2 + 1/4 + resto fino (1/16, 1/8 o decimal)

Cada grupo une sus tokens con " + " y lleva su unidad una sola vez; los grupos
no vacíos se unen también con " + ". Un volumen cero renderiza "".
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import List, Optional, Tuple

from .domain_models import Volume
from .units import (
    CUP,
    CUP_FRACTIONS,
    HALF_TABLESPOON,
    HALF_TEASPOON,
    QUARTER_TEASPOON,
    TABLESPOON,
    TEASPOON,
    unit_size,
)

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

# Restos de cucharadita con nombre propio
_SMALL_TSP_FRACTIONS = {0.0625: "1/16", 0.125: "1/8"}


# ============================================================
# Parsing
# ============================================================

def _parse_decimal(text: str) -> Optional[float]:
    if not _DECIMAL_RE.fullmatch(text):
        return None
    value = float(text)
    # "1e400" desborda a inf
    return value if math.isfinite(value) else None


def parse_amount(text: str) -> Optional[float]:
    """
    Parsea un monto como decimal ("1.5") o como fracción "a/b" ("3/4").

    No acepta espacios alrededor, ni "inf"/"nan", ni denominador cero, ni
    valores que desbordan a infinito.

    Returns
    -------
    Optional[float]
        El valor, o None si el texto no es un número válido.
    """
    numerator, sep, denominator = text.partition("/")
    if not sep:
        return _parse_decimal(text)

    a = _parse_decimal(numerator)
    b = _parse_decimal(denominator)
    if a is None or b is None or b == 0:
        return None
    value = a / b
    return value if math.isfinite(value) else None


def parse_volume(amount_text: str, unit_text: str) -> Optional[Volume]:
    """
    Construye un `Volume` a partir de un monto y una unidad de texto.

    Devuelve None (y el llamador cae a una cantidad simple o nula) si el monto
    no parsea, es negativo, o la unidad no está en la tabla de alias.
    """
    size = unit_size(unit_text)
    if size is None:
        return None
    amount = parse_amount(amount_text)
    if amount is None or amount < 0:
        return None
    quarter_teaspoons = amount * size
    if not math.isfinite(quarter_teaspoons):
        return None
    return Volume(quarter_teaspoons)


# ============================================================
# Render
# ============================================================

def format_amount(value: float) -> str:
    """
    Formatea un número sin ".0" para enteros y sin notación científica.

    >>> format_amount(2.0)
    '2'
    >>> format_amount(0.5)
    '0.5'
    """
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def _cups(remaining: float) -> Tuple[List[str], float, float]:
    whole, remaining = divmod(remaining, CUP)
    tokens = [format_amount(whole)] if whole > 0 else []
    for text, size in CUP_FRACTIONS:
        if remaining >= size:
            tokens.append(text)
            remaining -= size
    return tokens, whole, remaining


def _tablespoons(remaining: float) -> Tuple[List[str], float, float]:
    whole, remaining = divmod(remaining, TABLESPOON)
    tokens = [format_amount(whole)] if whole > 0 else []
    # Con 2 tsp o más el resto se informa en cucharaditas
    if HALF_TABLESPOON <= remaining < 2 * TEASPOON:
        tokens.append("1/2")
        remaining -= HALF_TABLESPOON
    return tokens, whole, remaining


def _teaspoons(remaining: float) -> Tuple[List[str], float, float]:
    whole, remaining = divmod(remaining, TEASPOON)
    tokens = [format_amount(whole)] if whole > 0 else []
    if remaining >= HALF_TEASPOON:
        tokens.append("1/2")
        remaining -= HALF_TEASPOON
    if remaining >= QUARTER_TEASPOON:
        tokens.append("1/4")
        remaining -= QUARTER_TEASPOON
    if remaining > 0:
        tsps = remaining / TEASPOON
        tokens.append(_SMALL_TSP_FRACTIONS.get(tsps) or format_amount(tsps))
        remaining = 0.0
    return tokens, whole, remaining


def _group(tokens: List[str], whole: float, singular: str, plural: str) -> str:
    if not tokens:
        return ""
    label = plural if whole > 1 or len(tokens) > 1 else singular
    return f"{' + '.join(tokens)} {label}"


def render_volume(volume: Volume) -> str:
    """
    Renderiza un `Volume` como texto de cocina.

    Ejemplos (en cuartos de cucharadita):
    - 192 → "1 cup"
    - 336 → "1 + 3/4 cups"
    - 6   → "1/2 tbsp"
    - 0   → ""
    """
    remaining = volume.quarter_teaspoons

    cup_tokens, cups, remaining = _cups(remaining)
    tbsp_tokens, tbsps, remaining = _tablespoons(remaining)
    tsp_tokens, tsps, _ = _teaspoons(remaining)

    groups = [
        _group(cup_tokens, cups, "cup", "cups"),
        _group(tbsp_tokens, tbsps, "tbsp", "tbsps"),
        _group(tsp_tokens, tsps, "tsp", "tsps"),
    ]
    return " + ".join(g for g in groups if g)
