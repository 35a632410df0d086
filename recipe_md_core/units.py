"""
recipe_md_core.units
====================

Tabla de unidades de volumen soportadas.

Todas las medidas se expresan en **cuartos de cucharadita** (quarter teaspoons),
la unidad más chica que reconoce el formato. Elegida así para que cada
subdivisión habitual (1/16 cdta hasta tazas enteras) sea un múltiplo exacto.

Equivalencias
-------------
- 1 cucharadita (tsp)  = 4
- 1 cucharada (tbsp)   = 3 tsp  = 12
- 1 taza (cup)         = 16 tbsp = 192
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

TEASPOON = 4.0
TABLESPOON = 3.0 * TEASPOON
CUP = 16.0 * TABLESPOON

# Fracciones de taza, de mayor a menor (el orden importa en el render)
CUP_FRACTIONS: Tuple[Tuple[str, float], ...] = (
    ("3/4", CUP * 3 / 4),
    ("2/3", CUP * 2 / 3),
    ("1/2", CUP / 2),
    ("1/3", CUP / 3),
    ("1/4", CUP / 4),
)

HALF_TABLESPOON = 0.5 * TABLESPOON
HALF_TEASPOON = 0.5 * TEASPOON
QUARTER_TEASPOON = 0.25 * TEASPOON

# Alias (en minúsculas) → tamaño de la unidad
UNIT_ALIASES: Dict[str, float] = {
    "cup": CUP,
    "cups": CUP,
    "tablespoon": TABLESPOON,
    "tablespoons": TABLESPOON,
    "tb": TABLESPOON,
    "tbs": TABLESPOON,
    "tbsp": TABLESPOON,
    "tbsps": TABLESPOON,
    "teaspoon": TEASPOON,
    "teaspoons": TEASPOON,
    "tsp": TEASPOON,
    "tsps": TEASPOON,
}


def unit_size(unit: str) -> Optional[float]:
    """
    Devuelve el tamaño de `unit` en cuartos de cucharadita, o None si la unidad
    no es un volumen reconocido. La comparación no distingue mayúsculas.
    """
    return UNIT_ALIASES.get(unit.lower())
