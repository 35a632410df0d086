from __future__ import annotations

"""
recipe_md_core.engine
=====================

Orquestador de alto nivel: parse → scale → render.

Expone una API interna y estable para que los puntos de entrada (CLI, API HTTP)
no dependan de los detalles de `doc_engine`. No hace I/O: recibe texto y
devuelve texto y modelos.
"""

import logging
from typing import TypedDict

from .doc_engine import parse_recipe, render_recipe
from .domain_models import Recipe

logger = logging.getLogger(__name__)


class ScaleRunResult(TypedDict):
    """
    Resultado de una corrida de escalado.

    Estructura simple, pensada para devolver datos a la capa HTTP y para
    asserts en tests.
    """

    recipe: Recipe
    """Receta parseada, sin escalar."""

    scaled: Recipe
    """Receta escalada por el factor pedido."""

    markdown: str
    """Markdown renderizado de la receta escalada."""

    ingredient_count: int


def run_scale_pipeline(*, source: str, factor: float) -> ScaleRunResult:
    """
    Parsea `source`, escala todos los ingredientes por `factor` y renderiza.

    Args:
        source:
            Documento Markdown completo de la receta.
        factor:
            Factor de escala (>= 0). 1.0 deja las cantidades iguales.

    Returns:
        ScaleRunResult con receta original, escalada y Markdown final.

    Raises:
        ValueError: si `factor` es negativo.
    """
    recipe = parse_recipe(source)
    scaled = recipe.scale(factor)
    markdown = render_recipe(scaled)

    logger.info(
        "Receta escalada x%s (%d ingredientes)", factor, len(recipe.ingredients)
    )

    return {
        "recipe": recipe,
        "scaled": scaled,
        "markdown": markdown,
        "ingredient_count": len(recipe.ingredients),
    }


def check_round_trip(source: str) -> bool:
    """True si parsear y renderizar `source` sin escalar lo reproduce exacto."""
    return render_recipe(parse_recipe(source)) == source
