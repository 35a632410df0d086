"""
Endpoints para parsear y escalar recetas Markdown.

Este router maneja:
- POST /api/v1/recipes/parse: Parsear una receta (sin escalar)
- POST /api/v1/recipes/scale: Escalar una receta y devolver el Markdown final
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from recipe_md_core.doc_engine import parse_recipe, render_quantity, render_recipe
from recipe_md_core.domain_models import Ingredient
from recipe_md_core.engine import run_scale_pipeline

from ..models.requests import (
    IngredientOut,
    ParseRequest,
    ParseResponse,
    ScaleRequest,
    ScaleResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


def _ingredients_out(ingredients: List[Ingredient]) -> List[IngredientOut]:
    out: List[IngredientOut] = []
    for ing in ingredients:
        q = ing.quantity
        out.append(
            IngredientOut(
                indent=ing.indent,
                kind=q.kind,
                amount=q.amount,
                quarter_teaspoons=q.volume.quarter_teaspoons if q.volume is not None else None,
                quantity_text=render_quantity(q),
                name=ing.name,
            )
        )
    return out


@router.post("/parse", response_model=ParseResponse)
async def parse_recipe_endpoint(request: ParseRequest):
    """
    Parsea una receta y devuelve sus bloques e ingredientes.

    Returns:
        ParseResponse con prefacio, instrucciones, ingredientes y si el
        ida y vuelta reproduce el original.
    """
    recipe = parse_recipe(request.markdown)
    return ParseResponse(
        preface=recipe.preface,
        instructions=recipe.instructions,
        ingredients=_ingredients_out(list(recipe.ingredients)),
        round_trip_ok=render_recipe(recipe) == request.markdown,
    )


@router.post("/scale", response_model=ScaleResponse)
async def scale_recipe_endpoint(request: ScaleRequest):
    """
    Escala todos los ingredientes de una receta por `factor`.

    Returns:
        ScaleResponse con el Markdown escalado y los ingredientes resultantes.
    """
    try:
        result = run_scale_pipeline(source=request.markdown, factor=request.factor)
    except ValueError as e:
        logger.warning(f"Escalado rechazado: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return ScaleResponse(
        markdown=result["markdown"],
        factor=request.factor,
        ingredients=_ingredients_out(list(result["scaled"].ingredients)),
    )
