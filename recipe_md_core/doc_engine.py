"""
recipe_md_core.doc_engine
=========================

Este módulo centraliza el ida y vuelta entre Markdown y modelos:

1) Segmentación
   - Parte el bloque de ingredientes en un texto por ítem de lista, incluyendo
     líneas de continuación y sub-ítems que no empiezan con "-".

2) Parsing
   - Ingrediente: separa sangría, cantidad y nombre. La cantidad se prueba en
     orden volumen → número simple → sin cantidad.
   - Receta: separa prefacio / bloque de ingredientes / instrucciones.

3) Rendering
   - Inverso exacto del parsing: `render_recipe(parse_recipe(text)) == text`
     siempre que el documento respete el formato esperado.

Formato esperado
----------------
- El bloque de ingredientes empieza después de la línea "## Ingredients"
  seguida de una línea en blanco.
- Termina en el próximo encabezado ("\\n##") o al final del documento.
- Cada ítem contiene el marcador "- "; lo que lo precede es sangría.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, List, Tuple

from .domain_models import Ingredient, Quantity, Recipe
from .volume import format_amount, parse_amount, parse_volume, render_volume

logger = logging.getLogger(__name__)

INGREDIENTS_HEADER = "\n## Ingredients\n\n"
SECTION_MARKER = "\n##"
ITEM_MARKER = "- "

# Línea que (sin espacios iniciales) empieza con "-": arranca un ítem nuevo
_NEXT_ITEM_RE = re.compile(r"^[^\S\n]*-", re.MULTILINE)


# ============================================================
# Segmentación
# ============================================================

def iter_ingredient_items(block: str) -> Iterator[str]:
    """
    Itera el bloque de ingredientes devolviendo un texto por ítem de lista.

    Cada ítem va desde el inicio del texto restante hasta (sin incluir) la
    próxima línea, posterior a la del marcador "- ", cuyo contenido empieza
    con "-". Si no hay otra, el resto del bloque es el último ítem.

    Parameters
    ----------
    block:
        Texto crudo entre el encabezado de ingredientes y la próxima sección.

    Yields
    ------
    str
        Texto de un ítem. Siempre contiene el marcador "- ".
    """
    rest = block
    while rest:
        marker = rest.find(ITEM_MARKER)
        if marker < 0:
            logger.debug("Texto sin marcador de ítem al final del bloque: %r", rest)
            return

        line_end = rest.find("\n", marker)
        match = _NEXT_ITEM_RE.search(rest, line_end + 1) if line_end >= 0 else None
        if match is None:
            yield rest
            return

        yield rest[: match.start()]
        rest = rest[match.start():]


# ============================================================
# Ingredientes
# ============================================================

def _split_quantity(tail: str) -> Tuple[Quantity, str]:
    # 1) "<monto> <unidad> <nombre>" con unidad de volumen reconocida
    parts = tail.split(" ", 2)
    if len(parts) == 3:
        volume = parse_volume(parts[0], parts[1])
        if volume is not None:
            return Quantity.of_volume(volume), parts[2]

    # 2) "<monto> <nombre>"
    amount_text, sep, name = tail.partition(" ")
    if sep:
        amount = parse_amount(amount_text)
        if amount is not None:
            return Quantity.simple(amount), name

    # 3) sin cantidad
    return Quantity.none(), tail


def parse_ingredient(item: str) -> Ingredient:
    """
    Parsea un ítem de la lista de ingredientes.

    Raises
    ------
    ValueError
        Si el texto no contiene el marcador "- ". No ocurre con textos
        producidos por `iter_ingredient_items`.
    """
    indent, sep, tail = item.partition(ITEM_MARKER)
    if not sep:
        raise ValueError(
            f"Se intentó parsear como ingrediente un texto sin marcador '- ': {item!r}"
        )
    quantity, name = _split_quantity(tail)
    return Ingredient(indent=indent, quantity=quantity, name=name)


def render_quantity(quantity: Quantity) -> str:
    """Texto de la cantidad, sin espacio final ("" si no hay cantidad)."""
    if quantity.kind == "simple":
        assert quantity.amount is not None
        return format_amount(quantity.amount)
    if quantity.kind == "volume":
        assert quantity.volume is not None
        return render_volume(quantity.volume)
    return ""


def render_ingredient(ingredient: Ingredient) -> str:
    parts: List[str] = [ingredient.indent, ITEM_MARKER]
    if ingredient.quantity.kind != "none":
        parts.append(render_quantity(ingredient.quantity) + " ")
    parts.append(ingredient.name)
    return "".join(parts)


# ============================================================
# Receta
# ============================================================

def parse_recipe(text: str) -> Recipe:
    """
    Parsea un documento Markdown completo a `Recipe`.

    Si el documento no tiene el encabezado de ingredientes, todo el texto queda
    como prefacio y la receta no tiene ingredientes ni instrucciones.
    """
    header_at = text.find(INGREDIENTS_HEADER)
    if header_at < 0:
        logger.debug("No se encontró el encabezado de ingredientes; todo es prefacio")
        return Recipe(preface=text, ingredients=(), instructions="")

    split_at = header_at + len(INGREDIENTS_HEADER)
    preface, rest = text[:split_at], text[split_at:]

    section_at = rest.find(SECTION_MARKER)
    if section_at < 0:
        block, instructions = rest, ""
    else:
        block, instructions = rest[:section_at], rest[section_at:]

    ingredients = tuple(parse_ingredient(item) for item in iter_ingredient_items(block))
    logger.debug("Receta parseada: %d ingredientes", len(ingredients))

    return Recipe(preface=preface, ingredients=ingredients, instructions=instructions)


def render_recipe(recipe: Recipe) -> str:
    parts: List[str] = [recipe.preface]
    parts.extend(render_ingredient(i) for i in recipe.ingredients)
    parts.append(recipe.instructions)
    return "".join(parts)
