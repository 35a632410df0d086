"""
Tests de segmentación, parse y render de recetas Markdown.
"""

import pytest

from recipe_md_core.doc_engine import (
    iter_ingredient_items,
    parse_ingredient,
    parse_recipe,
    render_ingredient,
    render_recipe,
)
from recipe_md_core.domain_models import Ingredient, Quantity, Volume


# ---------- Segmentación ----------

def test_segmenter_empty_block():
    assert list(iter_ingredient_items("")) == []


def test_segmenter_flat_list():
    assert list(iter_ingredient_items("- a\n- b\n")) == ["- a\n", "- b\n"]


def test_segmenter_nested_and_wrapped_lines():
    block = "- a\n  wrapped\n  - b\n    more\n- c"
    assert list(iter_ingredient_items(block)) == ["- a\n  wrapped\n", "  - b\n    more\n", "- c"]


def test_segmenter_blank_line_stays_with_previous_item():
    assert list(iter_ingredient_items("- a\n\n- b\n")) == ["- a\n\n", "- b\n"]


def test_segmenter_text_before_first_marker_goes_to_first_item():
    assert list(iter_ingredient_items("intro\n- a\n")) == ["intro\n- a\n"]


def test_segmenter_block_without_markers():
    assert list(iter_ingredient_items("just some text\n")) == []


def test_segmenter_item_text_starting_with_dash_stays_whole():
    assert list(iter_ingredient_items("- - nested\n- b\n")) == ["- - nested\n", "- b\n"]


def test_segmenter_is_restartable():
    block = "- a\n- b\n"
    assert list(iter_ingredient_items(block)) == list(iter_ingredient_items(block))


# ---------- Ingredientes ----------

def test_parse_ingredient_volume():
    ing = parse_ingredient("- 1 cup flour\n")
    assert ing == Ingredient(indent="", quantity=Quantity.of_volume(Volume(192)), name="flour\n")


def test_parse_ingredient_keeps_indent():
    ing = parse_ingredient("  - 1/2 tsp salt\n")
    assert ing.indent == "  "
    assert ing.quantity == Quantity.of_volume(Volume(2))
    assert ing.name == "salt\n"


def test_parse_ingredient_falls_back_to_simple():
    ing = parse_ingredient("- 2 eggs")
    assert ing.quantity == Quantity.simple(2)
    assert ing.name == "eggs"


def test_parse_ingredient_falls_back_to_none():
    ing = parse_ingredient("- salt to taste")
    assert ing.quantity == Quantity.none()
    assert ing.name == "salt to taste"


def test_parse_ingredient_unit_without_name_is_simple():
    ing = parse_ingredient("- 2 cups\n")
    assert ing.quantity == Quantity.simple(2)
    assert ing.name == "cups\n"


def test_parse_ingredient_requires_marker():
    with pytest.raises(ValueError):
        parse_ingredient("no marker here")


@pytest.mark.parametrize(
    "line",
    [
        "- 1 cup flour\n",
        "  - 1/2 tsp salt\n",
        "- 2 eggs\n",
        "- salt to taste\n",
        "- 1/16 tsp pepper\n",
        "- 1 + 3/4 cups milk\n",
    ],
)
def test_ingredient_round_trip(line):
    assert render_ingredient(parse_ingredient(line)) == line


def test_render_ingredient_variants():
    assert render_ingredient(Ingredient("", Quantity.simple(1.5), "eggs")) == "- 1.5 eggs"
    assert render_ingredient(Ingredient("\t", Quantity.of_volume(Volume(336)), "milk")) == "\t- 1 + 3/4 cups milk"
    assert render_ingredient(Ingredient("", Quantity.none(), "salt")) == "- salt"


# ---------- Receta ----------

def test_parse_recipe_sections():
    text = (
        "# Pancakes\n"
        "\n## Ingredients\n\n"
        "- 1 cup flour\n"
        "- 2 eggs\n"
        "\n## Instructions\n\nMix.\n"
    )
    recipe = parse_recipe(text)
    assert recipe.preface == "# Pancakes\n\n## Ingredients\n\n"
    assert len(recipe.ingredients) == 2
    assert recipe.instructions == "\n## Instructions\n\nMix.\n"
    assert render_recipe(recipe) == text


def test_parse_recipe_without_header_is_all_preface():
    text = "# Notes\n\nNothing to cook here.\n"
    recipe = parse_recipe(text)
    assert recipe.preface == text
    assert recipe.ingredients == ()
    assert recipe.instructions == ""
    assert render_recipe(recipe) == text


def test_parse_recipe_without_following_section():
    text = "# T\n\n## Ingredients\n\n- 1 tbsp butter\n"
    recipe = parse_recipe(text)
    assert recipe.instructions == ""
    assert recipe.ingredients[0].quantity == Quantity.of_volume(Volume(12))


def test_pizza_round_trip(pizza_src):
    recipe = parse_recipe(pizza_src)
    assert len(recipe.ingredients) == 13
    assert render_recipe(recipe) == pizza_src


def test_pizza_scale_identity(pizza_src):
    recipe = parse_recipe(pizza_src)
    assert render_recipe(recipe.scale(1.0)) == pizza_src


def test_pizza_half(pizza_src):
    md = render_recipe(parse_recipe(pizza_src).scale(0.5))
    assert "- 2 cups bread flour\n" in md
    assert "- 1/2 cup warm water\n" in md
    assert "- 1 tsp salt\n" in md
    assert "- 1/4 tsp instant yeast\n" in md
    assert "- 1/2 tbsp olive oil\n" in md
    assert "- 1/3 cup + 2 tsps semolina, for dusting\n  (or use more bread flour)\n" in md
    assert "  - 0.5 can crushed tomatoes\n" in md
    assert "  - 4 oz mozzarella\n" in md
    assert "  - 2 tbsps grated parmesan\n" in md
    assert "- salt to taste\n" in md
    assert md.endswith("- Bake as hot as your oven goes.\n")


def test_pizza_double(pizza_src):
    md = render_recipe(parse_recipe(pizza_src).scale(2))
    assert "- 8 cups bread flour\n" in md
    assert "- 1 tbsp + 1 tsp salt\n" in md
    assert "- 1 + 1/2 cups semolina" in md
    assert "- 1/8 tsp chili flakes\n" in md


def _amounts(recipe):
    out = []
    for ing in recipe.ingredients:
        q = ing.quantity
        if q.kind == "simple":
            out.append(q.amount)
        elif q.kind == "volume":
            out.append(q.volume.quarter_teaspoons)
        else:
            out.append(None)
    return out


def test_scale_is_linear(pizza_src):
    recipe = parse_recipe(pizza_src)
    chained = _amounts(recipe.scale(3).scale(0.25))
    direct = _amounts(recipe.scale(0.75))
    assert len(chained) == len(direct)
    for a, b in zip(chained, direct):
        if a is None:
            assert b is None
        else:
            assert a == pytest.approx(b)
