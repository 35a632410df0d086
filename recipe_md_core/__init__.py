"""
recipe_md_core
==============

Núcleo para leer recetas escritas en un Markdown acotado, escalar sus
cantidades y volver a renderizarlas como Markdown.

Módulos principales:
- `units`: tamaños de unidades (en cuartos de cucharadita) y alias aceptados
- `volume`: parsing de cantidades y render en fracciones "humanas"
- `domain_models`: Volume, Quantity, Ingredient, Recipe
- `doc_engine`: segmentación del bloque de ingredientes, parse y render
- `engine`: orquestador (parse → scale → render)
"""
