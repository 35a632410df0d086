"""
API HTTP para recipe-md-core.

Esta capa expone endpoints REST que usan el core interno (recipe_md_core.engine)
para parsear y escalar recetas Markdown.

La API está diseñada para ser consumida por:
- UI web
- Clientes externos
- Scripts de automatización
"""
