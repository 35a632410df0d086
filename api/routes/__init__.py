"""Rutas de la API."""

from . import recipes

__all__ = ["recipes"]
