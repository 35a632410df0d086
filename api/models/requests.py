"""
Modelos de request/response para la API.

Estos modelos definen la estructura esperada de los requests HTTP,
validando tipos y valores antes de pasarlos al core.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    """Request para parsear una receta Markdown sin modificarla."""

    markdown: str = Field(..., description="Documento Markdown completo de la receta")


class ScaleRequest(BaseModel):
    """
    Request para escalar una receta.

    Este modelo valida los parámetros antes de llamar a `engine.run_scale_pipeline`.
    """

    markdown: str = Field(..., description="Documento Markdown completo de la receta")
    factor: float = Field(
        default=1.0,
        gt=0,
        description="Factor de escala (ej: 0.5 = media receta, 2 = doble)",
    )


class IngredientOut(BaseModel):
    """Ingrediente parseado, tal como lo ve el core."""

    indent: str = Field(..., description="Texto previo al marcador '- '")
    kind: Literal["none", "simple", "volume"] = Field(..., description="Tipo de cantidad")
    amount: Optional[float] = Field(default=None, description="Monto si kind='simple'")
    quarter_teaspoons: Optional[float] = Field(
        default=None,
        description="Volumen en cuartos de cucharadita si kind='volume'",
    )
    quantity_text: str = Field(..., description="Cantidad renderizada ('' si no hay)")
    name: str = Field(..., description="Resto del ítem")


class ScaleResponse(BaseModel):
    """Response de un escalado: Markdown final + ingredientes escalados."""

    markdown: str
    factor: float
    ingredients: List[IngredientOut] = Field(default_factory=list)


class ParseResponse(BaseModel):
    """Response de un parseo: los tres bloques de la receta."""

    preface: str
    instructions: str
    ingredients: List[IngredientOut] = Field(default_factory=list)
    round_trip_ok: bool = Field(
        ...,
        description="True si renderizar lo parseado reproduce el original exacto",
    )
