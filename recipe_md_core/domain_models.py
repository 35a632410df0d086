"""
Modelos de dominio de una receta en Markdown.

Todos los modelos son dataclasses inmutables (frozen): escalar una receta
nunca modifica la original, siempre devuelve instancias nuevas.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Literal, Optional, Tuple

QuantityKind = Literal["none", "simple", "volume"]


def _check_factor(factor: float) -> None:
    # NaN e infinito también quedan afuera
    if not (math.isfinite(factor) and factor >= 0):
        raise ValueError(f"Factor de escala inválido: {factor}")


@dataclass(frozen=True)
class Volume:
    """
    Volumen exacto expresado en cuartos de cucharadita.

    Attributes
    ----------
    quarter_teaspoons:
        Cantidad de cuartos de cucharadita. Nunca negativa.
    """

    quarter_teaspoons: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.quarter_teaspoons) and self.quarter_teaspoons >= 0):
            raise ValueError(
                f"Un volumen debe ser finito y no negativo: {self.quarter_teaspoons}"
            )

    def scale(self, factor: float) -> Volume:
        _check_factor(factor)
        return Volume(self.quarter_teaspoons * factor)


@dataclass(frozen=True)
class Quantity:
    """
    Cantidad asociada a un ingrediente.

    Es una unión cerrada: exactamente una variante activa según `kind`.
    - "none":   sin cantidad numérica ("salt to taste")
    - "simple": número sin unidad reconocida ("2 eggs") → `amount`
    - "volume": medida de volumen reconocida → `volume`

    Usar los constructores `Quantity.none()`, `Quantity.simple()` y
    `Quantity.of_volume()` en lugar del constructor directo.
    """

    kind: QuantityKind = "none"
    amount: Optional[float] = None
    volume: Optional[Volume] = None

    def __post_init__(self) -> None:
        if self.kind == "none":
            valid = self.amount is None and self.volume is None
        elif self.kind == "simple":
            valid = self.amount is not None and self.volume is None
        elif self.kind == "volume":
            valid = self.amount is None and self.volume is not None
        else:
            valid = False
        if not valid:
            raise ValueError(f"Quantity inconsistente: {self!r}")

    @classmethod
    def none(cls) -> Quantity:
        return cls()

    @classmethod
    def simple(cls, amount: float) -> Quantity:
        return cls(kind="simple", amount=amount)

    @classmethod
    def of_volume(cls, volume: Volume) -> Quantity:
        return cls(kind="volume", volume=volume)

    def scale(self, factor: float) -> Quantity:
        if self.kind == "simple":
            assert self.amount is not None
            return Quantity.simple(self.amount * factor)
        if self.kind == "volume":
            assert self.volume is not None
            return Quantity.of_volume(self.volume.scale(factor))
        return self


@dataclass(frozen=True)
class Ingredient:
    """
    Un ítem de la lista de ingredientes.

    Attributes
    ----------
    indent:
        Todo lo que precede al marcador "- " (sangría de listas anidadas).
        Se reproduce byte a byte al renderizar.
    quantity:
        Cantidad detectada al inicio del ítem.
    name:
        Resto del texto, incluyendo el salto de línea y líneas de continuación.
    """

    indent: str
    quantity: Quantity
    name: str

    def scale(self, factor: float) -> Ingredient:
        return replace(self, quantity=self.quantity.scale(factor))


@dataclass(frozen=True)
class Recipe:
    """
    Receta separada en tres bloques de texto.

    Attributes
    ----------
    preface:
        Todo el texto hasta el encabezado "## Ingredients" y la línea en blanco
        que lo sigue (inclusive).
    ingredients:
        Ingredientes en el orden del documento.
    instructions:
        Todo lo que sigue al bloque de ingredientes (incluye encabezados).
    """

    preface: str
    ingredients: Tuple[Ingredient, ...]
    instructions: str

    def scale(self, factor: float) -> Recipe:
        """
        Devuelve una receta nueva con cada ingrediente escalado por `factor`.

        Raises
        ------
        ValueError
            Si `factor` es negativo, NaN o infinito.
        """
        _check_factor(factor)
        return Recipe(
            preface=self.preface,
            ingredients=tuple(i.scale(factor) for i in self.ingredients),
            instructions=self.instructions,
        )
