"""
recipe_md_core.cli
==================

Punto de entrada de línea de comandos para escalar una receta Markdown.

Uso
---
    recipe-md-core receta.md --factor 0.5            # imprime a stdout
    recipe-md-core receta.md --factor 2 -o doble.md  # escribe a un archivo
    recipe-md-core receta.md --factor 3 --save       # escribe en OUTPUT_DIR
    recipe-md-core receta.md --check                 # valida el ida y vuelta

Notas
-----
- Los mensajes de estado van por logging (stderr); stdout queda solo para el
  Markdown, así se puede redirigir.
- Si no se pasa `--factor`, se usa `RECIPE_SCALE_FACTOR` (ver `config.py`).
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import get_settings
from .engine import check_round_trip, run_scale_pipeline
from .volume import format_amount

logger = logging.getLogger(__name__)


def _scale_factor(text: str) -> float:
    """Tipo argparse: factor finito y mayor a cero (igual que la API)."""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"factor inválido: {text!r}")
    if not (math.isfinite(value) and value > 0):
        raise argparse.ArgumentTypeError(f"el factor debe ser finito y mayor a 0: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recipe-md-core",
        description="Escala las cantidades de una receta escrita en Markdown.",
    )
    parser.add_argument("input", type=Path, help="Archivo Markdown de la receta")
    parser.add_argument(
        "-f",
        "--factor",
        type=_scale_factor,
        default=None,
        help="Factor de escala (default: RECIPE_SCALE_FACTOR o 1.0)",
    )
    out = parser.add_mutually_exclusive_group()
    out.add_argument("-o", "--output", type=Path, help="Archivo de salida")
    out.add_argument(
        "--save",
        action="store_true",
        help="Guardar en OUTPUT_DIR como <nombre>_x<factor>.md",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Solo verificar que parse + render reproduce el archivo exacto",
    )
    return parser


def _read_source(path: Path) -> str:
    if not path.is_file():
        raise RuntimeError(f"No se encontró la receta: {path}")
    # newline="" para no normalizar \r\n y preservar el texto byte a byte
    with path.open(encoding="utf-8", newline="") as fh:
        return fh.read()


def _write_output(path: Path, markdown: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(markdown)


def run(args: argparse.Namespace) -> int:
    """
    Ejecuta la CLI con argumentos ya parseados.

    Returns
    -------
    int
        Código de salida (0 = ok, 1 = el ida y vuelta falló con `--check`).

    Raises
    ------
    RuntimeError
        Si el archivo de entrada no existe.
    ValueError
        Si el factor no es finito o es negativo.
    """
    settings = get_settings()
    source = _read_source(args.input)

    if args.check:
        if check_round_trip(source):
            logger.info("✅ Ida y vuelta exacto: %s", args.input)
            return 0
        logger.error("❌ El render no reproduce el original: %s", args.input)
        return 1

    factor = args.factor if args.factor is not None else settings.default_scale_factor
    result = run_scale_pipeline(source=source, factor=factor)
    markdown = result["markdown"]

    target: Optional[Path] = args.output
    if args.save:
        target = Path(settings.output_dir) / f"{args.input.stem}_x{format_amount(factor)}.md"

    if target is None:
        sys.stdout.write(markdown)
    else:
        _write_output(target, markdown)
        logger.info("✅ Receta escalada en: %s", target.resolve())
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except (RuntimeError, ValueError) as e:
        logger.error("⚠️ %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
