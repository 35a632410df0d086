from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def pizza_path() -> Path:
    return FIXTURES / "pizza.md"


@pytest.fixture
def pizza_src(pizza_path: Path) -> str:
    """Receta de ejemplo, leída sin normalizar saltos de línea."""
    with pizza_path.open(encoding="utf-8", newline="") as fh:
        return fh.read()
