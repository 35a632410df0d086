"""
Tests de la CLI: lectura del archivo, salida a stdout / archivo y --check.
"""

import pytest

from recipe_md_core.cli import main
from recipe_md_core.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    monkeypatch.delenv("RECIPE_SCALE_FACTOR", raising=False)
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path / "output"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_scale_to_stdout(pizza_path, capsys):
    assert main([str(pizza_path), "--factor", "2"]) == 0
    out = capsys.readouterr().out
    assert "- 8 cups bread flour\n" in out


def test_default_factor_from_env(pizza_path, pizza_src, capsys, monkeypatch):
    assert main([str(pizza_path)]) == 0
    assert capsys.readouterr().out == pizza_src

    monkeypatch.setenv("RECIPE_SCALE_FACTOR", "0.5")
    get_settings.cache_clear()
    assert main([str(pizza_path)]) == 0
    assert "- 1/2 cup warm water\n" in capsys.readouterr().out


def test_scale_to_output_file(pizza_path, tmp_path):
    target = tmp_path / "half" / "pizza.md"
    assert main([str(pizza_path), "-f", "0.5", "-o", str(target)]) == 0
    assert "- 1/2 tbsp olive oil\n" in target.read_text(encoding="utf-8")


def test_save_uses_output_dir(pizza_path, tmp_path):
    assert main([str(pizza_path), "-f", "3", "--save"]) == 0
    saved = tmp_path / "output" / "pizza_x3.md"
    assert saved.exists()
    assert "- 12 cups bread flour\n" in saved.read_text(encoding="utf-8")


def test_check_round_trip(pizza_path, tmp_path):
    assert main([str(pizza_path), "--check"]) == 0

    bad = tmp_path / "bad.md"
    bad.write_text("# T\n\n## Ingredients\n\n- 1 tablespoon oil\n", encoding="utf-8")
    assert main([str(bad), "--check"]) == 1


def test_missing_input_fails(tmp_path):
    assert main([str(tmp_path / "nope.md")]) == 1




@pytest.mark.parametrize("factor", ["nan", "inf", "0", "-1", "half"])
def test_invalid_factor_is_rejected_by_argparse(pizza_path, factor):
    with pytest.raises(SystemExit) as exc:
        main([str(pizza_path), "--factor", factor])
    assert exc.value.code == 2
