import json

import pytest
from verlet_cloth.config import ClothConfig
from verlet_cloth.io.json_io import (
    config_from_json,
    config_to_json,
    load_config,
    load_config_raw,
    save_config,
)


def test_defaults():
    cfg = ClothConfig()
    assert cfg.bounds == (1920.0, 1080.0)
    assert cfg.origin == pytest.approx((640.0, 270.0))
    assert cfg.solver_iters == 5
    assert cfg.click_tolerance == 30.0
    assert cfg.dt == 0.1
    assert cfg.gravity == 9.81


@pytest.mark.parametrize("kwargs", [
    {"width": 0},
    {"height": -1},
    {"dt": 0.0},
    {"rows": 0},
    {"cols": 0},
    {"spacing": 0.0},
    {"click_tolerance": 0.0},
    {"solver_iters": 0},
    {"width": float("nan")},
    {"height": float("inf")},
    {"dt": float("nan")},
    {"spacing": float("nan")},
    {"click_tolerance": float("nan")},
    {"gravity": float("nan")},
    {"origin": (float("nan"), 0.0)},
])
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        ClothConfig(**kwargs)


def test_save_load(tmp_path):
    cfg = ClothConfig(rows=8, cols=12, spacing=15.0, origin=(10.0, 20.0), solver_iters=9)
    path = tmp_path / "cloth.json"
    save_config(cfg, str(path))

    raw = load_config_raw(str(path))
    assert raw["origin"] == [10.0, 20.0]
    assert load_config(str(path)) == cfg


def test_partial_json_uses_defaults(tmp_path):
    path = tmp_path / "partial.json"
    path.write_text(json.dumps({"rows": 3, "gravity": 2.5}), encoding="utf-8")

    cfg = load_config(str(path))
    assert cfg.rows == 3
    assert cfg.gravity == 2.5
    assert cfg.cols == ClothConfig().cols
    assert cfg.origin == pytest.approx((640.0, 270.0))


def test_unknown_key_rejected():
    with pytest.raises(ValueError, match="Unknown config keys"):
        config_from_json({"rows": 3, "wind": 1.0})


def test_invalid_value_rejected():
    with pytest.raises(ValueError):
        config_from_json({"solver_iters": 0})


def test_to_json_is_serializable():
    data = config_to_json(ClothConfig())
    assert json.loads(json.dumps(data)) == data


@pytest.mark.parametrize("data", [
    {"rows": 2.7},
    {"solver_iters": 5.9},
    {"cols": "4"},
    {"rows": True},
    {"cols": float("inf")},
])
def test_non_integer_counts_rejected(data):
    """Counts must be whole numbers; fractional values are not truncated."""
    with pytest.raises(ValueError, match="must be an integer"):
        config_from_json(data)


def test_integral_float_counts_accepted():
    cfg = config_from_json({"rows": 3.0, "cols": 4, "solver_iters": 7.0})
    assert (cfg.rows, cfg.cols, cfg.solver_iters) == (3, 4, 7)
    assert isinstance(cfg.rows, int)


def test_nan_dt_never_reaches_the_step():
    """A NaN time step is rejected up front instead of turning particles into NaN."""
    with pytest.raises(ValueError, match="dt"):
        ClothConfig(rows=3, cols=3, dt=float("nan"))
