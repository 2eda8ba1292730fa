# tests/test_config.py
import pytest

from sudoku_engine import ConfigurationError, SolverConfig, load_config
from sudoku_engine.config import merge_overrides


def test_defaults():
    cfg = load_config()
    assert cfg == SolverConfig()
    assert cfg.dimension == 9
    assert cfg.worker_count() >= 1


def test_yaml_then_overrides(tmp_path):
    path = tmp_path / "solver.yaml"
    path.write_text("dimension: 6\nworkers: 2\nsplit_threshold: 4\n", encoding="utf-8")
    cfg = load_config(path, workers=3, dimension=None)
    assert cfg.dimension == 6
    assert cfg.workers == 3
    assert cfg.split_threshold == 4


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("dimensions: 9\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_non_mapping_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_bad_workers():
    with pytest.raises(ConfigurationError):
        SolverConfig(workers=0)


def test_merge_skips_none():
    assert merge_overrides({"a": 1}, a=None, b=2) == {"a": 1, "b": 2}
