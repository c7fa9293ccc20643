# -*- coding: utf-8 -*-
import json
import logging

import pytest

from objmesh import parse_obj
from objmesh.utils.config import DEFAULT_CONFIG, Config
from objmesh.utils.logger import logger
from objmesh.utils.profiler import Profiler


@pytest.fixture(autouse=True)
def fresh_config():
    Config.reset()
    level = logger.level
    yield
    Config.reset()
    logger.setLevel(level)


def test_defaults_without_file(tmp_path):
    path = tmp_path / "objmesh.json"
    cfg = Config(path)
    assert cfg["encoding"] == "utf-8"
    assert cfg["default_material"] == DEFAULT_CONFIG["default_material"]
    assert not path.exists()


def test_config_is_a_singleton(tmp_path):
    assert Config(tmp_path / "a.json") is Config(tmp_path / "b.json")


def test_reads_file_and_applies_log_level(tmp_path):
    path = tmp_path / "objmesh.json"
    path.write_text(json.dumps({
        "default_material": {"diffuse_color": [1, 1, 1], "shininess": 8},
        "log_level": "debug",
    }))
    cfg = Config(path)
    assert cfg["default_material"]["shininess"] == 8
    assert cfg["encoding"] == "utf-8"
    assert logger.level == logging.DEBUG


def test_unknown_log_level_falls_back_to_info(tmp_path):
    path = tmp_path / "objmesh.json"
    path.write_text(json.dumps({"log_level": "verbose"}))
    cfg = Config(path)
    assert cfg["log_level"] == "INFO"
    assert logger.level == logging.INFO


def test_broken_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "objmesh.json"
    path.write_text("{not json")
    cfg = Config(path)
    assert cfg["fallback_normal"] == [0.0, 1.0, 0.0]


def test_save_round_trip(tmp_path):
    path = tmp_path / "objmesh.json"
    cfg = Config(path)
    cfg["encoding"] = "latin-1"
    cfg.save()
    assert json.loads(path.read_text())["encoding"] == "latin-1"


def test_config_drives_default_material(tmp_path):
    path = tmp_path / "objmesh.json"
    path.write_text(json.dumps({
        "default_material": {"diffuse_color": [1, 0, 1], "shininess": 4},
    }))
    mesh = parse_obj(["v 0 0 0", "v 1 0 0", "v 0 1 0", "f 1 2 3"], config=Config(path))
    material = mesh.chunks[0].material
    assert material.name == "default"
    assert material.diffuse_color == (1.0, 0.0, 1.0)
    assert material.shininess == 4.0


def test_config_drives_fallback_normal():
    config = dict(DEFAULT_CONFIG, fallback_normal=[0.0, 0.0, -1.0])
    mesh = parse_obj(["v 0 0 0", "v 1 0 0", "v 2 0 0", "f 1 2 3"], config=config)
    assert mesh.normals.tolist() == [[0.0, 0.0, -1.0]] * 3


def test_profiler_measures_block():
    with Profiler("block") as prof:
        sum(range(1000))
    assert prof.elapsed_ms >= 0.0
