# -*- coding: utf-8 -*-
from pathlib import Path

from objmesh.assets.material import DEFAULT_MATERIAL, MaterialDefinition, resolve_material
from objmesh.assets.mtl_parser import parse_mtl_file, parse_mtl_lines


def test_parse_materials(write_file, tmp_path):
    path = write_file("scene.mtl", """
    # exported
    newmtl wood
    Kd 0.5 0.25 0.125
    Ns 10
    map_Kd textures/../textures/wood.png

      newmtl plain
    illum 2
    """)
    library = parse_mtl_file(path)

    assert set(library) == {"wood", "plain"}
    wood = library["wood"]
    assert wood.name == "wood"
    assert wood.diffuse_color == (0.5, 0.25, 0.125)
    assert wood.shininess == 10.0
    assert wood.diffuse_texture == tmp_path / "textures" / "wood.png"

    plain = library["plain"]
    assert plain.diffuse_color == (0.8, 0.8, 0.8)
    assert plain.shininess == 32.0
    assert plain.diffuse_texture is None


def test_redefinition_last_wins():
    library = parse_mtl_lines([
        "newmtl a", "Kd 1 0 0",
        "newmtl a", "Kd 0 1 0",
    ])
    assert library["a"].diffuse_color == (0.0, 1.0, 0.0)


def test_directives_before_newmtl_are_dropped():
    library = parse_mtl_lines(["Kd 1 1 1", "Ns 4", "newmtl only"])
    assert list(library) == ["only"]
    assert library["only"].shininess == 32.0


def test_directives_are_case_sensitive():
    library = parse_mtl_lines(["newmtl m", "kd 0 0 0", "KD 0 0 0"])
    assert library["m"].diffuse_color == (0.8, 0.8, 0.8)


def test_merges_into_existing_library(write_file):
    existing = {"keep": MaterialDefinition("keep", (1, 1, 1))}
    path = write_file("extra.mtl", "newmtl extra\nNs 5\n")
    library = parse_mtl_file(path, existing)
    assert library is existing
    assert set(library) == {"keep", "extra"}


def test_missing_file_is_not_fatal(tmp_path):
    existing = {"keep": MaterialDefinition("keep")}
    library = parse_mtl_file(tmp_path / "nope.mtl", existing)
    assert library == {"keep": MaterialDefinition("keep")}
    assert parse_mtl_file(tmp_path / "nope.mtl") == {}


def test_texture_relative_to_mtl_directory(write_file, tmp_path):
    path = write_file("mats/sub.mtl", "newmtl t\nmap_Kd ../img/t.png\n")
    library = parse_mtl_file(path)
    assert library["t"].diffuse_texture == tmp_path / "img" / "t.png"


def test_resolve_material_falls_back():
    library = {"a": MaterialDefinition("a", (1, 0, 0))}
    assert resolve_material("a", library).diffuse_color == (1.0, 0.0, 0.0)
    assert resolve_material("missing", library) is DEFAULT_MATERIAL
    assert DEFAULT_MATERIAL.name == "default"


def test_material_is_a_value():
    a = MaterialDefinition("m", (0.1, 0.2, 0.3), 5, "x.png")
    assert a == MaterialDefinition("m", (0.1, 0.2, 0.3), 5.0, Path("x.png"))
    assert a.replace(shininess=6).shininess == 6.0
    assert a.shininess == 5.0
    assert a.has_texture
