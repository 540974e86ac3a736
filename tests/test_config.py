import json

import pytest

from rectoverlap.config import ConfigError, RectangleSpec, SceneConfig


def write_scene(tmp_path, data):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(data))
    return path


def test_load_scene(tmp_path):
    path = write_scene(tmp_path, {"rectangles": [
        {"x": 0, "y": 0, "width": 2, "height": 2},
        {"x": 10, "y": 0, "width": 2, "height": 2, "rotation": 45},
    ]})
    scene = SceneConfig.from_config_file(path)
    assert scene.first == RectangleSpec(0.0, 0.0, 2.0, 2.0, 0.0)
    assert scene.second.rotation == 45.0

    first, second = scene.build()
    assert first.rotation == 0.0
    assert not first.overlapped(second)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        SceneConfig.from_config_file(tmp_path / "nope.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "scene.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        SceneConfig.from_config_file(path)


@pytest.mark.parametrize("data", [
    [],
    {"shapes": []},
    {"rectangles": [{"x": 0, "y": 0, "width": 1, "height": 1}]},
    {"rectangles": [{"x": 0, "y": 0, "width": 1}, {"x": 0, "y": 0, "width": 1, "height": 1}]},
    {"rectangles": [{"x": "a", "y": 0, "width": 1, "height": 1}, {"x": 0, "y": 0, "width": 1, "height": 1}]},
    {"rectangles": [{"x": True, "y": 0, "width": 1, "height": 1}, {"x": 0, "y": 0, "width": 1, "height": 1}]},
    {"rectangles": [5, {"x": 0, "y": 0, "width": 1, "height": 1}]},
])
def test_malformed_scene(data):
    with pytest.raises(ConfigError):
        SceneConfig.from_dict(data)


def test_directory_is_not_a_scene(tmp_path):
    with pytest.raises(FileNotFoundError):
        SceneConfig.from_config_file(tmp_path)


def test_invalid_utf8(tmp_path):
    path = tmp_path / "scene.json"
    path.write_bytes(b'{"rectangles": "\xff\xfe"}')
    with pytest.raises(ConfigError):
        SceneConfig.from_config_file(path)
