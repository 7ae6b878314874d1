import pytest
import yaml

from gameoflife.core.exceptions import ConfigurationError
from gameoflife_gui.config import (
    DEFAULT_GUI_CONFIG,
    ColorConfig,
    GuiConfig,
    TimingConfig,
    load_gui_config,
    parse_gui_config,
)


def test_bundled_config_matches_defaults():
    assert load_gui_config() == DEFAULT_GUI_CONFIG


def test_default_values():
    cfg = GuiConfig()
    assert cfg.cell_sizes == (10, 15, 20)
    assert cfg.canvas_scales == (0.3, 0.6, 0.9)
    assert cfg.timing == TimingConfig(shortest_ms=100, longest_ms=500, speed_steps=2)
    assert cfg.colors == ColorConfig(alive="steelblue", dead="white")


def test_partial_config_uses_defaults():
    cfg = parse_gui_config({"colors": {"alive": "black"}})
    assert cfg.colors.alive == "black"
    assert cfg.colors.dead == "white"
    assert cfg.cell_sizes == (10, 15, 20)


def test_load_custom_file(temp_yaml_file):
    raw = {
        "cell_sizes": [4, 8],
        "canvas_scales": [0.5, 1.0],
        "timing": {"shortest_ms": 20, "longest_ms": 200, "speed_steps": 3},
        "defaults": {"speed": 3, "cell_size": 0, "canvas_size": 1},
    }
    temp_yaml_file.write_text(yaml.dump(raw), encoding="utf-8")

    cfg = load_gui_config(temp_yaml_file)

    assert cfg.cell_sizes == (4, 8)
    assert cfg.timing.speed_steps == 3
    assert cfg.defaults.speed == 3


def test_empty_file_gives_defaults(temp_yaml_file):
    temp_yaml_file.write_text("", encoding="utf-8")
    assert load_gui_config(temp_yaml_file) == DEFAULT_GUI_CONFIG


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_gui_config(tmp_path / "nope.yaml")


def test_malformed_yaml(temp_yaml_file):
    temp_yaml_file.write_text("{ invalid: yaml: content", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_gui_config(temp_yaml_file)


@pytest.mark.parametrize(
    "raw, key",
    [
        ({"cell_sizes": []}, "cell_sizes"),
        ({"cell_sizes": [0, 10]}, "cell_sizes"),
        ({"canvas_scales": [1.5]}, "canvas_scales"),
        ({"timing": {"shortest_ms": 600, "longest_ms": 500}}, "timing"),
        ({"timing": {"speed_steps": 0}}, "timing.speed_steps"),
        ({"defaults": {"speed": 5}}, "defaults.speed"),
        ({"defaults": {"cell_size": 3}}, "defaults.cell_size"),
        ({"defaults": {"canvas_size": 3}}, "defaults.canvas_size"),
    ],
)
def test_invalid_values(raw, key):
    with pytest.raises(ConfigurationError) as exc_info:
        parse_gui_config(raw)
    assert exc_info.value.config_key == key


def test_wrong_types():
    with pytest.raises(ConfigurationError):
        parse_gui_config({"cell_sizes": ["big"]})
