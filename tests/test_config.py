import pytest

from hackenbush import GameConfig, load_config
from hackenbush.analysis import SearchConfig
from hackenbush.config import load_edges
from hackenbush.core import Convention, Player


def test_defaults_when_file_missing(tmp_path):
    config = load_config(tmp_path / "missing.yaml")
    assert config.convention is Convention.NORMAL
    assert config.starting_player is Player.RED
    assert config.computer_player is Player.BLUE
    assert config.search == SearchConfig()


def test_load_yaml_config(tmp_path):
    path = tmp_path / "game.yaml"
    path.write_text(
        "convention: misère\n"
        "starting_player: BLUE\n"
        "player1_color: blue\n"
        "mode: search\n"
        "search:\n"
        "  depth: 4\n"
        "  max_nodes: 500\n",
        encoding="utf-8",
    )
    config = load_config(path)

    assert config.convention is Convention.MISERE
    assert config.starting_player is Player.BLUE
    assert config.computer_player is Player.RED
    assert config.mode == "search"
    assert config.search.depth == 4
    assert config.search.max_nodes == 500
    assert config.search.prune


def test_rejects_unknown_values(tmp_path):
    with pytest.raises(ValueError):
        GameConfig.from_dict({"convention": "sideways"})
    with pytest.raises(ValueError):
        GameConfig.from_dict({"mode": "oracle"})
    with pytest.raises(ValueError):
        GameConfig.from_dict({"player1_color": "green"})
    with pytest.raises(ValueError):
        GameConfig.from_dict({"colour": "red"})


def test_load_edges_accepts_list_or_mapping(tmp_path):
    listed = tmp_path / "listed.yaml"
    listed.write_text("- {id: e1, from: ground, to: a, color: blue}\n", encoding="utf-8")
    nested = tmp_path / "nested.json"
    nested.write_text('{"edges": [{"id": "e1", "from": "ground", "to": "a", "color": "red"}]}', encoding="utf-8")

    assert load_edges(listed) == [{"id": "e1", "from": "ground", "to": "a", "color": "blue"}]
    assert load_edges(nested)[0]["color"] == "red"
