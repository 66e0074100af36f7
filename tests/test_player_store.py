"""Tests for the player reference store."""

import json

import pytest

from src.lineup_engine.models import Player
from src.team_builder.player_store import PlayerStore


def _write_players(path, players):
    path.write_text(json.dumps({"metadata": {}, "players": players}), encoding="utf-8")
    return path


class TestDefaultSquad:
    def test_twenty_five_players(self, player_store):
        assert len(player_store) == 25
        ids = [p.player_id for p in player_store.get_all_players()]
        assert ids == list(range(1, 26))

    def test_lookup_by_id(self, player_store):
        mbappe = player_store.get_player_by_id(19)
        assert mbappe.name == "Kylian Mbappé"
        assert mbappe.position == "LW"
        assert mbappe.rating == 91

    def test_unknown_id(self, player_store):
        assert player_store.get_player_by_id(999) is None

    def test_attributes_unset(self, player_store):
        lloris = player_store.get_player_by_id(1)
        assert lloris.pace is None
        assert lloris.defending is None

    def test_by_position(self, player_store):
        strikers = player_store.get_players_by_position("ST")
        assert [p.name for p in strikers] == [
            "Karim Benzema", "Olivier Giroud", "Marcus Thuram",
        ]

    def test_by_unknown_position(self, player_store):
        assert player_store.get_players_by_position("LM") == []


class TestResolve:
    def test_keeps_order(self, player_store):
        assert [p.player_id for p in player_store.resolve([23, 1, 19])] == [23, 1, 19]

    def test_skips_unknown_ids(self, player_store):
        assert [p.player_id for p in player_store.resolve([1, 999, 2])] == [1, 2]


class TestConstruction:
    def test_duplicate_ids_rejected(self):
        players = [
            Player(player_id=1, name="A", position="GK", club="X", rating=80),
            Player(player_id=1, name="B", position="ST", club="Y", rating=81),
        ]
        with pytest.raises(ValueError, match="Duplicate player_id"):
            PlayerStore(players)


class TestFromJson:
    def test_loads_players(self, tmp_path):
        path = _write_players(tmp_path / "players.json", [
            {"player_id": 1, "name": "Hugo Lloris", "position": "GK",
             "club": "Tottenham Hotspur", "rating": 88, "image_url": "",
             "pace": None, "dribbling": None, "passing": None,
             "physical": None, "defending": None},
            {"player_id": 2, "name": "Kylian Mbappé", "position": "LW",
             "club": "PSG", "rating": 91, "pace": 97},
        ])
        store = PlayerStore.from_json(path)
        assert len(store) == 2
        assert store.get_player_by_id(2).pace == 97
        assert store.get_player_by_id(2).dribbling is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Run data pipeline first"):
            PlayerStore.from_json(tmp_path / "nope.json")

    def test_missing_field(self, tmp_path):
        path = _write_players(tmp_path / "players.json", [
            {"player_id": 1, "name": "No Rating", "position": "GK"},
        ])
        with pytest.raises(ValueError, match="Malformed player data"):
            PlayerStore.from_json(path)

    def test_duplicate_ids_in_file(self, tmp_path):
        player = {"player_id": 1, "name": "A", "position": "GK", "rating": 80}
        path = _write_players(tmp_path / "players.json", [player, dict(player)])
        with pytest.raises(ValueError, match="Duplicate player_id"):
            PlayerStore.from_json(path)
