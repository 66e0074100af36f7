"""Tests for the lineup builder command-line entry point."""

import json

from src.team_builder.run_builder import build_lineup, format_report


class TestBuildLineup:
    def test_default_squad(self):
        controller = build_lineup("4-3-3")
        assert controller.lineup.filled_count() == 11
        assert controller.power_score == 87

    def test_from_players_file(self, tmp_path):
        players = [
            {"player_id": 1, "name": "Hugo Lloris", "position": "GK", "rating": 88},
            {"player_id": 2, "name": "Karim Benzema", "position": "ST", "rating": 89},
        ]
        path = tmp_path / "players.json"
        path.write_text(json.dumps({"players": players}), encoding="utf-8")

        controller = build_lineup("4-4-2", path)
        assert controller.lineup.get_slot("GK").player_id == 1
        assert controller.lineup.get_slot("ST1").player_id == 2
        assert controller.lineup.filled_count() == 2


class TestFormatReport:
    def test_report_contents(self):
        report = format_report(build_lineup("4-3-3"))
        lines = report.splitlines()
        assert lines[0] == "My French XI (4-3-3)"
        assert "Kylian Mbappé (91)" in report
        assert "Power: 87/100" in report
        assert "Strengths: defense=" in report
        assert "  1. " in report

    def test_empty_slots_shown_as_dash(self, tmp_path):
        path = tmp_path / "players.json"
        path.write_text(json.dumps({"players": [
            {"player_id": 1, "name": "Hugo Lloris", "position": "GK", "rating": 88},
        ]}), encoding="utf-8")

        report = format_report(build_lineup("4-3-3", path))
        assert "  ST    -" in report
        # Fewer than seven players: no recommendations listed
        assert "  1. " not in report
