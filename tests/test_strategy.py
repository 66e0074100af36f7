"""Tests for team strengths and strategy recommendations."""

import pytest

from src.lineup_engine.models import Player, StrategyScore, TeamStrengths
from src.lineup_engine.strategy import (
    STRATEGY_ARCHETYPES,
    compute_team_strengths,
    get_best_strategy,
    get_team_strategies,
    rank_strategies,
    recommend_strategies,
    score_strategy,
)

ARCHETYPE_KEYS = [a.key for a in STRATEGY_ARCHETYPES]


# ── Helpers ──────────────────────────────────────────────────────────


def _make_player(pid, position, rating, **attrs):
    return Player(
        player_id=pid,
        name=f"Player {pid}",
        position=position,
        club="TST",
        rating=rating,
        **attrs,
    )


def _make_striker():
    return _make_player(
        1, "ST", 90,
        pace=90, dribbling=80, passing=70, physical=60, defending=30,
    )


def _make_xi(rating=80):
    positions = ["GK", "LB", "CB", "CB", "RB", "CDM", "CM", "CAM", "LW", "ST", "RW"]
    return [_make_player(i, pos, rating) for i, pos in enumerate(positions, start=1)]


def _archetype(key):
    return next(a for a in STRATEGY_ARCHETYPES if a.key == key)


# ── Archetype table ──────────────────────────────────────────────────


class TestArchetypes:
    def test_six_archetypes_in_declaration_order(self):
        assert ARCHETYPE_KEYS == [
            "possession", "counter_attack", "high_press",
            "low_block", "offensive", "balanced",
        ]

    def test_weights_sum_to_one(self):
        for archetype in STRATEGY_ARCHETYPES:
            assert sum(archetype.weights.values()) == pytest.approx(1.0)

    def test_weights_use_known_dimensions(self):
        dims = set(TeamStrengths().as_dict())
        for archetype in STRATEGY_ARCHETYPES:
            assert set(archetype.weights) <= dims

    def test_display_fields_present(self):
        for archetype in STRATEGY_ARCHETYPES:
            assert archetype.name
            assert archetype.description
            assert archetype.icon


# ── Team strengths ───────────────────────────────────────────────────


class TestComputeTeamStrengths:
    def test_empty_is_all_zero(self):
        assert compute_team_strengths([]) == TeamStrengths()

    def test_single_striker(self):
        strengths = compute_team_strengths([_make_striker()])
        assert strengths == TeamStrengths(
            defense=0, midfield=0, attack=90,
            speed=90, technique=75, physical=45,
        )

    def test_missing_attributes_use_rating_fallbacks(self):
        strengths = compute_team_strengths([_make_player(1, "CB", 80)])
        assert strengths.defense == 80
        assert strengths.speed == 64       # 80 * 0.8
        assert strengths.technique == 56   # 80 * 0.7
        assert strengths.physical == 48    # 80 * 0.6

    def test_partial_attributes_mix_with_fallbacks(self):
        player = _make_player(1, "CM", 80, dribbling=90, defending=70)
        strengths = compute_team_strengths([player])
        assert strengths.midfield == 80
        assert strengths.technique == 73   # (90 + 56) / 2
        assert strengths.physical == 59    # (48 + 70) / 2

    def test_zero_attribute_is_not_replaced(self):
        player = _make_player(1, "LW", 80, pace=0)
        assert compute_team_strengths([player]).speed == 0

    def test_category_weighted_average(self):
        players = [_make_player(1, "GK", 80), _make_player(2, "ST", 90)]
        strengths = compute_team_strengths(players)
        # Total weight 1.0 + 1.2 = 2.2
        assert strengths.defense == 36     # 80 / 2.2
        assert strengths.attack == 49      # 108 / 2.2
        assert strengths.speed == 68       # (64 + 86.4) / 2.2
        assert strengths.technique == 60   # (56 + 75.6) / 2.2
        assert strengths.physical == 51    # (48 + 64.8) / 2.2

    def test_goalkeeper_counts_as_defense(self):
        strengths = compute_team_strengths([_make_player(1, "GK", 85)])
        assert strengths.defense == 85
        assert strengths.midfield == 0
        assert strengths.attack == 0

    def test_unknown_position_weighted_as_midfielder_without_sector(self):
        strengths = compute_team_strengths([_make_player(1, "XX", 70)])
        assert strengths.defense == 0
        assert strengths.midfield == 0
        assert strengths.attack == 0
        assert strengths.speed == 56

    def test_unknown_position_dilutes_sectors(self):
        players = [_make_player(1, "CB", 80), _make_player(2, "XX", 80)]
        assert compute_team_strengths(players).defense == 40

    def test_full_xi_sectors(self):
        strengths = compute_team_strengths(_make_xi(rating=80))
        # 5 defensive codes, 3 midfield and 3 attack (weight 1.2) over 11.6
        assert strengths.defense == 34
        assert strengths.midfield == 21
        assert strengths.attack == 25
        assert strengths.speed == 64

    def test_order_independent(self):
        players = _make_xi()
        assert compute_team_strengths(players) == compute_team_strengths(players[::-1])


# ── Strategy scoring ─────────────────────────────────────────────────


class TestScoreStrategy:
    def test_scaled_and_rounded(self):
        strengths = TeamStrengths(defense=50, midfield=50, attack=50,
                                  speed=50, technique=50, physical=50)
        assert score_strategy(_archetype("balanced"), strengths) == 60

    def test_clamped_to_100(self):
        strengths = TeamStrengths(99, 99, 99, 99, 99, 99)
        for archetype in STRATEGY_ARCHETYPES:
            assert score_strategy(archetype, strengths) == 100

    def test_clamped_to_zero(self):
        strengths = TeamStrengths(defense=-50)
        assert score_strategy(_archetype("low_block"), strengths) == 0


class TestRankStrategies:
    def test_returns_six_entries(self):
        ranked = rank_strategies(compute_team_strengths(_make_xi()))
        assert len(ranked) == 6
        assert all(isinstance(s, StrategyScore) for s in ranked)
        assert {s.key for s in ranked} == set(ARCHETYPE_KEYS)

    def test_scores_bounded_and_sorted(self):
        ranked = rank_strategies(compute_team_strengths(_make_xi(rating=95)))
        scores = [s.compatibility_score for s in ranked]
        assert all(0 <= score <= 100 for score in scores)
        assert scores == sorted(scores, reverse=True)

    def test_zero_strengths_keep_declaration_order(self):
        ranked = rank_strategies(TeamStrengths())
        assert [s.key for s in ranked] == ARCHETYPE_KEYS
        assert all(s.compatibility_score == 0 for s in ranked)

    def test_single_striker_ranking(self):
        ranked = rank_strategies(compute_team_strengths([_make_striker()]))
        assert [(s.key, s.compatibility_score) for s in ranked] == [
            ("offensive", 100),
            ("counter_attack", 86),
            ("possession", 56),
            ("balanced", 56),
            ("high_press", 43),
            ("low_block", 16),
        ]

    def test_defensive_roster_prefers_low_block(self):
        defenders = [
            _make_player(i, "CB", 90, pace=20, dribbling=20, passing=20,
                         physical=30, defending=95)
            for i in range(1, 8)
        ]
        ranked = rank_strategies(compute_team_strengths(defenders))
        scores = {s.key: s.compatibility_score for s in ranked}
        assert scores["low_block"] > scores["offensive"]
        assert ranked[0].key == "low_block"


# ── Convenience wrappers ─────────────────────────────────────────────


class TestRecommendations:
    def test_get_team_strategies_matches_rank(self):
        players = _make_xi()
        assert get_team_strategies(players) == rank_strategies(
            compute_team_strengths(players)
        )

    def test_best_strategy_for_striker(self):
        best = get_best_strategy([_make_striker()])
        assert best.key == "offensive"

    def test_best_strategy_for_empty_lineup(self):
        best = get_best_strategy([])
        assert best.key == "possession"
        assert best.compatibility_score == 0

    def test_no_recommendations_below_seven_players(self):
        assert recommend_strategies(_make_xi()[:6]) == []

    def test_top_three_from_seven_players(self):
        recommended = recommend_strategies(_make_xi()[:7])
        assert len(recommended) == 3
        assert recommended == get_team_strategies(_make_xi()[:7])[:3]

    def test_custom_threshold_and_count(self):
        recommended = recommend_strategies([_make_striker()], top_n=2, min_players=1)
        assert [s.key for s in recommended] == ["offensive", "counter_attack"]
