"""
Tests for geometry helpers and configuration validation
"""

import pytest

from game.dodge.config import GameConfig
from game.dodge.entities import Rect
from game.dodge.utils import clamp, normalize, rects_intersect, scaled_bounds


def test_scaled_bounds_is_concentric():
    box = scaled_bounds(Rect(0, 0, 100, 50), 0.4)
    assert (box.x, box.y, box.width, box.height) == pytest.approx((30, 15, 40, 20))


def test_rects_overlap():
    assert rects_intersect(Rect(100, 100, 40, 40), Rect(120, 120, 2, 2))
    assert rects_intersect(Rect(120, 120, 2, 2), Rect(100, 100, 40, 40))


def test_rects_disjoint():
    assert not rects_intersect(Rect(100, 100, 40, 40), Rect(141, 100, 10, 10))
    assert not rects_intersect(Rect(100, 100, 40, 40), Rect(100, 200, 40, 40))


def test_touching_edges_overlap():
    assert rects_intersect(Rect(0, 0, 10, 10), Rect(10, 0, 10, 10))


def test_empty_rect_never_overlaps():
    assert not rects_intersect(Rect(0, 0, 0, 10), Rect(0, 0, 10, 10))


def test_normalize_unit_length_and_zero_fallback():
    assert normalize(3.0, 4.0) == pytest.approx((0.6, 0.8))
    assert normalize(0.0, 0.0) == (0.0, 0.0)
    assert normalize(0.0, 0.0, default=(1.0, 0.0)) == (1.0, 0.0)


def test_clamp():
    assert clamp(-5, 0, 10) == 0
    assert clamp(15, 0, 10) == 10
    assert clamp(5, 0, 10) == 5


def test_default_config_movable_region():
    assert GameConfig().movable_region == (50, 50, 750, 550)


@pytest.mark.parametrize("options", [
    {"width": 0},
    {"height": -600},
    {"gravity": (0.0, 9.8)},
    {"debug": "yes"},
    {"player_bounds_margin": 300},
    {"hitbox_scale": 0},
    {"asteroid_scale_range": (1.5, 0.5)},
    {"threshold_growth": 1.0},
])
def test_invalid_config_rejected(options):
    with pytest.raises(ValueError):
        GameConfig(**options)


def test_from_dict_rejects_unknown_options():
    with pytest.raises(ValueError, match="physics"):
        GameConfig.from_dict({"width": 800, "physics": "arcade"})


def test_from_dict_accepts_known_options():
    cfg = GameConfig.from_dict({"width": 1024, "height": 768, "debug": True})
    assert (cfg.width, cfg.height, cfg.debug) == (1024, 768, True)
    assert cfg.movable_region == (50, 50, 974, 718)
