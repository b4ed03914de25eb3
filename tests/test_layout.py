"""Tests for column budgets."""

import pytest

from termfit.core.dimensions import Tier, classify
from termfit.core.layout import (
    DEFAULT_BUDGET,
    BudgetConfig,
    compute_budget,
    gutter_digits,
    minimum_floor,
)
from termfit.core.modes import RenderMode


class TestGutterDigits:
    """Tests for gutter_digits()."""

    @pytest.mark.parametrize("n,digits", [
        (0, 2),
        (1, 2),
        (9, 2),
        (99, 2),
        (100, 3),
        (999, 3),
        (1000, 4),
        (99999, 5),
        (150000, 6),
        (10**9, 6),
    ])
    def test_digits(self, n: int, digits: int) -> None:
        assert gutter_digits(n) == digits

    def test_custom_bounds(self) -> None:
        cfg = BudgetConfig(min_digits=1, max_digits=3)
        assert gutter_digits(5, cfg) == 1
        assert gutter_digits(123456, cfg) == 3


class TestUnifiedBudget:
    """Tests for unified/inline budgets."""

    def test_normal_width(self) -> None:
        b = compute_budget(100, Tier.NORMAL, RenderMode.UNIFIED, 50)
        assert b.digits == 2
        assert b.gutter_width == 3
        assert b.marker_width == 2
        assert b.content_width == 100 - 3 - 2 - 2
        assert b.per_pane_width is None
        assert not b.is_split
        assert b.rendered_width == 100

    def test_without_line_numbers(self) -> None:
        b = compute_budget(100, Tier.NORMAL, RenderMode.UNIFIED, 50, show_line_numbers=False)
        assert b.gutter_width == 0
        assert b.content_width == 96

    def test_floor_applies_when_narrow(self) -> None:
        b = compute_budget(10, Tier.NARROW, RenderMode.UNIFIED, 5)
        assert b.content_width == minimum_floor(Tier.NARROW) == 20

    def test_large_line_numbers_clamp_gutter(self) -> None:
        b = compute_budget(150, Tier.NORMAL, RenderMode.UNIFIED, 150000)
        assert b.digits == 6
        assert b.gutter_width == 7

    def test_inline_matches_unified(self) -> None:
        unified = compute_budget(90, Tier.COMPACT, RenderMode.UNIFIED, 10)
        inline = compute_budget(90, Tier.COMPACT, RenderMode.INLINE, 10)
        assert inline.content_width == unified.content_width


class TestSplitBudget:
    """Tests for split budgets."""

    def test_split_pane_width(self) -> None:
        b = compute_budget(150, Tier.NORMAL, RenderMode.SPLIT, 50)
        assert b.is_split
        assert b.marker_width == 0
        assert b.separator_width == 4
        assert b.per_pane_width == (150 - 2 - 4) // 2 - 3

    def test_panes_fit_total_width(self) -> None:
        for width in range(100, 400):
            tier = classify(width)
            b = compute_budget(width, tier, RenderMode.SPLIT, 1000)
            assert b.per_pane_width is not None
            assert 2 * b.per_pane_width + b.separator_width <= width
            assert b.per_pane_width >= minimum_floor(tier)

    @pytest.mark.parametrize("width", [0, 10, 30, 50])
    def test_never_below_floor(self, width: int) -> None:
        tier = classify(width)
        b = compute_budget(width, tier, RenderMode.SPLIT, 10)
        assert b.per_pane_width == minimum_floor(tier)

    def test_auto_resolves_by_width(self) -> None:
        assert compute_budget(150, Tier.NORMAL, RenderMode.AUTO, 10).mode is RenderMode.SPLIT
        assert compute_budget(80, Tier.COMPACT, RenderMode.AUTO, 10).mode is RenderMode.UNIFIED

    def test_custom_floors(self) -> None:
        cfg = BudgetConfig(floors={Tier.NARROW: 5, Tier.COMPACT: 5, Tier.NORMAL: 5, Tier.WIDE: 5})
        b = compute_budget(20, Tier.NARROW, RenderMode.UNIFIED, 5, config=cfg)
        assert b.content_width == 20 - 3 - 2 - 2

    def test_config_is_hashable(self) -> None:
        floors = {Tier.WIDE: 50, Tier.NARROW: 10}
        cfg = BudgetConfig(floors=floors)
        assert hash(DEFAULT_BUDGET) == hash(BudgetConfig())
        assert cfg == BudgetConfig(floors=((Tier.NARROW, 10), (Tier.WIDE, 50)))
        assert {cfg: "custom"}[BudgetConfig(floors=dict(floors))] == "custom"

    def test_partial_floors_fall_back(self) -> None:
        cfg = BudgetConfig(floors={Tier.WIDE: 50})
        assert minimum_floor(Tier.WIDE, cfg) == 50
        assert minimum_floor(Tier.COMPACT, cfg) == minimum_floor(Tier.COMPACT)
