"""Tests for RenderOptions."""

import pytest

from termfit.core.dimensions import StaticDimensionProvider, ThresholdConfig, Tier
from termfit.core.modes import RenderMode
from termfit.core.options import RenderOptions


class TestRenderOptions:
    """Tests for option parsing and builders."""

    def test_defaults(self) -> None:
        opts = RenderOptions()
        assert opts.mode is RenderMode.AUTO
        assert opts.width is None
        assert opts.context_lines == 3
        assert opts.show_line_numbers is True
        assert opts.max_rendered_lines is None
        assert opts.responsive is True

    def test_mode_string_is_parsed(self) -> None:
        assert RenderOptions(mode="split").mode is RenderMode.SPLIT  # type: ignore[arg-type]

    def test_invalid_mode(self) -> None:
        with pytest.raises(ValueError):
            RenderOptions(mode="diagonal")  # type: ignore[arg-type]

    def test_negative_context_clamped(self) -> None:
        assert RenderOptions(context_lines=-4).context_lines == 0

    def test_builders_chain(self) -> None:
        opts = (RenderOptions()
                .with_mode("inline")
                .with_width(150)
                .with_context(5)
                .with_line_numbers(False)
                .with_max_lines(20)
                .with_responsive(False))
        assert opts.mode is RenderMode.INLINE
        assert opts.width == 150
        assert opts.context_lines == 5
        assert opts.show_line_numbers is False
        assert opts.max_rendered_lines == 20
        assert opts.responsive is False

    def test_dict_round_trip(self) -> None:
        opts = RenderOptions(mode=RenderMode.SPLIT, width=130, thresholds=ThresholdConfig(50, 90, 140))
        restored = RenderOptions.from_dict(opts.to_dict())
        assert restored == opts


class TestWidthResolution:
    """Tests for the width precedence rules."""

    def test_explicit_width_beats_provider(self) -> None:
        opts = RenderOptions(width=150)
        assert opts.resolve_width(StaticDimensionProvider(40, 30)) == (150, 30, True)

    def test_non_responsive_uses_fixed_width(self) -> None:
        opts = RenderOptions(responsive=False)
        width, _, available = opts.resolve_width(StaticDimensionProvider(40))
        assert width == 120
        assert available is True

    def test_provider_width(self) -> None:
        assert RenderOptions().resolve_width(StaticDimensionProvider(90, 50)) == (90, 50, True)

    def test_unavailable_provider_falls_back(self, unavailable_provider: StaticDimensionProvider) -> None:
        assert RenderOptions().resolve_width(unavailable_provider) == (80, 24, False)

    def test_no_provider_falls_back(self) -> None:
        dims = RenderOptions().dimensions()
        assert dims.width == 80
        assert dims.is_available is False

    def test_dimensions_use_option_thresholds(self) -> None:
        opts = RenderOptions(width=70, thresholds=ThresholdConfig(40, 60, 80))
        assert opts.dimensions().tier is Tier.NORMAL

    def test_cache_key_includes_width_and_mode(self) -> None:
        opts = RenderOptions(mode=RenderMode.SPLIT)
        assert opts.cache_key(Tier.WIDE, "abc", 200) != opts.cache_key(Tier.WIDE, "abc", 199)
        assert opts.cache_key(Tier.WIDE, "abc", 200) != RenderOptions().cache_key(Tier.WIDE, "abc", 200)
