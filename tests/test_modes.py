"""Tests for render mode resolution."""

import pytest

from termfit.core.modes import SPLIT_THRESHOLD, RenderMode, resolve_mode


class TestRenderModeParse:
    """Tests for RenderMode.parse()."""

    @pytest.mark.parametrize("value,mode", [
        ("unified", RenderMode.UNIFIED),
        ("SPLIT", RenderMode.SPLIT),
        (" inline ", RenderMode.INLINE),
        (RenderMode.AUTO, RenderMode.AUTO),
    ])
    def test_parse(self, value: object, mode: RenderMode) -> None:
        assert RenderMode.parse(value) is mode  # type: ignore[arg-type]

    def test_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid render mode"):
            RenderMode.parse("sideways")


class TestResolveMode:
    """Tests for resolve_mode()."""

    def test_split_at_threshold(self) -> None:
        r = resolve_mode(RenderMode.SPLIT, SPLIT_THRESHOLD)
        assert r.effective is RenderMode.SPLIT
        assert r.fallback is False
        assert r.notice is None

    def test_split_below_threshold_falls_back(self) -> None:
        r = resolve_mode(RenderMode.SPLIT, 119)
        assert r.requested is RenderMode.SPLIT
        assert r.effective is RenderMode.UNIFIED
        assert r.fallback is True
        assert r.notice == "split view requires 120+ columns"

    @pytest.mark.parametrize("width,mode", [(40, RenderMode.UNIFIED), (119, RenderMode.UNIFIED),
                                            (120, RenderMode.SPLIT), (150, RenderMode.SPLIT)])
    def test_auto(self, width: int, mode: RenderMode) -> None:
        r = resolve_mode(RenderMode.AUTO, width)
        assert r.effective is mode
        assert r.fallback is False

    @pytest.mark.parametrize("mode", [RenderMode.UNIFIED, RenderMode.INLINE])
    @pytest.mark.parametrize("width", [0, 10, 119, 500])
    def test_single_column_modes_are_kept(self, mode: RenderMode, width: int) -> None:
        r = resolve_mode(mode, width)
        assert r.effective is mode
        assert r.fallback is False

    def test_never_split_below_threshold(self) -> None:
        for mode in RenderMode:
            for width in range(0, SPLIT_THRESHOLD):
                assert resolve_mode(mode, width).effective is not RenderMode.SPLIT

    def test_custom_threshold(self) -> None:
        r = resolve_mode("split", 90, split_threshold=80)
        assert r.effective is RenderMode.SPLIT
        r = resolve_mode("split", 70, split_threshold=80)
        assert r.notice == "split view requires 80+ columns"

    def test_accepts_strings(self) -> None:
        assert resolve_mode("auto", 200).effective is RenderMode.SPLIT
