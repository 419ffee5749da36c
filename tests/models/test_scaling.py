"""Tests for terminal size classification and font selection."""

import pytest

from pomowise.models.scaling import (
    PROFILES,
    ScalingContext,
    SizeCategory,
    select_font_for_size,
)


class TestSizeCategory:
    @pytest.mark.parametrize(
        "width,height,expected",
        [
            (30, 10, SizeCategory.TOO_SMALL),
            (50, 18, SizeCategory.COMPACT),
            (80, 24, SizeCategory.MEDIUM),
            (120, 40, SizeCategory.LARGE),
            (200, 50, SizeCategory.EXTRA_LARGE),
        ],
    )
    def test_typical_sizes(self, width, height, expected):
        assert SizeCategory.from_dimensions(width, height) is expected

    @pytest.mark.parametrize(
        "width,height,expected",
        [
            (39, 15, SizeCategory.TOO_SMALL),
            (40, 14, SizeCategory.TOO_SMALL),
            (40, 15, SizeCategory.COMPACT),
            (59, 20, SizeCategory.COMPACT),
            (60, 19, SizeCategory.COMPACT),
            (60, 20, SizeCategory.MEDIUM),
            (99, 30, SizeCategory.MEDIUM),
            (100, 29, SizeCategory.MEDIUM),
            (100, 30, SizeCategory.LARGE),
            (149, 45, SizeCategory.LARGE),
            (150, 44, SizeCategory.LARGE),
            (150, 45, SizeCategory.EXTRA_LARGE),
        ],
    )
    def test_thresholds_belong_to_larger_side(self, width, height, expected):
        assert SizeCategory.from_dimensions(width, height) is expected

    def test_categories_are_ordered(self):
        assert SizeCategory.TOO_SMALL < SizeCategory.COMPACT < SizeCategory.EXTRA_LARGE

    def test_label(self):
        assert SizeCategory.EXTRA_LARGE.label == "Extra Large"


class TestScalingContext:
    def test_too_small_disables_ui(self, fonts):
        ctx = ScalingContext.from_dimensions(30, 10, fonts)
        assert ctx.is_too_small
        assert ctx.background_detail_level == 0
        assert not (ctx.show_progress_bar or ctx.show_hints or ctx.show_session_info)

    def test_compact_shows_progress_only(self, fonts):
        ctx = ScalingContext.from_dimensions(50, 18, fonts)
        assert ctx.recommended_font.id == "classic"
        assert ctx.show_progress_bar
        assert not ctx.show_hints
        assert not ctx.show_session_info

    @pytest.mark.parametrize(
        "width,height,font,detail",
        [(80, 24, "terminal", 2), (120, 40, "block3d", 3), (200, 50, "outlined", 3)],
    )
    def test_profiles(self, fonts, width, height, font, detail):
        ctx = ScalingContext.from_dimensions(width, height, fonts)
        assert ctx.recommended_font.id == font
        assert ctx.background_detail_level == detail
        assert ctx.show_hints and ctx.show_session_info and ctx.show_progress_bar

    def test_profile_fonts_exist(self, fonts):
        for profile in PROFILES.values():
            assert profile.font in fonts

    def test_timer_dimensions(self, fonts):
        ctx = ScalingContext.from_dimensions(120, 40, fonts)
        assert ctx.timer_height == 9 + 4
        assert ctx.timer_width == 7 * 4 + 3 + 4

    def test_layout_helpers(self, fonts):
        ctx = ScalingContext.from_dimensions(80, 24, fonts)
        assert ctx.center_x(20) == 30
        assert ctx.center_x(100) == 0
        assert ctx.center_y(4) == 10
        assert ctx.timer_y() == 8
        assert ctx.progress_bar_y() == 21
        assert ctx.hints_y() == 19

    def test_timer_y_top_when_cramped(self, fonts):
        ctx = ScalingContext.from_dimensions(45, 15, fonts)
        assert ctx.timer_y(fonts.get("outlined")) == 0

    def test_recomputed_wholesale(self, fonts):
        small = ScalingContext.from_dimensions(50, 18, fonts)
        large = ScalingContext.from_dimensions(200, 50, fonts)
        assert small != large
        with pytest.raises(AttributeError):
            small.width = 200

    def test_negative_sizes_clamped(self, fonts):
        ctx = ScalingContext.from_dimensions(-1, -1, fonts)
        assert (ctx.width, ctx.height) == (0, 0)
        assert ctx.is_too_small


class TestSelectFont:
    def test_small_terminal_gets_small_font(self, fonts):
        assert select_font_for_size(50, 20, fonts).height <= 7

    def test_large_terminal_gets_big_font(self, fonts):
        assert select_font_for_size(150, 50, fonts).height >= 9

    def test_nothing_fits_falls_back_to_smallest(self, fonts):
        assert select_font_for_size(30, 10, fonts).id == "classic"

    def test_picks_largest_that_fits(self, fonts):
        # 60% of 100 = 60 columns, 40% of 30 = 12 rows
        assert select_font_for_size(100, 30, fonts).id == "outlined"
        # 40% of 25 = 10 rows: outlined (11) no longer fits
        assert select_font_for_size(100, 25, fonts).id == "block3d"

    def test_never_smaller_than_category_font(self, fonts):
        order = [font.id for font in fonts.by_size()]
        for width in range(40, 220, 7):
            for height in range(15, 70, 3):
                ctx = ScalingContext.from_dimensions(width, height, fonts)
                best = select_font_for_size(width, height, fonts)
                assert order.index(best.id) >= order.index(ctx.recommended_font.id), (
                    width,
                    height,
                )
