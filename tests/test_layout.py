"""Unit tests for view layout assembly."""

from datetime import date

import pytest

from models.events import ViewMode
from services.date_range import CalendarConfig
from services.layout import (
    DAY_BLOCK_STYLE,
    WEEK_BLOCK_STYLE,
    block_style_for,
    build_agenda,
    build_month_layout,
    build_time_grid_layout,
    format_duration,
    place_block,
)

SUNDAY_START = CalendarConfig(week_start=6)


class TestMonthLayout:
    """Test cases for build_month_layout."""

    def test_cells_cover_grid_with_flags(self, make_event):
        view = build_month_layout(date(2024, 3, 15), [], date(2024, 3, 5), SUNDAY_START)

        assert view["title"] == "March 2024"
        assert view["weekdays"][0] == "Sun"
        assert len(view["cells"]) == 42
        assert view["cells"][0]["date"] == date(2024, 2, 25)
        assert view["cells"][0]["in_month"] is False
        assert [c["date"] for c in view["cells"] if c["is_today"]] == [date(2024, 3, 5)]

    def test_truncates_busy_days(self, make_event):
        events = [make_event(title=f"Meeting {i}") for i in range(5)]

        view = build_month_layout(date(2024, 3, 15), events, date(2024, 3, 1), SUNDAY_START)
        cell = next(c for c in view["cells"] if c["date"] == date(2024, 3, 5))

        assert [e["title"] for e in cell["events"]] == ["Meeting 0", "Meeting 1", "Meeting 2"]
        assert cell["more"] == 2

    def test_prev_and_next_anchors(self):
        view = build_month_layout(date(2024, 1, 31), [], date(2024, 1, 1), SUNDAY_START)

        assert view["prev"] == date(2023, 12, 31)
        assert view["next"] == date(2024, 2, 29)


class TestTimeGridLayout:
    """Test cases for build_time_grid_layout and place_block."""

    def test_week_columns_and_blocks(self, make_event):
        timed = make_event(time="14:30", duration=90)
        untimed = make_event(time=None, title="Birthday")

        view = build_time_grid_layout(
            date(2024, 3, 5), ViewMode.WEEK, [timed, untimed], date(2024, 3, 5), SUNDAY_START
        )

        assert view["title"] == "Mar 3 – Mar 9, 2024"
        assert view["pixels_per_hour"] == 60
        assert len(view["hours"]) == 24
        assert [c["label"] for c in view["columns"]][:3] == ["Sun 3", "Mon 4", "Tue 5"]

        tuesday = view["columns"][2]
        assert tuesday["is_today"] is True
        assert tuesday["untimed"][0]["title"] == "Birthday"
        assert tuesday["blocks"][0]["top"] == 872
        assert tuesday["blocks"][0]["height"] == 86

    def test_day_view_uses_taller_hours(self, make_event):
        event = make_event(time="01:00", duration=60)

        view = build_time_grid_layout(date(2024, 3, 5), ViewMode.DAY, [event], date(2024, 3, 5))

        assert view["pixels_per_hour"] == 80
        assert len(view["columns"]) == 1
        assert view["columns"][0]["blocks"][0]["top"] == 82

    def test_month_mode_rejected(self):
        with pytest.raises(ValueError):
            build_time_grid_layout(date(2024, 3, 5), ViewMode.MONTH, [], date(2024, 3, 5))

    def test_short_event_is_clamped(self, make_event):
        block = place_block(make_event(time="09:00", duration=15), 60)

        assert block["top"] == 542
        assert block["height"] == 20
        assert block["show_time"] is False

    def test_long_event_shows_time(self, make_event):
        block = place_block(make_event(time="09:00", duration=45), 60)

        assert block["height"] == 41
        assert block["show_time"] is True

    def test_untimed_event_is_not_placed(self, make_event):
        assert place_block(make_event(time=None), 60) is None

    def test_day_view_blocks_use_taller_minimum(self, make_event):
        standup = make_event(time="09:00", duration=15)
        review = make_event(time="11:00", duration=30)

        view = build_time_grid_layout(
            date(2024, 3, 5), ViewMode.DAY, [standup, review], date(2024, 3, 5)
        )
        short, medium = view["columns"][0]["blocks"]

        assert short["height"] == 30
        assert short["show_time"] is False
        assert medium["height"] == 36
        assert medium["show_time"] is False
        assert medium["show_description"] is False

    def test_day_view_shows_description_on_tall_blocks(self, make_event):
        planning = make_event(time="13:00", duration=60, description="Q2 roadmap")
        retro = make_event(time="15:00", duration=45, description="Sprint 12")

        view = build_time_grid_layout(
            date(2024, 3, 5), ViewMode.DAY, [planning, retro], date(2024, 3, 5)
        )
        tall, shorter = view["columns"][0]["blocks"]

        assert tall["show_time"] is True
        assert tall["show_description"] is True
        assert shorter["show_time"] is True
        assert shorter["show_description"] is False

    def test_week_view_never_shows_description(self, make_event):
        event = make_event(time="09:00", duration=180, description="Offsite")

        view = build_time_grid_layout(
            date(2024, 3, 5), ViewMode.WEEK, [event], date(2024, 3, 5), SUNDAY_START
        )
        block = view["columns"][2]["blocks"][0]

        assert block["show_time"] is True
        assert block["show_description"] is False

    def test_block_style_follows_mode(self):
        assert block_style_for(ViewMode.DAY) == DAY_BLOCK_STYLE
        assert block_style_for(ViewMode.WEEK) == WEEK_BLOCK_STYLE


class TestFormatting:
    """Test cases for format_duration and build_agenda."""

    @pytest.mark.parametrize(
        "minutes, expected",
        [
            (None, ""),
            (15, "15 min"),
            (60, "1 hour"),
            (120, "2 hours"),
            (90, "1h 30m"),
            (480, "All day"),
        ],
    )
    def test_format_duration(self, minutes, expected):
        assert format_duration(minutes) == expected

    def test_agenda_sorts_by_date_then_time(self, make_event):
        untimed = make_event(time=None, date=date(2024, 3, 5))
        late = make_event(time="15:00", date=date(2024, 3, 5))
        early = make_event(time="08:00", date=date(2024, 3, 5))
        earlier_day = make_event(time="20:00", date=date(2024, 3, 4))

        assert build_agenda([untimed, late, early, earlier_day]) == [earlier_day, early, late, untimed]
