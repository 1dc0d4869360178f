import pytest

from app.services.business import (
    WEEKDAYS,
    TimeSlot,
    DaySchedule,
    default_business_hours,
    get_common_hours,
    toggle_closed_day,
    add_time_slot,
    update_time_slot,
    parse_legacy_text,
    parse_legacy_common_hours,
    generate_legacy_text,
)


def test_generate_all_days_open(uniform_hours):
    assert generate_legacy_text(uniform_hours) == "営業時間: 11:00-22:00\nラストオーダー: 21:30\n定休日: 年中無休"


def test_generate_lists_closed_days_in_weekday_order(uniform_hours):
    data = toggle_closed_day(uniform_hours, "sunday")
    data = toggle_closed_day(data, "monday")
    assert generate_legacy_text(data) == "営業時間: 11:00-22:00\nラストオーダー: 21:30\n定休日: 月曜日、日曜日"


def test_generate_omits_last_order_equal_to_close():
    data = {day: DaySchedule(time_slots=[TimeSlot("10:00", "18:00", "18:00")]) for day in WEEKDAYS}
    assert generate_legacy_text(data) == "営業時間: 10:00-18:00\n定休日: 年中無休"


def test_parse_closed_days_range_and_last_order():
    common = parse_legacy_common_hours("定休日：月曜日、火曜日\n11:00～22:00\nL.O. 21:30")
    assert common.closed_days == {"monday", "tuesday"}
    assert common.open_time == "11:00"
    assert common.close_time == "22:00"
    assert common.last_order_time == "21:30"


def test_parse_legacy_text_expands_to_schedule():
    data = parse_legacy_text("定休日：月曜日、火曜日\n11:00～22:00\nL.O. 21:30")
    assert data["monday"] == DaySchedule(is_closed=True, time_slots=[])
    assert data["tuesday"] == DaySchedule(is_closed=True, time_slots=[])
    for day in WEEKDAYS[2:]:
        assert data[day] == DaySchedule(time_slots=[TimeSlot("11:00", "22:00", "21:30")])

    common = get_common_hours(data)
    assert common.closed_days == {"monday", "tuesday"}
    assert (common.open_time, common.close_time, common.last_order_time) == ("11:00", "22:00", "21:30")


@pytest.mark.parametrize("text", ["", None])
def test_parse_empty_text_gives_defaults(text):
    common = parse_legacy_common_hours(text)
    assert (common.open_time, common.close_time, common.last_order_time) == ("11:00", "22:00", "21:30")
    assert common.closed_days == set()


def test_parse_text_without_markers_gives_defaults():
    common = parse_legacy_common_hours("お問い合わせください")
    assert (common.open_time, common.close_time, common.last_order_time) == ("11:00", "22:00", "21:30")


def test_parse_pads_hours_and_accepts_dash_variants():
    assert parse_legacy_common_hours("9:00〜17:30").open_time == "09:00"
    assert parse_legacy_common_hours("9:00〜17:30").close_time == "17:30"
    assert parse_legacy_common_hours("7:30-9:00").close_time == "09:00"


@pytest.mark.parametrize("text", [
    "11:00-22:00\nラストオーダー: 20:30",
    "11:00-22:00 L.O.20:30",
    "11:00-22:00 (L.O 20:30)",
    "11:00-22:00 LO：20:30",
    "11:00-22:00 lo 20:30",
])
def test_parse_last_order_spellings(text):
    assert parse_legacy_common_hours(text).last_order_time == "20:30"


def test_parse_range_without_last_order_uses_close_time():
    common = parse_legacy_common_hours("営業時間: 10:00-18:00\n定休日: 年中無休")
    assert common.last_order_time == "18:00"


@pytest.mark.parametrize("text,expected", [
    ("定休日: 水", {"wednesday"}),
    ("定休日: 月、木", {"monday", "thursday"}),
    ("定休日: 日", {"sunday"}),
    ("定休日: 日曜・祝日", {"sunday"}),
    ("定休日: 土曜日、日曜日", {"saturday", "sunday"}),
    # the lone sunday character only counts when it is the whole day list
    ("定休日: 土日", {"saturday"}),
    ("定休日: 年中無休", set()),
    ("定休日: 不定休", set()),
])
def test_parse_closed_day_labels(text, expected):
    assert parse_legacy_common_hours(text).closed_days == expected


def test_parse_only_reads_the_closed_days_line():
    text = "営業時間: 11:00-22:00\n定休日: 火曜日\n備考: 月末は貸切あり"
    assert parse_legacy_common_hours(text).closed_days == {"tuesday"}


@pytest.mark.parametrize("closed", [set(), {"sunday"}, {"monday", "wednesday"}, {"saturday", "sunday"}, set(WEEKDAYS)])
@pytest.mark.parametrize("slot", [
    TimeSlot("11:00", "22:00", "21:30"),
    TimeSlot("06:30", "14:00", "14:00"),
    TimeSlot("17:00", "23:30", "23:00"),
])
def test_uniform_schedule_round_trip(closed, slot):
    data = {
        day: DaySchedule(is_closed=True) if day in closed else DaySchedule(time_slots=[TimeSlot(**slot.to_dict())])
        for day in WEEKDAYS
    }
    original = get_common_hours(data)
    parsed = get_common_hours(parse_legacy_text(generate_legacy_text(data)))

    assert parsed.closed_days == closed
    assert (parsed.open_time, parsed.close_time, parsed.last_order_time) == \
        (original.open_time, original.close_time, original.last_order_time)


def test_split_hours_are_lost_in_legacy_text():
    data = add_time_slot(default_business_hours(), "monday")
    data = add_time_slot(data, "monday")
    data = update_time_slot(data, "monday", 1, "open_time", "17:00")

    parsed = parse_legacy_text(generate_legacy_text(data))
    assert len(parsed["monday"].time_slots) == 1
