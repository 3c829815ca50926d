from datetime import date

from duotrigordle.utils.helpers import get_todays_id, format_time_elapsed, to_camel_case, to_snake_case


def test_todays_id():
    start = date(2022, 1, 24)
    assert get_todays_id(date(2022, 1, 24), start) == 1
    assert get_todays_id(date(2022, 1, 25), start) == 2
    assert get_todays_id(date(2023, 1, 24), start) == 366


def test_format_time_elapsed():
    assert format_time_elapsed(0) == "00:00.00"
    assert format_time_elapsed(-500) == "00:00.00"
    assert format_time_elapsed(61234) == "01:01.23"
    assert format_time_elapsed(3600000) == "60:00.00"


def test_case_conversion():
    assert to_camel_case('hide_completed_boards') == 'hideCompletedBoards'
    assert to_snake_case('hideCompletedBoards') == 'hide_completed_boards'
    assert to_camel_case('id') == 'id'
