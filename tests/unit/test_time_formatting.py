from quicklog.shared.exceptions import ExternalServiceError, get_error_message
from quicklog.shared.time_formatting import format_duration, format_duration_detailed, format_time_of_day


def test_format_duration():
    assert format_duration(5400) == "1h 30m"
    assert format_duration(3600) == "1h"
    assert format_duration(90) == "2m"
    assert format_duration(0) == "0m"


def test_format_duration_detailed():
    assert format_duration_detailed(5400) == "1.50h (90m)"


def test_format_time_of_day():
    assert format_time_of_day("14:05:00") == "2:05 PM"
    assert format_time_of_day("00:30") == "12:30 AM"
    assert format_time_of_day("11:59:00") == "11:59 AM"
    assert format_time_of_day("") == ""
    assert format_time_of_day(None) == ""
    assert format_time_of_day("xx:10") == ""


def test_get_error_message():
    assert get_error_message(ValueError("boom")) == "boom"
    assert get_error_message(ExternalServiceError("tempo", "HTTP 500")) == "[tempo] HTTP 500"
    assert get_error_message({"message": "from dict"}) == "from dict"
    assert get_error_message(42) == "An unknown error occurred"
