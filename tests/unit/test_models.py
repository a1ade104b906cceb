import datetime
import pytest

from core.domain.models import OutputEncoding, format_date, parse_date

@pytest.mark.parametrize("platform, expected", [
    ("win32", OutputEncoding.SHIFT_JIS),
    ("cygwin", OutputEncoding.SHIFT_JIS),
    ("linux", OutputEncoding.UTF8),
    ("darwin", OutputEncoding.UTF8),
])
def test_output_encoding_for_platform(platform, expected):
    assert OutputEncoding.for_platform(platform) is expected

@pytest.mark.parametrize("name, expected", [
    ("utf8", OutputEncoding.UTF8),
    ("UTF-8", OutputEncoding.UTF8),
    ("shiftjis", OutputEncoding.SHIFT_JIS),
    ("Shift_JIS", OutputEncoding.SHIFT_JIS),
    ("cp932", OutputEncoding.SHIFT_JIS),
])
def test_output_encoding_from_name(name, expected):
    assert OutputEncoding.from_name(name) is expected

def test_output_encoding_from_name_rejects_unknown():
    with pytest.raises(ValueError):
        OutputEncoding.from_name("euc-jp")

def test_format_and_parse_date():
    assert format_date(datetime.date(2021, 5, 3)) == "2021-05-03"
    assert parse_date("2021-05-03") == datetime.date(2021, 5, 3)
    with pytest.raises(ValueError):
        parse_date("20210503")
