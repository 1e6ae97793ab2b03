import pytest

from bwtest.units import byte_atof, byte_atoi, format_bytes, pattern


def test_plain_number():
    assert byte_atof("10") == 10.0


def test_binary_suffixes():
    kilo = byte_atof("1K")
    assert kilo == 1024
    assert byte_atof("1M") == kilo * 1024
    assert byte_atof("1G") == byte_atof("1M") * 1024


def test_decimal_suffixes():
    kilo = byte_atof("1k")
    assert kilo == 1000
    assert byte_atof("1m") == kilo * 1000
    assert byte_atof("1g") == byte_atof("1m") * 1000


def test_fraction_with_suffix():
    assert byte_atof("1.5K") == 1.5 * byte_atof("1K")


def test_unknown_suffix_ignored():
    assert byte_atof("5x") == 5.0


def test_only_adjacent_suffix_counts():
    assert byte_atof("5 K") == 5.0


def test_leading_whitespace_allowed():
    assert byte_atof("  2K") == 2 * byte_atof("1K")


@pytest.mark.parametrize("text", ["", "abc", "K10"])
def test_invalid_number_raises(text):
    with pytest.raises(ValueError):
        byte_atof(text)


def test_atoi_truncates():
    assert byte_atoi("1.9") == 1


def test_atoi_scales():
    assert byte_atoi("2K") == 2 * byte_atoi("1K")
    assert byte_atoi("3m") == 3 * byte_atoi("1m")


@pytest.mark.parametrize("text", ["-1", "inf", "nan", "x"])
def test_atoi_rejects(text):
    with pytest.raises(ValueError):
        byte_atoi(text)


def test_format_explicit_kilobytes():
    assert format_bytes(1024, "K") == "1.00 KByte"


def test_format_bits_from_bytes():
    assert format_bytes(125, "k") == "1.00 Kbit"


def test_format_adaptive_megabytes():
    assert format_bytes(1024 * 1024, "A") == "1.00 MByte"


@pytest.mark.parametrize(
    "value, fmt, label",
    [
        (10, "A", "Byte"),
        (5000, "A", "KByte"),
        (5_000_000, "A", "MByte"),
        (5_000_000_000, "A", "GByte"),
        (10, "a", "bit"),
        (5000, "a", "Kbit"),
        (5_000_000, "a", "Mbit"),
        (5_000_000_000, "a", "Gbit"),
    ],
)
def test_adaptive_picks_unit(value, fmt, label):
    assert format_bytes(value, fmt).split()[1] == label


def test_adaptive_stops_at_giga():
    text = format_bytes(1024 ** 4, "A")
    assert text.endswith("GByte")
    assert float(text.split()[0]) == 1024


def test_explicit_unit_round_trip():
    value = 10 * 1024 ** 3
    number, label = format_bytes(value, "K").split()
    assert label == "KByte"
    assert float(number) == value / byte_atof("1K")


def test_explicit_bytes_keep_value():
    assert float(format_bytes(42, "B").split()[0]) == 42


def test_unknown_format_is_adaptive():
    assert format_bytes(5000, "X") == format_bytes(5000, "A")


def test_format_requires_single_character():
    with pytest.raises(ValueError):
        format_bytes(1, "KB")


def test_pattern_length_and_content():
    data = pattern(25)
    assert len(data) == 25
    assert data.isdigit()


def test_pattern_repeats_every_ten():
    data = pattern(30)
    assert data[:10] == data[10:20] == data[20:]


def test_pattern_empty():
    assert pattern(0) == b""


def test_pattern_negative_raises():
    with pytest.raises(ValueError):
        pattern(-1)