import pytest

from bwtest.settings import (
    HEADER_VERSION1,
    RUN_NOW,
    ClientHeader,
    Flag,
    RateUnits,
    ServerHeader,
    ThreadMode,
    UDPDatagram,
)


def test_flag_values_match_bitmask():
    assert Flag(0x00000800) is Flag.UDP
    assert Flag(0x04000000) is Flag.SSL
    combined = Flag(0x00000800 | 0x00001000)
    assert Flag.UDP in combined
    assert Flag.MODETIME in combined
    assert Flag.NODELAY not in combined


def test_enum_values():
    assert ThreadMode(2) is ThreadMode.CLIENT
    assert RateUnits(1) is RateUnits.PPS
    with pytest.raises(ValueError):
        RateUnits(7)


def test_udp_datagram_wire_bytes():
    packed = UDPDatagram(1, 2, 3).pack()
    assert packed == b"\x00\x00\x00\x01\x00\x00\x00\x02\x00\x00\x00\x03"
    assert len(packed) == UDPDatagram.SIZE


def test_udp_datagram_round_trip_negative_id():
    original = UDPDatagram(-7, 1700000000, 999999)
    assert UDPDatagram.unpack(original.pack()) == original


def test_udp_datagram_ignores_payload():
    original = UDPDatagram(42, 10, 20)
    assert UDPDatagram.unpack(original.pack() + b"payload") == original


def test_udp_datagram_short_data_raises():
    with pytest.raises(ValueError):
        UDPDatagram.unpack(b"\x00\x01")


def test_client_header_round_trip_with_version_flag():
    header = ClientHeader(
        flags=HEADER_VERSION1 | RUN_NOW,
        num_threads=4,
        port=5001,
        buffer_len=8192,
        window_size=65536,
        amount=-1000,
        rate=1048576,
        rate_units=int(RateUnits.BW),
        realtime=0,
    )
    packed = header.pack()
    assert packed[:4] == b"\x80\x00\x00\x01"
    assert len(packed) == ClientHeader.SIZE
    assert ClientHeader.unpack(packed) == header


def test_client_header_out_of_range_raises():
    with pytest.raises(ValueError):
        ClientHeader(num_threads=2**40).pack()


def test_server_header_round_trip():
    header = ServerHeader(
        flags=HEADER_VERSION1, total_len1=1, total_len2=5, error_cnt=3,
        datagrams=100, jitter1=2, jitter2=500000, cnt_transit=99, ipg_sum=7,
    )
    restored = ServerHeader.unpack(header.pack())
    assert restored == header
    assert restored.total_len() == header.total_len()


def test_server_header_total_len():
    assert ServerHeader(total_len1=0, total_len2=5).total_len() == 5
    assert ServerHeader(total_len1=1, total_len2=0).total_len() == 4294967296


def test_server_header_jitter():
    assert ServerHeader(jitter1=2, jitter2=500000).jitter() == pytest.approx(2.5)


def test_server_header_short_data_raises():
    with pytest.raises(ValueError):
        ServerHeader.unpack(bytes(ServerHeader.SIZE - 1))