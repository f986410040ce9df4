"""
Tests for the fixed-offset field layouts of message types 1-3 and 5.
"""

import pytest
from aivdm import (
    BitReader,
    BitWriter,
    EncodeError,
    FieldRangeError,
    PositionReport,
    StaticVoyageReport,
    decode_bits,
    encode_position_bits,
    encode_static_bits,
)
from aivdm.messages import (
    COG_NOT_AVAILABLE,
    HEADING_NOT_AVAILABLE,
    NAV_STATUS_NOT_DEFINED,
    ROT_NOT_AVAILABLE,
    SECOND_NOT_AVAILABLE,
    SOG_NOT_AVAILABLE,
)
from aivdm.msg123 import decode_position
from aivdm.msg5 import decode_static


def full_position(**overrides):
    fields = dict(
        mmsi=123456789,
        message_type=1,
        repeat=0,
        nav_status=0,
        rate_of_turn=0,
        sog=12.3,
        accuracy=True,
        lon=-74.0060,
        lat=40.7128,
        cog=85.5,
        heading=90,
        timestamp=50,
        special_manoeuvre=0,
        raim=False,
        radio=123456,
        channel="A",
    )
    fields.update(overrides)
    return PositionReport(**fields)


def full_static(**overrides):
    fields = dict(
        mmsi=123456789,
        repeat=0,
        ais_version=0,
        imo=9876543,
        callsign="CALL123",
        name="TEST SHIP",
        ship_type=70,
        to_bow=10,
        to_stern=20,
        to_port=5,
        to_starboard=7,
        epfd=1,
        eta_month=12,
        eta_day=31,
        eta_hour=23,
        eta_minute=59,
        draught=6.5,
        destination="PORT OF CALL",
        dte_available=True,
        channel="A",
    )
    fields.update(overrides)
    return StaticVoyageReport(**fields)


class TestPositionLayout:
    """Test bit offsets of the 168-bit position report."""

    def test_length(self):
        assert len(encode_position_bits(full_position())) == 168

    def test_offsets(self):
        r = BitReader(encode_position_bits(full_position(message_type=3, repeat=2, raim=True)))
        assert r.get_uint(0, 6) == 3
        assert r.get_uint(6, 2) == 2
        assert r.get_uint(8, 30) == 123456789
        assert r.get_uint(50, 10) == 123
        assert r.get_bool(60) is True
        assert r.get_int(61, 28) == -44403600
        assert r.get_int(89, 27) == 24427680
        assert r.get_uint(116, 12) == 855
        assert r.get_uint(128, 9) == 90
        assert r.get_uint(137, 6) == 50
        assert r.get_uint(145, 3) == 0
        assert r.get_bool(148) is True
        assert r.get_uint(149, 19) == 123456

    def test_absent_fields_use_sentinels(self):
        r = BitReader(encode_position_bits(PositionReport(mmsi=1)))
        assert r.get_uint(0, 6) == 1
        assert r.get_uint(6, 2) == 0
        assert r.get_uint(38, 4) == 15
        assert r.get_int(42, 8) == -128
        assert r.get_uint(50, 10) == 1023
        assert r.get_int(61, 28) == 181 * 600000
        assert r.get_int(89, 27) == 91 * 600000
        assert r.get_uint(116, 12) == 3600
        assert r.get_uint(128, 9) == 511
        assert r.get_uint(137, 6) == 60

    def test_decode_absent_position(self):
        msg = decode_position(encode_position_bits(PositionReport(mmsi=1)))
        assert msg.lon == 181.0
        assert msg.lat == 91.0
        assert msg.sog == pytest.approx(102.3)
        assert msg.heading == 511
        assert not msg.has_position

    def test_sentinels_match_record_constants(self):
        msg = decode_position(encode_position_bits(PositionReport(mmsi=1)))
        assert msg.rate_of_turn == ROT_NOT_AVAILABLE
        assert msg.sog == pytest.approx(SOG_NOT_AVAILABLE)
        assert msg.cog == pytest.approx(COG_NOT_AVAILABLE)
        assert msg.heading == HEADING_NOT_AVAILABLE
        assert msg.timestamp == SECOND_NOT_AVAILABLE
        assert msg.nav_status == NAV_STATUS_NOT_DEFINED

    def test_float_heading_encodes(self):
        msg = decode_position(encode_position_bits(full_position(heading=90.0)))
        assert msg.heading == 90

    def test_decode_round_trip(self):
        original = full_position()
        msg = decode_position(encode_position_bits(original), "A")
        assert msg.mmsi == original.mmsi
        assert msg.message_type == 1
        assert msg.nav_status == 0
        assert msg.rate_of_turn == 0
        assert msg.sog == pytest.approx(12.3, abs=0.1)
        assert msg.accuracy is True
        assert msg.lon == pytest.approx(-74.0060, abs=0.0001)
        assert msg.lat == pytest.approx(40.7128, abs=0.0001)
        assert msg.cog == pytest.approx(85.5, abs=0.1)
        assert msg.heading == 90
        assert msg.timestamp == 50
        assert msg.raim is False
        assert msg.radio == 123456
        assert msg.channel == "A"
        assert msg.has_position

    def test_too_short(self):
        bits = encode_position_bits(full_position())
        assert decode_position(bits[:167]) is None

    def test_trailing_bits_ignored(self):
        bits = encode_position_bits(full_position())
        assert decode_position(bits + "000000").mmsi == 123456789


class TestSignedFields:
    """Test two's complement fields at their limits."""

    @pytest.mark.parametrize("rot", [-128, -1, 0, 1, 127])
    def test_rate_of_turn_round_trip(self, rot):
        msg = decode_position(encode_position_bits(full_position(rate_of_turn=rot)))
        assert msg.rate_of_turn == rot

    @pytest.mark.parametrize("rot", [128, -129, 1000])
    def test_rate_of_turn_out_of_range(self, rot):
        with pytest.raises(FieldRangeError):
            encode_position_bits(full_position(rate_of_turn=rot))

    @pytest.mark.parametrize("lat,lon", [
        (0.0, 0.0),
        (90.0, 0.0),
        (-90.0, 0.0),
        (0.0, 180.0),
        (0.0, -180.0),
        (45.0, -45.0),
        (-45.0, 45.0),
        (89.9999, 135.0),
        (-89.9999, -135.0),
        (10.0, 179.9999),
        (-10.0, -179.9999),
    ])
    def test_world_locations(self, lat, lon):
        msg = decode_position(encode_position_bits(full_position(lat=lat, lon=lon)))
        assert msg.lat == pytest.approx(lat, abs=0.0001)
        assert msg.lon == pytest.approx(lon, abs=0.0001)


class TestPositionContract:
    """Test encode-time contract violations."""

    def test_bad_message_type(self):
        with pytest.raises(EncodeError):
            encode_position_bits(full_position(message_type=5))

    def test_mmsi_too_large(self):
        with pytest.raises(FieldRangeError):
            encode_position_bits(full_position(mmsi=1 << 30))

    def test_missing_mmsi(self):
        with pytest.raises(EncodeError):
            encode_position_bits(full_position(mmsi=None))

    def test_field_range_error_is_value_error(self):
        with pytest.raises(ValueError):
            encode_position_bits(full_position(heading=512))


class TestStaticLayout:
    """Test bit offsets of the 424-bit static and voyage report."""

    def test_length(self):
        assert len(encode_static_bits(full_static())) == 424

    def test_offsets(self):
        r = BitReader(encode_static_bits(full_static()))
        assert r.get_uint(0, 6) == 5
        assert r.get_uint(8, 30) == 123456789
        assert r.get_uint(40, 30) == 9876543
        assert r.get_string(70, 42) == "CALL123"
        assert r.get_string(112, 120) == "TEST SHIP"
        assert r.get_uint(232, 8) == 70
        assert r.get_uint(240, 9) == 10
        assert r.get_uint(249, 9) == 20
        assert r.get_uint(258, 6) == 5
        assert r.get_uint(264, 6) == 7
        assert r.get_uint(270, 4) == 1
        assert r.get_uint(274, 4) == 12
        assert r.get_uint(278, 5) == 31
        assert r.get_uint(283, 5) == 23
        assert r.get_uint(288, 6) == 59
        assert r.get_uint(294, 8) == 65
        assert r.get_string(302, 120) == "PORT OF CALL"
        assert r.get_uint(422, 2) == 0

    def test_epfd_does_not_overlap_ship_type(self):
        r = BitReader(encode_static_bits(full_static(ship_type=255, epfd=0)))
        assert r.get_uint(232, 8) == 255
        assert r.get_uint(270, 4) == 0

    def test_dte_inverted(self):
        assert encode_static_bits(full_static(dte_available=True))[422] == "0"
        assert encode_static_bits(full_static(dte_available=False))[422] == "1"
        # Absent means not available
        assert encode_static_bits(full_static(dte_available=None))[422] == "1"

    def test_absent_fields_use_sentinels(self):
        msg = decode_static(encode_static_bits(StaticVoyageReport(mmsi=1)))
        assert (msg.eta_month, msg.eta_day, msg.eta_hour, msg.eta_minute) == (0, 0, 24, 60)
        assert not msg.eta_available
        assert msg.name == ""
        assert msg.callsign == ""
        assert msg.destination == ""
        assert msg.draught == 0.0
        assert msg.dte_available is False

    def test_round_trip_exact(self):
        original = full_static()
        assert decode_static(encode_static_bits(original), "A") == original

    def test_long_text_truncated(self):
        msg = decode_static(encode_static_bits(full_static(
            name="A VERY LONG VESSEL NAME INDEED", callsign="CALLSIGN9",
        )))
        assert msg.name == "A VERY LONG VESSEL N"
        assert msg.callsign == "CALLSIG"

    def test_too_short(self):
        assert decode_static(encode_static_bits(full_static())[:423]) is None

    def test_bad_message_type(self):
        with pytest.raises(EncodeError):
            encode_static_bits(full_static(message_type=1))

    def test_draught_out_of_range(self):
        with pytest.raises(FieldRangeError):
            encode_static_bits(full_static(draught=25.6))


class TestDecodeBits:
    """Test dispatch on message type."""

    def test_position_types(self):
        for t in (1, 2, 3):
            msg = decode_bits(encode_position_bits(full_position(message_type=t)))
            assert isinstance(msg, PositionReport)
            assert msg.message_type == t

    def test_static_type(self):
        assert isinstance(decode_bits(encode_static_bits(full_static())), StaticVoyageReport)

    def test_unsupported_type(self):
        bits = BitWriter().put_uint(4, 6).put_spare(162).getvalue()
        assert decode_bits(bits) is None

    def test_empty(self):
        assert decode_bits("") is None
        assert decode_bits("0001") is None


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
