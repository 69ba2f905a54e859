"""Unit tests for the Target record."""

import pytest

from target_list import InvalidTargetError, Target, format_mac

MAC_A = bytes.fromhex("000000000001")
MAC_B = bytes.fromhex("000000000002")
MAC_C = bytes.fromhex("ffffffffffff")


def test_target_fields():
    """Test that construction stores fields and starts unlinked."""
    t = Target(MAC_A, MAC_B, 6)

    assert t.from_addr == MAC_A
    assert t.to_addr == MAC_B
    assert t.ch == 6
    assert t.key == (MAC_A, MAC_B, 6)
    assert t.next is None
    assert t.get_next() is None


def test_target_copies_bytearray():
    """Test that mutable address buffers are copied into bytes."""
    buf = bytearray(MAC_A)
    t = Target(buf, MAC_B, 1)
    buf[0] = 0xAA

    assert t.from_addr == MAC_A
    assert isinstance(t.from_addr, bytes)


@pytest.mark.parametrize(
    "from_addr, to_addr, ch",
    [
        (b"\x00" * 5, MAC_B, 1),  # short from
        (MAC_A, b"\x00" * 7, 1),  # long to
        (MAC_A, MAC_B, -1),  # negative channel
        (MAC_A, MAC_B, 256),  # channel wider than 8 bits
        (6, MAC_B, 1),  # int would become six zero bytes
        ("aabbccddeeff", MAC_B, 1),  # hex string is not bytes
        (MAC_A, [0, 0, 0, 0, 0, 2], 1),  # list of ints
        (MAC_A, MAC_B, 6.9),  # float channel
        (MAC_A, MAC_B, True),  # bool channel
        (MAC_A, MAC_B, "6"),  # str channel
    ],
)
def test_target_rejects_bad_fields(from_addr, to_addr, ch):
    with pytest.raises(InvalidTargetError):
        Target(from_addr, to_addr, ch)


def test_target_accepts_memoryview():
    t = Target(memoryview(MAC_A), bytearray(MAC_B), 0)
    assert t.key == (MAC_A, MAC_B, 0)


def test_invalid_target_error_is_value_error():
    with pytest.raises(ValueError):
        Target(b"", MAC_B, 1)


def test_target_equality():
    """Test that equality requires all three fields to match."""
    assert Target(MAC_A, MAC_B, 1) == Target(MAC_A, MAC_B, 1)
    assert Target(MAC_A, MAC_B, 1) != Target(MAC_A, MAC_B, 2)
    assert Target(MAC_A, MAC_B, 1) != Target(MAC_B, MAC_B, 1)
    assert Target(MAC_A, MAC_B, 1) != Target(MAC_A, MAC_A, 1)
    assert hash(Target(MAC_A, MAC_B, 1)) == hash(Target(MAC_A, MAC_B, 1))


@pytest.mark.parametrize(
    "lower, higher",
    [
        # from address is the primary key, even when later fields are larger
        ((MAC_A, MAC_C, 255), (MAC_B, MAC_A, 0)),
        # to address decides when from addresses match
        ((MAC_A, MAC_A, 200), (MAC_A, MAC_B, 1)),
        # channel decides last
        ((MAC_A, MAC_B, 1), (MAC_A, MAC_B, 11)),
    ],
)
def test_target_lexicographic_order(lower, higher):
    low, high = Target(*lower), Target(*higher)

    assert low < high
    assert low <= high
    assert high > low
    assert high >= low
    assert not high < low
    assert not low > high
    assert low.compare(high) == -1
    assert high.compare(low) == 1


def test_target_compare_consistent_with_equality():
    """Test that compare() is zero exactly for equal targets."""
    a = Target(MAC_A, MAC_B, 3)
    b = Target(MAC_A, MAC_B, 3)

    assert a.compare(b) == 0
    assert a <= b and a >= b
    assert not a < b and not a > b


def test_mixed_field_order_is_total():
    """Orderings that disagree field by field still have exactly one winner."""
    a = Target(MAC_A, MAC_C, 1)
    b = Target(MAC_B, MAC_A, 11)

    assert (a < b) != (b < a)
    assert sorted([b, a]) == [a, b]


def test_format_mac():
    assert format_mac(bytes.fromhex("aabbccddeeff")) == "aa:bb:cc:dd:ee:ff"
    assert format_mac(MAC_A) == "00:00:00:00:00:01"


def test_target_repr():
    t = Target(MAC_A, MAC_C, 11)
    assert repr(t) == "Target(from=00:00:00:00:00:01, to=ff:ff:ff:ff:ff:ff, ch=11)"
