import pytest

from contestlib.misc import BaseConversion, PosCompression, run_length_encoding


def test_pos_compression_ranks_distinct_values():
    data = [50, 10, 50, 30, 10]
    pc = PosCompression(data)
    assert len(pc) == len(set(data))
    assert [pc.encode(v) for v in sorted(set(data))] == list(range(len(pc)))


def test_pos_compression_round_trip():
    data = [7, -3, 12, 7, 0]
    pc = PosCompression(data)
    for v in data:
        assert pc.decode(pc.encode(v)) == v


def test_pos_compression_preserves_order():
    data = [9, 4, 6, 1]
    pc = PosCompression(data)
    codes = [pc.encode(v) for v in data]
    for a, ca in zip(data, codes):
        for b, cb in zip(data, codes):
            assert (a < b) == (ca < cb)


def test_pos_compression_unknown_value():
    pc = PosCompression([1, 3, 5])
    with pytest.raises(ValueError):
        pc.encode(2)
    with pytest.raises(ValueError):
        pc.encode(6)


def test_pos_compression_decode_out_of_range():
    pc = PosCompression([1, 3, 5])
    with pytest.raises(IndexError):
        pc.decode(3)
    with pytest.raises(IndexError):
        pc.decode(-1)


def test_run_length_encoding_string():
    assert run_length_encoding("aaabcc") == [("a", 3), ("b", 1), ("c", 2)]


def test_run_length_encoding_empty():
    assert run_length_encoding([]) == []


def test_run_length_encoding_counts_sum_to_length():
    values = [1, 1, 2, 1, 1, 1, 3, 3]
    encoded = run_length_encoding(values)
    assert sum(count for _, count in encoded) == len(values)
    assert all(a[0] != b[0] for a, b in zip(encoded, encoded[1:]))


@pytest.mark.parametrize("value", [1, 2022, 10**18, 255])
@pytest.mark.parametrize("base,spec", [(2, "b"), (8, "o"), (16, "X")])
def test_to_string_matches_format(value, base, spec):
    assert BaseConversion(value).to_string(base) == format(value, spec)


@pytest.mark.parametrize("base", [2, 3, 7, 10, 36])
def test_digits_round_trip(base):
    value = 123456789
    digits = BaseConversion(value).digits(base)
    assert BaseConversion.from_digits(base, digits).value == value


@pytest.mark.parametrize("text,base", [("ZZ", 36), ("1011", 2), ("7F", 16)])
def test_from_string_matches_int(text, base):
    conv = BaseConversion.from_string(base, text)
    assert conv.value == int(text, base)
    assert conv.to_string(base) == text


def test_zero_has_one_digit():
    assert BaseConversion(0).digits(7) == [0]
    assert BaseConversion(0).to_string(2) == "0"


@pytest.mark.parametrize("base", [1, 37])
def test_invalid_base(base):
    with pytest.raises(ValueError):
        BaseConversion(5).digits(base)
    with pytest.raises(ValueError):
        BaseConversion.from_digits(base, [1])


def test_invalid_digits():
    with pytest.raises(ValueError):
        BaseConversion.from_digits(2, [1, 2])
    with pytest.raises(ValueError):
        BaseConversion.from_string(16, "1g")
    with pytest.raises(ValueError):
        BaseConversion.from_string(10, "A")


def test_negative_value_rejected():
    with pytest.raises(ValueError):
        BaseConversion(-1)