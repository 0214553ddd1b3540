import pytest

from sckit.crc32 import crc32c


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\0", 1383945041),
        (b"1\0", 2727214374),
        (b"\0" * 10, 3822973035),
        (b"test\0", 2440484327),
        (b"testtest\0", 443192409),
    ],
)
def test_precomputed_values(data, expected):
    assert crc32c(data) == expected


def test_standard_check_value():
    assert crc32c(b"123456789") == 0xE3069283


def test_empty_input_returns_initial_crc():
    assert crc32c(b"") == 0
    assert crc32c(b"", 100) == 100


def _small_buf():
    buf = bytearray(128)
    buf[:4] = bytes([1, 1, 2, 3])
    return bytes(buf)


def _large_buf():
    buf = bytearray(4096 * 8)
    buf[:4] = bytes([2, 5, 6, 5])
    return bytes(buf)


def test_partial_calculation_small():
    buf = _small_buf()
    crc1 = crc32c(buf[:100])
    crc2 = crc32c(buf[100:128], crc1)
    assert crc2 == crc32c(buf)


def test_partial_calculation_large():
    buf = _large_buf()
    half = 4096 * 4
    crc1 = crc32c(buf[:half])
    crc2 = crc32c(buf[half:], crc1)
    assert crc2 == crc32c(buf)


def test_accepts_bytearray_and_memoryview():
    expected = crc32c(b"test\0")
    assert crc32c(bytearray(b"test\0")) == expected
    assert crc32c(memoryview(b"xtest\0")[1:]) == expected


def test_result_fits_in_32_bits():
    value = crc32c(bytes(range(256)) * 4)
    assert 0 <= value <= 0xFFFFFFFF


@pytest.mark.parametrize("bad", [-1, 1 << 32])
def test_rejects_out_of_range_crc(bad):
    with pytest.raises(ValueError):
        crc32c(b"abc", bad)


def test_rejects_text():
    with pytest.raises(TypeError):
        crc32c("test")