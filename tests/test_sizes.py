import random

import pytest

from mefs.sizes import fill_random, to_storage_size


def test_bytes():
    assert to_storage_size(0) == "0.00B"


def test_kilobytes_boundary():
    assert to_storage_size(1024) == "1.00KB"


def test_megabytes_boundary():
    assert to_storage_size(1048576) == "1.00MB"


@pytest.mark.parametrize(
    "size, unit",
    [(1023, "B"), (1048575, "KB"), (1073741823, "MB"), (1073741824, "GB"), (5 * 1073741824, "GB"), (-1, "GB")],
)
def test_unit_selection(size, unit):
    text = to_storage_size(size)
    assert text.endswith(unit)
    assert not text[: -len(unit)].endswith(("K", "M", "G"))


def test_fill_random_is_deterministic_for_seed():
    first = bytearray(100)
    second = bytearray(100)
    fill_random(first, random.Random(7))
    fill_random(second, random.Random(7))
    assert first == second
    assert len(first) == 100


def test_fill_random_changes_buffer():
    buffer = bytearray(64)
    fill_random(buffer, random.Random(1))
    nonzero = sum(1 for value in buffer if value)
    assert len(buffer) == 64
    assert nonzero > 32
    assert len(set(buffer)) > 10


def test_fill_random_different_seeds_differ():
    first = bytearray(70)
    second = bytearray(70)
    fill_random(first, random.Random(1))
    fill_random(second, random.Random(2))
    assert first != second


def test_fill_random_partial_chunk_is_prefix_of_full_chunk():
    short = bytearray(10)
    full = bytearray(14)
    fill_random(short, random.Random(3))
    fill_random(full, random.Random(3))
    assert len(short) == 10
    assert short == full[:10]


def test_fill_random_empty_buffer():
    buffer = bytearray()
    fill_random(buffer, random.Random(0))
    assert buffer == bytearray()