from pathlib import Path

import pytest

from filesplit.services.naming import (
    JoinOrder,
    chunk_count,
    chunk_filename,
    chunk_index,
    normalize_extension,
    normalize_suffix,
    sort_chunk_paths,
)


def test_normalize_suffix_defaults_to_part():
    assert normalize_suffix("") == "_part"
    assert normalize_suffix(None) == "_part"
    assert normalize_suffix("-piece") == "-piece"


@pytest.mark.parametrize(
    "given, expected",
    [(None, ""), ("", ""), ("bin", ".bin"), (".bin", ".bin"), ("tar.gz", ".tar.gz")],
)
def test_normalize_extension(given, expected):
    assert normalize_extension(given) == expected


def test_chunk_count_is_ceiling():
    assert chunk_count(0, 1000) == 0
    assert chunk_count(1, 1000) == 1
    assert chunk_count(1000, 1000) == 1
    assert chunk_count(1001, 1000) == 2
    assert chunk_count(11000, 1000) == 11


def test_chunk_count_rejects_non_positive_limit():
    with pytest.raises(ValueError):
        chunk_count(10, 0)


def test_chunk_filename_unpadded_by_default():
    assert chunk_filename("data", "_part", 3, ".bin") == "data_part3.bin"
    assert chunk_filename("data", "_part", 12) == "data_part12"


def test_chunk_filename_zero_pads_index():
    assert chunk_filename("data", "_part", 7, ".bin", index_width=3) == "data_part007.bin"
    assert chunk_filename("data", "_part", 1234, "", index_width=3) == "data_part1234"


def test_chunk_index_parses_number_after_last_suffix():
    assert chunk_index("data_part12.bin", "_part") == 12
    assert chunk_index("my_part_file_part4", "_part") == 4
    assert chunk_index("data_part.bin", "_part") is None
    assert chunk_index("random.bin", "_part") is None


def test_chunk_index_skips_suffix_inside_extension():
    assert chunk_index("data.p3.pdf", ".p") == 3
    assert chunk_index("data.p12.p", ".p") == 12


def test_numeric_sort_with_suffix_in_extension():
    paths = [Path(f"data.p{i}.pdf") for i in (10, 2, 1)]
    ordered = sort_chunk_paths(paths, ".p", JoinOrder.NUMERIC)
    assert [p.name for p in ordered] == ["data.p1.pdf", "data.p2.pdf", "data.p10.pdf"]


def test_lexical_sort_puts_ten_before_two():
    paths = [Path(f"d/x_part{i}") for i in (2, 10, 0, 1)]
    ordered = sort_chunk_paths(paths, "_part", JoinOrder.LEXICAL)
    assert [p.name for p in ordered] == ["x_part0", "x_part1", "x_part10", "x_part2"]


def test_numeric_sort_uses_chunk_index():
    paths = [Path(f"d/x_part{i}") for i in (2, 10, 0, 1)] + [Path("d/x_part_notes")]
    ordered = sort_chunk_paths(paths, "_part", JoinOrder.NUMERIC)
    assert [p.name for p in ordered] == [
        "x_part0",
        "x_part1",
        "x_part2",
        "x_part10",
        "x_part_notes",
    ]


def test_sort_accepts_order_as_string():
    paths = [Path("x_part10"), Path("x_part9")]
    assert sort_chunk_paths(paths, "_part", "numeric") == [Path("x_part9"), Path("x_part10")]
