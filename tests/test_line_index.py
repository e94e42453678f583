from __future__ import annotations

from typing import AbstractSet, List, Sequence

import pytest

from textview_engine.layout import LineIndex, build_index, split_line
from textview_engine.markup import resolve_color

WHITE = resolve_color("white")


def make_index(
    lines: Sequence[str],
    width: int,
    *,
    wrap: bool = True,
    word_wrap: bool = False,
    colors: bool = False,
    regions: bool = False,
    highlights: AbstractSet[str] = frozenset(),
) -> LineIndex:
    return build_index(
        lines,
        width,
        wrap=wrap,
        word_wrap=word_wrap,
        colors=colors,
        regions=regions,
        highlights=highlights,
        text_color=WHITE,
    )


def texts(index: LineIndex) -> List[str]:
    return [index.entry_text(position) for position in range(len(index))]


def test_word_wrap_breaks_after_spaces() -> None:
    text = "hello wonderful world"

    pieces = split_line(text, 10, wrap=True, word_wrap=True)
    assert [text[start:end] for start, end in pieces] == [
        "hello ",
        "wonderful ",
        "world",
    ]

    index = make_index([text], 10, word_wrap=True)
    assert texts(index) == ["hello", "wonderful", "world"]
    assert [entry.width for entry in index.entries] == [5, 9, 5]
    assert [(entry.start, entry.end) for entry in index.entries] == [
        (0, 5),
        (6, 15),
        (16, 21),
    ]


def test_hard_wrap_splits_mid_word() -> None:
    index = make_index(["abcdefghij"], 4)

    assert texts(index) == ["abcd", "efgh", "ij"]


def test_no_wrap_keeps_one_entry_per_line() -> None:
    index = make_index(["a very long line"], 5, wrap=False)

    assert len(index) == 1
    assert index.entries[0].width == 16
    assert index.longest_line == 16


def test_empty_lines_get_one_zero_width_entry() -> None:
    index = make_index(["", "x", ""], 10)

    assert [entry.line for entry in index.entries] == [0, 1, 2]
    assert [entry.width for entry in index.entries] == [0, 1, 0]


@pytest.mark.parametrize("width", [0, -3])
def test_non_positive_width_gives_empty_index(width: int) -> None:
    index = make_index(["abc"], width)

    assert len(index) == 0
    assert index.longest_line == 0


def test_wide_characters_are_measured_in_cells() -> None:
    index = make_index(["中文字"], 4)

    assert texts(index) == ["中文", "字"]
    assert [entry.width for entry in index.entries] == [4, 2]


def test_character_wider_than_view_still_advances() -> None:
    index = make_index(["中中"], 1)

    assert texts(index) == ["中", "中"]


def test_offsets_point_into_tagged_source() -> None:
    line = "[red]ab[blue]cd"
    index = make_index([line], 2, colors=True)

    first, second = index.entries
    assert (first.start, first.end) == (0, 13)
    assert first.color == WHITE
    assert (second.start, second.end) == (13, 15)
    assert second.color == resolve_color("blue")
    assert texts(index) == ["ab", "cd"]


def test_color_and_region_carry_across_lines() -> None:
    index = make_index(['[red]["r"]a', "b"], 10, colors=True, regions=True)

    assert index.entries[1].color == resolve_color("red")
    assert index.entries[1].region == "r"


def test_highlight_range_spans_region_lines() -> None:
    lines = ["zero", "one", "two", '["a"]three', "four", 'five[""]', "six"]

    index = make_index(lines, 20, regions=True, highlights={"a"})

    assert (index.from_highlight, index.to_highlight) == (3, 5)


def test_no_highlight_when_region_not_active() -> None:
    index = make_index(['["a"]x[""]'], 20, regions=True, highlights={"b"})

    assert (index.from_highlight, index.to_highlight) == (-1, -1)
    assert not index.has_highlight


def test_reindex_is_idempotent() -> None:
    lines = ["[red]hello wonderful world", '["a"]tagged[""] text', ""]
    first = make_index(lines, 7, word_wrap=True, colors=True, regions=True)
    second = make_index(lines, 7, word_wrap=True, colors=True, regions=True)

    assert first == second


@pytest.mark.parametrize("word_wrap", [False, True])
def test_more_width_never_adds_entries(word_wrap: bool) -> None:
    line = "The quick brown fox jumps over the lazy dog, again and again."
    counts = [
        len(make_index([line], width, word_wrap=word_wrap)) for width in range(1, 70)
    ]

    assert all(wider <= narrower for narrower, wider in zip(counts, counts[1:]))


def test_word_wrap_drops_trailing_whitespace_bytes() -> None:
    line = "ab" + " " * 20 + "cd"
    index = make_index([line], 5, word_wrap=True)

    assert texts(index) == ["ab", "cd"]
    first, second = index.entries
    assert first.end == 2
    assert second.start == 22
