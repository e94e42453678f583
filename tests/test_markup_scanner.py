from __future__ import annotations

from rich.color import Color

from textview_engine.markup import TagKind, resolve_color, scan, strip_tags


def test_color_tag_is_stripped_and_recorded() -> None:
    scanned = scan("a[red]b", colors=True, regions=False)

    assert scanned.text == "ab"
    assert scanned.offsets == (0, 6)
    assert len(scanned.tags) == 1
    tag = scanned.tags[0]
    assert tag.kind is TagKind.COLOR
    assert (tag.start, tag.end, tag.payload, tag.position) == (1, 6, "red", 1)


def test_hex_color_requires_six_digits() -> None:
    assert strip_tags("[#ff8800]x", colors=True, regions=False) == "x"
    assert strip_tags("[#ff88]x", colors=True, regions=False) == "[#ff88]x"


def test_disabled_families_stay_literal() -> None:
    assert scan("a[red]b", colors=False, regions=False).text == "a[red]b"
    assert scan('["a"]b', colors=True, regions=False).text == '["a"]b'
    assert scan("a[red]b", colors=False, regions=True).text == "a[red]b"


def test_region_start_and_end_tags() -> None:
    scanned = scan('x["a b.c-d"]y[""]z', colors=False, regions=True)

    assert scanned.text == "xyz"
    kinds = [(tag.kind, tag.payload, tag.position) for tag in scanned.tags]
    assert kinds == [
        (TagKind.REGION_START, "a b.c-d", 1),
        (TagKind.REGION_END, "", 2),
    ]


def test_escape_tag_drops_one_character() -> None:
    scanned = scan("[red[]", colors=True, regions=False)

    assert scanned.text == "[red]"
    assert scanned.offsets == (0, 1, 2, 3, 5)
    assert scanned.tags[0].kind is TagKind.ESCAPE
    assert scanned.tags[0].payload == "[red]"
    assert scanned.state_tags == ()


def test_escape_tag_keeps_extra_brackets() -> None:
    assert strip_tags("[red[[]", colors=True, regions=False) == "[red[]"
    assert strip_tags('["a"[]', colors=False, regions=True) == '["a"]'


def test_scan_resumes_after_literal_bracket() -> None:
    scanned = scan("[[red]x", colors=True, regions=False)

    assert scanned.text == "[x"
    assert scanned.tags[0].start == 1
    assert scanned.tags[0].position == 1


def test_offset_of_past_the_end_is_line_length() -> None:
    scanned = scan("ab[red]", colors=True, regions=False)

    assert scanned.offset_of(1) == 1
    assert scanned.offset_of(2) == len("ab[red]")


def test_resolve_color_falls_back_to_default() -> None:
    assert resolve_color("red") == Color.parse("red")
    assert resolve_color("#FF8800") == Color.parse("#ff8800")
    assert resolve_color("nosuchcolor") == Color.default()
