from collator.sorting import sort_fragments
from collator.types import Fragment


def _names(fragments):
    return [f.basename for f in fragments]


def test_sorts_by_key_with_unmatched_last():
    fragments = [
        Fragment("Text/notes.txt"),
        Fragment("Text/C2 - L0 - 0.srt"),
        Fragment("Text/C1 - L2 - A0.5.srt"),
        Fragment("Text/C1 - L1 - 1.srt"),
    ]
    assert _names(sort_fragments(fragments)) == [
        "C1 - L1 - 1.srt",
        "C1 - L2 - A0.5.srt",
        "C2 - L0 - 0.srt",
        "notes.txt",
    ]


def test_numeric_not_lexical_order():
    fragments = [Fragment("C1 - L10 - 1.srt"), Fragment("C1 - L9 - 1.srt"), Fragment("C1 - L9 - 1.25.srt")]
    assert _names(sort_fragments(fragments)) == ["C1 - L9 - 1.srt", "C1 - L9 - 1.25.srt", "C1 - L10 - 1.srt"]


def test_unmatched_keep_input_order():
    fragments = [Fragment("b.txt"), Fragment("a.txt")]
    assert _names(sort_fragments(fragments)) == ["b.txt", "a.txt"]


def test_input_is_not_mutated():
    fragments = [Fragment("C2 - L1 - 1.srt"), Fragment("C1 - L1 - 1.srt")]
    original = list(fragments)
    result = sort_fragments(fragments)
    assert fragments == original
    assert result is not fragments


def test_key_is_computed_once_per_fragment():
    fragment = Fragment("C1 - L1 - 1.srt")
    key = fragment.key
    sort_fragments([fragment, Fragment("C0 - L0 - 0.srt")])
    assert fragment.key is key


def test_empty_input():
    assert sort_fragments([]) == []
