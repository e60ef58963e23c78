import pytest

from edict.parsing import MalformedGlossError, MalformedKeyError
from edict.parsing.taxonomy import Detail
from edict.parsing.text_parser import (
    Annotation,
    AnnotationKind,
    classify_annotation,
    fix_key,
    parse_gloss,
    parse_key,
    peel_annotation_group,
)


@pytest.mark.parametrize(
    "header, kanji, kana",
    [
        ("A;B;C [x;y;z]", ["A", "B", "C"], ["x", "y", "z"]),
        ("A [x]", ["A"], ["x"]),
        ("A", ["A"], []),
        ("A;B", ["A", "B"], []),
        ("A;B  [C;D]", ["A", "B"], ["C", "D"]),
        ("  刖 [げつ] ", ["刖"], ["げつ"]),
        ("A;A [x;x]", ["A", "A"], ["x", "x"]),
    ],
)
def test_parse_key(header, kanji, kana):
    assert parse_key(header) == (kanji, kana)


def test_parse_key_unterminated_reading():
    with pytest.raises(MalformedKeyError) as excinfo:
        parse_key("A;B [C")
    assert excinfo.value.header == "A;B [C"


@pytest.mark.parametrize(
    "form, expected",
    [
        ("foo(bar) (baz) (quux)", "foo"),
        ("foo(bar)", "foo"),
        ("foo", "foo"),
        ("カレー(P)", "カレー"),
    ],
)
def test_fix_key(form, expected):
    assert fix_key(form) == expected


@pytest.mark.parametrize(
    "text, kind, identifier",
    [
        ("42", AnnotationKind.IGNORE, ""),
        ("1", AnnotationKind.IGNORE, ""),
        ("See foo", AnnotationKind.XREF, "foo"),
        ("See あ・い", AnnotationKind.XREF, "あ・い"),
        ("See 半挿・はんぞう・1", AnnotationKind.XREF, "半挿・はんぞう・1"),
        ("n", AnnotationKind.DETAIL, "n"),
        ("n,adj-no", AnnotationKind.DETAIL, "n,adj-no"),
        ("esp. ", AnnotationKind.TEXT, "esp. "),
        ("see foo", AnnotationKind.TEXT, "see foo"),
        ("n,bogus", AnnotationKind.TEXT, "n,bogus"),
        ("１", AnnotationKind.TEXT, "１"),
    ],
)
def test_classify_annotation(text, kind, identifier):
    assert classify_annotation(text) == Annotation(kind, identifier)


def test_peel_annotation_group():
    assert peel_annotation_group("(n) foo") == ("n", "foo")
    assert peel_annotation_group("(n)") == ("n", "")
    assert peel_annotation_group("(n)foo") is None
    assert peel_annotation_group("foo (n)") is None


@pytest.mark.parametrize(
    "block, definition, details, xrefs",
    [
        ("(n) foo", "foo", [Detail.N], None),
        ("(n,adj-no) foo", "foo", [Detail.N, Detail.ADJ_NO], None),
        ("(See foobar) foo", "foo", None, ["foobar"]),
        ("(n) (See foobar) foo", "foo", [Detail.N], ["foobar"]),
        ("foo", "foo", None, None),
        (
            "(1) (abbr) (uK) (See foobar) foo",
            "foo",
            [Detail.ABBR, Detail.USUALLY_KANJI],
            ["foobar"],
        ),
        ("(2) (esp. ) bar", "bar", None, None),
        ("  curry ", "curry", None, None),
        ("(uk) (uk) twice", "twice", [Detail.USUALLY_KANA, Detail.USUALLY_KANA], None),
        ("(n) foo (not an annotation)", "foo (not an annotation)", [Detail.N], None),
        ("(form)al wear", "(form)al wear", None, None),
    ],
)
def test_parse_gloss(block, definition, details, xrefs):
    assert parse_gloss(block) == (definition, details, xrefs)


def test_parse_gloss_unterminated_group():
    with pytest.raises(MalformedGlossError) as excinfo:
        parse_gloss("(n) (abbr foo")
    assert excinfo.value.block == "(n) (abbr foo"
