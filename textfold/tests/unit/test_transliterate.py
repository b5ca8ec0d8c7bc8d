import pytest

from textfold.transliterate import (
    LATIN1_DIGRAPHS,
    UTF8_TABLE,
    fold_latin1,
    fold_utf8,
    locale_group,
    remove_accents,
)
from textfold.transliterate import engine
from textfold.transliterate.tables import freeze


def test_ascii_input_is_returned_as_is(monkeypatch):
    def _fail(_data):
        raise AssertionError("scanner should not run for ASCII input")

    monkeypatch.setattr(engine, "seems_utf8", _fail)
    text = "Plain ASCII, nothing to fold."
    assert remove_accents(text) is text
    data = b"bytes too"
    assert remove_accents(data) is data


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"Fran\xc3\xa7ois", b"Francois"),
        (b"\xc2\xa3100", b"100"),
        (b"\xe2\x82\xac50", b"E50"),
        ("Łódź".encode("utf-8"), b"Lodz"),
        ("Ștefan Țiriac".encode("utf-8"), b"Stefan Tiriac"),
        ("Œuvre, Ĳssel".encode("utf-8"), b"OEuvre, IJssel"),
        ("Þór".encode("utf-8"), b"THor"),
        ("straße".encode("utf-8"), b"strase"),
        ("ªº".encode("utf-8"), b"ao"),
    ],
)
def test_utf8_bytes(data: bytes, expected: bytes) -> None:
    assert remove_accents(data) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("François", "Francois"),
        ("Tiếng Việt có dấu", "Tieng Viet co dau"),
        ("Ơn Ưu Ờ Ử Ữ Ự", "On Uu O U U U"),
        ("lǚ nǘ ɑ Ǎ", "lu nu a A"),
        ("Ångström", "Angstrom"),
    ],
)
def test_str_round_trips_as_str(text: str, expected: str) -> None:
    assert remove_accents(text) == expected


def test_unmapped_characters_pass_through():
    text = "日本 \u2014 café"
    assert remove_accents(text) == "日本 \u2014 cafe"


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\xe6", b"ae"),
        (b"Fran\xe7ois", b"Francois"),
        (b"\xc6sir", b"AEsir"),
        (b"Stra\xdfe", b"Strasse"),
        (b"\xde\xfe\xd0\xf0", b"THthDHdh"),
        (b"\x8c\x9c", b"OEoe"),
        (b"\x80 \x83 \x8a\x8e\x9a\x9e\x9f", b"E f SZszY"),
        (b"\xa2\xa5\xb5", b"cYu"),
        (b"\xff\xfd\xd8", b"yyO"),
    ],
)
def test_legacy_latin1(data: bytes, expected: bytes) -> None:
    assert remove_accents(data) == expected


def test_legacy_leaves_unmapped_bytes():
    assert remove_accents(b"\xa3 \xa9") == b"\xa3 \xa9"


def test_bytearray_in_bytearray_out():
    result = remove_accents(bytearray("é".encode("utf-8")))
    assert isinstance(result, bytearray)
    assert result == bytearray(b"e")


def test_german_locale_digraphs():
    text = "Äpfel über Straße, Öl"
    assert remove_accents(text) == "Apfel uber Strase, Ol"
    for locale in ("de_DE", "de_DE_formal", "de_CH", "de_CH_informal"):
        assert remove_accents(text, locale=locale) == "Aepfel ueber Strasse, Oel"


def test_danish_locale_digraphs():
    assert remove_accents("Ærø Å", locale="da_DK") == "Aeroe Aa"
    assert remove_accents("Ærø Å") == "AEro A"


def test_catalan_flown_dot():
    assert remove_accents("col·lecció", locale="ca") == "colleccio"
    assert remove_accents("col·lecció") == "col·leccio"


def test_unknown_locale_uses_base_table():
    assert locale_group("fr_FR") is None
    assert remove_accents("Äpfel", locale="fr_FR") == "Apfel"


def test_locale_does_not_affect_legacy_path():
    assert remove_accents(b"\xe4", locale="de_DE") == b"a"


def test_utf8_table_shape():
    assert len(UTF8_TABLE) == 309
    for key, value in UTF8_TABLE.items():
        assert len(key.decode("utf-8")) == 1
        assert value.isascii() and len(value) <= 2
    keys = list(UTF8_TABLE)
    for key in keys:
        assert not any(other != key and other.startswith(key) for other in keys)


def test_utf8_table_is_read_only():
    with pytest.raises(TypeError):
        UTF8_TABLE[b"x"] = "y"


def test_freeze_keeps_last_replacement_for_duplicate_keys():
    table = freeze((("é", "x"), ("ñ", "n"), ("é", "e")))
    assert dict(table) == {b"\xc3\xa9": "e", b"\xc3\xb1": "n"}
    assert engine.Utf8Folder.from_table(table).fold("é".encode("utf-8")) == b"e"


def test_every_table_entry_folds_and_is_idempotent():
    for key, value in UTF8_TABLE.items():
        once = remove_accents(key)
        assert once == value.encode("ascii")
        assert remove_accents(once) == once


def test_every_latin1_byte_is_idempotent():
    for code in range(0x80, 0x100):
        once = remove_accents(bytes([code]))
        assert remove_accents(once) == once


def test_folders_are_memoized():
    assert engine._folder_for(None) is engine._folder_for(None)
    assert fold_utf8("å".encode("utf-8"), locale="da_DK") == b"aa"
    assert engine._folder_for("da") is engine._folder_for(locale_group("da_DK"))


def test_fold_latin1_digraph_table():
    for source, target in LATIN1_DIGRAPHS:
        assert fold_latin1(source) == target
