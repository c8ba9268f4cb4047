import pytest

from cicero.ucd import (
    CharacterProperties,
    GraphemeProperties,
    Plane,
    block_names,
    block_of,
    canonical_block_name,
    characters_from_code_points,
    code_point_description,
    code_point_to_string,
    parse_character,
    plane_names,
    split_graphemes,
    string_to_code_point,
)
from cicero.ucd.properties import ccc_description


def test_code_point_notation() -> None:
    assert code_point_to_string("A") == "U+0041"
    assert code_point_to_string(0x1F600) == "U+1F600"
    assert code_point_description("A") == "  U+0041"
    assert code_point_description(0x10FFFF) == "U+10FFFF"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("U+0041", "A"),
        ("u+1f600", "\U0001f600"),
        ("U+10FFFF", "\U0010ffff"),
        ("Invalid", None),
        ("U+", None),
        ("U+11FFFF", None),
        ("U+D800", None),
        ("U+GG", None),
        ("U+0x41", None),
        ("U+4_1", None),
        ("U+ 41", None),
        ("U+-41", None),
    ],
)
def test_string_to_code_point(value: str, expected: str | None) -> None:
    assert string_to_code_point(value) == expected


def test_parse_character_and_lists() -> None:
    assert parse_character("x") == "x"
    assert parse_character("U+0078") == "x"
    assert parse_character("xy") is None
    assert characters_from_code_points("U+0041,bogus,u+0301,U+") == ["A", "\u0301"]


def test_planes() -> None:
    assert len(plane_names()) == 17
    assert Plane.of("A").name == "Basic Multilingual Plane"
    assert Plane.of(0x1F600).name == "Supplementary Multilingual Plane"
    last = Plane.at(16)
    assert last.name == "Supplementary Private Use Area (Plane 16)"
    assert 0x10FFFF in last.range
    assert 0xFFFFF not in last.range
    with pytest.raises(ValueError):
        Plane.at(17)


def test_blocks() -> None:
    assert block_of("A") == "Basic Latin"
    assert block_of(0x0416) == "Cyrillic"
    assert block_of(0x2FE0) is None
    assert "Basic Latin" in block_names()
    assert canonical_block_name("basic_latin") == "Basic Latin"
    assert canonical_block_name("Greek-and-Coptic") == "Greek and Coptic"
    assert canonical_block_name("Atlantis") is None


def test_character_properties_of_combining_mark() -> None:
    properties = CharacterProperties.of("\u0301")
    assert properties.name == "COMBINING ACUTE ACCENT"
    assert properties.general_category.abbr == "Mn"
    assert properties.general_category.long == "Nonspacing_Mark"
    assert properties.ccc == 230
    assert properties.ccc_description == "Above(230)"
    assert properties.block_name == "Combining Diacritical Marks"
    assert properties.bidi_class.abbr == "NSM"
    assert not properties.is_cased


def test_character_properties_of_letter() -> None:
    properties = CharacterProperties.of("\u00e9")
    assert properties.is_cased
    assert properties.uppercase == "\u00c9"
    assert properties.decomposition is not None
    assert properties.decomposition.decomposition_type == "canonical"
    assert properties.decomposition.components == ("e", "\u0301")
    assert properties.script == "Latin"
    payload = properties.to_dict()
    assert payload["code_point"] == 0xE9
    assert payload["decomposition"]["components"] == ["e", "\u0301"]


def test_compatibility_decomposition_and_mirroring() -> None:
    assert CharacterProperties.of("\ufb01").decomposition.decomposition_type == "compat"
    assert CharacterProperties.of("(").is_bidi_mirrored
    assert CharacterProperties.of("\u200f").is_bidi_control


@pytest.mark.parametrize(
    ("ccc", "expected"),
    [(0, "Not_Reordered(0)"), (10, "CCC10(10)"), (230, "Above(230)"), (255, "255")],
)
def test_ccc_description(ccc: int, expected: str) -> None:
    assert ccc_description(ccc) == expected


def test_grapheme_properties_tree() -> None:
    graphemes = GraphemeProperties.from_string("e\u0301x")
    assert [g.grapheme for g in graphemes] == ["e\u0301", "x"]
    lines = str(graphemes[0]).splitlines()
    assert lines[0] == "e\u0301"
    assert lines[1].startswith("├── ")
    assert "LATIN SMALL LETTER E" in lines[1]
    assert lines[2].startswith("└── ")
    assert "COMBINING ACUTE ACCENT" in lines[2]


def test_split_graphemes_keeps_emoji_sequences() -> None:
    family = "\U0001f468\u200d\U0001f469\u200d\U0001f467"
    assert split_graphemes(f"a{family}b") == ["a", family, "b"]
