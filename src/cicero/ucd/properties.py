"""Character and grapheme property records built from the UCD."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
import unicodedata

from fontTools import unicodedata as ft_unicodedata

from .blocks import block_of
from .notation import code_point_description
from .plane import Plane
from .segmentation import split_graphemes


TREE_GRAPH_EDGE = "├── "
TREE_GRAPH_CORNER = "└── "

GENERAL_CATEGORY_NAMES: dict[str, str] = {
    "Lu": "Uppercase_Letter",
    "Ll": "Lowercase_Letter",
    "Lt": "Titlecase_Letter",
    "Lm": "Modifier_Letter",
    "Lo": "Other_Letter",
    "Mn": "Nonspacing_Mark",
    "Mc": "Spacing_Mark",
    "Me": "Enclosing_Mark",
    "Nd": "Decimal_Number",
    "Nl": "Letter_Number",
    "No": "Other_Number",
    "Pc": "Connector_Punctuation",
    "Pd": "Dash_Punctuation",
    "Ps": "Open_Punctuation",
    "Pe": "Close_Punctuation",
    "Pi": "Initial_Punctuation",
    "Pf": "Final_Punctuation",
    "Po": "Other_Punctuation",
    "Sm": "Math_Symbol",
    "Sc": "Currency_Symbol",
    "Sk": "Modifier_Symbol",
    "So": "Other_Symbol",
    "Zs": "Space_Separator",
    "Zl": "Line_Separator",
    "Zp": "Paragraph_Separator",
    "Cc": "Control",
    "Cf": "Format",
    "Cs": "Surrogate",
    "Co": "Private_Use",
    "Cn": "Unassigned",
}

BIDI_CLASS_NAMES: dict[str, str] = {
    "L": "Left_To_Right",
    "R": "Right_To_Left",
    "AL": "Arabic_Letter",
    "EN": "European_Number",
    "ES": "European_Separator",
    "ET": "European_Terminator",
    "AN": "Arabic_Number",
    "CS": "Common_Separator",
    "NSM": "Nonspacing_Mark",
    "BN": "Boundary_Neutral",
    "B": "Paragraph_Separator",
    "S": "Segment_Separator",
    "WS": "White_Space",
    "ON": "Other_Neutral",
    "LRE": "Left_To_Right_Embedding",
    "LRO": "Left_To_Right_Override",
    "RLE": "Right_To_Left_Embedding",
    "RLO": "Right_To_Left_Override",
    "PDF": "Pop_Directional_Format",
    "LRI": "Left_To_Right_Isolate",
    "RLI": "Right_To_Left_Isolate",
    "FSI": "First_Strong_Isolate",
    "PDI": "Pop_Directional_Isolate",
}

_CCC_NAMES: dict[int, str] = {
    0: "Not_Reordered",
    1: "Overlay",
    6: "Han_Reading",
    7: "Nukta",
    8: "Kana_Voicing",
    9: "Virama",
    200: "Attached_Below_Left",
    202: "Attached_Below",
    214: "Attached_Above",
    216: "Attached_Above_Right",
    218: "Below_Left",
    220: "Below",
    222: "Below_Right",
    224: "Left",
    226: "Right",
    228: "Above_Left",
    230: "Above",
    232: "Above_Right",
    233: "Double_Below",
    234: "Double_Above",
    240: "Iota_Subscript",
}

_BIDI_CONTROLS = frozenset(
    [0x061C, 0x200E, 0x200F, *range(0x202A, 0x202F), *range(0x2066, 0x206A)]
)


def ccc_description(ccc: int) -> str:
    """Return the long name of a canonical combining class, e.g. ``Above(230)``."""
    if ccc in _CCC_NAMES:
        return f"{_CCC_NAMES[ccc]}({ccc})"
    if 10 <= ccc <= 199:
        return f"CCC{ccc}({ccc})"
    return str(ccc)


@dataclass(frozen=True, slots=True)
class StringValuedProperty:
    abbr: str
    long: str

    def __str__(self) -> str:
        return f"{self.long.replace('_', ' ')}({self.abbr})"

    def to_dict(self) -> dict[str, str]:
        return {"abbr": self.abbr, "long": self.long}


@dataclass(frozen=True, slots=True)
class Decomposition:
    """Single-level decomposition mapping as stored in ``UnicodeData.txt``."""

    decomposition_type: str
    components: tuple[str, ...]

    @classmethod
    def of(cls, char: str) -> Decomposition | None:
        raw = unicodedata.decomposition(char)
        if not raw:
            return None
        parts = raw.split()
        tag = "canonical"
        if parts[0].startswith("<"):
            tag = parts.pop(0).strip("<>")
        return cls(
            decomposition_type=tag,
            components=tuple(chr(int(part, 16)) for part in parts),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "decomposition_type": self.decomposition_type,
            "components": list(self.components),
        }


@dataclass(frozen=True, slots=True)
class CharacterProperties:
    """Properties of a single code point as shown in the detail panel."""

    character: str
    code_point: int
    name: str
    general_category: StringValuedProperty
    plane_name: str
    block_name: str | None
    script: str | None
    is_cased: bool
    uppercase: str | None
    lowercase: str | None
    ccc: int
    decomposition: Decomposition | None
    bidi_class: StringValuedProperty
    is_bidi_control: bool
    is_bidi_mirrored: bool

    @classmethod
    def of(cls, char: str) -> CharacterProperties:
        category = unicodedata.category(char)
        bidi = unicodedata.bidirectional(char) or "L"
        upper = char.upper()
        lower = char.lower()
        cased = upper != char or lower != char or char.title() != char
        script_code = ft_unicodedata.script(char)
        script = ft_unicodedata.script_name(script_code, default=script_code) or None
        return cls(
            character=char,
            code_point=ord(char),
            name=unicodedata.name(char, ""),
            general_category=StringValuedProperty(category, GENERAL_CATEGORY_NAMES[category]),
            plane_name=Plane.of(char).name,
            block_name=block_of(char),
            script=script,
            is_cased=cased,
            uppercase=upper if cased else None,
            lowercase=lower if cased else None,
            ccc=unicodedata.combining(char),
            decomposition=Decomposition.of(char),
            bidi_class=StringValuedProperty(bidi, BIDI_CLASS_NAMES.get(bidi, bidi)),
            is_bidi_control=ord(char) in _BIDI_CONTROLS,
            is_bidi_mirrored=bool(unicodedata.mirrored(char)),
        )

    @property
    def ccc_description(self) -> str:
        return ccc_description(self.ccc)

    def to_dict(self) -> dict[str, Any]:
        return {
            "character": self.character,
            "code_point": self.code_point,
            "name": self.name,
            "general_category": self.general_category.to_dict(),
            "plane_name": self.plane_name,
            "block_name": self.block_name,
            "script": self.script,
            "is_cased": self.is_cased,
            "uppercase": self.uppercase,
            "lowercase": self.lowercase,
            "ccc": self.ccc,
            "decomposition": self.decomposition.to_dict() if self.decomposition else None,
            "bidi_class": self.bidi_class.to_dict(),
            "is_bidi_control": self.is_bidi_control,
            "is_bidi_mirrored": self.is_bidi_mirrored,
        }

    def __str__(self) -> str:
        return f"{code_point_description(self.character)}  {self.character}  {self.name}"


@dataclass(frozen=True, slots=True)
class GraphemeProperties:
    """A grapheme cluster together with the properties of its code points."""

    grapheme: str
    characters: tuple[CharacterProperties, ...] = field(default_factory=tuple)

    @classmethod
    def from_string(cls, text: str) -> list[GraphemeProperties]:
        return [
            cls(
                grapheme=grapheme,
                characters=tuple(CharacterProperties.of(char) for char in grapheme),
            )
            for grapheme in split_graphemes(text)
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            "grapheme": self.grapheme,
            "characters": [character.to_dict() for character in self.characters],
        }

    def __str__(self) -> str:
        lines = [self.grapheme]
        for index, character in enumerate(self.characters):
            edge = TREE_GRAPH_CORNER if index + 1 == len(self.characters) else TREE_GRAPH_EDGE
            lines.append(f"{edge}{character}")
        return "\n".join(lines)


__all__ = [
    "BIDI_CLASS_NAMES",
    "GENERAL_CATEGORY_NAMES",
    "CharacterProperties",
    "Decomposition",
    "GraphemeProperties",
    "StringValuedProperty",
    "ccc_description",
]
