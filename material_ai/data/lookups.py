"""Static SAP material master option lists and keyword dictionaries.

These tables are the whole knowledge base consulted by the suggestion
scorers and embedded into external-model prompts. Dict order matters:
ties between equal scores keep table order.
"""

from __future__ import annotations

from typing import NamedTuple


class Option(NamedTuple):
    code: str
    description: str


MATERIAL_TYPES: tuple[Option, ...] = (
    Option("ZDRL", "Drilling Materials"),
    Option("ZCHM", "Chemical Materials"),
    Option("ZELE", "Electrical Materials"),
    Option("ZPIP", "Piping Materials"),
    Option("ZSTL", "Steel Materials"),
    Option("ZCEM", "Cement Materials"),
)

BASE_UNITS_OF_MEASURE: tuple[Option, ...] = (
    Option("EA", "Each"),
    Option("PCS", "Pieces"),
    Option("KG", "Kilogram"),
    Option("M", "Meter"),
    Option("LTR", "Liter"),
    Option("FT", "Feet"),
    Option("BAG", "Bag"),
    Option("MT", "Metric Ton"),
    Option("L", "Length"),
    Option("CM", "Centimeter"),
    Option("MM", "Millimeter"),
    Option("IN", "Inch"),
    Option("GAL", "Gallon"),
    Option("BBL", "Barrel"),
)

INDUSTRY_SECTORS: tuple[Option, ...] = (
    Option("O", "Oil & Gas Industry"),
    Option("C", "Chemical Industry"),
    Option("M", "Manufacturing Industry"),
    Option("B", "Construction Industry"),
    Option("E", "Electrical Industry"),
    Option("P", "Petrochemical Industry"),
    Option("R", "Refinery Industry"),
)

MATERIAL_GROUPS: dict[str, tuple[Option, ...]] = {
    "ZDRL": (
        Option("43JDX", "SELF INDEXING GUIDE"),
        Option("43KLM", "DRILLING TOOLS"),
        Option("43MNP", "DRILL BITS"),
        Option("43ABC", "DRILL PIPES"),
        Option("43DEF", "DRILL COLLARS"),
        Option("43GHI", "DRILLING ACCESSORIES"),
    ),
    "ZCHM": (
        Option("44ABC", "CHEMICAL COMPOUNDS"),
        Option("44DEF", "DRILLING FLUIDS"),
        Option("44GHI", "CEMENT ADDITIVES"),
        Option("44JKL", "CORROSION INHIBITORS"),
        Option("44MNO", "CLEANING CHEMICALS"),
        Option("44PQR", "PRODUCTION CHEMICALS"),
    ),
    "ZELE": (
        Option("45XYZ", "ELECTRICAL COMPONENTS"),
        Option("45UVW", "CONTROL SYSTEMS"),
        Option("45RST", "POWER SUPPLIES"),
        Option("45ABC", "CABLES & WIRING"),
        Option("45DEF", "INSTRUMENTATION"),
        Option("45GHI", "ELECTRICAL PANELS"),
    ),
    "ZPIP": (
        Option("46ABC", "STEEL PIPES"),
        Option("46DEF", "PIPE FITTINGS"),
        Option("46GHI", "VALVES"),
        Option("46JKL", "FLANGES"),
        Option("46MNO", "GASKETS"),
        Option("46PQR", "PIPE SUPPORTS"),
    ),
    "ZSTL": (
        Option("47ABC", "STRUCTURAL STEEL"),
        Option("47DEF", "STEEL BARS"),
        Option("47GHI", "STEEL PLATES"),
        Option("47JKL", "STEEL TUBES"),
        Option("47MNO", "STEEL FASTENERS"),
        Option("47PQR", "STEEL MESH"),
    ),
    "ZCEM": (
        Option("48ABC", "PORTLAND CEMENT"),
        Option("48DEF", "CEMENT ADDITIVES"),
        Option("48GHI", "CONCRETE MIX"),
        Option("48JKL", "CEMENT SLURRY"),
        Option("48MNO", "GROUT MATERIALS"),
        Option("48PQR", "CEMENT RETARDERS"),
    ),
}

MATERIAL_KEYWORDS: dict[str, tuple[str, ...]] = {
    "ZDRL": ("drill", "drilling", "bit", "pipe", "collar", "guide", "tool", "bore", "hole"),
    "ZCHM": ("chemical", "fluid", "cement", "additive", "compound", "inhibitor", "cleaning", "production"),
    "ZELE": ("electrical", "cable", "wire", "power", "control", "system", "panel", "instrument"),
    "ZPIP": ("pipe", "piping", "fitting", "valve", "flange", "gasket", "support", "tube"),
    "ZSTL": ("steel", "structural", "bar", "plate", "fastener", "mesh", "metal", "iron"),
    "ZCEM": ("cement", "concrete", "portland", "grout", "slurry", "retarder", "mix"),
}

UNIT_KEYWORDS: dict[str, tuple[str, ...]] = {
    "EA": ("each", "piece", "item", "unit", "component", "part"),
    "PCS": ("pieces", "parts", "components", "items"),
    "KG": ("kilogram", "weight", "mass", "powder", "chemical", "additive"),
    "M": ("meter", "length", "pipe", "cable", "wire", "rod", "bar"),
    "LTR": ("liter", "liquid", "fluid", "chemical", "oil"),
    "FT": ("feet", "foot", "length", "pipe", "cable"),
    "BAG": ("bag", "sack", "cement", "powder", "additive"),
    "MT": ("metric ton", "tonne", "bulk", "steel", "cement"),
    "BBL": ("barrel", "oil", "chemical", "fluid"),
    "GAL": ("gallon", "liquid", "paint", "chemical"),
}

INDUSTRY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "O": ("oil", "gas", "petroleum", "drilling", "upstream", "downstream", "refinery"),
    "C": ("chemical", "petrochemical", "process", "reaction", "catalyst"),
    "M": ("manufacturing", "production", "assembly", "fabrication"),
    "B": ("construction", "building", "infrastructure", "concrete", "structural"),
    "E": ("electrical", "power", "energy", "electronics", "instrumentation"),
    "P": ("petrochemical", "refining", "processing", "distillation"),
    "R": ("refinery", "refining", "crude", "distillation", "processing"),
}

# Material type -> units that get a +2 compatibility bonus
UNIT_TYPE_BONUS: dict[str, tuple[str, ...]] = {
    "ZDRL": ("EA", "PCS", "M", "FT"),
    "ZCHM": ("KG", "LTR", "BAG", "MT"),
    "ZELE": ("EA", "PCS", "M"),
    "ZPIP": ("M", "FT", "PCS", "EA"),
    "ZSTL": ("KG", "MT", "M", "PCS"),
    "ZCEM": ("BAG", "KG", "MT"),
}
UNIT_TYPE_BONUS_POINTS = 2

# Material type -> industry sectors that get a +3 compatibility bonus
SECTOR_TYPE_BONUS: dict[str, tuple[str, ...]] = {
    "ZDRL": ("O",),
    "ZCHM": ("C", "P"),
    "ZELE": ("E",),
    "ZPIP": ("O", "M"),
    "ZSTL": ("M", "B"),
    "ZCEM": ("B", "O"),
}
SECTOR_TYPE_BONUS_POINTS = 3

# Description keyword -> material group description token, +3 when both present
GROUP_KEYWORD_BONUS: tuple[tuple[str, str], ...] = (
    ("bit", "BITS"),
    ("drill", "DRILL"),
    ("pipe", "PIPE"),
    ("chemical", "CHEMICAL"),
    ("electrical", "ELECTRICAL"),
    ("cement", "CEMENT"),
    ("steel", "STEEL"),
)
GROUP_KEYWORD_BONUS_POINTS = 3


def material_groups_for(material_type: str) -> tuple[Option, ...]:
    """Groups of one material type, or every group when the type is unknown/empty."""
    if material_type and material_type in MATERIAL_GROUPS:
        return MATERIAL_GROUPS[material_type]
    return tuple(group for groups in MATERIAL_GROUPS.values() for group in groups)


def format_group(option: Option) -> str:
    """Render a material group the way the entry form stores it: '43JDX (SELF INDEXING GUIDE)'."""
    return f"{option.code} ({option.description})"
