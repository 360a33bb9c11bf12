"""Keyword-overlap suggestion scorers.

Every scorer counts how many keywords of a candidate occur as substrings
of the lowercased description, adds fixed material-type compatibility
bonuses, drops zero scores and returns the two best codes. Sorting is
stable, so ties keep table order.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from material_ai.data.lookups import (
    BASE_UNITS_OF_MEASURE,
    GROUP_KEYWORD_BONUS,
    GROUP_KEYWORD_BONUS_POINTS,
    INDUSTRY_KEYWORDS,
    INDUSTRY_SECTORS,
    MATERIAL_KEYWORDS,
    MATERIAL_TYPES,
    SECTOR_TYPE_BONUS,
    SECTOR_TYPE_BONUS_POINTS,
    UNIT_KEYWORDS,
    UNIT_TYPE_BONUS,
    UNIT_TYPE_BONUS_POINTS,
    format_group,
    material_groups_for,
)
from material_ai.models.analysis import SuggestionContext
from material_ai.models.material import Vendor

MAX_SUGGESTIONS = 2
CODE_PREFIX_BONUS_POINTS = 2

MATERIAL_TYPE = "materialType"
BASE_UNIT = "baseUnitOfMeasure"
INDUSTRY_SECTOR = "industrySector"
MATERIAL_GROUP = "materialGroup"
VENDOR_ID = "vendorId"

# Fields the analysis endpoint fans out over
ANALYSIS_FIELDS = (BASE_UNIT, MATERIAL_TYPE, INDUSTRY_SECTOR, MATERIAL_GROUP)


def keyword_score(description: str, keywords: Iterable[str]) -> int:
    """Number of keywords found as substrings of the description."""
    return sum(1 for keyword in keywords if keyword in description)


def top_codes(scored: Sequence[tuple[str, int]], limit: int = MAX_SUGGESTIONS) -> list[str]:
    """Codes with a positive score, best first, ties in table order."""
    ranked = sorted((item for item in scored if item[1] > 0), key=lambda item: item[1], reverse=True)
    return [code for code, _ in ranked[:limit]]


def suggest_material_type(description: str, material_code: str = "") -> list[str]:
    """Rank material types by keyword hits.

    When a material code is given, a type whose code minus the leading 'Z'
    prefixes the material code gets a bonus ('stl...' favours ZSTL).
    """
    description = description.lower()
    material_code = material_code.lower()
    scored = []
    for type_code, keywords in MATERIAL_KEYWORDS.items():
        score = keyword_score(description, keywords)
        if material_code and material_code.startswith(type_code.lower()[1:]):
            score += CODE_PREFIX_BONUS_POINTS
        scored.append((type_code, score))
    return top_codes(scored)


def suggest_base_unit(description: str, material_type: str = "") -> list[str]:
    description = description.lower()
    compatible = UNIT_TYPE_BONUS.get(material_type, ())
    scored = []
    for unit_code, keywords in UNIT_KEYWORDS.items():
        score = keyword_score(description, keywords)
        if unit_code in compatible:
            score += UNIT_TYPE_BONUS_POINTS
        scored.append((unit_code, score))
    return top_codes(scored)


def suggest_industry_sector(description: str, material_type: str = "") -> list[str]:
    description = description.lower()
    compatible = SECTOR_TYPE_BONUS.get(material_type, ())
    scored = []
    for sector_code, keywords in INDUSTRY_KEYWORDS.items():
        score = keyword_score(description, keywords)
        if sector_code in compatible:
            score += SECTOR_TYPE_BONUS_POINTS
        scored.append((sector_code, score))
    return top_codes(scored)


def suggest_material_group(description: str, material_type: str = "") -> list[str]:
    """Rank material groups; results are rendered as 'CODE (DESCRIPTION)'.

    Groups are limited to the selected material type when it is known.
    Each word of the group description counts as a keyword.
    """
    description = description.lower()
    scored = []
    for group in material_groups_for(material_type):
        score = keyword_score(description, group.description.lower().split(" "))
        for keyword, token in GROUP_KEYWORD_BONUS:
            if keyword in description and token in group.description:
                score += GROUP_KEYWORD_BONUS_POINTS
        scored.append((format_group(group), score))
    return top_codes(scored)


def suggest_vendors(category: str, vendors: Iterable[Vendor]) -> list[str]:
    """Qualified vendor ids serving the given category."""
    return [v.id for v in vendors if v.is_qualified and category in v.category]


def default_suggestions(field: str, material_type: str = "") -> list[str]:
    """Fixed fallback used when no keyword matches and defaults are enabled."""
    if field == MATERIAL_TYPE:
        options = [option.code for option in MATERIAL_TYPES]
    elif field == BASE_UNIT:
        options = [option.code for option in BASE_UNITS_OF_MEASURE]
    elif field == INDUSTRY_SECTOR:
        options = [option.code for option in INDUSTRY_SECTORS]
    elif field == MATERIAL_GROUP:
        options = [format_group(group) for group in material_groups_for(material_type)]
    else:
        options = []
    return options[:MAX_SUGGESTIONS]


def get_local_suggestions(
    field: str,
    context: SuggestionContext,
    vendors: Iterable[Vendor] = (),
    defaults_on_empty: bool = False,
    use_code_hint: bool = False,
) -> list[str]:
    """Suggestions for one form field from the static tables alone.

    Unknown fields yield an empty list.
    """
    description = context.description.lower()
    material_type = context.material_type

    if field == MATERIAL_TYPE:
        code_hint = context.material_code if use_code_hint else ""
        suggestions = suggest_material_type(description, code_hint)
    elif field == BASE_UNIT:
        suggestions = suggest_base_unit(description, material_type)
    elif field == INDUSTRY_SECTOR:
        suggestions = suggest_industry_sector(description, material_type)
    elif field == MATERIAL_GROUP:
        suggestions = suggest_material_group(description, material_type)
    elif field == VENDOR_ID:
        suggestions = suggest_vendors(context.category, vendors)
    else:
        return []

    if not suggestions and defaults_on_empty:
        return default_suggestions(field, material_type)
    return suggestions
