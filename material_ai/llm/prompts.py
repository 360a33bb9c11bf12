"""Prompts for the external-model suggestion path."""

from material_ai.data.lookups import (
    BASE_UNITS_OF_MEASURE,
    INDUSTRY_SECTORS,
    MATERIAL_TYPES,
    Option,
    material_groups_for,
)
from material_ai.models.analysis import SuggestionContext

SYSTEM_PROMPT_SUGGESTIONS = (
    "You are an AI assistant specializing in SAP material master data. "
    "Choose the most appropriate options from the provided list based on the material description. "
    "Return only the codes/values from the list, maximum 2 suggestions."
)


def _options(options) -> str:
    return ", ".join(f"{o.code} ({o.description})" for o in options)


def build_field_prompt(field: str, context: SuggestionContext) -> str:
    """User prompt listing every allowed option for the field."""
    description = context.description
    material_type = context.material_type

    if field == "materialType":
        return (
            f'Material description: "{description}"\n'
            f"Available material types: {_options(MATERIAL_TYPES)}\n"
            "Choose the most appropriate material type codes (maximum 2):"
        )
    if field == "baseUnitOfMeasure":
        return (
            f'Material description: "{description}"\n'
            f'Material type: "{material_type}"\n'
            f"Available units: {_options(BASE_UNITS_OF_MEASURE)}\n"
            "Choose the most appropriate unit codes (maximum 2):"
        )
    if field == "industrySector":
        return (
            f'Material description: "{description}"\n'
            f'Material type: "{material_type}"\n'
            f"Available industry sectors: {_options(INDUSTRY_SECTORS)}\n"
            "Choose the most appropriate industry sector codes (maximum 2):"
        )
    if field == "materialGroup":
        groups: tuple[Option, ...] = material_groups_for(material_type)
        return (
            f'Material description: "{description}"\n'
            f'Material type: "{material_type}"\n'
            f"Available material groups: {_options(groups)}\n"
            "Choose the most appropriate material group codes with descriptions (maximum 2):"
        )
    return f'Material description: "{description}". Suggest appropriate values for {field}.'
