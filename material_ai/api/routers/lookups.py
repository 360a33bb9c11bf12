"""Option lists for the material entry form."""

from fastapi import APIRouter, HTTPException

from material_ai.data.lookups import (
    BASE_UNITS_OF_MEASURE,
    INDUSTRY_SECTORS,
    MATERIAL_GROUPS,
    MATERIAL_TYPES,
)
from material_ai.data.mock_data import REFERENCE_CATALOGS

router = APIRouter(prefix="/api", tags=["lookups"])


def _as_dicts(options):
    return [option._asdict() for option in options]


@router.get("/lookups")
async def get_lookups():
    return {
        "materialTypes": _as_dicts(MATERIAL_TYPES),
        "baseUnitsOfMeasure": _as_dicts(BASE_UNITS_OF_MEASURE),
        "industrySectors": _as_dicts(INDUSTRY_SECTORS),
        "materialGroups": {
            material_type: _as_dicts(groups) for material_type, groups in MATERIAL_GROUPS.items()
        },
    }


@router.get("/reference/{name}")
async def get_reference(name: str):
    if name not in REFERENCE_CATALOGS:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown reference list '{name}'. Available: {sorted(REFERENCE_CATALOGS)}",
        )
    return REFERENCE_CATALOGS[name]
