"""Field format validators for material entries.

Two historic material-code rules exist: the SAP entry form expects an
8-character alphanumeric code, the quick-entry form expects three letters
followed by three digits. Each path keeps its own rule unless
ASSISTANT_MATERIAL_CODE_RULE forces one of them everywhere.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Iterable, Optional

from material_ai.data.store import DataSnapshot
from material_ai.models.analysis import AnalyzeRequest, MaterialDraft, ValidationResult
from material_ai.models.material import QUALIFIED_VENDOR_PREFIX, Vendor

MIN_DESCRIPTION_LENGTH = 5
MATERIAL_GROUP_PATTERN = re.compile(r"\d{2}[A-Z]{3}", re.IGNORECASE)


@dataclass(frozen=True)
class CodeRule:
    name: str
    pattern: re.Pattern
    message: str
    hint: str


SAP8_RULE = CodeRule(
    name="sap8",
    pattern=re.compile(r"[A-Z0-9]{8}", re.IGNORECASE),
    message="Material code should be 8 characters long",
    hint="Consider using format: LETTERSNUMBERS (e.g., S1566153)",
)
ABC123_RULE = CodeRule(
    name="abc123",
    pattern=re.compile(r"[A-Z]{3}\d{3}"),
    message="Material code should follow format: ABC123",
    hint="",
)
CODE_RULES = {rule.name: rule for rule in (SAP8_RULE, ABC123_RULE)}


def resolve_code_rule(override: Optional[str], default: CodeRule) -> CodeRule:
    return CODE_RULES[override] if override else default


def is_valid_material_group(value: str) -> bool:
    """Check the group code prefix: '43JDX (SELF INDEXING GUIDE)' passes, 'JDX43' does not."""
    code = value.split(" ")[0]
    return bool(MATERIAL_GROUP_PATTERN.fullmatch(code))


def generate_material_code(category: str = "") -> str:
    """Propose a code from the category prefix, e.g. 'STEEL' -> 'STE482'."""
    prefix = (category or "GEN")[:3].upper()
    return f"{prefix}{random.randint(100, 999)}"


def suggest_qualified_vendor(vendors: Iterable[Vendor], category: str = "") -> str:
    qualified = [v for v in vendors if v.is_qualified and (not category or category in v.category)]
    if qualified:
        return f"Try vendor: {qualified[0].name} ({qualified[0].id})"
    return f"Select a qualified vendor ({QUALIFIED_VENDOR_PREFIX}xxx series)"


def validate_fields(
    draft: MaterialDraft,
    data: DataSnapshot,
    code_rule: CodeRule = ABC123_RULE,
) -> list[ValidationResult]:
    """Independent per-field checks for the quick-entry form.

    Code, description and vendor each produce exactly one result; the vendor
    check only runs when a vendor id was entered.
    """
    validations: list[ValidationResult] = []

    if not draft.material_code:
        validations.append(
            ValidationResult(
                field="materialCode",
                status="error",
                message="Material code is required",
                suggestion=generate_material_code(draft.category),
            )
        )
    elif not code_rule.pattern.fullmatch(draft.material_code):
        validations.append(
            ValidationResult(
                field="materialCode",
                status="warning",
                message=code_rule.message,
                suggestion=generate_material_code(draft.category),
            )
        )
    else:
        validations.append(
            ValidationResult(field="materialCode", status="valid", message="Valid material code format")
        )

    if len(draft.description) < MIN_DESCRIPTION_LENGTH:
        validations.append(
            ValidationResult(
                field="description",
                status="error",
                message=f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters",
                suggestion="Please provide a detailed material description",
            )
        )
    else:
        validations.append(
            ValidationResult(field="description", status="valid", message="Valid description")
        )

    if draft.vendor_id:
        validations.append(validate_vendor(draft.vendor_id, data, draft.category))

    return validations


def validate_vendor(vendor_id: str, data: DataSnapshot, category: str = "") -> ValidationResult:
    """Unknown and unqualified vendors are both errors, never warnings."""
    vendor = data.find_vendor(vendor_id)
    if vendor is None:
        return ValidationResult(
            field="vendorId",
            status="error",
            message="Vendor not found",
            suggestion="Select from qualified vendors list",
        )
    if not vendor.is_qualified:
        return ValidationResult(
            field="vendorId",
            status="error",
            message=f"Only qualified vendors ({QUALIFIED_VENDOR_PREFIX}xxx series) are allowed",
            suggestion=suggest_qualified_vendor(data.vendors, category),
        )
    return ValidationResult(field="vendorId", status="valid", message="Valid qualified vendor")


def validate_analysis_entry(
    entry: AnalyzeRequest,
    suggestions: dict[str, list[str]],
    code_rule: CodeRule = SAP8_RULE,
) -> list[ValidationResult]:
    """Warnings for the SAP entry form; only evaluated once a material code exists."""
    validations: list[ValidationResult] = []
    if not entry.material:
        return validations

    if not code_rule.pattern.fullmatch(entry.material):
        validations.append(
            ValidationResult(
                field="material",
                status="warning",
                message=code_rule.message,
                suggestion=code_rule.hint or None,
            )
        )

    suggested_types = suggestions.get("materialType") or []
    if entry.material_type and suggested_types and entry.material_type not in suggested_types:
        validations.append(
            ValidationResult(
                field="materialType",
                status="warning",
                message="Material type might not be optimal for this material",
                suggestion=f"Consider using one of the suggested types: {', '.join(suggested_types)}",
            )
        )

    if entry.material_group and not is_valid_material_group(entry.material_group):
        validations.append(
            ValidationResult(
                field="materialGroup",
                status="warning",
                message="Material group code should follow format: 2 numbers + 3 letters",
                suggestion="Example format: 43JDX (SELF INDEXING GUIDE)",
            )
        )

    return validations
