"""Vendor-manufacturer relationship check."""

from material_ai.data.store import DataSnapshot
from material_ai.models.analysis import ValidationResult


def validate_vendor_manufacturer_link(
    vendor_id: str,
    manufacturer_id: str,
    data: DataSnapshot,
) -> ValidationResult:
    """Fail on unknown ids, warn when the vendor does not list the manufacturer.

    Only the vendor side of the relationship is consulted; the
    manufacturer's own vendor list is not required to agree.
    """
    vendor = data.find_vendor(vendor_id)
    manufacturer = data.find_manufacturer(manufacturer_id)

    if vendor is None or manufacturer is None:
        return ValidationResult(
            field="linkage",
            status="error",
            message="Vendor or manufacturer not found",
        )

    if manufacturer_id not in vendor.linked_manufacturers:
        linked_names = ", ".join(
            m.name for m in data.manufacturers if m.id in vendor.linked_manufacturers
        )
        return ValidationResult(
            field="linkage",
            status="warning",
            message="Vendor and manufacturer are not linked",
            suggestion=f"Suggested manufacturers for this vendor: {linked_names}" if linked_names else None,
        )

    return ValidationResult(
        field="linkage",
        status="valid",
        message="Valid vendor-manufacturer relationship",
    )
