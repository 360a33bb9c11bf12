"""Demonstration master data and reference catalogs.

Served whenever imported client data is disabled or empty.
"""

from datetime import datetime

from material_ai.models.material import Manufacturer, Material, MaterialStatus, Vendor

MOCK_MATERIALS: tuple[Material, ...] = (
    Material(
        id="1",
        material_code="STL001",
        description="Steel Rod 10mm",
        material_type="ROD",
        plant_code="P001",
        vendor_id="200001",
        manufacturer_id="200101",
        unit_of_measure="MT",
        category="STEEL",
        base_price=150.00,
        created_at=datetime(2023, 1, 15),
        status=MaterialStatus.APPROVED,
    ),
    Material(
        id="2",
        material_code="STL002",
        description="10mm Steel Rod",
        material_type="ROD",
        plant_code="P002",
        vendor_id="200002",
        manufacturer_id="200101",
        unit_of_measure="MT",
        category="STEEL",
        base_price=148.00,
        created_at=datetime(2023, 2, 20),
        status=MaterialStatus.APPROVED,
    ),
    Material(
        id="3",
        material_code="CEM001",
        description="Portland Cement 50kg",
        material_type="CEMENT",
        plant_code="P001",
        vendor_id="200003",
        manufacturer_id="200102",
        unit_of_measure="BAG",
        category="CEMENT",
        base_price=25.00,
        created_at=datetime(2023, 3, 10),
        status=MaterialStatus.APPROVED,
    ),
    Material(
        id="4",
        material_code="PIP001",
        description="PVC Pipe 6 inch",
        material_type="PIPE",
        plant_code="P003",
        vendor_id="200004",
        manufacturer_id="200103",
        unit_of_measure="M",
        category="PLUMBING",
        base_price=45.00,
        created_at=datetime(2023, 4, 5),
        status=MaterialStatus.APPROVED,
    ),
    Material(
        id="5",
        material_code="ELE001",
        description="Electrical Cable 2.5mm",
        material_type="CABLE",
        plant_code="P002",
        vendor_id="200005",
        manufacturer_id="200104",
        unit_of_measure="M",
        category="ELECTRICAL",
        base_price=22.00,
        created_at=datetime(2023, 5, 12),
        status=MaterialStatus.APPROVED,
    ),
)

MOCK_VENDORS: tuple[Vendor, ...] = (
    Vendor(
        id="200001",
        name="Premium Steel Suppliers",
        code="200001",
        category=["STEEL", "METAL"],
        linked_manufacturers=["200101"],
    ),
    Vendor(
        id="200002",
        name="Global Steel Trading",
        code="200002",
        category=["STEEL", "CONSTRUCTION"],
        linked_manufacturers=["200101", "200103"],
    ),
    Vendor(
        id="200003",
        name="Cement Solutions Ltd",
        code="200003",
        category=["CEMENT", "CONSTRUCTION"],
        linked_manufacturers=["200102"],
    ),
    Vendor(
        id="200004",
        name="PVC Systems India",
        code="200004",
        category=["PLUMBING", "PIPES"],
        linked_manufacturers=["200103"],
    ),
    Vendor(
        id="200005",
        name="Electrical Components Co",
        code="200005",
        category=["ELECTRICAL", "CABLES"],
        linked_manufacturers=["200104"],
    ),
    Vendor(
        id="100001",
        name="Old Steel Company",
        code="100001",
        category=["STEEL"],
        linked_manufacturers=["100101"],
    ),
)

MOCK_MANUFACTURERS: tuple[Manufacturer, ...] = (
    Manufacturer(
        id="200101",
        name="Steel Works International",
        code="200101",
        linked_vendors=["200001", "200002"],
        certifications=["ISO9001", "ISO14001"],
    ),
    Manufacturer(
        id="200102",
        name="Cement Solutions Ltd",
        code="200102",
        linked_vendors=["200003"],
        certifications=["ISO9001"],
    ),
    Manufacturer(
        id="200103",
        name="Pipe Manufacturing Corp",
        code="200103",
        linked_vendors=["200002", "200004"],
        certifications=["ISO9001", "BIS"],
    ),
    Manufacturer(
        id="200104",
        name="Electrical Systems Ltd",
        code="200104",
        linked_vendors=["200005"],
        certifications=["ISO9001", "CE", "UL"],
    ),
)

# Reference catalogs for form dropdowns
REFERENCE_CATALOGS: dict[str, list] = {
    "material-categories": [
        {"code": "STL", "name": "Steel Products", "category": "Raw Materials"},
        {"code": "CEM", "name": "Cement & Concrete", "category": "Construction"},
        {"code": "PIP", "name": "Pipes & Fittings", "category": "Infrastructure"},
        {"code": "ELE", "name": "Electrical Components", "category": "Electrical"},
        {"code": "MEC", "name": "Mechanical Parts", "category": "Mechanical"},
        {"code": "CHM", "name": "Chemicals", "category": "Chemical"},
    ],
    "units-of-measure": [
        {"code": "MT", "name": "Metric Ton", "category": "Weight"},
        {"code": "KG", "name": "Kilogram", "category": "Weight"},
        {"code": "M", "name": "Meter", "category": "Length"},
        {"code": "M2", "name": "Square Meter", "category": "Area"},
        {"code": "M3", "name": "Cubic Meter", "category": "Volume"},
        {"code": "L", "name": "Liter", "category": "Volume"},
        {"code": "PCS", "name": "Pieces", "category": "Count"},
        {"code": "BAG", "name": "Bag", "category": "Package"},
        {"code": "FT", "name": "Feet", "category": "Length"},
        {"code": "SET", "name": "Set", "category": "Assembly"},
    ],
    "plant-codes": [
        {"code": "P001", "name": "Plant 001 - Mumbai", "location": "Mumbai, India", "type": "Manufacturing"},
        {"code": "P002", "name": "Plant 002 - Delhi", "location": "Delhi, India", "type": "Assembly"},
        {"code": "P003", "name": "Plant 003 - Bangalore", "location": "Bangalore, India", "type": "R&D"},
        {"code": "P004", "name": "Plant 004 - Chennai", "location": "Chennai, India", "type": "Manufacturing"},
        {"code": "P005", "name": "Plant 005 - Pune", "location": "Pune, India", "type": "Distribution"},
    ],
    "vendor-categories": [
        "Steel & Metal Suppliers",
        "Construction Materials",
        "Electrical Equipment",
        "Mechanical Components",
        "Chemical Suppliers",
        "Spare Parts",
        "Tools & Equipment",
        "Safety Equipment",
        "IT & Electronics",
        "Services",
    ],
}
