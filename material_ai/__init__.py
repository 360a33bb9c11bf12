"""AI-assisted SAP material master data entry service."""
