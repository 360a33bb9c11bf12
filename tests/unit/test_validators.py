"""Tests for material_ai/services/validators.py"""

import re

import pytest

from material_ai.models.analysis import AnalyzeRequest, MaterialDraft
from material_ai.services.validators import (
    ABC123_RULE,
    SAP8_RULE,
    generate_material_code,
    is_valid_material_group,
    resolve_code_rule,
    suggest_qualified_vendor,
    validate_analysis_entry,
    validate_fields,
    validate_vendor,
)


@pytest.fixture
def data(data_store):
    return data_store.snapshot()


def _by_field(validations):
    return {v.field: v for v in validations}


class TestCodeRules:
    @pytest.mark.parametrize("code", ["S1566153", "abcd1234", "12345678"])
    def test_sap8_accepts(self, code):
        assert SAP8_RULE.pattern.fullmatch(code)

    @pytest.mark.parametrize("code", ["S156615", "S15661534", "S156-153", ""])
    def test_sap8_rejects(self, code):
        assert not SAP8_RULE.pattern.fullmatch(code)

    def test_abc123(self):
        assert ABC123_RULE.pattern.fullmatch("STL001")
        assert not ABC123_RULE.pattern.fullmatch("stl001")
        assert not ABC123_RULE.pattern.fullmatch("STL0011")

    @pytest.mark.parametrize("rule, code", [(SAP8_RULE, "S1566153\n"), (ABC123_RULE, "STL001\n")])
    def test_trailing_newline_rejected(self, rule, code):
        assert not rule.pattern.fullmatch(code)

    def test_resolve_code_rule(self):
        assert resolve_code_rule(None, SAP8_RULE) is SAP8_RULE
        assert resolve_code_rule("abc123", SAP8_RULE) is ABC123_RULE
        assert resolve_code_rule("sap8", ABC123_RULE) is SAP8_RULE


class TestMaterialGroupFormat:
    def test_code_with_description(self):
        assert is_valid_material_group("43JDX (SELF INDEXING GUIDE)")

    def test_bare_code(self):
        assert is_valid_material_group("43jdx")

    def test_reversed_code(self):
        assert not is_valid_material_group("JDX43")

    def test_trailing_newline(self):
        assert not is_valid_material_group("43JDX\n")


class TestGenerateMaterialCode:
    def test_uses_category_prefix(self):
        assert re.match(r"^STE\d{3}$", generate_material_code("steel"))

    def test_generic_prefix_without_category(self):
        assert re.match(r"^GEN\d{3}$", generate_material_code(""))


class TestValidateFields:
    def test_valid_entry(self, data):
        draft = MaterialDraft(material_code="STL005", description="Steel Rod 12mm", vendor_id="200001")
        results = _by_field(validate_fields(draft, data))
        assert results["materialCode"].status == "valid"
        assert results["description"].status == "valid"
        assert results["vendorId"].status == "valid"

    def test_missing_code_is_error_with_generated_suggestion(self, data):
        draft = MaterialDraft(description="Steel Rod 12mm", category="STEEL")
        result = _by_field(validate_fields(draft, data))["materialCode"]
        assert result.status == "error"
        assert result.suggestion.startswith("STE")

    def test_bad_code_format_is_warning(self, data):
        draft = MaterialDraft(material_code="S1566153", description="Steel Rod 12mm")
        result = _by_field(validate_fields(draft, data))["materialCode"]
        assert result.status == "warning"
        assert result.message == "Material code should follow format: ABC123"

    def test_code_with_trailing_newline_is_warning(self, data):
        draft = MaterialDraft(material_code="STL005\n", description="Steel Rod 12mm")
        assert _by_field(validate_fields(draft, data))["materialCode"].status == "warning"

    def test_forced_sap8_rule(self, data):
        draft = MaterialDraft(material_code="S1566153", description="Steel Rod 12mm")
        result = _by_field(validate_fields(draft, data, SAP8_RULE))["materialCode"]
        assert result.status == "valid"

    def test_short_description_is_error(self, data):
        draft = MaterialDraft(material_code="STL005", description="Rod")
        result = _by_field(validate_fields(draft, data))["description"]
        assert result.status == "error"

    def test_vendor_checked_only_when_entered(self, data):
        draft = MaterialDraft(material_code="STL005", description="Steel Rod 12mm")
        assert "vendorId" not in _by_field(validate_fields(draft, data))


class TestValidateVendor:
    def test_unknown_vendor_is_error(self, data):
        result = validate_vendor("999999", data)
        assert result.status == "error"
        assert result.message == "Vendor not found"

    def test_unqualified_vendor_is_error(self, data):
        result = validate_vendor("100001", data, category="STEEL")
        assert result.status == "error"
        assert "200xxx" in result.message
        assert result.suggestion == "Try vendor: Premium Steel Suppliers (200001)"

    def test_qualified_vendor(self, data):
        assert validate_vendor("200003", data).status == "valid"


def test_suggest_qualified_vendor_without_match(data):
    assert suggest_qualified_vendor(data.vendors, "TEXTILES") == "Select a qualified vendor (200xxx series)"


class TestValidateAnalysisEntry:
    def test_nothing_checked_without_material_code(self):
        entry = AnalyzeRequest(material_description="cement", material_group="JDX43")
        assert validate_analysis_entry(entry, {}) == []

    def test_short_code_warns(self):
        entry = AnalyzeRequest(material="S156")
        results = validate_analysis_entry(entry, {})
        assert [r.field for r in results] == ["material"]
        assert results[0].status == "warning"
        assert results[0].suggestion == SAP8_RULE.hint

    def test_material_type_not_suggested_warns(self):
        entry = AnalyzeRequest(material="S1566153", material_type="ZELE")
        results = validate_analysis_entry(entry, {"materialType": ["ZCEM", "ZCHM"]})
        assert len(results) == 1
        assert results[0].field == "materialType"
        assert "ZCEM, ZCHM" in results[0].suggestion

    def test_material_type_not_checked_without_suggestions(self):
        entry = AnalyzeRequest(material="S1566153", material_type="ZELE")
        assert validate_analysis_entry(entry, {"materialType": []}) == []

    def test_material_group_format(self):
        good = AnalyzeRequest(material="S1566153", material_group="43JDX (SELF INDEXING GUIDE)")
        bad = AnalyzeRequest(material="S1566153", material_group="JDX43")
        assert validate_analysis_entry(good, {}) == []
        assert validate_analysis_entry(bad, {})[0].field == "materialGroup"

    def test_only_warnings(self):
        entry = AnalyzeRequest(material="x", material_type="ZELE", material_group="bad")
        results = validate_analysis_entry(entry, {"materialType": ["ZCEM"]})
        assert len(results) == 3
        assert all(r.status == "warning" for r in results)

    def test_abc123_rule_on_analysis_path(self):
        entry = AnalyzeRequest(material="STL001")
        assert validate_analysis_entry(entry, {}, ABC123_RULE) == []
