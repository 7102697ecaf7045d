# tests/core/service/test_schema_handler.py
"""
Testes do ConfigSchemaHandler.

Os testes asseguram que:
- declarações são armazenadas por provider
- redeclarações idênticas são idempotentes
- redeclarações conflitantes levantam SchemaConflictError
"""

import pytest

try:
    from selective_deploy.core.config.errors import SchemaConflictError
    from selective_deploy.core.service.schema import ConfigSchemaHandler
except Exception as e:  # noqa: BLE001
    ConfigSchemaHandler = None
    SchemaConflictError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing ConfigSchemaHandler. Implement:\n"
            "- src/selective_deploy/core/service/schema.py (ConfigSchemaHandler)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_declaration_is_scoped_by_provider():
    _require_imports()
    handler = ConfigSchemaHandler()
    handler.define_unit_properties(
        "aws", {"properties": {"toDeploy": {"type": "boolean"}}, "required": []}
    )

    assert handler.properties_for("aws") == {
        "properties": {"toDeploy": {"type": "boolean"}},
        "required": [],
    }
    assert handler.properties_for("azure") == {"properties": {}, "required": []}


def test_identical_redeclaration_is_idempotent():
    _require_imports()
    handler = ConfigSchemaHandler()
    schema = {"properties": {"toDeploy": {"type": "boolean"}}, "required": ["toDeploy"]}

    handler.define_unit_properties("aws", schema)
    handler.define_unit_properties("aws", schema)

    assert handler.properties_for("aws")["required"] == ["toDeploy"]


def test_conflicting_redeclaration_raises():
    _require_imports()
    handler = ConfigSchemaHandler()
    handler.define_unit_properties("aws", {"properties": {"toDeploy": {"type": "boolean"}}})

    with pytest.raises(SchemaConflictError):
        handler.define_unit_properties("aws", {"properties": {"toDeploy": {"type": "string"}}})


def test_properties_for_returns_copy():
    _require_imports()
    handler = ConfigSchemaHandler()
    handler.define_unit_properties("aws", {"properties": {"toDeploy": {"type": "boolean"}}})

    view = handler.properties_for("aws")
    view["properties"]["toDeploy"]["type"] = "string"

    assert handler.properties_for("aws")["properties"]["toDeploy"] == {"type": "boolean"}


def test_empty_provider_rejected():
    _require_imports()
    with pytest.raises(ValueError):
        ConfigSchemaHandler().define_unit_properties("", {"properties": {}})
