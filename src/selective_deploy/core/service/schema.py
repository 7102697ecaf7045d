# src/selective_deploy/core/service/schema.py
"""
Declaração de propriedades de unidade por provider.

Plugins estendem o schema de configuração das unidades declarando
propriedades adicionais (ex.: `toDeploy: {type: boolean}`). O handler
apenas registra as declarações; a validação de valores continua sendo
responsabilidade de quem consome a propriedade.

Invariantes:
    - Uma propriedade tem uma única definição por provider
    - Declarações idênticas repetidas são aceitas (idempotentes)
    - Nenhum valor de unidade é coerido ou reescrito
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, List

from selective_deploy.core.config.errors import SchemaConflictError


@dataclass
class ConfigSchemaHandler:
    """Coleção de declarações `properties`/`required` por provider."""

    _properties: Dict[str, Dict[str, Any]] = field(default_factory=dict, init=False, repr=False)
    _required: Dict[str, List[str]] = field(default_factory=dict, init=False, repr=False)

    def define_unit_properties(self, provider: str, schema: Dict[str, Any]) -> None:
        if not isinstance(provider, str) or not provider.strip():
            raise ValueError("provider must be a non-empty string")

        properties = schema.get("properties") or {}
        required = list(schema.get("required") or [])

        declared = self._properties.setdefault(provider, {})
        for prop, definition in properties.items():
            existing = declared.get(prop)
            if existing is not None and existing != definition:
                raise SchemaConflictError(
                    f"Property '{prop}' already declared for provider '{provider}' "
                    f"as {existing!r}, got {definition!r}"
                )
            declared[prop] = deepcopy(definition)

        req = self._required.setdefault(provider, [])
        for prop in required:
            if prop not in req:
                req.append(prop)

    def properties_for(self, provider: str) -> Dict[str, Any]:
        return {
            "properties": deepcopy(self._properties.get(provider, {})),
            "required": list(self._required.get(provider, [])),
        }
