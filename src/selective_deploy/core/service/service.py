# src/selective_deploy/core/service/service.py
"""
Agregado de serviço construído a partir da configuração resolvida.

Um `Service` reúne o que um plugin precisa enxergar do serviço:
nome, provider, registry de unidades e handler de schema.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .registry import UnitRegistry
from .schema import ConfigSchemaHandler

DEFAULT_PROVIDER = "aws"


@dataclass
class Service:
    name: str
    provider: str = DEFAULT_PROVIDER
    registry: UnitRegistry = field(default_factory=UnitRegistry)
    schema: ConfigSchemaHandler = field(default_factory=ConfigSchemaHandler)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "Service":
        provider_cfg = config.get("provider") or {}
        if isinstance(provider_cfg, str):
            provider = provider_cfg
        else:
            provider = provider_cfg.get("name") or DEFAULT_PROVIDER

        return cls(
            name=str(config.get("service") or ""),
            provider=provider,
            registry=UnitRegistry.from_mapping(config.get("functions")),
        )

    def get_all_units(self) -> List[str]:
        return self.registry.names()

    def get_unit(self, name: str) -> Dict[str, Any]:
        return self.registry.get(name)
