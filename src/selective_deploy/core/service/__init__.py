# src/selective_deploy/core/service/__init__.py
"""
# Service Core — Selective Deploy

Este pacote define as estruturas compartilhadas entre o Engine de
empacotamento e os plugins que ele invoca.

## Componentes

- **registry**
  - `UnitRegistry`: mapa ordenado e mutável de nome → unidade
- **schema**
  - `ConfigSchemaHandler`: declarações de propriedades de unidade por provider
- **context**
  - `RunContext`: opções da passada e log estruturado de eventos
- **log**
  - `PluginLog`: canais independentes `verbose` e `notice`
- **types**
  - `FilterOutcome`, `UnitDecision`, `PackageStatus`, `PackageResult`
- **service**
  - `Service`: agregado provider + registry + schema construído a partir da config

## Invariantes

- O registry preserva a ordem natural de inserção das unidades
- Plugins só removem unidades; nunca criam ou renomeiam
- Todo log passa pelo `RunContext`
"""

from .context import RunContext
from .log import PluginLog
from .registry import DuplicateUnitNameError, UnitRegistry
from .schema import ConfigSchemaHandler
from .service import Service
from .types import FilterOutcome, PackageResult, PackageStatus, UnitDecision

__all__ = [
    "ConfigSchemaHandler",
    "DuplicateUnitNameError",
    "FilterOutcome",
    "PackageResult",
    "PackageStatus",
    "PluginLog",
    "RunContext",
    "Service",
    "UnitDecision",
    "UnitRegistry",
]
