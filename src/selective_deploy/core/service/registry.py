# src/selective_deploy/core/service/registry.py
"""
Registry de unidades implantáveis de um serviço.

Este módulo define o `UnitRegistry`, o mapa mutável nome → unidade
compartilhado entre o Engine e os plugins durante uma passada.

Responsabilidades do módulo:
    - Validar unicidade e formato dos nomes de unidade
    - Preservar a ordem natural de registro
    - Expor enumeração, leitura e remoção por nome

Decisões arquiteturais:
    - Unidades são registros mutáveis (dict) e não são copiadas
    - Remoção é a única mutação disponível aos plugins
    - A enumeração devolve um snapshot (lista nova), então remover
      durante a iteração é seguro

Limites explícitos:
    - Não valida propriedades das unidades
    - Não decide quais unidades são empacotadas
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from selective_deploy.core.exceptions import UnknownUnitError


class DuplicateUnitNameError(ValueError):
    """Exceção levantada ao registrar duas unidades com o mesmo nome."""


@dataclass
class UnitRegistry:
    """
    Registro canônico das unidades de um serviço.

    Invariantes:
        - Cada nome é uma string não vazia e única
        - `names()` reflete exatamente a ordem de registro, menos as remoções
    """

    _units: Dict[str, Dict[str, Any]] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def from_mapping(cls, functions: Optional[Mapping[str, Any]]) -> "UnitRegistry":
        registry = cls()
        for name, unit in (functions or {}).items():
            registry.add(name, unit if unit is not None else {})
        return registry

    def add(self, name: str, unit: Dict[str, Any]) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("unit name must be a non-empty string")

        if name in self._units:
            raise DuplicateUnitNameError(f"Duplicate unit name: {name}")

        self._units[name] = unit

    def names(self) -> List[str]:
        return list(self._units)

    def get(self, name: str) -> Dict[str, Any]:
        if name not in self._units:
            raise UnknownUnitError(
                message=f"Unknown unit: {name}",
                details={"unit": name},
            )
        return self._units[name]

    def delete(self, name: str) -> None:
        self.get(name)
        del self._units[name]

    def as_dict(self) -> Dict[str, Dict[str, Any]]:
        return dict(self._units)

    def __contains__(self, name: object) -> bool:
        return name in self._units

    def __len__(self) -> int:
        return len(self._units)
