# src/selective_deploy/core/service/types.py
"""
Tipos canônicos do Selective Deploy.

Componentes principais:
    - UnitDecision  → destino de uma unidade após o filtro
    - FilterOutcome → partição imutável (excluded / kept) de uma passada
    - PackageStatus → estado final de uma passada de empacotamento
    - PackageResult → resultado imutável devolvido pelo Engine

Invariantes:
    - Enums possuem valores textuais canônicos
    - Resultados são imutáveis (frozen)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class UnitDecision(str, Enum):
    """
    Destino de uma unidade visitada pelo filtro.

    Cada unidade recebe exatamente uma decisão:
        - KEPT: permanece no registry
        - EXCLUDED: removida do registry

    Flag inválida não gera decisão: a passada é abortada com
    `ConfigurationError` antes de a unidade ser classificada.
    """
    KEPT = "kept"
    EXCLUDED = "excluded"


class PackageStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class FilterOutcome:
    """
    Partição efêmera de uma passada do filtro.

    Campos:
        - excluded: nomes removidos, na ordem de enumeração
        - kept: nomes mantidos, na ordem de enumeração
    """
    excluded: Tuple[str, ...] = ()
    kept: Tuple[str, ...] = ()

    @property
    def total(self) -> int:
        return len(self.excluded) + len(self.kept)

    def with_unit(self, name: str, decision: UnitDecision) -> "FilterOutcome":
        if decision is UnitDecision.EXCLUDED:
            return FilterOutcome(excluded=self.excluded + (name,), kept=self.kept)
        return FilterOutcome(excluded=self.excluded, kept=self.kept + (name,))


@dataclass(frozen=True)
class PackageResult:
    """
    Resultado de uma passada de empacotamento.

    Campos:
        - status: SUCCESS ou FAILED
        - packaged: unidades presentes no registry no momento da criação
          dos artefatos (vazio quando a passada falha antes disso)
        - config_hash: hash canônico da configuração carregada
        - error: ErrorPayload serializado quando status == FAILED
    """
    status: PackageStatus
    packaged: Tuple[str, ...] = ()
    config_hash: Optional[str] = None
    error: Optional[Dict[str, Any]] = None
    hooks_run: Tuple[str, ...] = ()
