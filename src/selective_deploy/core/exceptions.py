"""
Selective Deploy — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do Selective Deploy.

Objetivo:
- Permitir que plugins e Engine levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para ErrorPayload
- Evitar ValueError/RuntimeError genéricos em guardrails críticos

Regras:
- Exceções carregam apenas dados estruturados (serializáveis).
- Nenhuma exceção aqui representa erro de carregamento de arquivo
  (ver `selective_deploy.core.config.errors`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class DeployException(Exception):
    """Base class para exceções internas do Selective Deploy.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ConfigurationError(DeployException):
    """Propriedade de unidade com valor inválido na configuração do serviço."""


@dataclass(frozen=True)
class UnknownUnitError(DeployException):
    """Nome de unidade não existe no registry."""
