"""
Selective Deploy — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros reportados pelo Engine
ao final de uma passada de empacotamento. Erros são:

- explícitos
- serializáveis
- acionáveis

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do Selective Deploy.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

UNIT_INVALID_PROPERTY = "UNIT_INVALID_PROPERTY"
UNIT_NOT_FOUND = "UNIT_NOT_FOUND"

ENGINE_EXECUTION_ERROR = "ENGINE_EXECUTION_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def unit_invalid_property(
    *,
    message: str,
    unit: Optional[str] = None,
    property_name: str = "toDeploy",
    received_type: Optional[str] = None,
    hint: str = "Declare a propriedade como booleano (true/false) ou remova-a para usar o default.",
) -> ErrorPayload:
    return ErrorPayload(
        type=UNIT_INVALID_PROPERTY,
        message=message,
        details={
            "unit": unit,
            "property": property_name,
            "received_type": received_type,
        },
        hint=hint,
    )


def engine_execution_error(
    *,
    hook: Optional[str] = None,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "Verifique o stacktrace e a configuração do serviço. Nenhum fallback é aplicado automaticamente.",
) -> ErrorPayload:
    return ErrorPayload(
        type=ENGINE_EXECUTION_ERROR,
        message=exc_message or "Falha inesperada durante o empacotamento",
        details={
            "hook": hook,
            "exc_type": exc_type,
        },
        hint=hint,
    )
