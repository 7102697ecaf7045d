# src/selective_deploy/core/service/context.py
"""
Contexto de execução de uma passada de empacotamento.

Este módulo define o `RunContext`, a estrutura que carrega as opções
da invocação (ex.: `verbose`) e acumula os eventos de log estruturados
emitidos pelo Engine e pelos plugins.

Invariantes:
    - Logs sempre incluem `run_id` e `step_id`
    - A ordem de `events` reflete a ordem real de emissão
    - Opções não são mutadas pelos plugins

Limites explícitos:
    - Não executa hooks
    - Não formata nem imprime logs (ver `selective_deploy.cli`)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class RunContext:
    """
    Contexto compartilhado de uma passada de empacotamento.

    Campos canônicos:
    - run_id: identificador único da passada
    - created_at: timestamp UTC de criação do contexto
    - options: opções de invocação (ex.: {"verbose": False})
    - events: log estruturado de eventos
    - warnings: warnings não fatais por step_id
    """

    run_id: str
    created_at: datetime
    options: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        if step_id not in self.warnings:
            self.warnings[step_id] = []
        self.warnings[step_id].append(message)

    def messages(self, level: str) -> List[str]:
        """Mensagens emitidas em um nível, na ordem de emissão."""
        return [e["message"] for e in self.events if e["level"] == level]
