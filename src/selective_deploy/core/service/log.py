# src/selective_deploy/core/service/log.py
"""
Canais de log expostos aos plugins.

Um plugin recebe um `PluginLog` e escreve em dois canais independentes:

    - verbose → detalhes, exibidos apenas com `--verbose`
    - notice  → resumo, sempre exibido

Os canais não filtram por nível: cada chamada vira um evento no
`RunContext`, e a decisão de exibir ou não pertence ao renderizador.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .context import RunContext

VERBOSE = "verbose"
NOTICE = "notice"


@dataclass(frozen=True)
class PluginLog:
    """Par de canais de log vinculados a um `step_id` de plugin."""

    ctx: RunContext
    step_id: str

    def verbose(self, message: str, **extra: Any) -> None:
        self.ctx.log(step_id=self.step_id, level=VERBOSE, message=message, **extra)

    def notice(self, message: str, **extra: Any) -> None:
        self.ctx.log(step_id=self.step_id, level=NOTICE, message=message, **extra)
