# src/selective_deploy/core/engine/__init__.py
"""
Engine de empacotamento do Selective Deploy.

O Engine coordena uma passada de empacotamento:
    - coleta os hooks declarados pelos plugins
    - dispara `before:`/`<evento>`/`after:` para cada evento do ciclo de vida
    - registra as unidades restantes no momento da criação dos artefatos
    - converte falhas de hooks em `ErrorPayload` e aborta a passada

Invariantes:
    - Eventos são disparados sempre na mesma ordem
    - Hooks de um mesmo nome rodam na ordem de registro dos plugins
    - Uma falha interrompe a passada; nenhum hook posterior é executado
"""

from .engine import LIFECYCLE_EVENTS, PackagingEngine

__all__ = ["LIFECYCLE_EVENTS", "PackagingEngine"]
