# src/selective_deploy/core/engine/engine.py
"""
Engine de execução de uma passada de empacotamento.

A produção real de artefatos está fora do escopo: no evento
`package:createDeploymentArtifacts` o Engine apenas registra quais
unidades ainda estão no registry, depois que os hooks `before:` rodaram.

Guardrails:
- Exceções levantadas por hooks são convertidas em ErrorPayload.
- A passada termina com FAILED e o erro estruturado no PackageResult.
- Nenhum fallback ou rollback é aplicado.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from selective_deploy.core.errors import (
    ErrorPayload,
    UNIT_NOT_FOUND,
    engine_execution_error,
    unit_invalid_property,
)
from selective_deploy.core.exceptions import (
    ConfigurationError,
    DeployException,
    UnknownUnitError,
)
from selective_deploy.core.service.context import RunContext
from selective_deploy.core.service.service import Service
from selective_deploy.core.service.types import PackageResult, PackageStatus

ENGINE_ID = "engine"

LIFECYCLE_EVENTS: Tuple[str, ...] = (
    "package:cleanup",
    "package:initialize",
    "package:createDeploymentArtifacts",
    "package:finalize",
)

_ARTIFACT_EVENT = "package:createDeploymentArtifacts"


def _hook_names(event: str) -> Tuple[str, str, str]:
    return (f"before:{event}", event, f"after:{event}")


class PackagingEngine:
    """Engine canônico de empacotamento (despacho de hooks + plano de artefatos)."""

    def __init__(
        self,
        *,
        service: Service,
        ctx: RunContext,
        plugins: Sequence[Any] = (),
        config_hash: Optional[str] = None,
    ):
        self.service = service
        self.ctx = ctx
        self.plugins: List[Any] = list(plugins)
        self.config_hash = config_hash

    def _collect_hooks(self) -> Dict[str, List[Callable[[], Any]]]:
        known = {name for event in LIFECYCLE_EVENTS for name in _hook_names(event)}
        hooks: Dict[str, List[Callable[[], Any]]] = {}

        for plugin in self.plugins:
            for name, fn in (getattr(plugin, "hooks", {}) or {}).items():
                if name not in known:
                    self.ctx.add_warning(
                        step_id=ENGINE_ID,
                        message=f"hook '{name}' of {plugin.__class__.__name__} is never fired",
                    )
                    continue
                hooks.setdefault(name, []).append(fn)

        return hooks

    def _exception_to_error(self, exc: Exception, hook: str) -> ErrorPayload:
        """Converte exceções de hooks em ErrorPayload (serializável, acionável)."""
        if isinstance(exc, ConfigurationError):
            details = dict(exc.details or {})
            extra = {"hint": exc.hint} if exc.hint else {}
            return unit_invalid_property(
                message=str(exc),
                unit=details.get("unit"),
                property_name=details.get("property", "toDeploy"),
                received_type=details.get("received_type"),
                **extra,
            )

        if isinstance(exc, DeployException):
            code = UNIT_NOT_FOUND if isinstance(exc, UnknownUnitError) else exc.__class__.__name__
            return ErrorPayload(
                type=code,
                message=str(exc),
                details=dict(exc.details or {}),
                hint=exc.hint,
            )

        return engine_execution_error(
            hook=hook,
            exc_type=exc.__class__.__name__,
            exc_message=str(exc) or None,
        )

    def run(self) -> PackageResult:
        hooks = self._collect_hooks()
        hooks_run: List[str] = []
        packaged: Tuple[str, ...] = ()

        for event in LIFECYCLE_EVENTS:
            for name in _hook_names(event):
                for fn in hooks.get(name, []):
                    self.ctx.log(step_id=ENGINE_ID, level="debug", message=f"running hook {name}")
                    try:
                        fn()
                    except Exception as e:
                        error = self._exception_to_error(e, name)
                        self.ctx.log(
                            step_id=ENGINE_ID,
                            level="error",
                            message=error.message,
                            hook=name,
                            error_type=error.type,
                        )
                        return PackageResult(
                            status=PackageStatus.FAILED,
                            config_hash=self.config_hash,
                            error=error.to_dict(),
                            hooks_run=tuple(hooks_run),
                        )
                    hooks_run.append(name)

                if name == _ARTIFACT_EVENT:
                    packaged = tuple(self.service.registry.names())
                    self.ctx.log(
                        step_id=ENGINE_ID,
                        level="debug",
                        message=f"packaging {len(packaged)} unit(s)",
                        units=list(packaged),
                    )

        return PackageResult(
            status=PackageStatus.SUCCESS,
            packaged=packaged,
            config_hash=self.config_hash,
            hooks_run=tuple(hooks_run),
        )
