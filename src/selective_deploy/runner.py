# src/selective_deploy/runner.py
"""
Montagem de uma passada de empacotamento a partir da configuração.

Liga as peças do core (Service, RunContext, PackagingEngine) ao plugin
`SelectiveUnitDeploy`. É o ponto de entrada usado pela CLI e pelos
testes end-to-end.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from selective_deploy.core.config.hashing import compute_config_hash
from selective_deploy.core.engine.engine import PackagingEngine
from selective_deploy.core.service.context import RunContext
from selective_deploy.core.service.log import PluginLog
from selective_deploy.core.service.service import Service
from selective_deploy.core.service.types import PackageResult
from selective_deploy.plugins.selective_deploy import PLUGIN_ID, SelectiveUnitDeploy


def package_service(
    config: Dict[str, Any],
    *,
    options: Optional[Dict[str, Any]] = None,
    run_id: Optional[str] = None,
) -> Tuple[PackageResult, RunContext, Service]:
    """Executa uma passada de empacotamento sobre a configuração resolvida.

    Returns:
        Tuple[PackageResult, RunContext, Service]: resultado, contexto com os
        eventos emitidos e o serviço (registry já filtrado).
    """
    opts = dict(options or {})
    ctx = RunContext(
        run_id=run_id or uuid.uuid4().hex,
        created_at=datetime.now(timezone.utc),
        options=opts,
    )
    service = Service.from_config(config)
    plugin = SelectiveUnitDeploy(service, opts, PluginLog(ctx=ctx, step_id=PLUGIN_ID))

    engine = PackagingEngine(
        service=service,
        ctx=ctx,
        plugins=[plugin],
        config_hash=compute_config_hash(config),
    )
    return engine.run(), ctx, service
