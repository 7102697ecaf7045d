# tests/conftest.py
"""
Fixtures compartilhados para testes do Selective Deploy.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações de serviço mínimas e determinísticas (YAML e dict)
- contexto de execução controlado (RunContext)
- fábrica de plugins ligada a um Service e a um PluginLog

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture executa passada de empacotamento
    - Nenhuma fixture realiza I/O
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def service_config_yaml() -> str:
    """
    Fixture que fornece um YAML de serviço semelhante ao uso real.

    Contém uma unidade com default implícito, uma explicitamente
    habilitada e uma excluída.

    Returns:
        str: Conteúdo YAML da configuração do serviço.
    """
    return """\
service: billing
provider:
  name: aws
functions:
  api:
    handler: api.handler
    toDeploy: true
  nightly:
    handler: cron.handler
    toDeploy: false
  webhook:
    handler: webhook.handler
"""


@pytest.fixture
def service_config_local_yaml() -> str:
    """Override local que desliga `api` e adiciona `debug`."""
    return """\
functions:
  api:
    toDeploy: false
  debug:
    handler: debug.handler
"""


@pytest.fixture
def service_config() -> dict:
    """Configuração de serviço já resolvida (sem loader, sem merge)."""
    return {
        "service": "billing",
        "provider": {"name": "aws"},
        "functions": {
            "api": {"handler": "api.handler", "toDeploy": True},
            "nightly": {"handler": "cron.handler", "toDeploy": False},
            "webhook": {"handler": "webhook.handler"},
        },
    }


# =====================================================
# Service fixtures (RunContext + Service + plugin)
# =====================================================

@pytest.fixture
def dummy_ctx():
    """
    Fixture que fornece um RunContext determinístico para testes.

    A verbosidade começa desligada, como no uso sem `--verbose`.
    """
    from selective_deploy.core.service.context import RunContext

    return RunContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        options={"verbose": False},
    )


@pytest.fixture
def service():
    """Service vazio com provider `aws`; os testes populam o registry."""
    from selective_deploy.core.service.service import Service

    return Service(name="billing")


@pytest.fixture
def make_plugin(service, dummy_ctx):
    """
    Fixture factory que constrói o plugin sobre `service` e `dummy_ctx`.

    Aceita `functions` (mapa nome → unidade) para popular o registry
    antes da construção. As opções usadas pelo plugin são as mesmas
    de `dummy_ctx.options`, então os testes podem alterar a verbosidade
    mutando esse dict.

    Returns:
        callable: `make_plugin(functions=None) -> SelectiveUnitDeploy`
    """
    from selective_deploy.core.service.log import PluginLog
    from selective_deploy.plugins.selective_deploy import PLUGIN_ID, SelectiveUnitDeploy

    def _make(functions=None):
        for name, unit in (functions or {}).items():
            service.registry.add(name, unit)
        return SelectiveUnitDeploy(
            service,
            dummy_ctx.options,
            PluginLog(ctx=dummy_ctx, step_id=PLUGIN_ID),
        )

    return _make
