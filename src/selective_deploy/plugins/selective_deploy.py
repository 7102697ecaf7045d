"""Plugin canônico: selective_deploy (v1).

Responsabilidades:
- Declarar a propriedade opcional `toDeploy` (boolean) nas unidades do provider.
- No hook `before:package:createDeploymentArtifacts`, remover do registry as
  unidades com `toDeploy: false`.
- Reportar um resumo determinístico do que foi mantido e excluído.

Princípios:
- Default-deploy: unidade sem `toDeploy` é tratada como `toDeploy: true`.
- A flag é estritamente booleana; qualquer outro tipo (inclusive `null`
  explícito) é erro de configuração, nunca coerção silenciosa.
- Fail-fast não transacional: a passada para na primeira unidade inválida,
  na ordem de enumeração, e exclusões anteriores não são desfeitas.

Config esperada (exemplo):
functions:
  api:
    handler: api.handler
  nightly:
    handler: cron.handler
    toDeploy: false

Logs emitidos:
verbose:
  Pre-deployment unit summary:
  Excluded 1 unit(s): nightly
  Included 1 unit(s): api
notice:
  Excluded 1 unit(s) from deployment, deploying 1 of 2 unit(s). For more details, use --verbose command.

Limites explícitos (v1):
- NÃO decide como uma unidade é construída.
- NÃO valida outras propriedades da unidade.
- NÃO desfaz exclusões em caso de erro.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional

from selective_deploy.core.exceptions import ConfigurationError
from selective_deploy.core.service.log import PluginLog
from selective_deploy.core.service.service import Service
from selective_deploy.core.service.types import FilterOutcome, UnitDecision

PLUGIN_ID = "selective_deploy"
TO_DEPLOY = "toDeploy"
HOOK_BEFORE_CREATE_ARTIFACTS = "before:package:createDeploymentArtifacts"
VERBOSE_PROMPT = " For more details, use --verbose command."


def _resolve_to_deploy(unit: Mapping[str, Any]) -> Any:
    return unit.get(TO_DEPLOY, True)


class SelectiveUnitDeploy:
    """Filtro pré-empacotamento de unidades marcadas com `toDeploy: false`."""

    def __init__(self, service: Service, options: Optional[Dict[str, Any]], log: PluginLog):
        self.service = service
        self.options = options if options is not None else {}
        self.log = log
        self.hooks: Dict[str, Callable[[], None]] = {}

        self.setup_unit_properties()
        self.setup_hooks()

    def setup_hooks(self) -> None:
        self.hooks = {
            HOOK_BEFORE_CREATE_ARTIFACTS: self.exclude_non_deployable_units,
        }

    def setup_unit_properties(self) -> None:
        self.service.schema.define_unit_properties(
            self.service.provider,
            {
                "properties": {
                    TO_DEPLOY: {"type": "boolean"},
                },
                "required": [],
            },
        )

    def exclude_non_deployable_units(self) -> None:
        """Aplica o filtro sobre o registry atual do serviço.

        A verbosidade é lida uma única vez, no início da passada.
        """
        all_units = self.get_all_units()

        if not all_units:
            return

        verbose = self.options.get("verbose")
        outcome = FilterOutcome()

        for unit_name in all_units:
            decision = self._decide(unit_name)
            if decision is UnitDecision.EXCLUDED:
                self.exclude_unit_from_deployment(unit_name)
            outcome = outcome.with_unit(unit_name, decision)

        self._report(outcome, verbose=bool(verbose))

    apply_filter = exclude_non_deployable_units

    def _decide(self, unit_name: str) -> UnitDecision:
        to_deploy = _resolve_to_deploy(self.get_unit(unit_name))

        if not isinstance(to_deploy, bool):
            raise ConfigurationError(
                message="toDeploy property must be a boolean",
                details={
                    "unit": unit_name,
                    "property": TO_DEPLOY,
                    "received_type": type(to_deploy).__name__,
                },
                hint=f"Set functions.{unit_name}.{TO_DEPLOY} to true or false, or remove it.",
            )

        return UnitDecision.KEPT if to_deploy else UnitDecision.EXCLUDED

    def _report(self, outcome: FilterOutcome, *, verbose: bool) -> None:
        excluded, kept = outcome.excluded, outcome.kept

        if excluded or kept:
            self.log.verbose("Pre-deployment unit summary:")
            self.log.verbose(
                f"Excluded {len(excluded)} unit(s): {', '.join(excluded)}",
                units=list(excluded),
            )
            self.log.verbose(
                f"Included {len(kept)} unit(s): {', '.join(kept)}",
                units=list(kept),
            )

        summary = (
            f"Excluded {len(excluded)} unit(s) from deployment, "
            f"deploying {len(kept)} of {outcome.total} unit(s)."
        )
        prompt = VERBOSE_PROMPT if not verbose else ""
        self.log.notice(
            summary + prompt,
            excluded=len(excluded),
            kept=len(kept),
            total=outcome.total,
        )

    def exclude_unit_from_deployment(self, unit_name: str) -> None:
        self.service.registry.delete(unit_name)

    def get_all_units(self) -> List[str]:
        return self.service.get_all_units()

    def get_unit(self, unit_name: str) -> Dict[str, Any]:
        return self.service.get_unit(unit_name)
