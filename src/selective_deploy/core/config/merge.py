# src/selective_deploy/core/config/merge.py
"""
Deep-merge da configuração base do serviço com o override local.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total
    - escalar → sobrescrita direta
    - conflito de tipos → erro estrutural explícito

Exceção à política de tipos: `bool` e `None` são tratados como
escalares livres dentro de `functions.<nome>`, para que um override
local possa desligar uma unidade (`toDeploy: false`) ou reverter a
declaração (`toDeploy: null`) sem conflito. Uma unidade declarada sem
corpo na base (`api:`) é tratada como `{}` ao receber um override em
dict. Valores nunca são coeridos; a validação de `toDeploy` é
responsabilidade do filtro.

Invariantes:
    - Nenhum input é mutado
    - A mesma entrada sempre produz a mesma saída
"""

from copy import deepcopy
from typing import Any, Dict, Tuple

from .errors import ConfigTypeConflictError


def _is_unit_scalar(path: Tuple[str, ...], value: Any) -> bool:
    return len(path) == 3 and path[0] == "functions" and (value is None or isinstance(value, bool))


def _is_null_unit(path: Tuple[str, ...], value: Any) -> bool:
    return len(path) == 2 and path[0] == "functions" and value is None


def deep_merge(
    base: Dict[str, Any],
    override: Dict[str, Any],
    _path: Tuple[str, ...] = (),
) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre duas configurações.

    Args:
        base (Dict[str, Any]): Configuração base do serviço.
        override (Dict[str, Any]): Override local explícito.

    Returns:
        Dict[str, Any]: Nova configuração resultante.

    Raises:
        ConfigTypeConflictError: Se uma mesma chave tiver tipos incompatíveis.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        path = _path + (str(key),)

        if key not in result:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]

        if _is_null_unit(path, base_value) and isinstance(override_value, dict):
            base_value = {}

        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value, path)
            continue

        if isinstance(override_value, list):
            result[key] = deepcopy(override_value)
            continue

        if _is_unit_scalar(path, override_value):
            result[key] = override_value
            continue

        if type(base_value) is not type(override_value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{'.'.join(path)}': "
                f"{type(base_value).__name__} vs {type(override_value).__name__}"
            )

        result[key] = deepcopy(override_value)

    return result
