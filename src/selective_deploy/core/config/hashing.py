# src/selective_deploy/core/config/hashing.py
"""
Hashing canônico da configuração efetiva de um serviço.

O hash identifica estruturalmente a configuração usada numa passada de
empacotamento e é anexado ao `PackageResult` para rastreabilidade.

Política (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - SHA-256

Invariantes:
    - Configurações estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera o hash SHA-256 determinístico da configuração do serviço.

    O hash é calculado sobre a configuração como carregada, antes de
    qualquer filtragem: unidades removidas pelo filtro continuam
    contribuindo para a identidade da configuração.

    Args:
        config (Dict[str, Any]): Configuração efetiva do serviço.

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
