# src/selective_deploy/core/config/loader.py
"""
Loader canônico da configuração de um serviço.

A configuração é resolvida a partir de:
    - um arquivo base do serviço (obrigatório)
    - um arquivo local de overrides (opcional)

Responsabilidades do módulo:
    - Carregar arquivos de configuração em YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz, `provider`, `functions`)
    - Resolver a configuração final via deep-merge determinístico

Invariantes:
    - O arquivo base é obrigatório
    - O resultado é sempre um dicionário puro (`dict`)
    - Propriedades de unidades chegam ao registry sem coerção

Limites explícitos:
    - Não valida semântica de propriedades de unidades
    - Não constrói o registry (ver `core.service.service`)
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    InvalidConfigRootTypeError,
    InvalidConfigSyntaxError,
    ServiceConfigNotFoundError,
    UnsupportedConfigFormatError,
)


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        ServiceConfigNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigSyntaxError: Se o conteúdo não for YAML/JSON válido.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise ServiceConfigNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix not in {".yaml", ".yml", ".json"}:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    try:
        with path.open("r", encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise InvalidConfigSyntaxError(f"Conteúdo inválido em {path}: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def _check_functions_section(config: Dict[str, Any]) -> None:
    functions = config.get("functions")
    if functions is None:
        return
    if not isinstance(functions, dict):
        raise InvalidConfigRootTypeError(
            f"functions deve ser dict, recebido: {type(functions).__name__}"
        )
    for name, unit in functions.items():
        if not isinstance(name, str) or not name.strip():
            raise InvalidConfigRootTypeError(
                f"nome de unidade deve ser string não vazia, recebido: {name!r}"
            )
        if unit is None:
            continue
        if not isinstance(unit, dict):
            raise InvalidConfigRootTypeError(
                f"functions.{name} deve ser dict, recebido: {type(unit).__name__}"
            )


def _check_provider_section(config: Dict[str, Any]) -> None:
    provider = config.get("provider")
    if provider is None or isinstance(provider, str):
        return
    if not isinstance(provider, dict):
        raise InvalidConfigRootTypeError(
            f"provider deve ser string ou dict, recebido: {type(provider).__name__}"
        )
    name = provider.get("name")
    if name is not None and not isinstance(name, str):
        raise InvalidConfigRootTypeError(
            f"provider.name deve ser string, recebido: {type(name).__name__}"
        )


def load_service_config(
    *,
    config_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva de um serviço.

    Política de resolução:
        - O arquivo base é obrigatório
        - O arquivo local é opcional; quando existe, tem prioridade
        - A resolução utiliza `deep_merge`

    Args:
        config_path (str): Caminho para a configuração do serviço.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        ServiceConfigNotFoundError: Se o arquivo base não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigSyntaxError: Se algum arquivo não for YAML/JSON válido.
        InvalidConfigRootTypeError: Se a raiz, `provider` ou `functions` for inválida.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """
    effective = _load_file(Path(config_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    _check_provider_section(effective)
    _check_functions_section(effective)
    return effective
