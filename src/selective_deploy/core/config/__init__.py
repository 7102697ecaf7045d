# src/selective_deploy/core/config/__init__.py

"""
Camada de configuração do Selective Deploy.

Este pacote contém os utilitários responsáveis por carregar, mesclar,
validar estruturalmente e identificar a configuração de um serviço
(provider + funções) antes de uma passada de empacotamento.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (base + override local)
    - Resolução de configuração final via deep-merge determinístico
    - Validação estrutural básica (tipo raiz)
    - Geração de hash canônico para rastreabilidade

Invariantes:
    - A configuração final é um dicionário puro (dict)
    - Valores de propriedades de unidades nunca são coeridos
    - Conflitos estruturais são tratados como erro

Limites explícitos:
    - Não valida semântica de propriedades (ex.: `toDeploy`)
    - Não interage com Engine ou plugins diretamente
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    InvalidConfigRootTypeError,
    InvalidConfigSyntaxError,
    SchemaConflictError,
    ServiceConfigNotFoundError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_service_config
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "InvalidConfigRootTypeError",
    "InvalidConfigSyntaxError",
    "SchemaConflictError",
    "ServiceConfigNotFoundError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "deep_merge",
    "load_service_config",
]
