# src/selective_deploy/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Selective Deploy.

Este módulo define a hierarquia de exceções utilizadas durante o
carregamento, a resolução e a declaração de schema da configuração
de um serviço.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção aqui representa valor inválido de propriedade
      de unidade (ver `selective_deploy.core.exceptions.ConfigurationError`)

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende de Engine, plugins ou CLI
"""


class ConfigError(Exception):
    """
    Exceção base para erros estruturais de configuração do serviço.

    Esta hierarquia permite:
        - captura genérica de erros de configuração
        - distinção clara entre falhas de arquivo e falhas de empacotamento
    """


class ServiceConfigNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração do serviço
    não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo base é obrigatório
        - O override local, quando ausente, é simplesmente ignorado
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo não é suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigSyntaxError(ConfigError):
    """
    Exceção levantada quando o arquivo não pode ser interpretado
    como YAML ou JSON válido.

    A exceção original do parser é encadeada (`raise ... from e`).
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`), ou quando a seção `functions`
    não é um mapa de nome para unidade.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"functions": {"api": {"handler": "api.handler"}}}
        - override: {"functions": "api"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class SchemaConflictError(ConfigError):
    """
    Exceção levantada quando uma propriedade de unidade é declarada
    duas vezes, para o mesmo provider, com definições diferentes.
    """
