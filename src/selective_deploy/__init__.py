# src/selective_deploy/__init__.py
"""
Selective Deploy — filtro pré-empacotamento para serviços multi-função.

Este pacote raiz define o namespace público do Selective Deploy, uma
extensão que remove do registry de unidades (funções) aquelas marcadas
explicitamente com `toDeploy: false` antes que os artefatos de deploy
sejam produzidos.

Princípios centrais:
    - Unidades sem flag explícita são sempre empacotadas (default-deploy)
    - A flag `toDeploy`, quando presente, é estritamente booleana
    - A decisão é determinística e segue a ordem natural do registry
    - Todo resultado é reportado por um resumo explícito

Arquitetura em alto nível:
    - core.config   → carregamento, merge e hashing da configuração do serviço
    - core.service  → registry de unidades, schema, contexto e canais de log
    - core.engine   → ciclo de vida de empacotamento e despacho de hooks
    - plugins       → o filtro de deploy (SelectiveUnitDeploy)

Limites explícitos:
    - Não decide como uma unidade é construída
    - Não produz artefatos reais
    - Não realiza I/O de rede nem persistência
"""
# src/selective_deploy/__init__.py
from .core.exceptions import ConfigurationError
from .plugins.selective_deploy import SelectiveUnitDeploy

__all__ = ["ConfigurationError", "SelectiveUnitDeploy"]

__version__ = "0.1.0"
