# src/selective_deploy/core/__init__.py
"""
Core do Selective Deploy.

Este pacote reúne as estruturas independentes de CLI necessárias para
carregar a configuração de um serviço, manter o registry de unidades
e executar uma passada de empacotamento com hooks de ciclo de vida.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de dependências de CLI ou terminal

Componentes principais:
    - config   → resolução de configuração (merge, validação estrutural, hashing)
    - service  → registry, schema de propriedades, contexto e log estruturado
    - engine   → despacho de hooks e planejamento de artefatos

Limites explícitos:
    - Não contém a regra de filtragem (ver `selective_deploy.plugins`)
    - Não depende de CLI ou serviços externos
"""
