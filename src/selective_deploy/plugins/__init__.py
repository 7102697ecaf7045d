# src/selective_deploy/plugins/__init__.py
"""Plugins invocados pelo Engine de empacotamento."""

from .selective_deploy import SelectiveUnitDeploy

__all__ = ["SelectiveUnitDeploy"]
