"""
Montagem das famílias canônicas (chain, service) e de seus Engines.

As famílias são construídas a partir dos Settings efetivos (nomes de
campo por família) e os Engines recebem as flags de `engine.*`. Registries
são selados na construção e podem ser compartilhados entre invocações.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Optional

from artifact_migrations.core.config import build_settings, resolve_config
from artifact_migrations.core.config.settings import Settings
from artifact_migrations.core.engine import MigrationEngine
from artifact_migrations.core.family import DocumentFamily, FamilyFields, build_family
from artifact_migrations.steps.chain import chain_steps
from artifact_migrations.steps.service import service_steps

CHAIN = "chain"
SERVICE = "service"


def build_chain_family(fields: Optional[FamilyFields] = None) -> DocumentFamily:
    fields = fields or FamilyFields()
    return build_family(CHAIN, chain_steps(fields), fields=fields)


def build_service_family(fields: Optional[FamilyFields] = None) -> DocumentFamily:
    fields = fields or FamilyFields()
    return build_family(SERVICE, service_steps(fields), fields=fields)


def build_families(settings: Settings) -> Dict[str, DocumentFamily]:
    return {
        CHAIN: build_chain_family(settings.fields_for(CHAIN)),
        SERVICE: build_service_family(settings.fields_for(SERVICE)),
    }


def build_engines(settings: Optional[Settings] = None) -> Dict[str, MigrationEngine]:
    """
    Um Engine por família, configurado pelos Settings.

    Sem Settings explícitos, usa os defaults empacotados.
    """
    if settings is None:
        settings = build_settings(resolve_config())

    return {
        name: MigrationEngine(
            family=family,
            stamp_versions=settings.engine.stamp_versions,
            reject_newer_versions=settings.engine.reject_newer_versions,
        )
        for name, family in build_families(settings).items()
    }


@lru_cache(maxsize=1)
def default_engines() -> Dict[str, MigrationEngine]:
    return build_engines()
