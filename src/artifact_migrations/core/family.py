"""
Família de documentos: a parametrização do motor genérico.

Chains e services compartilham exatamente o mesmo motor de migração;
diferem apenas nos nomes de campo reconhecidos, nas estratégias de
detecção e nos Steps registrados. Este módulo reúne esses três insumos
em um valor imutável, `DocumentFamily`, em vez de duplicar tipos por
família.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from artifact_migrations.core.pipeline.registry import MigrationRegistry
from artifact_migrations.core.pipeline.step import MigrationStep
from artifact_migrations.core.versions.strategies import (
    ExplicitListStrategy,
    LegacyScalarStrategy,
    NestedContentStrategy,
    VersionStrategy,
)


@dataclass(frozen=True)
class FamilyFields:
    """Nomes de campo do formato exportado. Fazem parte do formato em disco."""
    content: str = "content"
    migrations: str = "migrations"
    version: str = "version"
    id: str = "id"
    name: str = "name"


def default_strategies(fields: FamilyFields) -> Tuple[VersionStrategy, ...]:
    """Ordem padrão: conteúdo aninhado → lista explícita → escalar legado."""
    explicit = ExplicitListStrategy(field_name=fields.migrations)
    return (
        NestedContentStrategy(delegate=explicit, content_field=fields.content),
        explicit,
        LegacyScalarStrategy(field_name=fields.version),
    )


@dataclass(frozen=True)
class DocumentFamily:
    """
    Família de documentos (ex.: chain, service).

    Invariantes:
        - `registry` está selado (somente leitura, compartilhável)
        - `strategies` está na ordem de prioridade de consulta
    """
    name: str
    fields: FamilyFields
    strategies: Tuple[VersionStrategy, ...]
    registry: MigrationRegistry


def build_family(
    name: str,
    steps: Iterable[MigrationStep],
    *,
    fields: Optional[FamilyFields] = None,
    strategies: Optional[Sequence[VersionStrategy]] = None,
) -> DocumentFamily:
    fields = fields or FamilyFields()
    return DocumentFamily(
        name=name,
        fields=fields,
        strategies=tuple(strategies) if strategies is not None else default_strategies(fields),
        registry=MigrationRegistry.of(steps),
    )
