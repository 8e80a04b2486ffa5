"""
Planejador de migração.

Este módulo calcula, a partir do registry da família e do conjunto de
versões satisfeitas, quais Steps ainda estão pendentes e em que ordem.

Política de planejamento (v1):
    - Pendente = versão registrada V tal que V não pertence ao conjunto
      (forma explícita) ou V > N (forma legada {1..N})
    - Ordem estritamente crescente de versão
    - O plano é calculado uma única vez, antes do primeiro Step

Decisões arquiteturais:
    - Lacunas no conjunto explícito são legais: uma versão sem migração
      registrada, ou pulada, não invalida o documento
    - Versões explícitas ACIMA da última registrada indicam exportação
      feita por um produto mais novo e são reportadas à parte; um N
      legado é só um limite superior e nunca é reportado

Limites explícitos:
    - Não executa Steps
    - Não resolve versões
"""

from __future__ import annotations

from typing import List

from artifact_migrations.core.pipeline.registry import MigrationRegistry
from artifact_migrations.core.pipeline.step import MigrationStep
from artifact_migrations.core.versions.types import SatisfiedVersions, VersionForm


def plan_migrations(registry: MigrationRegistry, satisfied: SatisfiedVersions) -> List[MigrationStep]:
    """Retorna os Steps pendentes em ordem crescente de versão."""
    return [step for step in registry.list() if step.version not in satisfied]


def find_unknown_versions(registry: MigrationRegistry, satisfied: SatisfiedVersions) -> List[int]:
    """Versões explícitas acima da última migração conhecida pela família."""
    if satisfied.form is VersionForm.LEGACY:
        return []
    return satisfied.above(registry.latest_version or 0)
