"""
Resolvedor de versões satisfeitas (cadeia de responsabilidade).

Este módulo orquestra uma lista ordenada de estratégias de detecção e
retorna o primeiro resultado que não seja abstenção.

Política de resolução (v1):
    - Estratégias são consultadas estritamente na ordem recebida
    - O primeiro resultado não-None vence; as demais não são consultadas
    - Se todas se abstêm → UnresolvedVersion
    - MalformedVersionField de qualquer estratégia propaga imediatamente
      e nunca é mascarado por sucesso de uma estratégia de menor prioridade;
      antes de propagar recebe entity_id/entity_name do contexto

Decisões arquiteturais:
    - A ordem é entrada de configuração de primeira classe, não reflexão
    - Campos explícitos e legados coexistindo NÃO são reconciliados:
      vence a primeira estratégia que responder
    - Cada tentativa vira um evento estruturado no MigrationContext

Limites explícitos:
    - Não calcula Steps pendentes
    - Não muta o documento
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple

from artifact_migrations.core.errors import unresolved_version
from artifact_migrations.core.exceptions import MalformedVersionField
from artifact_migrations.core.pipeline.context import MigrationContext

from .strategies import VersionStrategy
from .types import SatisfiedVersions

_RESOLVER_STEP_ID = "versions.resolve"


class VersionResolver:
    """Consulta estratégias em ordem de prioridade e devolve a primeira resposta."""

    def __init__(self, *, strategies: Sequence[VersionStrategy], family: str):
        if not strategies:
            raise ValueError("VersionResolver requires at least one strategy")
        self.strategies: Tuple[VersionStrategy, ...] = tuple(strategies)
        self.family = family

    def resolve(
        self,
        document: Dict[str, Any],
        ctx: Optional[MigrationContext] = None,
    ) -> SatisfiedVersions:
        for strategy in self.strategies:
            try:
                result = strategy.attempt(document)
            except MalformedVersionField as e:
                if ctx is not None:
                    e.entity_id = e.entity_id or ctx.entity_id
                    e.entity_name = e.entity_name or ctx.entity_name
                    ctx.log(
                        step_id=_RESOLVER_STEP_ID,
                        level="ERROR",
                        message="malformed version field",
                        strategy=strategy.name,
                        field=e.details.get("field"),
                    )
                raise
            if ctx is not None:
                ctx.log(
                    step_id=_RESOLVER_STEP_ID,
                    level="DEBUG",
                    message="version strategy attempted",
                    strategy=strategy.name,
                    abstained=result is None,
                )
            if result is not None:
                if ctx is not None:
                    ctx.log(
                        step_id=_RESOLVER_STEP_ID,
                        level="INFO",
                        message="document versions resolved",
                        source=result.source,
                        form=result.form.value,
                        max_version=result.max_version,
                    )
                return result

        raise unresolved_version(
            family=self.family,
            strategies=[s.name for s in self.strategies],
            entity_id=ctx.entity_id if ctx is not None else None,
            entity_name=ctx.entity_name if ctx is not None else None,
        )
