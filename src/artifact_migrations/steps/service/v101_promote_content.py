"""Step canônico: service.v101 (promoção para `content`).

Responsabilidades:
- Reconstruir a raiz do documento de service mantendo apenas `id` e `name`.
- Mover todos os demais campos, sem alteração, para o objeto `content`.

Limites explícitos:
- NÃO renomeia nem normaliza campos movidos.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from artifact_migrations.core.family import FamilyFields
from artifact_migrations.core.pipeline.context import MigrationContext
from artifact_migrations.steps.common.promote_content import move_fields_to_content


@dataclass
class ServiceV101PromoteContent:
    """Promove campos de service para o objeto `content`."""

    version: int = 101
    description: str = "move every field except id and name into content"
    fields: FamilyFields = field(default_factory=FamilyFields)

    def apply(self, document: Dict[str, Any], ctx: MigrationContext) -> Dict[str, Any]:
        return move_fields_to_content(document, self.fields)
