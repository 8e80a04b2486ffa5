"""Step canônico: service.v102 (nomes de operação sintetizados).

Responsabilidades:
- Percorrer `content.operations`.
- Para cada operação (objeto) sem `name`, ou com `name` sem texto
  (null, espaços, objeto ou array),
  sintetizar um nome a partir de `(id, method, path)`:
  membros não vazios, na ordem, unidos por "-".

Exemplo:
    {id: bar, method: publish, path: user/notify}
        → name: "bar-publish-user/notify"

Limites explícitos:
- NÃO altera nomes já preenchidos.
- NÃO inventa placeholder quando id, method e path estão todos vazios;
  nesse caso `name` fica como estava.
- Itens de `operations` que não são objetos são ignorados.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from artifact_migrations.core.document.errors import DocumentShapeError
from artifact_migrations.core.document.tree import (
    as_text,
    deep_copy,
    node_kind,
    require_object,
)
from artifact_migrations.core.family import FamilyFields
from artifact_migrations.core.pipeline.context import MigrationContext

OPERATIONS_FIELD = "operations"
NAME_PARTS = ("id", "method", "path")


def generate_operation_name(operation: Dict[str, Any]) -> str:
    parts = (as_text(operation.get(key)) for key in NAME_PARTS)
    return "-".join(part for part in parts if part.strip())


@dataclass
class ServiceV102OperationNames:
    """Sintetiza `name` para operações que não o possuem."""

    version: int = 102
    description: str = "synthesize missing operation names from id, method and path"
    fields: FamilyFields = field(default_factory=FamilyFields)

    def apply(self, document: Dict[str, Any], ctx: MigrationContext) -> Dict[str, Any]:
        result = deep_copy(document)
        content = result.get(self.fields.content)
        if content is None:
            return result
        require_object(content, self.fields.content)

        operations = content.get(OPERATIONS_FIELD)
        if operations is None:
            return result
        if not isinstance(operations, list):
            raise DocumentShapeError(
                f"Expected array at '{self.fields.content}.{OPERATIONS_FIELD}', "
                f"got {node_kind(operations).value}"
            )

        for operation in operations:
            if not isinstance(operation, dict) or as_text(operation.get("name")).strip():
                continue
            name = generate_operation_name(operation)
            if not name:
                continue
            operation["name"] = name
            ctx.log(
                step_id=f"service.v{self.version}",
                level="DEBUG",
                message="operation name generated",
                operation_id=as_text(operation.get("id")),
                name=name,
            )
        return result
