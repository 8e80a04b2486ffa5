"""Step canônico: chain.v101 (promoção para `content` + renomeações).

Responsabilidades:
- Reconstruir a raiz mantendo apenas `id` e `name`; o restante vai para `content`.
- Renomear `properties-filename` → `propertiesFilename` em qualquer nível.
- Definir `keySerializer` vazio/null como o serializer de string padrão,
  em qualquer nível.
- Renomear `element-type` → `type` em cada item de `content.elements`.

Princípios:
- Renomeação nunca sobrescreve: se o destino já existe, a origem é mantida
  e um warning é registrado.
- Campos não reconhecidos são movidos intactos.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict

from artifact_migrations.core.document.tree import is_blank, iter_children, path
from artifact_migrations.core.family import FamilyFields
from artifact_migrations.core.pipeline.context import MigrationContext
from artifact_migrations.steps.common.promote_content import move_fields_to_content

DEFAULT_KEY_SERIALIZER = "org.apache.kafka.common.serialization.StringSerializer"


def rename_field(
    node: Any,
    old: str,
    new: str,
    *,
    recursive: bool,
    warn: Callable[[str], None],
) -> None:
    if isinstance(node, dict) and old in node:
        if new in node:
            warn(f"Object already has field {new}")
        else:
            node[new] = node.pop(old)
    if recursive:
        for child in list(iter_children(node)):
            rename_field(child, old, new, recursive=True, warn=warn)


def fill_blank_field(node: Any, field_name: str, value: str) -> None:
    if isinstance(node, dict):
        if field_name in node and is_blank(node[field_name]):
            node[field_name] = value
    for child in iter_children(node):
        fill_blank_field(child, field_name, value)


@dataclass
class ChainV101PromoteContent:
    """Promoção estrutural de chains com ajustes de nomes de campo."""

    version: int = 101
    description: str = "move fields into content, rename legacy property keys"
    fields: FamilyFields = field(default_factory=FamilyFields)

    def apply(self, document: Dict[str, Any], ctx: MigrationContext) -> Dict[str, Any]:
        step_id = f"chain.v{self.version}"

        def warn(message: str) -> None:
            ctx.add_warning(step_id=step_id, message=message)

        result = move_fields_to_content(document, self.fields)

        rename_field(result, "properties-filename", "propertiesFilename", recursive=True, warn=warn)
        fill_blank_field(result, "keySerializer", DEFAULT_KEY_SERIALIZER)

        elements = path(result, self.fields.content, "elements")
        for element in iter_children(elements):
            rename_field(element, "element-type", "type", recursive=False, warn=warn)

        return result
