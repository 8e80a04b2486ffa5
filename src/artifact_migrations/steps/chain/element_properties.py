"""Base dos Steps de chain que ajustam `properties` por tipo de elemento.

Cada elemento de `content.elements` (e, recursivamente, de seus
`children`) tem um `type` e um objeto `properties`. Um Step concreto
declara um mapa `tipo → migrador`; o migrador recebe o objeto de
propriedades (da cópia de trabalho) e o ajusta no lugar.

Elementos sem `properties` objeto ou de tipo sem migrador são mantidos
como estão.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping

from artifact_migrations.core.document.tree import as_text, deep_copy, iter_children, path
from artifact_migrations.core.family import FamilyFields
from artifact_migrations.core.pipeline.context import MigrationContext

Warn = Callable[[str], None]
PropertyMigrator = Callable[[Dict[str, Any], Warn], None]


@dataclass
class ElementPropertiesMigration:
    version: int
    description: str
    migrators: Mapping[str, PropertyMigrator]
    fields: FamilyFields = field(default_factory=FamilyFields)

    def apply(self, document: Dict[str, Any], ctx: MigrationContext) -> Dict[str, Any]:
        result = deep_copy(document)
        step_id = f"chain.v{self.version}"

        def migrate_element(element: Any) -> None:
            if not isinstance(element, dict):
                return
            element_type = as_text(element.get("type"))
            ctx.log(
                step_id=step_id,
                level="DEBUG",
                message="migrating element",
                element_id=as_text(element.get("id")),
                element_type=element_type,
            )
            properties = element.get("properties")
            migrator = self.migrators.get(element_type)
            if migrator is not None and isinstance(properties, dict):
                migrator(properties, lambda message: ctx.add_warning(step_id=step_id, message=message))
            for child in iter_children(element.get("children")):
                migrate_element(child)

        for element in iter_children(path(result, self.fields.content, "elements")):
            migrate_element(element)
        return result
