"""Step canônico: chain.v103 (propriedades de elementos).

Ajustes por tipo de elemento:
- loop-2: remove `maxLoopIteration` em branco.
- kafka-trigger-2: remove `reconnectBackoffMaxMs` em branco.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from artifact_migrations.core.document.tree import is_blank
from artifact_migrations.core.family import FamilyFields

from .element_properties import ElementPropertiesMigration, Warn


def _drop_if_blank(key: str):
    def migrate(properties: Dict[str, Any], warn: Warn) -> None:
        if key in properties and is_blank(properties[key]):
            del properties[key]
    return migrate


V103_MIGRATORS = {
    "loop-2": _drop_if_blank("maxLoopIteration"),
    "kafka-trigger-2": _drop_if_blank("reconnectBackoffMaxMs"),
}


@dataclass
class ChainV103ElementProperties(ElementPropertiesMigration):
    version: int = 103
    description: str = "drop blank loop and kafka trigger limits"
    migrators: Dict[str, Any] = field(default_factory=lambda: dict(V103_MIGRATORS))
    fields: FamilyFields = field(default_factory=FamilyFields)
