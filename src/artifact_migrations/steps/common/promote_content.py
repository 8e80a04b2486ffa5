"""Promoção estrutural compartilhada pelas famílias (v101).

Documentos antigos eram planos: todos os campos na raiz. A partir da
v101, apenas `id` e `name` ficam na raiz e o restante passa a viver em
um objeto `content`.

    {id: a, name: b, foo: 1, bar: 2}
        → {id: a, name: b, content: {foo: 1, bar: 2}}

O conjunto "restante" é aberto (definido por exclusão), por isso a raiz
é reconstruída em vez de renomear campos no lugar.
"""

from __future__ import annotations

from typing import Any, Dict

from artifact_migrations.core.document.tree import deep_copy, require_object
from artifact_migrations.core.family import FamilyFields


def move_fields_to_content(root: Dict[str, Any], fields: FamilyFields) -> Dict[str, Any]:
    """Retorna uma nova raiz; `root` não é mutado. Valores são copiados sem alteração."""
    require_object(root, "$")
    kept = (fields.id, fields.name)

    result: Dict[str, Any] = {}
    for key in kept:
        if key in root:
            result[key] = deep_copy(root[key])

    result[fields.content] = {
        key: deep_copy(value) for key, value in root.items() if key not in kept
    }
    return result
