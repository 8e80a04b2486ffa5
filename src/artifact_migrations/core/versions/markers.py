"""
Marcadores de versão gravados no documento migrado.

Após aplicar os Steps pendentes, o Engine grava o conjunto final de
versões satisfeitas no campo de migrações da família, no mesmo formato
lido por `ExplicitListStrategy`:

    content:
      migrations: "[101, 102, 103]"

É esse marcador que faz uma segunda passagem não encontrar Steps
pendentes (idempotência).
"""

from __future__ import annotations

from typing import Any, Dict, Iterable


def format_version_list(versions: Iterable[int]) -> str:
    """Formata versões como lista textual ordenada: "[1, 2, 5]"."""
    return "[" + ", ".join(str(v) for v in sorted(set(versions))) + "]"


def write_version_marker(
    document: Dict[str, Any],
    versions: Iterable[int],
    *,
    migrations_field: str = "migrations",
    content_field: str = "content",
) -> Dict[str, Any]:
    """Grava o marcador dentro de `content` quando for objeto; senão na raiz.

    Muta e retorna `document`; o Engine só chama isto sobre sua cópia de trabalho.
    """
    content = document.get(content_field)
    target = content if isinstance(content, dict) else document
    target[migrations_field] = format_version_list(versions)
    return document
