"""Fronteira de texto/arquivo do motor de migração.

Conveniências para quem importa artefatos exportados: parsear o texto,
migrar a árvore com o Engine da família e serializar o resultado em YAML.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from artifact_migrations.core.document import dump_document, load_document, parse_document
from artifact_migrations.core.engine import MigrationEngine
from artifact_migrations.core.pipeline.types import MigrationResult

from .families import default_engines


def get_engine(
    family: str,
    engines: Optional[Mapping[str, MigrationEngine]] = None,
) -> MigrationEngine:
    engines = engines if engines is not None else default_engines()
    try:
        return engines[family]
    except KeyError:
        raise ValueError(
            f"Unknown document family: {family!r} (known: {sorted(engines)})"
        ) from None


def migrate_document(
    document: Dict[str, Any],
    family: str,
    *,
    engines: Optional[Mapping[str, MigrationEngine]] = None,
) -> MigrationResult:
    return get_engine(family, engines).migrate(document)


def migrate_file(
    path: Union[str, Path],
    family: str,
    *,
    engines: Optional[Mapping[str, MigrationEngine]] = None,
) -> MigrationResult:
    return migrate_document(load_document(path), family, engines=engines)


def migrate_text(
    text: str,
    family: str,
    *,
    fmt: str = "yaml",
    engines: Optional[Mapping[str, MigrationEngine]] = None,
) -> str:
    """Parseia, migra e devolve o documento migrado como YAML.

    Raises:
        DocumentParseError: texto inválido ou raiz que não é objeto.
        MigrationException: falha de resolução de versão ou de Step.
    """
    result = migrate_document(parse_document(text, fmt=fmt), family, engines=engines)
    return dump_document(result.document)
