"""
Artifact Migrations: Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do motor de migração.
Erros são artefatos de domínio e fazem parte do contrato operacional
do pipeline de importação, devendo ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis

Nenhuma falha de migração é convertida em sucesso parcial.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from .exceptions import (
    InvalidDocumentRoot,
    MalformedVersionField,
    MigrationException,
    NewerDocumentVersion,
    StepApplicationError,
    UnresolvedVersion,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MigrationErrorPayload:
    """
    Payload canônico de erro do motor de migração.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    - entity_id / entity_name: identificação do documento, quando conhecida
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    entity_id: Optional[str] = None
    entity_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Resolução de versão
UNRESOLVED_VERSION = "UNRESOLVED_VERSION"
MALFORMED_VERSION_FIELD = "MALFORMED_VERSION_FIELD"
NEWER_DOCUMENT_VERSION = "NEWER_DOCUMENT_VERSION"

# Documento / Steps
INVALID_DOCUMENT_ROOT = "INVALID_DOCUMENT_ROOT"
STEP_APPLICATION_ERROR = "STEP_APPLICATION_ERROR"

# Fallback
MIGRATION_INTERNAL_ERROR = "MIGRATION_INTERNAL_ERROR"

_CODES_BY_EXCEPTION = (
    (UnresolvedVersion, UNRESOLVED_VERSION),
    (MalformedVersionField, MALFORMED_VERSION_FIELD),
    (NewerDocumentVersion, NEWER_DOCUMENT_VERSION),
    (InvalidDocumentRoot, INVALID_DOCUMENT_ROOT),
    (StepApplicationError, STEP_APPLICATION_ERROR),
)


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def unresolved_version(
    *,
    family: str,
    strategies: List[str],
    entity_id: Optional[str] = None,
    entity_name: Optional[str] = None,
    hint: str = "Declare o campo 'migrations' (ou o legado 'version') no documento exportado.",
) -> UnresolvedVersion:
    return UnresolvedVersion(
        message="Failed to retrieve migration data",
        details={"family": family, "strategies": strategies},
        hint=hint,
        entity_id=entity_id,
        entity_name=entity_name,
    )


def malformed_version_field(
    *,
    field_name: str,
    raw_value: Any,
    token: Optional[str] = None,
    entity_id: Optional[str] = None,
    entity_name: Optional[str] = None,
    hint: str = "Corrija o campo para uma lista de inteiros entre colchetes, ex.: \"[101, 102]\".",
) -> MalformedVersionField:
    return MalformedVersionField(
        message=f"Malformed version field '{field_name}'",
        details={"field": field_name, "raw_value": repr(raw_value), "token": token},
        hint=hint,
        entity_id=entity_id,
        entity_name=entity_name,
    )


def newer_document_version(
    *,
    family: str,
    unknown_versions: List[int],
    latest_version: Optional[int],
    entity_id: Optional[str] = None,
    entity_name: Optional[str] = None,
) -> NewerDocumentVersion:
    return NewerDocumentVersion(
        message="Unable to import an entity exported from a newer version",
        details={
            "family": family,
            "unknown_versions": unknown_versions,
            "latest_version": latest_version,
        },
        hint="Atualize o produto para uma versão que conheça essas migrações antes de importar.",
        entity_id=entity_id,
        entity_name=entity_name,
    )


def step_application_error(
    *,
    family: str,
    version: int,
    cause: BaseException,
    entity_id: Optional[str] = None,
    entity_name: Optional[str] = None,
) -> StepApplicationError:
    return StepApplicationError(
        message=f"Failed to make migration {version}",
        details={
            "family": family,
            "version": version,
            "exc_type": cause.__class__.__name__,
            "exc_message": str(cause),
        },
        hint="Verifique se o documento tem o formato esperado pela versão anterior à migração.",
        entity_id=entity_id,
        entity_name=entity_name,
    )


def exception_to_payload(exc: BaseException) -> MigrationErrorPayload:
    """Converte exceções em MigrationErrorPayload (serializável, acionável).

    - MigrationException: código estável pelo tipo, campos preservados.
    - Outras exceções: encapsuladas como MIGRATION_INTERNAL_ERROR.
    """
    if isinstance(exc, MigrationException):
        code = MIGRATION_INTERNAL_ERROR
        for exc_type, exc_code in _CODES_BY_EXCEPTION:
            if isinstance(exc, exc_type):
                code = exc_code
                break
        return MigrationErrorPayload(
            type=code,
            message=exc.message,
            details=dict(exc.details or {}),
            hint=exc.hint,
            entity_id=exc.entity_id,
            entity_name=exc.entity_name,
        )

    return MigrationErrorPayload(
        type=MIGRATION_INTERNAL_ERROR,
        message=str(exc) or "Unexpected migration failure",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique o log de eventos da migração",
    )
