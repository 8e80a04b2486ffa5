"""
Engine de migração de documentos versionados.

Máquina de estados por invocação:

    Start → VersionResolved → {StepApplied}* → Done
    Start → Failed

Nenhum estado terminal é reentrante: cada documento exige uma nova
invocação (e um novo MigrationContext).

Garantias:
- O documento do chamador nunca é mutado; o Engine trabalha sobre cópia.
- Em falha, nenhuma árvore intermediária é exposta ao chamador.
- O plano de Steps pendentes é calculado uma vez, antes do primeiro Step;
  a detecção de versão não é refeita entre Steps.
- Após aplicar Steps, o conjunto final de versões é gravado no campo de
  migrações da família (idempotência da segunda passagem).

Dois modos de uso:
- `migrate(document)` → MigrationResult ou exceção tipada (MigrationException)
- `run(document)`     → MigrationRun, convertendo exceções em MigrationErrorPayload
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from artifact_migrations.core.document.hashing import compute_document_hash
from artifact_migrations.core.document.tree import as_text, deep_copy, node_kind
from artifact_migrations.core.errors import (
    exception_to_payload,
    newer_document_version,
    step_application_error,
)
from artifact_migrations.core.exceptions import InvalidDocumentRoot, MigrationException
from artifact_migrations.core.family import DocumentFamily
from artifact_migrations.core.pipeline.context import MigrationContext
from artifact_migrations.core.pipeline.types import MigrationResult, MigrationRun, MigrationStatus
from artifact_migrations.core.versions.markers import write_version_marker
from artifact_migrations.core.versions.resolver import VersionResolver

from .planner import find_unknown_versions, plan_migrations

_ENGINE_STEP_ID = "engine"


class MigrationEngine:
    """Engine genérico, parametrizado por uma DocumentFamily."""

    def __init__(
        self,
        *,
        family: DocumentFamily,
        stamp_versions: bool = True,
        reject_newer_versions: bool = False,
    ):
        self.family = family
        self.stamp_versions = stamp_versions
        self.reject_newer_versions = reject_newer_versions
        self.resolver = VersionResolver(strategies=family.strategies, family=family.name)

    def _step_id(self, version: int) -> str:
        return f"{self.family.name}.v{version}"

    def _new_context(self, document: Dict[str, Any]) -> MigrationContext:
        fields = self.family.fields
        return MigrationContext(
            family=self.family.name,
            entity_id=as_text(document.get(fields.id)) or None,
            entity_name=as_text(document.get(fields.name)) or None,
        )

    def _check_root(self, document: Any) -> None:
        if not isinstance(document, dict):
            raise InvalidDocumentRoot(
                message="Root node of document to import is not an object",
                details={"family": self.family.name, "root_kind": node_kind(document).value},
            )

    def migrate(
        self,
        document: Dict[str, Any],
        *,
        ctx: Optional[MigrationContext] = None,
    ) -> MigrationResult:
        self._check_root(document)
        ctx = ctx or self._new_context(document)
        registry = self.family.registry

        input_hash = compute_document_hash(document)
        satisfied = self.resolver.resolve(document, ctx)

        if self.reject_newer_versions:
            unknown = find_unknown_versions(registry, satisfied)
            if unknown:
                ctx.log(
                    step_id=_ENGINE_STEP_ID,
                    level="ERROR",
                    message="nonexistent migrations are present",
                    unknown_versions=unknown,
                )
                raise newer_document_version(
                    family=self.family.name,
                    unknown_versions=unknown,
                    latest_version=registry.latest_version,
                    entity_id=ctx.entity_id,
                    entity_name=ctx.entity_name,
                )

        outstanding = plan_migrations(registry, satisfied)
        ctx.log(
            step_id=_ENGINE_STEP_ID,
            level="INFO",
            message="migration plan computed",
            registered_versions=registry.versions(),
            outstanding_versions=[s.version for s in outstanding],
        )

        working = deep_copy(document)
        applied = []
        for step in outstanding:
            sid = self._step_id(step.version)
            ctx.log(step_id=sid, level="DEBUG", message="applying migration", description=step.description)
            try:
                migrated = step.apply(working, ctx)
                if not isinstance(migrated, dict):
                    raise TypeError(
                        f"migration must return an object, got {node_kind(migrated).value}"
                    )
            except Exception as e:
                ctx.log(step_id=sid, level="ERROR", message="migration failed", exc_type=e.__class__.__name__)
                raise step_application_error(
                    family=self.family.name,
                    version=step.version,
                    cause=e,
                    entity_id=ctx.entity_id,
                    entity_name=ctx.entity_name,
                ) from e
            working = migrated
            applied.append(step.version)

        if applied and self.stamp_versions:
            fields = self.family.fields
            write_version_marker(
                working,
                satisfied.restricted_to(registry.versions()) + applied,
                migrations_field=fields.migrations,
                content_field=fields.content,
            )

        ctx.log(step_id=_ENGINE_STEP_ID, level="INFO", message="migration done", applied_versions=applied)

        return MigrationResult(
            family=self.family.name,
            document=working,
            applied_versions=applied,
            satisfied=satisfied,
            input_hash=input_hash,
            output_hash=compute_document_hash(working),
            events=list(ctx.events),
            warnings={k: list(v) for k, v in ctx.warnings.items()},
        )

    def run(self, document: Dict[str, Any]) -> MigrationRun:
        """Variante não-lançadora: falhas viram MigrationErrorPayload."""
        ctx = MigrationContext(family=self.family.name)
        try:
            self._check_root(document)
            ctx = self._new_context(document)
            result = self.migrate(document, ctx=ctx)
        except MigrationException as e:
            return MigrationRun(
                status=MigrationStatus.FAILED,
                error=exception_to_payload(e),
                events=list(ctx.events),
            )
        return MigrationRun(status=result.status, result=result, events=result.events)
