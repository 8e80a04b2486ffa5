"""Steps de migração da família service."""

from __future__ import annotations

from typing import List, Optional

from artifact_migrations.core.family import FamilyFields
from artifact_migrations.core.pipeline.step import MigrationStep

from .v101_promote_content import ServiceV101PromoteContent
from .v102_operation_names import ServiceV102OperationNames, generate_operation_name  # noqa: F401


def service_steps(fields: Optional[FamilyFields] = None) -> List[MigrationStep]:
    fields = fields or FamilyFields()
    return [
        ServiceV101PromoteContent(fields=fields),
        ServiceV102OperationNames(fields=fields),
    ]
