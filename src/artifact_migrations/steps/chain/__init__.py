"""Steps de migração da família chain."""

from __future__ import annotations

from typing import List, Optional

from artifact_migrations.core.family import FamilyFields
from artifact_migrations.core.pipeline.step import MigrationStep

from .v101_promote_content import ChainV101PromoteContent
from .v102_element_properties import ChainV102ElementProperties
from .v103_element_properties import ChainV103ElementProperties


def chain_steps(fields: Optional[FamilyFields] = None) -> List[MigrationStep]:
    fields = fields or FamilyFields()
    return [
        ChainV101PromoteContent(fields=fields),
        ChainV102ElementProperties(fields=fields),
        ChainV103ElementProperties(fields=fields),
    ]
