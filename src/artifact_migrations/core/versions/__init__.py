"""Artifact Migrations: Versions (core).

Detecção das versões que um documento já satisfaz:
 - tipos (SatisfiedVersions, VersionForm)
 - estratégias de detecção (explícita, legada, conteúdo aninhado)
 - resolvedor por prioridade
 - marcadores gravados após a migração
"""

from .types import SatisfiedVersions, VersionForm  # noqa: F401
from .strategies import (  # noqa: F401
    ExplicitListStrategy,
    LegacyScalarStrategy,
    NestedContentStrategy,
    VersionStrategy,
    parse_version_list,
)
from .markers import format_version_list, write_version_marker  # noqa: F401
from .resolver import VersionResolver  # noqa: F401
