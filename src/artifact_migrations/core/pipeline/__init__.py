"""
# Pipeline Core: Artifact Migrations

Este pacote define os **contratos canônicos** de um pipeline de migração
de documento: o Step versionado, o registry da família, o contexto de
invocação e os tipos de resultado.

## Componentes

- **step**: `MigrationStep` (Protocol): transformação pura identificada por versão
- **registry**: `MigrationRegistry`: unicidade de versão, ordem crescente, selagem
- **context**: `MigrationContext`: eventos estruturados e warnings por invocação
- **types**: `MigrationStatus`, `MigrationResult`, `MigrationRun`

## Invariantes

- Cada Step possui uma `version` única na família
- A ordem de aplicação é sempre a ordem crescente de versão
- Steps não executam fora do controle do Engine
"""

from .context import MigrationContext  # noqa: F401
from .registry import (  # noqa: F401
    DuplicateMigrationVersionError,
    MigrationRegistry,
    SealedRegistryError,
)
from .step import MigrationStep  # noqa: F401
from .types import MigrationResult, MigrationRun, MigrationStatus  # noqa: F401
