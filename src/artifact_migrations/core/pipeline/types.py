"""
Tipos canônicos do resultado de migração.

Componentes principais:
    - MigrationStatus → estados finais de uma invocação
    - MigrationResult → documento final + proveniência (imutável)
    - MigrationRun    → envelope não-lançador (resultado OU erro)

Princípios fundamentais:
    - Tipos são estáveis e serializáveis (exceto a árvore em si)
    - Nenhuma lógica de execução vive neste módulo

Invariantes:
    - Enums possuem valores textuais canônicos
    - Um MigrationRun FAILED nunca carrega documento parcial
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from artifact_migrations.core.errors import MigrationErrorPayload
from artifact_migrations.core.versions.types import SatisfiedVersions


class MigrationStatus(str, Enum):
    """
    Estados finais de uma invocação do Engine.

    Estados definidos:
        - MIGRATED: ao menos um Step foi aplicado
        - UP_TO_DATE: nenhum Step pendente; documento já estava atual
        - FAILED: migração abortada; nenhum documento é retornado
    """
    MIGRATED = "migrated"
    UP_TO_DATE = "up_to_date"
    FAILED = "failed"


@dataclass(frozen=True)
class MigrationResult:
    """
    Resultado imutável de uma migração bem-sucedida.

    Campos:
        - family: família do documento (ex.: chain, service)
        - document: árvore final (nova; o input do chamador não é mutado)
        - applied_versions: versões efetivamente aplicadas, em ordem
        - satisfied: conjunto de versões detectado antes da migração
        - input_hash / output_hash: hashes canônicos de proveniência
        - events / warnings: log estruturado da invocação
    """
    family: str
    document: Dict[str, Any]
    applied_versions: List[int]
    satisfied: SatisfiedVersions
    input_hash: str
    output_hash: str
    events: List[Dict[str, Any]] = field(default_factory=list)
    warnings: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def status(self) -> MigrationStatus:
        return MigrationStatus.MIGRATED if self.applied_versions else MigrationStatus.UP_TO_DATE


@dataclass(frozen=True)
class MigrationRun:
    """Envelope de uma invocação: `result` em sucesso, `error` em falha."""
    status: MigrationStatus
    result: Optional[MigrationResult] = None
    error: Optional[MigrationErrorPayload] = None
    events: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is not MigrationStatus.FAILED
