"""
Artifact Migrations: Canonical Exceptions (v1)

Este módulo define as exceções tipadas internas do motor de migração.

Objetivo:
- Permitir que resolver, planner e engine levantem falhas semânticas tipadas
- Facilitar o mapeamento determinístico para MigrationErrorPayload
- Distinguir abstenção de estratégia (não é erro) de campo malformado (é erro)

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Nenhuma exceção é silenciada ou re-tentada internamente.
- Toda falha aborta a migração inteira; nenhum resultado parcial é exposto.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(eq=False)
class MigrationException(Exception):
    """Base class para exceções do motor de migração.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - `entity_id` / `entity_name` identificam o documento, quando conhecidos
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None
    entity_id: Optional[str] = None
    entity_name: Optional[str] = None

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Resolução de versão
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class UnresolvedVersion(MigrationException):
    """Nenhuma estratégia da família conseguiu determinar as versões satisfeitas."""


@dataclass(eq=False)
class MalformedVersionField(MigrationException):
    """Campo de versão reconhecido está presente, mas não respeita sua gramática."""


@dataclass(eq=False)
class NewerDocumentVersion(MigrationException):
    """Documento declara versões posteriores à última migração registrada."""


# ---------------------------------------------------------------------------
# Documento / aplicação de Steps
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class InvalidDocumentRoot(MigrationException):
    """A raiz do documento não é um objeto."""


@dataclass(eq=False)
class StepApplicationError(MigrationException):
    """Um Step de migração falhou; a causa original fica em `__cause__`."""
