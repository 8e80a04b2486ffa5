# src/artifact_migrations/core/pipeline/step.py
"""
Contrato canônico de Step de migração.

Um Step é uma transformação determinística, identificada por versão,
que leva um documento da forma anterior à sua versão para a forma
seguinte.

Princípios fundamentais:
    - Steps não conhecem o Engine nem o resolver
    - Steps não controlam ordem de execução (a versão define a ordem)
    - Steps são puros: não mutam a árvore recebida, devolvem uma nova
    - Steps não assumem campos introduzidos por migrações posteriores
    - Conformidade é garantida por duck typing (@runtime_checkable)

Invariantes:
    - `version` é um inteiro positivo único dentro da família
    - `apply` é chamado no máximo uma vez por invocação do Engine
"""

from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable

from .context import MigrationContext


@runtime_checkable
class MigrationStep(Protocol):
    """
    Contrato mínimo de um Step de migração.

    Atributos obrigatórios:
        - version: versão que o Step introduz (chave no registry)
        - description: resumo humano da transformação

    Limites explícitos:
        - Não trata exceções de outros Steps
        - Não grava marcadores de versão no documento (papel do Engine)
    """
    version: int
    description: str

    def apply(self, document: Dict[str, Any], ctx: MigrationContext) -> Dict[str, Any]:
        """Retorna o documento migrado, sem mutar `document`."""
        ...
