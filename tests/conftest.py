# tests/conftest.py
"""
Fixtures compartilhados para testes do Artifact Migrations.

Este módulo define fixtures reutilizáveis que fornecem:
- contexto de migração controlado (MigrationContext)
- Steps dummy para testes estruturais de registry e engine
- uma família de documentos mínima, montada com Steps dummy
- documentos exemplo das famílias chain e service

Decisões arquiteturais:
    - Steps dummy utilizam duck typing em vez de herança
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas
    - Documentos são dicionários literais, sem I/O

Invariantes:
    - Nenhuma fixture realiza I/O
    - Nenhuma fixture contém lógica de domínio
    - Cada fixture devolve objetos novos (nenhum estado compartilhado)

Limites explícitos:
    - Não substitui testes dos Steps concretos
    - Não valida semântica de configuração
"""

from datetime import datetime, timezone

import pytest


# =====================================================
# Pipeline fixtures (Step + MigrationContext)
# =====================================================

@pytest.fixture
def dummy_ctx():
    """
    MigrationContext determinístico para testes.

    `run_id` e `created_at` são fixos para garantir reprodutibilidade.
    """
    from artifact_migrations.core.pipeline.context import MigrationContext

    return MigrationContext(
        family="dummy",
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def DummyMigrationStep():
    """
    Fixture factory que fornece uma implementação mínima e duck-typed de Step.

    O Step retornado:
    - respeita o protocolo `MigrationStep` (sem herança)
    - não muta o documento recebido
    - anexa sua versão à lista `trail` do documento devolvido, permitindo
      verificar quais Steps rodaram e em que ordem

    Opcionalmente levanta `error` em vez de migrar.

    Returns:
        type: Classe _DummyMigrationStep que pode ser instanciada pelos testes.
    """

    class _DummyMigrationStep:
        def __init__(self, version: int, *, error: Exception = None, description: str = "dummy"):
            self.version = version
            self.description = description
            self.error = error

        def apply(self, document, ctx):
            if self.error is not None:
                raise self.error
            result = dict(document)
            result["trail"] = list(document.get("trail", [])) + [self.version]
            return result

    return _DummyMigrationStep


@pytest.fixture
def dummy_family(DummyMigrationStep):
    """Família "dummy" com Steps 1, 2 e 3 e estratégias padrão."""
    from artifact_migrations.core.family import build_family

    return build_family("dummy", [DummyMigrationStep(v) for v in (1, 2, 3)])


@pytest.fixture
def dummy_engine(dummy_family):
    from artifact_migrations.core.engine import MigrationEngine

    return MigrationEngine(family=dummy_family)


# =====================================================
# Documentos exemplo
# =====================================================

@pytest.fixture
def flat_service_document() -> dict:
    """Service exportado antes da v101: todos os campos na raiz."""
    return {
        "id": "svc-1",
        "name": "users",
        "migrations": "[]",
        "description": "user service",
        "operations": [
            {"id": "foo", "name": "emitUserSignUpEvent", "method": "publish", "path": "user/signedup"},
            {"id": "bar", "method": "publish", "path": "user/notify"},
        ],
    }


@pytest.fixture
def flat_chain_document() -> dict:
    """Chain exportada antes da v101: campos na raiz e chaves legadas."""
    return {
        "id": "chain-1",
        "name": "orders",
        "version": 0,
        "description": "order processing",
        "elements": [
            {
                "id": "e1",
                "element-type": "http-trigger",
                "properties": {"contextPath": "/orders"},
            },
            {
                "id": "e2",
                "element-type": "if",
                "properties": {"priority": "10"},
                "children": [
                    {
                        "id": "e3",
                        "type": "service-call",
                        "properties": {"before": {}, "properties-filename": "call.yaml"},
                    },
                ],
            },
            {
                "id": "e4",
                "element-type": "kafka-sender",
                "properties": {"keySerializer": "", "topic": "orders"},
            },
        ],
    }
