# tests/core/pipeline/test_registry_unique_version.py
"""
Testes de unicidade de versão no MigrationRegistry.

Os testes asseguram que:
- Steps com versões distintas são aceitos e listados em ordem crescente
- Steps com versão duplicada são rejeitados explicitamente
- versões não inteiras ou não positivas são rejeitadas
- um registry selado não aceita novos Steps

Decisões arquiteturais:
    - `version` é a chave primária de um Step no registry
    - A unicidade é imposta no momento do registro
    - A ordem de aplicação é a ordem crescente de versão, não a de inserção

Limites explícitos:
    - Não valida planejamento de Steps pendentes
    - Não valida execução de Steps
"""
import pytest

try:
    from artifact_migrations.core.pipeline.registry import (
        DuplicateMigrationVersionError,
        MigrationRegistry,
        SealedRegistryError,
    )
except Exception as e:  # noqa: BLE001
    MigrationRegistry = None
    DuplicateMigrationVersionError = None
    SealedRegistryError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que a implementação do MigrationRegistry esteja disponível para os testes.

    Falha imediatamente, com mensagem que descreve os símbolos públicos
    esperados, quando o registry canônico ou suas exceções não podem ser
    importados.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing MigrationRegistry. Implement:"
            "- src/artifact_migrations/core/pipeline/registry.py "
            "(MigrationRegistry, DuplicateMigrationVersionError, SealedRegistryError)"
            f"Import error: {_IMPORT_ERR}"
        )


def test_registry_rejects_duplicate_version(DummyMigrationStep):
    """
    Verifica que o registry rejeita dois Steps com a mesma versão.

    Invariantes:
        - O primeiro Step com uma dada versão é aceito
        - O segundo é rejeitado com DuplicateMigrationVersionError
        - O estado interno do registry não é alterado após a falha
    """
    _require_imports()
    reg = MigrationRegistry()
    first = DummyMigrationStep(101)
    reg.add(first)
    with pytest.raises(DuplicateMigrationVersionError):
        reg.add(DummyMigrationStep(101))
    assert len(reg) == 1
    assert reg.get(101) is first


def test_duplicate_error_is_a_value_error(DummyMigrationStep):
    _require_imports()
    with pytest.raises(ValueError):
        MigrationRegistry.of([DummyMigrationStep(1), DummyMigrationStep(1)])


def test_registry_lists_steps_in_ascending_version(DummyMigrationStep):
    _require_imports()
    reg = MigrationRegistry()
    for v in (103, 101, 102):
        reg.add(DummyMigrationStep(v))

    assert reg.versions() == [101, 102, 103]
    assert [s.version for s in reg.list()] == [101, 102, 103]
    assert reg.latest_version == 103
    assert 102 in reg and 104 not in reg


@pytest.mark.parametrize("version", [0, -1, "101", True, None])
def test_registry_rejects_invalid_versions(DummyMigrationStep, version):
    _require_imports()
    with pytest.raises(ValueError):
        MigrationRegistry().add(DummyMigrationStep(version))


def test_sealed_registry_is_read_only(DummyMigrationStep):
    _require_imports()
    reg = MigrationRegistry.of([DummyMigrationStep(1)])
    assert reg.sealed
    with pytest.raises(SealedRegistryError):
        reg.add(DummyMigrationStep(2))


def test_empty_registry_has_no_latest_version():
    _require_imports()
    assert MigrationRegistry().latest_version is None
