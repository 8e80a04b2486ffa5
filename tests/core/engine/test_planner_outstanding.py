# tests/core/engine/test_planner_outstanding.py
"""Testes do planejador: Steps pendentes e versões desconhecidas."""

from artifact_migrations.core.engine import find_unknown_versions, plan_migrations
from artifact_migrations.core.pipeline.registry import MigrationRegistry
from artifact_migrations.core.versions import SatisfiedVersions


def _registry(DummyMigrationStep, *versions):
    return MigrationRegistry.of([DummyMigrationStep(v) for v in versions])


def test_plan_is_ascending_and_skips_satisfied(DummyMigrationStep):
    reg = _registry(DummyMigrationStep, 103, 101, 102)
    plan = plan_migrations(reg, SatisfiedVersions.explicit([102]))
    assert [s.version for s in plan] == [101, 103]


def test_plan_for_legacy_form(DummyMigrationStep):
    reg = _registry(DummyMigrationStep, 1, 2, 3, 4)
    plan = plan_migrations(reg, SatisfiedVersions.legacy(2))
    assert [s.version for s in plan] == [3, 4]


def test_unknown_versions_are_only_those_above_latest(DummyMigrationStep):
    reg = _registry(DummyMigrationStep, 101, 102)
    satisfied = SatisfiedVersions.explicit([5, 101, 103])
    assert find_unknown_versions(reg, satisfied) == [103]


def test_legacy_bound_above_latest_is_not_unknown(DummyMigrationStep):
    reg = _registry(DummyMigrationStep, 101, 102)
    satisfied = SatisfiedVersions.legacy(200)

    assert find_unknown_versions(reg, satisfied) == []
    assert plan_migrations(reg, satisfied) == []
