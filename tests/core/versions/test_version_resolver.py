# tests/core/versions/test_version_resolver.py
"""
Testes do VersionResolver (consulta por prioridade).

Política validada:
    - estratégias são consultadas na ordem recebida
    - o primeiro resultado não-None vence, sem reconciliação
    - todas se abstêm → UnresolvedVersion
    - MalformedVersionField propaga e não é mascarado por estratégias
      de menor prioridade
    - cada tentativa é registrada como evento no MigrationContext
"""

import pytest

from artifact_migrations.core.exceptions import MalformedVersionField, UnresolvedVersion
from artifact_migrations.core.family import FamilyFields, default_strategies
from artifact_migrations.core.versions import (
    ExplicitListStrategy,
    LegacyScalarStrategy,
    VersionForm,
    VersionResolver,
)


def _default_resolver() -> VersionResolver:
    return VersionResolver(strategies=default_strategies(FamilyFields()), family="dummy")


def test_nested_content_wins_over_top_level_legacy_version():
    doc = {"version": 1, "content": {"migrations": "[101, 102]"}}

    result = _default_resolver().resolve(doc)

    assert result.form is VersionForm.EXPLICIT
    assert result.versions == (101, 102)
    assert result.source.startswith("nested-content")


def test_top_level_explicit_wins_over_legacy_without_reconciliation():
    doc = {"migrations": "[5]", "version": 3}

    result = _default_resolver().resolve(doc)

    assert result.form is VersionForm.EXPLICIT
    assert 1 not in result


def test_falls_back_to_legacy_scalar():
    result = _default_resolver().resolve({"version": 2})
    assert result.form is VersionForm.LEGACY
    assert result.upper_bound == 2


def test_all_strategies_abstaining_is_unresolved(dummy_ctx):
    dummy_ctx.entity_id = "doc-1"

    with pytest.raises(UnresolvedVersion) as ei:
        _default_resolver().resolve({"id": "doc-1", "content": {}}, dummy_ctx)

    assert ei.value.message == "Failed to retrieve migration data"
    assert ei.value.entity_id == "doc-1"
    assert ei.value.details["strategies"] == ["nested-content", "explicit-list", "legacy-scalar"]


def test_malformed_higher_priority_field_is_not_masked():
    doc = {"migrations": "[1, x, 3]", "version": 3}
    with pytest.raises(MalformedVersionField):
        _default_resolver().resolve(doc)


def test_order_is_an_explicit_constructor_input():
    resolver = VersionResolver(
        strategies=(LegacyScalarStrategy(), ExplicitListStrategy()),
        family="dummy",
    )
    result = resolver.resolve({"migrations": "[5]", "version": 3})
    assert result.form is VersionForm.LEGACY


def test_resolver_requires_strategies():
    with pytest.raises(ValueError):
        VersionResolver(strategies=(), family="dummy")


def test_resolution_attempts_are_logged(dummy_ctx):
    _default_resolver().resolve({"version": 2}, dummy_ctx)

    attempts = [e for e in dummy_ctx.events if e["message"] == "version strategy attempted"]
    assert [e["strategy"] for e in attempts] == ["nested-content", "explicit-list", "legacy-scalar"]
    assert [e["abstained"] for e in attempts] == [True, True, False]
    assert dummy_ctx.events[-1]["source"] == "legacy-scalar"


def test_malformed_field_carries_entity_from_context(dummy_ctx):
    dummy_ctx.entity_id = "doc-2"
    dummy_ctx.entity_name = "two"

    with pytest.raises(MalformedVersionField) as ei:
        _default_resolver().resolve({"id": "doc-2", "migrations": "[1, x]"}, dummy_ctx)

    assert ei.value.entity_id == "doc-2"
    assert ei.value.entity_name == "two"
    assert dummy_ctx.events[-1]["message"] == "malformed version field"
    assert dummy_ctx.events[-1]["level"] == "ERROR"
