# tests/core/config/test_config_merge.py
"""
Testes do deep-merge de configuração.

Política validada:
    - dict → merge recursivo
    - list → sobrescrita total
    - escalar → sobrescrita direta
    - conflito de tipos → ConfigTypeConflictError
    - nenhum input é mutado
"""

import pytest

from artifact_migrations.core.config import ConfigTypeConflictError, deep_merge


def test_dicts_are_merged_recursively():
    base = {"engine": {"stamp_versions": True, "reject_newer_versions": True}}
    override = {"engine": {"stamp_versions": False}}

    assert deep_merge(base, override) == {
        "engine": {"stamp_versions": False, "reject_newer_versions": True}
    }


def test_lists_are_replaced():
    assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}


def test_new_keys_are_added_and_null_base_accepts_anything():
    assert deep_merge({"a": None}, {"a": {"x": 1}, "b": 2}) == {"a": {"x": 1}, "b": 2}


def test_type_conflict_fails():
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"engine": {"stamp_versions": True}}, {"engine": {"stamp_versions": "yes"}})


def test_inputs_are_not_mutated():
    base = {"families": {"chain": {"fields": {"id": "id"}}}}
    override = {"families": {"chain": {"fields": {"id": "uuid"}}}}

    merged = deep_merge(base, override)

    assert base["families"]["chain"]["fields"]["id"] == "id"
    merged["families"]["chain"]["fields"]["name"] = "x"
    assert "name" not in override["families"]["chain"]["fields"]
