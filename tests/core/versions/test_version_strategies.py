# tests/core/versions/test_version_strategies.py
"""
Testes das estratégias de detecção de versão.

Os testes asseguram que:
- o campo de migrações explícitas é lido com a gramática "[1, 2, 5]"
- `null` e "[]" representam o conjunto vazio
- o campo legado `version` N equivale a {1..N}
- a estratégia de conteúdo aninhado delega ao objeto `content`
- ausência de campo é abstenção (None), nunca erro
- campo presente e malformado é erro tipado, nunca abstenção

Limites explícitos:
    - Não valida a ordem de consulta (ver test_version_resolver.py)
    - Não valida aplicação de Steps
"""

import pytest

from artifact_migrations.core.exceptions import MalformedVersionField
from artifact_migrations.core.versions import (
    ExplicitListStrategy,
    LegacyScalarStrategy,
    NestedContentStrategy,
    SatisfiedVersions,
    VersionForm,
    VersionStrategy,
    parse_version_list,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, []),
        ("[]", []),
        ("", []),
        ("[1, 2, 5]", [1, 2, 5]),
        ("[ 101 ,102,, ]", [101, 102]),
        ("7", [7]),
        ([101, "102"], [101, 102]),
    ],
)
def test_parse_version_list_accepts_grammar(raw, expected):
    assert parse_version_list(raw) == expected


@pytest.mark.parametrize("raw", ["[1, x, 3]", "[1.5]", "[-1]", [True], [1.0], {"a": 1}, 3])
def test_parse_version_list_rejects_malformed(raw):
    with pytest.raises(MalformedVersionField):
        parse_version_list(raw)


def test_malformed_error_carries_field_and_token():
    with pytest.raises(MalformedVersionField) as ei:
        parse_version_list("[1, x, 3]", field_name="migrations")

    err = ei.value
    assert err.details["field"] == "migrations"
    assert err.details["token"] == "x"
    assert err.hint


def test_explicit_list_abstains_when_field_is_absent():
    assert ExplicitListStrategy().attempt({"id": "a"}) is None


def test_explicit_list_null_is_empty_set_not_abstention():
    result = ExplicitListStrategy().attempt({"migrations": None})
    assert result is not None
    assert result.form is VersionForm.EXPLICIT
    assert result.versions == ()


def test_explicit_list_gaps_are_legal():
    result = ExplicitListStrategy().attempt({"migrations": "[1, 5]"})
    assert 1 in result and 5 in result
    assert 2 not in result
    assert result.max_version == 5


def test_legacy_scalar_is_contiguous_range():
    result = LegacyScalarStrategy().attempt({"version": 3})
    assert result.form is VersionForm.LEGACY
    assert [v for v in range(0, 6) if v in result] == [1, 2, 3]


def test_legacy_scalar_accepts_digit_string_and_null():
    assert LegacyScalarStrategy().attempt({"version": " 4 "}).upper_bound == 4
    assert LegacyScalarStrategy().attempt({"version": None}).upper_bound == 0


@pytest.mark.parametrize("raw", [-1, "v2", 1.5, True, [1]])
def test_legacy_scalar_rejects_malformed(raw):
    with pytest.raises(MalformedVersionField):
        LegacyScalarStrategy().attempt({"version": raw})


def test_nested_content_delegates_to_content_object():
    strategy = NestedContentStrategy(delegate=ExplicitListStrategy())

    result = strategy.attempt({"content": {"migrations": "[101]"}})

    assert result.versions == (101,)
    assert result.source == "nested-content/explicit-list"


@pytest.mark.parametrize(
    "doc",
    [
        {"migrations": "[101]"},
        {"content": "not-an-object"},
        {"content": {"other": 1}},
    ],
)
def test_nested_content_abstains(doc):
    assert NestedContentStrategy(delegate=ExplicitListStrategy()).attempt(doc) is None


def test_strategies_satisfy_protocol():
    explicit = ExplicitListStrategy()
    for strategy in (explicit, LegacyScalarStrategy(), NestedContentStrategy(delegate=explicit)):
        assert isinstance(strategy, VersionStrategy)


def test_satisfied_versions_above_latest():
    assert SatisfiedVersions.explicit([101, 104, 105]).above(103) == [104, 105]
    assert SatisfiedVersions.legacy(7).above(5) == [7]
    assert SatisfiedVersions.legacy(3).above(5) == []


def test_satisfied_versions_restricted_to_registered():
    assert SatisfiedVersions.legacy(102).restricted_to([101, 102, 103]) == [101, 102]
    assert SatisfiedVersions.explicit([1, 102]).restricted_to([101, 102]) == [102]
