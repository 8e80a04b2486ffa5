"""
Estratégias de detecção de versão de documento.

Cada estratégia inspeciona um documento e tenta reportar o conjunto de
versões já satisfeitas. O resultado é:

    - SatisfiedVersions → a estratégia reconheceu os campos de versão
    - None              → abstenção ("não sei"), que NÃO é erro

Um campo reconhecido porém malformado é erro (`MalformedVersionField`),
nunca abstenção: indica input estruturalmente quebrado, não ausência
de informação.

Variantes (da maior para a menor prioridade, na ordem padrão):
    1. NestedContentStrategy → delega ao objeto aninhado em "content"
    2. ExplicitListStrategy  → campo "migrations" ("[1, 2, 5]" | null)
    3. LegacyScalarStrategy  → campo legado "version" (N ≡ {1..N})

A ordem não é descoberta por reflexão: é uma tupla explícita passada ao
VersionResolver.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from artifact_migrations.core.errors import malformed_version_field

from .types import SatisfiedVersions

_INTEGER_TOKEN = re.compile(r"[0-9]+")


@runtime_checkable
class VersionStrategy(Protocol):
    """Contrato de uma estratégia de detecção: sem estado, pura."""

    name: str

    def attempt(self, document: Dict[str, Any]) -> Optional[SatisfiedVersions]:
        ...


def _parse_token(token: str, *, field_name: str, raw_value: Any) -> int:
    if not _INTEGER_TOKEN.fullmatch(token):
        raise malformed_version_field(field_name=field_name, raw_value=raw_value, token=token)
    return int(token)


def parse_version_list(raw_value: Any, *, field_name: str = "migrations") -> List[int]:
    """
    Converte o valor do campo de migrações em lista de versões.

    Gramática (v1):
        - null              → []
        - "[1, 2, 5]"       → [1, 2, 5]
          colchetes removidos, split por vírgula, trim, tokens vazios
          descartados, cada token restante deve ser inteiro não negativo
        - [1, 2, 5] (array) → mesma regra por elemento

    Raises:
        MalformedVersionField: token não inteiro ou tipo de valor inesperado.
    """
    if raw_value is None:
        return []

    if isinstance(raw_value, str):
        tokens = raw_value.replace("[", "").replace("]", "").split(",")
    elif isinstance(raw_value, list):
        tokens = []
        for item in raw_value:
            if isinstance(item, bool) or not isinstance(item, (int, str)):
                raise malformed_version_field(
                    field_name=field_name, raw_value=raw_value, token=repr(item)
                )
            tokens.append(str(item))
    else:
        raise malformed_version_field(field_name=field_name, raw_value=raw_value)

    versions: List[int] = []
    for token in tokens:
        token = token.strip()
        if not token:
            continue
        versions.append(_parse_token(token, field_name=field_name, raw_value=raw_value))
    return versions


@dataclass(frozen=True)
class ExplicitListStrategy:
    """Lê o campo de migrações explícitas; abstém-se se o campo não existir."""

    field_name: str = "migrations"
    name: str = "explicit-list"

    def attempt(self, document: Dict[str, Any]) -> Optional[SatisfiedVersions]:
        if self.field_name not in document:
            return None
        versions = parse_version_list(document[self.field_name], field_name=self.field_name)
        return SatisfiedVersions.explicit(versions, source=self.name)


@dataclass(frozen=True)
class LegacyScalarStrategy:
    """Lê o campo legado de versão escalar N, equivalente a {1..N}."""

    field_name: str = "version"
    name: str = "legacy-scalar"

    def attempt(self, document: Dict[str, Any]) -> Optional[SatisfiedVersions]:
        if self.field_name not in document:
            return None

        raw = document[self.field_name]
        if raw is None:
            upper = 0
        elif isinstance(raw, int) and not isinstance(raw, bool) and raw >= 0:
            upper = raw
        elif isinstance(raw, str) and _INTEGER_TOKEN.fullmatch(raw.strip()):
            upper = int(raw.strip())
        else:
            raise malformed_version_field(
                field_name=self.field_name,
                raw_value=raw,
                hint="O campo legado de versão deve ser um inteiro não negativo.",
            )
        return SatisfiedVersions.legacy(upper, source=self.name)


@dataclass(frozen=True)
class NestedContentStrategy:
    """Aplica a estratégia delegada ao objeto aninhado no campo de conteúdo."""

    delegate: VersionStrategy
    content_field: str = "content"
    name: str = "nested-content"

    def attempt(self, document: Dict[str, Any]) -> Optional[SatisfiedVersions]:
        content = document.get(self.content_field)
        if not isinstance(content, dict):
            return None
        result = self.delegate.attempt(content)
        if result is None:
            return None
        return SatisfiedVersions(
            form=result.form,
            versions=result.versions,
            upper_bound=result.upper_bound,
            source=f"{self.name}/{result.source}",
        )
