# src/artifact_migrations/core/config/settings.py
"""
Settings tipados a partir da configuração efetiva.

Converte o dicionário resolvido pelo loader em valores imutáveis usados
na montagem das famílias e do Engine. Chaves conhecidas com valor inválido
são rejeitadas explicitamente; nenhum valor é coagido.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields as dataclass_fields
from typing import Any, Dict

from artifact_migrations.core.family import FamilyFields

from .errors import InvalidConfigValueError
from .hashing import compute_config_hash


@dataclass(frozen=True)
class EngineSettings:
    stamp_versions: bool = True
    reject_newer_versions: bool = False


@dataclass(frozen=True)
class Settings:
    engine: EngineSettings
    families: Dict[str, FamilyFields] = field(default_factory=dict)
    config_hash: str = ""

    def fields_for(self, family: str) -> FamilyFields:
        return self.families.get(family, FamilyFields())


def _section(config: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = config.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidConfigValueError(f"'{key}' must be a mapping")
    return value


def _engine_settings(section: Dict[str, Any]) -> EngineSettings:
    values = {}
    for name in ("stamp_versions", "reject_newer_versions"):
        if name not in section:
            continue
        if not isinstance(section[name], bool):
            raise InvalidConfigValueError(f"engine.{name} must be a bool")
        values[name] = section[name]
    return EngineSettings(**values)


def _family_fields(family: str, section: Dict[str, Any]) -> FamilyFields:
    raw = _section(section, "fields")
    known = {f.name for f in dataclass_fields(FamilyFields)}

    unknown = sorted(set(raw) - known)
    if unknown:
        raise InvalidConfigValueError(f"families.{family}.fields has unknown keys: {unknown}")

    for key, value in raw.items():
        if not isinstance(value, str) or not value.strip():
            raise InvalidConfigValueError(
                f"families.{family}.fields.{key} must be a non-empty string"
            )
    return FamilyFields(**raw)


def build_settings(config: Dict[str, Any]) -> Settings:
    """
    Monta Settings a partir da configuração efetiva.

    Raises:
        InvalidConfigValueError: tipo inválido em chave conhecida.
    """
    families_section = _section(config, "families")
    families = {
        name: _family_fields(name, _section(families_section, name))
        for name in families_section
    }
    return Settings(
        engine=_engine_settings(_section(config, "engine")),
        families=families,
        config_hash=compute_config_hash(config),
    )
