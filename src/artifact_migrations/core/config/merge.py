# src/artifact_migrations/core/config/merge.py
"""
Deep-merge de configuração (defaults + overrides).

Política de merge (v1):
    - dict + dict  → merge recursivo por chave
    - list         → o override substitui a lista inteira
    - escalar      → o override substitui o valor
    - null na base → aceita override de qualquer tipo
    - tipos distintos → ConfigTypeConflictError, com o caminho pontilhado
      da chave (ex.: "engine.stamp_versions")

Nenhum input é mutado; o resultado é sempre uma estrutura nova.
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def _merge_value(dotted_key: str, base_value: Any, override_value: Any) -> Any:
    if isinstance(base_value, dict) and isinstance(override_value, dict):
        return _merge_dicts(base_value, override_value, prefix=f"{dotted_key}.")

    compatible = (
        base_value is None
        or isinstance(override_value, list)
        or type(base_value) is type(override_value)
    )
    if not compatible:
        raise ConfigTypeConflictError(
            f"Conflito de tipo em '{dotted_key}': "
            f"{type(base_value).__name__} vs {type(override_value).__name__}"
        )
    return deepcopy(override_value)


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any], *, prefix: str) -> Dict[str, Any]:
    merged = {key: deepcopy(value) for key, value in base.items()}
    for key, value in override.items():
        if key in merged:
            merged[key] = _merge_value(prefix + str(key), merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Combina `base` com `override` em um novo dicionário.

    Raises:
        ConfigTypeConflictError: raízes que não são dicts, ou a mesma chave
            com tipos incompatíveis.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            "Deep-merge requer dicts na raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )
    return _merge_dicts(base, override, prefix="")
