# src/artifact_migrations/core/config/loader.py
"""
Resolução da configuração efetiva do Artifact Migrations.

Fontes, em ordem de precedência crescente:
    1. defaults (obrigatório): por padrão o `defaults.yaml` empacotado
       ao lado deste módulo
    2. arquivo local (opcional): ignorado se o caminho não existir
    3. overrides em memória (apenas via `resolve_config`)

Cada fonte é aplicada sobre a anterior com `deep_merge`. Arquivos vazios
valem como `{}`; qualquer outra raiz que não seja mapa é erro fatal.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import yaml  # PyYAML

from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge

DEFAULTS_PATH = Path(__file__).with_name("defaults.yaml")

PathLike = Union[str, Path]

_PARSERS: Dict[str, Callable[[str], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.loads,
}


def _read_mapping(path: Path) -> Dict[str, Any]:
    """
    Lê um arquivo de configuração como dicionário.

    Raises:
        DefaultsNotFoundError: o arquivo não existe.
        UnsupportedConfigFormatError: extensão fora de .yaml/.yml/.json.
        InvalidConfigRootTypeError: a raiz não é um mapa.
    """
    if not path.is_file():
        raise DefaultsNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    data = parser(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"A raiz de {path.name} deve ser um mapa, recebido: {type(data).__name__}"
        )
    return data


def load_config(
    *,
    defaults_path: Optional[PathLike] = None,
    local_path: Optional[PathLike] = None,
) -> Dict[str, Any]:
    """
    Defaults + arquivo local opcional.

    Raises:
        DefaultsNotFoundError, UnsupportedConfigFormatError,
        InvalidConfigRootTypeError, ConfigTypeConflictError
    """
    effective = _read_mapping(Path(defaults_path) if defaults_path is not None else DEFAULTS_PATH)

    if local_path is not None and Path(local_path).exists():
        effective = deep_merge(effective, _read_mapping(Path(local_path)))

    return effective


def resolve_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Defaults empacotados + overrides em memória (sem arquivo local)."""
    effective = load_config()
    return deep_merge(effective, overrides) if overrides else effective
