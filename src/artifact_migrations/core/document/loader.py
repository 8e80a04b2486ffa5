"""Loader canônico de documentos exportados (YAML/JSON).

Notas:
- YAML é o formato de exportação preferencial, JSON é alternativo.
- Para arquivos, o formato é inferido pela extensão.
- A serialização de saída é sempre YAML, preservando a ordem das chaves.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .errors import (
    DocumentFileNotFoundError,
    DocumentParseError,
    UnsupportedDocumentFormatError,
)

_FORMATS_BY_SUFFIX = {".yml": "yaml", ".yaml": "yaml", ".json": "json"}


def parse_document(text: str, *, fmt: str = "yaml") -> Dict[str, Any]:
    """Parseia texto YAML/JSON em uma árvore de documento.

    YAML é um superconjunto de JSON, então `fmt="yaml"` também aceita JSON.

    Raises:
        UnsupportedDocumentFormatError: se `fmt` não for yaml/json.
        DocumentParseError: se o parsing falhar ou a raiz não for um mapa.
    """
    try:
        if fmt == "yaml":
            data = yaml.safe_load(text)
        elif fmt == "json":
            data = json.loads(text)
        else:
            raise UnsupportedDocumentFormatError(f"unsupported document format: {fmt}")
    except UnsupportedDocumentFormatError:
        raise
    except Exception as e:
        raise DocumentParseError(str(e) or "failed to parse document") from e

    if data is None:
        raise DocumentParseError("document is empty")

    if not isinstance(data, dict):
        raise DocumentParseError("Root node of document to import is not an object")

    return data


def load_document(path: Union[str, Path]) -> Dict[str, Any]:
    """Carrega um documento exportado a partir de um arquivo YAML/JSON.

    Raises:
        DocumentFileNotFoundError: se o arquivo não existir.
        UnsupportedDocumentFormatError: se a extensão não for suportada.
        DocumentParseError: se o parsing falhar.
    """
    p = Path(path)
    if not p.exists():
        raise DocumentFileNotFoundError(f"document file not found: {p}")

    fmt = _FORMATS_BY_SUFFIX.get(p.suffix.lower())
    if fmt is None:
        raise UnsupportedDocumentFormatError(f"unsupported document format: {p.suffix}")

    return parse_document(p.read_text(encoding="utf-8"), fmt=fmt)


def dump_document(document: Dict[str, Any]) -> str:
    """Serializa a árvore em YAML sem reordenar chaves."""
    return yaml.safe_dump(
        document,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
