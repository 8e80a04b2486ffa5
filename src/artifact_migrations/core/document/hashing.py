"""
Hashing canônico de árvores (documentos e configuração).

O hash representa a identidade estrutural de uma árvore e acompanha o
resultado de migração (hash de entrada e de saída), permitindo auditar se
uma segunda passagem alterou algo.

Política de hashing (v1):
    - Chaves de mapa normalizadas para texto antes da serialização
      (o YAML produz chaves int e str no mesmo mapa, ex.: `200` e `default`)
    - JSON canônico: chaves ordenadas, separadores compactos, UTF-8
    - Escalares não-JSON (ex.: datas vindas do YAML) via `str`
    - SHA-256, hexadecimal (64 caracteres)
"""

import hashlib
import json
from typing import Any, Dict


def _normalize_keys(node: Any) -> Any:
    if isinstance(node, dict):
        return {str(key): _normalize_keys(value) for key, value in node.items()}
    if isinstance(node, (list, tuple)):
        return [_normalize_keys(item) for item in node]
    return node


def canonical_sha256(tree: Dict[str, Any], *, what: str = "Documento") -> str:
    if not isinstance(tree, dict):
        raise TypeError(f"{what} para hashing deve ser dict, recebido: {type(tree).__name__}")

    canonical_json = json.dumps(
        _normalize_keys(tree),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )
    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()


def compute_document_hash(document: Dict[str, Any]) -> str:
    """
    Hash determinístico de um documento.

    A ordem original das chaves não influencia o resultado e o input não
    é mutado.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """
    return canonical_sha256(document, what="Documento")
