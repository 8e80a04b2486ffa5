"""
Árvore de documento semi-estruturado.

Documentos exportados (chains, services) chegam ao motor já parseados como
árvores Python puras:

    - objeto  → dict (ordem de inserção preservada)
    - array   → list
    - escalar → str | int | float | bool | None

Este módulo concentra a navegação e a leitura tolerante dessas árvores,
de modo que Steps e estratégias não repitam checagens de tipo.

Invariantes:
    - Um documento válido tem raiz do tipo objeto
    - Nenhuma função deste módulo muta a árvore recebida
    - Nós ausentes são representados por None em `path`
"""

from __future__ import annotations

from copy import deepcopy
from enum import Enum
from typing import Any, Dict, Iterator, List, Union

from .errors import DocumentShapeError

Scalar = Union[str, int, float, bool, None]
Node = Union[Dict[str, Any], List[Any], Scalar]


class NodeKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    SCALAR = "scalar"


def is_object(node: Any) -> bool:
    return isinstance(node, dict)


def is_array(node: Any) -> bool:
    return isinstance(node, list)


def node_kind(node: Any) -> NodeKind:
    if is_object(node):
        return NodeKind.OBJECT
    if is_array(node):
        return NodeKind.ARRAY
    return NodeKind.SCALAR


def deep_copy(node: Node) -> Node:
    return deepcopy(node)


def path(node: Any, *keys: str) -> Any:
    """Navega por chaves de objeto; retorna None se algum nível não existir."""
    current = node
    for key in keys:
        if not is_object(current) or key not in current:
            return None
        current = current[key]
    return current


def iter_children(node: Any) -> Iterator[Any]:
    """Itera filhos diretos (valores de objeto ou itens de array); escalares não têm filhos."""
    if is_object(node):
        yield from node.values()
    elif is_array(node):
        yield from node


def as_text(node: Any) -> str:
    """Representação textual de um escalar.

    Ausente/None e nós compostos produzem "" (não há texto para eles);
    booleanos seguem a forma JSON ("true"/"false").
    """
    if node is None or is_object(node) or is_array(node):
        return ""
    if isinstance(node, bool):
        return "true" if node else "false"
    return str(node)


def is_blank(node: Any) -> bool:
    """Ausente/null ou texto só com espaços. Objetos e arrays nunca são "blank"."""
    if is_object(node) or is_array(node):
        return False
    return not as_text(node).strip()


def is_empty(node: Any) -> bool:
    """Ausente/null, container sem filhos ou texto em branco."""
    if is_object(node) or is_array(node):
        return len(node) == 0
    return is_blank(node)


def require_object(node: Any, where: str) -> Dict[str, Any]:
    if not is_object(node):
        raise DocumentShapeError(
            f"Expected object at '{where}', got {node_kind(node).value}"
        )
    return node
