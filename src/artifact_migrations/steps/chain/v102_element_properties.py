"""Step canônico: chain.v102 (propriedades de elementos).

Ajustes por tipo de elemento:
- async-api-trigger: remove `asyncValidationSchema` vazio.
- http-trigger: sem `handleChainFailureAction` → "default"; e, nesse caso,
  sem `chainFailureHandlerContainer` → objeto vazio.
- if: `priority` textual vira inteiro; se não for numérico, fica como está
  e um warning é registrado.
- service-call: remove `before` vazio.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict

from artifact_migrations.core.document.tree import is_empty
from artifact_migrations.core.family import FamilyFields

from .element_properties import ElementPropertiesMigration, Warn

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _drop_if_empty(properties: Dict[str, Any], key: str) -> None:
    if key in properties and is_empty(properties[key]):
        del properties[key]


def _async_api_trigger(properties: Dict[str, Any], warn: Warn) -> None:
    _drop_if_empty(properties, "asyncValidationSchema")


def _http_trigger(properties: Dict[str, Any], warn: Warn) -> None:
    if "handleChainFailureAction" not in properties:
        properties["handleChainFailureAction"] = "default"
        properties.setdefault("chainFailureHandlerContainer", {})


def _if(properties: Dict[str, Any], warn: Warn) -> None:
    priority = properties.get("priority")
    if not isinstance(priority, str):
        return
    if _INTEGER.fullmatch(priority):
        properties["priority"] = int(priority)
    else:
        warn(f"Failed to convert priority value from string to integer: {priority!r}")


def _service_call(properties: Dict[str, Any], warn: Warn) -> None:
    _drop_if_empty(properties, "before")


V102_MIGRATORS = {
    "async-api-trigger": _async_api_trigger,
    "http-trigger": _http_trigger,
    "if": _if,
    "service-call": _service_call,
}


@dataclass
class ChainV102ElementProperties(ElementPropertiesMigration):
    version: int = 102
    description: str = "normalize trigger, condition and service-call properties"
    migrators: Dict[str, Any] = field(default_factory=lambda: dict(V102_MIGRATORS))
    fields: FamilyFields = field(default_factory=FamilyFields)
