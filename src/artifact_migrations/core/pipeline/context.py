# src/artifact_migrations/core/pipeline/context.py
"""
Contexto de execução de uma migração de documento.

Este módulo define o `MigrationContext`, a estrutura criada para cada
invocação do motor de migração. Ele é o único meio pelo qual resolver,
engine e Steps registram o que aconteceu durante a migração.

O MigrationContext concentra:
    - identidade da invocação (run_id, created_at, family)
    - identificação do documento (entity_id, entity_name), quando conhecida
    - logs estruturados de execução
    - warnings não fatais agrupados por Step

Princípios fundamentais:
    - Isolamento por invocação (um contexto por documento migrado)
    - Ausência de estado global compartilhado
    - Logs são eventos estruturados, não texto livre

Invariantes:
    - Logs sempre incluem `run_id` e `step_id`
    - Warnings são agrupados por `step_id`
    - O contexto é descartado junto com o resultado da migração

Limites explícitos:
    - Não aplica migrações
    - Não resolve versões
    - Não persiste eventos automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4


@dataclass
class MigrationContext:
    """
    Contexto de uma invocação do motor de migração.

    Decisões arquiteturais:
        - Um contexto novo por documento; nunca reutilizado entre invocações
        - Resolver e Steps registram eventos aqui, nunca em estado global
        - Warnings não interrompem a migração

    Invariantes:
        - Eventos incluem sempre `run_id`, `step_id`, `level` e `timestamp`
        - Warnings são associados explicitamente a um Step (ou fase)
    """
    family: str
    run_id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_id: Optional[str] = None
    entity_name: Optional[str] = None

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Eventos & warnings
    # -----------------------------
    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        """Registra um evento; `entity_id` entra no evento quando conhecido."""
        event: Dict[str, Any] = dict(
            run_id=self.run_id,
            family=self.family,
            step_id=step_id,
            level=level,
            message=message,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
        if self.entity_id is not None:
            event["entity_id"] = self.entity_id
        self.events.append({**event, **extra})

    def add_warning(self, *, step_id: str, message: str) -> None:
        self.warnings.setdefault(step_id, []).append(message)
        self.log(step_id=step_id, level="WARNING", message=message)
