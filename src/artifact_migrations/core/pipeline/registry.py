# src/artifact_migrations/core/pipeline/registry.py
"""
Registro de Steps de migração de uma família de documentos.

Este módulo define o `MigrationRegistry`, responsável por registrar os
Steps de uma família e validar a integridade estrutural do conjunto
antes de qualquer migração.

Responsabilidades do módulo:
    - Validar unicidade de `step.version`
    - Expor os Steps em ordem crescente de versão
    - Congelar o registro após a montagem (leitura apenas)

Decisões arquiteturais:
    - A validação ocorre no registro, antes do Engine
    - Erros estruturais são tratados como falhas fatais
    - Um registry selado é compartilhado entre invocações concorrentes
      sem lock, pois nunca mais é mutado

Invariantes:
    - Cada Step registrado possui uma versão inteira positiva única
    - `list()` reflete sempre a ordem crescente de versão

Limites explícitos:
    - Não decide quais Steps estão pendentes (papel do planner)
    - Não executa Steps
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .step import MigrationStep


class DuplicateMigrationVersionError(ValueError):
    """
    Exceção levantada quando dois Steps da mesma família declaram a mesma versão.

    Decisões arquiteturais:
        - A duplicidade é tratada como erro fatal de montagem da família
        - A exceção é lançada no momento do registro, antes de qualquer migração

    Limites explícitos:
        - Não tenta renumerar Steps automaticamente
    """


class SealedRegistryError(RuntimeError):
    """Tentativa de registrar Step em um registry já selado."""


@dataclass
class MigrationRegistry:
    """
    Registro canônico de Steps de uma família, ordenado por versão.

    Invariantes:
        - Cada `version` é única no registry
        - Apenas inteiros positivos são aceitos como versão
        - Após `seal()`, o registry é somente leitura
    """

    _steps: Dict[int, MigrationStep] = field(default_factory=dict, init=False, repr=False)
    _sealed: bool = field(default=False, init=False, repr=False)

    @classmethod
    def of(cls, steps: Iterable[MigrationStep]) -> "MigrationRegistry":
        registry = cls()
        for step in steps:
            registry.add(step)
        return registry.seal()

    def add(self, step: MigrationStep) -> None:
        if self._sealed:
            raise SealedRegistryError("registry is sealed")

        version = getattr(step, "version", None)
        if isinstance(version, bool) or not isinstance(version, int) or version <= 0:
            raise ValueError("step.version must be a positive integer")

        if version in self._steps:
            raise DuplicateMigrationVersionError(f"Duplicate migration version: {version}")

        self._steps[version] = step

    def seal(self) -> "MigrationRegistry":
        self._sealed = True
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get(self, version: int) -> MigrationStep:
        return self._steps[version]

    def versions(self) -> List[int]:
        return sorted(self._steps)

    def list(self) -> List[MigrationStep]:
        return [self._steps[v] for v in self.versions()]

    @property
    def latest_version(self) -> Optional[int]:
        return max(self._steps) if self._steps else None

    def __contains__(self, version: object) -> bool:
        return version in self._steps

    def __len__(self) -> int:
        return len(self._steps)
