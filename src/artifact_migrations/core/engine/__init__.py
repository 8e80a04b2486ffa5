"""
Engine do Artifact Migrations.

Este pacote contém a implementação responsável por **planejar** e
**aplicar** migrações de documento, a partir das versões que o documento
já satisfaz.

Componentes principais:
    - planner → Steps pendentes em ordem crescente; versões desconhecidas
    - engine  → resolução, guarda de versão mais nova, aplicação, marcação

Invariantes:
    - Steps pendentes são aplicados em ordem crescente de versão
    - Cada Step é aplicado no máximo uma vez por invocação
    - Falhas abortam a invocação inteira, sem resultado parcial
"""

from .engine import MigrationEngine  # noqa: F401
from .planner import find_unknown_versions, plan_migrations  # noqa: F401
