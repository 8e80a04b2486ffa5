# src/artifact_migrations/__init__.py
"""
Artifact Migrations: motor de migração de documentos versionados.

Documentos exportados (chains e services, em YAML/JSON) carregam a
informação de quais migrações de esquema já satisfazem. Este pacote
detecta esse conjunto, aplica em ordem crescente apenas os Steps
pendentes e devolve o documento migrado junto com a sua proveniência.

Arquitetura em alto nível:
    - core.document → árvore de documento, parsing e hashing
    - core.versions → estratégias de detecção de versão e resolvedor
    - core.pipeline → protocolo de Step, registry, contexto e resultados
    - core.engine   → planejamento e aplicação das migrações
    - core.config   → defaults empacotados, overrides e settings tipados
    - steps         → Steps concretos das famílias chain e service

Limites explícitos:
    - Não lê nem escreve arquivos zip de exportação
    - Não persiste as entidades resultantes
    - Não valida a semântica de negócio do documento migrado
"""

from .api import get_engine, migrate_document, migrate_file, migrate_text  # noqa: F401
from .families import (  # noqa: F401
    CHAIN,
    SERVICE,
    build_chain_family,
    build_engines,
    build_families,
    build_service_family,
    default_engines,
)

__all__ = [
    "CHAIN",
    "SERVICE",
    "build_chain_family",
    "build_service_family",
    "build_families",
    "build_engines",
    "default_engines",
    "get_engine",
    "migrate_document",
    "migrate_file",
    "migrate_text",
]
