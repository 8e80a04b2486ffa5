"""
Core do Artifact Migrations.

Este pacote contém a implementação canônica, independente de família,
do motor de migração de documentos versionados.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de I/O durante a migração
    - orientado a contratos explícitos

Componentes principais:
    - document → árvore de documento, parsing YAML/JSON, hashing
    - versions → estratégias de detecção, resolvedor, marcadores
    - pipeline → protocolo de Step, registry, contexto, resultados
    - engine   → planejamento e aplicação de migrações
    - config   → defaults + overrides locais, settings tipados

Princípios fundamentais:
    - Nenhuma decisão silenciosa: abstenção e erro são coisas distintas
    - Nada que o motor não entende é descartado
    - Registries e estratégias são montados uma vez e nunca mutados

Limites explícitos:
    - Não valida semântica de negócio do documento migrado
    - Não decide se o documento migrado deve ser persistido
"""
