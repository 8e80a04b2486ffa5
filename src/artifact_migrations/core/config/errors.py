# src/artifact_migrations/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Artifact Migrations.

As exceções aqui definidas representam violações estruturais explícitas
da configuração, e não falhas de migração de documento.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de migração (ver core.exceptions)
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Permite captura genérica de erros de configuração e distinção clara
    entre falhas estruturais de setup e falhas de migração.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Arquivo de configuração base (defaults) não encontrado.

    O arquivo de defaults é obrigatório: sem ele não existe configuração
    efetiva válida. Não é inferido nem criado automaticamente.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato do arquivo de configuração não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz da configuração não é um dicionário (`dict`)."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"engine": {"stamp_versions": true}}
        - override: {"engine": "off"}

    Nenhum merge parcial é produzido em caso de conflito.
    """


class InvalidConfigValueError(ConfigError):
    """Valor com tipo/forma inválida em uma chave conhecida (ex.: nome de campo vazio)."""
