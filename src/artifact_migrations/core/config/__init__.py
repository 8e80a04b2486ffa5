# src/artifact_migrations/core/config/__init__.py

"""
Camada de configuração do Artifact Migrations.

Responsabilidades do pacote:
    - Carregamento de configuração (defaults empacotados + overrides locais)
    - Resolução via deep-merge determinístico
    - Conversão para settings tipados (Engine e nomes de campo por família)
    - Hash canônico da configuração efetiva

Invariantes:
    - A configuração resolvida é um dicionário puro (dict)
    - Conflitos estruturais são tratados como erro
    - Nomes de campo reconhecidos são strings não vazias
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigValueError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash  # noqa: F401
from .loader import DEFAULTS_PATH, load_config, resolve_config  # noqa: F401
from .merge import deep_merge  # noqa: F401
from .settings import EngineSettings, Settings, build_settings  # noqa: F401
