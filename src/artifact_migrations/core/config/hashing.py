# src/artifact_migrations/core/config/hashing.py
"""
Hash da configuração efetiva.

Identifica a configuração usada para montar famílias e Engines e
acompanha os Settings para auditoria. Usa a mesma política canônica dos
documentos (JSON ordenado, SHA-256).
"""

from typing import Any, Dict

from artifact_migrations.core.document.hashing import canonical_sha256


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """
    return canonical_sha256(config, what="Config")
