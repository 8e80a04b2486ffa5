"""Artifact Migrations: Document (core).

Componentes canônicos da árvore de documento:
 - navegação tolerante (tree)
 - parsing/serialização YAML/JSON (loader)
 - hashing canônico (proveniência)
"""

from .errors import (  # noqa: F401
    DocumentError,
    DocumentFileNotFoundError,
    DocumentParseError,
    DocumentShapeError,
    UnsupportedDocumentFormatError,
)

from .hashing import compute_document_hash  # noqa: F401
from .loader import dump_document, load_document, parse_document  # noqa: F401
