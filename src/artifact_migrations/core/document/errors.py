"""Erros canônicos do domínio de Documento.

Documentos exportados são a entrada do motor de migração.
Falhas de leitura/parsing/formato devem produzir erros explícitos e estáveis.
"""


class DocumentError(Exception):
    """Erro base do domínio de documento."""


class DocumentFileNotFoundError(DocumentError):
    """Arquivo de documento não existe no caminho informado."""


class UnsupportedDocumentFormatError(DocumentError):
    """Formato de documento não suportado (v1: YAML/JSON)."""


class DocumentParseError(DocumentError):
    """Falha ao parsear YAML/JSON."""


class DocumentShapeError(DocumentError):
    """Nó da árvore não tem o formato esperado (ex.: array onde se esperava objeto)."""
