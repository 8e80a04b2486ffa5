"""Transformações compartilhadas entre famílias de documentos."""

from .promote_content import move_fields_to_content  # noqa: F401
