"""
Contract Validation Module

Валидация meta.json и frontmatter документации против JSON Schema.
"""

from .validators import (
    ContractValidator,
    DocFrontmatterValidator,
    DocsMetaValidator,
    SchemaLoader,
    validate_doc_frontmatter,
    validate_docs_meta,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DocsMetaValidator",
    "DocFrontmatterValidator",
    # Functions
    "validate_docs_meta",
    "validate_doc_frontmatter",
]
