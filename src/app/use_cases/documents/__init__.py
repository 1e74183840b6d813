"""
Document Use Cases
"""

from .create_document_use_case import CreateDocumentUseCase
from .dtos import DocumentCommand, DocumentResponse

__all__ = ["CreateDocumentUseCase", "DocumentCommand", "DocumentResponse"]
