from abc import ABC, abstractmethod

from src.domain.entities import Document


class IDocumentRepository(ABC):
    """Document repository interface - application layer"""

    @abstractmethod
    async def create(self, document: Document) -> Document:
        """Store a document record (the file itself lives elsewhere)"""
        pass
