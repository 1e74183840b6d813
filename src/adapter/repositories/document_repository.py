from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.document_repository import IDocumentRepository
from src.domain.entities import Document


class DocumentRepository(IDocumentRepository):
    """Document repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, document: Document) -> Document:
        self.session.add(document)
        await self.session.flush()
        await self.session.refresh(document)
        return document
