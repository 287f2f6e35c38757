"""Book ingestion endpoint."""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_vocabulary_service
from api.models import BookIngestResponse, BookRequest
from domain.model.vocabulary import Book
from services.vocabulary_service import VocabularyService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["books"])


@router.post("", response_model=BookIngestResponse)
async def ingest_book(
    request: BookRequest,
    service: VocabularyService = Depends(get_vocabulary_service),
):
    """Extract words from a book and add the unseen ones to the dictionary."""
    added = service.add_new_words(Book(content=request.content))
    return BookIngestResponse(
        added=len(added),
        headwords=sorted(v.headword for v in added),
    )
