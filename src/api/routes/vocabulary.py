"""Vocabulary API routes.

Endpoints:
- GET /vocabularies: List every dictionary entry
- GET /vocabularies/random: Draw a random entry
- GET /vocabularies/random/translated: Draw a random entry, translating lazily
- GET /vocabularies/{headword}: Get one entry
- PUT /vocabularies/{headword}: Update translation / known flag
- DELETE /vocabularies/{headword}: Drop the entry and add it to the ignore list

"random" is a reserved segment for GET: an entry with that headword is
listed by GET /vocabularies but cannot be fetched singly. PUT and DELETE
still reach it.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_vocabulary_service
from api.models import VocabularyResponse, VocabularyUpdateRequest
from domain.model.errors import NotFoundError
from domain.model.vocabulary import Vocabulary
from services.vocabulary_service import VocabularyService
from utils import config

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vocabularies", tags=["vocabulary"])


def _get_or_404(service: VocabularyService, headword: str) -> Vocabulary:
    try:
        return service.require_vocabulary(headword.lower())
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Vocabulary not found")


@router.get("", response_model=list[VocabularyResponse])
async def list_vocabularies(service: VocabularyService = Depends(get_vocabulary_service)):
    """Get all dictionary entries in storage order."""
    return [VocabularyResponse.from_domain(v) for v in service.get_all()]


@router.get("/random", response_model=VocabularyResponse)
async def get_random_vocabulary(service: VocabularyService = Depends(get_vocabulary_service)):
    """Draw a random entry, translated or not."""
    vocab = service.get_random_vocabulary()
    if not vocab:
        raise HTTPException(status_code=404, detail="Dictionary is empty")
    return VocabularyResponse.from_domain(vocab)


@router.get("/random/translated", response_model=VocabularyResponse)
async def get_random_translated(
    max_attempts: int | None = Query(None, ge=1, le=1000),
    service: VocabularyService = Depends(get_vocabulary_service),
):
    """Draw a random entry with a translation, translating on demand."""
    attempts = max_attempts or config.max_translation_attempts()
    vocab = service.get_random_translated(max_attempts=attempts)
    if not vocab:
        raise HTTPException(status_code=404, detail="No translated vocabulary found")
    return VocabularyResponse.from_domain(vocab)


@router.get("/{headword}", response_model=VocabularyResponse)
async def get_vocabulary(headword: str, service: VocabularyService = Depends(get_vocabulary_service)):
    return VocabularyResponse.from_domain(_get_or_404(service, headword))


@router.put("/{headword}", response_model=VocabularyResponse)
async def update_vocabulary(
    headword: str,
    request: VocabularyUpdateRequest,
    service: VocabularyService = Depends(get_vocabulary_service),
):
    """Update an entry. Entries not marked known are re-translated before saving."""
    vocab = _get_or_404(service, headword)
    vocab.translation = request.translation
    vocab.known = request.known

    saved = service.update_vocabulary(vocab)

    logger.info("Vocabulary updated", extra={
        "headword": saved.headword,
        "known": saved.known,
        "translated": saved.is_translated,
    })
    return VocabularyResponse.from_domain(saved)


@router.delete("/{headword}")
async def drop_vocabulary(headword: str, service: VocabularyService = Depends(get_vocabulary_service)):
    """Delete an entry and record its headword in the ignore list."""
    vocab = _get_or_404(service, headword)
    service.drop_and_ignore(vocab)
    return {"message": "Vocabulary dropped and ignored", "headword": vocab.headword}
