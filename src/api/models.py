"""Pydantic models for API request/response."""

from pydantic import BaseModel, Field, field_validator

from domain.model.vocabulary import Vocabulary


class BookRequest(BaseModel):
    """Request model for ingesting a book."""
    content: str = Field(..., description="Raw English prose")


class BookIngestResponse(BaseModel):
    """Response model for book ingestion."""
    added: int = Field(..., ge=0, description="Number of new dictionary entries")
    headwords: list[str] = Field(default_factory=list, description="Newly added headwords, sorted")


class VocabularyResponse(BaseModel):
    """Response model for a dictionary entry."""
    headword: str
    translation: str = ""
    known: bool = False

    @classmethod
    def from_domain(cls, vocab: Vocabulary) -> 'VocabularyResponse':
        return cls(headword=vocab.headword, translation=vocab.translation, known=vocab.known)


class VocabularyUpdateRequest(BaseModel):
    """Request model for updating a dictionary entry."""
    translation: str = ""
    known: bool = False

    @field_validator('translation')
    @classmethod
    def strip_translation(cls, v: str) -> str:
        return v.strip()
