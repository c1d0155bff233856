from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalysisResult(BaseModel):
    """Outcome of validating and analyzing one payload."""

    normalized_text: str
    text_content: str = Field(..., description="Normalized text, truncated for storage")
    word_count: int = Field(..., ge=0)
    line_count: int = Field(..., ge=0)


class ProcessedTextRecord(CamelModel):
    id: str
    text_content: str
    word_count: int = Field(..., ge=0)
    line_count: int = Field(..., ge=0)
    processed_at: str

    def to_item(self) -> dict[str, object]:
        """Return the record as a store item keyed by ``id``."""
        return self.model_dump(by_alias=True)


class ProcessResponse(CamelModel):
    message: str
    processing_id: str
    word_count: int
    line_count: int


class ValidationErrorResponse(CamelModel):
    message: str


class InternalErrorResponse(CamelModel):
    message: str
    error: str
    request_id: str
