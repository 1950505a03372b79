"""
Pydantic models for OEIS sequences and tool inputs/outputs.

This module defines the structured I/O models shared by the backends and the
MCP handlers:
- SequenceRecord: One matched OEIS sequence
- FindRequest / FindResponse: Input and output of find_by_id
- SearchRequest / SearchResponse: Input and output of search_by_subsequence
- SequenceAnalysisRequest: Arguments of the sequence_analysis prompt
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator
from typing import Any, List


class SequenceRecord(BaseModel):
    """A single OEIS sequence as returned by the search API."""
    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=0, description="Sequence number (45 for A000045)")
    data: str = Field(..., description="Comma-separated leading terms")
    name: str = Field(..., description="Sequence title")
    comment: List[str] = Field(default_factory=list, description="Comment lines")
    formula: List[str] = Field(default_factory=list, description="Formula lines")
    xref: List[str] = Field(default_factory=list, description="Cross-references to other sequences")
    keyword: str = Field(..., description="Keyword flags (e.g. 'nonn,easy')")

    @field_validator("comment", "formula", "xref", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        # The API omits these fields or sends null when a sequence has no entries
        if value is None:
            return []
        return value


class EmptyRequest(BaseModel):
    """Input model for tools without arguments."""
    model_config = ConfigDict(frozen=True)


class FindRequest(BaseModel):
    """Input model for find_by_id tool."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="OEIS sequence ID (e.g., 'A000045')")


class FindResponse(BaseModel):
    """Response model for find_by_id tool."""
    model_config = ConfigDict(frozen=True)

    result: SequenceRecord


class SearchRequest(BaseModel):
    """Input model for search_by_subsequence tool."""
    model_config = ConfigDict(frozen=True)

    subsequence: List[StrictInt] = Field(..., description="Consecutive terms to search for (e.g., [1, 1, 2, 3, 5])")


class SearchResponse(BaseModel):
    """Response model for search_by_subsequence tool."""
    model_config = ConfigDict(frozen=True)

    results: List[SequenceRecord] = Field(default_factory=list)


class SequenceAnalysisRequest(BaseModel):
    """Arguments for the sequence_analysis prompt."""
    model_config = ConfigDict(frozen=True)

    sequence_id: str = Field(..., description="The OEIS sequence ID to analyze (e.g., \"A000045\")")
