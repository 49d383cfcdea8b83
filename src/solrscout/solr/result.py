"""Select result model — Parsed ``/select`` response."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SelectResult(BaseModel):
    """Documents and counts returned by a Solr select request."""

    documents: list[dict[str, Any]] = Field(default_factory=list, description="Returned documents in server order")
    num_found: int = Field(default=0, description="Total number of matching documents")
    start: int = Field(default=0, description="Offset of the first returned document")
    qtime_ms: int = Field(default=0, description="Server-side query time in ms")
    raw: dict[str, Any] = Field(default_factory=dict, description="Full decoded response body", repr=False)

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> SelectResult:
        """Build a result from a decoded Solr JSON response."""
        response_section = data.get("response", {})
        return cls(
            documents=list(response_section.get("docs", [])),
            num_found=response_section.get("numFound", 0),
            start=response_section.get("start", 0),
            qtime_ms=data.get("responseHeader", {}).get("QTime", 0),
            raw=data,
        )

    def get_documents(self) -> list[dict[str, Any]]:
        return self.documents

    def get_num_found(self) -> int:
        return self.num_found

    def __len__(self) -> int:
        return len(self.documents)
