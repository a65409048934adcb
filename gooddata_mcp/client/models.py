from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SearchResult:
    """One object returned by the workspace semantic search."""

    id: str
    type: str
    title: str

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "SearchResult":
        return cls(
            id=str(raw.get("id", "")),
            type=str(raw.get("type", "")),
            title=str(raw.get("title", "")),
        )
