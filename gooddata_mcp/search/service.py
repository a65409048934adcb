from gooddata_mcp.client.gooddata_client import GoodDataClient
from gooddata_mcp.client.models import SearchResult
from gooddata_mcp.logging.logger import Log


def format_result(result: SearchResult) -> str:
    return f"type: {result.type}; title: {result.title}; id: {result.id};"


class SearchService:
    """Semantic search over workspace objects of one type."""

    def __init__(self, client: GoodDataClient) -> None:
        self._client = client

    async def search(self, term: str, object_type: str) -> list[str]:
        results = await self._client.semantic_search(term, [object_type])
        Log.info(f"Search for {object_type} returned {len(results)} results", term=term)
        return [format_result(result) for result in results]
