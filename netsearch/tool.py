"""Plugin surface for hosts that call tools by name."""

from __future__ import annotations

from typing import Any

from netsearch.service import NetSearchService


class NetSearchTool:
    """Expose ``NetSearchService.handle`` as a named plugin taking a prompt."""

    name = "net_search"
    description = (
        "Search the web (or the weather forecast for a named Chinese city) and "
        "return results formatted as answering instructions with citations."
    )
    parameters = {
        "type": "object",
        "properties": {
            "prompt": {
                "type": "string",
                "minLength": 1,
                "description": "The user's question",
            },
        },
        "required": ["prompt"],
    }

    def __init__(self, service: NetSearchService | None = None):
        self.service = service or NetSearchService()

    def to_schema(self) -> dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }

    async def execute(self, prompt: str, **kwargs: Any) -> str:
        return await self.service.handle(prompt)
