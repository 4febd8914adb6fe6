"""netsearch: web search orchestration that renders citation-ready answers."""

from netsearch.config import NetSearchConfig, load_config
from netsearch.service import NetSearchService
from netsearch.tool import NetSearchTool

__version__ = "0.1.0"

__all__ = ["NetSearchConfig", "NetSearchService", "NetSearchTool", "load_config"]
