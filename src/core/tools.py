"""Metadatos de las herramientas MCP (nombre, descripción, inputSchema).

Es dato declarativo: el host MCP y la selección de herramientas por parte del
LLM dependen de estos textos, enums, límites y defaults literalmente. Los
defaults aquí descritos NO se inyectan en las peticiones.
"""

from __future__ import annotations

import copy
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.errors import UnknownToolError

COUNTRIES: tuple[str, ...] = (
    "afghanistan", "albania", "algeria", "andorra", "angola", "argentina", "armenia",
    "australia", "austria", "azerbaijan", "bahamas", "bahrain", "bangladesh", "barbados",
    "belarus", "belgium", "belize", "benin", "bhutan", "bolivia", "bosnia and herzegovina",
    "botswana", "brazil", "brunei", "bulgaria", "burkina faso", "burundi", "cambodia",
    "cameroon", "canada", "cape verde", "central african republic", "chad", "chile", "china",
    "colombia", "comoros", "congo", "costa rica", "croatia", "cuba", "cyprus",
    "czech republic", "denmark", "djibouti", "dominican republic", "ecuador", "egypt",
    "el salvador", "equatorial guinea", "eritrea", "estonia", "ethiopia", "fiji", "finland",
    "france", "gabon", "gambia", "georgia", "germany", "ghana", "greece", "guatemala",
    "guinea", "haiti", "honduras", "hungary", "iceland", "india", "indonesia", "iran", "iraq",
    "ireland", "israel", "italy", "jamaica", "japan", "jordan", "kazakhstan", "kenya",
    "kuwait", "kyrgyzstan", "latvia", "lebanon", "lesotho", "liberia", "libya",
    "liechtenstein", "lithuania", "luxembourg", "madagascar", "malawi", "malaysia",
    "maldives", "mali", "malta", "mauritania", "mauritius", "mexico", "moldova", "monaco",
    "mongolia", "montenegro", "morocco", "mozambique", "myanmar", "namibia", "nepal",
    "netherlands", "new zealand", "nicaragua", "niger", "nigeria", "north korea",
    "north macedonia", "norway", "oman", "pakistan", "panama", "papua new guinea",
    "paraguay", "peru", "philippines", "poland", "portugal", "qatar", "romania", "russia",
    "rwanda", "saudi arabia", "senegal", "serbia", "singapore", "slovakia", "slovenia",
    "somalia", "south africa", "south korea", "south sudan", "spain", "sri lanka", "sudan",
    "sweden", "switzerland", "syria", "taiwan", "tajikistan", "tanzania", "thailand", "togo",
    "trinidad and tobago", "tunisia", "turkey", "turkmenistan", "uganda", "ukraine",
    "united arab emirates", "united kingdom", "united states", "uruguay", "uzbekistan",
    "venezuela", "vietnam", "yemen", "zambia", "zimbabwe",
)

CRAWL_CATEGORIES: tuple[str, ...] = (
    "Careers", "Blog", "Documentation", "About", "Pricing",
    "Community", "Developers", "Contact", "Media",
)

_FAVICON = {
    "type": "boolean",
    "description": "Whether to include the favicon URL for each result",
    "default": False,
}

_FORMAT = {
    "type": "string",
    "enum": ["markdown", "text"],
    "description": (
        "The format of the extracted web page content. markdown returns content in markdown "
        "format. text returns plain text and may increase latency."
    ),
    "default": "markdown",
}


class ToolDefinition(BaseModel):
    """Herramienta tal como la consume el host MCP."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    input_schema: dict[str, Any] = Field(..., alias="inputSchema")

    @property
    def required(self) -> list[str]:
        return list(self.input_schema.get("required", []))

    @property
    def properties(self) -> dict[str, Any]:
        return self.input_schema.get("properties", {})


def _site_walk_properties(subject: str, depth_hint: str) -> dict[str, Any]:
    """Propiedades comunes de crawl/map (solo difieren en dos textos)."""

    return {
        "url": {
            "type": "string",
            "description": f"The root URL to begin the {subject}",
        },
        "max_depth": {
            "type": "integer",
            "description": (
                f"Max depth of the {subject}. Defines how far from the base URL the crawler "
                f"can explore{depth_hint}"
            ),
            "default": 1,
            "minimum": 1,
        },
        "max_breadth": {
            "type": "integer",
            "description": "Max number of links to follow per level of the tree (i.e., per page)",
            "default": 20,
            "minimum": 1,
        },
        "limit": {
            "type": "integer",
            "description": "Total number of links the crawler will process before stopping",
            "default": 50,
            "minimum": 1,
        },
        "instructions": {
            "type": "string",
            "description": "Natural language instructions for the crawler",
        },
        "select_paths": {
            "type": "array",
            "items": {"type": "string"},
            "description": (
                "Regex patterns to select only URLs with specific path patterns "
                "(e.g., /docs/.*, /api/v1.*)"
            ),
            "default": [],
        },
        "select_domains": {
            "type": "array",
            "items": {"type": "string"},
            "description": (
                "Regex patterns to select crawling to specific domains or subdomains "
                "(e.g., ^docs\\.example\\.com$)"
            ),
            "default": [],
        },
        "allow_external": {
            "type": "boolean",
            "description": "Whether to allow following links that go to external domains",
            "default": False,
        },
        "categories": {
            "type": "array",
            "items": {"type": "string", "enum": list(CRAWL_CATEGORIES)},
            "description": "Filter URLs using predefined categories like documentation, blog, api, etc",
            "default": [],
        },
    }


SEARCH_TOOL = ToolDefinition(
    name="tavily-search",
    description=(
        "A powerful web search tool that provides comprehensive, real-time results using "
        "Tavily's AI search engine. Returns relevant web content with customizable parameters "
        "for result count, content type, and domain filtering. Ideal for gathering current "
        "information, news, and detailed web content analysis."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "Search query"},
            "search_depth": {
                "type": "string",
                "enum": ["basic", "advanced"],
                "description": "The depth of the search. It can be 'basic' or 'advanced'",
                "default": "basic",
            },
            "topic": {
                "type": "string",
                "enum": ["general", "news"],
                "description": (
                    "The category of the search. This will determine which of our agents will "
                    "be used for the search"
                ),
                "default": "general",
            },
            "days": {
                "type": "number",
                "description": (
                    "The number of days back from the current date to include in the search "
                    "results. This specifies the time frame of data to be retrieved. Please note "
                    "that this feature is only available when using the 'news' search topic"
                ),
                "default": 3,
            },
            "time_range": {
                "type": "string",
                "description": (
                    "The time range back from the current date to include in the search "
                    "results. This feature is available for both 'general' and 'news' search topics"
                ),
                "enum": ["day", "week", "month", "year", "d", "w", "m", "y"],
            },
            "start_date": {
                "type": "string",
                "description": (
                    "Will return all results after the specified start date. Required to be "
                    "written in the format YYYY-MM-DD."
                ),
                "default": "",
            },
            "end_date": {
                "type": "string",
                "description": (
                    "Will return all results before the specified end date. Required to be "
                    "written in the format YYYY-MM-DD"
                ),
                "default": "",
            },
            "max_results": {
                "type": "number",
                "description": "The maximum number of search results to return",
                "default": 10,
                "minimum": 5,
                "maximum": 20,
            },
            "include_images": {
                "type": "boolean",
                "description": "Include a list of query-related images in the response",
                "default": False,
            },
            "include_image_descriptions": {
                "type": "boolean",
                "description": (
                    "Include a list of query-related images and their descriptions in the response"
                ),
                "default": False,
            },
            "include_raw_content": {
                "type": "boolean",
                "description": "Include the cleaned and parsed HTML content of each search result",
                "default": False,
            },
            "include_domains": {
                "type": "array",
                "items": {"type": "string"},
                "description": (
                    "A list of domains to specifically include in the search results, if the "
                    "user asks to search on specific sites set this to the domain of the site"
                ),
                "default": [],
            },
            "exclude_domains": {
                "type": "array",
                "items": {"type": "string"},
                "description": (
                    "List of domains to specifically exclude, if the user asks to exclude a "
                    "domain set this to the domain of the site"
                ),
                "default": [],
            },
            "country": {
                "type": "string",
                "enum": list(COUNTRIES),
                "description": (
                    "Boost search results from a specific country. This will prioritize content "
                    "from the selected country in the search results. Available only if topic is "
                    "general. Country names MUST be written in lowercase, plain English, with "
                    "spaces and no underscores."
                ),
                "default": "",
            },
            "include_favicon": dict(_FAVICON),
        },
        "required": ["query"],
    },
)

EXTRACT_TOOL = ToolDefinition(
    name="tavily-extract",
    description=(
        "A powerful web content extraction tool that retrieves and processes raw content from "
        "specified URLs, ideal for data collection, content analysis, and research tasks."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "urls": {
                "type": "array",
                "items": {"type": "string"},
                "description": "List of URLs to extract content from",
            },
            "extract_depth": {
                "type": "string",
                "enum": ["basic", "advanced"],
                "description": (
                    "Depth of extraction - 'basic' or 'advanced', if usrls are linkedin use "
                    "'advanced' or if explicitly told to use advanced"
                ),
                "default": "basic",
            },
            "include_images": {
                "type": "boolean",
                "description": "Include a list of images extracted from the urls in the response",
                "default": False,
            },
            "format": dict(_FORMAT),
            "include_favicon": dict(_FAVICON),
        },
        "required": ["urls"],
    },
)

CRAWL_TOOL = ToolDefinition(
    name="tavily-crawl",
    description=(
        "A powerful web crawler that initiates a structured web crawl starting from a specified "
        "base URL. The crawler expands from that point like a tree, following internal links "
        "across pages. You can control how deep and wide it goes, and guide it to focus on "
        "specific sections of the site."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            **_site_walk_properties("crawl", "."),
            "extract_depth": {
                "type": "string",
                "enum": ["basic", "advanced"],
                "description": (
                    "Advanced extraction retrieves more data, including tables and embedded "
                    "content, with higher success but may increase latency"
                ),
                "default": "basic",
            },
            "format": dict(_FORMAT),
            "include_favicon": dict(_FAVICON),
        },
        "required": ["url"],
    },
)

MAP_TOOL = ToolDefinition(
    name="tavily-map",
    description=(
        "A powerful web mapping tool that creates a structured map of website URLs, allowing "
        "you to discover and analyze site structure, content organization, and navigation "
        "paths. Perfect for site audits, content discovery, and understanding website "
        "architecture."
    ),
    inputSchema={
        "type": "object",
        "properties": _site_walk_properties("mapping", ""),
        "required": ["url"],
    },
)

_TOOLS: tuple[ToolDefinition, ...] = (SEARCH_TOOL, EXTRACT_TOOL, CRAWL_TOOL, MAP_TOOL)


def get_tools() -> list[ToolDefinition]:
    """Las cuatro herramientas, en el orden en que se anuncian al host.

    Se devuelven copias profundas: el host puede mutar los schemas sin tocar
    las definiciones del módulo.
    """

    return [tool.model_copy(deep=True) for tool in _TOOLS]


def get_tool(name: str) -> ToolDefinition:
    for tool in _TOOLS:
        if tool.name == name:
            return tool.model_copy(deep=True)
    raise UnknownToolError(name)


def tool_schema_json(tool: ToolDefinition) -> dict[str, Any]:
    """Forma JSON del host: `{"name", "description", "inputSchema"}`."""

    return copy.deepcopy(tool.model_dump(by_alias=True))
