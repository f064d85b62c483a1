"""modules/tool_usage: External service wrappers."""

from modules.tool_usage.geocoding_tool import GeocodingTool

__all__ = ["GeocodingTool"]
