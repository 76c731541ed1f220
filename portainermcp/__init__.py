"""MCP server exposing Portainer management operations as tools."""

__version__ = "0.1.0"