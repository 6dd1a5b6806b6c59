"""Services layer - Application orchestration.

Available services:
- NavigatorService: Edits and queries a location graph for the CLI
"""

from .navigator import NavigatorService

__all__ = ["NavigatorService"]
