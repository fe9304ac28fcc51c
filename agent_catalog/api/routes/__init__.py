"""API routes for the agent catalog."""

from . import agents, submissions

__all__ = [
    "agents",
    "submissions",
]
