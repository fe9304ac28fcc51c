"""HTTP API for the agent catalog."""
