"""Catalog exceptions – raised by the agent store and translated by the API layer."""

from pathlib import Path


class AgentCatalogError(Exception):
    """Base for all agent catalog errors."""
    pass


class AgentNotFoundError(AgentCatalogError):
    """No approved agent with the requested id."""

    def __init__(self, agent_id: str, store_missing: bool = False):
        self.agent_id = agent_id
        self.store_missing = store_missing
        super().__init__(f"Agent not found: {agent_id}")


class StoreMissingError(AgentCatalogError):
    """Backing store file does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Agent store not found: {path}")


class DataCorruptError(AgentCatalogError):
    """Backing store content is not parseable JSON."""

    def __init__(self, path: Path, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Agent store contains invalid JSON: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidStoreError(DataCorruptError):
    """Backing store is valid JSON but the top-level value is not an array."""

    def __init__(self, path: Path, found_type: str):
        self.found_type = found_type
        super().__init__(path, f"expected a JSON array, found {found_type}")


class InvalidAgentError(AgentCatalogError):
    """Submitted agent payload failed shape validation."""
    pass


class StoreIOError(AgentCatalogError):
    """Any other filesystem failure while reading or writing the store."""

    def __init__(self, path: Path, operation: str):
        self.path = path
        self.operation = operation  # "read" or "write"
        super().__init__(f"Failed to {operation} agent store: {path}")
