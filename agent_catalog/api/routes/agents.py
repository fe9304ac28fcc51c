"""Agent Catalog API – list and get approved agents."""

from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException

from ...agent_store import get_approved_agent, list_approved_agents
from ...errors import AgentCatalogError, AgentNotFoundError, DataCorruptError, InvalidStoreError
from ...logger import get_logger, log_error, log_info
from ..schemas import MessageResponse

logger = get_logger("agent_catalog.api")

router = APIRouter(prefix="/api/agents", tags=["agent-catalog"])


@router.get("", response_model=List[Dict[str, Any]], responses={500: {"model": MessageResponse}})
@router.get("/", response_model=List[Dict[str, Any]], include_in_schema=False)
def list_agents_api():
    """
    List all approved agents, in stored order.

    A missing or non-array store lists as empty.

    Returns:
        [{"id": "...", "name": "...", "approved": true, ...}, ...]

    Raises:
        500: If the store is corrupt or unreadable
    """
    try:
        return list_approved_agents()
    except DataCorruptError as e:
        log_error(logger, "Agent store contains invalid JSON", exc_info=e, path=str(e.path))
        raise HTTPException(status_code=500, detail="Error parsing agent data file.")
    except AgentCatalogError as e:
        log_error(logger, "Error reading agent store", exc_info=e)
        raise HTTPException(status_code=500, detail="Error fetching agents")


@router.get(
    "/{agent_id:path}",
    response_model=Dict[str, Any],
    responses={404: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
def get_agent_api(agent_id: str):
    """
    Get one approved agent by exact id match.

    Args:
        agent_id: Agent identifier (percent-decoded, case-sensitive)

    Returns:
        The first approved record whose id equals agent_id

    Raises:
        404: If no approved agent has that id, or the store does not exist
        500: If the store is corrupt, not an array, or unreadable
    """
    try:
        return get_approved_agent(agent_id)
    except AgentNotFoundError as e:
        if e.store_missing:
            log_info(logger, "Agent store not found", agent_id=agent_id)
            raise HTTPException(status_code=404, detail="Agent not found")
        log_info(logger, "Agent not found or not approved", agent_id=agent_id)
        raise HTTPException(status_code=404, detail="Agent not found or not approved")
    except InvalidStoreError as e:
        log_error(logger, "Agent store does not contain a valid JSON array", path=str(e.path))
        raise HTTPException(status_code=500, detail="Error reading agent data.")
    except DataCorruptError as e:
        log_error(logger, "Agent store contains invalid JSON", exc_info=e, path=str(e.path))
        raise HTTPException(status_code=500, detail="Error parsing agent data file.")
    except AgentCatalogError as e:
        log_error(logger, "Error reading agent store", exc_info=e, agent_id=agent_id)
        raise HTTPException(status_code=500, detail="Error fetching agent details")
