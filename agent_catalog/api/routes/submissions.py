"""Agent submission API – queue new agents for moderation."""

from typing import Any

from fastapi import APIRouter, Body, HTTPException

from ...agent_store import append_agent, prepare_submission
from ...errors import AgentCatalogError, DataCorruptError, InvalidAgentError
from ...logger import get_logger, log_error
from ..schemas import MessageResponse, SubmissionResponse

logger = get_logger("agent_catalog.api")

router = APIRouter(prefix="/api", tags=["agent-submissions"])


@router.post(
    "/submit-agent",
    status_code=201,
    response_model=SubmissionResponse,
    responses={400: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
def submit_agent_api(payload: Any = Body(None)):
    """
    Submit a new agent. It is stored unapproved and stays hidden until moderated.

    Body:
        JSON object with at least a non-empty "name"; any other fields are kept as-is.
        A client-supplied "approved" value is overwritten with false.

    Returns:
        {"message": "...", "agent": {...stored record...}}

    Raises:
        400: If the body is not a JSON object with a name
        500: If the existing store is corrupt or the write fails
    """
    try:
        agent = prepare_submission(payload)
    except InvalidAgentError:
        raise HTTPException(status_code=400, detail="Invalid agent data submitted")

    try:
        stored = append_agent(agent)
    except InvalidAgentError:
        raise HTTPException(status_code=400, detail="Invalid agent data submitted")
    except DataCorruptError as e:
        log_error(logger, "Agent store contains invalid JSON, cannot add new agent", exc_info=e, path=str(e.path))
        raise HTTPException(
            status_code=500,
            detail="Failed to parse existing agent data. Cannot add new agent."
        )
    except AgentCatalogError as e:
        log_error(logger, "Error processing agent submission", exc_info=e)
        raise HTTPException(status_code=500, detail="Error saving agent data")

    return {
        "message": "Agent submitted successfully and awaiting approval",
        "agent": stored
    }
