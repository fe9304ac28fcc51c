"""Approval gating for agent records."""

import math
from typing import Any, Dict, List, Optional

from ..errors import AgentNotFoundError, InvalidAgentError, StoreMissingError
from .storage import load_all, read_store


def is_approved(agent: Any) -> bool:
    """
    Check whether a stored record is visible in the catalog.

    Only the JSON boolean true counts; "true", 1 or a missing field do not.
    Entries that are not objects are never approved.
    """
    return isinstance(agent, dict) and agent.get("approved") is True


def filter_approved(agents: List[Any]) -> List[Dict[str, Any]]:
    """
    Filter records down to the approved ones.

    Args:
        agents: Stored records in stored order

    Returns:
        Approved records, original order preserved
    """
    return [agent for agent in agents if is_approved(agent)]


def find_approved(agents: List[Any], agent_id: str) -> Optional[Dict[str, Any]]:
    """
    Find the first approved record whose id equals agent_id exactly.

    Unapproved matches are skipped, so callers cannot tell them apart from
    ids that do not exist.
    """
    for agent in agents:
        if is_approved(agent) and agent.get("id") == agent_id:
            return agent
    return None


def _is_finite(value: Any) -> bool:
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, dict):
        return all(_is_finite(v) for v in value.values())
    if isinstance(value, list):
        return all(_is_finite(v) for v in value)
    return True


def prepare_submission(payload: Any) -> Dict[str, Any]:
    """
    Validate a submitted payload and turn it into a storable record.

    Args:
        payload: Decoded request body

    Returns:
        New dict with the payload's fields in order and approved forced to False

    Raises:
        InvalidAgentError: payload is not an object, has no usable name,
            or holds NaN or Infinity anywhere
    """
    if not isinstance(payload, dict):
        raise InvalidAgentError("Agent payload must be a JSON object")
    if not payload.get("name"):
        raise InvalidAgentError("Agent payload must include a non-empty name")
    if not _is_finite(payload):
        raise InvalidAgentError("Agent payload must not contain NaN or Infinity")

    agent = dict(payload)
    agent["approved"] = False  # clients cannot self-approve
    return agent


def list_approved_agents() -> List[Dict[str, Any]]:
    """Approved agents from the store; a missing or non-array store lists as empty."""
    return filter_approved(load_all())


def get_approved_agent(agent_id: str) -> Dict[str, Any]:
    """
    Look up one approved agent by id.

    Raises:
        AgentNotFoundError: no approved match, or the store file does not exist
        InvalidStoreError: the store is JSON but not an array
        DataCorruptError / StoreIOError: the store cannot be read
    """
    try:
        agents = read_store()
    except StoreMissingError as e:
        raise AgentNotFoundError(agent_id, store_missing=True) from e

    agent = find_approved(agents, agent_id)
    if agent is None:
        raise AgentNotFoundError(agent_id)
    return agent
