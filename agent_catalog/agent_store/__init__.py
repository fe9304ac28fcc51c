"""
Agent Store - the JSON file behind the catalog, plus approval gating.

Provides:
- load_all() / load_for_append() / read_store() - Read the stored records
- save_all(records) / append_agent(record) - Rewrite the store
- list_approved_agents() / get_approved_agent(agent_id) - Approved view of the store
- filter_approved(agents) / find_approved(agents, agent_id) - Approval gate
- prepare_submission(payload) - Validate a new submission
"""

from .approval import (
    filter_approved,
    find_approved,
    get_approved_agent,
    is_approved,
    list_approved_agents,
    prepare_submission,
)
from .storage import (
    append_agent,
    get_store_path,
    load_all,
    load_for_append,
    read_store,
    save_all,
)

__all__ = [
    "append_agent",
    "get_store_path",
    "load_all",
    "load_for_append",
    "read_store",
    "save_all",
    "filter_approved",
    "find_approved",
    "get_approved_agent",
    "is_approved",
    "list_approved_agents",
    "prepare_submission",
]
