"""
JQL for the sprint search
"""

from typing import Tuple

from .exceptions import ConfigurationError
from .models import ReporterConfig

SPRINT_QUERY_TEMPLATE = (
    'issueFunction not in removedAfterSprintStart("{board}", "{sprint}") '
    'AND sprint = "{sprint}" and Project = "{project}" ORDER BY status'
)


def require_board_and_project(config: ReporterConfig) -> Tuple[str, str]:
    """Return (board, project) or raise ConfigurationError if either is missing"""
    if not config.board:
        raise ConfigurationError("Missing board name in conf.")
    if not config.project:
        raise ConfigurationError("Missing project name in conf.")
    return config.board, config.project


def build_sprint_query(sprint_name: str, board_name: str, project_name: str) -> str:
    """
    Issues still in the sprint (not removed after its start) for one board and project,
    ordered by status. Values are substituted verbatim.
    """
    return SPRINT_QUERY_TEMPLATE.format(
        board=board_name,
        sprint=sprint_name,
        project=project_name
    )
