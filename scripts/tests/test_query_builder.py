"""
Tests for sprint JQL construction
"""

import pytest

from sprint_status_lib.exceptions import ConfigurationError
from sprint_status_lib.models import ReporterConfig
from sprint_status_lib.query_builder import build_sprint_query, require_board_and_project


class TestBuildSprintQuery:
    """Test suite for build_sprint_query"""

    def test_exact_template(self):
        query = build_sprint_query("Sprint 42", "Team Board", "PROJ")

        assert query == (
            'issueFunction not in removedAfterSprintStart("Team Board", "Sprint 42") '
            'AND sprint = "Sprint 42" and Project = "PROJ" ORDER BY status'
        )

    def test_deterministic(self):
        assert build_sprint_query("S1", "B", "P") == build_sprint_query("S1", "B", "P")

    def test_distinct_inputs_give_distinct_queries(self):
        queries = {
            build_sprint_query("S1", "B", "P"),
            build_sprint_query("S2", "B", "P"),
            build_sprint_query("S1", "B2", "P"),
            build_sprint_query("S1", "B", "P2"),
            build_sprint_query("B", "S1", "P"),
        }

        assert len(queries) == 5


class TestRequireBoardAndProject:

    def test_returns_board_and_project(self):
        config = ReporterConfig.from_dict({"board": "Team Board", "project": "PROJ"})

        assert require_board_and_project(config) == ("Team Board", "PROJ")

    def test_missing_board(self):
        config = ReporterConfig.from_dict({"project": "PROJ"})

        with pytest.raises(ConfigurationError, match="board"):
            require_board_and_project(config)

    @pytest.mark.parametrize("project", [None, ""])
    def test_missing_project(self, project):
        config = ReporterConfig.from_dict({"board": "Team Board", "project": project})

        with pytest.raises(ConfigurationError, match="project"):
            require_board_and_project(config)
