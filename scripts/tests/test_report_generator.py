"""
Tests for row assembly and the end-to-end sprint status report
"""

from unittest.mock import Mock

import pytest

from sprint_status_lib.cache import ResultCache
from sprint_status_lib.classifier import Partition
from sprint_status_lib.exceptions import ConfigurationError, DataIntegrityError
from sprint_status_lib.models import ReporterConfig
from sprint_status_lib.report_generator import (
    STALE_CACHE_NOTICE,
    SprintStatusReport,
    assemble_row,
    assemble_rows,
    partition_header,
)

IMPEDIMENT_FLAG = [{
    "disabled": False,
    "id": "10000",
    "self": "https://jira.example.com/rest/api/2/customFieldOption/10000",
    "value": "Impediment"
}]


class TestAssembleRows:
    """Test suite for row assembly"""

    def test_unflagged_row(self, issue_factory):
        issue = issue_factory("PROJ-1", "In progress", summary="Fix login", issue_type="Bug")

        assert assemble_row(issue) == ("In progress", "PROJ-1", "Fix login", "Bug")

    def test_absent_flag_field_leaves_status_untouched(self, issue_factory):
        issue = issue_factory("PROJ-1", "Done", custom_fields={})

        assert assemble_row(issue)[0] == "Done"

    def test_flagged_row_prefixes_status(self, issue_factory):
        issue = issue_factory("PROJ-1", "Review", custom_fields={"customfield_10000": IMPEDIMENT_FLAG})

        assert assemble_row(issue)[0] == "🚩 Review"

    def test_missing_summary_is_dash(self, issue_factory):
        issue = issue_factory("PROJ-1", "Done", summary=None)

        assert assemble_row(issue)[2] == "-"

    def test_missing_status_is_integrity_error(self, issue_factory):
        with pytest.raises(DataIntegrityError, match="PROJ-1"):
            assemble_row(issue_factory("PROJ-1", None))

    def test_missing_issue_type_is_integrity_error(self, issue_factory):
        with pytest.raises(DataIntegrityError):
            assemble_row(issue_factory("PROJ-1", "Done", issue_type=None))

    def test_rows_keep_order(self, issue_factory):
        rows = assemble_rows([issue_factory("PROJ-2"), issue_factory("PROJ-1")])

        assert [r[1] for r in rows] == ["PROJ-2", "PROJ-1"]

    def test_partition_header(self, issue_factory):
        partition = Partition("Others", "Review/In progress", [issue_factory("PROJ-1")])

        assert partition_header(partition) == "******* Others in Review/In progress : 1 *******"


class TestSprintStatusReport:
    """Test suite for SprintStatusReport"""

    @pytest.fixture
    def config(self):
        return ReporterConfig.from_dict({
            "board": "Team Board",
            "project": "PROJ",
            "components": ["Backend", "*"],
            "status_tables": [["Done"], ["*"]],
        })

    @pytest.fixture
    def renderer(self):
        return Mock()

    def printed_lines(self, renderer):
        return [c.args[0] if c.args else "" for c in renderer.line.call_args_list]

    def test_run_fetches_and_renders(self, config, renderer, tmp_path, issue_factory):
        issues = [
            issue_factory("PROJ-1", "Done", ["Backend"]),
            issue_factory("PROJ-2", "Review", ["UI"]),
        ]
        remote_fn = Mock(return_value=issues)
        report = SprintStatusReport(config, remote_fn, ResultCache(tmp_path / "cache"), renderer)

        used_cache = report.run("Sprint 1")

        assert used_cache is False
        query = remote_fn.call_args.args[0]
        assert 'removedAfterSprintStart("Team Board", "Sprint 1")' in query
        assert remote_fn.call_args.args[2] == 1000
        headers = [l for l in self.printed_lines(renderer) if l.startswith("*******")]
        assert headers == [
            "******* Backend in Done : 1 *******",
            "******* Backend in * : 1 *******",
            "******* Others in Done : 0 *******",
            "******* Others in * : 1 *******",
        ]
        assert STALE_CACHE_NOTICE not in self.printed_lines(renderer)
        assert renderer.table.call_count == 4

    def test_cache_hit_prints_stale_notice(self, config, renderer, tmp_path, issue_factory):
        cache = ResultCache(tmp_path / "cache")
        cache.store(cache.path_for("Sprint 1"), [issue_factory("PROJ-1", "Done", ["Backend"])])
        remote_fn = Mock()
        report = SprintStatusReport(config, remote_fn, cache, renderer)

        assert report.run("Sprint 1") is True
        remote_fn.assert_not_called()
        assert self.printed_lines(renderer)[-1] == STALE_CACHE_NOTICE

    def test_missing_board_fails_before_cache_or_remote(self, renderer, tmp_path):
        config = ReporterConfig.from_dict({"project": "PROJ"})
        cache = Mock()
        remote_fn = Mock()
        report = SprintStatusReport(config, remote_fn, cache, renderer)

        with pytest.raises(ConfigurationError):
            report.run("Sprint 1")

        cache.fetch_or_load.assert_not_called()
        remote_fn.assert_not_called()
        renderer.line.assert_not_called()

    def test_component_separated_by_blank_lines(self, config, renderer, tmp_path):
        report = SprintStatusReport(config, Mock(return_value=[]), ResultCache(tmp_path / "cache"), renderer)

        report.run("Sprint 1")

        lines = self.printed_lines(renderer)
        # header, blank after table, per table; two more blanks per component
        assert lines[:8] == [
            "******* Backend in Done : 0 *******", "",
            "******* Backend in * : 0 *******", "",
            "", "",
            "******* Others in Done : 0 *******", "",
        ]
