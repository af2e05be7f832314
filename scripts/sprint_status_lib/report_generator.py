"""
Sprint status report: cache/fetch, classification and row assembly
"""

import logging
from functools import partial
from typing import List, Optional, Sequence

from .cache import RemoteFetch, ResultCache
from .classifier import Partition, classify
from .exceptions import DataIntegrityError
from .flags import flag_marker, is_flagged
from .models import IssueRecord, ReporterConfig
from .query_builder import build_sprint_query, require_board_and_project
from .renderer import ConsoleRenderer, Row

logger = logging.getLogger(__name__)

MISSING_SUMMARY = "-"

STALE_CACHE_NOTICE = (
    "NB! output was printed from cache - making sure it's fresh enough is the user's "
    "responsibility. (Check/clear `cache` subfolder.)"
)


def assemble_row(issue: IssueRecord) -> Row:
    """(flag + status, key, summary, issue type) for one issue"""
    if issue.status_name is None:
        raise DataIntegrityError(f"Issue {issue.key} has no status")
    if issue.issue_type_name is None:
        raise DataIntegrityError(f"Issue {issue.key} has no issue type")

    marker = flag_marker(is_flagged(issue.custom_fields))
    summary = issue.summary if issue.summary is not None else MISSING_SUMMARY
    return (f"{marker}{issue.status_name}", issue.key, summary, issue.issue_type_name)


def assemble_rows(issues: Sequence[IssueRecord]) -> List[Row]:
    return [assemble_row(issue) for issue in issues]


def partition_header(partition: Partition) -> str:
    return (
        f"******* {partition.component_label} in {partition.status_label} "
        f": {len(partition)} *******"
    )


class SprintStatusReport:
    """Prints the grouped status report for one sprint"""

    def __init__(
        self,
        config: ReporterConfig,
        remote_fn: RemoteFetch,
        cache: Optional[ResultCache] = None,
        renderer: Optional[ConsoleRenderer] = None
    ):
        self.config = config
        self.remote_fn = remote_fn
        self.cache = cache or ResultCache()
        self.renderer = renderer or ConsoleRenderer()

        self.issues: List[IssueRecord] = []
        self.used_cache = False

    def fetch_data(self, sprint: str) -> None:
        """Load the sprint's issues from cache, or from Jira on a miss"""
        # Checked before touching cache or network
        board, project = require_board_and_project(self.config)

        self.issues, self.used_cache = self.cache.fetch_or_load(
            sprint,
            partial(build_sprint_query, sprint, board, project),
            self.remote_fn,
            self.config.fields
        )

    def partitions(self) -> List[Partition]:
        return classify(self.issues, self.config.components, self.config.status_tables)

    def render(self) -> None:
        tables_per_component = len(self.config.status_tables)
        for i, partition in enumerate(self.partitions(), 1):
            self.renderer.line(partition_header(partition))
            self.renderer.table(assemble_rows(partition.issues))
            self.renderer.line()
            if i % tables_per_component == 0:
                self.renderer.line()
                self.renderer.line()

        if self.used_cache:
            self.renderer.line(STALE_CACHE_NOTICE)

    def run(self, sprint: str) -> bool:
        """Fetch and print the report; returns whether cached data was used"""
        self.fetch_data(sprint)
        self.render()
        return self.used_cache
