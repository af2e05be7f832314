"""
Component / status partitioning of sprint issues
"""

from dataclasses import dataclass
from typing import List, Sequence

from .models import CatchAll, IssueRecord, Named, Selector, StatusTable

OTHERS_LABEL = "Others"


@dataclass
class Partition:
    """Issues of one component that fall into one status table"""
    component_label: str
    status_label: str
    issues: List[IssueRecord]

    def __len__(self) -> int:
        return len(self.issues)


def component_label(component: Selector) -> str:
    return OTHERS_LABEL if isinstance(component, CatchAll) else component.name


def filter_by_component(
    issues: Sequence[IssueRecord],
    component: Selector,
    components: Sequence[Selector]
) -> List[IssueRecord]:
    """
    Issues tagged with a named component, or for the catch-all every issue
    not tagged with any of the configured named components.
    """
    if isinstance(component, CatchAll):
        claimed = {c.name for c in components if isinstance(c, Named)}
        return [
            issue for issue in issues
            if all(name not in claimed for name in issue.component_names)
        ]
    return [issue for issue in issues if component.name in issue.component_names]


def filter_by_status(issues: Sequence[IssueRecord], table: StatusTable) -> List[IssueRecord]:
    return [issue for issue in issues if table.matches(issue.status_name)]


def classify(
    issues: Sequence[IssueRecord],
    components: Sequence[Selector],
    status_tables: Sequence[StatusTable]
) -> List[Partition]:
    """
    One partition per (component, status table), components outermost.

    Fetch order is kept inside every partition. An issue may show up in several
    partitions when components or status tables overlap.
    """
    partitions = []
    for component in components:
        by_component = filter_by_component(issues, component, components)
        for table in status_tables:
            partitions.append(Partition(
                component_label=component_label(component),
                status_label=table.label,
                issues=filter_by_status(by_component, table)
            ))
    return partitions
