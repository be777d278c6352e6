"""Parsing of decomposition markers embedded in issue bodies and plans.

Sub-issue bodies carry HTML comments written when the parent was
decomposed::

    <!-- leonidas-parent: #100 -->
    <!-- leonidas-order: 2/3 -->
    <!-- leonidas-depends: #101 -->

Markers are case-sensitive. When a marker appears more than once the first
occurrence is used.
"""

import re

from leonidas.models.domain import SubIssueMetadata

PARENT_PATTERN = re.compile(r"<!--\s*leonidas-parent:\s*#(\d+)\s*-->")
ORDER_PATTERN = re.compile(r"<!--\s*leonidas-order:\s*(\d+)/(\d+)\s*-->")
DEPENDS_PATTERN = re.compile(r"<!--\s*leonidas-depends:\s*#(\d+)\s*-->")

# "- [ ] #36 — title" or "- [x] #36 — title" in a decomposed plan
CHECKLIST_ITEM_PATTERN = re.compile(r"^\s*-\s*\[[ xX]\]\s*#(\d+)", re.MULTILINE)


def parse_sub_issue_metadata(issue_body: str) -> SubIssueMetadata | None:
    """Parse sub-issue markers.

    Returns None unless both the parent and the order markers are present.
    """
    parent_match = PARENT_PATTERN.search(issue_body)
    order_match = ORDER_PATTERN.search(issue_body)

    if not parent_match or not order_match:
        return None

    depends_match = DEPENDS_PATTERN.search(issue_body)

    return SubIssueMetadata(
        parent_issue_number=int(parent_match.group(1)),
        order=int(order_match.group(1)),
        total=int(order_match.group(2)),
        depends_on=int(depends_match.group(1)) if depends_match else None,
    )


def extract_parent_issue_number(issue_body: str) -> int | None:
    match = PARENT_PATTERN.search(issue_body)
    return int(match.group(1)) if match else None


def extract_sub_issue_numbers(plan_text: str) -> list[int]:
    """Issue numbers referenced by checklist items, in document order.

    Duplicates are kept. References outside checklist items are ignored.
    """
    return [int(number) for number in CHECKLIST_ITEM_PATTERN.findall(plan_text)]
