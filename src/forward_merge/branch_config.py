"""Branch topology configuration.

The configuration file names the release branches and how changes flow
between them::

    {
      "branches": {
        "release-2020-commercial": {"alias": "2020", "milestoneNumber": 266},
        ...
      },
      "mergeOperations": {
        "release-2020-commercial": "release-2021-commercial-emergency",
        ...
      }
    }

``mergeOperations`` maps each branch to the single branch it is merged
forward into.  The key ``"0"`` marks where the chain starts when no base
branch is given.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

CHAIN_START = "0"


class BranchConfigError(ValueError):
    """The branch configuration cannot be interpreted."""


@dataclass(frozen=True)
class Branch:
    """A release branch and its metadata."""

    name: str
    alias: str | None
    milestone_number: int | None
    attributes: dict[str, object] = field(default_factory=dict, compare=False)


@dataclass
class BranchConfiguration:
    """The configuration as read, plus the lookups derived from it.

    ``merge_targets`` is the ordered list of branches a change on the base
    branch must be merged forward into; the base branch itself is not part
    of it.
    """

    config: dict[str, object]
    merge_targets: list[str]
    branch_by_alias: dict[str, Branch]
    branch_name_by_milestone_number: dict[int, str]


def build_merge_targets(
    merge_operations: Mapping[object, str],
    base_branch: str | None = None,
) -> list[str]:
    """Follow ``merge_operations`` from ``base_branch`` to the end of the chain.

    Raises ``BranchConfigError`` if the chain loops back on itself.
    """
    operations = {str(key): value for key, value in merge_operations.items()}
    merge_targets: list[str] = []
    seen = {base_branch} if base_branch else set()
    target = operations.get(base_branch or CHAIN_START)
    while target:
        if target in seen:
            raise BranchConfigError(f"mergeOperations loops back to '{target}'")
        seen.add(target)
        merge_targets.append(target)
        target = operations.get(target)
    return merge_targets


def parse_branch_config(
    raw: str | bytes | Mapping[str, object],
    base_branch: str | None = None,
) -> BranchConfiguration:
    """Build a ``BranchConfiguration`` from JSON text or a decoded document.

    Invalid JSON raises ``json.JSONDecodeError``.
    """
    config = json.loads(raw) if isinstance(raw, (str, bytes)) else dict(raw)

    branch_name_by_milestone_number: dict[int, str] = {}
    branch_by_alias: dict[str, Branch] = {}
    for branch_name, props in (config.get("branches") or {}).items():
        branch = Branch(
            name=branch_name,
            alias=props.get("alias"),
            milestone_number=props.get("milestoneNumber"),
            attributes=dict(props),
        )
        # Later entries replace earlier ones sharing a milestone or alias
        branch_name_by_milestone_number[branch.milestone_number] = branch_name
        branch_by_alias[branch.alias] = branch

    merge_targets = build_merge_targets(config.get("mergeOperations") or {}, base_branch)
    logger.debug("merge targets from %s: %s", base_branch or "chain start", merge_targets)

    return BranchConfiguration(
        config=config,
        merge_targets=merge_targets,
        branch_by_alias=branch_by_alias,
        branch_name_by_milestone_number=branch_name_by_milestone_number,
    )


def read_branch_config(
    path: str | os.PathLike[str],
    base_branch: str | None = None,
) -> BranchConfiguration:
    """Read the configuration file at ``path``."""
    with open(path, encoding="utf-8") as fh:
        return parse_branch_config(fh.read(), base_branch)
