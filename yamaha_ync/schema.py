"""Declarative XML paths for every receiver action.

Each action maps onto a list of path segments below ``Main_Zone``. A
segment is either the zone placeholder, resolved per call, or one or more
dot separated node names. A node name may carry an inline value written as
``name=value``; the builder writes that value verbatim while the extractor
only follows the name.

The same table and the same walk are used to build requests and to read
responses, so both directions always agree on the path.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .const import POWER_NODE, ZONE_PLACEHOLDER, Action
from .exceptions import MissingNodeError


@dataclass(frozen=True)
class PathNode:
    name: str
    inline_value: str | None = None


@dataclass(frozen=True)
class PathSegment:
    nodes: tuple[PathNode, ...] = ()
    is_zone: bool = False

    @property
    def name(self):
        return self.nodes[0].name if self.nodes else ZONE_PLACEHOLDER


@dataclass(frozen=True)
class ZoneContext:
    is_zone_b: bool = False
    zone_b_name: str = ""


@dataclass(frozen=True)
class Resolution:
    skip: bool
    nodes: tuple[PathNode, ...] = ()

    @property
    def name(self):
        return self.nodes[0].name if self.nodes else None


class WalkMode(Enum):
    BUILD = "build"
    EXTRACT = "extract"


def parse_segment(text: str) -> PathSegment:
    """Parse ``"Val.Exp=1.Unit=dB"`` style segment text."""
    if text == ZONE_PLACEHOLDER:
        return PathSegment(is_zone=True)

    nodes = []
    for part in text.split("."):
        name, sep, value = part.partition("=")
        nodes.append(PathNode(name, value if sep else None))
    return PathSegment(tuple(nodes))


_SCHEMA_TABLE = {
    Action.POWER: ["Power_Control", POWER_NODE],  # On or Standby
    Action.VOLUME_GET: ["Volume", ZONE_PLACEHOLDER, "Lvl"],  # GetParam
    Action.VOLUME_SET_VALUE: ["Volume", ZONE_PLACEHOLDER, "Lvl", "Val.Exp=1.Unit=dB"],
    Action.VOLUME_SET_UP_DOWN: ["Volume", ZONE_PLACEHOLDER, "Lvl", "Val.Exp.Unit"],  # Up or Down
    Action.MUTE: ["Volume", ZONE_PLACEHOLDER, "Mute"],  # On or Off
}

ACTION_SCHEMAS: dict[Action, tuple[PathSegment, ...]] = {
    action: tuple(parse_segment(text) for text in segments)
    for action, segments in _SCHEMA_TABLE.items()
}


def resolve_segment(segment: PathSegment, ctx: ZoneContext) -> Resolution:
    """Decide whether a segment is skipped, kept or renamed for a zone."""
    if segment.is_zone:
        if not ctx.is_zone_b:
            return Resolution(skip=True)
        return Resolution(skip=False, nodes=(PathNode(ctx.zone_b_name),))

    # Secondary zone power lives next to the main one as <Zone_B_Power>.
    if ctx.is_zone_b and len(segment.nodes) == 1 and segment.name == POWER_NODE:
        return Resolution(
            skip=False, nodes=(PathNode(f"{ctx.zone_b_name}_{POWER_NODE}"),)
        )

    return Resolution(skip=False, nodes=segment.nodes)


def walk_path(action: Action, ctx: ZoneContext, tree: dict, mode: WalkMode):
    """Walk ``tree`` along the schema of ``action``.

    In BUILD mode missing nodes are created, compound segments attach all
    of their nodes as siblings and inline values are written. In EXTRACT
    mode nodes are only looked up, following the first name of each
    segment.

    Returns ``(parent, name)`` of the terminal node so the caller can read
    or overwrite it.
    """
    cursor = tree
    parent, name = None, None
    path = []

    for segment in ACTION_SCHEMAS[action]:
        resolution = resolve_segment(segment, ctx)
        if resolution.skip:
            continue

        head = resolution.name
        path.append(head)

        if mode is WalkMode.BUILD:
            for node in resolution.nodes:
                cursor[node.name] = {} if node.inline_value is None else node.inline_value
        else:
            if isinstance(cursor, list):
                cursor = cursor[0] if cursor else None
            if not isinstance(cursor, dict) or head not in cursor:
                raise MissingNodeError(action, path)

        parent, name = cursor, head
        cursor = cursor[head]

    return parent, name
