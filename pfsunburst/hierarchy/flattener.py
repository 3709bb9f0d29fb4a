import logging
from collections.abc import Mapping
from typing import Dict, List, Optional, Tuple

from ..errors import InvalidHierarchy
from ..utils import LINE_BREAK, wrap_label
from .colors import BaseColorPolicy, ContrastTable, GroupKeyedPalette
from .structures import FlatHierarchy, FlatNode

logger = logging.getLogger(__name__)


class FlattenerConfig:
    def __init__(
        self,
        wrap_width=None,
        depth_levels=None,
        color_policy=None,
        contrast_table=None,
        identity=None,
        id_prefix=None,
        line_break=None,
    ):
        if wrap_width is None:
            wrap_width = 25
        if not isinstance(wrap_width, int) or wrap_width < 1:
            raise ValueError("wrap_width must be an integer and at least 1")
        self.wrap_width = wrap_width

        if depth_levels is None:
            depth_levels = 3
        if not isinstance(depth_levels, int) or depth_levels < 1:
            raise ValueError("depth_levels must be an integer and at least 1")
        self.depth_levels = depth_levels

        if color_policy is None:
            color_policy = GroupKeyedPalette()
        if not isinstance(color_policy, BaseColorPolicy):
            raise ValueError("color_policy must be an instance of BaseColorPolicy")
        self.color_policy = color_policy

        if contrast_table is None:
            contrast_table = ContrastTable()
        if not isinstance(contrast_table, ContrastTable):
            raise ValueError("contrast_table must be an instance of ContrastTable")
        self.contrast_table = contrast_table

        if identity is None:
            identity = "path"
        if identity not in ["path", "label"]:
            raise ValueError("identity must be either 'path' or 'label'")
        self.identity = identity

        if id_prefix is None:
            id_prefix = "node-"
        self.id_prefix = id_prefix

        if line_break is None:
            line_break = LINE_BREAK
        self.line_break = line_break

    def log_config(self):
        config_log = """
        FlattenerConfig:
            Wrap Width: {wrap_width}
            Depth Levels: {depth_levels}
            Color Policy: {color_policy}
            Contrast Table: {contrast_table}
            Identity: {identity}
            Id Prefix: {id_prefix}
        """.format(
            wrap_width=self.wrap_width,
            depth_levels=self.depth_levels,
            color_policy=self.color_policy,
            contrast_table=self.contrast_table,
            identity=self.identity,
            id_prefix=self.id_prefix,
        )
        return config_log


class TreeFlattener:
    """
    The TreeFlattener turns a nested labeled-tree literal into the parallel
    arrays a sunburst trace expects, plus an index of every node by id.

    The literal has a single root label. Every level above the leaves maps
    child labels to their subtrees, and the level right above the leaves maps
    labels to lists of statements.
    """

    def __init__(self, config: Optional[FlattenerConfig] = None) -> None:
        if config is None:
            config = FlattenerConfig()
        self.wrap_width = config.wrap_width
        self.depth_levels = config.depth_levels
        self.color_policy = config.color_policy
        self.contrast_table = config.contrast_table
        self.identity = config.identity
        self.id_prefix = config.id_prefix
        self.line_break = config.line_break

        logger.info(
            f"Successfully initialized TreeFlattener with Config {config.log_config()}"
        )

    def flatten(self, tree: Mapping) -> FlatHierarchy:
        if not isinstance(tree, Mapping) or len(tree) != 1:
            raise InvalidHierarchy(
                "The hierarchy must be a mapping with exactly one root label"
            )

        run = _FlattenRun(self)
        root_label, root_content = next(iter(tree.items()))
        run.visit(
            root_label,
            root_content,
            parent_id="",
            depth=0,
            sibling_index=0,
            group_label=None,
            label_path=(),
            open_objects=(),
        )

        root_id = run.ids[0]
        accumulate_values(root_id, run.index, self.depth_levels)

        hierarchy = FlatHierarchy(
            ids=run.ids,
            labels=run.labels,
            parents=run.parents,
            values=[run.index[node_id].value for node_id in run.ids],
            colors=run.colors,
            text_colors=run.text_colors,
            index=run.index,
            leaf_depth=self.depth_levels,
        )

        logger.info(
            f"Flattened hierarchy into {len(hierarchy)} nodes "
            f"({run.index[root_id].value} statements)"
        )
        return hierarchy


class _FlattenRun:
    """Mutable state for a single flatten() call."""

    def __init__(self, flattener: TreeFlattener) -> None:
        self.flattener = flattener
        self.ids: List[str] = []
        self.labels: List[str] = []
        self.parents: List[str] = []
        self.colors: List[str] = []
        self.text_colors: List[str] = []
        self.index: Dict[str, FlatNode] = {}
        self.id_cache: Dict[object, str] = {}

    def identity_key(self, label: str, label_path: Tuple[str, ...]):
        if self.flattener.identity == "label":
            return label
        return label_path + (label,)

    def add_node(
        self,
        label,
        parent_id: str,
        depth: int,
        sibling_index: int,
        group_label: Optional[str],
        label_path: Tuple[str, ...],
    ) -> Tuple[str, bool]:
        """Returns the node id and whether a new node was created."""
        if not isinstance(label, str):
            raise InvalidHierarchy(
                f"Labels must be strings, got {type(label).__name__} at depth {depth}"
            )
        if label in label_path:
            raise InvalidHierarchy(
                f"Label {label!r} is revisited along its own ancestor path"
            )

        key = self.identity_key(label, label_path)
        if key in self.id_cache:
            return self.id_cache[key], False

        node_id = f"{self.flattener.id_prefix}{len(self.id_cache)}"
        self.id_cache[key] = node_id

        color = self.flattener.color_policy.color_for(
            label, depth, sibling_index, group_label
        )
        text_color = self.flattener.contrast_table.text_color(color)
        display_label = wrap_label(
            label, self.flattener.wrap_width, self.flattener.line_break
        )

        self.ids.append(node_id)
        self.labels.append(display_label)
        self.parents.append(parent_id)
        self.colors.append(color)
        self.text_colors.append(text_color)
        self.index[node_id] = FlatNode(
            node_id=node_id,
            label=label,
            display_label=display_label,
            parent_id=parent_id,
            depth=depth,
            color=color,
            text_color=text_color,
        )
        if parent_id:
            self.index[parent_id].children.append(node_id)

        return node_id, True

    def visit(
        self,
        label,
        content,
        parent_id: str,
        depth: int,
        sibling_index: int,
        group_label: Optional[str],
        label_path: Tuple[str, ...],
        open_objects: Tuple[int, ...],
    ) -> None:
        if depth == 1:
            group_label = label

        node_id, created = self.add_node(
            label, parent_id, depth, sibling_index, group_label, label_path
        )
        if not created:
            existing = self.index[node_id]
            if existing.depth != depth:
                raise InvalidHierarchy(
                    f"Label {label!r} is reused at depth {depth} but was first "
                    f"seen at depth {existing.depth}"
                )
            logger.warning(
                f"Merging repeated label {label!r} into existing node {node_id}"
            )

        if id(content) in open_objects:
            raise InvalidHierarchy(
                f"Cyclic structure detected under label {label!r}"
            )
        open_objects = open_objects + (id(content),)
        label_path = label_path + (label,)
        leaf_parent_depth = self.flattener.depth_levels - 1

        if depth < leaf_parent_depth:
            if not isinstance(content, Mapping):
                raise InvalidHierarchy(
                    f"Expected a mapping of child labels under {label!r} "
                    f"at depth {depth}, got {type(content).__name__}"
                )
            for child_index, (child_label, child_content) in enumerate(
                content.items()
            ):
                self.visit(
                    child_label,
                    child_content,
                    parent_id=node_id,
                    depth=depth + 1,
                    sibling_index=child_index,
                    group_label=group_label,
                    label_path=label_path,
                    open_objects=open_objects,
                )
            return

        if not isinstance(content, (list, tuple)):
            raise InvalidHierarchy(
                f"Expected a list of statements under {label!r} at depth {depth}, "
                f"got {type(content).__name__}"
            )

        leaf_depth = depth + 1
        for statement_index, statement in enumerate(content):
            statement_group = statement if leaf_depth == 1 else group_label
            statement_id, created = self.add_node(
                statement,
                node_id,
                leaf_depth,
                statement_index,
                statement_group,
                label_path,
            )
            if created:
                continue
            if self.flattener.identity == "path":
                raise InvalidHierarchy(
                    f"Statement {statement!r} appears twice under {label!r}"
                )
            if self.index[statement_id].depth != leaf_depth:
                raise InvalidHierarchy(
                    f"Statement {statement!r} reuses the label of a node at "
                    f"depth {self.index[statement_id].depth}"
                )
            logger.warning(
                f"Merging repeated statement into existing node {statement_id}: "
                f"{statement[:60]!r}"
            )


def accumulate_values(root_id: str, index: Dict[str, FlatNode], leaf_depth: int) -> int:
    """
    Post-order accumulation: a statement is worth 1, every other node is
    worth the sum of its children.
    """
    node = index[root_id]
    if node.depth >= leaf_depth:
        node.value = 1
    else:
        node.value = sum(
            accumulate_values(child_id, index, leaf_depth) for child_id in node.children
        )
    return node.value
