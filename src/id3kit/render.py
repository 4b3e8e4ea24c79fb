"""Indented-text and Graphviz-dot renderings of a built decision tree."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, TextIO

import graphviz

from id3kit.models import InternalNode, LeafNode, TreeNode

if TYPE_CHECKING:
    from id3kit.dataset import Dataset

DEFAULT_TEXT_MARKER: str = "-"
DEFAULT_GAIN_PRECISION: int = 6
DEFAULT_GRAPH_NAME: str = "ID3"

# ---------------------------------------------------------------------------
# Public interface -- Text
# ---------------------------------------------------------------------------


def render_text(
    root: TreeNode,
    dataset: Dataset,
    sink: TextIO,
    *,
    marker: str = DEFAULT_TEXT_MARKER,
    gain_precision: int = DEFAULT_GAIN_PRECISION,
) -> None:
    """Write the tree as indented text, one node per line in pre-order.

    Each line is prefixed with `marker` repeated once per level of depth. A
    leaf prints the target attribute name and its decoded class; an internal
    node prints its split attribute name and information gain.

    Args:
        root (TreeNode): Root of the tree.
        dataset (Dataset): The dataset the tree was grown from, used to decode
            attribute names and values.
        sink (TextIO): Writable text stream.
        marker (str): Indentation marker repeated per depth level.
        gain_precision (int): Decimal places used to print gains.

    Examples:
        >>> render_text(root, dataset, sys.stdout)  # doctest: +SKIP
        Outlook (gain=0.246750)
        -Humidity (gain=0.970951)
        --PlayTennis: No
        --PlayTennis: Yes
        -PlayTennis: Yes
        ...
    """
    target_name = dataset.target_domain.name
    stack: list[tuple[TreeNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        prefix = marker * depth
        if isinstance(node, LeafNode):
            sink.write(f"{prefix}{target_name}: {dataset.target_domain.decode(node.class_code)}\n")
            continue
        attribute_name = dataset.domains[node.attribute_index].name
        sink.write(f"{prefix}{attribute_name} (gain={node.gain:.{gain_precision}f})\n")
        stack.extend((child, depth + 1) for child in reversed(node.children))


def to_text(
    root: TreeNode,
    dataset: Dataset,
    *,
    marker: str = DEFAULT_TEXT_MARKER,
    gain_precision: int = DEFAULT_GAIN_PRECISION,
) -> str:
    """Return the indented-text rendering as a string.

    Args:
        root (TreeNode): Root of the tree.
        dataset (Dataset): The dataset the tree was grown from.
        marker (str): Indentation marker repeated per depth level.
        gain_precision (int): Decimal places used to print gains.

    Returns:
        str: The rendering, one line per node.
    """
    buffer = io.StringIO()
    render_text(root, dataset, buffer, marker=marker, gain_precision=gain_precision)
    return buffer.getvalue()


# ---------------------------------------------------------------------------
# Public interface -- Graphviz
# ---------------------------------------------------------------------------


def build_digraph(root: TreeNode, dataset: Dataset, *, graph_name: str = DEFAULT_GRAPH_NAME) -> graphviz.Digraph:
    """Build a Graphviz digraph of the tree.

    Node ids are assigned `0, 1, 2, ...` in pre-order. Leaves are plain-text
    nodes labelled with the decoded class; internal nodes are boxes labelled
    with the split attribute name. The edge to child `i` is labelled with the
    decoded value of code `i` of the split attribute.

    Args:
        root (TreeNode): Root of the tree.
        dataset (Dataset): The dataset the tree was grown from.
        graph_name (str): Name written after the `digraph` keyword.

    Returns:
        graphviz.Digraph: The graph; its `source` is the dot text.
    """
    dot = graphviz.Digraph(name=graph_name)
    next_id = 0
    stack: list[tuple[TreeNode, int | None, str | None]] = [(root, None, None)]
    while stack:
        node, parent_id, edge_label = stack.pop()
        node_id = str(next_id)
        next_id += 1

        if isinstance(node, LeafNode):
            dot.node(node_id, label=dataset.target_domain.decode(node.class_code), shape="plaintext")
        else:
            dot.node(node_id, label=dataset.domains[node.attribute_index].name, shape="box")
        if parent_id is not None:
            dot.edge(str(parent_id), node_id, label=edge_label)

        if isinstance(node, InternalNode):
            domain = dataset.domains[node.attribute_index]
            stack.extend(
                (child, int(node_id), domain.decode(code))
                for code, child in reversed(list(enumerate(node.children)))
            )
    return dot


def render_dot(
    root: TreeNode,
    dataset: Dataset,
    sink: TextIO,
    *,
    graph_name: str = DEFAULT_GRAPH_NAME,
) -> None:
    """Write the tree as Graphviz dot text and flush the sink.

    Args:
        root (TreeNode): Root of the tree.
        dataset (Dataset): The dataset the tree was grown from.
        sink (TextIO): Writable text stream.
        graph_name (str): Name written after the `digraph` keyword.
    """
    sink.write(build_digraph(root, dataset, graph_name=graph_name).source)
    sink.flush()


def to_dot(root: TreeNode, dataset: Dataset, *, graph_name: str = DEFAULT_GRAPH_NAME) -> str:
    """Return the Graphviz dot rendering as a string.

    Args:
        root (TreeNode): Root of the tree.
        dataset (Dataset): The dataset the tree was grown from.
        graph_name (str): Name written after the `digraph` keyword.

    Returns:
        str: Dot source beginning with `digraph` and ending with `}`.
    """
    return build_digraph(root, dataset, graph_name=graph_name).source
