"""Pydantic models for decision tree nodes, plus structural helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from id3kit.exceptions import TreeInvariantError

if TYPE_CHECKING:
    from id3kit.dataset import Dataset

# ---------------------------------------------------------------------------
# Public models
# ---------------------------------------------------------------------------


class LeafNode(BaseModel):
    """A terminal node predicting one class of the target attribute.

    Attributes:
        kind (Literal["leaf"]): Discriminator field; always `"leaf"`.
        class_code (int): Predicted class, as a code of the target attribute's
            domain.
        gain (float): Always 0.0; leaves do not split.

    Examples:
        >>> LeafNode(class_code=1)
        LeafNode(kind='leaf', class_code=1, gain=0.0)
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["leaf"] = Field(default="leaf", description='Discriminator field. Always "leaf".')
    class_code: int = Field(ge=0, description="Predicted class code of the target attribute.")
    gain: float = Field(default=0.0, description="Information gain; always 0.0 for a leaf.")


class InternalNode(BaseModel):
    """A branching node that splits on one attribute.

    Attributes:
        kind (Literal["internal"]): Discriminator field; always `"internal"`.
        attribute_index (int): Column index of the split attribute.
        gain (float): Information gain achieved by the split, in bits.
        children (list[TreeNode]): One subtree per value code of the split
            attribute; `children[i]` handles code `i`.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["internal"] = Field(default="internal", description='Discriminator field. Always "internal".')
    attribute_index: int = Field(ge=0, description="Column index of the split attribute.")
    gain: float = Field(description="Information gain of the split, in bits.")
    children: list[Annotated[LeafNode | InternalNode, Field(discriminator="kind")]] = Field(
        min_length=1,
        description="One subtree per value code of the split attribute, in code order.",
    )


InternalNode.model_rebuild()

type TreeNode = LeafNode | InternalNode

# ---------------------------------------------------------------------------
# Public interface -- Tree inspection
# ---------------------------------------------------------------------------


def tree_depth(node: TreeNode) -> int:
    """Return the number of edges on the longest root-to-leaf path.

    Args:
        node (TreeNode): Root of the (sub)tree.

    Returns:
        int: 0 for a single leaf.
    """
    if isinstance(node, LeafNode):
        return 0
    return 1 + max(tree_depth(child) for child in node.children)


def count_leaves(node: TreeNode) -> int:
    """Return the number of leaves in the (sub)tree rooted at `node`."""
    if isinstance(node, LeafNode):
        return 1
    return sum(count_leaves(child) for child in node.children)


def validate_tree(root: TreeNode, dataset: Dataset) -> None:
    """Check the structural invariants of a tree against its dataset.

    Every leaf must hold a valid target class code. Every internal node must
    split on a non-target attribute not already used on its path, with one
    child per value of that attribute. No node object may appear twice.

    Args:
        root (TreeNode): Root of the tree to check.
        dataset (Dataset): The dataset the tree was grown from.

    Raises:
        TreeInvariantError: On the first violated invariant.
    """
    seen: set[int] = set()
    stack: list[tuple[TreeNode, frozenset[int]]] = [(root, frozenset())]
    while stack:
        node, used = stack.pop()
        if id(node) in seen:
            raise TreeInvariantError("Tree node is shared between parents")
        seen.add(id(node))

        if isinstance(node, LeafNode):
            if node.class_code >= dataset.target_domain.size:
                raise TreeInvariantError(
                    f"Leaf class code {node.class_code} is outside the target domain "
                    f"of size {dataset.target_domain.size}"
                )
            continue

        attribute = node.attribute_index
        if attribute >= dataset.num_attributes or attribute == dataset.target_index:
            raise TreeInvariantError(f"Internal node splits on invalid attribute {attribute}")
        if attribute in used:
            raise TreeInvariantError(f"Attribute {attribute} is split on twice along one path")
        domain_size = dataset.domains[attribute].size
        if len(node.children) != domain_size:
            raise TreeInvariantError(
                f"Internal node on attribute {attribute} has {len(node.children)} children, "
                f"expected {domain_size}"
            )
        stack.extend((child, used | {attribute}) for child in node.children)
