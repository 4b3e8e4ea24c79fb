"""Tests for the indented-text and Graphviz-dot tree renderings."""

from __future__ import annotations

import io
import re

import graphviz
from pytest_check import check

from id3kit.builder import build_tree
from id3kit.dataset import Dataset
from id3kit.models import InternalNode, LeafNode
from id3kit.render import build_digraph, render_dot, render_text, to_dot, to_text

_NODE_PATTERN = re.compile(r'^\t(\d+) \[label="?([^"\s]+)"? shape=(\w+)\]$', re.MULTILINE)
_EDGE_PATTERN = re.compile(r'^\t(\d+) -> (\d+) \[label="?([^"\]]+)"?\]$', re.MULTILINE)

_PLAY_TENNIS_TEXT = """\
Outlook (gain=0.246750)
-Humidity (gain=0.970951)
--PlayTennis: No
--PlayTennis: Yes
-PlayTennis: Yes
-Wind (gain=0.970951)
--PlayTennis: Yes
--PlayTennis: No
"""


class _FlushRecorder(io.StringIO):
    """StringIO that records whether `flush` was called."""

    def __init__(self) -> None:
        super().__init__()
        self.flushed = False

    def flush(self) -> None:
        self.flushed = True
        super().flush()


def _two_way_dataset() -> tuple[Dataset, InternalNode]:
    """Build a dataset whose tree is a root with exactly two leaf children.

    Returns:
        tuple[Dataset, InternalNode]: The dataset and the root of its tree.
    """
    dataset = Dataset.from_rows([["calm", "Stay"], ["gusty", "Go"], ["calm", "Stay"]], "label", ["wind", "label"])
    root = build_tree(dataset)
    assert isinstance(root, InternalNode)
    return dataset, root


class TestRenderText:
    """Tests for `render_text` and `to_text`."""

    def test_play_tennis_text_rendering(self, play_tennis: Dataset) -> None:
        """The PlayTennis tree should render in pre-order with depth markers."""
        # Arrange
        root = build_tree(play_tennis)
        sink = io.StringIO()

        # Act
        render_text(root, play_tennis, sink)

        # Assert
        assert sink.getvalue() == _PLAY_TENNIS_TEXT

    def test_custom_marker_and_precision(self, play_tennis: Dataset) -> None:
        """The marker is repeated per depth level and gains use the given precision."""
        root = build_tree(play_tennis)

        lines = to_text(root, play_tennis, marker="..", gain_precision=2).splitlines()

        with check:
            assert lines[0] == "Outlook (gain=0.25)"
        with check:
            assert lines[1] == "..Humidity (gain=0.97)"
        with check:
            assert lines[2] == "....PlayTennis: No"

    def test_single_leaf_has_no_prefix(self) -> None:
        """A one-leaf tree renders as a single unprefixed line."""
        dataset = Dataset.from_rows([["x", "yes"]], "label", ["a", "label"])

        text = to_text(LeafNode(class_code=0), dataset)

        assert text == "label: yes\n"


class TestRenderDot:
    """Tests for `render_dot`, `to_dot` and `build_digraph`."""

    def test_two_child_root_has_two_labelled_edges(self) -> None:
        """A two-way split should emit exactly two edges labelled by code position."""
        # Arrange
        dataset, root = _two_way_dataset()

        # Act
        source = to_dot(root, dataset)

        # Assert
        edges = _EDGE_PATTERN.findall(source)
        with check:
            assert edges == [("0", "1", "calm"), ("0", "2", "gusty")]
        nodes = _NODE_PATTERN.findall(source)
        with check:
            assert nodes == [("0", "wind", "box"), ("1", "Stay", "plaintext"), ("2", "Go", "plaintext")]

    def test_header_and_closing_brace(self) -> None:
        """Output should start with the digraph header and end with a closing brace."""
        dataset, root = _two_way_dataset()

        source = to_dot(root, dataset, graph_name="Weather")

        with check:
            assert source.startswith("digraph Weather {")
        with check:
            assert source.rstrip().endswith("}")

    def test_play_tennis_ids_are_pre_order(self, play_tennis: Dataset) -> None:
        """Node ids should be assigned 0, 1, 2, ... in pre-order."""
        # Arrange
        root = build_tree(play_tennis)

        # Act
        source = to_dot(root, play_tennis)

        # Assert
        nodes = _NODE_PATTERN.findall(source)
        with check:
            assert [node_id for node_id, _, _ in nodes] == [str(index) for index in range(8)]
        with check:
            assert [label for _, label, _ in nodes] == [
                "Outlook",
                "Humidity",
                "No",
                "Yes",
                "Yes",
                "Wind",
                "Yes",
                "No",
            ]
        with check:
            assert _EDGE_PATTERN.findall(source) == [
                ("0", "1", "Sunny"),
                ("1", "2", "High"),
                ("1", "3", "Normal"),
                ("0", "4", "Overcast"),
                ("0", "5", "Rain"),
                ("5", "6", "Weak"),
                ("5", "7", "Strong"),
            ]

    def test_render_dot_writes_and_flushes_sink(self) -> None:
        """`render_dot` should write the digraph source and flush the sink."""
        # Arrange
        dataset, root = _two_way_dataset()
        sink = _FlushRecorder()

        # Act
        render_dot(root, dataset, sink)

        # Assert
        with check:
            assert sink.getvalue() == to_dot(root, dataset)
        with check:
            assert sink.flushed

    def test_build_digraph_returns_graphviz_object(self) -> None:
        """The underlying graph object should be a `graphviz.Digraph`."""
        dataset, root = _two_way_dataset()

        graph = build_digraph(root, dataset)

        with check:
            assert isinstance(graph, graphviz.Digraph)
        with check:
            assert graph.name == "ID3"
