"""id3kit: ID3 decision-tree induction for categorical data."""

from loguru import logger

from id3kit.dataset import Dataset
from id3kit.engine import ID3
from id3kit.loader import TrainingTable, load_training_table
from id3kit.logging import PACKAGE_NAME, enable_logging
from id3kit.models import InternalNode, LeafNode, TreeNode
from id3kit.render import render_dot, render_text

logger.disable(PACKAGE_NAME)  # noqa: RUF067 - Disable logging for the id3kit module by default

__all__ = [
    "ID3",
    "Dataset",
    "InternalNode",
    "LeafNode",
    "TrainingTable",
    "TreeNode",
    "enable_logging",
    "load_training_table",
    "render_dot",
    "render_text",
]
