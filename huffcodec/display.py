"""
display.py

Presentation helpers: an indented text rendering of a Huffman tree and a
chart of its code lengths.
"""


from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .settings import BIT_ONE, BIT_ZERO, TREE_BRANCH_FORMAT, TREE_INDENT, TREE_ROOT_LABEL
from .tree import Node
from .validators import validate_type


def render_tree(root: Node) -> str:
    """
    Render the tree one node per line, parent before children and left
    before right. Each level is indented once more and labelled with the
    bit of the branch leading to it; leaves show their symbol.
    """
    validate_type(root, "Root", Node)
    lines: List[str] = []
    stack: List[Tuple[Node, int, Optional[str]]] = [(root, 0, None)]
    while stack:
        node, depth, bit = stack.pop()
        line = TREE_INDENT * depth
        if depth > 0:
            line += TREE_BRANCH_FORMAT.format(bit=bit)
        elif not node.is_leaf():
            line += TREE_ROOT_LABEL
        if node.is_leaf():
            line += f" {node.symbol}"
        lines.append(line)
        if not node.is_leaf():
            stack.append((node.right, depth + 1, BIT_ONE))
            stack.append((node.left, depth + 1, BIT_ZERO))
    return "\n".join(lines)


def print_tree(root: Node) -> None:
    print(render_tree(root))


class CodeLengthDisplay:
    """Plots the code length of every symbol against its ideal length -log2(p)."""
    def __init__(self, root: Node,
                 fig_size=(10, 6), dpi=100, font_size=12,
                 bar_color='blue', bar_alpha=0.6,
                 ideal_line_color='red', ideal_line_linewidth=2):
        validate_type(root, "Root", Node)
        self.root = root
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.bar_color = bar_color
        self.bar_alpha = bar_alpha
        self.ideal_line_color = ideal_line_color
        self.ideal_line_linewidth = ideal_line_linewidth

    def _leaf_data(self):
        leaves = sorted(self.root.iter_leaves(), key=lambda item: (-item[0].weight, item[1]))
        labels = [repr(leaf.symbol) for leaf, _ in leaves]
        lengths = np.array([depth for _, depth in leaves], dtype=np.float64)
        weights = np.array([leaf.weight for leaf, _ in leaves], dtype=np.float64)
        return labels, lengths, weights

    def _ideal_lengths(self, weights):
        total = np.sum(weights)
        ideal = np.full(weights.shape, np.nan)
        if total > 0:
            nonzero = weights > 0
            ideal[nonzero] = -np.log2(weights[nonzero] / total)
        return ideal

    def generate_code_length_plot(self, show_graph=False, save_path=None):
        labels, lengths, weights = self._leaf_data()
        x = np.arange(len(labels))
        ideal = self._ideal_lengths(weights)

        plt.figure(figsize=self.fig_size, dpi=self.dpi)

        plt.bar(x, lengths, alpha=self.bar_alpha, color=self.bar_color, label="Code length")
        plt.plot(x, ideal, color=self.ideal_line_color, linewidth=self.ideal_line_linewidth, label="Ideal length (-log2 p)")

        plt.title("Huffman Code Lengths", fontsize=self.font_size + 2)
        plt.xlabel("Symbol (by decreasing weight)", fontsize=self.font_size)
        plt.ylabel("Bits", fontsize=self.font_size)
        plt.xticks(x, labels)
        plt.grid(True, axis='y')
        plt.legend(fontsize=self.font_size)
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path)
        if show_graph:
            plt.show()
        else:
            plt.close()
