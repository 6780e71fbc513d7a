import heapq
from collections import Counter
from typing import Dict, List, Optional, Tuple

from errors import DuplicateCodeError, EmptyInputError


class HuffmanNode:
    """Node for a binary Huffman tree.

    Leaves hold a symbol; internal nodes hold exactly two children and
    ``symbol`` is ``None``.

    :ivar symbol: The character stored at a leaf; ``None`` for internal nodes.
    :type symbol: str | None
    :ivar weight: Occurrence count of the leaf's symbol, or the sum of the
        children's weights for an internal node.
    :type weight: int
    :ivar left: Left child node (reached with bit ``'0'``).
    :type left: HuffmanNode | None
    :ivar right: Right child node (reached with bit ``'1'``).
    :type right: HuffmanNode | None
    :ivar order: Creation sequence number used to break weight ties.
    :type order: int
    """

    def __init__(self, symbol=None, weight=0, left=None, right=None, order=0):
        """Create a Huffman node.

        :param symbol: Symbol for leaf nodes; ``None`` for internal nodes.
        :type symbol: str | None
        :param int weight: Weight associated with this node.
        :param left: Left child node, if any.
        :type left: HuffmanNode|None
        :param right: Right child node, if any.
        :type right: HuffmanNode|None
        :param int order: Tie-break sequence number.
        :returns: None
        :rtype: None
        """
        self.symbol = symbol
        self.weight = weight
        self.left = left
        self.right = right
        self.order = order

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __lt__(self, other):
        """Order nodes by weight, then by creation order (for priority queues).

        :param other: Another node to compare with.
        :type other: HuffmanNode
        :returns: ``True`` if this node is popped before ``other``.
        :rtype: bool
        """
        return (self.weight, self.order) < (other.weight, other.order)

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode(symbol={self.symbol!r}, weight={self.weight})"
        return f"HuffmanNode(weight={self.weight}, order={self.order})"


def count_frequencies(text: str) -> Dict[str, int]:
    """Count how many times each symbol occurs in ``text``.

    :param text: Input text; may be empty.
    :type text: str
    :returns: Mapping from symbol to occurrence count. Empty for empty text.
    :rtype: Dict[str, int]
    """
    return dict(Counter(text))


def build_tree(frequencies: Dict[str, int]) -> HuffmanNode:
    """Build a Huffman tree by repeatedly merging the two lightest nodes.

    Leaves are numbered in ascending symbol order and every merged node takes
    the next number, so nodes of equal weight leave the queue lowest number
    first. The first node popped becomes the left child of the merge. A
    single-symbol table yields a tree consisting of one leaf.

    :param frequencies: Mapping from symbol to positive count.
    :type frequencies: Dict[str, int]
    :returns: Root of the tree; its weight is the sum of all counts.
    :rtype: HuffmanNode
    :raises EmptyInputError: If ``frequencies`` is empty.
    :raises ValueError: If any count is not a positive integer.
    """
    if not frequencies:
        raise EmptyInputError()

    heap: List[HuffmanNode] = []
    for order, symbol in enumerate(sorted(frequencies)):
        weight = frequencies[symbol]
        if weight <= 0:
            raise ValueError(f"Frequency of {symbol!r} must be positive, got {weight}")
        heap.append(HuffmanNode(symbol=symbol, weight=weight, order=order))
    heapq.heapify(heap)

    next_order = len(heap)
    while len(heap) > 1:
        left = heapq.heappop(heap)
        right = heapq.heappop(heap)
        merged = HuffmanNode(
            weight=left.weight + right.weight,
            left=left,
            right=right,
            order=next_order,
        )
        next_order += 1
        heapq.heappush(heap, merged)

    return heap[0]


def generate_codes(root: HuffmanNode) -> Dict[str, str]:
    """Assign each leaf the bit-string of its root-to-leaf path.

    Going left appends ``'0'``, going right appends ``'1'``. A root that is
    itself a leaf gets the code ``'0'``.

    :param root: Root of a tree produced by :func:`build_tree`.
    :type root: HuffmanNode
    :returns: Mapping from symbol to its code.
    :rtype: Dict[str, str]
    """
    codes: Dict[str, str] = {}
    stack: List[Tuple[HuffmanNode, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = path or "0"
        else:
            stack.append((node.right, path + "1"))
            stack.append((node.left, path + "0"))
    return codes


def invert_codes(codes: Dict[str, str]) -> Dict[str, str]:
    """Build the code -> symbol lookup used by map-based decoding.

    :param codes: Mapping from symbol to code.
    :type codes: Dict[str, str]
    :returns: Mapping from code to symbol.
    :rtype: Dict[str, str]
    :raises DuplicateCodeError: If two symbols share a code.
    """
    inverted: Dict[str, str] = {}
    for symbol, code in codes.items():
        other: Optional[str] = inverted.get(code)
        if other is not None:
            raise DuplicateCodeError(code, other, symbol)
        inverted[code] = symbol
    return inverted
