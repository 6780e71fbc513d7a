from typing import Dict, List

from errors import MalformedStreamError, UnknownSymbolError
from huffman import (
    HuffmanNode,
    build_tree,
    count_frequencies,
    generate_codes,
    invert_codes,
)


def _check_bit(bit: str, position: int) -> None:
    if bit != "0" and bit != "1":
        raise MalformedStreamError(f"Invalid bit {bit!r}", position)


def encode(text: str, codes: Dict[str, str]) -> str:
    """Encode ``text`` as the concatenation of its symbols' codes.

    :param text: Text to encode.
    :type text: str
    :param codes: Mapping from symbol to code covering every symbol of ``text``.
    :type codes: Dict[str, str]
    :returns: Bit-string of ``'0'``/``'1'`` characters, in input order.
    :rtype: str
    :raises UnknownSymbolError: If ``text`` contains a symbol without a code.
    """
    parts: List[str] = []
    for position, symbol in enumerate(text):
        code = codes.get(symbol)
        if code is None:
            raise UnknownSymbolError(symbol, position)
        parts.append(code)
    return "".join(parts)


def decode_by_tree(root: HuffmanNode, bits: str) -> str:
    """Decode ``bits`` by walking the tree from the root.

    Bit ``'0'`` moves to the left child and ``'1'`` to the right child.
    Reaching a leaf emits its symbol and restarts at the root. For a
    single-leaf tree every ``'0'`` is one occurrence of the sole symbol.

    :param root: Root of the tree the stream was encoded with.
    :type root: HuffmanNode
    :param bits: Encoded bit-string.
    :type bits: str
    :returns: Decoded text.
    :rtype: str
    :raises MalformedStreamError: On a non-bit character, a bit with no
        matching branch, or a stream that ends in the middle of a code.
    """
    if root.is_leaf:
        for position, bit in enumerate(bits):
            _check_bit(bit, position)
            if bit != "0":
                raise MalformedStreamError("Bit does not lead to a symbol", position)
        return root.symbol * len(bits)

    result: List[str] = []
    node = root
    for position, bit in enumerate(bits):
        _check_bit(bit, position)
        node = node.left if bit == "0" else node.right
        if node.is_leaf:
            result.append(node.symbol)
            node = root

    if node is not root:
        raise MalformedStreamError("Stream ends in the middle of a code", len(bits))
    return "".join(result)


def decode_by_map(codes: Dict[str, str], bits: str) -> str:
    """Decode ``bits`` by matching accumulated prefixes against the code table.

    :param codes: Mapping from symbol to code the stream was encoded with.
    :type codes: Dict[str, str]
    :param bits: Encoded bit-string.
    :type bits: str
    :returns: Decoded text, identical to :func:`decode_by_tree` on the
        matching tree.
    :rtype: str
    :raises DuplicateCodeError: If ``codes`` maps two symbols to one code.
    :raises MalformedStreamError: On a non-bit character, a prefix longer
        than any code, or a stream that ends in the middle of a code.
    """
    lookup = invert_codes(codes)
    max_length = max((len(code) for code in lookup), default=0)

    result: List[str] = []
    buffer = ""
    for position, bit in enumerate(bits):
        _check_bit(bit, position)
        buffer += bit
        symbol = lookup.get(buffer)
        if symbol is not None:
            result.append(symbol)
            buffer = ""
        elif len(buffer) >= max_length:
            raise MalformedStreamError(f"No code matches {buffer!r}", position)

    if buffer:
        raise MalformedStreamError("Stream ends in the middle of a code", len(bits))
    return "".join(result)


class HuffmanCoder:
    """A Huffman tree and the code table derived from it, kept together.

    :ivar frequencies: Symbol counts the tree was built from.
    :type frequencies: Dict[str, int]
    :ivar root: Root of the Huffman tree.
    :type root: HuffmanNode
    :ivar codes: Mapping from symbol to code.
    :type codes: Dict[str, str]
    """

    def __init__(self, frequencies: Dict[str, int]):
        """Build the tree and code table for ``frequencies``.

        :param frequencies: Mapping from symbol to positive count.
        :type frequencies: Dict[str, int]
        :returns: None
        :rtype: None
        :raises EmptyInputError: If ``frequencies`` is empty.
        """
        self.frequencies = dict(frequencies)
        self.root = build_tree(self.frequencies)
        self.codes = generate_codes(self.root)

    @classmethod
    def build(cls, text: str) -> "HuffmanCoder":
        """Build a coder from the symbol counts of ``text``.

        :param text: Source text.
        :type text: str
        :returns: A coder whose alphabet is exactly the symbols of ``text``.
        :rtype: HuffmanCoder
        :raises EmptyInputError: If ``text`` is empty.
        """
        return cls(count_frequencies(text))

    @property
    def weight(self) -> int:
        return self.root.weight

    def encode(self, text: str) -> str:
        return encode(text, self.codes)

    def decode_by_tree(self, bits: str) -> str:
        return decode_by_tree(self.root, bits)

    def decode_by_map(self, bits: str) -> str:
        return decode_by_map(self.codes, bits)

    def encoded_length(self, text: str) -> int:
        """Number of bits :meth:`encode` produces for ``text``.

        :param text: Text to measure.
        :type text: str
        :returns: Length of the encoded stream in bits.
        :rtype: int
        :raises UnknownSymbolError: If ``text`` contains a symbol without a code.
        """
        total = 0
        for symbol, count in count_frequencies(text).items():
            code = self.codes.get(symbol)
            if code is None:
                raise UnknownSymbolError(symbol, text.index(symbol))
            total += len(code) * count
        return total
