class HuffmanError(ValueError):
    """Base class for errors raised by the Huffman coder."""


class EmptyInputError(HuffmanError):
    """Raised when a tree is requested for an empty frequency table."""

    def __init__(self, message: str = "Cannot build a Huffman tree from empty input"):
        super().__init__(message)


class UnknownSymbolError(HuffmanError):
    """Raised when the text contains a symbol missing from the code table.

    :ivar symbol: The offending symbol.
    :type symbol: str
    :ivar position: Index of the first occurrence of ``symbol`` in the text.
    :type position: int
    """

    def __init__(self, symbol: str, position: int):
        super().__init__(
            f"Symbol {symbol!r} at position {position} has no code"
        )
        self.symbol = symbol
        self.position = position


class MalformedStreamError(HuffmanError):
    """Raised when an encoded bit stream is invalid or truncated.

    :ivar position: Index in the stream where decoding failed.
    :type position: int
    """

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} (at bit {position})")
        self.position = position


class DuplicateCodeError(HuffmanError):
    """Raised when two symbols share the same code while inverting a table."""

    def __init__(self, code: str, first: str, second: str):
        super().__init__(
            f"Code {code!r} is assigned to both {first!r} and {second!r}"
        )
        self.code = code
