import argparse
import sys

from typing import List, Optional
from codec import HuffmanCoder
from errors import HuffmanError

BITS_PER_CHAR = 8  #: Size of an uncompressed symbol in the size report
SAMPLE_TEXTS = (
    "Hello world!",
    "Laborum deserunt velit laboris amet cillum voluptate eiusmod "
    "exercitation officia. Sunt fugiat dolore enim excepteur laborum ipsum "
    "voluptate dolore reprehenderit aliqua anim adipisicing. Mollit enim "
    "minim labore anim veniam est consequat exercitation nostrud commodo. "
    "Ea aute fugiat laboris non esse nisi ea. Aute non ut labore eu enim "
    "ullamco ipsum est aliqua commodo elit magna amet id. Eu aute minim aute "
    "excepteur ut ea labore irure quis ex. Dolore excepteur eu eu cillum "
    "esse ad.",
)  #: Texts used by the ``demo`` subcommand


def get_parser():
    """Create and configure the CLI argument parser.

    :returns: Configured argument parser.
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Build a Huffman code for a text, encode and decode it"
    )
    subparsers = parser.add_subparsers(
        title="subcommands", dest="cmd", required=True
    )

    encode = subparsers.add_parser(
        "encode", aliases=["e"], help="Encode a text and decode it back"
    )
    source = encode.add_mutually_exclusive_group(required=True)
    source.add_argument("text", nargs="?", help="Text to encode")
    source.add_argument("-f", "--file", help="Read the text from a file")
    encode.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of the input file (default: utf-8)",
    )
    encode.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Hide the code table and the encoded bit-string",
    )

    demo = subparsers.add_parser(
        "demo", aliases=["d"], help="Run the report on built-in sample texts"
    )
    demo.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Hide the code table and the encoded bit-string",
    )

    return parser


def _read_text(path: str, encoding: str) -> str:
    """Read the whole text file at ``path``.

    :param path: File to read.
    :type path: str
    :param encoding: Text encoding of the file.
    :type encoding: str
    :returns: File contents.
    :rtype: str
    :raises OSError: If the file cannot be read.
    """
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def _fmt_pct(done: int, total: int) -> str:
    """Format a percentage string like ``12.34%``.

    :param done: Part.
    :type done: int
    :param total: Whole.
    :type total: int
    :returns: Percentage.
    :rtype: str
    """
    if total <= 0:
        return "0%"
    pct = 100.0 * (done / float(total))
    return f"{pct:6.2f}%"


def _fmt_bits(n: int) -> str:
    """Format a bit count with its byte equivalent, e.g. ``20 bits (2.50 B)``.

    :param n: Number of bits.
    :type n: int
    :returns: Human-readable string.
    :rtype: str
    """
    unit = "bit" if n == 1 else "bits"
    return f"{n} {unit} ({n / 8:.2f} B)"


def _format_code_table(codes) -> List[str]:
    """Render one ``symbol => code`` line per symbol, shortest codes first.

    :param codes: Mapping from symbol to code.
    :type codes: Dict[str, str]
    :returns: Table lines.
    :rtype: List[str]
    """
    ordered = sorted(codes.items(), key=lambda item: (len(item[1]), item[1]))
    return [f"{symbol!r} => {code}" for symbol, code in ordered]


def report(text: str, quiet: bool) -> None:
    """Build a code for ``text`` and print the encode/decode results.

    :param text: Text to encode.
    :type text: str
    :param quiet: Whether to hide the code table and bit-string.
    :type quiet: bool
    :returns: None
    :rtype: None
    :raises HuffmanError: If ``text`` is empty or decoding fails.
    """
    coder = HuffmanCoder.build(text)
    bits = coder.encode(text)

    print(f"{text} - text")
    if not quiet:
        for line in _format_code_table(coder.codes):
            print(line)
        print(f"{bits} - text's code")
    print(f"{coder.decode_by_tree(bits)} - decoding with tree")
    print(f"{coder.decode_by_map(bits)} - decoding with map")

    original = len(text) * BITS_PER_CHAR
    encoded = coder.encoded_length(text)
    print("Size before encoding: ", _fmt_bits(original))
    print("Size after encoding: ", _fmt_bits(encoded))
    print(f"Encoded size: {_fmt_pct(encoded, original).strip()} of original")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI tool.

    :param argv: Arguments to parse instead of ``sys.argv[1:]``.
    :type argv: Optional[List[str]]
    :returns: Process exit status.
    :rtype: int
    """
    parser = get_parser()
    args = parser.parse_args(argv)

    if args.cmd in ["encode", "e"]:
        if args.file is not None:
            try:
                text = _read_text(args.file, args.encoding)
            except OSError as e:
                print(f"[!] Cannot read {args.file}: {e.strerror or e}")
                return 1
            except UnicodeDecodeError:
                print(f"[!] {args.file} is not valid {args.encoding} text")
                return 1
        else:
            text = args.text
        texts = [text]
    else:
        texts = list(SAMPLE_TEXTS)

    for i, text in enumerate(texts):
        if i:
            print("Now for longer text:")
        try:
            report(text, getattr(args, "quiet", False))
        except HuffmanError as e:
            print(f"[!] {e}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
