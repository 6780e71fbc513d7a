import pytest

from codec import HuffmanCoder, decode_by_map, decode_by_tree, encode
from errors import (
    DuplicateCodeError,
    EmptyInputError,
    HuffmanError,
    MalformedStreamError,
    UnknownSymbolError,
)
from huffman import build_tree, count_frequencies, generate_codes


def test_roundtrip_both_decoders(sample_text):
    root = build_tree(count_frequencies(sample_text))
    codes = generate_codes(root)
    bits = encode(sample_text, codes)
    assert decode_by_tree(root, bits) == sample_text
    assert decode_by_map(codes, bits) == sample_text


def test_decoders_agree_on_partial_streams():
    root = build_tree(count_frequencies("abracadabra"))
    codes = generate_codes(root)
    for text in ["", "a", "cab", "rabbad", "dddd"]:
        bits = encode(text, codes)
        assert decode_by_tree(root, bits) == decode_by_map(codes, bits) == text


def test_hello_world_compresses():
    text = "Hello world!"
    coder = HuffmanCoder.build(text)
    bits = coder.encode(text)
    assert len(bits) < len(text) * 8
    assert coder.decode_by_tree(bits) == text
    assert coder.decode_by_map(bits) == text


def test_abracadabra_exact_stream():
    coder = HuffmanCoder.build("abracadabra")
    bits = coder.encode("abracadabra")
    assert bits == "01101110100010101101110"
    assert len(bits) == coder.encoded_length("abracadabra") == 23


def test_single_symbol_roundtrip():
    coder = HuffmanCoder.build("aaaa")
    assert coder.codes == {"a": "0"}
    bits = coder.encode("aaaa")
    assert bits == "0000"
    assert coder.decode_by_tree(bits) == "aaaa"
    assert coder.decode_by_map(bits) == "aaaa"


def test_encode_unknown_symbol_raises():
    codes = generate_codes(build_tree(count_frequencies("abc")))
    with pytest.raises(UnknownSymbolError) as exc_info:
        _ = encode("abxc", codes)
    assert exc_info.value.symbol == "x"
    assert exc_info.value.position == 2


def test_encoded_length_unknown_symbol_raises():
    coder = HuffmanCoder.build("abc")
    with pytest.raises(UnknownSymbolError):
        _ = coder.encoded_length("abz")


def test_empty_stream_decodes_to_empty_text():
    coder = HuffmanCoder.build("abc")
    assert coder.decode_by_tree("") == ""
    assert coder.decode_by_map("") == ""


@pytest.mark.parametrize("bits", ["1", "10", "11", "01", "01101"])
def test_truncated_stream_raises(bits):
    coder = HuffmanCoder.build("abracadabra")
    with pytest.raises(MalformedStreamError) as tree_exc:
        _ = coder.decode_by_tree(bits)
    with pytest.raises(MalformedStreamError) as map_exc:
        _ = coder.decode_by_map(bits)
    assert tree_exc.value.position == map_exc.value.position == len(bits)


def test_truncated_encoded_text_raises():
    coder = HuffmanCoder.build("abracadabra")
    bits = coder.encode("abr")[:-1]
    with pytest.raises(MalformedStreamError):
        _ = coder.decode_by_tree(bits)
    with pytest.raises(MalformedStreamError):
        _ = coder.decode_by_map(bits)


@pytest.mark.parametrize("bits", ["012", "0a", " 0", "0\n"])
def test_invalid_bit_character_raises(bits):
    coder = HuffmanCoder.build("abracadabra")
    with pytest.raises(MalformedStreamError):
        _ = coder.decode_by_tree(bits)
    with pytest.raises(MalformedStreamError):
        _ = coder.decode_by_map(bits)


def test_single_symbol_rejects_one_bit():
    coder = HuffmanCoder.build("zz")
    with pytest.raises(MalformedStreamError) as tree_exc:
        _ = coder.decode_by_tree("001")
    with pytest.raises(MalformedStreamError) as map_exc:
        _ = coder.decode_by_map("001")
    assert tree_exc.value.position == map_exc.value.position == 2


def test_decode_by_map_duplicate_codes_raises():
    with pytest.raises(DuplicateCodeError):
        _ = decode_by_map({"a": "0", "b": "0"}, "00")


def test_decode_by_map_empty_table_rejects_bits():
    with pytest.raises(MalformedStreamError):
        _ = decode_by_map({}, "0")


def test_coder_pairs_tree_and_codes(sample_text):
    coder = HuffmanCoder.build(sample_text)
    assert coder.weight == len(sample_text)
    assert coder.codes == generate_codes(coder.root)
    assert coder.frequencies == count_frequencies(sample_text)


def test_coder_from_frequencies_copies_table():
    freqs = {"a": 3, "b": 1}
    coder = HuffmanCoder(freqs)
    freqs["c"] = 7
    assert "c" not in coder.frequencies
    assert coder.weight == 4


def test_coder_empty_text_raises():
    with pytest.raises(EmptyInputError):
        _ = HuffmanCoder.build("")


def test_errors_share_base_class():
    for cls in (EmptyInputError, UnknownSymbolError, MalformedStreamError,
                DuplicateCodeError):
        assert issubclass(cls, HuffmanError)
    assert issubclass(HuffmanError, ValueError)
