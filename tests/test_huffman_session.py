import pytest

from huffcode import (
    EmptyInput,
    HuffmanError,
    HuffmanSession,
    InvalidBinaryInput,
    NoTreeAvailable,
    TruncatedCode,
)
from huffcode.utils.bit_magic import calculate_entropy

PHRASE = "create a huffman tree"


@pytest.fixture
def session():
    return HuffmanSession()


def test_decode_before_build(session):
    assert not session.has_tree
    assert session.huffman_tree is None
    assert session.huffman_codes is None
    with pytest.raises(NoTreeAvailable):
        session.decode("0101")
    with pytest.raises(NoTreeAvailable):
        session.decode("")


@pytest.mark.parametrize("phrase", ["", " ", "   \t\n"])
def test_build_empty_phrase(session, phrase):
    with pytest.raises(EmptyInput):
        session.build_and_encode(phrase)
    assert not session.has_tree


def test_errors_are_value_errors():
    assert issubclass(HuffmanError, ValueError)
    for error in (EmptyInput, NoTreeAvailable, InvalidBinaryInput, TruncatedCode):
        assert issubclass(error, HuffmanError)
        assert str(error())


def test_build_and_encode_roundtrip(session):
    codes, bitstring = session.build_and_encode(PHRASE)
    assert session.has_tree
    assert codes['e'] == "01"
    assert len(bitstring) == 70
    assert session.decode(bitstring) == PHRASE


def test_phrase_is_encoded_untrimmed(session):
    _, bitstring = session.build_and_encode("  hi  ")
    assert session.decode(bitstring) == "  hi  "


def test_build_twice_gives_identical_codes(session):
    first = session.build_and_encode(PHRASE)
    second = session.build_and_encode(PHRASE)
    assert first == second
    assert HuffmanSession().build_and_encode(PHRASE) == first


def test_returned_codes_do_not_alias_session_state(session):
    codes, _ = session.build_and_encode(PHRASE)
    codes['e'] = "1"
    assert session.huffman_codes['e'] == "01"


def test_new_phrase_replaces_tree(session):
    session.build_and_encode(PHRASE)
    codes, bitstring = session.build_and_encode("aaaa")
    assert codes == {'a': "0"}
    assert bitstring == "0000"
    assert session.decode("0000") == "aaaa"


def test_empty_phrase_keeps_previous_tree(session):
    session.build_and_encode("aaaa")
    with pytest.raises(EmptyInput):
        session.build_and_encode("  ")
    assert session.decode("00") == "aa"


def test_failed_decode_keeps_tree(session):
    codes, bitstring = session.build_and_encode(PHRASE)
    with pytest.raises(InvalidBinaryInput):
        session.decode("01a0")
    assert session.huffman_codes == codes
    assert session.decode(bitstring) == PHRASE


def test_decode_empty_bitstring(session):
    session.build_and_encode(PHRASE)
    assert session.decode("") == ""


def test_strict_session():
    session = HuffmanSession(strict=True)
    session.build_and_encode(PHRASE)
    assert session.decode("01000") == "er"
    with pytest.raises(TruncatedCode):
        session.decode("0100")
    assert session.decode("01") == "e"


def test_encode_statistics(session):
    encoded = session.encode(PHRASE)
    assert encoded.phrase == PHRASE
    assert encoded.bits == 70
    assert encoded.packed_bytes == 9
    assert encoded.average_code_length == pytest.approx(70 / 21)
    assert encoded.bits_per_symbol == pytest.approx(encoded.average_code_length)
    assert encoded.entropy == pytest.approx(calculate_entropy(PHRASE))
    # Huffman codes are within one bit of the entropy
    assert encoded.entropy <= encoded.average_code_length < encoded.entropy + 1


def test_verbose_statistics(capsys):
    session = HuffmanSession(verbose=True)
    session.encode(PHRASE)
    out = capsys.readouterr().out
    assert "HuffmanSession verbose statistics:" in out
    assert "- Distinct symbols: 11" in out
    assert "- Tree nodes: 21" in out
    assert "- Encoded bits per symbol: 3.333" in out
    assert "- Encoded (in bits): 70" in out
    assert "- Encoded (in bytes): 9" in out


def test_quiet_by_default(session, capsys):
    session.encode(PHRASE)
    assert capsys.readouterr().out == ""
