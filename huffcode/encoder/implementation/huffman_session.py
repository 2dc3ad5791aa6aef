from typing import Dict, Optional, Tuple

from ..encoder import Encoder
from ...errors import EmptyInput, NoTreeAvailable
from ...utils.bit_magic import average_code_length, bitstream_to_bytes, calculate_entropy
from ...utils.entropy_encoders import HuffmanEncoder
from ...utils.types import EncodedPhrase, HuffmanTree


class HuffmanSession(Encoder):
    """
    Keeps the most recently built Huffman tree and code table.

    Every encode request rebuilds both from the new phrase; decode requests
    read them and fail with NoTreeAvailable until a phrase has been encoded.
    """

    def __init__(self, strict: bool = False, verbose: bool = False):
        self.strict = strict
        self.verbose = verbose
        self._huffman_encoder: Optional[HuffmanEncoder] = None

    @property
    def has_tree(self) -> bool:
        return self._huffman_encoder is not None

    @property
    def huffman_tree(self) -> Optional[HuffmanTree]:
        return self._huffman_encoder.huffman_tree if self.has_tree else None

    @property
    def huffman_codes(self) -> Optional[Dict[str, str]]:
        return self._huffman_encoder.huffman_codes if self.has_tree else None

    def build_and_encode(self, phrase: str) -> Tuple[Dict[str, str], str]:
        if not phrase or not phrase.strip():
            raise EmptyInput()

        huffman_encoder = HuffmanEncoder.from_data(phrase, strict=self.strict, verbose=self.verbose)
        bitstring = huffman_encoder.encode(phrase)

        self._huffman_encoder = huffman_encoder
        return dict(huffman_encoder.huffman_codes), bitstring

    def encode(self, phrase: str) -> EncodedPhrase:
        codes, bitstring = self.build_and_encode(phrase)

        encoded = EncodedPhrase(
            phrase=phrase,
            codes=codes,
            bitstring=bitstring,
            entropy=calculate_entropy(phrase),
            average_code_length=average_code_length(self._huffman_encoder.symbol_frequencies, codes),
            packed_bytes=len(bitstream_to_bytes(bitstring)),
        )

        if self.verbose:
            print("HuffmanSession verbose statistics:")
            print(f"- Distinct symbols: {len(self.huffman_tree.leaves)}")
            print(f"- Tree nodes: {len(self.huffman_tree)}")
            print(f"- Phrase entropy: {encoded.entropy:.3f}")
            print(f"- Average code bit length: {encoded.average_code_length:.3f}")
            print(f"- Encoded bits per symbol: {encoded.bits_per_symbol:.3f}")
            print(f"- Encoded (in bits): {encoded.bits}")
            print(f"- Encoded (in bytes): {encoded.packed_bytes}")

        return encoded

    def decode(self, bitstring: str) -> str:
        if not self.has_tree:
            raise NoTreeAvailable()
        return self._huffman_encoder.decode(bitstring)
