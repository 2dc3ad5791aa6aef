from .errors import HuffmanError, EmptyInput, NoTreeAvailable, InvalidBinaryInput, UnmatchedPath, TruncatedCode
from .encoder import Encoder, HuffmanSession
from .reader import Reader, TxtReader
from .utils.types import HuffmanNode, HuffmanTree, EncodedPhrase
from .utils.entropy_encoders import (
    HuffmanEncoder,
    count_frequencies,
    node_priority,
    build_huffman_tree,
    generate_huffman_codes,
    huffman_encode,
    huffman_decode,
)
