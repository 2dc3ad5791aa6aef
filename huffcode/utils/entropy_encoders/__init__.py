from .entropy_encoder import EntropyEncoder, Symbol
from .huffman_encoder import (
    HuffmanEncoder,
    count_frequencies,
    node_priority,
    build_huffman_tree,
    generate_huffman_codes,
    huffman_encode,
    huffman_decode,
)
