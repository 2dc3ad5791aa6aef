import heapq
from collections import Counter
from typing import Dict, Iterable, List, Tuple

from tqdm import tqdm

from .entropy_encoder import EntropyEncoder, Symbol
from ..bit_magic import is_bitstring
from ..types import HuffmanNode, HuffmanTree
from ...errors import EmptyInput, InvalidBinaryInput, TruncatedCode, UnmatchedPath


def count_frequencies(data: Iterable[Symbol]) -> Dict[Symbol, int]:
    return dict(Counter(data))


def node_priority(node: HuffmanNode, index: int) -> Tuple[int, int, int, int]:
    """
    Heap key of a node, the smallest key is dequeued first.

    Lower frequency wins. On equal frequency the space leaf wins, then the
    smaller code point. Internal nodes have no character and rank with code
    point -1, so the arena index (creation order) separates them.
    """
    if node.is_leaf:
        return node.freq, 0 if node.is_space else 1, ord(node.symbol), index
    return node.freq, 1, -1, index


def build_huffman_tree(frequencies: Dict[Symbol, int]) -> HuffmanTree:
    if not frequencies:
        raise EmptyInput()

    tree = HuffmanTree()
    heap: List[Tuple[Tuple[int, int, int, int], int]] = []
    for symbol in sorted(frequencies):
        index = tree.add(HuffmanNode(symbol, frequencies[symbol]))
        heap.append((node_priority(tree[index], index), index))
    heapq.heapify(heap)

    # Combine nodes until there is only one root node
    while len(heap) > 1:
        _, left = heapq.heappop(heap)
        _, right = heapq.heappop(heap)
        merged = HuffmanNode(freq=tree[left].freq + tree[right].freq, left=left, right=right)
        index = tree.add(merged)
        heapq.heappush(heap, (node_priority(merged, index), index))

    tree.root = heap[0][1]
    return tree


def generate_huffman_codes(tree: HuffmanTree) -> Dict[Symbol, str]:
    root = tree.root_node
    if root.is_leaf:
        return {root.symbol: "0"}

    codes = {}
    stack = [(tree.root, "")]
    while stack:
        index, current_code = stack.pop()
        node = tree[index]
        if node.is_leaf:
            codes[node.symbol] = current_code
            continue
        # right is pushed first so the left subtree is walked first
        if node.right is not None:
            stack.append((node.right, current_code + "1"))
        if node.left is not None:
            stack.append((node.left, current_code + "0"))

    return codes


def huffman_encode(data: Iterable[Symbol], codes: Dict[Symbol, str], verbose: bool = False) -> str:
    return ''.join(codes[symbol] for symbol in tqdm(data, desc="Encoding", disable=not verbose))


def huffman_decode(bitstring: str, tree: HuffmanTree, strict: bool = False, verbose: bool = False) -> str:
    if not is_bitstring(bitstring):
        raise InvalidBinaryInput()

    root = tree.root_node
    if root.is_leaf:
        # every bit stands for the single symbol, whatever its value
        return root.symbol * len(bitstring)

    decoded_symbols = []
    cursor = tree.root
    for bit in tqdm(bitstring, desc="Decoding", disable=not verbose):
        cursor = tree.child(cursor, bit)
        if cursor is None:
            raise UnmatchedPath()

        node = tree[cursor]
        if node.is_leaf:
            decoded_symbols.append(node.symbol)
            cursor = tree.root

    if strict and cursor != tree.root:
        raise TruncatedCode()

    return ''.join(decoded_symbols)


class HuffmanEncoder(EntropyEncoder):
    def __init__(self, symbol_frequencies: Dict[Symbol, int], strict: bool = False, verbose: bool = False):
        """
        Initializes a Huffman Encoder.

        Parameters:
            symbol_frequencies (dict): Dictionary mapping symbols to their frequencies.
            strict (bool): Reject bitstrings that end in the middle of a code.
            verbose (bool): Show progress bars while encoding and decoding.
        """
        self.symbol_frequencies = dict(symbol_frequencies)
        self.strict = strict
        self.verbose = verbose

        self.huffman_tree = build_huffman_tree(self.symbol_frequencies)
        self.huffman_codes = generate_huffman_codes(self.huffman_tree)

    @classmethod
    def from_data(cls, data: Iterable[Symbol], **kwargs) -> 'HuffmanEncoder':
        return cls(count_frequencies(data), **kwargs)

    def encode(self, data: Iterable[Symbol]) -> str:
        """
        Encodes a sequence of symbols using the Huffman codes.

        Parameters:
            data (iterable): Symbols to encode, each must have a code.

        Returns:
            str: Encoded binary string.
        """
        return huffman_encode(data, self.huffman_codes, verbose=self.verbose)

    def decode(self, encoded_data: str) -> str:
        """
        Decodes a binary string back into text using the Huffman tree.

        Parameters:
            encoded_data (str): Binary string to decode.

        Returns:
            str: Decoded text.
        """
        return huffman_decode(encoded_data, self.huffman_tree, strict=self.strict, verbose=self.verbose)
