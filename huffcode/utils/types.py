from dataclasses import dataclass, field
from typing import Dict, List, Optional

SPACE = " "


@dataclass
class HuffmanNode:
    symbol: Optional[str] = None
    freq: int = 0
    left: Optional[int] = None
    right: Optional[int] = None

    # Leaf (symbol, no children) or internal node (no symbol, two children)
    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def is_space(self) -> bool:
        return self.is_leaf and self.symbol == SPACE


@dataclass
class HuffmanTree:
    """
    Arena of Huffman nodes.

    Children are referenced by their index in ``nodes``, so every node is owned
    by the arena and reachable from at most one parent.
    """
    nodes: List[HuffmanNode] = field(default_factory=list)
    root: int = 0

    def __getitem__(self, index: int) -> HuffmanNode:
        return self.nodes[index]

    def __len__(self) -> int:
        return len(self.nodes)

    def add(self, node: HuffmanNode) -> int:
        self.nodes.append(node)
        return len(self.nodes) - 1

    @property
    def root_node(self) -> HuffmanNode:
        return self.nodes[self.root]

    @property
    def leaves(self) -> List[HuffmanNode]:
        return [node for node in self.nodes if node.is_leaf]

    def child(self, index: int, bit: str) -> Optional[int]:
        node = self.nodes[index]
        return node.left if bit == "0" else node.right


@dataclass
class EncodedPhrase:
    phrase: str
    codes: Dict[str, str]
    bitstring: str
    entropy: float = 0.0
    average_code_length: float = 0.0
    packed_bytes: int = 0

    @property
    def bits(self) -> int:
        return len(self.bitstring)

    @property
    def bits_per_symbol(self) -> float:
        return self.bits / len(self.phrase)
