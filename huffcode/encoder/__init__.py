from .encoder import Encoder
from .implementation.huffman_session import HuffmanSession
