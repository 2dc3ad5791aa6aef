from typing import Dict, Iterable
import numpy as np
from collections import Counter

BINARY_DIGITS = frozenset("01")


def calculate_entropy(data: Iterable[str]) -> float:
    frequencies = Counter(data)
    total = sum(frequencies.values())
    if total == 0:
        return 0.0
    probabilities = np.array(list(frequencies.values()), dtype=np.float64) / total
    return float(-np.sum(probabilities * np.log2(probabilities)))


def average_code_length(frequencies: Dict[str, int], codes: Dict[str, str]) -> float:
    total = sum(frequencies.values())
    if total == 0:
        return 0.0
    return sum(freq * len(codes[symbol]) for symbol, freq in frequencies.items()) / total


def is_bitstring(text: str) -> bool:
    return set(text) <= BINARY_DIGITS


def extend_bytearray_with_bitstream(byte_array: bytearray, bitstream: str) -> None:
    # Make sure the binary string length is a multiple of 8 by padding with zeros if necessary
    padding_length = (8 - len(bitstream) % 8) % 8
    bitstream += '0' * padding_length

    byte_array.extend(int(bitstream[i:i + 8], 2) for i in range(0, len(bitstream), 8))


def bitstream_to_bytes(bitstream: str) -> bytes:
    byte_array = bytearray()
    extend_bytearray_with_bitstream(byte_array, bitstream)
    return bytes(byte_array)
