from abc import ABC, abstractmethod
from typing import Dict, Iterable, TypeAlias

Symbol: TypeAlias = str


class EntropyEncoder(ABC):

    @abstractmethod
    def __init__(self, symbol_frequencies: Dict[Symbol, int]):
        ...

    @abstractmethod
    def encode(self, data: Iterable[Symbol]) -> str:
        ...

    @abstractmethod
    def decode(self, encoded_data: str) -> str:
        ...
