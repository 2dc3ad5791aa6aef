from abc import ABC, abstractmethod
from ..utils.types import EncodedPhrase


class Encoder(ABC):
    @abstractmethod
    def encode(self, phrase: str) -> EncodedPhrase:
        ...

    @abstractmethod
    def decode(self, bitstring: str) -> str:
        ...
