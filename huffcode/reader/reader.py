from abc import ABC, abstractmethod


class Reader(ABC):
    @abstractmethod
    def read(self, path: str) -> str:
        ...

    @staticmethod
    def read_from_file(path: str) -> str:
        if path.endswith(".txt"):
            from .implementation.txt_reader import TxtReader
            return TxtReader().read(path)

        raise NotImplementedError("Reader is not implemented yet for provided format.")
