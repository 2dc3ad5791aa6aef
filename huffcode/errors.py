class HuffmanError(ValueError):
    """Base class for recoverable Huffman coding errors."""


class EmptyInput(HuffmanError):
    def __init__(self, message: str = "Cannot encode an empty phrase."):
        super().__init__(message)


class NoTreeAvailable(HuffmanError):
    def __init__(self, message: str = "No Huffman Tree exists. Please encode a phrase first."):
        super().__init__(message)


class InvalidBinaryInput(HuffmanError):
    def __init__(self, message: str = "Invalid binary input. Only 0s and 1s are allowed."):
        super().__init__(message)


class UnmatchedPath(HuffmanError):
    def __init__(self, message: str = "Invalid binary path: does not match any Huffman code."):
        super().__init__(message)


# Only raised by strict decoding
class TruncatedCode(HuffmanError):
    def __init__(self, message: str = "Binary input ends in the middle of a Huffman code."):
        super().__init__(message)
