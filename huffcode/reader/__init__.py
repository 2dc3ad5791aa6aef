from .reader import Reader
from .implementation.txt_reader import TxtReader
