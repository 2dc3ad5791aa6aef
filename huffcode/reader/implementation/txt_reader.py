from ..reader import Reader


class TxtReader(Reader):
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read(self, path: str) -> str:
        with open(path, encoding=self.encoding) as file:
            phrase = file.read()

        # editors append a newline that is not part of the phrase
        return phrase.rstrip("\r\n")
