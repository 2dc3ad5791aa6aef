"""
Huffman coding playground.

Encodes a phrase, prints its Huffman codes, the encoded bitstring and the
round-trip decode, then offers an interactive menu to encode new phrases or
decode binary strings against the most recent tree.

How to run:
  python -m huffcode
  python -m huffcode --phrase "go go gophers" --verbose
  python -m huffcode --file phrase.txt --decode 0110 --non-interactive
"""

import argparse
from typing import Callable, List, Optional

from .encoder import HuffmanSession
from .errors import HuffmanError, NoTreeAvailable
from .reader import Reader

DEFAULT_PHRASE = "create a huffman tree"

MENU = """
What would you like to do?
1. Encode a new phrase
2. Decode a binary string
3. Exit"""


def report_error(error: Exception) -> None:
    print(f"[Error] {error}")


def process_phrase(session: HuffmanSession, phrase: str) -> bool:
    try:
        encoded = session.encode(phrase)
    except HuffmanError as error:
        report_error(error)
        return False

    print("\nGenerated Huffman Codes:")
    for symbol, code in sorted(encoded.codes.items()):
        print(f"'{symbol}': {code}")

    print("\nEncoded Binary:")
    print(encoded.bitstring)

    print("\nDecoded Text (from encoded binary):")
    print(session.decode(encoded.bitstring))
    return True


def process_bitstring(session: HuffmanSession, bitstring: str) -> bool:
    try:
        decoded = session.decode(bitstring)
    except HuffmanError as error:
        report_error(error)
        return False

    print(f"Decoded Text: {decoded}")
    return True


def run_menu(session: HuffmanSession, read_line: Callable[[str], str] = input) -> None:
    try:
        while True:
            print(MENU)
            option = read_line("Enter option number: ").strip()

            if option == "1":
                process_phrase(session, read_line("Enter a phrase to encode: "))
            elif option == "2":
                if not session.has_tree:
                    report_error(NoTreeAvailable())
                    continue
                process_bitstring(session, read_line("Enter a binary string to decode: "))
            elif option == "3":
                break
            else:
                print("Invalid option. Please enter 1, 2, or 3.")
    except EOFError:
        # closed input behaves like option 3
        print()

    print("Exiting program.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="huffcode", description="Build Huffman codes for a phrase.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--phrase", default=DEFAULT_PHRASE, help="phrase encoded on start")
    source.add_argument("--file", help="read the phrase encoded on start from a .txt file")
    parser.add_argument("--decode", help="binary string decoded with the initial tree")
    parser.add_argument("--strict", action="store_true", help="reject binary strings ending mid-code")
    parser.add_argument("--verbose", action="store_true", help="print statistics and progress bars")
    parser.add_argument("--non-interactive", action="store_true", help="skip the interactive menu")
    return parser


def main(argv: Optional[List[str]] = None, read_line: Callable[[str], str] = input) -> int:
    args = build_parser().parse_args(argv)

    if args.file:
        try:
            phrase = Reader.read_from_file(args.file)
        except (OSError, UnicodeDecodeError, NotImplementedError) as error:
            report_error(error)
            return 1
        print(f"Phrase from {args.file}: \"{phrase}\"")
    else:
        phrase = args.phrase
        label = "Default phrase" if phrase == DEFAULT_PHRASE else "Phrase"
        print(f"{label}: \"{phrase}\"")

    session = HuffmanSession(strict=args.strict, verbose=args.verbose)
    ok = process_phrase(session, phrase)

    if args.decode is not None:
        ok = process_bitstring(session, args.decode) and ok

    if not args.non_interactive:
        run_menu(session, read_line)
        return 0

    return 0 if ok else 1
