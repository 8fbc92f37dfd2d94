"""
unscrambler/menu.py

Interactive front end over an AnagramIndex.

    1   -> print every known word
    3   -> tear the index down and exit
    any other line -> lower-case, normalize, look up
"""

import sys

from unscrambler.anagram_index import AnagramIndex
from unscrambler.normalizer import normalize
from unscrambler.paths import CMD_PRINT_ALL, CMD_EXIT

PROMPT = (
    f"{CMD_PRINT_ALL} - Print All\n"
    f"{CMD_EXIT} - Exit\n"
    "Please include spaces!\n"
    "> "
)


class Menu:
    def __init__(self, index: AnagramIndex, stdin=None, stdout=None):
        self.index = index
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _say(self, text: str = "", end: str = "\n"):
        print(text, end=end, file=self.stdout)

    def print_all(self):
        self._say("List of available words to scramble: ")
        for word in self.index.iterate():
            self._say(word)
        self._say()

    def unscramble(self, text: str):
        """Look up a lower-cased input line. Returns the matching word or None."""
        match = self.index.lookup(normalize(text))
        if match is None:
            self._say("There is no word that matches!\n")
        else:
            self._say(f"The word is {match}!\n")
        return match

    def handle(self, line: str) -> bool:
        """Process one input line. Returns False when the menu should stop."""
        option = line.rstrip("\r\n").lower()
        if option == CMD_EXIT:
            self.index.teardown()
            return False
        if option == CMD_PRINT_ALL:
            self.print_all()
            return True
        self.unscramble(option)
        return True

    def run(self):
        self._say("Welcome to the unscrambler!")
        while True:
            self._say(PROMPT, end="")
            self.stdout.flush()
            line = self.stdin.readline()
            if line == "":
                # EOF behaves like the exit command
                self.index.teardown()
                break
            if not self.handle(line):
                break
