import html
import sys
from ftfy import fix_text

from unscrambler.anagram_index import AnagramIndex
from unscrambler.paths import DICTIONARY_PATH


class SourceUnavailable(OSError):
    """The dictionary file could not be opened or read."""


class DictionaryLoader:
    """
    Reads a line-oriented word list (one word per line) into an AnagramIndex.

    What it does:
    - Strips only the line terminator, never inner whitespace
    - Skips blank lines
    - Drops bytes that are not valid UTF-8 instead of failing the whole load
    - Optionally repairs mojibake / HTML entities with ftfy (clean_text=True).
      Off by default so every word is stored exactly as it appears in the file.

    Methods:
        iter_words(path) -> yields words lazily
        load_into(index, path) -> int, number of words inserted
    """

    def __init__(self, clean_text: bool = False):
        self.clean_text = clean_text

    def parse_line(self, line: str):
        """
        Turn one raw line into a word.
        Returns None for blank lines.
        """
        word = line.rstrip("\r\n")
        if self.clean_text:
            word = fix_text(html.unescape(word))
        if word == "":
            return None
        return word

    def _open(self, path: str):
        try:
            return open(path, "r", encoding="utf-8", errors="ignore")
        except OSError as e:
            raise SourceUnavailable(f"cannot open dictionary {path}: {e}") from e

    def _words(self, f):
        for line in f:
            word = self.parse_line(line)
            if word is None:
                continue
            yield word

    def iter_words(self, path: str = DICTIONARY_PATH):
        """
        Stream words from `path`.
        Raises SourceUnavailable before yielding anything if the file can't be opened.
        """
        with self._open(path) as f:
            yield from self._words(f)

    def load_into(self, index: AnagramIndex, path: str = DICTIONARY_PATH) -> int:
        """
        Insert every word from `path` into `index`.
        The whole file is read before the first insert, so a missing or unreadable file leaves the index untouched.
        """
        with self._open(path) as f:
            try:
                words = list(self._words(f))
            except OSError as e:
                raise SourceUnavailable(f"cannot read dictionary {path}: {e}") from e
        n = index.build(words)
        print(f"[Loader] Loaded {n} words from {path}", file=sys.stderr)
        return n

