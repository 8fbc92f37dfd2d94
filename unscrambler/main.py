import argparse, sys

from unscrambler.anagram_index import AnagramIndex
from unscrambler.loader import DictionaryLoader, SourceUnavailable
from unscrambler.menu import Menu
from unscrambler.normalizer import normalize
from unscrambler.paths import DICTIONARY_PATH, TABLE_SIZE


def parse_args(argv):
    ap = argparse.ArgumentParser(description="Word unscrambler: find the dictionary word a scrambled string spells")

    ap.add_argument("--dict", dest="dict_path", default=DICTIONARY_PATH, help="Path to newline-separated word list")
    ap.add_argument("--table-size", type=int, default=TABLE_SIZE, help="Number of hash buckets (prime recommended)")
    ap.add_argument("--clean-text", action="store_true", help="Repair mojibake/HTML entities in dictionary lines")

    group = ap.add_mutually_exclusive_group()
    group.add_argument("--query", help="Unscramble a single string and exit")
    group.add_argument("--list", action="store_true", help="Print every known word and exit")
    group.add_argument("--stats", action="store_true", help="Print bucket statistics and exit")

    return ap.parse_args(argv)


def build_index(path=DICTIONARY_PATH, table_size=TABLE_SIZE, clean_text=False) -> AnagramIndex:
    """
    Load the dictionary into a new index.
    A missing dictionary is reported once; the returned index is then empty.
    """
    index = AnagramIndex(table_size)
    try:
        DictionaryLoader(clean_text=clean_text).load_into(index, path)
    except SourceUnavailable as e:
        print(f"File opening failure: {e}")
    print(f"[Index] {len(index)} words in {index.table_size} buckets", file=sys.stderr)
    return index


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    index = build_index(args.dict_path, args.table_size, args.clean_text)

    if args.query is not None:
        match = index.lookup(normalize(args.query.lower()))
        if match is None:
            print("There is no word that matches!")
            return 1
        print(f"The word is {match}!")
        return 0

    if args.list:
        for word in index.iterate():
            print(word)
        return 0

    if args.stats:
        for k, v in index.stats().items():
            print(f"{k}: {v}")
        return 0

    Menu(index).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
