# unscrambler/normalizer.py


def normalize(word: str) -> str:
    """
    Sort the characters of `word` by code point, left to right (insertion sort).

    Two words are anagrams iff their normalized forms are equal.
    normalize("") == "" and normalize(normalize(w)) == normalize(w).
    """
    chars = list(word)
    for i in range(1, len(chars)):
        j = i
        while j > 0 and chars[j - 1] > chars[j]:
            chars[j - 1], chars[j] = chars[j], chars[j - 1]
            j -= 1
    return "".join(chars)
