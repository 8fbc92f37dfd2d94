# unscrambler/paths.py

import os

# --- Base data paths ---
DATA_DIR = "data"

# --- Dictionary source, one word per line ---
DICTIONARY_PATH = os.path.join(DATA_DIR, "dic.txt")

# --- Number of buckets in the anagram index (prime to reduce clustering) ---
TABLE_SIZE = 101

# --- Menu commands ---
CMD_PRINT_ALL = "1"
CMD_EXIT = "3"
