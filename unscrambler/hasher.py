# unscrambler/hasher.py


def bucket_id(key: str, table_size: int) -> int:
    """
    Sum of character values in `key`, reduced modulo `table_size`.
    Always lands in [0, table_size).
    """
    if table_size <= 0:
        raise ValueError(f"table_size must be positive, got {table_size}")
    total = 0
    for ch in key:
        total += ord(ch)
    return total % table_size
