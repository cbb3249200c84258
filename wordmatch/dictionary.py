"""
Dictionary loading.

Reads a word list (any text: words are runs of letters, digits and
apostrophes) into a HashMap, storing every word with the UNSCORED sentinel.

Usage:
    table = build_dictionary("dictionary.txt", capacity=1000)
    print(f"{table.size:,} words in {table.capacity:,} buckets")
"""

import logging
import os
import time
from typing import TextIO

from tqdm import tqdm

from .errors import DictionaryNotFound
from .hash_map import UNSCORED, HashFunction, HashMap, hash_function_1
from .normalizer import iter_words

logger = logging.getLogger(__name__)


def load_dictionary(stream: TextIO, table: HashMap, sentinel: int = UNSCORED, progress: bool = False) -> int:
    """
    Put every word of ``stream`` into ``table``.

    Args:
        stream: Open text stream
        table: Table to fill
        sentinel: Value stored for each word
        progress: Show a tqdm progress bar

    Returns:
        Number of words read (duplicates included)
    """
    start = time.time()
    count = 0
    for word in tqdm(iter_words(stream), desc="Loading dictionary", unit=" words", disable=not progress):
        table.put(word, sentinel)
        count += 1

    elapsed = time.time() - start
    logger.info("Dictionary loaded in %.3f seconds (%d words, %d unique)", elapsed, count, table.size)
    return count


def build_dictionary(
    path: str,
    capacity: int = 1000,
    hash_function: HashFunction = hash_function_1,
    progress: bool = False,
) -> HashMap:
    """
    Create a table and load the dictionary at ``path`` into it.

    Args:
        path: Dictionary file
        capacity: Initial bucket count
        hash_function: Hash function for the new table
        progress: Show a tqdm progress bar

    Returns:
        The filled table

    Raises:
        DictionaryNotFound: if ``path`` does not exist
    """
    if not os.path.exists(path):
        raise DictionaryNotFound(f"Dictionary not found at {path}")

    table = HashMap(capacity, hash_function=hash_function)
    # bytes outside UTF-8 decode to U+FFFD, which the tokenizer treats as a separator
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        load_dictionary(f, table, progress=progress)
    return table
