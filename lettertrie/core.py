import logging
from collections import Counter
from pathlib import Path

import pandas as pd

from .word_search import WordTree

logger = logging.getLogger(__name__)

UPPER = 'upper'
LOWER = 'lower'


class ConfigError(Exception):
    pass


def load_words(path, encoding='utf-8'):
    """
    Yields the words in a plain text file, one per line. Blank lines are skipped.

    Errors opening or reading the file are raised as they happen, so anything already yielded has been read.
    """
    path = Path(path)
    logger.debug("Loading words from %s", path)

    count = 0
    with open(path, encoding=encoding) as f:
        for line in f:
            word = line.strip()
            if not word:
                continue
            count += 1
            yield word

    logger.info("Loaded %d words from %s", count, path.name)


class Unscrambler:
    """
    Finds the words you can make from a hand of letters, and optionally some blanks.

    Subclass and set words_file (and case, if the list and your letters might not agree) to configure.
    """

    words_file = None
    encoding = 'utf-8'
    case = None

    def __init__(self, words=None):
        if words is None:
            if self.words_file is None:
                raise ConfigError(f"{self.__class__.__name__} has no words and no words_file set")
            words = load_words(self.words_file, self.encoding)

        self.word_tree = WordTree(self.normalise(word) for word in words)

    def normalise(self, letters):
        if self.case == UPPER:
            return letters.upper()
        elif self.case == LOWER:
            return letters.lower()
        elif self.case is None:
            return letters
        raise ConfigError(f"Unknown case policy {self.case!r}")

    def _hand(self, letters):
        return tuple(self.normalise(l) for l in letters)

    def find(self, letters, wildcards=0):
        """
        Sorted list of every word makeable from letters and wildcards blanks.
        """
        return sorted(self.word_tree.search(self._hand(letters), wildcards))

    @staticmethod
    def wildcards_used(word, letters):
        """
        How many letters of word the hand can't cover, i.e. how many blanks it takes.
        """
        missing = Counter(word) - Counter(letters)
        return sum(missing.values())

    def show(self, letters, wildcards=0):
        """
        Generates, then returns a DataFrame of the words found, with their lengths and the blanks each one needs.
        """
        hand = self._hand(letters)
        words = self.find(hand, wildcards)
        return pd.DataFrame({
            'word': words,
            'length': [len(word) for word in words],
            'wildcards_used': [self.wildcards_used(word, hand) for word in words],
        }, columns=['word', 'length', 'wildcards_used'])

    def __contains__(self, word):
        return self.normalise(word) in self.word_tree

    def __repr__(self):
        return f"<{self.__class__.__name__}: {self.words_file}>"
