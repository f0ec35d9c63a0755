from .word_search import Node, WordTree
from .core import Unscrambler, ConfigError, load_words
