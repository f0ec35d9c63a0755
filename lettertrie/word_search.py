import functools


class Node:
    """
    One letter of the tree. A node's word is its parent's word plus its own letter.

    The root has the letter '' and no parent.
    """

    __slots__ = ['letter', 'is_word', 'branches', 'parent', 'edits']

    def __init__(self, letter='', parent=None):
        self.letter = letter
        self.is_word = False
        self.branches = {}
        self.parent = parent  # back reference only, never owns
        self.edits = 0  # only counted on the root

    def get(self, value):
        return self.branches.get(value)

    def __getitem__(self, key):
        return self.branches[key]

    def __setitem__(self, key, value):
        if key in self.branches:
            return
        self.branches[key] = value

    def __repr__(self):
        return f"<Node {self.letter} ({self.is_word})>"

    def __contains__(self, value):
        return value in self.branches

    def __iter__(self):
        return iter(self.branches.values())

    def __len__(self):
        return len(self.branches)

    def insert(self, word):
        """
        Adds word below this node, creating a node for each missing letter.
        """
        branch = self
        for l in word:
            if l not in branch:
                branch[l] = Node(l, branch)
            branch = branch[l]
        branch.is_word = True
        self.root().edits += 1
        return self

    def root(self):
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def path_from_root(self):
        if self.parent is None:
            return self.letter
        return self.parent.path_from_root() + self.letter

    def search_exact(self, letters):
        """
        All words below this node that can be spelled with letters, each letter used at most as many times as
        it appears.
        """
        letters = list(letters)
        words = set()

        if self.is_word:
            words.add(self.path_from_root())

        for l in dict.fromkeys(letters):  # repeated letters only need trying once here
            node = self.get(l)
            if node is None:
                continue
            new_hand = letters.copy()
            new_hand.remove(l)
            words |= node.search_exact(new_hand)

        return words

    def search(self, letters, wildcards=0):
        """
        Like search_exact, but up to wildcards extra letters may stand in for any letter.

        Real letters are always spent before a wildcard is.
        """
        if not wildcards or wildcards <= 0:
            return self.search_exact(letters)

        letters = list(letters)
        words = set()

        if self.is_word:
            words.add(self.path_from_root())

        for node in self:  # all letters
            if node.letter in letters:
                new_hand = letters.copy()
                new_hand.remove(node.letter)
                words |= node.search(new_hand, wildcards)
            else:
                words |= node.search(letters, wildcards - 1)

        return words


class WordTree:
    """
    A trie of words, searchable by the letters (and blanks) you have in hand.
    """

    cache_size = 1024

    def __init__(self, words=()):
        self.tree = Node()
        # per tree, so a tree and its cache are collected together
        self._search = functools.lru_cache(self.cache_size)(self._find)
        self.build_tree(words)

    @classmethod
    def from_words(cls, words):
        return cls(words)

    @classmethod
    def from_lines(cls, lines):
        return cls().load(lines)

    def load(self, lines):
        """
        Inserts one word per line, surrounding whitespace stripped, blank lines skipped.

        If lines fails part way, the words before the failure stay inserted.
        """
        for line in lines:
            word = line.strip()
            if word:
                self.insert(word)
        return self

    @classmethod
    def from_file(cls, path, encoding='utf-8'):
        with open(path, encoding=encoding) as f:
            return cls().load(f)

    def build_tree(self, words):
        self.tree = Node()
        for word in words:
            self.tree.insert(word)

        self._search.cache_clear()  # new root, edits start again from 0

    def insert(self, word):
        self.tree.insert(word)
        return self

    def _find(self, letters, wildcards, edits):
        # edits is only part of the cache key, any insert below the root makes older entries unreachable
        return frozenset(self.tree.search(letters, wildcards))

    def search(self, letters, wildcards=0):
        """
        Every word that can be made from letters plus up to wildcards blanks.

        letters can be any sequence of single characters, e.g. 'FOOD' or ['F', 'O', 'O', 'D'].
        """
        return self._search(tuple(letters), wildcards or 0, self.tree.edits)

    def is_word(self, word):
        p = self.tree
        for l in word:
            p = p.get(l)
            if p is None:
                return False

        return p.is_word

    def __contains__(self, word):
        return self.is_word(word)
