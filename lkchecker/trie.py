"""
Word trie for surface form lookup.

Maps every indexed spelling to the dictionary entries that produced it.
Each node keeps its children in a dict keyed by character; dicts keep
insertion order, so iteration order matches the order spellings arrived.
Owners at a terminal node are kept in insertion order and appended at
most once per identity.

Nodes are never removed: the whole graph lives as long as the trie.
"""

from typing import Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from lkchecker.characters import ensure_text
from lkchecker.errors import InvalidArgument, OutOfMemory

T = TypeVar('T')


class TrieNode(Generic[T]):
    """One character position in the trie."""

    __slots__ = ('char', 'children', 'owners')

    def __init__(self, char: str = ''):
        self.char = char
        self.children: Dict[str, 'TrieNode[T]'] = {}
        self.owners: Optional[List[T]] = None

    def add_owner(self, owner: T) -> bool:
        """Append owner unless the same object is already here. Returns True if added."""
        if self.owners is None:
            self.owners = []
        elif any(existing is owner for existing in self.owners):
            return False
        self.owners.append(owner)
        return True


class Trie(Generic[T]):
    """Multiway trie over the characters of a spelling."""

    def __init__(self):
        self.root: TrieNode[T] = TrieNode()
        self._spellings = 0

    def insert(self, path: str, owner: T) -> None:
        """
        Index a spelling for an owner.

        Re-inserting the same (path, owner) pair changes nothing. An empty
        path is accepted and ignored.

        Args:
            path: Spelling to index.
            owner: Object to return when the spelling is searched.

        Raises:
            InvalidArgument: If path or owner is None.
            InvalidString: If path is not a valid UTF-8 string.
            OutOfMemory: If a node cannot be allocated.
        """
        if path is None or owner is None:
            raise InvalidArgument("path and owner are required")
        path = ensure_text(path)
        if not path:
            return

        node = self.root
        try:
            for char in path:
                child = node.children.get(char)
                if child is None:
                    child = TrieNode(char)
                    node.children[char] = child
                node = child
            if node.owners is None:
                self._spellings += 1
            node.add_owner(owner)
        except MemoryError as e:
            raise OutOfMemory(f"cannot index {path!r}") from e

    def search(self, path: str) -> Optional[Tuple[T, ...]]:
        """
        Look up a spelling.

        Returns:
            The owners indexed under the exact spelling, in insertion order,
            or None if the spelling was never indexed (a bare prefix of an
            indexed spelling is not a match).
        """
        if not path:
            return None

        node = self.root
        for char in path:
            node = node.children.get(char)
            if node is None:
                return None

        if node.owners is None:
            return None
        return tuple(node.owners)

    def __contains__(self, path: str) -> bool:
        return self.search(path) is not None

    def __len__(self) -> int:
        """Number of distinct spellings indexed."""
        return self._spellings

    def spellings(self) -> Iterator[str]:
        """Yield every indexed spelling, depth first, in insertion order."""
        stack: List[Tuple[TrieNode[T], str]] = [(self.root, '')]
        while stack:
            node, prefix = stack.pop()
            if node.owners is not None:
                yield prefix
            for char, child in reversed(list(node.children.items())):
                stack.append((child, prefix + char))
