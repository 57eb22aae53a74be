from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping

# Snapshot key holding a node's weight. Child keys are always one character long.
WEIGHT_KEY = ""
DEFINITE_MARKER = "definite"


class SnapshotError(ValueError):
    """Raised when a snapshot cannot be decoded into a trie."""


@dataclass(frozen=True, order=True)
class Weight:
    """Frequency of a word.

    Either a finite occurrence count or the ``definite`` weight set by an
    explicit definition. Ordering compares ``definite`` first, so a definite
    weight outranks every finite count.
    """

    definite: bool = False
    count: int = 0

    @classmethod
    def finite(cls, count: int) -> Weight:
        if count < 0:
            raise ValueError(f"weight count must be non-negative, got {count}")
        return cls(definite=False, count=count)

    def __bool__(self) -> bool:
        return self.definite or self.count > 0

    def incremented(self) -> Weight:
        if self.definite:
            return self
        return Weight.finite(self.count + 1)

    def to_json(self) -> int | str:
        return DEFINITE_MARKER if self.definite else self.count

    @classmethod
    def from_json(cls, value: Any) -> Weight:
        if value == DEFINITE_MARKER:
            return DEFINITE
        # bool is an int subclass but never a valid count
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise SnapshotError(f"invalid weight value: {value!r}")
        if isinstance(value, float):
            # json.loads turns a bare Infinity literal into float("inf")
            if math.isinf(value) and value > 0:
                return DEFINITE
            if not value.is_integer():
                raise SnapshotError(f"invalid weight value: {value!r}")
            value = int(value)
        if value < 0:
            raise SnapshotError(f"invalid weight value: {value!r}")
        return cls.finite(value)


ZERO = Weight()
DEFINITE = Weight(definite=True)


@dataclass
class TrieNode:
    children: dict[str, TrieNode] = field(default_factory=dict)
    weight: Weight | None = None


class FrequencyTrie:
    """Prefix tree mapping learned words to their :class:`Weight`."""

    def __init__(self) -> None:
        self.root = TrieNode()

    def _walk_or_create(self, word: str) -> TrieNode:
        node = self.root
        for char in word:
            child = node.children.get(char)
            if child is None:
                child = TrieNode()
                node.children[char] = child
            node = child
        return node

    def _walk(self, word: str) -> TrieNode | None:
        node = self.root
        for char in word:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def increment(self, word: str) -> Weight:
        node = self._walk_or_create(word)
        node.weight = (node.weight or ZERO).incremented()
        return node.weight

    def set_definite(self, word: str) -> None:
        word = word.strip()
        if not word:
            return
        self._walk_or_create(word).weight = DEFINITE

    def frequency(self, word: str) -> Weight:
        node = self._walk(word)
        if node is None or node.weight is None:
            return ZERO
        return node.weight

    def words(self) -> Iterator[tuple[str, Weight]]:
        stack: list[tuple[str, TrieNode]] = [("", self.root)]
        while stack:
            prefix, node = stack.pop()
            if node.weight is not None:
                yield prefix, node.weight
            for char in sorted(node.children, reverse=True):
                stack.append((prefix + char, node.children[char]))

    def __len__(self) -> int:
        return sum(1 for _ in self.words())

    def serialize(self) -> dict[str, Any]:
        return _encode_node(self.root)

    def deserialize(self, tree: Mapping[str, Any] | str | bytes) -> FrequencyTrie:
        if isinstance(tree, (str, bytes, bytearray)):
            try:
                tree = json.loads(tree)
            except (ValueError, RecursionError) as exc:
                raise SnapshotError(f"snapshot is not valid JSON: {exc}") from exc
        if not isinstance(tree, Mapping):
            raise SnapshotError(f"snapshot must be a mapping, got {type(tree).__name__}")

        # Decode fully before swapping so a bad snapshot leaves state untouched.
        self.root = _decode_node(tree)
        return self


def _encode_node(root: TrieNode) -> dict[str, Any]:
    encoded_root: dict[str, Any] = {}
    stack: list[tuple[TrieNode, dict[str, Any]]] = [(root, encoded_root)]
    while stack:
        node, encoded = stack.pop()
        if node.weight is not None:
            encoded[WEIGHT_KEY] = node.weight.to_json()
        for char, child in node.children.items():
            encoded[char] = {}
            stack.append((child, encoded[char]))
    return encoded_root


def _decode_node(tree: Mapping[str, Any]) -> TrieNode:
    root = TrieNode()
    stack: list[tuple[Mapping[str, Any], TrieNode]] = [(tree, root)]
    while stack:
        mapping, node = stack.pop()
        for key, value in mapping.items():
            if key == WEIGHT_KEY:
                node.weight = Weight.from_json(value)
                continue
            if not isinstance(key, str) or len(key) != 1:
                raise SnapshotError(f"invalid trie key: {key!r}")
            if not isinstance(value, Mapping):
                raise SnapshotError(f"trie node for {key!r} must be a mapping")
            child = TrieNode()
            node.children[key] = child
            stack.append((value, child))
    return root
