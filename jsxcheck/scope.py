"""
jsxcheck/scope.py
─────────────────

Block-scope registry for one file-analysis session.

Every ``{ ... }`` statement block gets a ``BlockScope`` record when the
traversal enters it.  Records are identified by the block's start byte
offset, remember the block that was open when they were created, and
hold two name sets: names bound to array allocations and names bound to
object allocations.

Records live until the session ends; they are never merged or removed.
Lookups walk an explicit chain of block ids, innermost first, and stop
at the first record that knows the name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Set

from jsxcheck.allocation import ViolationKind
from jsxcheck.errors import ScopeError

logger = logging.getLogger(__name__)

__all__ = [
    "BlockScope",
    "ScopeRegistry",
]


@dataclass
class BlockScope:
    """Bindings recorded in a single block."""
    block_id: int
    parent: Optional[int] = None
    array_bound: Set[str] = field(default_factory=set)
    object_bound: Set[str] = field(default_factory=set)

    def names(self, kind: ViolationKind) -> Set[str]:
        if kind is ViolationKind.ARRAY:
            return self.array_bound
        return self.object_bound

    def kind_of(self, name: str) -> Optional[ViolationKind]:
        if name in self.array_bound:
            return ViolationKind.ARRAY
        if name in self.object_bound:
            return ViolationKind.OBJECT
        return None


class ScopeRegistry:
    """
    Arena of ``BlockScope`` records keyed by block id.

    Usage
    -----
    >>> reg = ScopeRegistry()
    >>> _ = reg.enter_block(0)
    >>> _ = reg.enter_block(10, parent=0)
    >>> reg.record_binding(0, ViolationKind.ARRAY, "bar")
    >>> reg.lookup(reg.chain(10), "bar")
    <ViolationKind.ARRAY: ...>
    """

    def __init__(self) -> None:
        self._records: Dict[int, BlockScope] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, block_id: object) -> bool:
        return block_id in self._records

    def __iter__(self) -> Iterator[BlockScope]:
        return iter(self._records.values())

    def _get(self, block_id: int) -> BlockScope:
        try:
            return self._records[block_id]
        except KeyError:
            raise ScopeError("block was never entered", block_id) from None

    def enter_block(self, block_id: int, parent: Optional[int] = None) -> BlockScope:
        """Create the record for *block_id*; entering a block twice is fatal."""
        if block_id in self._records:
            raise ScopeError("block entered twice", block_id)
        if parent is not None and parent not in self._records:
            raise ScopeError(f"parent block {parent} was never entered", block_id)
        record = BlockScope(block_id=block_id, parent=parent)
        self._records[block_id] = record
        return record

    def record_binding(self, block_id: int, kind: ViolationKind, name: str) -> None:
        """Bind *name* to *kind* in *block_id*; a later record replaces an earlier one."""
        record = self._get(block_id)
        other = ViolationKind.OBJECT if kind is ViolationKind.ARRAY else ViolationKind.ARRAY
        record.names(other).discard(name)
        record.names(kind).add(name)
        logger.debug("block %d: %s bound to %s allocation", block_id, name, kind.message_id)

    def chain(self, block_id: Optional[int]) -> List[int]:
        """Ids from *block_id* out to the outermost block, following parent links."""
        result: List[int] = []
        while block_id is not None:
            result.append(block_id)
            block_id = self._get(block_id).parent
        return result

    def lookup(self, chain: Iterable[int], name: str) -> Optional[ViolationKind]:
        """Kind bound to *name* in the first block of *chain* that binds it."""
        for block_id in chain:
            kind = self._get(block_id).kind_of(name)
            if kind is not None:
                return kind
        return None
