# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Generic, TypeVar

import structlog

from pydiverse.bimap._internal.errors import check_arg_type

KT = TypeVar("KT", bound=Hashable)
VT = TypeVar("VT", bound=Hashable)

# Silent unless the stdlib logger is enabled for DEBUG.
logger = structlog.wrap_logger(
    logging.getLogger(__name__),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=False,
)


class BiMap(Generic[KT, VT]):
    """
    Bidirectional Map
    Keeps a key -> value table and a value -> key table side by side so that
    lookups in both directions are O(1).

    To go from key to value use `get_value_by_key` (or `k`).
    To go from value to key use `get_key_by_value` (or `v`).

    Overwriting an existing key or value with `set` does not remove the old
    entry on the other side. After ``set("a", 1); set("a", 2)`` the reverse
    lookup ``get_key_by_value(1)`` still returns ``"a"``. Remove stale entries
    explicitly with `delete_by_key` / `delete_by_value` if a strict bijection
    is required.
    """

    def __init__(self, pairs: Iterable[tuple[KT, VT]] | Mapping[KT, VT] = (), /):
        check_arg_type(Iterable, "BiMap.__init__", "pairs", pairs)

        self.__fwd: dict[KT, VT] = dict()
        self.__bwd: dict[VT, KT] = dict()

        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        for key, value in pairs:
            self.set(key, value)

    def set(self, key: KT, value: VT) -> None:
        if key in self.__fwd:
            old_value = self.__fwd[key]
            if old_value != value:
                logger.debug(
                    "set left stale reverse entry",
                    key=key,
                    old_value=old_value,
                    value=value,
                )
        if value in self.__bwd:
            old_key = self.__bwd[value]
            if old_key != key:
                logger.debug(
                    "set left stale forward entry",
                    key=key,
                    old_key=old_key,
                    value=value,
                )

        self.__fwd[key] = value
        self.__bwd[value] = key

    def delete_by_key(self, key: KT) -> bool:
        """Remove `key` and whatever value it maps to. Return False if absent."""
        if key not in self.__fwd:
            return False
        value = self.__fwd.pop(key)
        self.__bwd.pop(value, None)
        return True

    def delete_by_value(self, value: VT) -> bool:
        """Remove `value` and whatever key maps to it. Return False if absent."""
        if value not in self.__bwd:
            return False
        key = self.__bwd.pop(value)
        self.__fwd.pop(key, None)
        return True

    def get_key_by_value(self, value: VT, default: KT | None = None) -> KT | None:
        return self.__bwd.get(value, default)

    def get_value_by_key(self, key: KT, default: VT | None = None) -> VT | None:
        return self.__fwd.get(key, default)

    def all_keys(self) -> set[KT]:
        return set(self.__fwd.keys())

    def all_values(self) -> set[VT]:
        # Taken from the forward table so stale reverse entries don't show up.
        return set(self.__fwd.values())

    def has_key(self, key: KT) -> bool:
        return key in self.__fwd

    def has_value(self, value: VT) -> bool:
        return value in self.__bwd

    def size(self) -> int:
        return len(self.__fwd)

    def clear(self) -> None:
        self.__fwd.clear()
        self.__bwd.clear()

    def items(self) -> list[tuple[KT, VT]]:
        return list(self.__fwd.items())

    # Short aliases

    def K(self, key: KT) -> bool:
        return self.has_key(key)

    def V(self, value: VT) -> bool:
        return self.has_value(value)

    def k(self, key: KT) -> VT | None:
        return self.get_value_by_key(key)

    def v(self, value: VT) -> KT | None:
        return self.get_key_by_value(value)

    # Python protocols

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, item) -> bool:
        return self.has_key(item)

    def __iter__(self) -> Iterator[KT]:
        yield from self.__fwd.__iter__()

    def __eq__(self, other) -> bool:
        if not isinstance(other, BiMap):
            return NotImplemented
        return self.__fwd == other.__fwd and self.__bwd == other.__bwd

    def __repr__(self):
        return "%s({%s})" % (
            self.__class__.__name__,
            ", ".join(f"{k!r}: {v!r}" for k, v in self.__fwd.items()),
        )

    def __copy__(self):
        new = self.__class__()
        new.__fwd = self.__fwd.copy()
        new.__bwd = self.__bwd.copy()
        return new

    def copy(self):
        return self.__copy__()
