# roster/lib/assignments.py
# Store-based primitives (no Core dependency).
# store shape: store[name] = dept

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple


def is_valid(name: str, dept: str, employees: Sequence[str], departments: Sequence[str]) -> bool:
    return name in employees and dept in departments


def assign(store: Dict[str, str], name: str, dept: str) -> None:
    store[name] = dept


def members(store: Dict[str, str], dept: str) -> List[Tuple[str, str]]:
    """Return (name, dept) pairs assigned to dept, sorted by pair."""
    return sorted((n, d) for n, d in store.items() if d == dept)


def names(store: Dict[str, str]) -> List[str]:
    return sorted(store.keys())
