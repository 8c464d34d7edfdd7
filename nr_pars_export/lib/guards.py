from collections import Counter
from typing import List, Sequence


def find_duplicates(names: Sequence[str]) -> List[str]:
    """Names occurring more than once, in order of first appearance."""
    counts = Counter(names)
    seen = set()
    duplicates: List[str] = []
    for name in names:
        if counts[name] > 1 and name not in seen:
            duplicates.append(name)
            seen.add(name)
    return duplicates
