"""LinkVisitTracker - 한 번이라도 누른 링크 대상 기록 (세션 동안 줄어들지 않음)"""
from typing import FrozenSet, Iterator, Set


class LinkVisitTracker:
    def __init__(self):
        self._visited: Set[str] = set()

    def record(self, link_target: str):
        self._visited.add(link_target)

    def is_visited(self, link_target: str) -> bool:
        return link_target in self._visited

    def snapshot(self) -> FrozenSet[str]:
        return frozenset(self._visited)

    def __contains__(self, link_target) -> bool:
        return self.is_visited(link_target)

    def __len__(self):
        return len(self._visited)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())
