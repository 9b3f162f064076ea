"""
Open-set containers for A*: hold candidate cells keyed by their f score.
"""

from __future__ import annotations
import heapq
from typing import Dict, List, Tuple

from .cell import CellId


class ScanFrontier:
    """
    Frontier backed by an insertion-ordered dict.
    extract_min scans every entry; the first strictly smaller score wins, so
    ties go to the cell that entered the frontier earliest. Updating the score
    of a member keeps its original position.
    """

    def __init__(self) -> None:
        self._scores: Dict[CellId, float] = {}

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, cell_id: CellId) -> bool:
        return cell_id in self._scores

    def insert_or_update(self, cell_id: CellId, score: float) -> None:
        self._scores[cell_id] = score

    def extract_min(self) -> CellId:
        if not self._scores:
            raise IndexError("extract_min from an empty frontier")
        lowest = None
        lowest_score = 0.0
        for cell_id, score in self._scores.items():
            if lowest is None or score < lowest_score:
                lowest = cell_id
                lowest_score = score
        del self._scores[lowest]
        return lowest


class HeapFrontier:
    """
    Frontier backed by a binary heap with lazy deletion.
    Entries are (score, seq, id); an update pushes a fresh entry and the stale
    one is skipped when popped. Ties go to the earliest push.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, CellId]] = []
        # Live entry sequence number per member
        self._entries: Dict[CellId, int] = {}
        self._count = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, cell_id: CellId) -> bool:
        return cell_id in self._entries

    def insert_or_update(self, cell_id: CellId, score: float) -> None:
        self._count += 1
        self._entries[cell_id] = self._count
        heapq.heappush(self._heap, (score, self._count, cell_id))

    def extract_min(self) -> CellId:
        while self._heap:
            _, seq, cell_id = heapq.heappop(self._heap)
            if self._entries.get(cell_id) == seq:
                del self._entries[cell_id]
                return cell_id
        raise IndexError("extract_min from an empty frontier")
