"""
Line module holding the text of a single buffer line.

Every offset taken or returned by a Line counts grapheme clusters (user
perceived characters), never bytes or code points, so edits cannot split a
multi-byte character or a base letter from its combining marks.
"""

from typing import Dict, List, Optional

import grapheme

from .position import SearchDirection


def _cluster_starts(clusters: List[str]) -> Dict[int, int]:
    """Map the string index where each cluster starts to its cluster index."""

    starts: Dict[int, int] = {}
    offset = 0
    for index, cluster in enumerate(clusters):
        starts[offset] = index
        offset += len(cluster)

    starts[offset] = len(clusters)
    return starts


class Line:
    """One line of text addressed by grapheme-cluster offsets."""

    def __init__(self, text: str = '') -> None:
        self._text = text
        self._length = 0
        self._update_length()

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"Line({self._text!r})"

    @property
    def text(self) -> str:
        """The line content without a terminator."""

        return self._text

    def length(self) -> int:
        """Get the number of grapheme clusters in the line."""

        return self._length

    def as_bytes(self) -> bytes:
        """Get the line content encoded as UTF-8."""

        return self._text.encode('utf-8')

    def render(self, start: int, end: int) -> str:
        """
        Get the clusters in [start, end) as a display string.

        Tabs are shown as a single space. Out of range offsets are clamped,
        so a window past the end of the line renders as an empty string.
        """

        end = max(0, min(end, self._length))
        start = max(0, min(start, end))

        return ''.join(
            ' ' if cluster == '\t' else cluster
            for cluster in self._clusters()[start:end]
        )

    def insert(self, at: int, char: str) -> None:
        """Insert a single character before the cluster at offset `at`."""

        if len(char) != 1:
            raise ValueError("Line.insert expects exactly one character")

        self.insert_text(at, char)

    def insert_text(self, at: int, text: str) -> None:
        """Insert a run of characters before the cluster at offset `at`."""

        if at >= self._length:
            self._text += text
        else:
            clusters = self._clusters()
            at = max(0, at)
            self._text = ''.join(clusters[:at]) + text + ''.join(clusters[at:])

        self._update_length()

    def delete(self, at: int) -> None:
        """Delete the cluster at offset `at`; offsets past the end are ignored."""

        if not 0 <= at < self._length:
            return

        clusters = self._clusters()
        del clusters[at]
        self._text = ''.join(clusters)
        self._update_length()

    def delete_slice(self, start: int, end: int) -> Optional[str]:
        """
        Remove the clusters in [start, end).

        Returns:
            Optional[str]: The removed text, or None if the range is empty
                or reaches past the end of the line.
        """

        if end <= start or end > self._length or start < 0:
            return None

        clusters = self._clusters()
        removed = ''.join(clusters[start:end])
        self._text = ''.join(clusters[:start]) + ''.join(clusters[end:])
        self._update_length()

        return removed

    def find(self, query: str, at: int,
             direction: SearchDirection = SearchDirection.FORWARD) -> Optional[int]:
        """
        Find `query` relative to the cluster offset `at`.

        A forward search looks at the clusters [at, length) and returns the
        first match; a backward search looks at the clusters [0, at) and
        returns the last match lying entirely inside them. A match must
        start and end on cluster boundaries.

        Args:
            query (str): Text to look for. An empty query never matches.
            at (int): Cluster offset the search is anchored at.
            direction (SearchDirection): Scan direction.

        Returns:
            Optional[int]: Cluster offset where the match starts.
        """

        if not query:
            return None

        at = max(0, min(at, self._length))
        clusters = self._clusters()

        if direction is SearchDirection.FORWARD:
            first = at
            window = clusters[at:]
        else:
            first = 0
            window = clusters[:at]

        haystack = ''.join(window)
        starts = _cluster_starts(window)

        def on_boundaries(index: int) -> bool:
            return index in starts and index + len(query) in starts

        if direction is SearchDirection.FORWARD:
            index = haystack.find(query)
            while index != -1 and not on_boundaries(index):
                index = haystack.find(query, index + 1)
        else:
            index = haystack.rfind(query)
            while index != -1 and not on_boundaries(index):
                index = haystack.rfind(query, 0, index + len(query) - 1)

        if index == -1:
            return None

        return first + starts[index]

    def _clusters(self) -> List[str]:
        return list(grapheme.graphemes(self._text))

    def _update_length(self) -> None:
        self._length = grapheme.length(self._text)
