"""Token -> position postings for the suggestion store."""

from __future__ import annotations

from collections.abc import Iterable, Sequence, Set


class InvertedIndex:
    """Maps each token to the set of store positions whose token set holds it.

    Empty posting sets are dropped so ``len(index)`` reflects the live
    vocabulary.
    """

    def __init__(self) -> None:
        self._postings: dict[str, set[int]] = {}

    def __len__(self) -> int:
        return len(self._postings)

    def __contains__(self, token: object) -> bool:
        return token in self._postings

    def add(self, position: int, tokens: Iterable[str]) -> None:
        for token in tokens:
            self._postings.setdefault(token, set()).add(position)

    def discard(self, position: int, tokens: Iterable[str]) -> None:
        for token in tokens:
            posting = self._postings.get(token)
            if posting is None:
                continue
            posting.discard(position)
            if not posting:
                del self._postings[token]

    def postings(self, token: str) -> frozenset[int]:
        return frozenset(self._postings.get(token, ()))

    def candidates(self, tokens: Iterable[str]) -> set[int]:
        """Union of the posting lists of ``tokens``."""

        found: set[int] = set()
        for token in tokens:
            posting = self._postings.get(token)
            if posting:
                found.update(posting)
        return found

    def vocabulary(self) -> list[str]:
        return sorted(self._postings)

    def check(self, token_sets: Sequence[Set[str]]) -> list[str]:
        """Compare postings against per-position token sets.

        Returns one message per mismatch; an empty list means both views agree.
        """

        problems: list[str] = []
        for position, tokens in enumerate(token_sets):
            for token in tokens:
                if position not in self._postings.get(token, ()):
                    problems.append(f"position {position} holds token {token!r} but is missing from its postings")
        for token, posting in self._postings.items():
            if not posting:
                problems.append(f"token {token!r} has an empty posting set")
            for position in posting:
                if position >= len(token_sets) or token not in token_sets[position]:
                    problems.append(f"token {token!r} lists position {position} which does not hold it")
        return problems
