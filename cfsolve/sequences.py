"""Solutions to problems about lists of numbers, grids and records."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise
from statistics import fmean

_MATRIX_SIZE = 5
_TAXI_SEATS = 4


def beautiful_matrix(grid: Iterable[Iterable[int]]) -> int:
    """Count the row and column swaps that move the single 1 to the centre of a 5x5 grid."""
    rows = [list(row) for row in grid]
    if len(rows) != _MATRIX_SIZE or any(len(row) != _MATRIX_SIZE for row in rows):
        raise ValueError("the matrix must be 5 by 5")
    centre = _MATRIX_SIZE // 2
    for row_index, row in enumerate(rows):
        for column_index, value in enumerate(row):
            if value == 1:
                return abs(row_index - centre) + abs(column_index - centre)
    raise ValueError("the matrix holds no 1")


def george_and_accommodation(rooms: Iterable[tuple[int, int]]) -> int:
    """Count the rooms, given as (occupants, capacity), with space for two more people."""
    return sum(1 for occupants, capacity in rooms if capacity - occupants >= 2)


def amazing_performances(points: Iterable[int]) -> int:
    """Count the contests that set a new best or a new worst score."""
    scores = iter(points)
    try:
        best = worst = next(scores)
    except StopIteration:
        return 0
    amazing = 0
    for score in scores:
        if score > best:
            best = score
            amazing += 1
        if score < worst:
            worst = score
            amazing += 1
    return amazing


def easy_or_hard(opinions: Iterable[int]) -> str:
    """Return ``HARD`` if anyone found the problem hard, otherwise ``EASY``."""
    for opinion in opinions:
        if opinion == 1:
            return "HARD"
    return "EASY"


def horseshoes(colors: Sequence[int]) -> int:
    """Count the horseshoes to buy so that all four have different colours."""
    return len(colors) - len(set(colors))


def kefa_first_steps(earnings: Iterable[int]) -> int:
    """Return the length of the longest non-decreasing run of days."""
    longest = current = 0
    previous: int | None = None
    for amount in earnings:
        current = current + 1 if previous is not None and amount >= previous else 1
        longest = max(longest, current)
        previous = amount
    return longest


def next_round(scores: Sequence[int], k: int) -> int:
    """Count the participants with a positive score at least that of place ``k``."""
    if not 1 <= k <= len(scores):
        raise ValueError("k must name a place among the scores")
    threshold = scores[k - 1]
    return sum(1 for score in scores if score > 0 and score >= threshold)


def presents(givers: Sequence[int]) -> list[int]:
    """Given whom each friend gave a present to, return who gave to each friend."""
    if sorted(givers) != list(range(1, len(givers) + 1)):
        raise ValueError("the presents must form a permutation of the friends")
    received_from = [0] * len(givers)
    for giver, receiver in enumerate(givers, start=1):
        received_from[receiver - 1] = giver
    return received_from


def team(opinions: Iterable[Iterable[int]]) -> int:
    """Count the problems that at least two of the friends are sure about."""
    return sum(1 for votes in opinions if sum(1 for vote in votes if vote == 1) >= 2)


def tram(stops: Iterable[tuple[int, int]]) -> int:
    """Return the smallest tram capacity for stops given as (exiting, entering)."""
    loads = accumulate(entering - exiting for exiting, entering in stops)
    return max(loads, default=0)


def twins(coins: Iterable[int]) -> int:
    """Return the fewest coins whose sum is strictly more than what is left."""
    values = sorted(coins, reverse=True)
    if not values:
        raise ValueError("there are no coins")
    half = sum(values) // 2
    for count, taken in enumerate(accumulate(values), start=1):
        if taken > half:
            return count
    raise ValueError("no choice of coins outweighs the rest")


def vanya_and_fence(fence_height: int, heights: Iterable[int]) -> int:
    """Return the width of the road the friends need to walk unnoticed."""
    if fence_height <= 0:
        raise ValueError("the fence height must be positive")
    return sum(max(1, -(-height // fence_height)) for height in heights)


def young_physicist(forces: Iterable[tuple[int, int, int]]) -> bool:
    """Tell whether the forces acting on a body sum to zero."""
    return all(total == 0 for total in map(sum, zip(*forces)))


def drinks(fractions: Iterable[float]) -> float:
    """Return the share of orange juice in a cocktail of equal parts of each drink."""
    values = list(fractions)
    if not values:
        raise ValueError("there are no drinks")
    return fmean(values)


def taxi(groups: Iterable[int]) -> int:
    """Return the fewest four-seat taxis for groups that must ride together."""
    counts = Counter(groups)
    if any(size not in range(1, _TAXI_SEATS + 1) for size in counts):
        raise ValueError("a group must have between one and four children")
    total = counts[4] + counts[3] + counts[2] // 2
    singles = counts[1] - counts[3]
    if counts[2] % 2 == 1:
        total += 1
        singles -= 2
    if singles > 0:
        total += (singles + 3) // 4
    return total


def vanya_and_lanterns(length: int, lanterns: Iterable[float]) -> float:
    """Return the least lantern radius that lights the whole street."""
    positions = sorted(lanterns)
    if any(not 0 <= position <= length for position in positions):
        raise ValueError("every lantern must stand on the street")
    if not positions:
        return float(length)
    widest_gap = max((right - left for left, right in pairwise(positions)), default=0)
    return float(max(positions[0], length - positions[-1], widest_gap / 2))


__all__: Sequence[str] = (
    "beautiful_matrix",
    "george_and_accommodation",
    "amazing_performances",
    "easy_or_hard",
    "horseshoes",
    "kefa_first_steps",
    "next_round",
    "presents",
    "team",
    "tram",
    "twins",
    "vanya_and_fence",
    "young_physicist",
    "drinks",
    "taxi",
    "vanya_and_lanterns",
)