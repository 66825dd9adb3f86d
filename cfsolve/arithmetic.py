"""Solutions to problems about single numbers and small formulas."""

from __future__ import annotations

from math import isqrt

_LUCKY_DIVISORS = (4, 7, 47, 74, 44, 444, 447, 474, 477, 777, 774, 744)


def bear_and_big_brother(limak: int, bob: int) -> int:
    """Count the years until Limak, tripling each year, outweighs Bob, who doubles."""
    if limak < 1:
        raise ValueError("Limak's weight must be positive")
    years = 0
    while limak <= bob:
        limak *= 3
        bob *= 2
        years += 1
    return years


def beautiful_year(year: int) -> int:
    """Return the first year after ``year`` whose four digits are all distinct."""
    candidate = year + 1
    while len(set(f"{candidate:04d}")) != len(f"{candidate:04d}"):
        candidate += 1
    return candidate


def calculating_function(n: int) -> int:
    """Evaluate ``-1 + 2 - 3 + ... + (-1)**n * n``."""
    if n % 2 == 0:
        return n // 2
    return -(n // 2 + 1)


def domino_piling(rows: int, columns: int) -> int:
    """Return how many 2x1 dominoes fit on a board."""
    return rows * columns // 2


def easy_problem(n: int) -> int:
    """Count ordered pairs of positive integers ``(a, b)`` with ``a = n - b``."""
    return n - 1


def elephant(distance: int) -> int:
    """Return the fewest steps of at most five to cover ``distance``."""
    return max(0, -(-distance // 5))


def even_odds(n: int, k: int) -> int:
    """Return the ``k``-th number when 1..n is listed odds first, then evens."""
    odds = (n + 1) // 2
    if k <= odds:
        return 2 * k - 1
    return 2 * (k - odds)


def expression(a: int, b: int, c: int) -> int:
    """Return the largest value made from ``a, b, c`` in order with ``+``, ``*`` and brackets."""
    return max(a + b + c, a + b * c, (a + b) * c, a * b * c, a * (b + c), a * b + c)


def lucky_division(n: int) -> bool:
    """Tell whether ``n`` is divisible by a lucky number up to 1000."""
    return any(n % divisor == 0 for divisor in _LUCKY_DIVISORS)


def minimize(a: int, b: int) -> int:
    """Return the minimum of ``(c - a) + (b - c)`` over ``a <= c <= b``."""
    return b - a


def plus_or_minus(a: int, b: int, c: int) -> str:
    """Return the sign that makes ``a ? b = c`` true."""
    total = a + b
    if total == c:
        return "+"
    return "-"


def soldier_and_bananas(cost: int, money: int, count: int) -> int:
    """Return how much the soldier must borrow to buy ``count`` bananas."""
    price = cost * count * (count + 1) // 2
    return max(0, price - money)


def sum_check(a: int, b: int, c: int) -> bool:
    """Tell whether one of the three numbers is the sum of the other two."""
    return a + b == c or a + c == b or b + c == a


def theatre_square(n: int, m: int, a: int) -> int:
    """Return the number of ``a`` by ``a`` flagstones needed to pave an ``n`` by ``m`` square."""
    return (-(-n // a)) * (-(-m // a))


def watermelon(weight: int) -> bool:
    """Tell whether a watermelon splits into two even, positive parts."""
    return weight % 2 == 0 and weight > 2


def wrong_subtraction(n: int, k: int) -> int:
    """Subtract one ``k`` times the way Tanya does."""
    for _ in range(k):
        n = n // 10 if n % 10 == 0 else n - 1
    return n


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def is_t_prime(n: int) -> bool:
    """Tell whether ``n`` has exactly three positive divisors."""
    if n < 2:
        return False
    root = isqrt(n)
    return root * root == n and _is_prime(root)