"""Solutions to string-processing problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby, pairwise

_VOWELS = frozenset("aeiouy")
_MIRROR = str.maketrans("pq", "qp")
_HQ9_COMMANDS = frozenset("HQ9")
_LUCKY_DIGITS = frozenset("47")
_LUCKY_COUNTS = frozenset({4, 7})


def anton_and_danik(games: str) -> str:
    """Name who won more games: ``Anton``, ``Danik`` or ``Friendship`` on a tie."""
    counts = Counter(games)
    anton, danik = counts["A"], counts["D"]
    if anton > danik:
        return "Anton"
    if anton < danik:
        return "Danik"
    return "Friendship"


def bit_plus_plus(statements: Iterable[str]) -> int:
    """Run Bit++ statements on ``x = 0`` and return the final value of ``x``."""
    return sum(1 if statement in ("++X", "X++") else -1 for statement in statements)


def boy_or_girl(username: str) -> str:
    """Guess the gender from the number of distinct letters in a user name."""
    changes = max(len(set(username)) - 1, 0)
    return "CHAT WITH HER!" if changes % 2 else "IGNORE HIM!"


def chat_room(word: str) -> bool:
    """Tell whether ``hello`` can be obtained by deleting letters from ``word``."""
    letters = iter(word)
    return all(target in letters for target in "hello")


def football(situation: str) -> bool:
    """Tell whether seven or more players of one team stand in a row."""
    return any(sum(1 for _ in run) >= 7 for _, run in groupby(situation))


def hq9(program: str) -> bool:
    """Tell whether an HQ9+ program produces any output."""
    return any(char in _HQ9_COMMANDS for char in program)


def helpful_maths(expression: str) -> str:
    """Rewrite a sum of summands so that they appear in non-decreasing order."""
    return "+".join(sorted(char for char in expression if char != "+"))


def hulk(layers: int) -> str:
    """Describe Hulk's feelings with the given number of layers."""
    feelings = ("I hate" if layer % 2 else "I love" for layer in range(1, layers + 1))
    sentence = " that ".join(feelings)
    return f"{sentence} it" if sentence else ""


def magnets(magnets: Iterable[str]) -> int:
    """Count the groups formed by a row of magnets."""
    return sum(1 for _ in groupby(magnets))


def nearly_lucky(number: str) -> bool:
    """Tell whether the count of lucky digits in ``number`` is itself lucky."""
    lucky = sum(1 for digit in number if digit in _LUCKY_DIGITS)
    return lucky in _LUCKY_COUNTS


def petya_and_strings(first: str, second: str) -> int:
    """Compare two strings ignoring case, returning -1, 0 or 1."""
    first, second = first.lower(), second.lower()
    if first < second:
        return -1
    if first > second:
        return 1
    return 0


def stones_on_the_table(colors: str) -> int:
    """Count the stones to remove so that neighbours differ in colour."""
    return sum(1 for left, right in pairwise(colors) if left == right)


def string_task(word: str) -> str:
    """Drop vowels, lower the case and put a dot before each consonant."""
    return "".join(f".{char}" for char in word.lower() if char not in _VOWELS)


def translation(source: str, target: str) -> bool:
    """Tell whether ``target`` is ``source`` written backwards."""
    return target == source[::-1]


def ultra_fast_mathematician(first: str, second: str) -> str:
    """Mark with ``1`` the positions where two digit strings differ."""
    if len(first) != len(second):
        raise ValueError("both numbers must have the same length")
    return "".join("0" if a == b else "1" for a, b in zip(first, second))


def word(text: str) -> str:
    """Convert a word to upper case if it has more upper-case letters, else lower."""
    upper = sum(1 for char in text if char.isupper())
    return text.upper() if upper > len(text) - upper else text.lower()


def capitalize(word: str) -> str:
    """Make the first letter upper case and keep the rest unchanged."""
    return word[:1].upper() + word[1:]


def caps_lock(word: str) -> str:
    """Undo an accidental Caps Lock: swap case when all letters but the first are upper."""
    if any(char.islower() for char in word[1:]):
        return word
    return word.swapcase()


def normal_problem(seen: str) -> str:
    """Show the string as seen from inside the shop: mirrored, with p and q swapped."""
    return seen[::-1].translate(_MIRROR)


def queue_at_the_school(queue: str, seconds: int) -> str:
    """Let every boy standing before a girl swap with her once a second."""
    line = list(queue)
    for _ in range(seconds):
        position = 0
        while position < len(line) - 1:
            if line[position] == "B" and line[position + 1] == "G":
                line[position], line[position + 1] = "G", "B"
                position += 2
            else:
                position += 1
    return "".join(line)


__all__: Sequence[str] = (
    "anton_and_danik",
    "bit_plus_plus",
    "boy_or_girl",
    "chat_room",
    "football",
    "hq9",
    "helpful_maths",
    "hulk",
    "magnets",
    "nearly_lucky",
    "petya_and_strings",
    "stones_on_the_table",
    "string_task",
    "translation",
    "ultra_fast_mathematician",
    "word",
    "capitalize",
    "caps_lock",
    "normal_problem",
    "queue_at_the_school",
)