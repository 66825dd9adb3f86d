from collections import Counter

import pytest

from cfsolve.text import (
    anton_and_danik,
    bit_plus_plus,
    boy_or_girl,
    capitalize,
    caps_lock,
    chat_room,
    football,
    helpful_maths,
    hq9,
    hulk,
    magnets,
    nearly_lucky,
    normal_problem,
    petya_and_strings,
    queue_at_the_school,
    stones_on_the_table,
    string_task,
    translation,
    ultra_fast_mathematician,
    word,
)


@pytest.mark.parametrize(
    "games, winner",
    [("ADAAAA", "Anton"), ("DDDAADA", "Danik"), ("DADADA", "Friendship")],
)
def test_anton_and_danik(games, winner):
    assert anton_and_danik(games) == winner


def test_bit_plus_plus_counts_each_statement():
    assert bit_plus_plus(["X++"] * 5) == 5
    assert bit_plus_plus(["--X"] * 4) == -4
    assert bit_plus_plus(["++X", "X--"]) == bit_plus_plus([])


def test_boy_or_girl():
    assert boy_or_girl("wjmzbmr") == "CHAT WITH HER!"
    assert boy_or_girl("xiaodao") == "IGNORE HIM!"
    assert boy_or_girl("") == "IGNORE HIM!"


def test_chat_room():
    assert chat_room("ahhellllloou")
    assert not chat_room("hlelo")
    assert not chat_room("hell")


def test_football():
    assert not football("001001")
    assert football("1000000001")
    assert not football("0" * 6 + "1" + "0" * 6)


def test_hq9():
    assert hq9("Hi!")
    assert not hq9("Codeforces")
    assert not hq9("h+q")


def test_helpful_maths_orders_summands():
    expression = "3+1+2+1+3"
    result = helpful_maths(expression)
    parts = result.split("+")
    assert parts == sorted(parts)
    assert Counter(parts) == Counter(expression.split("+"))
    assert helpful_maths("2") == "2"


def test_hulk():
    assert hulk(1) == "I hate it"
    assert hulk(0) == ""
    text = hulk(5)
    assert text.endswith(" it")
    assert text.count(" that ") == 4
    assert text.count("I hate") == 3


def test_magnets():
    assert magnets(["10"] * 5) == magnets(["10"])
    alternating = ["10", "01"] * 3
    assert magnets(alternating) == len(alternating)
    assert magnets([]) == 0


def test_nearly_lucky():
    assert not nearly_lucky("40047")
    assert nearly_lucky("7747774")
    assert not nearly_lucky("1000000000000000000")


def test_petya_and_strings():
    assert petya_and_strings("aaaa", "aaaA") == 0
    assert petya_and_strings("abs", "Abz") == -1
    assert petya_and_strings("abcdefg", "AbCdEfF") == 1
    assert petya_and_strings("Abz", "abs") == -petya_and_strings("abs", "Abz")


def test_stones_on_the_table():
    assert stones_on_the_table("R" * 5) == 4
    assert stones_on_the_table("RGBRGB") == stones_on_the_table("")


def test_string_task():
    assert string_task("aeiouyAEIOUY") == ""
    result = string_task("Codeforces")
    assert result == ".c.d.f.r.c.s"
    assert result.count(".") * 2 == len(result)


def test_translation():
    assert translation("code", "edoc")
    assert not translation("abb", "aba")
    assert not translation("code", "code")


def test_ultra_fast_mathematician_round_trip():
    first, second = "1010100", "0100101"
    difference = ultra_fast_mathematician(first, second)
    assert ultra_fast_mathematician(first, difference) == second
    assert ultra_fast_mathematician(first, first) == "0" * len(first)


def test_ultra_fast_mathematician_rejects_length_mismatch():
    with pytest.raises(ValueError):
        ultra_fast_mathematician("101", "10")


def test_capitalize():
    assert capitalize("ApPLe") == "ApPLe"
    assert capitalize("konjac") == "Konjac"
    assert capitalize("") == ""


def test_caps_lock():
    assert caps_lock("cAPS") == "Caps"
    assert caps_lock("Lock") == "Lock"
    assert caps_lock("HTTP") == "HTTP".lower()
    assert caps_lock("z") == "Z"


def test_normal_problem_round_trip():
    for seen in ("qwq", "ppppp", "pppwwwqqq", "wqpqwpqwwqp"):
        inside = normal_problem(seen)
        assert len(inside) == len(seen)
        assert normal_problem(inside) == seen
    assert normal_problem("www") == "www"


def test_queue_at_the_school_single_step():
    assert queue_at_the_school("BGGBG", 1) == "GBGGB"


def test_queue_at_the_school_invariants():
    queue = "BBGBGGB"
    assert queue_at_the_school(queue, 0) == queue
    settled = queue_at_the_school(queue, len(queue))
    assert Counter(settled) == Counter(queue)
    assert settled == "".join(sorted(queue, key=lambda child: child != "G"))