import pytest

from rustdrill.drills.baskets import (
    Fruit,
    Team,
    build_scores_table,
    fill_fruit_basket,
    make_fruit_basket,
    maybe_icecream,
    vec_loop,
    vec_map,
)


def test_vec_loop():
    assert vec_loop([2, 4, 6, 8, 10]) == [4, 8, 12, 16, 20]


def test_vec_loop_mutates_in_place():
    values = [1, 3]
    vec_loop(values)
    assert values == [2, 6]


def test_vec_map():
    values = [2, 4, 6, 8, 10]
    assert vec_map(values) == [4, 8, 12, 16, 20]
    assert values == [2, 4, 6, 8, 10]


def test_at_least_three_types_of_fruits():
    assert len(make_fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(make_fruit_basket().values()) >= 5


def _given_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_given_fruits_are_not_modified():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert sum(basket.values()) > 11


def test_all_fruit_types_in_basket():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert all(amount != 0 for amount in basket.values())
    assert set(basket) == set(Fruit)


RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    assert build_scores_table(RESULTS)["England"] == Team(goals_scored=5, goals_conceded=4)


def test_validate_team_score_2():
    assert build_scores_table(RESULTS)["Spain"] == Team(goals_scored=0, goals_conceded=2)


def test_scores_reject_bad_goal_count():
    with pytest.raises(ValueError):
        build_scores_table("England,France,four,2\n")


def test_scores_reject_short_line():
    with pytest.raises(ValueError):
        build_scores_table("England,France,4\n")


@pytest.mark.parametrize(
    ("hour", "expected"),
    [(9, 5), (10, 5), (23, 0), (22, 0), (25, None)],
)
def test_check_icecream(hour, expected):
    assert maybe_icecream(hour) == expected


def test_raw_value():
    assert maybe_icecream(12) == 5


def test_icecream_rejects_negative_time():
    with pytest.raises(ValueError):
        maybe_icecream(-1)