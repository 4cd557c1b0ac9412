"""Unit tests for star scoring."""

import pytest

from quest.delivery import Score, score, stars_label


@pytest.mark.parametrize(
    "mistakes,xp,expected",
    [
        (0, 50, (3, 50)),
        (1, 40, (2, 40)),
        (2, 40, (2, 40)),
        (3, 40, (1, 40)),
        (10, 0, (1, 0)),
    ],
)
def test_score(mistakes, xp, expected):
    assert score(mistakes, xp) == expected


def test_score_fields():
    result = score(0, 25)
    assert isinstance(result, Score)
    assert (result.stars, result.xp) == (3, 25)


@pytest.mark.parametrize(
    "stars,label",
    [(0, "☆☆☆"), (1, "★☆☆"), (2, "★★☆"), (3, "★★★"), (5, "★★★"), (-1, "☆☆☆")],
)
def test_stars_label(stars, label):
    assert stars_label(stars) == label
