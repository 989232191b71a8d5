import pytest

from bulletin_ocr.parsing.extraction.score_matcher import ScoreMatcher


@pytest.fixture
def matcher():
    return ScoreMatcher()


@pytest.mark.parametrize("line,expected", [
    ("15.5/20", 15.5),
    ("15,5 / 20", 15.5),
    ("14,5 /20", 14.5),
    ("Moyenne 12.75", 12.75),
    ("Note : 9,5", 9.5),
    ("16/20", 16.0),
    ("FRANCAIS 11", 11.0),
    ("0/20", 0.0),
    ("20/20", 20.0),
])
def test_match_valid_scores(matcher, line, expected):
    assert matcher.match(line) == expected


def test_decimal_over_20_wins_over_bare_integer(matcher):
    """15.5/20 побеждает и коэффициент 3, и знаменатель 20."""
    assert matcher.match("Maths 15.5/20 (coefficient 3)") == 15.5


def test_decimal_over_20_wins_over_decimal_end(matcher):
    assert matcher.match("12,5/20 rang 3.5") == 12.5


@pytest.mark.parametrize("line", ["21", "-1", "99", "25/20"])
def test_out_of_range_rejected(matcher, line):
    assert matcher.match(line) is None


def test_out_of_range_falls_through_to_next_pattern(matcher):
    """25/20 отброшено, следующий паттерн находит 14."""
    assert matcher.match("14 absences 25/20") == 14.0


@pytest.mark.parametrize("line", ["", "Appréciation : bon travail", "2023", "Rang 123"])
def test_no_score(matcher, line):
    assert matcher.match(line) is None


@pytest.mark.parametrize("line,expected", [
    ("Mathématiques.....14,5/20", 14.5),
    ("Français,15/20", 15.0),
    ("Maths-15/20", 15.0),
    ("Maths.12", 12.0),
    ("Anglais : 13", 13.0),
])
def test_score_glued_to_label_or_punctuation(matcher, line, expected):
    """Точки-заполнители, запятая или дефис перед оценкой не мешают её найти."""
    assert matcher.match(line) == expected


@pytest.mark.parametrize("line", ["Maths -1", "Note -3/20", "123.45"])
def test_negative_and_glued_numbers_rejected(matcher, line):
    assert matcher.match(line) is None


@pytest.mark.parametrize("line", [
    "Maths 25/20",
    "Mathématiques.....105/20",
    "Anglais ../20",
    "Anglais .. / 20",
    "SVT -3/20",
])
def test_denominator_never_returned_as_score(matcher, line):
    """Единственное 20 в строке стоит после "/" - это знаменатель, не оценка."""
    assert matcher.match(line) is None


def test_denominator_must_be_exactly_20(matcher):
    """/200 не считается знаменателем 20."""
    assert matcher.match("Total 150/200") is None


def test_custom_range():
    matcher = ScoreMatcher(min_score=0.0, max_score=10.0)

    assert matcher.match("12") is None
    assert matcher.match("8") == 8.0
