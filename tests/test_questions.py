import pytest

from mathquiz.questions import Question, get_question, question_count


def test_count_matches_bank():
    assert question_count() == 30


def test_first_question_text():
    q = get_question(0)
    assert q.text == "What is the slope of the line y=3x+4?"
    assert q.options[q.correct] == "3"


def test_every_question_is_well_formed():
    for i in range(question_count()):
        q = get_question(i)
        assert len(q.options) == 4
        assert 0 <= q.correct < 4


def test_is_correct_uses_zero_based_index():
    q = get_question(1)
    assert q.options[1] == "2x+10"
    assert q.is_correct(1)
    assert not q.is_correct(0)
    assert not q.is_correct(2)


def test_is_correct_on_constructed_question():
    q = Question("Q?", ("a", "b", "c", "d"), 3)
    assert q.is_correct(3)
    assert not q.is_correct(-1)


@pytest.mark.parametrize("index", [-1, 30, 1000])
def test_out_of_range_raises(index):
    with pytest.raises(IndexError):
        get_question(index)


def test_last_question():
    q = get_question(question_count() - 1)
    assert q.text == "Which unit is used to measure angles?"
    assert q.options[q.correct] == "degrees"