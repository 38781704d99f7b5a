import pytest
from packages.engine import Ranking, bucket_sizes, choose_guess, rank
from packages.strategies import create_strategy

VOCAB = ["crane", "slate", "trace", "grape", "place", "adieu", "roate", "lints"]
ANSWERS = ["crane", "slate", "trace", "grape", "place"]


@pytest.mark.parametrize("sid", ["average", "worst-case", "gambling"])
def test_rank_scores_match_direct_computation(sid):
    strategy = create_strategy(sid)
    r = rank(VOCAB, ANSWERS, strategy)
    for w in VOCAB:
        assert r.scores[w] == strategy.score(bucket_sizes(w, ANSWERS), len(ANSWERS))


def test_rank_views_sorted_and_complete():
    r = rank(VOCAB, ANSWERS, create_strategy("average"))
    assert [w for w, _ in r.suggestions] == sorted(VOCAB, key=lambda w: -r.scores[w])
    assert sorted(w for w, _ in r.guesses) == sorted(ANSWERS)
    assert all(a[1] >= b[1] for a, b in zip(r.guesses, r.guesses[1:]))
    assert r.remaining == len(ANSWERS)
    assert r.top_suggestions(3) == r.suggestions[:3]
    assert r.top_guesses(100) == r.guesses


def test_rank_ties_keep_input_order():
    # one answer: every guess scores 0.0
    r = rank(VOCAB, ["place"], create_strategy("average"))
    assert [w for w, _ in r.suggestions] == VOCAB
    assert r.guesses == [("place", 0.0)]


def test_rank_empty_answers():
    r = rank(VOCAB, [], create_strategy("worst-case"))
    assert r.guesses == []
    assert all(s == 0.0 for _, s in r.suggestions)
    with pytest.raises(ValueError):
        choose_guess(r)


def test_rank_scores_answers_outside_vocabulary():
    r = rank(["crane", "slate"], ["place", "grape"], create_strategy("average"))
    assert set(r.scores) == {"crane", "slate", "place", "grape"}
    assert sorted(w for w, _ in r.suggestions) == ["crane", "slate"]
    assert sorted(w for w, _ in r.guesses) == ["grape", "place"]


def test_rank_fresh_per_round():
    strategy = create_strategy("average")
    first = rank(VOCAB, ANSWERS, strategy)
    second = rank(VOCAB, ANSWERS[:2], strategy)
    assert first.scores is not second.scores
    assert second.scores == {w: strategy.score(bucket_sizes(w, ANSWERS[:2]), 2) for w in VOCAB}


def test_rank_parallel_matches_serial():
    strategy = create_strategy("gambling", 0.4)
    serial = rank(VOCAB, ANSWERS, strategy, workers=1)
    parallel = rank(VOCAB, ANSWERS, strategy, workers=2)
    assert parallel.suggestions == serial.suggestions
    assert parallel.guesses == serial.guesses


def _ranking(suggestions, guesses):
    scores = dict(suggestions)
    scores.update(dict(guesses))
    return Ranking(suggestions=suggestions, guesses=guesses, scores=scores)


def test_choose_guess_prefers_possible_answer():
    r = _ranking([("roate", 2.003), ("crane", 2.0)], [("crane", 2.0), ("place", 1.0)])
    assert choose_guess(r, margin=0.005) == "crane"


def test_choose_guess_switches_on_margin():
    r = _ranking([("roate", 2.1), ("crane", 2.0)], [("crane", 2.0), ("place", 1.0)])
    assert choose_guess(r, margin=0.005) == "roate"
    assert choose_guess(r, margin=0.5) == "crane"


def test_choose_guess_ignores_zero_information_suggestion():
    r = _ranking([("zzzzz", 0.0)], [("crane", 1.0), ("place", 1.0)])
    assert choose_guess(r, margin=-1.0) == "crane"
    assert choose_guess(_ranking([("zzzzz", 0.0)], [("crane", 0.0)]), margin=0.0) == "crane"
