import pytest
from packages.engine import FeedbackError, classify, reduce_candidates
from packages.harness import GameStatus, InteractiveSession, advance, play_word, run_batch, start
from packages.strategies import create_strategy

VOCAB = ["crane", "slate", "trace", "grape", "place"]


def test_start_statuses():
    assert start([]).status is GameStatus.STUCK
    assert start(["place"]).status is GameStatus.SOLVED
    assert start(["place"]).solution == "place"
    assert start(VOCAB).status is GameStatus.PLAYING
    assert start(VOCAB).solution is None


def test_advance_returns_new_state():
    s0 = start(VOCAB)
    s1 = advance(s0, "crane", classify("crane", "place"))
    assert s0.possible_answers == tuple(VOCAB) and s0.history == ()
    assert s1.possible_answers == ("place",)
    assert s1.history == (("crane", "Y-G-G"),)
    assert s1.status is GameStatus.SOLVED and s1.solution == "place"


def test_advance_all_exact_is_solved():
    s = advance(start(VOCAB), "slate", "GGGGG")
    assert s.status is GameStatus.SOLVED and s.solution == "slate"


def test_play_word_end_to_end_average():
    assert reduce_candidates("crane", classify("crane", "place"), VOCAB) == ["place"]
    seen = []
    r = play_word("place", vocabulary=VOCAB, answers=VOCAB,
                  strategy=create_strategy("average"),
                  on_round=lambda t, ranking, g: seen.append((t, ranking.remaining, g)))
    assert r["status"] == "solved"
    assert r["solution"] == "place"
    assert r["tries"] <= 5 and r["success"] is True
    assert r["history"][-1] == ("place", "GGGGG")
    remaining = [n for _, n, _ in seen]
    assert remaining == sorted(remaining, reverse=True)


@pytest.mark.parametrize("sid", ["average", "worst-case", "gambling"])
def test_play_word_solves_every_target(sid):
    strategy = create_strategy(sid)
    for target in VOCAB:
        r = play_word(target, vocabulary=VOCAB, answers=VOCAB, strategy=strategy)
        assert r["status"] == "solved" and r["solution"] == target


def test_play_word_target_missing_from_answers_is_stuck():
    r = play_word("place", vocabulary=VOCAB[:3], answers=VOCAB[:3],
                  strategy=create_strategy("average"))
    assert r["status"] == "stuck"
    assert r["solution"] is None and r["success"] is False


def test_run_batch():
    results = run_batch(VOCAB, vocabulary=VOCAB, answers=VOCAB,
                        strategy=create_strategy("worst-case"), progress=False)
    assert [r["answer"] for r in results] == VOCAB
    assert all(r["status"] == "solved" for r in results)
    assert len(run_batch(VOCAB, vocabulary=VOCAB, answers=VOCAB, sample=2,
                         strategy=create_strategy("average"), progress=False)) == 2


def test_session_inconsistent_feedback_is_stuck():
    session = InteractiveSession(VOCAB, VOCAB, create_strategy("average"))
    assert session.recommend(session.suggest()) in VOCAB
    state = session.apply_line("crane -----")
    assert state.status is GameStatus.STUCK
    assert state.possible_answers == ()
    assert session.recommend(session.suggest()) is None


def test_session_malformed_line_keeps_state():
    session = InteractiveSession(VOCAB, VOCAB, create_strategy("average"))
    before = session.state
    with pytest.raises(FeedbackError):
        session.apply_line("crane")
    assert session.state is before


def test_session_narrows_to_answer():
    session = InteractiveSession(VOCAB, VOCAB, create_strategy("average"))
    state = session.apply_line("crane +-=-=")
    assert state.status is GameStatus.SOLVED
    assert state.solution == "place"


def test_play_word_terminates_when_vocabulary_cannot_split():
    # the only typeable word scores 0; the answers must still be played
    r = play_word("place", vocabulary=["zzzzz"], answers=["crane", "place"],
                  strategy=create_strategy("average"), margin=-1.0)
    assert r["status"] == "solved" and r["solution"] == "place"
    assert r["tries"] <= 2


def test_play_word_records_round_previews():
    r = play_word("place", vocabulary=VOCAB, answers=VOCAB,
                  strategy=create_strategy("worst-case"), shown=2)
    rounds = r["rounds"]
    assert rounds and rounds[0]["try"] == 1 and rounds[0]["remaining"] == len(VOCAB)
    assert [p["guess"] for p in rounds] == [g for g, _ in r["history"][:len(rounds)]]
    for p in rounds:
        assert len(p["suggestions"]) <= 2 and len(p["guesses"]) <= 2
        assert p["guesses"][0][1] >= p["guesses"][-1][1]
    remaining = [p["remaining"] for p in rounds]
    assert remaining == sorted(remaining, reverse=True)
