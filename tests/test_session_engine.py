import pytest

from app.calculation import CharState
from app.state import Status
from services.session_engine import SessionEngine, WORD_BONUS, WORD_PENALTY


def _engine(text="the cat sat", **kwargs) -> SessionEngine:
    return SessionEngine(lambda: text, **kwargs)


def _type(engine: SessionEngine, text: str, now: float = 1.0, start: str = ""):
    """Feed one keystroke at a time, the way an input field reports changes."""
    for i in range(len(start) + 1, len(text) + 1):
        engine.on_input(text[:i], now)


def test_initial_state():
    e = _engine()
    s = e.session
    assert s.status is Status.WAITING
    assert s.start_timestamp is None
    assert s.input_buffer == ""
    assert s.elapsed_seconds == 0.0
    assert s.bonus_seconds == 0.0
    assert e.wpm == 0
    assert e.accuracy == 100.0
    assert e.time_remaining == 60


def test_first_character_starts_session():
    e = _engine()
    e.on_input("t", 12.5)
    assert e.status is Status.STARTED
    assert e.session.start_timestamp == 12.5


def test_empty_input_while_waiting_does_not_start():
    e = _engine()
    e.on_input("", 3.0)
    assert e.status is Status.WAITING
    assert e.session.start_timestamp is None


def test_empty_input_after_start_stays_started():
    e = _engine()
    e.on_input("t", 0.0)
    e.on_input("", 1.0)
    assert e.status is Status.STARTED
    assert e.session.input_buffer == ""
    assert e.session.start_timestamp == 0.0


def test_correct_then_wrong_word():
    e = _engine("the cat sat")
    _type(e, "the ")
    assert e.session.bonus_seconds == 5
    _type(e, "the dog ", start="the ")
    assert e.session.bonus_seconds == -5
    assert e.time_remaining == 55


def test_bonus_values_are_configurable():
    e = _engine("the cat sat", word_bonus=2, word_penalty=3)
    _type(e, "the dog ")
    assert e.session.bonus_seconds == 2 - 3


def test_bonus_changes_only_by_fixed_steps():
    e = _engine("the cat sat on the mat")
    typed = "the cat szt on teh mat"
    deltas = []
    for i in range(1, len(typed) + 1):
        before = e.session.bonus_seconds
        e.on_input(typed[:i], 1.0)
        deltas.append(e.session.bonus_seconds - before)
    assert set(deltas) <= {0, WORD_BONUS, -WORD_PENALTY}
    # the, cat, on correct; szt, teh wrong
    assert deltas.count(WORD_BONUS) == 3
    assert deltas.count(-WORD_PENALTY) == 2


def test_held_space_fires_boundary_once():
    e = _engine("a b c")
    _type(e, "a ")
    assert e.session.bonus_seconds == 5
    e.on_input("a  ", 1.0)
    assert e.session.bonus_seconds == 5


def test_double_space_shifts_typed_word_index():
    # typed buffer splits on single spaces, so "a  b" has three tokens
    e = _engine("a b c")
    _type(e, "a  b ")
    assert e.session.bonus_seconds == WORD_BONUS - WORD_PENALTY


def test_leading_space_is_penalised_against_first_word():
    e = _engine("the cat")
    e.on_input(" ", 0.0)
    assert e.status is Status.STARTED
    assert e.session.bonus_seconds == -WORD_PENALTY


def test_words_past_reference_are_ignored():
    e = _engine("a b")
    _type(e, "a c d e ")
    assert e.session.bonus_seconds == WORD_BONUS - WORD_PENALTY


def test_line_break_separates_reference_words():
    e = _engine("ab\ncd ef")
    _type(e, "ab cd ")
    assert e.session.bonus_seconds == 2 * WORD_BONUS


def test_exact_match_finishes_with_elapsed_time():
    e = _engine("hi")
    e.on_input("h", 100.0)
    e.on_input("hi", 110.0)
    assert e.status is Status.FINISHED
    assert e.session.elapsed_seconds == pytest.approx(10.0)
    assert e.wpm == 2
    assert e.accuracy == 100.0


def test_completion_uses_normalized_reference():
    e = _engine("ab\ncd")
    _type(e, "ab cd", now=4.0)
    assert e.status is Status.FINISHED
    assert e.accuracy == 100.0
    chars = e.character_states()
    assert chars[2].char == "\n"
    assert chars[2].state is CharState.CORRECT


def test_prefix_does_not_finish():
    e = _engine("the cat sat")
    _type(e, "the cat sa")
    assert e.status is Status.STARTED


def test_longer_input_does_not_finish():
    e = _engine("abc")
    e.on_input("abcd", 1.0)
    assert e.status is Status.STARTED
    assert e.accuracy == 75.0


@pytest.mark.parametrize("text", ["the cat sat", "x", "Line one.\nLine two.", "a  b"])
def test_typing_reference_exactly_reaches_full_accuracy(text):
    e = _engine(text)
    _type(e, text.replace("\n", " "))
    assert e.status is Status.FINISHED
    assert e.accuracy == 100.0


def test_metrics_bounded_for_every_prefix():
    e = _engine("Practice makes\nperfect every day")
    typed = "Prqctice makse perfect  evry day and more"
    for i in range(1, len(typed) + 1):
        e.on_input(typed[:i], float(i))
        e.on_tick(float(i) + 0.5)
        assert 0.0 <= e.accuracy <= 100.0
        assert e.time_remaining >= 0
        assert e.session.elapsed_seconds >= 0
        assert (e.session.start_timestamp is not None) == (e.status is not Status.WAITING)


def test_tick_advances_elapsed():
    e = _engine()
    e.on_input("t", 0.0)
    e.on_tick(30.0)
    assert e.status is Status.STARTED
    assert e.session.elapsed_seconds == 30.0
    assert e.time_remaining == 30
    # 1 char in 30s
    assert e.wpm == 0


def test_tick_timeout_clamps_elapsed_to_budget():
    e = _engine()
    e.on_input("t", 0.0)
    e.on_tick(61.7)
    assert e.status is Status.FINISHED
    assert e.session.elapsed_seconds == 60
    assert e.time_remaining == 0


def test_tick_timeout_includes_bonus():
    e = _engine("the cat sat")
    _type(e, "the ", now=0.0)
    e.on_tick(64.0)
    assert e.status is Status.STARTED
    e.on_tick(66.3)
    assert e.status is Status.FINISHED
    assert e.session.elapsed_seconds == 65


def test_negative_budget_finishes_on_next_tick():
    e = _engine("a b c d e f g h")
    _type(e, "x x x x x x x ", now=0.0)
    assert e.session.bonus_seconds == -70
    assert e.time_remaining == 0
    e.on_tick(1.0)
    assert e.status is Status.FINISHED
    assert e.session.elapsed_seconds == 0.0
    assert e.wpm == 0


def test_base_duration_is_configurable():
    e = _engine(base_duration=15)
    assert e.time_remaining == 15
    e.on_input("t", 0.0)
    e.on_tick(15.0)
    assert e.status is Status.FINISHED
    assert e.session.elapsed_seconds == 15


def test_tick_while_waiting_is_noop():
    e = _engine()
    e.on_tick(500.0)
    assert e.status is Status.WAITING
    assert e.session.elapsed_seconds == 0.0


def test_finished_session_is_frozen():
    e = _engine("hi")
    e.on_input("h", 0.0)
    e.on_input("hi", 6.0)
    s = e.session
    frozen = (s.input_buffer, s.elapsed_seconds, s.bonus_seconds, s.status)

    e.on_input("hi ", 7.0)
    e.on_input("", 8.0)
    e.on_tick(100.0)
    e.on_tick(1000.0)

    assert (s.input_buffer, s.elapsed_seconds, s.bonus_seconds, s.status) == frozen


def test_wpm_is_zero_while_waiting():
    e = _engine()
    e.on_input("", 10.0)
    assert e.wpm == 0


def test_reset_discards_session_and_draws_new_paragraph():
    texts = iter(["first text", "second text"])
    e = SessionEngine(lambda: next(texts))
    old = e.session
    _type(e, "first ", now=0.0)
    e.on_tick(20.0)

    new = e.reset()

    assert new is e.session
    assert new is not old
    assert new.reference_text == "second text"
    assert new.status is Status.WAITING
    assert new.input_buffer == ""
    assert new.bonus_seconds == 0.0
    assert new.elapsed_seconds == 0.0
    assert new.start_timestamp is None
    assert e.time_remaining == 60


def test_reset_from_finished():
    e = _engine("hi")
    _type(e, "hi")
    assert e.status is Status.FINISHED
    e.reset()
    assert e.status is Status.WAITING
    e.on_input("h", 50.0)
    assert e.session.start_timestamp == 50.0


def test_snapshot_matches_properties():
    e = _engine("the cat")
    _type(e, "the c", now=0.0)
    e.on_tick(6.0)
    snap = e.snapshot()
    assert snap.status is Status.STARTED
    assert snap.time_remaining == e.time_remaining == 59
    assert snap.wpm == e.wpm == 10
    assert snap.accuracy == 100.0
    assert snap.bonus_seconds == 5
    assert len(snap.characters) == len("the cat")
    assert snap.characters[5].is_cursor


def test_session_lifecycle_flags():
    e = _engine("hi")
    s = e.session
    assert not s.is_running and not s.is_finished
    e.on_input("h", 0.0)
    assert s.is_running and not s.is_finished
    e.on_input("hi", 1.0)
    assert s.is_finished and not s.is_running


def test_normalize_reference_only_rewrites_line_feeds():
    from app.state import normalize_reference
    assert normalize_reference("a\nb\n") == "a b "
    assert normalize_reference("a\r\nb") == "a\r b"
