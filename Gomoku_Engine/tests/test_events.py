"""Change notifications: order, payloads, and subscription management."""

import pytest

from Gomoku_Engine.Board import Board
from Gomoku_Engine.engine.events import EventEmitter


def record(board, names=("play", "remove", "clear", "win_length_changed", "change")):
    log = []
    for name in names:
        board.on(name, lambda *args, _name=name: log.append((_name, args)))
    return log


def test_place_fires_play_then_change():
    b = Board(5, 5)
    log = record(b)
    b.place_symbol(1, 2)
    move = b.get_position(1, 2)
    assert log == [("play", (move,)), ("change", ())]


def test_rejected_and_out_of_bounds_moves_fire_nothing():
    b = Board(5, 5)
    b.place_symbol(0, 0)
    log = record(b)
    assert b.place_symbol(0, 0) is False
    with pytest.raises(ValueError):
        b.place_symbol(9, 9)
    assert log == []


def test_undo_fires_remove_with_removed_move():
    b = Board(5, 5)
    b.place_symbol(3, 3)
    move = b.get_last_played_position()
    log = record(b)
    b.undo_last_move()
    assert log == [("remove", (move,)), ("change", ())]


def test_clear_and_resize_fire_clear_then_change():
    b = Board(5, 5)
    log = record(b)
    b.clear()
    b.resize(7, 7)
    assert log == [("clear", ()), ("change", ()), ("clear", ()), ("change", ())]


def test_set_win_condition_fires_with_new_length():
    b = Board(5, 5)
    log = record(b)
    b.set_win_condition(4)
    assert log == [("win_length_changed", (4,)), ("change", ())]


def test_state_is_consistent_when_observers_run():
    b = Board(5, 5)
    seen = []
    b.on("play", lambda move: seen.append((b.get_position(move.x, move.y) is move, b.get_next_move_symbol())))
    b.on("remove", lambda move: seen.append((b.get_position(move.x, move.y), len(b.history))))
    b.place_symbol(2, 2)
    b.undo_last_move()
    assert seen == [(True, "O"), (None, 0)]


def test_observers_called_in_registration_order():
    b = Board(3, 3)
    order = []
    b.on("change", lambda: order.append("first"))
    b.on("change", lambda: order.append("second"))
    b.on("change", lambda: order.append("third"))
    b.place_symbol(0, 0)
    assert order == ["first", "second", "third"]


def test_off_removes_single_or_all_listeners():
    b = Board(3, 3)
    calls = []

    def a():
        calls.append("a")

    def c():
        calls.append("c")

    b.on("change", a)
    b.on("change", c)
    b.off("change", a)
    b.place_symbol(0, 0)
    assert calls == ["c"]

    b.off("change")
    b.place_symbol(1, 1)
    assert calls == ["c"]


def test_off_unknown_listener_is_ignored():
    emitter = EventEmitter()
    emitter.off("change", lambda: None)
    emitter.on("change", print)
    emitter.off("change", len)
    assert emitter.listeners("change") == [print]


def test_on_rejects_non_callable():
    with pytest.raises(TypeError):
        EventEmitter().on("change", "not callable")


def test_listener_added_during_fire_waits_for_next_event():
    emitter = EventEmitter()
    calls = []

    def late():
        calls.append("late")

    def first():
        calls.append("first")
        emitter.on("ping", late)

    emitter.on("ping", first)
    emitter.fire("ping")
    assert calls == ["first"]
    emitter.fire("ping")
    assert calls == ["first", "first", "late"]


def test_observer_errors_propagate_after_state_update():
    b = Board(3, 3)

    def boom(move):
        raise RuntimeError("renderer failed")

    b.on("play", boom)
    with pytest.raises(RuntimeError):
        b.place_symbol(1, 1)
    assert b.get_position(1, 1) is not None
