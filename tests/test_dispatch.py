import logging
import threading

from application.dispatch import BackgroundDispatcher


def test_wrap_submits_without_waiting():
    gate = threading.Event()
    calls = []

    def slow(source, target):
        gate.wait(5)
        calls.append((source, target))

    dispatcher = BackgroundDispatcher(max_workers=1)
    submit = dispatcher.wrap(slow)
    assert submit("a", "b") is None
    assert calls == []
    gate.set()
    assert dispatcher.drain(5) == 0
    assert calls == [("a", "b")]
    dispatcher.shutdown()


def test_failures_are_logged_and_counted(caplog):
    def boom(source, target):
        raise RuntimeError("server said no")

    dispatcher = BackgroundDispatcher(max_workers=1)
    with caplog.at_level(logging.WARNING, logger="todo_graph.dispatch"):
        dispatcher.wrap(boom)("a", "b")
        assert dispatcher.drain(5) == 1
        dispatcher.shutdown()
    assert "server said no" in caplog.text


def test_drain_without_work():
    dispatcher = BackgroundDispatcher()
    assert dispatcher.drain() == 0
    dispatcher.shutdown()
