from __future__ import annotations

import signal
import unittest
from contextlib import contextmanager

from panecmder.input import LogicalKey, default_key_registry
from panecmder.model import Model
from panecmder.render import FrameSnapshot
from panecmder.runtime.loop import RuntimeLoopCallbacks, ShutdownFlag, dispatch_token, run_main_loop


class _FakeTerminal:
    def __init__(self) -> None:
        self.entered = 0
        self.exited = 0

    @contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1


class _Script:
    """Feeds tokens to the loop; raises ``OSError`` once they run out."""

    def __init__(self, *tokens: str) -> None:
        self.tokens = list(tokens)

    def __call__(self) -> str:
        if not self.tokens:
            raise OSError("stdin closed")
        return self.tokens.pop(0)


class _Recorder:
    def __init__(self) -> None:
        self.keys: list[LogicalKey] = []
        self.frames: list[tuple[FrameSnapshot, int, int]] = []

    def handle_key(self, key: LogicalKey) -> bool:
        self.keys.append(key)
        return key is LogicalKey.QUIT

    def render(self, snapshot: FrameSnapshot, width: int, height: int) -> None:
        self.frames.append((snapshot, width, height))


def _run(*tokens: str, sizes: list[tuple[int, int]] | None = None, on_start=None):
    model = Model()
    terminal = _FakeTerminal()
    recorder = _Recorder()
    shutdown = ShutdownFlag()
    size_script = list(sizes or [(80, 24)])

    def terminal_size() -> tuple[int, int]:
        if len(size_script) > 1:
            return size_script.pop(0)
        return size_script[0]

    callbacks = RuntimeLoopCallbacks(
        read_key=_Script(*tokens),
        terminal_size=terminal_size,
        render=recorder.render,
        handle_key=recorder.handle_key,
        on_start=on_start,
    )
    run_main_loop(model, terminal, default_key_registry(), callbacks, shutdown)
    return model, terminal, recorder, shutdown


class RunMainLoopTests(unittest.TestCase):
    def test_quit_key_stops_loop_and_restores_terminal(self) -> None:
        model, terminal, recorder, shutdown = _run("k", "", "q", "k")

        self.assertEqual(recorder.keys, [LogicalKey.DOWN, LogicalKey.QUIT])
        self.assertTrue(shutdown.requested)
        self.assertEqual((terminal.entered, terminal.exited), (1, 1))

    def test_frames_are_drawn_only_after_changes(self) -> None:
        _, _, recorder, _ = _run("", "", "k", "q")

        # Initial frame plus one after the handled DOWN key.
        self.assertEqual(len(recorder.frames), 2)
        self.assertEqual(recorder.frames[0][1:], (80, 24))

    def test_resize_updates_model_viewport(self) -> None:
        model, _, recorder, _ = _run("", "q", sizes=[(80, 24), (100, 10)])

        self.assertEqual(model.item_max_rows, 7)
        self.assertEqual(model.cols, 100)
        self.assertEqual([frame[1:] for frame in recorder.frames], [(80, 24), (100, 10)])

    def test_input_failure_ends_loop(self) -> None:
        _, terminal, recorder, shutdown = _run("k")

        self.assertEqual(recorder.keys, [LogicalKey.DOWN])
        self.assertFalse(shutdown.requested)
        self.assertEqual(terminal.exited, 1)

    def test_on_start_runs_inside_raw_mode(self) -> None:
        calls: list[str] = []

        _run("q", on_start=lambda: calls.append("start"))

        self.assertEqual(calls, ["start"])

    def test_requested_shutdown_skips_loop(self) -> None:
        model = Model()
        recorder = _Recorder()
        shutdown = ShutdownFlag()
        shutdown.request(signal.SIGTERM)
        callbacks = RuntimeLoopCallbacks(
            read_key=_Script("k"),
            terminal_size=lambda: (80, 24),
            render=recorder.render,
            handle_key=recorder.handle_key,
        )

        run_main_loop(model, _FakeTerminal(), default_key_registry(), callbacks, shutdown)

        self.assertEqual(recorder.keys, [])
        self.assertEqual(recorder.frames, [])


class DispatchTokenTests(unittest.TestCase):
    def test_unbound_token_sets_status(self) -> None:
        model = Model()
        recorder = _Recorder()

        quit_requested = dispatch_token(model, default_key_registry(), "w", recorder.handle_key)

        self.assertFalse(quit_requested)
        self.assertEqual(recorder.keys, [])
        self.assertEqual(model.last_status(), "Key 'w' is not bound.")


class ShutdownFlagTests(unittest.TestCase):
    def test_install_and_restore_signal_handlers(self) -> None:
        shutdown = ShutdownFlag()
        original = signal.getsignal(signal.SIGTERM)

        previous = shutdown.install((signal.SIGTERM,))
        try:
            self.assertEqual(signal.getsignal(signal.SIGTERM), shutdown.request)
        finally:
            ShutdownFlag.restore(previous)

        self.assertEqual(signal.getsignal(signal.SIGTERM), original)


if __name__ == "__main__":
    unittest.main()
