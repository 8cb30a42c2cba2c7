"""Editing, masking and termination of the single-line prompt."""

from __future__ import annotations

import unittest

from panecmder.dialog import DialogState, InputDialogSession, ask_user_input


def _session(answer: str = "", masked: bool = False) -> InputDialogSession:
    session = InputDialogSession()
    session.start("Question: ", answer, masked)
    return session


class InputDialogSessionTests(unittest.TestCase):
    def test_new_session_is_idle_and_ignores_edits(self) -> None:
        session = InputDialogSession()

        session.insert("x")
        session.handle_key("ENTER_CR")

        self.assertIs(session.state, DialogState.IDLE)
        self.assertEqual(session.answer, "")

    def test_unfinished_session_is_neither_submitted_nor_canceled(self) -> None:
        for session in (InputDialogSession(), _session("abc")):
            result = session.result()
            self.assertFalse(result.submitted)
            self.assertFalse(result.canceled)

    def test_start_places_cursor_after_prefilled_answer(self) -> None:
        session = _session("abc")

        self.assertIs(session.state, DialogState.EDITING)
        self.assertEqual(session.cursor_idx, 3)

    def test_insert_backspace_and_delete_at_cursor(self) -> None:
        session = _session("abcd")
        session.move_left()
        session.move_left()

        session.insert("X")
        self.assertEqual(session.answer, "abXcd")
        self.assertEqual(session.cursor_idx, 3)

        session.backspace()
        self.assertEqual(session.answer, "abcd")
        self.assertEqual(session.cursor_idx, 2)

        session.delete()
        self.assertEqual(session.answer, "abd")
        self.assertEqual(session.cursor_idx, 2)

    def test_cursor_counts_characters_not_bytes(self) -> None:
        session = _session("čćž")
        session.move_left()

        session.backspace()

        self.assertEqual(session.answer, "čž")
        self.assertEqual(session.cursor_idx, 1)

    def test_cursor_moves_are_clamped(self) -> None:
        session = _session("ab")

        session.move_right()
        self.assertEqual(session.cursor_idx, 2)
        session.home()
        session.move_left()
        self.assertEqual(session.cursor_idx, 0)
        session.backspace()
        self.assertEqual(session.answer, "ab")
        session.end()
        session.delete()
        self.assertEqual(session.answer, "ab")
        self.assertEqual(session.cursor_idx, 2)

    def test_masked_session_exposes_same_length_mask(self) -> None:
        session = _session(masked=True)
        for ch in "s3cr":
            session.handle_key(ch)

        self.assertEqual(session.answer, "s3cr")
        self.assertEqual(session.shown_answer, "****")

    def test_key_tokens_drive_editing(self) -> None:
        session = _session("ac")
        for token in ("LEFT", "b", "HOME", ">", "END", "DELETE", "", "F5"):
            session.handle_key(token)

        self.assertEqual(session.answer, ">abc")
        self.assertIs(session.handle_key("ENTER_LF"), DialogState.SUBMITTED)
        self.assertEqual(session.result().answer, ">abc")

    def test_cancel_discards_answer(self) -> None:
        session = _session("keep?")

        state = session.handle_key("ESC")

        self.assertIs(state, DialogState.CANCELED)
        self.assertEqual(session.answer, "")
        self.assertTrue(session.result().canceled)

    def test_terminal_states_ignore_further_keys(self) -> None:
        session = _session("a")
        session.submit()

        session.handle_key("b")
        session.handle_key("ESC")

        self.assertIs(session.state, DialogState.SUBMITTED)
        self.assertEqual(session.answer, "a")


class AskUserInputTests(unittest.TestCase):
    def test_runs_until_submit_and_draws_each_step(self) -> None:
        tokens = iter(["", "n", "a", "ENTER_CR"])
        drawn: list[str] = []

        result = ask_user_input(
            "Confirm: ",
            read_key=lambda: next(tokens),
            draw=lambda session: drawn.append(session.answer),
        )

        self.assertTrue(result.submitted)
        self.assertEqual(result.answer, "na")
        self.assertEqual(drawn, ["", "", "n", "na"])

    def test_input_failure_cancels_prompt(self) -> None:
        def failing_read() -> str:
            raise OSError("stdin closed")

        result = ask_user_input("Filter by: ", "old", read_key=failing_read, draw=lambda session: None)

        self.assertIs(result.state, DialogState.CANCELED)
        self.assertTrue(result.canceled)


if __name__ == "__main__":
    unittest.main()
