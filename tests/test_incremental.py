"""Test incremental (line-at-a-time) evaluation."""
import pytest

from bfpp.runtime.errors import BracketError, BracketErrorKind, CapacityError
from bfpp.runtime.interpreter import EvalOutcome


class TestEvalOutcomes:
    """Tests for the outcome of each submitted fragment."""

    def test_blank_fragment_ignored(self, interpreter):
        """Test empty and whitespace-only fragments are ignored."""
        assert interpreter.eval_fragment("") == EvalOutcome.IGNORED
        assert interpreter.eval_fragment("   \t") == EvalOutcome.IGNORED
        assert len(interpreter.code) == 0

    def test_comment_fragment_ignored(self, interpreter):
        """Test brackets inside a comment are not counted."""
        assert interpreter.eval_fragment("# [ not a loop") == EvalOutcome.IGNORED
        assert interpreter.open_loops == 0

    def test_balanced_fragment_executes(self, interpreter, output_stream, sixty_four):
        """Test a self-contained fragment runs immediately."""
        assert interpreter.eval_fragment(sixty_four) == EvalOutcome.EXECUTED
        assert output_stream.getvalue() == bytes([64])
        assert len(interpreter.code) == 0

    def test_loop_split_over_fragments_zero_cell(self, interpreter):
        """Test '[', '+', ']' with a zero cell: the body never runs."""
        outcomes = [interpreter.eval_fragment(f) for f in ("[", "+", "]")]
        assert outcomes == [EvalOutcome.BUFFERED, EvalOutcome.BUFFERED, EvalOutcome.EXECUTED]
        assert interpreter.tape.current == 0
        assert interpreter.last_result.steps == 1

    def test_loop_split_over_fragments_nonzero_cell(self, interpreter):
        """Test '[', '+', ']' with a nonzero cell: the body runs until wraparound."""
        assert interpreter.eval_fragment("+") == EvalOutcome.EXECUTED

        outcomes = [interpreter.eval_fragment(f) for f in ("[", "+", "]")]
        assert outcomes == [EvalOutcome.BUFFERED, EvalOutcome.BUFFERED, EvalOutcome.EXECUTED]
        assert interpreter.tape.current == 0
        # 255 increments take the cell from 1 back to 0
        assert interpreter.last_result.steps > 255

    def test_loop_body_runs_across_fragments(self, interpreter):
        """Test a multi-line loop moves a value to the next cell."""
        interpreter.eval_fragment("+++")
        assert interpreter.eval_fragment("[") == EvalOutcome.BUFFERED
        assert interpreter.eval_fragment(">+<-") == EvalOutcome.BUFFERED
        assert interpreter.eval_fragment("]") == EvalOutcome.EXECUTED
        assert list(interpreter.tape.cells[:2]) == [0, 3]

    def test_open_loop_count(self, interpreter):
        """Test open_loops tracks depth across fragments."""
        interpreter.eval_fragment("[[")
        assert interpreter.open_loops == 2
        interpreter.eval_fragment("]")
        assert interpreter.open_loops == 1
        interpreter.eval_fragment("]")
        assert interpreter.open_loops == 0

    def test_loop_stack_positions(self, interpreter):
        """Test pushed positions are offsets into the accumulated buffer."""
        interpreter.eval_fragment("+[")
        interpreter.eval_fragment("-[")
        assert interpreter.loop_stack == [1, 3]

    def test_tape_persists_between_executions(self, interpreter, output_stream):
        """Test tape state carries over from one executed fragment to the next."""
        interpreter.eval_fragment("+")
        interpreter.eval_fragment("+")
        interpreter.eval_fragment(".")
        assert output_stream.getvalue() == b"\x02"


class TestEvalErrors:
    """Tests for fragment errors and recovery."""

    def test_lone_closer(self, interpreter):
        """Test ']' alone is an error leaving no open loops and an empty buffer."""
        assert interpreter.eval_fragment("]") == EvalOutcome.ERROR
        assert interpreter.open_loops == 0
        assert len(interpreter.code) == 0
        assert isinstance(interpreter.last_error, BracketError)
        assert interpreter.last_error.kind == BracketErrorKind.UNMATCHED_CLOSE

    def test_error_position_is_logical_offset(self, interpreter):
        """Test the error position counts previously buffered code."""
        interpreter.eval_fragment("+[")
        assert interpreter.eval_fragment("-]]") == EvalOutcome.ERROR
        assert interpreter.last_error.position == 4

    def test_error_discards_buffered_attempt(self, interpreter, output_stream):
        """Test a bad fragment discards the whole pending loop."""
        interpreter.eval_fragment("+.")
        interpreter.eval_fragment("[")
        interpreter.eval_fragment("+.")
        assert interpreter.eval_fragment("]]") == EvalOutcome.ERROR

        assert interpreter.open_loops == 0
        assert len(interpreter.code) == 0
        # only the first executed fragment produced output
        assert output_stream.getvalue() == b"\x01"

    def test_recovery_after_error(self, interpreter):
        """Test a fine fragment after an error runs on its own."""
        interpreter.eval_fragment("[")
        interpreter.eval_fragment("]]")
        assert interpreter.eval_fragment("++") == EvalOutcome.EXECUTED
        assert interpreter.tape.current == 2

    def test_error_preserves_tape(self, interpreter):
        """Test tape state from earlier runs survives an error."""
        interpreter.eval_fragment("+++>++")
        interpreter.eval_fragment("]")
        assert interpreter.tape.pointer == 1
        assert list(interpreter.tape.cells[:2]) == [3, 2]

    def test_capacity_overflow_resets_accumulation(self, make_interpreter):
        """Test overflowing the buffer is an error and resets accumulation."""
        interpreter = make_interpreter(max_code_length=5)
        assert interpreter.eval_fragment("[") == EvalOutcome.BUFFERED
        assert interpreter.eval_fragment("+++++") == EvalOutcome.ERROR
        assert isinstance(interpreter.last_error, CapacityError)
        assert interpreter.open_loops == 0
        assert len(interpreter.code) == 0

    def test_step_limit_is_error(self, make_interpreter):
        """Test a run that exhausts max_steps reports an error outcome."""
        interpreter = make_interpreter(max_steps=50)
        assert interpreter.eval_fragment("+[]") == EvalOutcome.ERROR
        assert interpreter.last_error.max_steps == 50
        assert len(interpreter.code) == 0

    def test_last_error_cleared_by_successful_run(self, interpreter):
        """Test a successful run clears last_error."""
        interpreter.eval_fragment("]")
        interpreter.eval_fragment("+")
        assert interpreter.last_error is None

    def test_discard(self, interpreter):
        """Test discard drops pending code and open loops."""
        interpreter.eval_fragment("+[")
        interpreter.discard()
        assert interpreter.open_loops == 0
        assert len(interpreter.code) == 0


class TestFragmentBuffering:
    """Tests for what a fragment contributes to the code buffer."""

    def test_only_instructions_buffered(self, interpreter):
        """Test spaces and letters are dropped before buffering."""
        interpreter.eval_fragment("  [ move > right  ")
        assert interpreter.code.getvalue() == "[>"

    def test_capacity_counts_instructions(self, make_interpreter):
        """Test layout and comments do not use up max_code_length."""
        interpreter = make_interpreter(max_code_length=4)
        assert interpreter.eval_fragment("[    padded    ") == EvalOutcome.BUFFERED
        assert interpreter.eval_fragment("  + +  # two more") == EvalOutcome.BUFFERED
        assert interpreter.eval_fragment("  ]  ") == EvalOutcome.EXECUTED

    def test_error_position_ignores_layout(self, interpreter):
        """Test error positions count buffered instructions only."""
        interpreter.eval_fragment("a + b [")
        assert interpreter.eval_fragment(" - ] ]") == EvalOutcome.ERROR
        assert interpreter.last_error.position == 4

    def test_non_instruction_fragment_inside_loop(self, interpreter):
        """Test a word inside an open loop keeps the loop open."""
        interpreter.eval_fragment("[")
        assert interpreter.eval_fragment("exit") == EvalOutcome.BUFFERED
        assert interpreter.open_loops == 1
        assert interpreter.code.getvalue() == "["


@pytest.mark.parametrize("fragments,expected", [
    (["+", "."], b"\x01"),
    (["++", "[", ">+++", "<-", "]", ">."], b"\x06"),
    (["[[", "]", "]", "+."], b"\x01"),
])
def test_fragment_sequences(interpreter, output_stream, fragments, expected):
    """Test fragment sequences produce the expected output."""
    for fragment in fragments:
        assert interpreter.eval_fragment(fragment) != EvalOutcome.ERROR
    assert output_stream.getvalue() == expected
