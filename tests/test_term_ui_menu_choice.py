import contextlib

import pytest
from prompt_toolkit import PromptSession
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from bid_sort.term_ui import prompt_menu_choice


@contextlib.contextmanager
def pipe_session():
    with create_pipe_input() as pipe:
        sess = PromptSession(input=pipe, output=DummyOutput())
        yield pipe, sess


def test_returns_typed_choice():
    with pipe_session() as (pipe, sess):
        pipe.send_text("4\r")
        assert prompt_menu_choice(session=sess) == "4"


def test_strips_whitespace_and_keeps_unknown_text():
    # Validation belongs to the menu loop, so unknown text comes back as typed.
    with pipe_session() as (pipe, sess):
        pipe.send_text("  hello \r")
        assert prompt_menu_choice(session=sess) == "hello"


def test_end_of_input_raises_eof():
    with pipe_session() as (pipe, sess):
        pipe.send_text("\x04")  # Ctrl-D on an empty line
        with pytest.raises(EOFError):
            prompt_menu_choice(session=sess)
