"""
Tests for the proving-environment entry point.
"""

from zikzak.guest import run_guest, run_with


def test_run_guest_writes_single_output():
    written = []
    assert run_guest(lambda: "1,0,1,2", written.append) is True
    assert written == [True]


def test_run_guest_malformed_input():
    written = []
    assert run_guest(lambda: "abc,0", written.append) is False
    assert written == [False]


class FakeIO:
    def __init__(self, text):
        self.text = text
        self.outputs = []

    def read_private_input(self):
        return self.text

    def write_output(self, output):
        self.outputs.append(output)


def test_run_with_io():
    io = FakeIO("1,0,0")
    assert run_with(io) is False
    assert io.outputs == [False]
