import io

import pytest

from minitalk.protocol import (
    BIT_0_SIGNAL,
    BIT_1_SIGNAL,
    encode_byte,
    encode_message,
    signal_for_bit,
)
from minitalk.server import Server, main


def _feed(server, bits, pid=4242):
    return [server.receive_signal(signal_for_bit(bit), pid) for bit in bits]


def test_message_is_written_with_newline_and_acknowledged():
    out = io.BytesIO()
    notified = []
    server = Server(out, notified.append)
    _feed(server, encode_message("hi"), pid=777)
    assert out.getvalue() == b"hi\n"
    assert notified == [777]


def test_partial_byte_writes_nothing():
    out = io.BytesIO()
    notified = []
    server = Server(out, notified.append)
    results = _feed(server, encode_byte(ord("A"))[:7])
    assert results == [None] * 7
    assert out.getvalue() == b""
    assert notified == []


def test_completed_byte_is_returned():
    server = Server(io.BytesIO(), lambda pid: None)
    results = _feed(server, encode_byte(ord("Z")))
    assert results[-1] == ord("Z")


def test_non_ascii_bytes_pass_through():
    out = io.BytesIO()
    server = Server(out, lambda pid: None)
    _feed(server, encode_message("é"))
    assert out.getvalue() == "é".encode("utf-8") + b"\n"


def test_several_messages_in_a_row():
    out = io.BytesIO()
    notified = []
    server = Server(out, notified.append)
    _feed(server, encode_message("one"), pid=1)
    _feed(server, encode_message("two"), pid=2)
    assert out.getvalue() == b"one\ntwo\n"
    assert notified == [1, 2]


def test_unknown_signal_counts_as_zero_bit():
    out = io.BytesIO()
    server = Server(out, lambda pid: None)
    server.receive_signal(BIT_1_SIGNAL, 1)
    for _ in range(7):
        server.receive_signal(0, 1)
    assert out.getvalue() == b"\x01"


def test_text_stream_output():
    out = io.StringIO()
    server = Server(out, lambda pid: None)
    _feed(server, encode_message("ok"))
    assert out.getvalue() == "ok\n"


def test_zero_signals_make_empty_message():
    out = io.BytesIO()
    notified = []
    server = Server(out, notified.append)
    for _ in range(8):
        server.receive_signal(BIT_0_SIGNAL, 9)
    assert out.getvalue() == b"\n"
    assert notified == [9]


@pytest.mark.parametrize("argv", [["x"], ["1", "2"]])
def test_main_rejects_arguments(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == "Error! Program received arguments.\n"