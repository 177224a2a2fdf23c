import io
import re

import pytest

from edkit.cli import main

STUDENTS = {
    41: "Enelton", 27: "Cristhof", 74: "Danielle", 4: "Meira", 29: "Guilherme",
    65: "Juliana", 90: "Pedro", 2: "Raul", 6: "Paulo", 28: "Carlos",
    30: "Lucas", 60: "Maria", 73: "Samanta", 80: "Ulisses", 92: "Carlos",
}
REMOVED = (41, 60, 65, 73)

ENTRY = re.compile(r"(\w+)\[(-?\d+)\] ")


def _entries(line, prefix):
    assert line.startswith(prefix)
    body = line[len(prefix):]
    found = ENTRY.findall(body)
    assert "".join(f"{name}[{balance}] " for name, balance in found) == body
    return [(name, int(balance)) for name, balance in found]


def _run(capsys, argv, stdin=None, monkeypatch=None):
    if stdin is not None:
        monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    status = main(argv)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_time_demo_output(capsys):
    status, out, _ = _run(capsys, ["time"])
    assert status == 0
    assert out.splitlines() == [
        "23:59:59",
        "12:30:15",
        "Hour:    12",
        "Minute:  30",
        "Second:  15",
        "12:0:0",
        "23:59:58",
        "23:59:59",
        "0:0:0",
    ]


def test_avl_demo_in_order_is_sorted_by_ra(capsys):
    status, out, _ = _run(capsys, ["avl"])
    assert status == 0
    lines = out.splitlines()
    assert len(lines) == 7
    assert lines[3] == "********"

    before = _entries(lines[1], "In:   ")
    expected = [STUDENTS[ra] for ra in sorted(STUDENTS)]
    assert [name for name, _ in before] == expected

    after = _entries(lines[5], "In:   ")
    remaining = [STUDENTS[ra] for ra in sorted(STUDENTS) if ra not in REMOVED]
    assert [name for name, _ in after] == remaining


def test_avl_demo_balance_factors_and_node_sets(capsys):
    _, out, _ = _run(capsys, ["avl"])
    lines = out.splitlines()
    for line, prefix in ((lines[0], "Pre:  "), (lines[2], "Post: "),
                         (lines[4], "Pre:  "), (lines[6], "Post: ")):
        entries = _entries(line, prefix)
        assert all(-1 <= balance <= 1 for _, balance in entries)

    pre = _entries(lines[0], "Pre:  ")
    post = _entries(lines[2], "Post: ")
    ino = _entries(lines[1], "In:   ")
    assert sorted(pre) == sorted(post) == sorted(ino)
    assert len(pre) == len(STUDENTS)
    assert len(_entries(lines[4], "Pre:  ")) == len(STUDENTS) - len(REMOVED)


def test_avl_demo_first_preorder_root_is_last_in_postorder(capsys):
    _, out, _ = _run(capsys, ["avl"])
    lines = out.splitlines()
    for pre_line, post_line in ((lines[0], lines[2]), (lines[4], lines[6])):
        assert _entries(pre_line, "Pre:  ")[0] == _entries(post_line, "Post: ")[-1]


@pytest.mark.parametrize("text", ["abc", "Hello World!", "x", ""])
def test_reverse_argument(capsys, text):
    status, out, _ = _run(capsys, ["reverse", text])
    assert status == 0
    assert out == text[::-1] + "\n"


def test_reverse_reads_stdin_with_prompt(capsys, monkeypatch):
    status, out, _ = _run(capsys, ["reverse"], stdin="stressed\nignored\n",
                          monkeypatch=monkeypatch)
    assert status == 0
    assert out.splitlines() == ["Adicione uma String.", "stressed"[::-1]]


def test_reverse_too_long_reports_full_stack(capsys):
    status, out, err = _run(capsys, ["reverse", "a" * 101])
    assert status == 1
    assert out == ""
    assert "Stack is already full!" in err


@pytest.mark.parametrize(
    "text, message",
    [
        ("arara", "String é Palindrome"),
        ("abba", "String é Palindrome"),
        ("abc", "String não é palindrome"),
        ("", "String é Palindrome"),
    ],
)
def test_palindrome_argument(capsys, text, message):
    status, out, _ = _run(capsys, ["palindrome", text])
    assert status == 0
    assert out == message + "\n"


def test_palindrome_reads_stdin_with_prompt(capsys, monkeypatch):
    status, out, _ = _run(capsys, ["palindrome"], stdin="ovo\n", monkeypatch=monkeypatch)
    assert status == 0
    assert out.splitlines() == ["Adicione uma string.", "String é Palindrome"]


def test_unknown_command_exits():
    with pytest.raises(SystemExit) as excinfo:
        main(["nonsense"])
    assert excinfo.value.code == 2


def test_missing_command_exits():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2