import io

from dsakit.array_menu import main, run_menu


def _run(text, size=5):
    out = io.StringIO()
    result = run_menu(io.StringIO(text), out, size)
    return result, out.getvalue()


def test_insert_and_display():
    result, output = _run("1\n1 2 3 4 5\n3\n4\n")
    assert result == [1, 2, 3, 4, 5]
    assert "--Displaying Elements--\n1 2 3 4 5 \n" in output


def test_delete_element():
    result, output = _run("1\n10 20 30 40 50\n2\n1\n3\n4\n")
    assert result == [10, 30, 40, 50]
    assert "20 element is Deleted\n" in output
    assert "10 30 40 50 \n" in output


def test_insert_after_delete_reads_fewer_values():
    result, _ = _run("1\n1 2 3 4 5\n2\n0\n1\n6 7 8 9\n4\n")
    assert result == [6, 7, 8, 9]


def test_invalid_choice_reported():
    result, output = _run("9\n4\n")
    assert "Invalid Choice" in output
    assert len(result) == 5


def test_out_of_range_delete_leaves_array():
    result, output = _run("1\n5 6 7 8 9\n2\n7\n4\n")
    assert "Invalid index" in output
    assert result == [5, 6, 7, 8, 9]


def test_end_of_input_stops_menu():
    result, output = _run("1\n4 5\n", size=3)
    assert output.count("Enter Choice: ") == 1
    assert len(result) == 3


def test_main_uses_size(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n7 8 9\n3\n4\n"))
    assert main(["--size", "3"]) == 0
    out = capsys.readouterr().out
    assert "Enter 3 element: " in out
    assert "7 8 9 \n" in out