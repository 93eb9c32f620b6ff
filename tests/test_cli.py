import io

from expense_tracker.cli import BANNER, PROMPT, main, repl
from expense_tracker.commands import ADD_USAGE, USAGE_TEXT


def run_repl(ledger, text):
    out = io.StringIO()
    repl(ledger, io.StringIO(text), out)
    return out.getvalue()


def test_one_shot_add(capsys):
    code = main(["add", "--description", "lunch with Bob", "--amount", "12.50"])
    assert code == 0
    assert capsys.readouterr().out == "Expense added successfully (ID: 1)\n"


def test_one_shot_runs_against_fresh_ledger(capsys):
    main(["add", "--description", "Coffee", "--amount", "3.50"])
    capsys.readouterr()
    assert main(["list"]) == 0
    assert capsys.readouterr().out == "No expenses yet\n"


def test_one_shot_usage_error_exit_code(capsys):
    assert main(["add", "--description", "Coffee"]) == 1
    assert capsys.readouterr().out == ADD_USAGE + "\n"


def test_one_shot_unknown_command(capsys):
    assert main(["frobnicate"]) == 1
    assert capsys.readouterr().out.startswith("Unknown command: frobnicate\n")


def test_one_shot_with_log_level(capsys):
    assert main(["--log-level", "DEBUG", "help"]) == 0
    assert capsys.readouterr().out == USAGE_TEXT + "\n"


def test_no_arguments_enters_interactive_mode(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("summary\nexit\n"))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert output.startswith(BANNER + "\n" + PROMPT)
    assert "Total expenses: $0.00\n" in output


def test_repl_session_keeps_state(ledger):
    output = run_repl(
        ledger,
        'add --description "Coffee beans" --amount 3.50\n'
        "list\n"
        "delete --id 1\n"
        "list\n",
    )
    assert "Expense added successfully (ID: 1)\n" in output
    assert "Coffee beans  $3.50\n" in output
    assert "Expense deleted successfully\n" in output
    assert output.endswith("No expenses yet\n" + PROMPT)


def test_repl_stops_at_exit_and_quit(ledger):
    for word in ("exit", "quit", "  quit  "):
        output = run_repl(ledger, f"{word}\nadd --description x --amount 1\n")
        assert output == PROMPT
    assert len(ledger) == 0


def test_repl_skips_blank_lines(ledger):
    assert run_repl(ledger, "\n   \n") == PROMPT * 3


def test_repl_help(ledger):
    assert run_repl(ledger, "help\n") == PROMPT + USAGE_TEXT + "\n" + PROMPT


def test_repl_recovers_from_errors(ledger):
    output = run_repl(
        ledger,
        "add --amount 5\n"
        "bogus\n"
        "add --description ok --amount 1\n",
    )
    assert ADD_USAGE + "\n" in output
    assert "Unknown command: bogus\n" in output
    assert "Expense added successfully (ID: 1)\n" in output
    assert len(ledger) == 1


def test_repl_line_of_empty_quotes_prints_usage(ledger):
    assert run_repl(ledger, '""\n') == PROMPT + USAGE_TEXT + "\n" + PROMPT
