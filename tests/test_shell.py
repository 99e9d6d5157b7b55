import pytest

from minishell.shell import PROMPT, is_exit, main, run


@pytest.mark.parametrize("line", ["exit", "exi", "e", ""])
def test_prefixes_of_exit_end_session(line):
    assert is_exit(line) is True


def test_end_of_input_ends_session():
    assert is_exit(None) is True


@pytest.mark.parametrize("line", ["exits", "ls", "exit now", " exit", "x"])
def test_other_lines_do_not_end_session(line):
    assert is_exit(line) is False


def _feeder(lines):
    prompts = []
    items = iter(lines)

    def read(prompt):
        prompts.append(prompt)
        return next(items)

    return read, prompts


def test_run_stops_at_exit_and_keeps_it_in_history():
    read, prompts = _feeder(["ls -l", "grep je > outfile.txt", "exit", "never"])
    assert run(read) == ["ls -l", "grep je > outfile.txt", "exit"]
    assert prompts == ["Minishell> "] * 3


def test_run_stops_at_end_of_input():
    read, prompts = _feeder(["echo hi", None, "never"])
    assert run(read) == ["echo hi"]
    assert len(prompts) == 2


def test_run_stops_on_empty_line():
    read, _ = _feeder(["pwd", "", "never"])
    assert run(read) == ["pwd", ""]


def test_prompt_constant_matches_prompt_used():
    read, prompts = _feeder(["exit", "never"])
    history = run(read)
    assert history == ["exit"]
    assert prompts == [PROMPT]
    assert PROMPT == "Minishell> "


def test_main_reads_until_exit(monkeypatch):
    lines = iter(["ls", "exit", "never"])
    seen = []

    def fake_input(prompt):
        seen.append(prompt)
        return next(lines)

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0
    assert seen == [PROMPT, PROMPT]


def test_main_stops_on_eof(monkeypatch):
    def fake_input(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0


def test_main_rejects_arguments():
    with pytest.raises(SystemExit) as info:
        main(["unexpected"])
    assert info.value.code == 2