"""Tests for leonidas/utils/outputs.py."""

from leonidas.utils.outputs import write_outputs, write_prompt_file


def test_appends_to_output_file(tmp_path):
    output = tmp_path / "github_output"
    output.write_text("existing=1\n", encoding="utf-8")

    write_outputs({"pr_exists": "true", "pr_number": "77"}, output)

    assert output.read_text(encoding="utf-8") == "existing=1\npr_exists=true\npr_number=77\n"


def test_multiline_value_uses_delimiter(tmp_path):
    output = tmp_path / "github_output"

    write_outputs({"summary": "line one\nline two"}, output)

    lines = output.read_text(encoding="utf-8").splitlines()
    delimiter = lines[0].split("<<", 1)[1]
    assert lines[0] == f"summary<<{delimiter}"
    assert lines[1:] == ["line one", "line two", delimiter]


def test_echo_without_output_file(capsys):
    write_outputs({"max_turns": "50"})

    assert capsys.readouterr().out == "max_turns=50\n"


def test_write_prompt_file(tmp_path):
    path = write_prompt_file("Implement #42", tmp_path)

    assert path.parent == tmp_path
    assert path.name.startswith("leonidas-prompt-")
    assert path.suffix == ".md"
    assert path.read_text(encoding="utf-8") == "Implement #42"
