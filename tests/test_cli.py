import typer
from typer.testing import CliRunner

from jsreader.cli import app
from jsreader.report import LOG_HEADER

runner = CliRunner()

JS = 'const apiUrl = "https://api.example.com/v1/users";\n'


def test_no_input_source_exits_nonzero(monkeypatch):
    monkeypatch.setattr("jsreader.cli._stdin_is_piped", lambda: False)
    result = runner.invoke(app, [])
    assert result.exit_code == 1
    assert "You must specify input source" in result.output


def test_single_file(tmp_path):
    js = tmp_path / "app.js"
    js.write_text(JS)
    result = runner.invoke(app, ["-f", str(js)])
    assert result.exit_code == 0, result.output
    assert "[API] https://api.example.com/v1/users" in result.output
    assert "[API Subdomain]" not in result.output
    assert "[STATUS] Found 1 JS files to analyze" in result.output


def test_input_list_with_output_file(tmp_path):
    js = tmp_path / "app.js"
    js.write_text(JS)
    listing = tmp_path / "list.txt"
    listing.write_text(f"# targets\n\n{js}\n")
    out = tmp_path / "results.txt"
    result = runner.invoke(app, ["-t", "4", "-i", str(listing), "-o", str(out)])
    assert result.exit_code == 0, result.output
    text = out.read_text()
    assert text.startswith(LOG_HEADER)
    assert "[API] https://api.example.com/v1/users\n" in text
    assert "[JS Variable]" not in text
    assert f"Source: {js}\n" in text


def test_empty_input_list(tmp_path):
    listing = tmp_path / "list.txt"
    listing.write_text("\n\n")
    result = runner.invoke(app, ["-i", str(listing)])
    assert result.exit_code == 1
    assert "No JS files to analyze" in result.output


def test_unreadable_input_list(tmp_path):
    result = runner.invoke(app, ["-i", str(tmp_path / "nope.txt")])
    assert result.exit_code == 1
    assert "Error opening input file" in result.output


def test_pipe_mode_reads_stdin_and_hides_status(tmp_path):
    js = tmp_path / "app.js"
    js.write_text(JS)
    result = runner.invoke(app, ["-p"], input=f"{js}\n")
    assert result.exit_code == 0, result.output
    assert "[API] https://api.example.com/v1/users" in result.output
    assert "[STATUS]" not in result.output


def test_bad_dedup_scope(tmp_path):
    js = tmp_path / "app.js"
    js.write_text(JS)
    result = runner.invoke(app, ["-f", str(js), "--dedup-scope", "global"])
    assert result.exit_code == 2


def test_category_scope_option(tmp_path):
    js = tmp_path / "app.js"
    js.write_text(JS)
    result = runner.invoke(app, ["-f", str(js), "--dedup-scope", "category"])
    assert result.exit_code == 0, result.output
    assert "[API Subdomain] https://api.example.com/v1/users" in result.output
    assert "[JS Variable] https://api.example.com/v1/users" in result.output


def test_pipe_help_describes_source_precedence():
    command = typer.main.get_command(app)
    pipe = next(p for p in command.params if p.name == "pipe")
    assert "only used automatically when neither -f nor -i is given" in pipe.help


def test_explicit_file_wins_over_piped_stdin(tmp_path):
    js = tmp_path / "app.js"
    js.write_text(JS)
    result = runner.invoke(app, ["-f", str(js)], input="other.js\n")
    assert result.exit_code == 0, result.output
    assert f"Source: {js}" in result.output
    assert "other.js" not in result.output
