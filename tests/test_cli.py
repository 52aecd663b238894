"""Tests for the html2css command line."""

import logging

import pytest

from main import insert_into_file, main, pick_html_file, prompt_root_selector, run

EXPECTED = ".sec01 {}\n.sec01 .card {}\n.sec01 .card .title {}"


def answers(*values):
    """Prompt stand-in returning `values` in order; EOF once exhausted."""
    it = iter(values)

    def prompt(_message):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return prompt


@pytest.fixture
def site(tmp_path, sample_html):
    (tmp_path / "other.html").write_text("<p class='x'></p>", encoding="utf-8")
    (tmp_path / "index.html").write_text(sample_html, encoding="utf-8")
    return tmp_path


class TestPrompts:
    def test_pick_prioritizes_index(self, site, capsys):
        chosen = pick_html_file(site, answers("1"))
        assert chosen.name == "index.html"
        out = capsys.readouterr().out
        assert out.index("index.html") < out.index("other.html")

    def test_pick_retries_bad_number(self, site, capsys):
        chosen = pick_html_file(site, answers("9", "abc", "2"))
        assert chosen.name == "other.html"
        assert "between 1 and 2" in capsys.readouterr().out

    def test_selector_reprompts_on_blank(self, capsys):
        assert prompt_root_selector(answers("", "   ", " .sec01 ")) == ".sec01"
        assert capsys.readouterr().out.count("Selector cannot be empty") == 2


class TestRun:
    def test_arguments_print_css(self, site, capsys):
        code = run(["--file", str(site / "index.html"), "--selector", ".sec01"])
        assert code == 0
        assert capsys.readouterr().out.strip() == EXPECTED

    def test_interactive(self, site, capsys):
        code = run(["--dir", str(site)], prompt_fn=answers("1", ".sec01"))
        assert code == 0
        assert capsys.readouterr().out.rstrip().endswith(EXPECTED)

    def test_leaf_only(self, site, capsys):
        code = run(["--file", str(site / "index.html"), "--selector", ".sec01", "--leaf-only"])
        assert code == 0
        assert capsys.readouterr().out.strip() == ".sec01 {}\n.sec01 .card .title {}"

    def test_ignore_override(self, site, capsys):
        code = run(["--file", str(site / "index.html"), "--selector", ".sec01 .card", "--ignore", "ti*"])
        assert code == 0
        assert capsys.readouterr().out.strip() == ".sec01 .card {}\n.sec01 .card .br_icon {}"

    def test_insert_into_output(self, site):
        css_file = site / "style.css"
        css_file.write_text("a {}\nb {}\n", encoding="utf-8")
        code = run(
            ["--file", str(site / "index.html"), "--selector", ".sec01", "--output", str(css_file), "--line", "2"]
        )
        assert code == 0
        assert css_file.read_text(encoding="utf-8") == f"a {{}}\n\n{EXPECTED}\nb {{}}\n"


class TestRunAborts:
    def test_cancel_file_pick(self, site, capsys):
        assert run(["--dir", str(site)], prompt_fn=answers()) == 1
        assert ".sec01 {}" not in capsys.readouterr().out

    def test_empty_pick_cancels(self, site, capsys):
        assert run(["--dir", str(site)], prompt_fn=answers("")) == 1
        assert ".sec01 {}" not in capsys.readouterr().out

    def test_cancel_selector(self, site, capsys):
        assert run(["--dir", str(site)], prompt_fn=answers("1")) == 1
        assert ".sec01 {}" not in capsys.readouterr().out

    def test_no_files(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            assert run(["--dir", str(tmp_path)], prompt_fn=answers("1")) == 1
        assert "No HTML source file was found" in caplog.text

    def test_root_not_found(self, site, caplog):
        with caplog.at_level(logging.WARNING):
            assert run(["--file", str(site / "index.html"), "--selector", ".nope"]) == 1
        assert "Cannot find a valid element with selector: .nope" in caplog.text

    def test_unreadable_file(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            assert run(["--file", str(tmp_path / "gone.html"), "--selector", ".sec01"]) == 1
        assert "Cannot read HTML file" in caplog.text

    def test_empty_selector_argument(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            assert run(["--file", str(tmp_path / "gone.html"), "--selector", " "]) == 1
        assert "Selector cannot be empty" in caplog.text
        assert "Cannot read HTML file" not in caplog.text

    def test_no_output_written_on_failure(self, site):
        css_file = site / "style.css"
        run(["--file", str(site / "index.html"), "--selector", ".nope", "--output", str(css_file)])
        assert not css_file.exists()

    def test_pseudo_element_selector(self, site, caplog):
        with caplog.at_level(logging.WARNING):
            assert run(["--file", str(site / "index.html"), "--selector", ".sec01::before"]) == 1
        assert "Cannot find a valid element with selector: .sec01::before" in caplog.text

    def test_unwritable_output(self, site, caplog):
        # a directory cannot be opened as a stylesheet
        out_dir = site / "styles"
        out_dir.mkdir()
        with caplog.at_level(logging.ERROR):
            assert run(["--file", str(site / "index.html"), "--selector", ".sec01", "--output", str(out_dir)]) == 1
        assert "Cannot write CSS to" in caplog.text

    @pytest.mark.parametrize(
        "name,value",
        [("HTML_MAX_FILES", "abc"), ("IGNORE_CLASS_PATTERNS", "[br_*")],
    )
    def test_invalid_configuration(self, site, monkeypatch, caplog, name, value):
        monkeypatch.setenv(name, value)
        with caplog.at_level(logging.ERROR):
            assert run(["--file", str(site / "index.html"), "--selector", ".sec01"]) == 1
        assert "Invalid configuration" in caplog.text
        assert name in caplog.text

    def test_main_exits_cleanly_on_bad_configuration(self, site, monkeypatch, caplog):
        monkeypatch.setenv("HTML_MAX_FILES", "abc")
        monkeypatch.setenv("LOG_LEVEL", "not-a-level")
        with caplog.at_level(logging.ERROR):
            with pytest.raises(SystemExit) as exc:
                main(["--file", str(site / "index.html"), "--selector", ".sec01"])
        assert exc.value.code == 1
        assert "Invalid configuration" in caplog.text


class TestInsertIntoFile:
    def test_creates_missing_file(self, tmp_path):
        target = tmp_path / "css" / "new.css"
        insert_into_file(target, ".a {}")
        assert target.read_text(encoding="utf-8") == "\n.a {}\n"

    def test_appends_by_default(self, tmp_path):
        target = tmp_path / "s.css"
        target.write_text("x {}", encoding="utf-8")
        insert_into_file(target, ".a {}")
        assert target.read_text(encoding="utf-8") == "x {}\n\n.a {}\n"

    def test_line_one_inserts_at_top(self, tmp_path):
        target = tmp_path / "s.css"
        target.write_text("x {}\n", encoding="utf-8")
        insert_into_file(target, ".a {}", line=1)
        assert target.read_text(encoding="utf-8") == "\n.a {}\nx {}\n"

    def test_line_past_end_appends(self, tmp_path):
        target = tmp_path / "s.css"
        target.write_text("x {}\n", encoding="utf-8")
        insert_into_file(target, ".a {}", line=99)
        assert target.read_text(encoding="utf-8") == "x {}\n\n.a {}\n"
