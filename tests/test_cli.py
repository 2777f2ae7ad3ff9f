"""
Tests for the colorize command line.

Settings and palette files are redirected to a temp dir via CHATGRADIENT_HOME.
"""

import io
import json

import pytest

import colorize
from chatgradient.ui.colors import strip_ansi


class TestColorizeCommand:
    """Tests for colorize.main()."""

    def test_default_format(self, app_home, capsys):
        assert colorize.main(["AB"]) == 0
        assert capsys.readouterr().out == "&x&f&f&0&0&0&0A&x&0&0&0&0&f&fB\n"

    def test_words_joined(self, app_home, capsys):
        colorize.main(["-f", "minimessage", "-s", "#000000", "-e", "#000000", "a", "b"])
        out = capsys.readouterr().out
        assert out == "<#000000>a</#000000><#000000> </#000000><#000000>b</#000000>\n"

    def test_reads_stdin(self, app_home, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("hi\n"))
        colorize.main(["-f", "section"])
        assert capsys.readouterr().out == "§x§f§f§0§0§0§0h§x§0§0§0§0§f§fi\n"

    def test_ansi_output_gets_reset(self, app_home, capsys):
        colorize.main(["-f", "ansi", "--bold", "ok"])
        out = capsys.readouterr().out
        assert out.endswith("\x1b[0m\n")
        assert strip_ansi(out) == "ok\n"

    def test_preview(self, app_home, capsys):
        colorize.main(["--preview", "ok"])
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert strip_ansi(lines[1]) == "ok"

    def test_invalid_color_is_usage_error(self, app_home, capsys):
        with pytest.raises(SystemExit) as exc:
            colorize.main(["-s", "#XYZXYZ", "text"])
        assert exc.value.code == 2
        assert "#XYZXYZ" in capsys.readouterr().err

    def test_unknown_format_rejected(self, app_home):
        with pytest.raises(SystemExit) as exc:
            colorize.main(["-f", "html", "text"])
        assert exc.value.code == 2

    def test_list_colors(self, app_home, capsys):
        assert colorize.main(["--list-colors"]) == 0
        out = strip_ansi(capsys.readouterr().out)
        assert "MAGENTA" in out
        assert "#FF00FF" in out

    def test_local_palette_file(self, app_home, capsys):
        palette = app_home / "custom.json"
        palette.write_text(json.dumps({"colors": {"SUNSET": "#FF7E5F"}}))
        colorize.main(["--palette", str(palette), "-s", "sunset", "-e", "sunset", "-f", "minimessage", "x"])
        assert capsys.readouterr().out == "<#ff7e5f>x</#ff7e5f>\n"

    def test_save_defaults(self, app_home, capsys):
        colorize.main(["--save-defaults", "-s", "ORANGE", "-e", "PURPLE", "-f", "minimessage", "--italic", "x"])
        saved = json.loads((app_home / "settings.json").read_text())
        assert saved["start"] == "ORANGE"
        assert saved["backend"] == "minimessage"
        assert saved["italic"] is True

        capsys.readouterr()
        colorize.main(["y"])
        assert capsys.readouterr().out == "<#ffa500><i>y</i></#ffa500>\n"


class TestRunEntryPoint:
    """Tests for colorize.run() - the installed console script."""

    def test_passes_exit_code_through(self, app_home, capsys):
        assert colorize.run(["AB"]) == 0
        assert capsys.readouterr().out.startswith("&x")

    def test_ctrl_c_exits_cleanly(self, app_home, capsys, monkeypatch):
        def interrupted(argv=None):
            raise KeyboardInterrupt

        monkeypatch.setattr(colorize, "main", interrupted)
        assert colorize.run([]) == 0
        assert "Cancelled by user." in capsys.readouterr().out
