# Copyright (c) 2026 Huecast
# SPDX-License-Identifier: MIT

"""Tests for the ``python -m huecast`` command line."""

import json

import pytest

from huecast.__main__ import main


class TestCLI:

    def test_text_output(self, capsys):
        assert main(["hex", "#ff0000"]) == 0
        out = capsys.readouterr().out
        assert "rgba(255, 0, 0, 1)" in out
        assert "lab(53.24% 80.09 67.2 / 1)" in out

    def test_json_output(self, capsys):
        assert main(["rgb", "255, 0, 0", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["hex"] == "#ff0000"
        assert data["hsla"] == "hsla(0, 100%, 50%, 1)"

    def test_empty_text_uses_default(self, capsys):
        assert main(["hsl"]) == 0
        assert "#808080" in capsys.readouterr().out

    def test_places(self, capsys):
        assert main(["rgb", "128, 0, 0", "--places", "4"]) == 0
        assert "rgba(0.5020, 0, 0, 1)" in capsys.readouterr().out

    def test_validation_error_exit_code(self, capsys):
        assert main(["rgb", "256, 0, 0"]) == 1
        err = capsys.readouterr().err
        assert "R must be between 0 and 255" in err

    def test_unknown_notation(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["cmyk", "0, 0, 0, 0"])
        assert exc.value.code == 2
        assert "Unknown notation" in capsys.readouterr().err
