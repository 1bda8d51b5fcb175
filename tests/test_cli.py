"""Tests for the command-line entry point."""

from __future__ import annotations

import pytest

from site_percolation.cli import build_parser, main


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.trials is None
        assert args.min_size is None
        assert args.max_size is None
        assert args.probability is None
        assert args.pause is None
        assert args.outdir is None
        assert args.threshold is None
        assert not args.show


class TestMain:
    def test_runs_trials(self, capsys) -> None:
        assert main(["--trials", "2", "--seed", "1", "--pause", "0"]) == 0
        out = capsys.readouterr().out
        assert "Percolation Problem 2" in out

    def test_threshold_mode(self, capsys) -> None:
        assert main(["--threshold", "6", "--trials", "5", "--seed", "3"]) == 0
        out = capsys.readouterr().out
        assert "Grid Size: 6, trials: 5" in out
        assert "95% confidence interval" in out

    @pytest.mark.parametrize(
        "argv",
        [
            ["--probability", "1.2"],
            ["--min-size", "8", "--max-size", "4"],
            ["--trials", "0"],
            ["--threshold", "0"],
            ["--threshold", "4", "--trials", "1"],
            ["--threshold", "4", "--show"],
            ["--threshold", "4", "--pause", "0"],
            ["--threshold", "4", "--probability", "0.5"],
            ["--threshold", "4", "--min-size", "3"],
            ["--threshold", "4", "--outdir"],
        ],
    )
    def test_invalid_arguments_exit(self, argv: list) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(argv)
        assert excinfo.value.code == 2

    def test_threshold_rejects_trial_options_by_name(self, capsys) -> None:
        with pytest.raises(SystemExit):
            main(["--threshold", "4", "--show", "--max-size", "9"])
        err = capsys.readouterr().err
        assert "--threshold cannot be combined with --max-size, --show" in err

    def test_trial_defaults_fill_unset_options(self, capsys) -> None:
        assert main(["--trials", "1", "--seed", "0", "--pause", "0"]) == 0
        out = capsys.readouterr().out
        assert "at p=0.593" in out
