from space_shooter.play import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.width == 800 and args.height == 600
    assert args.highscore_file == "highscore.dat"
    assert args.assets is None
    assert args.headless == 0


def test_headless_run(capsys):
    assert main(["--headless", "2", "--seed", "4", "--width", "320", "--height", "240"]) == 0
    out = capsys.readouterr().out
    assert "Episode 2/2" in out
    assert "Mean Score" in out
