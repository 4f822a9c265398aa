import pytest

from filesplit.cli import EXIT_FAILURE, EXIT_SUCCESS, main


def listing(path):
    return sorted(p.name for p in path.iterdir())


@pytest.mark.parametrize("argv", [[], ["-split", "-unsplit"], ["-filename=x"]])
def test_exactly_one_mode_required(argv, capsys):
    assert main(argv) == EXIT_FAILURE
    out = capsys.readouterr().out
    assert "Need to use exactly one usage argument." in out
    assert "-extension" in out


def test_unknown_argument_is_usage_error(capsys):
    assert main(["-split", "-bogus"]) == EXIT_FAILURE
    assert "-split" in capsys.readouterr().out


def test_split_requires_filename(capsys):
    assert main(["-split", "-size=2000"]) == EXIT_FAILURE
    assert "Need to specify filename." in capsys.readouterr().out


def test_split_requires_size(make_file, capsys):
    source = make_file("data.bin", 10)
    assert main(["-split", f"-filename={source}"]) == EXIT_FAILURE
    assert "Need to specify size limit." in capsys.readouterr().out


def test_size_below_threshold(make_file, isolated_workdir, capsys):
    source = make_file("data.bin", 5000)

    assert main(["-split", f"-filename={source}", "-size=500"]) == EXIT_FAILURE

    assert "impractical" in capsys.readouterr().out
    assert listing(isolated_workdir) == []


@pytest.mark.parametrize("size", ["0", "-5"])
def test_non_positive_size(make_file, capsys, size):
    source = make_file("data.bin", 5000)

    assert main(["-split", f"-filename={source}", f"-size={size}"]) == EXIT_FAILURE

    out = capsys.readouterr().out
    assert f"Size cannot be less than 1 byte. Given size was {size} byte(s)." in out


def test_non_numeric_size(make_file, capsys):
    source = make_file("data.bin", 5000)
    assert main(["-split", f"-filename={source}", "-size=big"]) == EXIT_FAILURE
    assert "whole number" in capsys.readouterr().out


def test_missing_source_file(isolated_workdir, capsys):
    assert main(["-split", "-filename=missing.bin", "-size=1000"]) == EXIT_FAILURE
    assert "File missing.bin does not exist." in capsys.readouterr().out


@pytest.mark.parametrize(
    "flags, expected",
    [
        ([], ["data_part0", "data_part1"]),
        (["-extension"], ["data_part0.bin", "data_part1.bin"]),
        (["-extension="], ["data_part0.bin", "data_part1.bin"]),
        (["-extension=bin"], ["data_part0.bin", "data_part1.bin"]),
        (["-extension=.dat"], ["data_part0.dat", "data_part1.dat"]),
        (["-suffix=.p", "-extension=dat"], ["data.p0.dat", "data.p1.dat"]),
    ],
)
def test_split_naming(make_file, isolated_workdir, capsys, flags, expected):
    source = make_file("data.txt", 1500)

    assert main(["-split", f"-filename={source}", "-size=1000", *flags]) == EXIT_SUCCESS

    assert listing(isolated_workdir) == expected
    assert f"Successfully split file {source}." in capsys.readouterr().out


def test_separate_flag_values_accepted(make_file, isolated_workdir):
    source = make_file("data.txt", 1500)
    assert main(["-split", "-filename", str(source), "-size", "1000"]) == EXIT_SUCCESS
    assert listing(isolated_workdir) == ["data_part0", "data_part1"]


def test_unsplit_ignores_extension(isolated_workdir, capsys):
    (isolated_workdir / "a_part0").write_bytes(b"A")
    (isolated_workdir / "a_part1").write_bytes(b"B")

    code = main(["-unsplit", "-filename=joined", "-extension=zip"])

    assert code == EXIT_SUCCESS
    assert (isolated_workdir / "joined").read_bytes() == b"AB"
    assert "Successfully combined files into joined." in capsys.readouterr().out


def test_unsplit_default_output_name(isolated_workdir, capsys):
    parts = isolated_workdir / "parts"
    parts.mkdir()
    (parts / "a_part0").write_bytes(b"A")

    assert main(["-unsplit", "-foldername=parts"]) == EXIT_SUCCESS

    assert (isolated_workdir / "parts - unsplit").read_bytes() == b"A"


def test_unsplit_no_matches(isolated_workdir, capsys):
    (isolated_workdir / "random.bin").write_bytes(b"R")

    assert main(["-unsplit", "-filename=joined"]) == EXIT_FAILURE
    assert "No files found with suffix _part" in capsys.readouterr().out


def test_unsplit_missing_folder(capsys):
    assert main(["-unsplit", "-foldername=nope", "-filename=joined"]) == EXIT_FAILURE
    assert "Folder nope does not exist." in capsys.readouterr().out


def test_invalid_order(capsys):
    assert main(["-unsplit", "-order=random"]) == EXIT_FAILURE


def test_round_trip_through_cli(make_file, isolated_workdir, tmp_path):
    source = make_file("movie.mp4", 23_456)

    assert main(["-split", f"-filename={source}", "-size=1000", "-extension"]) == EXIT_SUCCESS
    assert len(list((isolated_workdir / "output").iterdir())) == 24

    rebuilt = tmp_path / "rebuilt.mp4"
    code = main(["-unsplit", "-foldername=output", f"-filename={rebuilt}", "-order=numeric"])

    assert code == EXIT_SUCCESS
    assert rebuilt.read_bytes() == source.read_bytes()


def test_environment_changes_threshold(make_file, isolated_workdir, monkeypatch):
    monkeypatch.setenv("FILESPLIT_MIN_CHUNK_SIZE", "10")
    source = make_file("data.bin", 25)

    assert main(["-split", f"-filename={source}", "-size=10"]) == EXIT_SUCCESS
    assert listing(isolated_workdir) == ["data_part0", "data_part1", "data_part2"]
