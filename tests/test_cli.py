"""Tests for the gtfs-store command line."""

from gtfs_store.cli import main


def test_tables_lists_registry(capsys):
    assert main(["tables"]) == 0
    out = capsys.readouterr().out
    assert "stop_times\tstop_times.txt\trequired" in out
    assert "board_alights\tboard_alight.txt\tridership\tBoarding and alighting counts (GTFS-ride)" in out


def test_import_then_export(feed_dir, tmp_path, capsys):
    db = str(tmp_path / "gtfs.db")

    assert main(["--quiet", "import", "--path", str(feed_dir), "--sqlite-path", db]) == 0
    assert "demo: " in capsys.readouterr().out

    out_dir = tmp_path / "out"
    assert main(["--quiet", "export", "--agency-key", "demo", "--out", str(out_dir), "--sqlite-path", db]) == 0
    assert (out_dir / "stops.txt").exists()


def test_store_errors_exit_with_one(tmp_path):
    assert main(["--quiet", "import", "--path", str(tmp_path / "missing.zip")]) == 1
    assert main(["--quiet", "export", "--agency-key", "ghost", "--out", str(tmp_path / "o"), "--sqlite-path", str(tmp_path / "x.db")]) == 1


def test_import_with_delimiter(write_feed, feed_tables, tmp_path, capsys):
    path = write_feed({name: text.replace(",", ";") for name, text in feed_tables.items()}, name="semi")
    db = str(tmp_path / "semi.db")

    assert main(["--quiet", "import", "--path", str(path), "--delimiter", ";", "--sqlite-path", db]) == 0
    assert "semi: 27 rows, 0 warnings" in capsys.readouterr().out
