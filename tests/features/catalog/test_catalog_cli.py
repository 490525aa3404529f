import pytest
from reclist.cli import index_main, query_main


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'cli_catalog.db'}"


def test_index_then_query(recordings_root, db_url, capsys):
    assert index_main([str(recordings_root), "--db-url", db_url]) == 0
    err = capsys.readouterr().err
    assert "indexed 3" in err

    assert query_main(["--db-url", db_url, "--email", "alice"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "9_4_2025/5551234567 by alice@example.com @ 11_30_45 AM_120000.wav",
        "9_3_2025/5551234567 by alice@example.com @ 3_45_12 PM_61000.wav",
    ]


def test_query_sort_and_limit(recordings_root, db_url, capsys):
    index_main([str(recordings_root), "--db-url", db_url])
    capsys.readouterr()

    query_main(["--db-url", db_url, "--sort", "duration", "--direction", "asc", "-n", "1"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["9_3_2025/5559876543 by bob@example.com @ 9_05_00 AM_15000.wav"]


def test_stats(recordings_root, db_url, capsys):
    index_main([str(recordings_root), "--db-url", db_url])
    capsys.readouterr()

    assert query_main(["--db-url", db_url, "--stats"]) == 0
    out = capsys.readouterr().out
    assert "Total files: 3" in out
    assert f"Database: {db_url}" in out
    assert "Database size:" in out


def test_query_rejects_bad_paging(db_url):
    with pytest.raises(SystemExit) as exc:
        query_main(["--db-url", db_url, "--limit", "0"])
    assert exc.value.code == 2


def test_index_requires_root():
    with pytest.raises(SystemExit) as exc:
        index_main([])
    assert exc.value.code == 2


@pytest.mark.parametrize("size", ["0", "-5", "many"])
def test_index_rejects_bad_batch_size(recordings_root, db_url, size):
    with pytest.raises(SystemExit) as exc:
        index_main([str(recordings_root), "--db-url", db_url, "--batch-size", size])
    assert exc.value.code == 2
