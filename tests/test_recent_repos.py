from pathlib import Path

import platformdirs
import pytest

from gitgud_ui.recent_repos import RecentRepos


def test_add_and_limit(tmp_path):
    recent = RecentRepos(5)
    recent.add(tmp_path)

    assert recent.contains(tmp_path)
    assert tmp_path in recent
    assert len(recent) == 1
    repos = recent.get()
    assert len(repos) == 1
    assert repos[0] == tmp_path

    for i in range(10):
        recent.add(f"/tmp/repo-{i}")

    assert len(recent) == 5


def test_most_recent_first_and_oldest_dropped():
    recent = RecentRepos(3)
    for name in ("/a", "/b", "/c", "/d"):
        recent.add(name)
    assert recent.get() == [Path("/d"), Path("/c"), Path("/b")]
    assert not recent.contains("/a")


def test_readding_moves_to_front():
    recent = RecentRepos(3)
    recent.add("/a")
    recent.add("/b")
    recent.add("/a")
    assert recent.get() == [Path("/a"), Path("/b")]


def test_clear_default():
    recent = RecentRepos()
    recent.add("/path/to/repo1")
    recent.add("/path/to/repo2")
    assert len(recent) == 2

    recent.clear()
    assert recent.is_empty()
    assert len(recent) == 0


def test_default_max_count_is_ten():
    recent = RecentRepos()
    for i in range(15):
        recent.add(f"/repo/{i}")
    assert len(recent) == 10


def test_path_normalization_deduplicates():
    recent = RecentRepos(3)
    recent.add("/home/user/repo")
    recent.add("/home/user/./repo")
    recent.add("/home/user/repo/")
    assert len(recent) == 1


def test_save_and_load_round_trip(tmp_path):
    recent = RecentRepos(5)
    recent.add("/one")
    recent.add("/two")
    recent.add("/three")
    target = tmp_path / "recent.txt"
    recent.save_to_file(target)

    loaded = RecentRepos.load_from_file(target)
    assert loaded.get() == [Path("/three"), Path("/two"), Path("/one")]
    assert loaded.max_count == 10


def test_load_skips_blank_lines_and_trims(tmp_path):
    target = tmp_path / "recent.txt"
    target.write_text("  /a  \n\n   \n/b\n", encoding="utf-8")
    loaded = RecentRepos.load_from_file(target)
    assert loaded.get() == [Path("/a"), Path("/b")]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        RecentRepos.load_from_file(tmp_path / "missing.txt")


def test_default_path_location(monkeypatch, tmp_path):
    monkeypatch.setattr(platformdirs, "user_config_dir", lambda *a, **k: str(tmp_path))
    assert RecentRepos.default_path() == tmp_path / "git-gud" / "recent_repos.txt"


def test_load_default_without_file_is_empty(monkeypatch, tmp_path):
    monkeypatch.setattr(platformdirs, "user_config_dir", lambda *a, **k: str(tmp_path))
    recent = RecentRepos.load_default()
    assert recent.is_empty()
    assert recent.max_count == 10


def test_save_default_creates_directory(monkeypatch, tmp_path):
    monkeypatch.setattr(platformdirs, "user_config_dir", lambda *a, **k: str(tmp_path / "cfg"))
    recent = RecentRepos()
    recent.add("/some/repo")
    recent.save_default()

    saved = tmp_path / "cfg" / "git-gud" / "recent_repos.txt"
    assert saved.read_text(encoding="utf-8") == str(Path("/some/repo"))
    assert RecentRepos.load_default().get() == [Path("/some/repo")]