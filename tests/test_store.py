"""
PersistenceStore: JSON round trip, corrupt/missing files, atomic save, cleanup.
Run: pytest tests/test_store.py
"""
import json

import pytest

from recentdirs.core.entry import CommandDescriptor, Entry, Listing, ReopenListing, ReopenPath, ReplayCommand
from recentdirs.core.exceptions import HistoryCorruptError, HistoryUnreadableError
from recentdirs.core.recency import RecencyList
from recentdirs.core.store import PersistenceStore


@pytest.mark.parametrize(
    "entries",
    [
        [],
        [Entry.plain("/a"), Entry.plain("/b/c"), Entry.plain("/d e")],
        [Entry("project", ReopenListing(Listing("/home/u/project", ["x.py", "y.py"])))],
    ],
    ids=["empty", "three-paths", "listing"],
)
def test_round_trip(history_file, entries):
    store = PersistenceStore(history_file)
    store.save(RecencyList(entries))
    loaded = RecencyList()
    assert store.load(loaded)
    assert loaded == RecencyList(entries)


def test_plain_entries_are_strings_on_disk(history_file):
    PersistenceStore(history_file).save(RecencyList([Entry.plain("/a")]))
    assert json.loads(history_file.read_text()) == ["/a"]


def test_replay_entry_saved_as_working_directory(history_file):
    command = CommandDescriptor(("find", "."), "/srv/logs", "*Find*")
    store = PersistenceStore(history_file)
    store.save(RecencyList([Entry("*Find*:/srv/logs", ReplayCommand(command))]))
    loaded = RecencyList()
    store.load(loaded)
    assert loaded.entries() == [Entry("*Find*:/srv/logs", ReopenPath("/srv/logs"))]


def test_missing_file_leaves_list_unchanged(history_file):
    rl = RecencyList([Entry.plain("/kept")])
    assert not PersistenceStore(history_file).load(rl)
    assert rl.labels() == ["/kept"]


def test_load_replaces_wholesale(history_file):
    history_file.parent.mkdir(parents=True)
    history_file.write_text('["/from-disk"]')
    rl = RecencyList([Entry.plain("/in-memory")])
    PersistenceStore(history_file).load(rl)
    assert rl.labels() == ["/from-disk"]


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        '{"label": "x"}',
        "[1, 2]",
        '[{"label": "x"}]',
        '[{"label": "x", "action": {"type": "bogus"}}]',
        '[{"label": "x", "action": {"type": "listing", "name": "/x", "files": [1]}}]',
    ],
)
def test_corrupt_content_raises_and_keeps_list(history_file, content):
    history_file.parent.mkdir(parents=True)
    history_file.write_text(content)
    rl = RecencyList([Entry.plain("/kept")])
    with pytest.raises(HistoryCorruptError):
        PersistenceStore(history_file).load(rl)
    assert rl.labels() == ["/kept"]


def test_save_creates_parent_and_leaves_no_temp_files(history_file):
    PersistenceStore(history_file).save(RecencyList([Entry.plain("/a")]))
    assert history_file.exists()
    assert [p.name for p in history_file.parent.iterdir()] == [history_file.name]


def test_save_overwrites_previous_content(history_file):
    store = PersistenceStore(history_file)
    store.save(RecencyList([Entry.plain("/old")]))
    store.save(RecencyList([Entry.plain("/new")]))
    assert json.loads(history_file.read_text()) == ["/new"]


def test_cleanup_keeps_existing_and_remote(tmp_path, history_file):
    exists = tmp_path / "exists"
    exists.mkdir()
    missing = tmp_path / "missing"
    rl = RecencyList([Entry.plain(str(exists) + "/"), Entry.plain(str(missing) + "/"), Entry.plain("remote:/host/path/")])
    kept = PersistenceStore(history_file).cleanup(rl)
    assert kept.labels() == [str(exists) + "/", "remote:/host/path/"]


def test_cleanup_uses_entry_path(tmp_path, history_file):
    listing = Entry("gone", ReopenListing(Listing(str(tmp_path / "gone"), ["a"])))
    placeholder = Entry("*Find*:~", ReopenPath(str(tmp_path)))
    kept = PersistenceStore(history_file).cleanup(RecencyList([listing, placeholder]))
    assert kept.labels() == ["*Find*:~"]


def test_invalid_utf8_is_corrupt(history_file):
    history_file.parent.mkdir(parents=True)
    history_file.write_bytes(b'["/caf\xe9", "/b"]')
    rl = RecencyList([Entry.plain("/kept")])
    with pytest.raises(HistoryCorruptError):
        PersistenceStore(history_file).load(rl)
    assert rl.labels() == ["/kept"]


def test_unreadable_file_raises(history_file, monkeypatch):
    history_file.parent.mkdir(parents=True)
    history_file.write_text('["/a"]')

    def deny(self):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(PersistenceStore, "_read", deny)
    rl = RecencyList([Entry.plain("/kept")])
    with pytest.raises(HistoryUnreadableError):
        PersistenceStore(history_file).load(rl)
    assert rl.labels() == ["/kept"]
