"""
SelectionController and ActionEvaluator: label resolution, fallback, dispatch, completion notice.
Run: pytest tests/test_controller.py
"""
import json

from recentdirs.application.controller import ActionEvaluator, SelectionController, search_view_notice
from recentdirs.application.feature import RecentDirs
from recentdirs.core.entry import CommandDescriptor, Entry, Listing, ReopenListing, ReopenPath, ReplayCommand


def _feature(host, history_file, entries=()):
    feature = RecentDirs(host, history_file)
    for entry in reversed(list(entries)):
        feature.ensure_loaded().insert(entry)
    return feature


def test_open_loads_just_in_time(host, history_file):
    history_file.parent.mkdir(parents=True)
    history_file.write_text(json.dumps(["/a", "/b"]))
    host.answer = "/b"
    SelectionController(RecentDirs(host, history_file)).open()
    assert host.prompts[0][1] == ["/a", "/b"]
    assert host.opened == ["/b"]


def test_selection_fallback_opens_typed_path(host, history_file):
    host.answer = "/typed/path/"
    SelectionController(_feature(host, history_file, [Entry.plain("/a")])).open()
    assert host.opened == ["/typed/path/"]


def test_aborted_prompt_opens_nothing(host, history_file):
    host.answer = None
    assert SelectionController(_feature(host, history_file, [Entry.plain("/a")])).open() is None
    assert host.opened == []


def test_open_does_not_reorder_or_save(host, history_file):
    host.answer = "/b"
    feature = _feature(host, history_file, [Entry.plain("/a"), Entry.plain("/b")])
    SelectionController(feature).open()
    assert feature.labels() == ["/a", "/b"]
    assert not history_file.exists()


def test_listing_entry_opens_listing(host, history_file):
    listing = Listing("/home/u/project", ["a.py", "b.py"])
    host.answer = "project"
    SelectionController(_feature(host, history_file, [Entry("project", ReopenListing(listing))])).open()
    assert host.opened == [listing]


def test_placeholder_opens_directory(host, history_file):
    host.answer = "*Find*:~/src"
    SelectionController(_feature(host, history_file, [Entry("*Find*:~/src", ReopenPath("/home/u/src"))])).open()
    assert host.opened == ["/home/u/src"]


def test_replay_search_view_reports_command_after_finish(host, history_file):
    command = CommandDescriptor(("find", ".", "-name", "*.py"), "/src", "*Find*")
    host.answer = "*Find*:/src"
    view = SelectionController(_feature(host, history_file, [Entry("*Find*:/src", ReplayCommand(command))])).open()
    assert host.replayed == [command]
    assert host.messages == []
    view.finish()
    assert host.messages == ["*Find* finished: find . -name *.py"]
    view.finish()
    assert len(host.messages) == 1


def test_replay_other_view_has_no_notice(host, history_file):
    command = CommandDescriptor(("ls", "-la"), "/src", "*ls*")
    view = ActionEvaluator(host).run(Entry("*ls*:/src", ReplayCommand(command)))
    view.finish()
    assert host.messages == []


def test_pluggable_notice(host):
    command = CommandDescriptor(("rg", "x"), "/src", "*rg*")
    evaluator = ActionEvaluator(host, search_view_notice(["*rg*"]))
    evaluator.run(Entry("*rg*:/src", ReplayCommand(command))).finish()
    assert host.messages == ["*rg* finished: rg x"]


def test_resolve_exact_label_only(host, history_file):
    controller = SelectionController(_feature(host, history_file, [Entry.plain("/abc")]))
    assert controller.resolve("/abc") == Entry.plain("/abc")
    assert controller.resolve("/ab") == Entry.plain("/ab")
