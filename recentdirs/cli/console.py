"""
Terminal host for the CLI. Chosen directories go to stdout (for `cd "$(recentdirs open-recent)"`);
prompts, messages and the numbered menu go to stderr.
"""
import os
import sys
from typing import Optional, Sequence, Union

from recentdirs.core.config import EVENT_SHUTDOWN, EVENT_VIEW_OPENED
from recentdirs.core.entry import CommandDescriptor, Listing
from recentdirs.core.host import Host
from recentdirs.core.logger import get_logger
from recentdirs.core.views import View
from recentdirs.utils.file_utils import is_remote
from recentdirs.utils.process_utils import run_cmd

logger = get_logger("console")


def normalize_dir(path: str) -> str:
    """Absolute, user-expanded form of a local path; remote paths are returned unchanged."""
    if is_remote(path):
        return path
    return os.path.abspath(os.path.expanduser(path))


def fuzzy_matches(text: str, labels: Sequence[str]) -> list:
    """Labels containing the characters of text in order (case-insensitive)."""
    needle = text.lower()
    out = []
    for label in labels:
        it = iter(label.lower())
        if all(ch in it for ch in needle):
            out.append(label)
    return out


class ConsoleHost(Host):
    def __init__(self, stdin=None, stdout=None, stderr=None):
        super().__init__()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    # ------------------------------------------------------------------
    # Prompt
    # ------------------------------------------------------------------

    def select(self, prompt: str, labels: Sequence[str]) -> Optional[str]:
        """
        Numbered menu. An empty answer aborts.
        Accepts a number, an exact label, or a fuzzy pattern matching one label.
        Text that looks like a path (contains a separator or starts with ~) is returned as typed.
        """
        for i, label in enumerate(labels, 1):
            print(f"{i:3d}  {label}", file=self.stderr)
        self.stderr.write(prompt)
        self.stderr.flush()
        try:
            raw = self.stdin.readline()
        except KeyboardInterrupt:
            return None
        if not raw:
            return None
        text = raw.strip()
        if not text:
            return None
        if text.isdigit() and 1 <= int(text) <= len(labels):
            return labels[int(text) - 1]
        if text in labels or "/" in text or os.sep in text or text.startswith("~"):
            return text
        candidates = fuzzy_matches(text, labels)
        if len(candidates) == 1:
            return candidates[0]
        if candidates:
            print(f"{len(candidates)} entries match {text!r}; be more specific", file=self.stderr)
            return self.select(prompt, candidates)
        return text

    def message(self, text: str) -> None:
        print(text, file=self.stderr)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def announce(self, view: View) -> View:
        """Tell hooks about a new view; process views get their reload command right after."""
        self.events.emit(EVENT_VIEW_OPENED, view=view)
        if view.command is not None:
            view.reload_command = view.command
        return view

    def open_directory(self, target: Union[str, Listing]) -> View:
        if isinstance(target, Listing):
            name = normalize_dir(target.name)
            view = View(os.path.basename(name.rstrip("/")) or name, name, listing=Listing(name, target.files))
        else:
            name = normalize_dir(target)
            view = View(os.path.basename(name.rstrip("/")) or name, name)
        if not is_remote(name) and not os.path.isdir(name):
            raise NotADirectoryError(f"Not a directory: {name}")
        self.announce(view)
        print(name, file=self.stdout)
        if view.listing is not None:
            for f in view.listing.files:
                print(f, file=self.stdout)
        return view

    def replay(self, command: CommandDescriptor) -> View:
        """Queue the command; it runs on the next loop turn so finish hooks can be attached first."""
        view = View(command.view_name or command.argv[0], command.directory, command=command)
        self.announce(view)
        self.loop.call_soon(self._run, view)
        return view

    def _run(self, view: View) -> None:
        command = view.command
        logger.info("Running %s in %s", command, command.directory)
        code = run_cmd(
            list(command.argv),
            cwd=command.directory,
            line_callback=lambda line: print(line, file=self.stdout),
        )
        if code:
            logger.warning("%s exited with status %d", command, code)
        view.finish()

    def shutdown(self) -> None:
        self.loop.run_pending()
        self.events.emit(EVENT_SHUTDOWN)
