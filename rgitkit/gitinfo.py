"""Git-oriented helpers: change and branch summaries, paths, URLs and validation."""

from __future__ import annotations

import re
import secrets
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from rgitkit.text import colorize

_RANDOM_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"
_INVALID_REF_CHARS = frozenset(" ~^:?*[\\")
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_URL_PATTERNS = (
    ("ssh", re.compile(r"git@([^:]+):(.+?)(?:\.git)?/?")),
    ("https", re.compile(r"https://([^/]+)/(.+?)(?:\.git)?/?")),
    ("http", re.compile(r"http://([^/]+)/(.+?)(?:\.git)?/?")),
    ("git", re.compile(r"git://([^/]+)/(.+?)(?:\.git)?/?")),
)
_HEX_DIGITS = frozenset("0123456789abcdef")
_OID_HEX_LEN = 40


def _plural_suffix(count: int) -> str:
    return "" if count == 1 else "s"


@dataclass
class FileChangeStats:
    """Counts of files, inserted lines and deleted lines in a change set."""

    files: int = 0
    additions: int = 0
    deletions: int = 0

    def total_changes(self) -> int:
        """Return the number of changed lines, insertions plus deletions."""
        return self.additions + self.deletions

    def format_summary(self) -> str:
        """Describe the change set the way ``git diff --stat`` sums it up."""
        if self.files == 0:
            return "no changes"
        return (
            f"{self.files} file{_plural_suffix(self.files)}, "
            f"{self.additions} insertion{_plural_suffix(self.additions)}, "
            f"{self.deletions} deletion{_plural_suffix(self.deletions)}"
        )


@dataclass
class BranchStatus:
    """How a local branch relates to its upstream."""

    has_upstream: bool = False
    upstream_name: str | None = None
    ahead: int = 0
    behind: int = 0

    def is_up_to_date(self) -> bool:
        """True when the branch is neither ahead of nor behind its upstream."""
        return self.ahead == 0 and self.behind == 0

    def format_status(self) -> str:
        """Return a short, coloured description of the upstream status."""
        if not self.has_upstream:
            return colorize("no upstream", "dimmed")
        if self.is_up_to_date():
            return colorize("up to date", "green")
        ahead = colorize(str(self.ahead), "green")
        behind = colorize(str(self.behind), "red")
        if self.ahead == 0:
            return f"{behind} behind"
        if self.behind == 0:
            return f"{ahead} ahead"
        return f"{ahead} ahead, {behind} behind"


@dataclass(frozen=True)
class GitUrlInfo:
    """The parts of a remote repository URL."""

    protocol: str
    host: str
    path: str
    original: str

    def repository_name(self) -> str:
        """Return the last path segment, the repository's name."""
        return self.path.split("/")[-1]

    def owner(self) -> str | None:
        """Return the path segment before the repository name, if there is one."""
        parts = self.path.split("/")
        if len(parts) >= 2:
            return parts[-2]
        return None


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


def get_relative_path(repo_root: str | Path, file_path: str | Path) -> Path:
    """Return ``file_path`` relative to ``repo_root``, or unchanged if outside it."""
    file_path = Path(file_path)
    try:
        return file_path.relative_to(repo_root)
    except ValueError:
        return file_path


def is_path_in_repo(repo_root: str | Path, file_path: str | Path) -> bool:
    """True when ``file_path`` exists and its real path lies under ``repo_root``."""
    try:
        canonical = Path(file_path).resolve(strict=True)
    except (OSError, RuntimeError):
        return False
    return canonical.is_relative_to(repo_root)


def _common_prefix_two(first: Path, second: Path) -> Path | None:
    common: list[str] = []
    for left, right in zip(first.parts, second.parts):
        if left != right:
            break
        common.append(left)
    if not common:
        return None
    return Path(*common)


def find_common_prefix(paths: Iterable[str | Path]) -> Path | None:
    """Return the longest leading path shared by all ``paths``.

    A single path yields its parent directory; no paths, or paths with
    nothing in common, yield ``None``.
    """
    items = [Path(path) for path in paths]
    if not items:
        return None
    if len(items) == 1:
        only = items[0]
        return None if only.parent == only else only.parent
    common: Path | None = items[0]
    for path in items[1:]:
        common = _common_prefix_two(common, path)
        if common is None:
            return None
    return common


# ---------------------------------------------------------------------------
# Git names and URLs
# ---------------------------------------------------------------------------


def is_valid_ref_name(name: str) -> bool:
    """Apply the basic rules for a valid Git reference name."""
    if not name or len(name.encode("utf-8")) > 255:
        return False
    if any(char in _INVALID_REF_CHARS for char in name):
        return False
    if name.startswith("/") or name.endswith("/"):
        return False
    if "//" in name or ".." in name:
        return False
    if name.startswith(".") or name.endswith("."):
        return False
    return not name.endswith(".lock")


def parse_git_url(url: str) -> GitUrlInfo | None:
    """Split an SSH, HTTPS, HTTP or git:// remote URL into its parts."""
    for protocol, pattern in _URL_PATTERNS:
        match = pattern.fullmatch(url)
        if match:
            return GitUrlInfo(
                protocol=protocol,
                host=match.group(1),
                path=match.group(2),
                original=url,
            )
    return None


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def is_valid_email(email: str) -> bool:
    """True when ``email`` has the shape of an e-mail address."""
    return _EMAIL_RE.fullmatch(email) is not None


def _message_lines(message: str) -> list[str]:
    lines = message.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def validate_commit_message(message: str) -> list[str]:
    """Return the ways ``message`` departs from common commit-message style."""
    lines = _message_lines(message)
    if not lines or not lines[0].strip():
        return ["Commit message cannot be empty"]

    issues: list[str] = []
    subject = lines[0]
    if len(subject.encode("utf-8")) > 50:
        issues.append("Subject line should be 50 characters or less")
    if subject.endswith("."):
        issues.append("Subject line should not end with a period")
    if len(lines) > 1 and lines[1]:
        issues.append("Add a blank line after the subject line")
    for number, line in enumerate(lines[2:], start=3):
        if len(line.encode("utf-8")) > 72:
            issues.append(f"Line {number} is too long (72 characters max)")
    return issues


# ---------------------------------------------------------------------------
# Hashes and random names
# ---------------------------------------------------------------------------


def _oid_hex(oid: str | bytes) -> str:
    if isinstance(oid, (bytes, bytearray)):
        if len(oid) != _OID_HEX_LEN // 2:
            raise ValueError("a raw object id must be 20 bytes long")
        return bytes(oid).hex()
    text = oid.lower()
    if not text or len(text) > _OID_HEX_LEN or not set(text) <= _HEX_DIGITS:
        raise ValueError(f"invalid object id: {oid!r}")
    return text.ljust(_OID_HEX_LEN, "0")


def shorten_oid(oid: str | bytes, length: int) -> str:
    """Return the first ``length`` hex digits of a Git object id."""
    text = _oid_hex(oid)
    if length >= len(text):
        return text
    return text[:length]


def generate_random_string(length: int) -> str:
    """Return ``length`` random lower-case letters and digits."""
    return "".join(secrets.choice(_RANDOM_ALPHABET) for _ in range(length))