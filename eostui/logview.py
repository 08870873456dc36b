"""Log targets, filtering and the state of the log overlay."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from eostui.ansi import hardwrap, truncate

RTLOG_SECONDS = 600
RTLOG_TAG = "info"

_MGM_LOG_FILES: tuple[tuple[str, str], ...] = (
    ("MGM xrdlog", "/var/log/eos/mgm/xrdlog.mgm"),
    ("MGM Traffic Shaping", "/var/log/eos/mgm/TrafficShaping.log"),
    ("MGM Balancer", "/var/log/eos/mgm/Balancer.log"),
    ("MGM Converter", "/var/log/eos/mgm/Converter.log"),
    ("MGM Drain", "/var/log/eos/mgm/Drain.log"),
)

QDB_LOG_FILE = "/var/log/eos/quarkdb/xrdlog.quarkdb"


@dataclass(frozen=True)
class LogTarget:
    """A log that can be shown: either a file on a host or an rtlog queue."""

    title: str
    source: str
    host: str = ""
    file_path: str = ""
    rtlog_queue: str = ""
    rtlog_tag: str = ""
    rtlog_secs: int = 0


def fst_rtlog_queue(host: str, port: int) -> str:
    """The rtlog queue of an FST node."""
    return f"/eos/{host}:{port}/fst"


def rtlog_source_label(queue: str, seconds: int, tag: str) -> str:
    """The command line shown as the source of an rtlog target."""
    return f"eos rtlog {queue} {seconds} {tag}"


def mgm_log_targets(host: str) -> list[LogTarget]:
    """The logs available for an MGM host, the realtime log first."""
    targets = [
        LogTarget(
            title="MGM Log",
            source=rtlog_source_label(".", RTLOG_SECONDS, RTLOG_TAG),
            host=host,
            rtlog_queue=".",
            rtlog_tag=RTLOG_TAG,
            rtlog_secs=RTLOG_SECONDS,
        )
    ]
    targets.extend(
        LogTarget(title=title, source=path, host=host, file_path=path)
        for title, path in _MGM_LOG_FILES
    )
    return targets


def qdb_log_targets(host: str) -> list[LogTarget]:
    """The log available for a QuarkDB host."""
    return [
        LogTarget(
            title="QDB Log",
            source=QDB_LOG_FILE,
            host=host,
            file_path=QDB_LOG_FILE,
        )
    ]


def fst_log_targets(host: str, port: int) -> list[LogTarget]:
    """The realtime log of an FST node."""
    queue = fst_rtlog_queue(host, port)
    return [
        LogTarget(
            title="FST Log",
            source=rtlog_source_label(queue, RTLOG_SECONDS, RTLOG_TAG),
            host=host,
            rtlog_queue=queue,
            rtlog_tag=RTLOG_TAG,
            rtlog_secs=RTLOG_SECONDS,
        )
    ]


def log_title_with_host(target: LogTarget) -> str:
    """The target's title, followed by its host when it has one."""
    if not target.host:
        return target.title
    return f"{target.title}  [{target.host}]"


def apply_log_filter(lines: Iterable[str], filter_text: str) -> list[str]:
    """Lines that contain ``filter_text``, ignoring case; all lines if it is empty."""
    if not filter_text:
        return list(lines)
    needle = filter_text.lower()
    return [line for line in lines if needle in line.lower()]


def render_wrapped_log_lines(lines: Iterable[str], width: int, wrap: bool) -> list[str]:
    """Lines wrapped, or truncated when not wrapping, to ``width`` cells."""
    if width <= 0:
        return list(lines)
    out: list[str] = []
    for line in lines:
        if wrap:
            out.extend(hardwrap(line, width).split("\n"))
        else:
            out.append(truncate(line, width, ""))
    return out


def log_viewport_width(content_width: int, plain: bool) -> int:
    """Width available to log text; the boxed panel takes border and padding."""
    width = content_width if plain else content_width - 4
    return max(1, width)


def visible_log_window(lines: Sequence[str], offset: int, height: int) -> list[str]:
    """The ``height`` lines shown from ``offset``, bottom-aligned with blank rows."""
    top = max(0, min(offset, len(lines)))
    bottom = min(top + height, len(lines))
    visible = list(lines[top:bottom]) if top < bottom else []
    missing = max(0, height - len(visible))
    return [""] * missing + visible


@dataclass
class LogOverlay:
    """The log overlay: which log is shown, its lines and the active filter."""

    active: bool = False
    plain: bool = False
    tailing: bool = False
    wrap: bool = False
    sources: list[LogTarget] = field(default_factory=list)
    source_index: int = 0
    target: LogTarget | None = None
    title: str = ""
    all_lines: list[str] = field(default_factory=list)
    filtered: list[str] = field(default_factory=list)
    filter: str = ""
    filtering: bool = False
    error: object = None
    notice: str = ""
    loading: bool = False

    @classmethod
    def open(cls, targets: Sequence[LogTarget]) -> LogOverlay:
        """An active, tailing overlay showing the first of ``targets``.

        Raises ValueError when there is no target to show.
        """
        if not targets:
            raise ValueError("no log target available for this view")
        overlay = cls(active=True, tailing=True, wrap=True, sources=list(targets))
        overlay.set_target(targets[0], True)
        return overlay

    def set_target(self, target: LogTarget, loading: bool) -> None:
        """Switch to ``target``, discarding the lines of the previous log."""
        self.target = target
        self.title = log_title_with_host(target)
        self.error = None
        self.notice = ""
        self.loading = loading
        self.all_lines = []
        self.filtered = []

    def switch_source(self, delta: int) -> LogTarget | None:
        """Move ``delta`` sources along, wrapping; None when there is nothing to switch to."""
        if len(self.sources) < 2:
            return None
        self.source_index = (self.source_index + delta) % len(self.sources)
        target = self.sources[self.source_index]
        self.set_target(target, True)
        return target

    def source_label(self) -> str:
        """The source of the current log, or its file path when it has none."""
        if self.target is None:
            return ""
        return self.target.source or self.target.file_path

    def lines_loaded(
        self,
        file_path: str,
        lines: Sequence[str],
        notice: str = "",
        error: object = None,
    ) -> bool:
        """Take in freshly loaded lines; False when they belong to another log."""
        if self.active and file_path and file_path != self.source_label():
            return False
        self.loading = False
        self.error = error
        self.notice = notice
        if error is None:
            self.all_lines = list(lines)
            self.filtered = apply_log_filter(self.all_lines, self.filter)
        return True

    def set_filter(self, filter_text: str) -> None:
        """Apply a new grep filter to the loaded lines."""
        self.filter = filter_text
        self.filtered = apply_log_filter(self.all_lines, filter_text)