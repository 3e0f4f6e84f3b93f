#!/usr/bin/env python3
# /// script
# requires-python = ">=3.12"
# dependencies = []
# ///
"""
claw_usage - Tally tool usage from OpenClaw agent session transcripts.

Scans the session JSONL files stored at:
    ~/.openclaw/agents/main/sessions/{session_id}.jsonl

and counts how often each tool is invoked, so idle tools can be pruned from the
agent's inventory and heavy ones kept. Two extraction modes are available:

    exact   - count structured ``toolCall`` / ``tool_use`` blocks by name
    fuzzy   - scan ``exec`` shell commands for mentions of installed claw-* skills
              found under ~/.openclaw/workspace/skills/

Usage:
    uv run claw_usage.py                          # Last 24 hours, exact mode
    uv run claw_usage.py --days=7                 # Last 7 days
    uv run claw_usage.py --date=yesterday         # A single day
    uv run claw_usage.py --all --json             # Everything, as JSON
    uv run claw_usage.py --mode fuzzy -v          # claw-* skills with example commands
"""

from __future__ import annotations

import argparse
import functools
import json
import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta
from pathlib import Path
from textwrap import dedent
from typing import Any, Literal, Protocol

# ============================================================================
# Configuration
# ============================================================================

SCRIPT = Path(__file__)
SCRIPT_NAME = SCRIPT.stem
SCRIPT_DIR = SCRIPT.parent.resolve()

OPENCLAW_HOME = Path.home() / ".openclaw"
SESSIONS_PATH = OPENCLAW_HOME / "agents" / "main" / "sessions"
SKILLS_PATH = OPENCLAW_HOME / "workspace" / "skills"
TOOL_PREFIX = "claw-"

TOOL_CALL_BLOCK_TYPES = frozenset({"toolCall", "tool_use"})
EXEC_TOOL_NAME = "exec"

EXAMPLE_COMMAND_CHARS = 100
MAX_EXAMPLES_PER_TOOL = 3
VERBOSE_EXAMPLE_CHARS = 60

# Report thresholds
LOW_USAGE_MAX_CALLS = 2
HEAVY_USAGE_MIN_CALLS = 10  # fuzzy tier
HEAVY_USAGE_MIN_SHARE = 15.0  # exact mode, percent of all calls

TABLE_WIDTH = 60

Mode = Literal["exact", "fuzzy"]

# Logging setup
log = logging.getLogger(__name__)


# ============================================================================
# Date Resolution
# ============================================================================


def resolve_dates(
    date_token: str | None = None,
    days: int | None = None,
    *,
    all_dates: bool = False,
    today: date | None = None,
) -> list[str]:
    """Resolve a date token or day count into the list of in-scope dates.

    An empty list means "no filter". ``today`` and ``yesterday`` are resolved
    against the current UTC date, matching the UTC timestamps written to the
    transcripts. Any other token is returned verbatim; a malformed date simply
    matches no session.

    Args:
        date_token: ``today``, ``yesterday`` or a literal ``YYYY-MM-DD``. Takes
            precedence over ``days``.
        days: Number of days ending today to include. Values below 1 (and
            ``None``) are treated as 1.
        all_dates: Disable date filtering entirely.
        today: Reference date (injected in tests).

    Returns:
        Dates as ``YYYY-MM-DD`` strings, most recent first.
    """
    if all_dates:
        return []

    if today is None:
        today = datetime.now(UTC).date()

    if date_token:
        if date_token == "today":
            return [today.isoformat()]
        if date_token == "yesterday":
            return [(today - timedelta(days=1)).isoformat()]
        return [date_token]

    count = max(days or 1, 1)
    return [(today - timedelta(days=i)).isoformat() for i in range(count)]


# ============================================================================
# Transcript Records
# ============================================================================


@dataclass(frozen=True)
class ContentBlock:
    """One element of a message's ``content`` array."""

    type: str
    name: str
    arguments: dict[str, Any] = field(default_factory=dict)

    @property
    def is_tool_call(self) -> bool:
        return self.type in TOOL_CALL_BLOCK_TYPES


@dataclass(frozen=True)
class Record:
    """A transcript line that carries a message with structured content."""

    type: str
    timestamp: str | None
    id: str | None
    blocks: tuple[ContentBlock, ...]


def _decode_block(raw: Any) -> ContentBlock | None:
    if not isinstance(raw, dict):
        return None
    block_type = raw.get("type")
    if not isinstance(block_type, str):
        return None

    name = raw.get("name")
    arguments = raw.get("arguments")
    if not isinstance(arguments, dict):
        # Anthropic-style tool_use blocks carry their arguments under "input"
        arguments = raw.get("input")
    return ContentBlock(
        type=block_type,
        name=name if isinstance(name, str) else "",
        arguments=arguments if isinstance(arguments, dict) else {},
    )


def decode_record(line: str) -> Record | None:
    """Decode one JSONL line into a Record.

    Returns ``None`` for anything that is not a ``message`` record with an
    array-valued ``message.content``, including lines that are not valid JSON.
    """
    try:
        obj = json.loads(line)
    except (ValueError, RecursionError):
        return None

    if not isinstance(obj, dict) or obj.get("type") != "message":
        return None
    message = obj.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    if not isinstance(content, list):
        return None

    timestamp = obj.get("timestamp")
    record_id = obj.get("id")
    blocks = tuple(block for block in map(_decode_block, content) if block is not None)
    return Record(
        type="message",
        timestamp=timestamp if isinstance(timestamp, str) else None,
        id=record_id if isinstance(record_id, str) else None,
        blocks=blocks,
    )


def read_session_date(path: Path) -> str | None:
    """Date (``YYYY-MM-DD``) of a session, taken from its first line only.

    A first line that is empty, unparseable or has no string timestamp makes
    the whole session dateless.
    """
    with open(path, encoding="utf-8", errors="replace") as f:
        first_line = f.readline()

    try:
        obj = json.loads(first_line)
    except (ValueError, RecursionError):
        return None

    if not isinstance(obj, dict):
        return None
    timestamp = obj.get("timestamp")
    if not isinstance(timestamp, str) or not timestamp:
        return None
    return timestamp.split("T")[0]


# ============================================================================
# Event Extraction
# ============================================================================


@dataclass(frozen=True)
class ToolEvent:
    """A single tool invocation observed in a session."""

    tool: str
    session_id: str
    timestamp: str | None = None
    record_id: str | None = None
    command: str | None = None


class EventExtractor(Protocol):
    """Strategy turning a decoded record into tool events."""

    mode: Mode

    def known_tools(self) -> list[str]: ...

    def extract(self, record: Record, session_id: str) -> list[ToolEvent]: ...


class ExactToolExtractor:
    """Counts structured tool-call blocks by their declared name."""

    mode: Mode = "exact"

    def known_tools(self) -> list[str]:
        return []

    def extract(self, record: Record, session_id: str) -> list[ToolEvent]:
        return [
            ToolEvent(
                tool=block.name,
                session_id=session_id,
                timestamp=record.timestamp,
                record_id=record.id,
            )
            for block in record.blocks
            if block.is_tool_call and block.name
        ]


def compile_tool_patterns(tool: str) -> tuple[re.Pattern[str], ...]:
    """Build the three alternative patterns that count as a mention of ``tool``.

    1. the name followed by ``/`` or whitespace (``claw-lint/index.js``, ``claw-lint --fix``)
    2. a ``skills/<name>`` path
    3. the name as a whole word anywhere
    """
    escaped = re.escape(tool)
    return (
        re.compile(rf"{escaped}[/\s]", re.IGNORECASE),
        re.compile(rf"skills/{escaped}", re.IGNORECASE),
        re.compile(rf"\b{escaped}\b", re.IGNORECASE),
    )


class CommandMatchExtractor:
    """Infers skill usage from the text of ``exec`` shell commands.

    Any mention of an installed tool counts, including ones in comments or
    arguments, so results lean towards over-counting.
    """

    mode: Mode = "fuzzy"

    def __init__(self, tools: Iterable[str]) -> None:
        self.tools = list(tools)
        self._patterns = {tool: compile_tool_patterns(tool) for tool in self.tools}

    def known_tools(self) -> list[str]:
        return list(self.tools)

    def match_tools(self, command: str) -> list[str]:
        """Installed tools mentioned in ``command``, in installed order."""
        return [
            tool
            for tool, patterns in self._patterns.items()
            if any(pattern.search(command) for pattern in patterns)
        ]

    def extract(self, record: Record, session_id: str) -> list[ToolEvent]:
        events: list[ToolEvent] = []
        for block in record.blocks:
            if not block.is_tool_call or block.name != EXEC_TOOL_NAME:
                continue
            command = block.arguments.get("command")
            if not isinstance(command, str):
                command = ""
            for tool in self.match_tools(command):
                events.append(
                    ToolEvent(
                        tool=tool,
                        session_id=session_id,
                        timestamp=record.timestamp,
                        record_id=record.id,
                        command=command[:EXAMPLE_COMMAND_CHARS],
                    )
                )
        return events


def make_extractor(mode: Mode, tools: Iterable[str] = ()) -> EventExtractor:
    """Select the extraction strategy for ``mode``."""
    if mode == "fuzzy":
        return CommandMatchExtractor(tools)
    return ExactToolExtractor()


def extract_events(line: str, extractor: EventExtractor, session_id: str) -> list[ToolEvent]:
    """Decode one transcript line and apply ``extractor``; malformed lines yield nothing."""
    record = decode_record(line)
    if record is None:
        return []
    return extractor.extract(record, session_id)


# ============================================================================
# Aggregation
# ============================================================================


@dataclass
class UsageAggregate:
    """Accumulated usage counts for one report run."""

    mode: Mode = "exact"
    date_filter: list[str] = field(default_factory=list)
    installed: list[str] = field(default_factory=list)
    counts: dict[str, int] = field(default_factory=dict)
    sessions_by_tool: dict[str, set[str]] = field(default_factory=dict)
    examples: dict[str, list[str]] = field(default_factory=dict)
    session_dates: dict[str, str | None] = field(default_factory=dict)
    session_counts: dict[str, dict[str, int]] = field(default_factory=dict)
    total_calls: int = 0

    @classmethod
    def seeded(
        cls,
        mode: Mode,
        tools: Iterable[str] = (),
        date_filter: Iterable[str] = (),
    ) -> UsageAggregate:
        """Start an aggregate with every known tool present at zero."""
        installed = list(tools)
        return cls(
            mode=mode,
            date_filter=list(date_filter),
            installed=installed,
            counts={tool: 0 for tool in installed},
            examples={tool: [] for tool in installed},
        )

    @property
    def sessions_analyzed(self) -> int:
        return len(self.session_dates)

    def register_session(self, session_id: str, session_date: str | None) -> None:
        self.session_dates[session_id] = session_date
        self.session_counts.setdefault(session_id, {})

    def share(self, tool: str) -> float:
        """Unrounded percentage of all calls that went to ``tool``."""
        if self.total_calls == 0:
            return 0.0
        return self.counts.get(tool, 0) * 100 / self.total_calls

    def percentage(self, tool: str) -> float:
        return round(self.share(tool), 1)

    def used_tools(self) -> list[tuple[str, int]]:
        """Tools with at least one call, busiest first; ties keep discovery order."""
        used = [(tool, count) for tool, count in self.counts.items() if count > 0]
        return sorted(used, key=lambda item: item[1], reverse=True)

    def unused_tools(self) -> list[str]:
        return sorted(tool for tool, count in self.counts.items() if count == 0)

    def merge(self, other: UsageAggregate) -> UsageAggregate:
        """Combine two partial aggregates into a new one."""
        merged = UsageAggregate.seeded(
            self.mode,
            list(dict.fromkeys([*self.installed, *other.installed])),
            self.date_filter,
        )
        for part in (self, other):
            merged.total_calls += part.total_calls
            for tool, count in part.counts.items():
                merged.counts[tool] = merged.counts.get(tool, 0) + count
            for tool, sessions in part.sessions_by_tool.items():
                merged.sessions_by_tool.setdefault(tool, set()).update(sessions)
            for tool, commands in part.examples.items():
                kept = merged.examples.setdefault(tool, [])
                kept.extend(commands[: MAX_EXAMPLES_PER_TOOL - len(kept)])
            for session_id, session_date in part.session_dates.items():
                merged.session_dates.setdefault(session_id, session_date)
            for session_id, tools in part.session_counts.items():
                target = merged.session_counts.setdefault(session_id, {})
                for tool, count in tools.items():
                    target[tool] = target.get(tool, 0) + count
        return merged


def accumulate(agg: UsageAggregate, event: ToolEvent) -> UsageAggregate:
    """Fold step: add one event to the aggregate."""
    agg.total_calls += 1
    agg.counts[event.tool] = agg.counts.get(event.tool, 0) + 1
    agg.sessions_by_tool.setdefault(event.tool, set()).add(event.session_id)

    per_session = agg.session_counts.setdefault(event.session_id, {})
    per_session[event.tool] = per_session.get(event.tool, 0) + 1

    if event.command is not None:
        examples = agg.examples.setdefault(event.tool, [])
        if len(examples) < MAX_EXAMPLES_PER_TOOL:
            examples.append(event.command)
    return agg


def fold_events(events: Iterable[ToolEvent], agg: UsageAggregate) -> UsageAggregate:
    return functools.reduce(accumulate, events, agg)


# ============================================================================
# Transcript Discovery & Analysis
# ============================================================================


def list_session_files(sessions_dir: Path) -> list[Path]:
    """All ``*.jsonl`` transcripts in ``sessions_dir``, sorted by name.

    Raises:
        FileNotFoundError: The directory does not exist.
    """
    if not sessions_dir.is_dir():
        raise FileNotFoundError(f"Sessions directory not found: {sessions_dir}")
    return sorted(path for path in sessions_dir.glob("*.jsonl") if path.is_file())


def list_installed_tools(skills_dir: Path, prefix: str = TOOL_PREFIX) -> list[str]:
    """Names of installed skill directories starting with ``prefix``."""
    if not skills_dir.is_dir():
        log.warning("Skills directory not found: %s", skills_dir)
        return []
    return sorted(
        entry.name for entry in skills_dir.iterdir() if entry.is_dir() and entry.name.startswith(prefix)
    )


def iter_session_events(path: Path, extractor: EventExtractor) -> Iterator[ToolEvent]:
    """Stream tool events from one transcript, line by line."""
    session_id = path.stem
    with open(path, encoding="utf-8", errors="replace") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            yield from extract_events(line, extractor, session_id)


def analyze(
    files: Iterable[Path],
    extractor: EventExtractor,
    target_dates: Iterable[str] = (),
) -> UsageAggregate:
    """Run the extractor over every in-scope transcript and fold the results."""
    date_filter = list(target_dates)
    wanted = set(date_filter)
    agg = UsageAggregate.seeded(extractor.mode, extractor.known_tools(), date_filter)

    for path in files:
        session_date = read_session_date(path)
        if wanted and session_date not in wanted:
            log.debug("Skipping %s (date %s not in filter)", path.name, session_date)
            continue

        agg.register_session(path.stem, session_date)
        before = agg.total_calls
        fold_events(iter_session_events(path, extractor), agg)
        log.debug("Scanned %s: %d tool calls", path.name, agg.total_calls - before)

    return agg


# ============================================================================
# Reporting
# ============================================================================


def build_report(agg: UsageAggregate, include_sessions: bool = False) -> dict[str, Any]:
    """Machine-readable summary of an aggregate."""
    used = agg.used_tools()
    fuzzy = agg.mode == "fuzzy"

    summary: dict[str, Any] = {
        "mode": agg.mode,
        "totalCalls": agg.total_calls,
        "toolsUsed": len(used),
    }
    if fuzzy:
        summary["toolsUnused"] = len(agg.unused_tools())
        summary["totalTools"] = len(agg.installed)
    summary["sessionsAnalyzed"] = agg.sessions_analyzed
    summary["dateRange"] = agg.date_filter or "all"

    used_rows: list[dict[str, Any]] = []
    for name, count in used:
        row: dict[str, Any] = {"name": name, "calls": count}
        if not fuzzy:
            row["sessions"] = len(agg.sessions_by_tool.get(name, ()))
        row["percentage"] = agg.percentage(name)
        used_rows.append(row)

    report: dict[str, Any] = {"summary": summary, "used": used_rows}
    if fuzzy:
        report["unused"] = agg.unused_tools()
    elif include_sessions:
        report["sessions"] = [
            {
                "sessionId": session_id,
                "date": session_date,
                "totalCalls": sum(agg.session_counts.get(session_id, {}).values()),
                "tools": dict(
                    sorted(
                        agg.session_counts.get(session_id, {}).items(),
                        key=lambda item: item[1],
                        reverse=True,
                    )
                ),
            }
            for session_id, session_date in agg.session_dates.items()
        ]
    return report


def _usage_tier(count: int) -> str:
    if count >= HEAVY_USAGE_MIN_CALLS:
        return "🔥"
    if count <= LOW_USAGE_MAX_CALLS:
        return "🔵"
    return "🟢"


def _render_header(agg: UsageAggregate, title: str) -> list[str]:
    lines = [
        "",
        f"📊 {title}",
        "",
        f"Sessions analyzed: {agg.sessions_analyzed}",
        f"Total tool invocations: {agg.total_calls}",
    ]
    if agg.mode == "fuzzy":
        lines.append(f"Tools installed: {len(agg.installed)}")
        lines.append(f"Tools used: {len(agg.used_tools())} | Unused: {len(agg.unused_tools())}")
    else:
        lines.append(f"Distinct tools used: {len(agg.used_tools())}")
    if agg.date_filter:
        lines.append(f"Date filter: {', '.join(agg.date_filter)}")
    return lines


def _render_exact(agg: UsageAggregate, verbose: bool) -> list[str]:
    lines = _render_header(agg, "Tool Usage Analysis")
    used = agg.used_tools()

    if not used:
        lines += ["", "No tool invocations found.", ""]
        return lines

    lines += [
        "",
        "─" * TABLE_WIDTH,
        f"{'Tool':<30} {'Calls':>8} {'Sessions':>10} {'%':>8}",
        "─" * TABLE_WIDTH,
    ]
    for name, count in used:
        sessions = len(agg.sessions_by_tool.get(name, ()))
        lines.append(f"{name:<30} {count:>8} {sessions:>10} {agg.percentage(name):>7.1f}%")
    lines.append("─" * TABLE_WIDTH)

    low = [(name, count) for name, count in used if count <= LOW_USAGE_MAX_CALLS]
    heavy = [name for name, _ in used if agg.share(name) > HEAVY_USAGE_MIN_SHARE]

    if low:
        lines += ["", f"⚠️  LOW USAGE (≤{LOW_USAGE_MAX_CALLS} calls, candidates for removal):"]
        lines += [f"   🔵 {name} ({count})" for name, count in low]
    if heavy:
        lines += ["", f"🔥 HEAVY USAGE (>{HEAVY_USAGE_MIN_SHARE:.0f}% of calls):"]
        lines += [f"   🔥 {name} ({agg.percentage(name):.1f}%)" for name in heavy]

    if verbose:
        lines += ["", "🗂  Per-session breakdown:"]
        for session_id, session_date in agg.session_dates.items():
            tools = agg.session_counts.get(session_id, {})
            lines.append(f"   {session_id} ({session_date or 'undated'}): {sum(tools.values())} calls")
            for name, count in sorted(tools.items(), key=lambda item: item[1], reverse=True):
                lines.append(f"      └─ {name} × {count}")

    lines += ["", "📋 Summary:"]
    lines.append(f"   • Top tools: {', '.join(name for name, _ in used[:3])}")
    if low:
        lines.append(f"   • {len(low)} tools used {LOW_USAGE_MAX_CALLS} times or fewer, review for removal")
    lines.append("")
    return lines


def _render_fuzzy(agg: UsageAggregate, verbose: bool) -> list[str]:
    lines = _render_header(agg, f"{TOOL_PREFIX}* Tool Usage Analysis")
    used = agg.used_tools()
    unused = agg.unused_tools()

    if used:
        lines += [
            "",
            "─" * 50,
            f"{'Tool':<25} {'Calls':>8} {'%':>8}",
            "─" * 50,
        ]
        for name, count in used:
            lines.append(f"{_usage_tier(count)} {name:<23} {count:>8} {agg.percentage(name):>7.1f}%")
            examples = agg.examples.get(name)
            if verbose and examples:
                lines.append(f"   └─ {examples[0][:VERBOSE_EXAMPLE_CHARS]}...")
        lines.append("─" * 50)

    if unused:
        lines += ["", "⚠️  UNUSED TOOLS (0 invocations, consider removing):"]
        lines += [f"   ❌ {name}" for name in unused]

    lines += ["", "📋 Summary:"]
    if unused:
        lines.append(f"   • {len(unused)} tools have ZERO usage, review for removal")
    if used:
        lines.append(f"   • Top tools: {', '.join(name for name, _ in used[:3])}")
    if not agg.installed:
        lines.append("   • No installed tools found, nothing to match")
    lines.append("")
    return lines


def render_text(agg: UsageAggregate, verbose: bool = False) -> str:
    """Human-readable console report."""
    if agg.mode == "fuzzy":
        return "\n".join(_render_fuzzy(agg, verbose))
    return "\n".join(_render_exact(agg, verbose))


# ============================================================================
# CLI Interface
# ============================================================================


def main(
    args: argparse.Namespace,
    sessions_dir: Path | None = None,
    skills_dir: Path | None = None,
    today: date | None = None,
) -> dict[str, Any]:
    """Main entry point. Prints the report and returns it as a dict.

    Args:
        args: Parsed command line arguments.
        sessions_dir: Transcript directory override (used in testing).
        skills_dir: Installed skills directory override (used in testing).
        today: Reference date override (used in testing).
    """
    if sessions_dir is None:
        sessions_dir = Path(args.sessions_dir) if args.sessions_dir else SESSIONS_PATH
    if skills_dir is None:
        skills_dir = Path(args.skills_dir) if args.skills_dir else SKILLS_PATH

    try:
        target_dates = resolve_dates(args.date, args.days, all_dates=args.all, today=today)
        files = list_session_files(sessions_dir)
        log.info("Found %d session file(s) in %s", len(files), sessions_dir)

        tools: list[str] = []
        if args.mode == "fuzzy":
            tools = list_installed_tools(skills_dir, args.prefix)
            log.info("Matching against %d installed tool(s)", len(tools))
            if args.sessions:
                log.warning("--sessions only applies to exact mode, ignoring")

        agg = analyze(files, make_extractor(args.mode, tools), target_dates)
        report = build_report(agg, include_sessions=args.sessions)

        if args.json:
            print(json.dumps(report, indent=2))
        else:
            print(render_text(agg, verbose=args.verbose))
        return report

    except Exception as e:
        log.exception(f"Error: {e}")
        raise SystemExit(1) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=SCRIPT_NAME,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=dedent(f"""\
        {SCRIPT_NAME} - Analyze tool usage from OpenClaw session transcripts.

        Find which tools are actually used and which sit idle, so unused ones
        can be removed to save tokens and reduce complexity.

        INPUTS:
            {SESSIONS_PATH}/*.jsonl
            {SKILLS_PATH}/{TOOL_PREFIX}*/   (fuzzy mode)

        Modes:
            exact   - count toolCall / tool_use blocks by tool name
            fuzzy   - find installed {TOOL_PREFIX}* skills mentioned in exec commands

        Examples:
            uv run {SCRIPT_NAME}.py                      # Last 24 hours (default)
            uv run {SCRIPT_NAME}.py --days=7             # Last 7 days
            uv run {SCRIPT_NAME}.py --all                # All time
            uv run {SCRIPT_NAME}.py --json --sessions    # JSON with per-session detail
            uv run {SCRIPT_NAME}.py --mode fuzzy -v      # Skills with example commands
        """),
    )

    parser.add_argument("--date", help="Filter by date (YYYY-MM-DD, today, yesterday); wins over --days")
    parser.add_argument("--days", type=int, help="Analyze the last N days (default: 1)")
    parser.add_argument("--all", action="store_true", help="Analyze every session, ignoring --date and --days")

    parser.add_argument(
        "--mode",
        choices=["exact", "fuzzy"],
        default="exact",
        help="Extraction strategy (default: exact)",
    )
    parser.add_argument("--json", action="store_true", help="Output JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show per-session detail or example commands")
    parser.add_argument("--sessions", action="store_true", help="Include per-session detail in JSON (exact mode)")
    parser.add_argument("--sessions-dir", help=f"Transcript directory (default: {SESSIONS_PATH})")
    parser.add_argument("--skills-dir", help=f"Installed skills directory (default: {SKILLS_PATH})")
    parser.add_argument("--prefix", default=TOOL_PREFIX, help=f"Skill directory prefix (default: {TOOL_PREFIX})")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Show only errors")
    return parser


def cli(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.ERROR if args.quiet else logging.INFO,
        format="%(asctime)s|%(name)s|%(levelname)s|%(filename)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    main(args)


if __name__ == "__main__":  # pragma: no cover
    cli()
