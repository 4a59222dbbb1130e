"""Decoder for the textual agent notes.

Each agent is described by a six-line block; blocks are separated by
blank lines::

    Monkey 0:
      Starting items: 79, 98
      Operation: new = old * 19
      Test: divisible by 23
        If true: throw to monkey 2
        If false: throw to monkey 3
"""

from __future__ import annotations

import re
from pathlib import Path

from monkey_business.domain.agent import AgentRecord, Population
from monkey_business.domain.errors import (
    ArithmeticOverflowError,
    InvalidPopulationError,
    NotesParseError,
)
from monkey_business.domain.operation import (
    OPERATORS,
    Constant,
    CurrentValue,
    Expression,
    check_range,
)
from monkey_business.domain.routing import RoutingTest

_INT = r"-?\d+"
_HEADER_RE = re.compile(r"^Monkey (\d+):$")
_ITEMS_RE = re.compile(rf"^  Starting items:(?: ({_INT}(?:, {_INT})*))?$")
_OPERATION_RE = re.compile(rf"^  Operation: new = (old|{_INT}) ([+*]) (old|{_INT})$")
_DIVISOR_RE = re.compile(rf"^  Test: divisible by ({_INT})$")
_PASS_RE = re.compile(r"^    If true: throw to monkey (\d+)$")
_FAIL_RE = re.compile(r"^    If false: throw to monkey (\d+)$")

_BLOCK_LINES = 6


def parse_expression(token: str) -> Expression:
    """Parse ``old`` or an integer literal."""
    if token == "old":
        return CurrentValue()
    try:
        return Constant(int(token))
    except ValueError as exc:
        raise NotesParseError(f"invalid operand {token!r}") from exc
    except ArithmeticOverflowError as exc:
        raise NotesParseError(str(exc)) from exc


def _match(pattern: re.Pattern[str], line: str, line_number: int, what: str) -> re.Match[str]:
    match = pattern.match(line)
    if match is None:
        raise NotesParseError(f"expected {what}, got {line!r}", line_number)
    return match


def _parse_block(lines: list[str], first_line: int, expected_index: int) -> AgentRecord:
    if len(lines) != _BLOCK_LINES:
        raise NotesParseError(
            f"agent block must have {_BLOCK_LINES} lines, got {len(lines)}", first_line
        )
    header = _match(_HEADER_RE, lines[0], first_line, "'Monkey <n>:' header")
    if int(header.group(1)) != expected_index:
        raise NotesParseError(
            f"agent header index {header.group(1)} does not match position {expected_index}",
            first_line,
        )
    items_match = _match(_ITEMS_RE, lines[1], first_line + 1, "starting items")
    raw_items = items_match.group(1)
    items: tuple[int, ...] = ()
    if raw_items:
        try:
            items = tuple(check_range(int(v), "starting item") for v in raw_items.split(", "))
        except ArithmeticOverflowError as exc:
            raise NotesParseError(str(exc), first_line + 1) from exc

    op_match = _match(_OPERATION_RE, lines[2], first_line + 2, "operation")
    lhs, symbol, rhs = op_match.groups()
    try:
        operation = OPERATORS[symbol](parse_expression(lhs), parse_expression(rhs))
    except NotesParseError as exc:
        raise NotesParseError(str(exc), first_line + 2) from exc

    divisor = int(_match(_DIVISOR_RE, lines[3], first_line + 3, "divisibility test").group(1))
    pass_target = int(_match(_PASS_RE, lines[4], first_line + 4, "true branch").group(1))
    fail_target = int(_match(_FAIL_RE, lines[5], first_line + 5, "false branch").group(1))
    try:
        test = RoutingTest(divisor=divisor, pass_target=pass_target, fail_target=fail_target)
    except InvalidPopulationError as exc:
        raise NotesParseError(str(exc), first_line + 3) from exc

    return AgentRecord(items=items, operation=operation, test=test)


def parse_notes(text: str) -> list[AgentRecord]:
    """Decode all agent blocks in file order."""
    records: list[AgentRecord] = []
    block: list[str] = []
    block_start = 1
    for line_number, line in enumerate(text.splitlines(), start=1):
        if line.strip():
            if not block:
                block_start = line_number
            block.append(line.rstrip())
            continue
        if block:
            records.append(_parse_block(block, block_start, len(records)))
            block = []
    if block:
        records.append(_parse_block(block, block_start, len(records)))
    if not records:
        raise NotesParseError("no agent definitions found")
    return records


def load_population(path: Path) -> Population:
    """Read agent notes from *path* and build a validated population."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise NotesParseError(f"notes file is not valid UTF-8: {path}: {exc}") from exc
    return Population.from_records(parse_notes(text))
