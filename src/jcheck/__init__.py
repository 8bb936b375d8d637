"""
Single-pass JSON syntax validation for byte strings.

Decides whether a byte sequence is a conformant RFC 8259 JSON document
without building any Python values. A byte scanner splits the input into
tokens, lexical checkers verify numbers, strings and literals, and a
depth-bounded pushdown automaton enforces nesting and separator placement.
"""

import logging
import os
import threading
import time
from dataclasses import dataclass
from dataclasses import replace
from enum import Enum
from typing import IO
from typing import Any
from typing import Final
from typing import TypeAlias

from jcheck._utf8_mapper import UTF8PositionMapper

__version__ = "0.1.0"

Position: TypeAlias = int
# Buffers the scanner reads in place
Buffer: TypeAlias = bytes | bytearray
# Bytes-like inputs accepted by the public entry points
Document: TypeAlias = bytes | bytearray | memoryview

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "JCHECK_PROFILE" in os.environ

DEFAULT_MAX_DEPTH: Final = 1024

# Byte constants for the scanner
_QUOTE: Final = ord('"')
_BACKSLASH: Final = ord("\\")
_MINUS: Final = ord("-")
_DOT: Final = ord(".")
_ZERO: Final = ord("0")
_LOWER_U: Final = ord("u")
_CONTROL_LIMIT: Final = 0x20
_ASCII_LIMIT: Final = 0x7F
_UTF8_BOM: Final = b"\xef\xbb\xbf"

_WHITESPACE: Final = frozenset(b" \t\n\r")
_DIGITS: Final = frozenset(b"0123456789")
_HEX_DIGITS: Final = frozenset(b"0123456789abcdefABCDEF")
_EXPONENT_MARKERS: Final = frozenset(b"eE")
_SIGNS: Final = frozenset(b"+-")
_SIMPLE_ESCAPES: Final = frozenset(b'"\\/bfnrt')
_LITERALS: Final = (b"true", b"false", b"null")
_LITERAL_STARTS: Final = frozenset(literal[0] for literal in _LITERALS)


def _build_utf8_table() -> dict[int, tuple[tuple[int, int], ...]]:
    """
    Maps each valid UTF-8 lead byte to the allowed ranges of its trailing
    bytes, following the well-formed byte sequence table of RFC 3629.
    """
    tail = (0x80, 0xBF)
    table: dict[int, tuple[tuple[int, int], ...]] = {}
    for lead in range(0xC2, 0xE0):
        table[lead] = (tail,)
    for lead in range(0xE1, 0xF0):
        table[lead] = (tail, tail)
    # Overlong three-byte forms and encoded surrogates
    table[0xE0] = ((0xA0, 0xBF), tail)
    table[0xED] = ((0x80, 0x9F), tail)
    for lead in range(0xF1, 0xF4):
        table[lead] = (tail, tail, tail)
    table[0xF0] = ((0x90, 0xBF), tail, tail)
    table[0xF4] = ((0x80, 0x8F), tail, tail)
    return table


_UTF8_TRAILING_RANGES: Final = _build_utf8_table()


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during validation."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    bytes_processed: int = 0

    def record_call(self, duration_ns: int, nbytes: int = 0) -> None:
        """Records a function call with timing and byte count."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.bytes_processed += nbytes


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}
    # Shared across threads, guarded by _hot_path_lock
    _hot_path_lock = threading.Lock()

    class ProfileContext:
        """
        Context manager for profiling hot paths.

        Records into a process-wide table, so concurrent validations in
        different threads accumulate into the same HotPathStats.
        """

        def __init__(self, func_name: str, nbytes: int = 0):
            self.func_name = func_name
            self.nbytes = nbytes
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            with _hot_path_lock:
                stats = _hot_path_stats.get(self.func_name)
                if stats is None:
                    stats = HotPathStats(self.func_name)
                    _hot_path_stats[self.func_name] = stats
                stats.record_call(duration, self.nbytes)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns a snapshot of current profiling statistics."""
        with _hot_path_lock:
            return {
                name: replace(stats) for name, stats in _hot_path_stats.items()
            }

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        with _hot_path_lock:
            _hot_path_stats.clear()

else:

    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, nbytes: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


class RejectReason(Enum):
    """Categories of grammar violations, for diagnostics only."""

    EMPTY_INPUT = "empty_input"
    UNEXPECTED_CHARACTER = "unexpected_character"
    BYTE_ORDER_MARK = "byte_order_mark"
    INVALID_LITERAL = "invalid_literal"
    MALFORMED_NUMBER = "malformed_number"
    UNTERMINATED_STRING = "unterminated_string"
    INVALID_ESCAPE = "invalid_escape"
    CONTROL_CHARACTER = "control_character"
    MALFORMED_UTF8 = "malformed_utf8"
    UNEXPECTED_TOKEN = "unexpected_token"
    MISMATCHED_CLOSE = "mismatched_close"
    TRAILING_COMMA = "trailing_comma"
    DEPTH_EXCEEDED = "depth_exceeded"
    TRAILING_DATA = "trailing_data"
    UNEXPECTED_END = "unexpected_end"


class ValidationError(ValueError):
    """
    Reports the first grammar violation found in a document.

    Holds the byte offset of the violation, the line and column it falls on
    (columns counted in characters, not bytes) and a RejectReason so callers
    can tell a malformed number from a depth-limit rejection.
    """

    def __init__(
        self,
        msg: str,
        doc: Buffer = b"",
        pos: Position = 0,
        reason: RejectReason = RejectReason.UNEXPECTED_TOKEN,
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.reason = reason

        if doc:
            mapper = UTF8PositionMapper(doc)
            line_start = doc.rfind(b"\n", 0, pos) + 1
            self.lineno = doc.count(b"\n", 0, pos) + 1
            self.char_pos = mapper.byte_to_char(pos)
            self.colno = self.char_pos - mapper.byte_to_char(line_start) + 1
        else:
            self.lineno = 1
            self.char_pos = pos
            self.colno = pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")


@dataclass(frozen=True)
class ValidatorConfig:
    """
    Immutable validation settings.

    max_depth bounds the nesting stack: a document opening more containers
    than this is rejected as soon as the limit is crossed.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.max_depth, int) or isinstance(
            self.max_depth, bool
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")


class TokenKind(Enum):
    """Kinds of tokens produced by the byte scanner."""

    BEGIN_OBJECT = "{"
    END_OBJECT = "}"
    BEGIN_ARRAY = "["
    END_ARRAY = "]"
    COMMA = ","
    COLON = ":"
    STRING = "string"
    NUMBER = "number"
    LITERAL = "literal"


_STRUCTURAL_TOKENS: Final = {
    ord(kind.value): kind
    for kind in (
        TokenKind.BEGIN_OBJECT,
        TokenKind.END_OBJECT,
        TokenKind.BEGIN_ARRAY,
        TokenKind.END_ARRAY,
        TokenKind.COMMA,
        TokenKind.COLON,
    )
}
_SCALAR_TOKENS: Final = frozenset(
    {TokenKind.STRING, TokenKind.NUMBER, TokenKind.LITERAL}
)


@dataclass(frozen=True)
class Token:
    """A token's kind and its byte span in the document."""

    kind: TokenKind
    start: Position
    end: Position


def _skip_digits(data: Buffer, pos: Position) -> Position:
    length = len(data)
    while pos < length and data[pos] in _DIGITS:
        pos += 1
    return pos


def _is_digit_at(data: Buffer, pos: Position) -> bool:
    return pos < len(data) and data[pos] in _DIGITS


def _scan_integer_part(
    data: Buffer, pos: Position, start: Position
) -> Position:
    """Scans the integer part of a number, rejecting leading zeros."""
    if not _is_digit_at(data, pos):
        raise ValidationError(
            "Invalid number", data, start, RejectReason.MALFORMED_NUMBER
        )
    if data[pos] == _ZERO:
        if _is_digit_at(data, pos + 1):
            raise ValidationError(
                "Leading zeros not allowed",
                data,
                start,
                RejectReason.MALFORMED_NUMBER,
            )
        return pos + 1
    return _skip_digits(data, pos)


def _scan_fraction_part(
    data: Buffer, pos: Position, start: Position
) -> Position:
    """Scans the fraction part of a number if present."""
    if pos >= len(data) or data[pos] != _DOT:
        return pos
    if not _is_digit_at(data, pos + 1):
        raise ValidationError(
            "Invalid decimal number",
            data,
            start,
            RejectReason.MALFORMED_NUMBER,
        )
    return _skip_digits(data, pos + 1)


def _scan_exponent_part(
    data: Buffer, pos: Position, start: Position
) -> Position:
    """Scans the exponent part of a number if present."""
    if pos >= len(data) or data[pos] not in _EXPONENT_MARKERS:
        return pos
    pos += 1
    if pos < len(data) and data[pos] in _SIGNS:
        pos += 1
    if not _is_digit_at(data, pos):
        raise ValidationError(
            "Invalid exponent", data, start, RejectReason.MALFORMED_NUMBER
        )
    return _skip_digits(data, pos)


def validate_number(data: Buffer, pos: Position) -> Position:
    """
    Checks the number starting at pos and returns its end offset.

    Consumes the longest prefix matching
    ``-?(0|[1-9][0-9]*)(\\.[0-9]+)?([eE][+-]?[0-9]+)?`` and leaves whatever
    follows for the structural layer. Digit runs and exponents of any
    length are accepted; the value itself is never computed.
    """
    start = pos
    if pos < len(data) and data[pos] == _MINUS:
        pos += 1
    pos = _scan_integer_part(data, pos, start)
    pos = _scan_fraction_part(data, pos, start)
    return _scan_exponent_part(data, pos, start)


def _check_escape(data: Buffer, pos: Position, end: Position) -> Position:
    """Checks the escape sequence at pos and returns the offset after it."""
    if pos + 1 >= end:
        raise ValidationError(
            "Unterminated string", data, pos, RejectReason.UNTERMINATED_STRING
        )
    escaped = data[pos + 1]
    if escaped in _SIMPLE_ESCAPES:
        return pos + 2
    if escaped == _LOWER_U:
        # Surrogate halves are accepted unpaired.
        if pos + 6 > end or not all(
            digit in _HEX_DIGITS for digit in data[pos + 2 : pos + 6]
        ):
            raise ValidationError(
                "Invalid \\uXXXX escape",
                data,
                pos,
                RejectReason.INVALID_ESCAPE,
            )
        return pos + 6
    raise ValidationError(
        "Invalid \\escape", data, pos, RejectReason.INVALID_ESCAPE
    )


def _check_utf8_sequence(
    data: Buffer, pos: Position, end: Position
) -> Position:
    """Checks the multi-byte UTF-8 sequence at pos, returns its end."""
    trailing = _UTF8_TRAILING_RANGES.get(data[pos])
    if trailing is None or pos + len(trailing) >= end:
        raise ValidationError(
            "Invalid UTF-8 sequence", data, pos, RejectReason.MALFORMED_UTF8
        )
    for offset, (low, high) in enumerate(trailing, start=1):
        if not low <= data[pos + offset] <= high:
            raise ValidationError(
                "Invalid UTF-8 sequence",
                data,
                pos,
                RejectReason.MALFORMED_UTF8,
            )
    return pos + len(trailing) + 1


def validate_string_body(data: Buffer, start: Position, end: Position) -> None:
    """
    Validates the bytes strictly between a string's quotes.

    Rejects raw control characters, unknown escapes, short or non-hex
    ``\\u`` escapes and ill-formed UTF-8. The caller has already located
    the closing quote, so the range never ends inside an escape.
    """
    pos = start
    while pos < end:
        byte = data[pos]
        if byte == _BACKSLASH:
            pos = _check_escape(data, pos, end)
        elif byte < _CONTROL_LIMIT:
            raise ValidationError(
                "Invalid control character",
                data,
                pos,
                RejectReason.CONTROL_CHARACTER,
            )
        elif byte > _ASCII_LIMIT:
            pos = _check_utf8_sequence(data, pos, end)
        else:
            pos += 1


def validate_literal(data: Buffer, pos: Position) -> Position:
    """Checks for true, false or null at pos and returns the end offset."""
    for literal in _LITERALS:
        if data.startswith(literal, pos):
            return pos + len(literal)
    raise ValidationError(
        "Invalid literal", data, pos, RejectReason.INVALID_LITERAL
    )


class ByteScanner:
    """
    Splits a byte document into tokens.

    Skips JSON whitespace between tokens and hands numbers, strings and
    literals to the lexical checkers, which decide where each token ends.
    """

    def __init__(self, data: Buffer):
        self.data = data
        self.pos = 0
        self.length = len(data)

    def skip_whitespace(self) -> None:
        """Skips space, tab, line feed and carriage return."""
        with ProfileContext("skip_whitespace"):
            data = self.data
            while self.pos < self.length and data[self.pos] in _WHITESPACE:
                self.pos += 1

    def scan_string(self) -> Token:
        """Scans a string token including both quotes."""
        start = self.pos
        with ProfileContext("scan_string"):
            pos = start + 1
            escaped = False
            while pos < self.length:
                byte = self.data[pos]
                if escaped:
                    escaped = False
                elif byte == _BACKSLASH:
                    escaped = True
                elif byte == _QUOTE:
                    validate_string_body(self.data, start + 1, pos)
                    self.pos = pos + 1
                    return Token(TokenKind.STRING, start, self.pos)
                pos += 1

            raise ValidationError(
                "Unterminated string starting at",
                self.data,
                start,
                RejectReason.UNTERMINATED_STRING,
            )

    def scan_number(self) -> Token:
        """Scans a number token."""
        start = self.pos
        with ProfileContext("scan_number"):
            self.pos = validate_number(self.data, start)
            return Token(TokenKind.NUMBER, start, self.pos)

    def scan_literal(self) -> Token:
        """Scans literal tokens: true, false, null."""
        start = self.pos
        with ProfileContext("scan_literal"):
            self.pos = validate_literal(self.data, start)
            return Token(TokenKind.LITERAL, start, self.pos)

    def next_token(self) -> Token | None:
        """Returns the next token or None at end of input."""
        self.skip_whitespace()

        if self.pos >= self.length:
            return None

        byte = self.data[self.pos]
        start = self.pos

        kind = _STRUCTURAL_TOKENS.get(byte)
        if kind is not None:
            self.pos += 1
            return Token(kind, start, self.pos)
        elif byte == _QUOTE:
            return self.scan_string()
        elif byte == _MINUS or byte in _DIGITS:
            return self.scan_number()
        elif byte in _LITERAL_STARTS:
            return self.scan_literal()
        else:
            raise ValidationError(
                f"Unexpected byte 0x{byte:02x}",
                self.data,
                start,
                RejectReason.UNEXPECTED_CHARACTER,
            )


class Container(Enum):
    """Kinds of open containers on the nesting stack."""

    ARRAY = "array"
    OBJECT = "object"


class ParseState(Enum):
    """
    States of the structural automaton.

    ARRAY_START and OBJECT_START follow an opener and are the only states
    from which an empty container may close; ARRAY_VALUE and OBJECT_KEY
    follow a comma.
    """

    TOP_VALUE = "top_value"
    ARRAY_START = "array_start"
    ARRAY_VALUE = "array_value"
    ARRAY_COMMA = "array_comma"
    OBJECT_START = "object_start"
    OBJECT_KEY = "object_key"
    OBJECT_COLON = "object_colon"
    OBJECT_VALUE = "object_value"
    OBJECT_COMMA = "object_comma"
    DONE = "done"


_VALUE_STATES: Final = frozenset(
    {
        ParseState.TOP_VALUE,
        ParseState.ARRAY_START,
        ParseState.ARRAY_VALUE,
        ParseState.OBJECT_VALUE,
    }
)

_EXPECTING_KEY: Final = "Expecting property name enclosed in double quotes"

_EXPECTATIONS: Final = {
    ParseState.TOP_VALUE: "Expecting value",
    ParseState.ARRAY_START: "Expecting value",
    ParseState.ARRAY_VALUE: "Expecting value",
    ParseState.OBJECT_VALUE: "Expecting value",
    ParseState.OBJECT_START: _EXPECTING_KEY,
    ParseState.OBJECT_KEY: _EXPECTING_KEY,
    ParseState.OBJECT_COLON: "Expecting ':' delimiter",
    ParseState.ARRAY_COMMA: "Expecting ',' delimiter",
    ParseState.OBJECT_COMMA: "Expecting ',' delimiter",
}

_CLOSERS: Final = {
    TokenKind.END_ARRAY: Container.ARRAY,
    TokenKind.END_OBJECT: Container.OBJECT,
}


class StructuralValidator:
    """
    Pushdown automaton over the token stream.

    The stack holds one Container per open bracket and is the only state
    that grows with the document; its height never exceeds max_depth.
    """

    def __init__(self, data: Buffer, max_depth: int = DEFAULT_MAX_DEPTH):
        self.data = data
        self.max_depth = max_depth
        self.state = ParseState.TOP_VALUE
        self._stack: list[Container] = []

    @property
    def depth(self) -> int:
        """Number of containers currently open."""
        return len(self._stack)

    def _reject(
        self, msg: str, pos: Position, reason: RejectReason
    ) -> ValidationError:
        return ValidationError(msg, self.data, pos, reason)

    def _value_complete(self) -> None:
        if not self._stack:
            self.state = ParseState.DONE
        elif self._stack[-1] is Container.ARRAY:
            self.state = ParseState.ARRAY_COMMA
        else:
            self.state = ParseState.OBJECT_COMMA

    def _open(self, container: Container, token: Token) -> None:
        if len(self._stack) >= self.max_depth:
            raise self._reject(
                f"Maximum nesting depth of {self.max_depth} exceeded",
                token.start,
                RejectReason.DEPTH_EXCEEDED,
            )
        self._stack.append(container)
        if container is Container.ARRAY:
            self.state = ParseState.ARRAY_START
        else:
            self.state = ParseState.OBJECT_START

    def _close(self, token: Token) -> None:
        if not self._stack or self._stack[-1] is not _CLOSERS[token.kind]:
            raise self._reject(
                "Mismatched closing delimiter",
                token.start,
                RejectReason.MISMATCHED_CLOSE,
            )
        self._stack.pop()
        self._value_complete()

    def _accept_value(self, token: Token) -> None:
        kind = token.kind
        if kind in _SCALAR_TOKENS:
            self._value_complete()
        elif kind is TokenKind.BEGIN_ARRAY:
            self._open(Container.ARRAY, token)
        elif kind is TokenKind.BEGIN_OBJECT:
            self._open(Container.OBJECT, token)
        elif kind in _CLOSERS and self.state is ParseState.ARRAY_START:
            self._close(token)
        elif (
            kind is TokenKind.END_ARRAY and self.state is ParseState.ARRAY_VALUE
        ):
            raise self._reject(
                "Illegal trailing comma before end of array",
                token.start,
                RejectReason.TRAILING_COMMA,
            )
        else:
            raise self._reject(
                "Expecting value", token.start, RejectReason.UNEXPECTED_TOKEN
            )

    def _accept_key(self, token: Token) -> None:
        kind = token.kind
        if kind is TokenKind.STRING:
            self.state = ParseState.OBJECT_COLON
        elif kind in _CLOSERS and self.state is ParseState.OBJECT_START:
            self._close(token)
        elif kind is TokenKind.END_OBJECT:
            raise self._reject(
                "Illegal trailing comma before end of object",
                token.start,
                RejectReason.TRAILING_COMMA,
            )
        else:
            raise self._reject(
                _EXPECTATIONS[self.state],
                token.start,
                RejectReason.UNEXPECTED_TOKEN,
            )

    def feed(self, token: Token) -> None:
        """Advances the automaton by one token, raising on a violation."""
        state = self.state
        kind = token.kind

        if state is ParseState.DONE:
            raise self._reject(
                "Extra data", token.start, RejectReason.TRAILING_DATA
            )
        elif state in _VALUE_STATES:
            self._accept_value(token)
        elif state in (ParseState.OBJECT_START, ParseState.OBJECT_KEY):
            self._accept_key(token)
        elif state is ParseState.OBJECT_COLON and kind is TokenKind.COLON:
            self.state = ParseState.OBJECT_VALUE
        elif state is ParseState.ARRAY_COMMA and kind is TokenKind.COMMA:
            self.state = ParseState.ARRAY_VALUE
        elif state is ParseState.OBJECT_COMMA and kind is TokenKind.COMMA:
            self.state = ParseState.OBJECT_KEY
        elif state is not ParseState.OBJECT_COLON and kind in _CLOSERS:
            self._close(token)
        else:
            raise self._reject(
                _EXPECTATIONS[state], token.start, RejectReason.UNEXPECTED_TOKEN
            )

    def finish(self) -> None:
        """Checks that exactly one complete value was seen."""
        if self.state is ParseState.DONE:
            return
        reason = (
            RejectReason.EMPTY_INPUT
            if self.state is ParseState.TOP_VALUE
            else RejectReason.UNEXPECTED_END
        )
        raise self._reject(_EXPECTATIONS[self.state], len(self.data), reason)


def _coerce_document(data: Document) -> Buffer:
    """
    Returns data in a form the scanner can read without copying.

    bytes and bytearray are used in place. A memoryview has no search
    methods, so its contents are copied once.
    """
    if isinstance(data, bytes | bytearray):
        return data
    if isinstance(data, memoryview):
        return data.tobytes()
    raise TypeError(
        f"the JSON document must be bytes, not {type(data).__name__}"
    )


def _validate_document(data: Buffer, config: ValidatorConfig) -> None:
    """Runs the scanner and automaton over data in a single pass."""
    with ProfileContext("validate_document", len(data)):
        if data.startswith(_UTF8_BOM):
            raise ValidationError(
                "JSON input should not contain BOM (Byte Order Mark)",
                data,
                0,
                RejectReason.BYTE_ORDER_MARK,
            )

        scanner = ByteScanner(data)
        automaton = StructuralValidator(data, config.max_depth)
        token = scanner.next_token()
        while token is not None:
            automaton.feed(token)
            token = scanner.next_token()
        automaton.finish()


def check(data: Document, **kwargs: Any) -> None:
    """
    Validates a JSON document, raising ValidationError on the first
    violation.

    Keyword arguments are passed to ValidatorConfig.
    """
    document = _coerce_document(data)
    config = ValidatorConfig(**kwargs)
    try:
        _validate_document(document, config)
    except ValidationError as exc:
        if exc.reason is RejectReason.DEPTH_EXCEEDED:
            logger.warning("Rejected document: %s", exc)
        else:
            logger.debug("Rejected document (%s): %s", exc.reason.value, exc)
        raise


def validate(data: Document, **kwargs: Any) -> bool:
    """
    Returns True iff data is a conformant JSON document.

    Malformed input yields False rather than an exception; only a
    non-bytes argument or an invalid configuration raises.
    """
    try:
        check(data, **kwargs)
    except ValidationError:
        return False
    return True


def validate_stream(fp: IO[bytes], **kwargs: Any) -> bool:
    """
    Reads a binary file-like object to the end and validates its content.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return validate(fp.read(), **kwargs)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ByteScanner",
    "Container",
    "HotPathStats",
    "ParseState",
    "RejectReason",
    "StructuralValidator",
    "Token",
    "TokenKind",
    "ValidationError",
    "ValidatorConfig",
    "check",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "validate",
    "validate_literal",
    "validate_number",
    "validate_stream",
    "validate_string_body",
]
