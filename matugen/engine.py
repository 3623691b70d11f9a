"""A small text template engine with configurable delimiters and filters.

Expressions look like ``{{ path.to.value | filter: arg, arg }}``. Blocks use
the block delimiters (``<*`` and ``*>`` by default) and support
``if`` / ``else if`` / ``else`` / ``endif``, ``for x in xs`` /
``for k, v in map`` / ``endfor``, ``with expr as name`` / ``endwith`` and
``include "name"``. A ``-`` just inside a delimiter trims neighbouring
whitespace.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

_MAX_INCLUDE_DEPTH = 64

_TOKEN_RE = re.compile(
    r"""\s*(?:
        (?P<string>"(?:[^"\\]|\\.)*")
      | (?P<number>-?\d+(?:\.\d+)?(?:[eE][-+]?\d+)?)
      | (?P<path>[A-Za-z_]\w*(?:\.\w+)*)
      | (?P<punct>[|:,])
    )""",
    re.VERBOSE,
)
_FOR_RE = re.compile(r"^for\s+([A-Za-z_]\w*)(?:\s*,\s*([A-Za-z_]\w*))?\s+in\s+(.+)$", re.S)
_WITH_RE = re.compile(r"^with\s+(.+?)\s+as\s+([A-Za-z_]\w*)$", re.S)
_INCLUDE_RE = re.compile(r'^include\s+"((?:[^"\\]|\\.)*)"$', re.S)


class TemplateError(Exception):
    """A template failed to compile or to render."""


@dataclass(frozen=True)
class Syntax:
    """The delimiters that open and close expressions and blocks."""

    expr_start: str = "{{"
    expr_end: str = "}}"
    block_start: str = "<*"
    block_end: str = "*>"


@dataclass(frozen=True)
class _Literal:
    value: Any


@dataclass(frozen=True)
class _Path:
    parts: tuple[str, ...]


@dataclass(frozen=True)
class _Expr:
    operand: _Literal | _Path
    filters: tuple[tuple[str, tuple[_Literal | _Path, ...]], ...]
    negate: bool
    line: int


@dataclass(frozen=True)
class _Text:
    text: str


@dataclass(frozen=True)
class _Emit:
    expr: _Expr


@dataclass(frozen=True)
class _If:
    branches: tuple[tuple[_Expr, tuple], ...]
    otherwise: tuple


@dataclass(frozen=True)
class _For:
    names: tuple[str, ...]
    iterable: _Expr
    body: tuple


@dataclass(frozen=True)
class _With:
    expr: _Expr
    name: str
    body: tuple


@dataclass(frozen=True)
class _Include:
    name: str
    line: int


def _lex(source: str, syntax: Syntax) -> list[tuple[str, str, int]]:
    """Split source into ``(kind, content, line)`` segments."""
    delimiters = (
        ("expr", syntax.expr_start, syntax.expr_end),
        ("block", syntax.block_start, syntax.block_end),
    )
    segments: list[tuple[str, str, int]] = []
    pos = 0
    trim_next = False
    while True:
        found = [
            (source.find(start, pos), kind, start, end)
            for kind, start, end in delimiters
            if source.find(start, pos) != -1
        ]
        if not found:
            text = source[pos:]
            if trim_next:
                text = text.lstrip()
            if text:
                segments.append(("text", text, 0))
            return segments
        index, kind, start, end = min(found, key=lambda c: (c[0], -len(c[2])))
        line = source.count("\n", 0, index) + 1
        text = source[pos:index]
        if trim_next:
            text = text.lstrip()
        inner_start = index + len(start)
        if source.startswith("-", inner_start):
            text = text.rstrip()
            inner_start += 1
        if text:
            segments.append(("text", text, 0))
        close = source.find(end, inner_start)
        if close == -1:
            raise TemplateError(f"unclosed tag `{start}` on line {line}")
        inner = source[inner_start:close]
        trim_next = inner.endswith("-")
        if trim_next:
            inner = inner[:-1]
        segments.append((kind, inner.strip(), line))
        pos = close + len(end)


def _tokenize(text: str, line: int) -> list[tuple[str, str]]:
    tokens: list[tuple[str, str]] = []
    pos = 0
    while pos < len(text):
        if not text[pos:].strip():
            break
        match = _TOKEN_RE.match(text, pos)
        if match is None or match.end() == pos:
            raise TemplateError(f"unexpected character in `{text}` on line {line}")
        kind = match.lastgroup
        assert kind is not None
        tokens.append((kind, match.group(kind)))
        pos = match.end()
    return tokens


def _parse_operand(
    tokens: list[tuple[str, str]], pos: int, text: str, line: int
) -> tuple[_Literal | _Path, int]:
    if pos >= len(tokens):
        raise TemplateError(f"expected a value in `{text}` on line {line}")
    kind, value = tokens[pos]
    match kind:
        case "string":
            return _Literal(json.loads(value)), pos + 1
        case "number":
            number = float(value) if any(c in value for c in ".eE") else int(value)
            return _Literal(number), pos + 1
        case "path":
            if value in ("true", "false"):
                return _Literal(value == "true"), pos + 1
            return _Path(tuple(value.split("."))), pos + 1
    raise TemplateError(f"unexpected `{value}` in `{text}` on line {line}")


def _parse_expr(text: str, line: int) -> _Expr:
    tokens = _tokenize(text, line)
    pos = 0
    negate = bool(tokens) and tokens[0] == ("path", "not")
    if negate:
        pos = 1
    operand, pos = _parse_operand(tokens, pos, text, line)
    filters = []
    while pos < len(tokens):
        if tokens[pos] != ("punct", "|"):
            raise TemplateError(f"expected `|` in `{text}` on line {line}")
        pos += 1
        if pos >= len(tokens) or tokens[pos][0] != "path":
            raise TemplateError(f"expected a filter name in `{text}` on line {line}")
        name = tokens[pos][1]
        pos += 1
        args = []
        if pos < len(tokens) and tokens[pos] == ("punct", ":"):
            arg, pos = _parse_operand(tokens, pos + 1, text, line)
            args.append(arg)
            while pos < len(tokens) and tokens[pos] == ("punct", ","):
                arg, pos = _parse_operand(tokens, pos + 1, text, line)
                args.append(arg)
        filters.append((name, tuple(args)))
    return _Expr(operand, tuple(filters), negate, line)


def _keyword(content: str) -> str:
    words = content.split()
    if not words:
        return ""
    if words[0] == "else" and len(words) > 1 and words[1] == "if":
        return "elif"
    return words[0]


class _Builder:
    """Turns lexed segments into a tree of nodes."""

    def __init__(self, segments: list[tuple[str, str, int]]) -> None:
        self._segments = iter(segments)

    def build(self) -> tuple:
        nodes, _, _, _ = self._body(frozenset())
        return nodes

    def _body(self, stops: frozenset[str]) -> tuple[tuple, str | None, str, int]:
        nodes: list = []
        for kind, content, line in self._segments:
            if kind == "text":
                nodes.append(_Text(content))
                continue
            if kind == "expr":
                nodes.append(_Emit(_parse_expr(content, line)))
                continue
            key = _keyword(content)
            if key in stops:
                return tuple(nodes), key, content, line
            nodes.append(self._block(key, content, line))
        if stops:
            expected = ", ".join(f"`{s}`" for s in sorted(stops))
            raise TemplateError(f"unexpected end of template, expected {expected}")
        return tuple(nodes), None, "", 0

    def _block(self, key: str, content: str, line: int) -> Any:
        match key:
            case "if":
                return self._if(content[2:], line)
            case "for":
                match = _FOR_RE.match(content)
                if match is None:
                    raise TemplateError(f"invalid for loop `{content}` on line {line}")
                first, second, iterable = match.groups()
                names = (first, second) if second else (first,)
                body, _, _, _ = self._body(frozenset({"endfor"}))
                return _For(names, _parse_expr(iterable, line), body)
            case "with":
                match = _WITH_RE.match(content)
                if match is None:
                    raise TemplateError(f"invalid with block `{content}` on line {line}")
                body, _, _, _ = self._body(frozenset({"endwith"}))
                return _With(_parse_expr(match.group(1), line), match.group(2), body)
            case "include":
                match = _INCLUDE_RE.match(content)
                if match is None:
                    raise TemplateError(f"invalid include `{content}` on line {line}")
                return _Include(json.loads(f'"{match.group(1)}"'), line)
        raise TemplateError(f"unexpected block `{content}` on line {line}")

    def _if(self, condition: str, line: int) -> _If:
        branches = []
        cond = _parse_expr(condition, line)
        while True:
            body, key, content, end_line = self._body(frozenset({"elif", "else", "endif"}))
            branches.append((cond, body))
            if key == "elif":
                cond = _parse_expr(content.split("if", 1)[1], end_line)
                continue
            if key == "else":
                if content.strip() != "else":
                    raise TemplateError(f"unexpected block `{content}` on line {end_line}")
                otherwise, _, _, _ = self._body(frozenset({"endif"}))
                return _If(tuple(branches), otherwise)
            return _If(tuple(branches), ())


def _to_text(value: Any, line: int) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        if value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return value
    kind = "map" if isinstance(value, Mapping) else "list" if isinstance(value, (list, tuple)) else type(value).__name__
    raise TemplateError(f"expected renderable value, found {kind} on line {line}")


class CompiledTemplate:
    """A parsed template bound to the engine whose filters it uses."""

    def __init__(self, engine: Engine, nodes: tuple) -> None:
        self._engine = engine
        self._nodes = nodes

    def render(self, data: Any) -> str:
        """Render the template against ``data``."""
        return "".join(self._iter(self._nodes, data, [], 0))

    def _iter(self, nodes: tuple, root: Any, scopes: list[dict], depth: int) -> Iterator[str]:
        for node in nodes:
            match node:
                case _Text(text):
                    yield text
                case _Emit(expr):
                    yield _to_text(self._eval(expr, root, scopes), expr.line)
                case _If(branches, otherwise):
                    chosen = next(
                        (body for cond, body in branches if self._eval(cond, root, scopes)),
                        otherwise,
                    )
                    yield from self._iter(chosen, root, scopes, depth)
                case _For(names, iterable, body):
                    yield from self._loop(names, iterable, body, root, scopes, depth)
                case _With(expr, name, body):
                    scope = {name: self._eval(expr, root, scopes)}
                    yield from self._iter(body, root, [*scopes, scope], depth)
                case _Include(name, line):
                    if depth >= _MAX_INCLUDE_DEPTH:
                        raise TemplateError(f"include depth exceeded on line {line}")
                    included = self._engine._get(name)
                    yield from included._iter(included._nodes, root, [], depth + 1)

    def _loop(
        self, names: tuple[str, ...], iterable: _Expr, body: tuple,
        root: Any, scopes: list[dict], depth: int,
    ) -> Iterator[str]:
        value = self._eval(iterable, root, scopes)
        if isinstance(value, Mapping):
            if len(names) != 2:
                raise TemplateError(f"cannot unpack map into one name on line {iterable.line}")
            items = [dict(zip(names, pair)) for pair in value.items()]
        elif isinstance(value, (list, tuple)):
            if len(names) != 1:
                raise TemplateError(f"cannot unpack list item into two names on line {iterable.line}")
            items = [{names[0]: item} for item in value]
        else:
            raise TemplateError(f"expected iterable value on line {iterable.line}")
        last = len(items) - 1
        for index, scope in enumerate(items):
            scope["loop"] = {"index": index, "first": index == 0, "last": index == last}
            yield from self._iter(body, root, [*scopes, scope], depth)

    def _operand(self, operand: _Literal | _Path, root: Any, scopes: list[dict], line: int) -> Any:
        if isinstance(operand, _Literal):
            return operand.value
        head, *rest = operand.parts
        for scope in reversed(scopes):
            if head in scope:
                value = scope[head]
                break
        else:
            if not isinstance(root, Mapping) or head not in root:
                raise TemplateError(f"not found in map: `{head}` on line {line}")
            value = root[head]
        for part in rest:
            if isinstance(value, Mapping):
                if part not in value:
                    raise TemplateError(f"not found in map: `{part}` on line {line}")
                value = value[part]
            elif isinstance(value, (list, tuple)) and part.isdigit():
                try:
                    value = value[int(part)]
                except IndexError:
                    raise TemplateError(f"index out of bounds: `{part}` on line {line}") from None
            else:
                raise TemplateError(f"cannot index into value with `{part}` on line {line}")
        return value

    def _eval(self, expr: _Expr, root: Any, scopes: list[dict]) -> Any:
        value = self._operand(expr.operand, root, scopes, expr.line)
        for name, arg_nodes in expr.filters:
            func = self._engine._filters.get(name)
            if func is None:
                raise TemplateError(f"unknown filter `{name}` on line {expr.line}")
            args = [self._operand(a, root, scopes, expr.line) for a in arg_nodes]
            try:
                value = func(value, *args)
            except TemplateError:
                raise
            except Exception as exc:
                raise TemplateError(f"filter `{name}` failed on line {expr.line}: {exc}") from exc
        return not value if expr.negate else value


class Engine:
    """Holds a syntax, named filters and named templates."""

    def __init__(self, syntax: Syntax | None = None) -> None:
        self.syntax = syntax or Syntax()
        self._filters: dict[str, Callable[..., Any]] = {}
        self._templates: dict[str, CompiledTemplate] = {}

    def add_filter(self, name: str, func: Callable[..., Any]) -> None:
        """Register ``func(value, *args)`` under ``name``."""
        self._filters[name] = func

    def add_template(self, name: str, source: str) -> None:
        """Compile ``source`` and store it under ``name``."""
        self._templates[name] = self.compile(source)

    def compile(self, source: str) -> CompiledTemplate:
        """Compile ``source`` without storing it."""
        return CompiledTemplate(self, _Builder(_lex(source, self.syntax)).build())

    def render(self, name: str, data: Any) -> str:
        """Render the stored template ``name`` against ``data``."""
        return self._get(name).render(data)

    def _get(self, name: str) -> CompiledTemplate:
        try:
            return self._templates[name]
        except KeyError:
            raise TemplateError(f"unknown template `{name}`") from None