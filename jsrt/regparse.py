"""Regular-expression parser and compiler.

A pattern is parsed into a syntax tree and compiled into a flat list of
instructions for a backtracking matcher. Instruction opcodes are short
strings:

``end``, ``jump``, ``split``, ``pla``, ``nla``, ``anynl``, ``any``,
``char``, ``cclass``, ``ncclass``, ``ref``, ``bol``, ``eol``, ``word``,
``nword``, ``lpar`` and ``rpar``.

Branch targets (``x`` and ``y``) are indexes into the instruction list.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union

from jsrt.utf import decode_rune, encode_rune, is_alpha_rune, to_upper_rune

MAX_SUB = 16
MAX_PROG = 32 << 10
MAX_REC = 1024
MAX_SPAN = 64
MAX_CLASS = 128
REPINF = 255


class RegexError(ValueError):
    """Raised when a pattern cannot be compiled."""


class RegexFlag(enum.IntFlag):
    """Compile and execution flags."""

    NONE = 0
    ICASE = 1
    NEWLINE = 2
    NOTBOL = 4


def canon(rune: int) -> int:
    """Fold ``rune`` to upper case, never mapping non-ASCII onto ASCII."""
    upper = to_upper_rune(rune)
    if rune >= 128 and upper < 128:
        return rune
    return upper


@dataclass(eq=False)
class CharClass:
    """A set of inclusive rune ranges."""

    spans: list[tuple[int, int]] = field(default_factory=list)
    _canon_set: Optional[frozenset[int]] = field(default=None, init=False, repr=False)

    def contains(self, rune: int) -> bool:
        """True if ``rune`` lies in one of the ranges."""
        return any(lo <= rune <= hi for lo, hi in self.spans)

    def contains_canon(self, rune: int) -> bool:
        """True if ``rune`` is the case-folded form of a rune in the class."""
        if self._canon_set is None:
            self._canon_set = frozenset(
                canon(r) for lo, hi in self.spans for r in range(lo, hi + 1)
            )
        return rune in self._canon_set

    def _add(self, a: int, b: int) -> None:
        if a > b:
            raise RegexError("invalid character class range")
        for index, (lo, hi) in enumerate(self.spans):
            if a >= lo and b <= hi:
                return
            if a < lo and b >= hi:
                self.spans[index] = (a, b)
                return
            if lo - 1 <= b <= hi and a < lo:
                self.spans[index] = (a, hi)
                return
            if lo <= a <= hi + 1 and b > hi:
                self.spans[index] = (lo, b)
                return
        if 2 * len(self.spans) + 2 >= MAX_SPAN:
            raise RegexError("too many character class ranges")
        self.spans.append((a, b))
        self._canon_set = None


@dataclass(eq=False)
class Instruction:
    """One matcher instruction."""

    opcode: str
    n: int = 0
    c: int = 0
    cc: Optional[CharClass] = None
    x: Optional[int] = None
    y: Optional[int] = None


@dataclass(eq=False)
class Program:
    """A compiled pattern."""

    instructions: list[Instruction]
    classes: list[CharClass]
    flags: RegexFlag
    nsub: int


# Lexer tokens beyond single characters.
_EOF = -1
_L_CHAR = 256
_L_CCLASS = 257
_L_NCCLASS = 258
_L_NC = 259
_L_PLA = 260
_L_NLA = 261
_L_WORD = 262
_L_NWORD = 263
_L_REF = 264
_L_COUNT = 265

# Syntax tree node kinds.
_P_CAT, _P_ALT, _P_REP = 0, 1, 2
_P_BOL, _P_EOL, _P_WORD, _P_NWORD = 3, 4, 5, 6
_P_PAR, _P_PLA, _P_NLA = 7, 8, 9
_P_ANY, _P_CHAR, _P_CCLASS, _P_NCCLASS = 10, 11, 12, 13
_P_REF = 14

_ESCAPES = frozenset(map(ord, "BbDdSsWw^$\\.*+?()[]{}|-0123456789"))
_CONTROL_ESCAPES = {ord("f"): 0x0C, ord("n"): 0x0A, ord("r"): 0x0D, ord("t"): 0x09, ord("v"): 0x0B}
_SPECIAL = frozenset((_EOF, *map(ord, "$)*+.?^|")))

_RANGES_D = ((0x30, 0x39),)
_RANGES_S = ((0x9, 0xD), (0x20, 0x20), (0xA0, 0xA0), (0x2028, 0x2029), (0xFEFF, 0xFEFF))
_RANGES_W = ((0x30, 0x39), (0x41, 0x5A), (0x5F, 0x5F), (0x61, 0x7A))
_RANGES_ND = ((0, 0x2F), (0x3A, 0xFFFF))
_RANGES_NS = ((0, 0x8), (0xE, 0x1F), (0x21, 0x9F), (0xA1, 0x2027), (0x202A, 0xFEFE), (0xFF00, 0xFFFF))
_RANGES_NW = ((0, 0x2F), (0x3A, 0x40), (0x5B, 0x5E), (0x60, 0x60), (0x7B, 0xFFFF))

_CLASS_ESCAPES = {
    ord("d"): _RANGES_D, ord("s"): _RANGES_S, ord("w"): _RANGES_W,
    ord("D"): _RANGES_ND, ord("S"): _RANGES_NS, ord("W"): _RANGES_NW,
}
_POSITIVE_ESCAPES = {ord("d"): _RANGES_D, ord("s"): _RANGES_S, ord("w"): _RANGES_W}
_NEGATIVE_ESCAPES = {ord("D"): _RANGES_D, ord("S"): _RANGES_S, ord("W"): _RANGES_W}

_GROUP_KINDS = {ord(":"): _L_NC, ord("="): _L_PLA, ord("!"): _L_NLA}


@dataclass(eq=False)
class _Node:
    kind: int
    ng: bool = False
    m: int = 0
    n: int = 0
    c: int = 0
    cc: int = -1
    x: Optional["_Node"] = None
    y: Optional["_Node"] = None


def _hex(c: int) -> int:
    if 0x30 <= c <= 0x39:
        return c - 0x30
    if 0x61 <= c <= 0x66:
        return c - 0x61 + 10
    if 0x41 <= c <= 0x46:
        return c - 0x41 + 10
    raise RegexError("invalid escape sequence")


def _dec(c: int) -> int:
    if 0x30 <= c <= 0x39:
        return c - 0x30
    raise RegexError("invalid quantifier")


def _is_unicode_letter(c: int) -> bool:
    return (0x61 <= c <= 0x7A) or (0x41 <= c <= 0x5A) or is_alpha_rune(c)


def _empty(node: Optional[_Node]) -> bool:
    """True if ``node`` can match the empty string."""
    while node is not None and node.kind == _P_CAT:
        if not _empty(node.x):
            return False
        node = node.y
    if node is None:
        return True
    kind = node.kind
    if kind == _P_ALT:
        return _empty(node.x) or _empty(node.y)
    if kind == _P_REP:
        return _empty(node.x) or node.m == 0
    if kind in (_P_PAR, _P_REF):
        return _empty(node.x)
    if kind in (_P_ANY, _P_CHAR, _P_CCLASS, _P_NCCLASS):
        return False
    return True


class _Parser:
    def __init__(self, source: bytes) -> None:
        self.source = source
        self.pos = 0
        self.classes: list[CharClass] = []
        self.nsub = 1
        self.sub: list[Optional[_Node]] = [None] * MAX_SUB
        self.lookahead = _EOF
        self.yychar = 0
        self.yycc: Optional[CharClass] = None
        self.yymin = 0
        self.yymax = 0

    # Scanning

    def _at(self, offset: int = 0) -> int:
        index = self.pos + offset
        return self.source[index] if index < len(self.source) else 0

    def _take(self) -> int:
        byte = self._at()
        self.pos += 1
        return byte

    def _next_rune(self) -> bool:
        """Read one rune into ``yychar``; return True if it was quoted."""
        if not self._at():
            self.yychar = _EOF
            return False
        self.yychar, length = decode_rune(self.source, self.pos)
        self.pos += length
        if self.yychar != 0x5C:
            return False
        if not self._at():
            raise RegexError("unterminated escape sequence")
        self.yychar, length = decode_rune(self.source, self.pos)
        self.pos += length
        c = self.yychar
        if c in _CONTROL_ESCAPES:
            self.yychar = _CONTROL_ESCAPES[c]
            return False
        if c == ord("c"):
            if not self._at():
                raise RegexError("unterminated escape sequence")
            self.yychar = self._take() & 31
            return False
        if c in (ord("x"), ord("u")):
            digits = 2 if c == ord("x") else 4
            if any(not self._at(i) for i in range(digits)):
                raise RegexError("unterminated escape sequence")
            value = 0
            for _ in range(digits):
                value = (value << 4) | _hex(self._take())
            self.yychar = value if value else ord("0")
            return True
        if c == 0:
            self.yychar = ord("0")
            return True
        if c in _ESCAPES:
            return True
        if _is_unicode_letter(c) or c == ord("_"):
            raise RegexError("invalid escape character")
        return False

    def _lex_count(self) -> int:
        ch = self._take()
        self.yymin = _dec(ch)
        ch = self._take()
        while ch not in (ord(","), ord("}")):
            self.yymin = self.yymin * 10 + _dec(ch)
            ch = self._take()
            if self.yymin >= REPINF:
                raise RegexError("numeric overflow")
        if ch == ord(","):
            ch = self._take()
            if ch == ord("}"):
                self.yymax = REPINF
            else:
                self.yymax = _dec(ch)
                ch = self._take()
                while ch != ord("}"):
                    self.yymax = self.yymax * 10 + _dec(ch)
                    ch = self._take()
                    if self.yymax >= REPINF:
                        raise RegexError("numeric overflow")
        else:
            self.yymax = self.yymin
        return _L_COUNT

    def _new_class(self) -> CharClass:
        if len(self.classes) >= MAX_CLASS:
            raise RegexError("too many character classes")
        cc = CharClass()
        self.classes.append(cc)
        self.yycc = cc
        return cc

    def _lex_class(self) -> int:
        dash = ord("-")
        kind = _L_CCLASS
        cc = self._new_class()
        quoted = self._next_rune()
        if not quoted and self.yychar == ord("^"):
            kind = _L_NCCLASS
            quoted = self._next_rune()

        have_save = have_dash = False
        save = 0
        while True:
            if self.yychar == _EOF:
                raise RegexError("unterminated character class")
            if not quoted and self.yychar == ord("]"):
                break
            if not quoted and self.yychar == dash:
                if have_save:
                    if have_dash:
                        cc._add(save, dash)
                        have_save = have_dash = False
                    else:
                        have_dash = True
                else:
                    save = dash
                    have_save = True
            elif quoted and self.yychar in _CLASS_ESCAPES:
                if have_save:
                    cc._add(save, save)
                    if have_dash:
                        cc._add(dash, dash)
                for lo, hi in _CLASS_ESCAPES[self.yychar]:
                    cc._add(lo, hi)
                have_save = have_dash = False
            else:
                ch = self.yychar
                if quoted:
                    if ch == ord("b"):
                        ch = 0x08
                    elif ch == ord("0"):
                        ch = 0
                if have_save:
                    if have_dash:
                        cc._add(save, ch)
                        have_save = have_dash = False
                    else:
                        cc._add(save, save)
                        save = ch
                else:
                    save = ch
                    have_save = True
            quoted = self._next_rune()

        if have_save:
            cc._add(save, save)
            if have_dash:
                cc._add(dash, dash)
        return kind

    def _lex(self) -> int:
        quoted = self._next_rune()
        c = self.yychar
        if quoted:
            if c == ord("b"):
                return _L_WORD
            if c == ord("B"):
                return _L_NWORD
            if c in _POSITIVE_ESCAPES or c in _NEGATIVE_ESCAPES:
                cc = self._new_class()
                ranges = _POSITIVE_ESCAPES.get(c) or _NEGATIVE_ESCAPES[c]
                for lo, hi in ranges:
                    cc._add(lo, hi)
                return _L_CCLASS if c in _POSITIVE_ESCAPES else _L_NCCLASS
            if c == ord("0"):
                self.yychar = 0
                return _L_CHAR
            if ord("0") <= c <= ord("9"):
                self.yychar = c - ord("0")
                following = self._at()
                if ord("0") <= following <= ord("9"):
                    self.yychar = self.yychar * 10 + following - ord("0")
                    self.pos += 1
                return _L_REF
            return _L_CHAR

        if c in _SPECIAL:
            return c
        if c == ord("{"):
            return self._lex_count()
        if c == ord("["):
            return self._lex_class()
        if c == ord("("):
            if self._at() == ord("?"):
                kind = _GROUP_KINDS.get(self._at(1))
                if kind is not None:
                    self.pos += 2
                    return kind
            return c
        return _L_CHAR

    # Parsing

    def next(self) -> None:
        self.lookahead = self._lex()

    def _accept(self, token: int) -> bool:
        if self.lookahead == token:
            self.next()
            return True
        return False

    def _class_index(self) -> int:
        return len(self.classes) - 1 if self.yycc is self.classes[-1] else self.classes.index(self.yycc)

    def _close_group(self) -> None:
        if not self._accept(ord(")")):
            raise RegexError("unmatched '('")

    def _parse_atom(self) -> Optional[_Node]:
        if self.lookahead == _L_CHAR:
            atom = _Node(_P_CHAR, c=self.yychar)
            self.next()
            return atom
        if self.lookahead in (_L_CCLASS, _L_NCCLASS):
            kind = _P_CCLASS if self.lookahead == _L_CCLASS else _P_NCCLASS
            atom = _Node(kind, cc=self._class_index())
            self.next()
            return atom
        if self.lookahead == _L_REF:
            ref = self.yychar
            if ref == 0 or ref >= self.nsub or self.sub[ref] is None:
                raise RegexError("invalid back-reference")
            atom = _Node(_P_REF, n=ref, x=self.sub[ref])
            self.next()
            return atom
        if self._accept(ord(".")):
            return _Node(_P_ANY)
        if self._accept(ord("(")):
            if self.nsub == MAX_SUB:
                raise RegexError("too many captures")
            atom = _Node(_P_PAR, n=self.nsub)
            self.nsub += 1
            atom.x = self.parse_alt()
            self.sub[atom.n] = atom
            self._close_group()
            return atom
        if self._accept(_L_NC):
            inner = self.parse_alt()
            self._close_group()
            return inner
        for token, kind in ((_L_PLA, _P_PLA), (_L_NLA, _P_NLA)):
            if self._accept(token):
                atom = _Node(kind, x=self.parse_alt())
                self._close_group()
                return atom
        raise RegexError("syntax error")

    def _new_rep(self, atom: Optional[_Node], ng: bool, low: int, high: int) -> _Node:
        if high == REPINF and _empty(atom):
            raise RegexError("infinite loop matching the empty string")
        return _Node(_P_REP, ng=ng, m=low, n=high, x=atom)

    def _parse_rep(self) -> Optional[_Node]:
        for token, kind in ((ord("^"), _P_BOL), (ord("$"), _P_EOL), (_L_WORD, _P_WORD), (_L_NWORD, _P_NWORD)):
            if self._accept(token):
                return _Node(kind)
        atom = self._parse_atom()
        if self.lookahead == _L_COUNT:
            low, high = self.yymin, self.yymax
            self.next()
            if high < low:
                raise RegexError("invalid quantifier")
            return self._new_rep(atom, self._accept(ord("?")), low, high)
        if self._accept(ord("*")):
            return self._new_rep(atom, self._accept(ord("?")), 0, REPINF)
        if self._accept(ord("+")):
            return self._new_rep(atom, self._accept(ord("?")), 1, REPINF)
        if self._accept(ord("?")):
            return self._new_rep(atom, self._accept(ord("?")), 0, 1)
        return atom

    def _at_cat_end(self) -> bool:
        return self.lookahead in (_EOF, ord("|"), ord(")"))

    def _parse_cat(self) -> Optional[_Node]:
        if self._at_cat_end():
            return None
        head = self._parse_rep()
        tail: Optional[_Node] = None
        while not self._at_cat_end():
            right = self._parse_rep()
            if tail is None:
                head = _Node(_P_CAT, x=head, y=right)
                tail = head
            else:
                cat = _Node(_P_CAT, x=tail.y, y=right)
                tail.y = cat
                tail = cat
        return head

    def parse_alt(self) -> Optional[_Node]:
        alt = self._parse_cat()
        while self._accept(ord("|")):
            alt = _Node(_P_ALT, x=alt, y=self._parse_cat())
        return alt


def _count(root: Optional[_Node]) -> int:
    """Count the instructions ``root`` compiles to, enforcing nesting limits."""
    results: list[int] = []
    stack: list[tuple[Optional[_Node], int, bool]] = [(root, 0, False)]
    while stack:
        node, depth, expanded = stack.pop()
        if node is None:
            results.append(0)
            continue
        kind = node.kind
        if not expanded:
            depth += 1
            if depth > MAX_REC:
                raise RegexError("stack overflow")
            if kind in (_P_CAT, _P_ALT):
                stack.append((node, depth, True))
                stack.append((node.y, depth, False))
                stack.append((node.x, depth, False))
            elif kind in (_P_REP, _P_PAR, _P_PLA, _P_NLA):
                stack.append((node, depth, True))
                stack.append((node.x, depth, False))
            else:
                results.append(1)
            continue
        if kind in (_P_CAT, _P_ALT):
            right = results.pop()
            left = results.pop()
            results.append(left + right + (2 if kind == _P_ALT else 0))
        elif kind == _P_REP:
            inner = results.pop()
            low, high = node.m, node.n
            if low == high:
                total = inner * low
            elif high < REPINF:
                total = inner * high + (high - low)
            else:
                total = inner * (low + 1) + 2
            if total < 0 or total > MAX_PROG:
                raise RegexError("program too large")
            results.append(total)
        else:
            results.append(results.pop() + 2)
    return results[0]


class _Emitter:
    def __init__(self, classes: list[CharClass], flags: RegexFlag) -> None:
        self.instructions: list[Instruction] = []
        self.classes = classes
        self.flags = flags

    def emit(self, opcode: str, **fields: object) -> int:
        self.instructions.append(Instruction(opcode, **fields))  # type: ignore[arg-type]
        return len(self.instructions) - 1

    @property
    def end(self) -> int:
        return len(self.instructions)

    def _link(self, index: int, preferred: int, other: int, ng: bool) -> None:
        inst = self.instructions[index]
        if ng:
            inst.y, inst.x = preferred, other
        else:
            inst.x, inst.y = preferred, other

    def compile(self, node: Optional[_Node]) -> None:
        while node is not None and node.kind == _P_CAT:
            self.compile(node.x)
            node = node.y
        if node is None:
            return
        kind = node.kind
        insts = self.instructions

        if kind == _P_ALT:
            split = self.emit("split")
            self.compile(node.x)
            jump = self.emit("jump")
            self.compile(node.y)
            insts[split].x = split + 1
            insts[split].y = jump + 1
            insts[jump].x = self.end
        elif kind == _P_REP:
            start = 0
            for _ in range(node.m):
                start = self.end
                self.compile(node.x)
            if node.m == node.n:
                return
            if node.n < REPINF:
                for _ in range(node.m, node.n):
                    split = self.emit("split")
                    self.compile(node.x)
                    self._link(split, split + 1, self.end, node.ng)
            elif node.m == 0:
                split = self.emit("split")
                self.compile(node.x)
                jump = self.emit("jump")
                self._link(split, split + 1, self.end, node.ng)
                insts[jump].x = split
            else:
                split = self.emit("split")
                self._link(split, start, self.end, node.ng)
        elif kind in (_P_BOL, _P_EOL, _P_WORD, _P_NWORD, _P_ANY):
            self.emit({_P_BOL: "bol", _P_EOL: "eol", _P_WORD: "word", _P_NWORD: "nword", _P_ANY: "any"}[kind])
        elif kind == _P_PAR:
            self.emit("lpar", n=node.n)
            self.compile(node.x)
            self.emit("rpar", n=node.n)
        elif kind in (_P_PLA, _P_NLA):
            split = self.emit("pla" if kind == _P_PLA else "nla")
            self.compile(node.x)
            self.emit("end")
            insts[split].x = split + 1
            insts[split].y = self.end
        elif kind == _P_CHAR:
            c = canon(node.c) if self.flags & RegexFlag.ICASE else node.c
            self.emit("char", c=c)
        elif kind in (_P_CCLASS, _P_NCCLASS):
            self.emit("cclass" if kind == _P_CCLASS else "ncclass", cc=self.classes[node.cc])
        elif kind == _P_REF:
            self.emit("ref", n=node.n)


def _encode(pattern: Union[str, bytes]) -> bytes:
    if isinstance(pattern, bytes):
        return pattern
    return b"".join(encode_rune(ord(ch)) for ch in pattern)


def compile_pattern(pattern: Union[str, bytes], flags: int = 0) -> Program:
    """Compile ``pattern`` into a :class:`Program`; raise :class:`RegexError`."""
    source = _encode(pattern)
    terminator = source.find(0)
    length = len(source) if terminator < 0 else terminator
    if length * 2 > MAX_PROG:
        raise RegexError("program too large")

    flags = RegexFlag(flags)
    parser = _Parser(source)
    try:
        parser.next()
        node = parser.parse_alt()
        if parser.lookahead == ord(")"):
            raise RegexError("unmatched ')'")
        if parser.lookahead != _EOF:
            raise RegexError("syntax error")

        if 6 + _count(node) > MAX_PROG:
            raise RegexError("program too large")

        emitter = _Emitter(parser.classes, flags)
        split = emitter.emit("split", x=3, y=1)
        emitter.emit("anynl")
        emitter.emit("jump", x=split)
        emitter.emit("lpar", n=0)
        emitter.compile(node)
        emitter.emit("rpar", n=0)
        emitter.emit("end")
    except RecursionError:
        raise RegexError("stack overflow") from None

    return Program(
        instructions=emitter.instructions,
        classes=parser.classes,
        flags=flags,
        nsub=parser.nsub,
    )