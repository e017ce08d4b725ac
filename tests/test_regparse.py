import pytest

from jsrt.regparse import (
    CharClass,
    Program,
    RegexError,
    RegexFlag,
    canon,
    compile_pattern,
)


def ops(prog: Program) -> list[str]:
    return [inst.opcode for inst in prog.instructions]


def assert_targets_in_range(prog: Program) -> None:
    size = len(prog.instructions)
    for inst in prog.instructions:
        for target in (inst.x, inst.y):
            if target is not None:
                assert 0 <= target <= size


def test_literal_program_layout():
    prog = compile_pattern("a")
    assert ops(prog) == ["split", "anynl", "jump", "lpar", "char", "rpar", "end"]
    assert prog.instructions[0].x == 3
    assert prog.instructions[0].y == 1
    assert prog.instructions[2].x == 0
    assert prog.instructions[4].c == ord("a")


def test_capture_count():
    assert compile_pattern("a").nsub == 1
    assert compile_pattern("(a)(b)").nsub == 3
    assert compile_pattern("(?:a)(b)").nsub == 2


def test_icase_folds_literal():
    plain = compile_pattern("a")
    folded = compile_pattern("a", RegexFlag.ICASE)
    assert plain.instructions[4].c == ord("a")
    assert folded.instructions[4].c == ord("A")
    assert folded.flags & RegexFlag.ICASE


def test_alternation_links():
    prog = compile_pattern("a|b")
    codes = ops(prog)
    split = codes.index("split", 1)
    jump = codes.index("jump", 3)
    insts = prog.instructions
    assert insts[split].x == split + 1
    assert insts[split].y == jump + 1
    assert insts[jump].x == len(codes) - 2
    assert codes[insts[jump].x] == "rpar"


def test_counted_repeat_unrolls():
    assert ops(compile_pattern("a{3}")).count("char") == 3
    prog = compile_pattern("a{1,3}")
    assert ops(prog).count("char") == 3
    assert ops(prog).count("split") == 3
    assert_targets_in_range(prog)


def test_star_greedy_and_lazy():
    greedy = compile_pattern("a*")
    codes = ops(greedy)
    split = codes.index("split", 1)
    jump = codes.index("jump", split)
    insts = greedy.instructions
    assert insts[jump].x == split
    assert insts[split].x == split + 1
    assert insts[split].y == jump + 1

    lazy = compile_pattern("a*?")
    linsts = lazy.instructions
    assert linsts[split].y == split + 1
    assert linsts[split].x == jump + 1


def test_plus_loops_back_to_body():
    prog = compile_pattern("a+")
    codes = ops(prog)
    body = codes.index("char")
    split = codes.index("split", body)
    assert prog.instructions[split].x == body
    assert prog.instructions[split].y == split + 1


def test_class_ranges_merge():
    prog = compile_pattern("[a-cb-e]")
    assert prog.classes[0].spans == [(ord("a"), ord("e"))]
    assert ops(prog)[4] == "cclass"
    assert prog.instructions[4].cc is prog.classes[0]


def test_negated_class():
    prog = compile_pattern("[^x]")
    assert ops(prog)[4] == "ncclass"
    assert prog.instructions[4].cc.contains(ord("x"))


def test_negated_digit_escape_uses_positive_ranges():
    prog = compile_pattern("\\D")
    assert ops(prog)[4] == "ncclass"
    assert prog.instructions[4].cc.spans == [(0x30, 0x39)]


def test_word_class_with_trailing_dash():
    cc = compile_pattern("[\\w-]").classes[0]
    assert cc.contains(ord("-"))
    assert cc.contains(ord("_"))
    assert cc.contains(ord("Z"))
    assert not cc.contains(ord(" "))


def test_class_contains_and_canon():
    cc = CharClass([(ord("a"), ord("z"))])
    assert cc.contains(ord("q"))
    assert not cc.contains(ord("Q"))
    assert cc.contains_canon(ord("Q"))
    assert not cc.contains_canon(ord("q"))


@pytest.mark.parametrize(
    "rune, expected",
    [
        (ord("a"), ord("A")),
        (ord("A"), ord("A")),
        (ord("5"), ord("5")),
        (0x131, 0x131),
        (0x17F, 0x17F),
        (0xE9, 0xC9),
    ],
)
def test_canon(rune, expected):
    assert canon(rune) == expected


def test_capture_limit():
    assert compile_pattern("(a)" * 15).nsub == 16
    with pytest.raises(RegexError, match="too many captures"):
        compile_pattern("(a)" * 16)


def test_class_range_limit():
    chars = [chr(0x100 + 2 * i) for i in range(32)]
    cc = compile_pattern("[" + "".join(chars[:31]) + "]").classes[0]
    assert len(cc.spans) == 31
    with pytest.raises(RegexError, match="too many character class ranges"):
        compile_pattern("[" + "".join(chars) + "]")


def test_class_count_limit():
    assert len(compile_pattern("\\d" * 128).classes) == 128
    with pytest.raises(RegexError, match="too many character classes"):
        compile_pattern("\\d" * 129)


def test_backreference_instruction():
    prog = compile_pattern("(a)\\1")
    refs = [inst for inst in prog.instructions if inst.opcode == "ref"]
    assert len(refs) == 1
    assert refs[0].n == 1


def test_long_literal_compiles():
    prog = compile_pattern("a" * 900)
    assert ops(prog).count("char") == 900


def test_very_long_literal_overflows():
    with pytest.raises(RegexError, match="stack overflow"):
        compile_pattern("a" * 2000)


def test_lookahead_skips_its_body():
    prog = compile_pattern("(?=a)b")
    codes = ops(prog)
    pla = codes.index("pla")
    inner_end = codes.index("end", pla)
    assert prog.instructions[pla].x == pla + 1
    assert prog.instructions[pla].y == inner_end + 1
    assert prog.instructions[inner_end + 1].c == ord("b")


def test_hex_and_unicode_escapes():
    assert compile_pattern("\\x41").instructions[4].c == 0x41
    assert compile_pattern("\\u00e9").instructions[4].c == 0xE9


def test_bytes_and_str_patterns_agree():
    text = "(a|b)*c[d-f]"
    from_str = compile_pattern(text)
    from_bytes = compile_pattern(text.encode())
    assert ops(from_str) == ops(from_bytes)
    assert from_str.nsub == from_bytes.nsub


def test_complex_pattern_targets_in_range():
    prog = compile_pattern("^(ab|c+?)\\b(?!x)[^\\s]{2,4}$")
    assert_targets_in_range(prog)
    assert ops(prog)[-1] == "end"