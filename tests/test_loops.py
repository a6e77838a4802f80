import unittest

from headache import (
    ErrorKind,
    UnbalancedBracketsError,
    UnclosedLoopError,
    UnexpectedLoopCloseError,
    resolve_loops,
)

CLASSIC_HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


class ResolveLoopsTests(unittest.TestCase):
    def test_nested_pairs(self) -> None:
        table = resolve_loops("[[]][]")
        self.assertEqual(table[0], 3)
        self.assertEqual(table[1], 2)
        self.assertEqual(table[2], 1)
        self.assertEqual(table[3], 0)
        self.assertEqual(table[4], 5)
        self.assertEqual(table.pairs(), [(0, 3), (1, 2), (4, 5)])

    def test_comments_occupy_positions(self) -> None:
        table = resolve_loops("ab[ c ]")
        self.assertEqual(table[2], 6)
        self.assertNotIn(0, table)

    def test_involution_for_every_bracket(self) -> None:
        table = resolve_loops(CLASSIC_HELLO_WORLD)
        brackets = [i for i, ch in enumerate(CLASSIC_HELLO_WORLD) if ch in "[]"]
        self.assertEqual(sorted(table), brackets)
        for position in brackets:
            self.assertEqual(table[table[position]], position)
            self.assertNotEqual(CLASSIC_HELLO_WORLD[table[position]], CLASSIC_HELLO_WORLD[position])

    def test_no_brackets_gives_empty_table(self) -> None:
        self.assertEqual(len(resolve_loops("+-.,<> text")), 0)

    def test_stray_close_reports_its_position(self) -> None:
        with self.assertRaises(UnexpectedLoopCloseError) as ctx:
            resolve_loops("+[-]]")
        self.assertEqual(ctx.exception.position, 4)
        self.assertEqual(ctx.exception.kind, ErrorKind.UNBALANCED_BRACKETS)

    def test_unclosed_reports_first_open(self) -> None:
        with self.assertRaises(UnclosedLoopError) as ctx:
            resolve_loops("+[[-]")
        self.assertEqual(ctx.exception.position, 1)
        self.assertIsInstance(ctx.exception, UnbalancedBracketsError)

    def test_close_before_open(self) -> None:
        with self.assertRaises(UnexpectedLoopCloseError) as ctx:
            resolve_loops("][")
        self.assertEqual(ctx.exception.position, 0)


if __name__ == "__main__":
    unittest.main()
