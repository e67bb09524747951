# test_description.py
#
# Run:
#   python -m unittest -v
#
# Covers the element model and its serialization: command type lookup,
# whitespace collapsing in TextSpan, the narrow escaping rule of
# CommandSpan and block/document output.

import unittest

from command_types import COMMAND_TYPES, CommandType
from description import CommandSpan, Description, DescriptionList, Paragraph, TextSpan
from errors import DescriptionError, MultipleLineBreaksError, UnknownCommandError


class TestCommandTypes(unittest.TestCase):
    def test_catalog_order_and_ordinals(self):
        names = [t.name for t in CommandType.values()]
        self.assertEqual(
            names,
            [
                "EMPHASIS",
                "STRONG_EMPHASIS",
                "PROPER_NAME",
                "CODE",
                "MESSAGE",
                "MESSAGE_PLACEHOLDER",
                "CURLY_BRACE_OPEN",
                "CURLY_BRACE_CLOSED",
            ],
        )
        self.assertEqual([t.ordinal for t in COMMAND_TYPES], list(range(8)))

    def test_class_attributes_point_at_catalog_entries(self):
        self.assertIs(CommandType.EMPHASIS, COMMAND_TYPES[0])
        self.assertIs(CommandType.CURLY_BRACE_CLOSED, COMMAND_TYPES[7])

    def test_from_command_accepts_every_alias(self):
        self.assertIs(CommandType.from_command("e"), CommandType.EMPHASIS)
        self.assertIs(CommandType.from_command("mp"), CommandType.MESSAGE_PLACEHOLDER)
        self.assertIs(CommandType.from_command("cb"), CommandType.CURLY_BRACE_OPEN)
        self.assertIs(CommandType.from_command("cbo"), CommandType.CURLY_BRACE_OPEN)
        self.assertIs(CommandType.from_command("cbc"), CommandType.CURLY_BRACE_CLOSED)

    def test_lookups_return_none_when_missing(self):
        self.assertIsNone(CommandType.from_command("zzz"))
        self.assertIsNone(CommandType.from_command("E"))
        self.assertIsNone(CommandType.from_name("emphasis"))

    def test_from_name(self):
        self.assertIs(CommandType.from_name("CODE"), CommandType.CODE)

    def test_str_and_canonical_command(self):
        self.assertEqual(str(CommandType.STRONG_EMPHASIS), "STRONG_EMPHASIS")
        self.assertEqual(CommandType.CURLY_BRACE_OPEN.canonical_command, "cb")


class TestTextSpan(unittest.TestCase):
    def test_collapses_space_runs(self):
        self.assertEqual(TextSpan("a   b").text, "a b")

    def test_run_collapses_to_its_first_character(self):
        self.assertEqual(TextSpan("a\t\tb").text, "a\tb")
        self.assertEqual(TextSpan("a \t b").text, "a b")
        self.assertEqual(TextSpan("a   b\tc").text, "a b\tc")

    def test_single_line_break_is_kept(self):
        self.assertEqual(TextSpan("a\nb").text, "a\nb")

    def test_rejects_multiple_line_breaks(self):
        with self.assertRaises(MultipleLineBreaksError) as ctx:
            TextSpan("line1\n\nline2")
        self.assertIsInstance(ctx.exception, DescriptionError)

    def test_is_immutable(self):
        span = TextSpan("x")
        with self.assertRaises(AttributeError):
            span.text = "y"

    def test_str(self):
        self.assertEqual(str(TextSpan("plain  text")), "plain text")


class TestCommandSpan(unittest.TestCase):
    def test_serializes_with_canonical_alias(self):
        span = CommandSpan(CommandType.CURLY_BRACE_OPEN, TextSpan("x"))
        self.assertEqual(str(span), "{cb x}")

    def test_empty_content_has_no_space(self):
        self.assertEqual(str(CommandSpan(CommandType.PROPER_NAME, TextSpan(""))), "{p}")

    def test_single_special_character_is_escaped(self):
        self.assertEqual(str(CommandSpan(CommandType.CODE, TextSpan("\\"))), "{c \\\\}")
        self.assertEqual(str(CommandSpan(CommandType.CODE, TextSpan("{"))), "{c \\{}")
        self.assertEqual(str(CommandSpan(CommandType.CODE, TextSpan("}"))), "{c \\}}")

    def test_special_characters_in_longer_content_are_not_escaped(self):
        self.assertEqual(str(CommandSpan(CommandType.CODE, TextSpan("a\\b"))), "{c a\\b}")
        self.assertEqual(str(CommandSpan(CommandType.CODE, TextSpan("{}"))), "{c {}}")


class TestBlocks(unittest.TestCase):
    def test_paragraph_is_wrapped_in_line_breaks(self):
        paragraph = Paragraph([
            TextSpan("Hello "),
            CommandSpan(CommandType.EMPHASIS, TextSpan("world")),
            TextSpan("."),
        ])
        self.assertEqual(str(paragraph), "\nHello {e world}.\n")

    def test_list_items_and_indented_line_breaks(self):
        lst = DescriptionList([
            [TextSpan("one")],
            [TextSpan("two\nmore\nand more")],
        ])
        self.assertEqual(str(lst), "\n* one\n* two\n  more\n  and more\n")

    def test_empty_list(self):
        self.assertEqual(str(DescriptionList([])), "\n\n")

    def test_sequences_are_stored_as_tuples(self):
        lst = DescriptionList([[TextSpan("a")]])
        self.assertIsInstance(lst.items, tuple)
        self.assertIsInstance(lst.items[0], tuple)

    def test_description_strips_surrounding_whitespace(self):
        description = Description([
            Paragraph([TextSpan("Intro")]),
            DescriptionList([[TextSpan("a")], [TextSpan("b")]]),
            Paragraph([TextSpan("Outro")]),
        ])
        self.assertEqual(str(description), "Intro\n\n* a\n* b\n\nOutro")

    def test_nodes_compare_by_value(self):
        self.assertEqual(
            Paragraph([TextSpan("a  b")]),
            Paragraph((TextSpan("a b"),)),
        )


class TestErrors(unittest.TestCase):
    def test_cause_is_linked_once(self):
        first = UnknownCommandError("zzz")
        second = DescriptionError("other")
        err = DescriptionError("Failed", cause=first)
        err.init_cause(second)
        self.assertIs(err.cause, first)
        self.assertIs(err.__cause__, first)

    def test_init_cause_on_error_without_cause(self):
        err = DescriptionError("Failed")
        self.assertIsNone(err.cause)
        cause = ValueError("boom")
        err.init_cause(cause)
        self.assertIs(err.cause, cause)

    def test_message_defaults_to_empty(self):
        self.assertEqual(DescriptionError().message, "")
        self.assertEqual(str(UnknownCommandError("zzz")), 'Unknown command "zzz"')


if __name__ == "__main__":
    unittest.main(verbosity=2)
