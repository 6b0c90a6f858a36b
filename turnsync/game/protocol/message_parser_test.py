from typing import List

from absl.testing import absltest, parameterized

from turnsync.game.exceptions import DecodeError, ProtocolError
from turnsync.game.protocol.message_parser import (
    LineKind,
    MessageParser,
    split_first,
)


class SplitFirstTest(parameterized.TestCase):
    @parameterized.parameters(
        ("move|p1a: Pikachu|Thunderbolt", "|", ("move", "p1a: Pikachu|Thunderbolt")),
        ("upkeep", "|", ("upkeep", "")),
        ("|", "|", ("", "")),
        ("error|[Invalid choice] Can't move", "|", ("error", "[Invalid choice] Can't move")),
    )
    def test_split_first(self, text: str, separator: str, expected: tuple) -> None:
        self.assertEqual(split_first(text, separator), expected)


class MessageParserTest(parameterized.TestCase):
    @parameterized.parameters(
        ("|move|p2a: Charizard|Flamethrower|p1a: Pikachu", "move"),
        ("|switch|p1a: Pikachu|Pikachu, L50|110/110", "switch"),
        ("|teampreview", "teampreview"),
        ("|teampreview|6", "teampreview"),
    )
    def test_parse_battle_update(self, raw_message: str, expected_cmd: str) -> None:
        parser = MessageParser()
        line = parser.parse(raw_message)
        self.assertEqual(line.kind, LineKind.BATTLE_UPDATE)
        self.assertEqual(line.cmd, expected_cmd)
        self.assertEqual(line.raw_message, raw_message)
        self.assertIsNone(line.request)

    @parameterized.parameters(
        ("|turn|1",),
        ("|-damage|p1a: Pikachu|80/110",),
        ("|drag|p1a: Pikachu|Pikachu, L50|110/110",),
        ("|",),
        ("|upkeep",),
    )
    def test_parse_opaque_protocol_line(self, raw_message: str) -> None:
        parser = MessageParser()
        line = parser.parse(raw_message)
        self.assertEqual(line.kind, LineKind.OPAQUE)

    @parameterized.parameters(
        ("sideupdate",),
        ("p1",),
        ("update",),
        (" |move|p1a: Pikachu|Thunderbolt",),
    )
    def test_parse_line_without_sigil_is_opaque(self, raw_message: str) -> None:
        parser = MessageParser()
        line = parser.parse(raw_message)
        self.assertEqual(line.kind, LineKind.OPAQUE)
        self.assertEqual(line.cmd, "")
        self.assertEqual(line.rest, "")

    def test_parse_request(self) -> None:
        parser = MessageParser()
        raw_message = '|request|{"wait": true, "side": {"name": "a|b", "pokemon": []}}'

        line = parser.parse(raw_message)

        self.assertEqual(line.kind, LineKind.REQUEST)
        self.assertEqual(line.cmd, "request")
        self.assertEqual(line.rest, '{"wait": true, "side": {"name": "a|b", "pokemon": []}}')
        assert line.request is not None
        self.assertTrue(line.request.wait)

    def test_parse_malformed_request_raises(self) -> None:
        parser = MessageParser()
        with self.assertRaises(DecodeError):
            parser.parse("|request|{not json")

    @parameterized.parameters(
        ("|error|Invalid choice", "Invalid choice"),
        ("|error|[Invalid choice] Can't switch: |x|", "[Invalid choice] Can't switch: |x|"),
        ("|error", ""),
    )
    def test_parse_error_raises_protocol_error(
        self, raw_message: str, expected_text: str
    ) -> None:
        parser = MessageParser()
        with self.assertRaises(ProtocolError) as context:
            parser.parse(raw_message)
        self.assertEqual(context.exception.error_text, expected_text)
        self.assertEqual(str(context.exception), expected_text)

    def test_extra_battle_update_commands(self) -> None:
        parser = MessageParser(extra_battle_update_commands=["cant", "drag"])

        self.assertEqual(parser.parse("|cant|p1a: Pikachu|par").kind, LineKind.BATTLE_UPDATE)
        self.assertEqual(parser.parse("|move|p1a: Pikachu|Tackle").kind, LineKind.BATTLE_UPDATE)
        self.assertEqual(MessageParser().parse("|cant|p1a: Pikachu|par").kind, LineKind.OPAQUE)
        self.assertEqual(
            MessageParser.BATTLE_UPDATE_COMMANDS,
            frozenset({"move", "switch", "teampreview"}),
        )

    def test_observer_sees_every_line_including_errors(self) -> None:
        seen: List[str] = []
        parser = MessageParser(line_observer=seen.append)

        parser.parse("update")
        parser.parse("|move|p1a: Pikachu|Tackle")
        with self.assertRaises(ProtocolError):
            parser.parse("|error|Invalid choice")

        self.assertEqual(
            seen, ["update", "|move|p1a: Pikachu|Tackle", "|error|Invalid choice"]
        )


if __name__ == "__main__":
    absltest.main()
