"""
Telnet control-sequence filter for VPP CLI replies.

The VPP CLI socket talks to its clients as a telnet-style terminal: option
negotiations (IAC WILL/WONT/DO/DONT <opt>), sub-negotiation blocks
(IAC SB ... IAC SE) and single-byte commands are interleaved with the
printable reply. TelnetFilter removes them in one left-to-right pass and
keeps its state between chunks, so a sequence split across two socket
reads is still removed.
"""

IAC = 255   # Interpret As Command
DONT = 254
DO = 253
WONT = 252
WILL = 251
SB = 250    # Sub-negotiation begin
SE = 240    # Sub-negotiation end

NEGOTIATION_COMMANDS = frozenset((WILL, WONT, DO, DONT))

# Filter states
NORMAL = 0
ESCAPED = 1
SUBNEGOTIATION = 2
OPTION = 3


class TelnetFilter:
    """Stream filter that strips telnet commands from a byte stream."""

    def __init__(self):
        self.state = NORMAL
        # Set while inside SB ... when the previous byte was IAC
        self._sb_escape = False

    def reset(self) -> None:
        """Forget any partial sequence and return to the normal state."""
        self.state = NORMAL
        self._sb_escape = False

    def feed(self, data: bytes) -> bytes:
        """
        Filter one chunk of a reply.

        Args:
            data: Raw bytes as read from the socket

        Returns:
            The payload bytes of this chunk with all control sequences removed.
            A doubled IAC yields a single literal 0xFF byte.
        """
        out = bytearray()
        state = self.state

        for byte in data:
            if state == NORMAL:
                if byte == IAC:
                    state = ESCAPED
                else:
                    out.append(byte)

            elif state == ESCAPED:
                if byte == IAC:
                    out.append(IAC)
                    state = NORMAL
                elif byte == SB:
                    state = SUBNEGOTIATION
                    self._sb_escape = False
                elif byte in NEGOTIATION_COMMANDS:
                    state = OPTION
                else:
                    # Single-byte command (NOP, GA, AYT, ...)
                    state = NORMAL

            elif state == SUBNEGOTIATION:
                if self._sb_escape:
                    self._sb_escape = False
                    if byte == SE:
                        state = NORMAL
                elif byte == IAC:
                    self._sb_escape = True

            else:  # OPTION: discard the option byte
                state = NORMAL

        self.state = state
        return bytes(out)


def strip_telnet(data: bytes) -> bytes:
    """Filter a complete reply in a single call."""
    return TelnetFilter().feed(data)
