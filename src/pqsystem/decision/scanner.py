"""
Left-to-right scanner for pq-system strings.

The scanner reads the input one character at a time, the way a lexer keeps
its place in a grammar, and maintains which region of the string it is in.

SCAN RULES
----------

- end of input      → scan succeeds (valid)
- '-'               → count a hyphen in the current region
- 'p' / 'P'         → region becomes BETWEEN
- 'q' / 'Q'         → region becomes AFTER_MARKER
- anything else     → scan fails (invalid) and stops immediately

Markers are NOT checked for order or multiplicity. A second 'p' after a 'q'
simply re-assigns the region to BETWEEN. The grammar as implemented accepts
such strings and this module reproduces it literally.
"""

from __future__ import annotations

from ..logging import logger

from .models import Region, ScanState, Token

_TOKENS = {
    "p": Token.P,
    "P": Token.P,
    "q": Token.Q,
    "Q": Token.Q,
    "-": Token.HYPHEN,
}

_MARKER_REGIONS = {
    Token.P: Region.BETWEEN,
    Token.Q: Region.AFTER_MARKER,
}


class PQScanner:
    """
    Scan a raw string into per-region hyphen counts and a validity flag.

    The scan is a single iterative pass with constant extra state, so it
    terminates for any finite input and has no recursion depth limit.
    """

    def munch(self, state: ScanState) -> Token:
        """
        Recognise the token at the current place.

        Place advances past every recognised character and past the end of
        input, but NOT past an unknown character: the unknown character was
        never consumed.
        """
        if state.at_end():
            state.place += 1
            return Token.DONE

        token = _TOKENS.get(state.input[state.place], Token.UNKNOWN)
        if token is not Token.UNKNOWN:
            state.place += 1
        return token

    def scan(self, text: str) -> ScanState:
        """
        Run the scan over ``text``.

        Args:
            text: Any string, including the empty string

        Returns:
            Finished ScanState with ``valid`` set
        """
        state = ScanState(input=text)

        while True:
            token = self.munch(state)

            if token is Token.DONE:
                state.valid = True
                break
            if token is Token.UNKNOWN:
                state.valid = False
                logger.debug(
                    "Scan: unknown character %r at position %d", text[state.place], state.place
                )
                break
            if token is Token.HYPHEN:
                state.counts.increment(state.region)
            else:
                state.region = _MARKER_REGIONS[token]

        logger.debug(
            "Scan: input=%r valid=%s counts=%s", text, state.valid, state.counts.as_tuple()
        )
        return state
