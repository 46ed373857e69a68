from pqsystem.decision.models import Region, ScanState, Token
from pqsystem.decision.scanner import PQScanner


def test_munch_recognises_alphabet_case_insensitively():
    scanner = PQScanner()
    state = ScanState(input="pPqQ-")
    tokens = [scanner.munch(state) for _ in range(6)]
    assert tokens == [Token.P, Token.P, Token.Q, Token.Q, Token.HYPHEN, Token.DONE]


def test_munch_does_not_advance_past_unknown_character():
    scanner = PQScanner()
    state = ScanState(input="x")
    assert scanner.munch(state) == Token.UNKNOWN
    assert state.place == 0


def test_scan_counts_hyphens_per_region():
    state = PQScanner().scan("--p---q----")
    assert state.valid is True
    assert state.counts.as_tuple() == (2, 3, 4)
    assert state.region == Region.AFTER_MARKER


def test_scan_empty_string_is_valid():
    state = PQScanner().scan("")
    assert state.valid is True
    assert state.counts.as_tuple() == (0, 0, 0)
    assert state.region == Region.BEFORE_MARKER


def test_scan_stops_at_first_unknown_character():
    state = PQScanner().scan("-p-x-q--")
    assert state.valid is False
    assert state.place == 3
    assert state.counts.as_tuple() == (1, 1, 0)


def test_scan_accepts_repeated_markers_and_reassigns_region():
    state = PQScanner().scan("-q-p-")
    assert state.valid is True
    assert state.region == Region.BETWEEN
    assert state.counts.as_tuple() == (1, 1, 1)


def test_scan_handles_very_long_input_without_recursion():
    text = "-" * 50_000 + "p" + "q" + "-" * 50_001
    state = PQScanner().scan(text)
    assert state.valid is True
    assert state.counts.as_tuple() == (50_000, 0, 50_001)


def test_scan_does_not_mutate_input():
    text = "-p-q--"
    state = PQScanner().scan(text)
    assert state.input == text
