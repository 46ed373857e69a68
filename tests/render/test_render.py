from pqsystem import classify_all, render_table


def test_render_table_matches_layout():
    table = render_table(classify_all(["pq-", "xyz"]))
    assert table == (
        "┍" + "━" * 45 + "┑\n"
        "│ Input No. │ Valid │ Axiom │ Theorem │ Input │\n"
        "├" + "─" * 45 + "┤\n"
        "│         1 │ true  │ true  │ true    │ pq-   │\n"
        "│         2 │ false │ false │ false   │ xyz   │\n"
        "└" + "─" * 45 + "┘\n"
    )


def test_render_table_widens_input_column_for_long_inputs():
    long_input = "--p------q--------"
    lines = render_table(classify_all([long_input, "pq-"])).splitlines()
    widths = {len(line) for line in lines}
    assert len(widths) == 1
    assert lines[1].endswith("│ Input" + " " * (len(long_input) - 4) + "│")
    assert f"│ {long_input} │" in lines[3]


def test_render_table_without_results():
    lines = render_table([]).splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("┍")
    assert lines[-1].startswith("└")
