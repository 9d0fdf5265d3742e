import pytest

from algonotes.log_stats import LogReport, Stats, main, parse_line


def _line(client, operation, latency):
    return (
        f'2024 INFO {{"_logLevel":"info","_msg":"done","queryHash":"h",'
        f'"clientName":"{client}","operationName":"{operation}","latency":{latency}}}'
    )


def test_parse_line_extracts_fields():
    assert parse_line(_line("web", "getUser", 12.5)) == ("web", "getUser", 12.5)


def test_parse_line_without_json_gives_none():
    assert parse_line("plain text line") is None


def test_parse_line_missing_fields_use_defaults():
    assert parse_line("prefix {}") == ("", "", 0.0)


def test_parse_line_ignores_trailing_text():
    assert parse_line('x {"clientName":"a","latency":3} trailing') == ("a", "", 3.0)


def test_parse_line_malformed_json_raises():
    with pytest.raises(ValueError):
        parse_line('x {"clientName": ')


def test_parse_line_non_numeric_latency_raises():
    with pytest.raises(ValueError):
        parse_line('{"latency": "fast"}')


def test_add_line_accumulates_per_service_and_operation():
    report = LogReport()
    assert report.add_line(_line("web", "getUser", 10))
    assert report.add_line(_line("web", "listUsers", 30))
    assert report.add_line(_line("batch", "getUser", 20))
    assert not report.add_line("no json here")

    web = report.by_service["web"]
    assert web.count == 2
    assert web.latency == pytest.approx(40)
    assert web.operations == {"getUser", "listUsers"}

    get_user = report.by_operation["getUser"]
    assert get_user.count == 2
    assert get_user.latency == pytest.approx(30)
    assert get_user.average == pytest.approx(15)


def test_counts_sum_to_records_added():
    report = LogReport()
    report.add_lines(_line(c, o, 1) for c in "abc" for o in "xy")
    assert sum(s.count for s in report.by_service.values()) == 6
    assert sum(s.count for s in report.by_operation.values()) == 6


def test_stats_average_of_empty_is_zero():
    assert Stats().average == 0.0


def test_render_layout():
    report = LogReport()
    report.add_line(_line("web", "getUser", 2.5))
    expected = (
        "======== SERVICES ========\n"
        "--- web ---\n"
        "cnt: 1\n"
        "latency: 2.5\n"
        "operations: getUser \n"
        "\n"
        "======== OPERATIONS ========\n"
        "--- getUser ---\n"
        "cnt: 1\n"
        "latency: 2.5\n"
        "average: 2.5\n"
        "\n"
    )
    assert report.render() == expected


def test_render_sorts_names():
    report = LogReport()
    report.add_line(_line("zeta", "b", 1))
    report.add_line(_line("alpha", "a", 1))
    text = report.render()
    assert text.index("--- alpha ---") < text.index("--- zeta ---")
    assert text.index("--- a ---") < text.index("--- b ---")


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "logs.txt"
    path.write_text(_line("web", "getUser", 4) + "\nbroken {\n", encoding="utf-8")
    assert main([str(path)]) == 0
    captured = capsys.readouterr()
    assert "--- web ---" in captured.out
    assert "Error on json parse" in captured.err


def test_main_missing_file_prints_empty_report(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 0
    out = capsys.readouterr().out
    assert out == LogReport().render()