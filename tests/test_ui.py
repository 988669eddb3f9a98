import io

import pytest

from flightdesk.flight import Flight
from flightdesk.service import FlightService
from flightdesk.ui import ConsoleUi, main


def make_ui(text, flights=()):
    service = FlightService()
    for flight in flights:
        service.add_flight(flight)
    out = io.StringIO()
    ui = ConsoleUi(service, io.StringIO(text), out)
    return ui, service, out


SAMPLE = [
    Flight("1", "OTP", "LHR", 180, 100, 500),
    Flight("2", "OTP", "CDG", 90, 10, 300),
]


def test_show_menu_lists_all_options():
    ui, _, out = make_ui("")
    ui.show_menu()
    lines = out.getvalue().splitlines()
    assert lines[0] == "1.Adaugare zbor"
    assert lines[-1] == "7.Iesire"
    assert len(lines) == 7


def test_add_flight_through_menu():
    ui, service, _ = make_ui("1 X OTP LHR 90 10 300\n7\n")
    ui.run()
    assert service.find_flight("X") == Flight("X", "OTP", "LHR", 90, 10, 300)


def test_print_all_flights_format():
    ui, _, out = make_ui("", SAMPLE)
    ui.print_all_flights()
    assert out.getvalue().splitlines() == [
        "ID: 1, Plecare: OTP, Destinatie: LHR, Durata: 180, Locuri disponibile: 100, Pret bilet: 500",
        "ID: 2, Plecare: OTP, Destinatie: CDG, Durata: 90, Locuri disponibile: 10, Pret bilet: 300",
    ]


def test_print_short_flights():
    ui, _, out = make_ui("", SAMPLE)
    ui.print_short_flights()
    assert out.getvalue().splitlines() == ["ID: 2, Plecare: OTP, Destinatie: CDG, Durata: 90"]


def test_raise_prices_reports_change():
    ui, service, out = make_ui("", SAMPLE)
    ui.raise_prices()
    assert "au fost majorate cu 10%." in out.getvalue()
    assert service.find_flight("2").price > 300
    assert service.find_flight("1").price == 500


def test_raise_prices_reports_nothing_to_do():
    ui, _, out = make_ui("", SAMPLE[:1])
    ui.raise_prices()
    assert out.getvalue().startswith("Nu exista zboruri cu mai putin de 20 de locuri!")


def test_split_long_flights_messages():
    ui, service, out = make_ui("", [Flight("9", "OTP", "NRT", 800, 90, 900)])
    ui.split_long_flights()
    ui.split_long_flights()
    assert out.getvalue().splitlines() == [
        "Zborurile peste 12 ore au fost fragmentate in 3 cu doua escale tehnice!",
        "Nu exista zboruri cu durata peste 12 ore!",
    ]
    assert [f.id for f in service.all_flights()] == ["9_A", "9_B", "9_C"]


def test_print_statistics():
    ui, _, out = make_ui("", SAMPLE)
    ui.print_statistics()
    assert out.getvalue().splitlines() == [
        "Total zboruri: 2",
        "Total locuri disponibile: 110",
        "Total pret bilete: 800",
    ]


def test_unknown_option_message():
    ui, _, out = make_ui("9\nabc\n7\n")
    ui.run()
    assert out.getvalue().count("Optiune inexistenta") == 3


def test_run_stops_on_end_of_input():
    ui, service, out = make_ui("2\n", SAMPLE)
    ui.run()
    assert out.getvalue().count("7.Iesire") == 2
    assert len(service.all_flights()) == 2


def test_bad_number_while_adding_is_reported():
    ui, service, out = make_ui("1 X OTP LHR many 10 300\n7\n")
    ui.run()
    assert "Valoare invalida" in out.getvalue()
    assert service.all_flights() == []


def test_input_ending_while_adding_stops():
    ui, service, _ = make_ui("1 X OTP\n")
    ui.run()
    assert service.all_flights() == []


def test_main_runs_until_exit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("6\n7\n"))
    assert main([]) == 0
    assert "Total zboruri: 0" in capsys.readouterr().out


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])