import io

import pytest

from gymdesk.booking_menu import booking_menu
from gymdesk.bookings import Booking
from gymdesk.console import Console
from gymdesk.courses import Course, LessonTime
from gymdesk.dates import Date, today
from gymdesk.members import Member
from gymdesk.storage import BOOKINGS_FILE, COURSES_FILE, Gym


def make_gym(tmp_path):
    gym = Gym(tmp_path)
    gym.members.insert(Member("CLT001", "Mario", "Rossi", Date(1, 1, 2025), 3))
    gym.members.insert(Member("CLT002", "Anna", "Bianchi", Date(2, 2, 2025), 6))
    gym.courses.insert(0, Course("CRS001", "Yoga", Date(10, 5, 2025), LessonTime(18, 30)))
    return gym


def run(gym, text):
    out = io.StringIO()
    console = Console(io.StringIO(text), out, clear_command=None)
    booking_menu(gym, console)
    return out.getvalue()


def test_add_booking(tmp_path):
    gym = make_gym(tmp_path)
    output = run(gym, "1\nCLT001\nCRS001\n\n")
    assert "PRENOTAZIONE AGGIUNTA" in output
    assert len(gym.bookings) == 1
    booking = gym.bookings.first()
    assert booking.booking_id == "PRT001"
    assert booking.member_id == "CLT001"
    assert booking.course_id == "CRS001"
    assert booking.date == today()
    assert gym.courses.first().participants == 1
    saved = (tmp_path / BOOKINGS_FILE).read_text(encoding="utf-8")
    assert saved == booking.to_record() + "\n"
    assert (tmp_path / COURSES_FILE).read_text(encoding="utf-8").startswith("CRS001 Yoga")


def test_add_booking_unknown_member(tmp_path):
    gym = make_gym(tmp_path)
    output = run(gym, "1\nCLT999\n")
    assert "CLIENTE NON TROVATO" in output
    assert len(gym.bookings) == 0


def test_add_booking_unknown_course(tmp_path):
    gym = make_gym(tmp_path)
    output = run(gym, "1\nCLT001\nCRS999\n")
    assert "CORSO NON TROVATO" in output
    assert len(gym.bookings) == 0
    assert gym.courses.first().participants == 0


def test_search_bookings_of_member(tmp_path):
    gym = make_gym(tmp_path)
    booking = Booking("PRT007", "CRS001", "CLT001", Date(3, 3, 2025))
    gym.bookings.insert(0, booking)
    output = run(gym, "2\n1\nCLT001\n")
    assert "ELENCO PRENOTAZIONI" in output
    assert booking.describe() in output


def test_search_member_without_bookings(tmp_path):
    gym = make_gym(tmp_path)
    output = run(gym, "2\n1\nCLT002\n")
    assert "IL CLIENTE NON HA PRENOTAZIONI" in output


def test_search_course_without_bookings(tmp_path):
    gym = make_gym(tmp_path)
    output = run(gym, "2\n2\nCRS001\n")
    assert "IL CORSO NON HA PRENOTATI" in output


def test_list_bookings(tmp_path):
    gym = make_gym(tmp_path)
    booking = Booking("PRT001", "CRS001", "CLT002", Date(4, 4, 2025))
    gym.bookings.insert(0, booking)
    output = run(gym, "3\n")
    assert booking.describe() in output


def test_list_no_bookings(tmp_path):
    gym = make_gym(tmp_path)
    output = run(gym, "3\n")
    assert "Non ci sono prenotazioni." in output


def test_cancel_booking(tmp_path):
    gym = make_gym(tmp_path)
    gym.bookings.insert(0, Booking("PRT001", "CRS001", "CLT001", Date(3, 3, 2025)))
    gym.courses.first().add_participant()
    output = run(gym, "4\nCLT001\nPRT001\n")
    assert "PRENOTAZIONE CANCELLATA" in output
    assert len(gym.bookings) == 0
    assert gym.courses.first().participants == 0
    assert (tmp_path / BOOKINGS_FILE).read_text(encoding="utf-8") == ""


def test_cancel_missing_booking(tmp_path):
    gym = make_gym(tmp_path)
    gym.bookings.insert(0, Booking("PRT001", "CRS001", "CLT001", Date(3, 3, 2025)))
    output = run(gym, "4\nCLT001\nPRT404\n")
    assert "PRENOTAZIONE INESISTENTE" in output
    assert len(gym.bookings) == 1


def test_cancel_booking_of_other_member(tmp_path):
    gym = make_gym(tmp_path)
    gym.bookings.insert(0, Booking("PRT001", "CRS001", "CLT002", Date(3, 3, 2025)))
    gym.bookings.insert(0, Booking("PRT002", "CRS001", "CLT001", Date(3, 3, 2025)))
    output = run(gym, "4\nCLT001\nPRT001\n")
    assert "PRENOTAZIONE NON CANCELLATA" in output
    assert len(gym.bookings) == 2


def test_cancel_unknown_member(tmp_path):
    gym = make_gym(tmp_path)
    output = run(gym, "4\nCLT404\n")
    assert "Cliente non trovato" in output


def test_invalid_choice_then_back(tmp_path):
    gym = make_gym(tmp_path)
    output = run(gym, "9\n5\n")
    assert output.count("Scelta non valida") == 1
    assert output.count("GESTORE PRENOTAZIONI") == 2


def test_end_of_input(tmp_path):
    gym = make_gym(tmp_path)
    with pytest.raises(EOFError):
        run(gym, "")