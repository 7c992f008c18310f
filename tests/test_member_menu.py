import io

import pytest

from gymdesk.bookings import Booking
from gymdesk.console import Console
from gymdesk.dates import Date
from gymdesk.member_menu import member_menu
from gymdesk.members import Member
from gymdesk.storage import BOOKINGS_FILE, MEMBERS_FILE, Gym


def run(gym, text):
    out = io.StringIO()
    console = Console(io.StringIO(text), out, clear_command=None)
    member_menu(gym, console)
    return out.getvalue()


@pytest.fixture
def gym(tmp_path):
    return Gym(tmp_path)


@pytest.fixture
def gym_with_member(gym):
    gym.members.insert(Member("CLT001", "Mario", "Rossi", Date(1, 2, 2024), 3))
    gym.ids.member = 1
    return gym


def test_add_member_creates_and_saves(gym):
    output = run(gym, "1\nMario\nRossi\n01/02/2024\n3\n")
    assert len(gym.members) == 1
    member = gym.members.find("CLT001")
    assert member.first_name == "Mario"
    assert member.last_name == "Rossi"
    assert member.joined == Date(1, 2, 2024)
    assert member.months == 3
    assert "CLIENTE AGGIUNTO" in output
    saved = (gym.directory / MEMBERS_FILE).read_text(encoding="utf-8")
    assert saved == member.to_record() + "\n"


def test_add_member_reprompts_on_invalid_date(gym):
    output = run(gym, "1\nMario\nRossi\n40/02/2024\n05/06/2024\n3\n")
    assert "Data non valida" in output
    member = next(iter(gym.members))
    assert member.joined == Date(5, 6, 2024)


def test_renew_extends_subscription(gym_with_member):
    member = gym_with_member.members.find("CLT001")
    original = member.months
    output = run(gym_with_member, "2\nCLT001\n2\n")
    assert member.months == original + 2
    assert "CLIENTE AGGIORNATO" in output
    saved = (gym_with_member.directory / MEMBERS_FILE).read_text(encoding="utf-8")
    assert saved == member.to_record() + "\n"


def test_renew_zero_reports_invalid_data(gym_with_member):
    member = gym_with_member.members.find("CLT001")
    original = member.months
    output = run(gym_with_member, "2\nCLT001\n-1\n0\n")
    assert "DATI NON VALIDI" in output
    assert member.months == original


def test_renew_unknown_member(gym_with_member):
    output = run(gym_with_member, "2\nCLT999\n")
    assert "CLIENTE INESISTENTE" in output


def test_search_by_id_shows_member(gym_with_member):
    member = gym_with_member.members.find("CLT001")
    output = run(gym_with_member, "3\n1\nCLT001\n")
    assert member.describe() in output


def test_search_by_first_name_missing(gym_with_member):
    output = run(gym_with_member, "3\n2\nLuigi\n")
    assert "CLIENTE INESISTENTE" in output


def test_search_by_months_shows_member(gym_with_member):
    member = gym_with_member.members.find("CLT001")
    output = run(gym_with_member, "3\n4\n3\n")
    assert member.describe() in output


def test_list_members_summary(gym_with_member):
    output = run(gym_with_member, "4\n1\n")
    assert gym_with_member.members.summary() in output


def test_list_members_extended(gym_with_member):
    output = run(gym_with_member, "4\n2\n")
    assert gym_with_member.members.describe() in output


def test_delete_member_removes_bookings(gym_with_member):
    gym = gym_with_member
    gym.bookings.insert(0, Booking("PRT001", "CRS001", "CLT001", Date(1, 3, 2024)))
    gym.bookings.insert(0, Booking("PRT002", "CRS002", "CLT001", Date(2, 3, 2024)))
    kept = Booking("PRT003", "CRS001", "CLT002", Date(3, 3, 2024))
    gym.bookings.insert(0, kept)
    output = run(gym, "5\nCLT001\n")
    assert len(gym.members) == 0
    assert list(gym.bookings) == [kept]
    assert "N° Prenotazioni Cancellate: 2" in output
    assert (gym.directory / MEMBERS_FILE).read_text(encoding="utf-8") == ""
    saved = (gym.directory / BOOKINGS_FILE).read_text(encoding="utf-8")
    assert saved == kept.to_record() + "\n"


def test_delete_unknown_member(gym_with_member):
    output = run(gym_with_member, "5\nCLT999\n")
    assert "CLIENTE INESISTENTE" in output
    assert len(gym_with_member.members) == 1


def test_back_leaves_data_untouched(gym_with_member):
    output = run(gym_with_member, "6\n")
    assert "GESTORE CLIENTI" in output
    assert len(gym_with_member.members) == 1


def test_invalid_choice_shows_menu_again(gym):
    output = run(gym, "9\n6\n")
    assert output.count("GESTORE CLIENTI") == 2


def test_end_of_input_raises(gym):
    with pytest.raises(EOFError):
        run(gym, "")