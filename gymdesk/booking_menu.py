"""Interactive menu for managing course bookings."""

from __future__ import annotations

from collections.abc import Callable

from .bookings import SEPARATOR, Booking
from .console import Console
from .dates import today
from .storage import BOOKINGS_FILE, COURSES_FILE, Gym

_BACK = "\nPremere invio per tornare indietro\n"


def _banner(title: str) -> str:
    return f"{SEPARATOR}\n{title}\n{SEPARATOR}\n"


def _fail(console: Console, title: str) -> None:
    console.clear()
    console.write(_banner(title))
    console.write(_BACK)
    console.pause()


def _save(gym: Gym) -> None:
    gym.bookings.save(gym.directory / BOOKINGS_FILE)
    gym.courses.save(gym.directory / COURSES_FILE)


def _add_booking(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("    AGGIUNGI PRENOTAZIONE"))
    console.write("\nInserisci l'ID del Cliente\n")
    console.write(gym.members.summary())
    member = gym.members.find(console.read_token())
    if member is None:
        _fail(console, "     CLIENTE NON TROVATO")
        return
    console.clear()
    console.write(f"{SEPARATOR}\n           CLIENTE\n")
    console.write(member.describe())
    console.write(f"{SEPARATOR}\n")
    console.write("\nInserisci l'ID del Corso\n")
    console.write(gym.courses.summary())
    course_id = console.read_token()
    course = gym.courses.find_by_id(course_id).first()
    if course is None:
        _fail(console, "      CORSO NON TROVATO")
        return
    console.write("\nPremere invio per continuare\n")
    console.pause()
    booking = Booking(gym.ids.next_booking_id(), course_id, member.member_id, today())
    gym.bookings.insert(0, booking)
    course.add_participant()
    console.clear()
    console.write(_banner("    PRENOTAZIONE AGGIUNTA"))
    console.write(booking.describe())
    _save(gym)
    console.write(_BACK)


def _bookings_of_member(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("  PRENOTAZIONI DI UN CLIENTE"))
    console.write("Inserisci l'ID del Cliente\n")
    member_id = console.read_token()
    member = gym.members.find(member_id)
    if member is None:
        _fail(console, "     CLIENTE NON TROVATO")
        return
    console.write(member.describe())
    result = gym.bookings.find_by_member(member_id)
    if not result:
        _fail(console, "IL CLIENTE NON HA PRENOTAZIONI")
        return
    console.write(_banner("     ELENCO PRENOTAZIONI"))
    console.write(result.describe())
    console.write(_BACK)
    console.pause()


def _bookings_of_course(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("    PRENOTATI DI UN CORSO"))
    console.write("Inserisci l'ID del Corso\n")
    result = gym.bookings.find_by_course(console.read_token())
    if not result:
        _fail(console, "  IL CORSO NON HA PRENOTATI")
        return
    console.write(_banner("     ELENCO PRENOTAZIONI"))
    console.write(result.describe())
    console.write(_BACK)
    console.pause()


_SEARCHES: dict[str, Callable[[Gym, Console], None]] = {
    "1": _bookings_of_member,
    "2": _bookings_of_course,
}


def _search_bookings(gym: Gym, console: Console) -> None:
    while True:
        console.clear()
        console.write(_banner("     RICERCA PRENOTAZIONI"))
        console.write(
            "Cosa vuoi Cercare?\n1. Prenotazioni di un Cliente\n"
            "2. Prenotati di un Corso\n3. Esci\n"
        )
        choice = console.read_choice()
        if choice == "3":
            return
        search = _SEARCHES.get(choice)
        if search is not None:
            search(gym, console)
            return


def _list_bookings(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("     ELENCO PRENOTAZIONI"))
    console.write(gym.bookings.describe())
    console.write(_BACK)
    console.pause()


def _cancel_booking(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("\tCANCELLA PRENOTAZIONE"))
    console.write("Inserisci l'ID del Cliente\n")
    member_id = console.read_token()
    if member_id not in gym.members:
        _fail(console, "     Cliente non trovato")
        return
    own = gym.bookings.find_by_member(member_id)
    if not own:
        _fail(console, "IL CLIENTE NON HA PRENOTAZIONI")
        return
    console.write(_banner("     ELENCO PRENOTAZIONI"))
    console.write(own.describe())
    console.write("Inserire l'ID della Prenotazione da Cancellare\n")
    booking_id = console.read_token()
    target = gym.bookings.find_by_id(booking_id).first()
    if target is None:
        _fail(console, "   PRENOTAZIONE INESISTENTE")
        return
    try:
        gym.bookings.cancel(booking_id, member_id)
    except KeyError:
        _fail(console, " PRENOTAZIONE NON CANCELLATA")
        return
    course = gym.courses.find_by_id(target.course_id).first()
    if course is None:
        console.write("Il corso non esiste\n")
    else:
        course.remove_participant()
    console.clear()
    console.write(_banner("   PRENOTAZIONE CANCELLATA"))
    _save(gym)
    console.write(_BACK)
    console.pause()


_ACTIONS: dict[str, Callable[[Gym, Console], None]] = {
    "1": _add_booking,
    "2": _search_bookings,
    "3": _list_bookings,
    "4": _cancel_booking,
}


def booking_menu(gym: Gym, console: Console) -> None:
    """Run the bookings menu until one action is done or the user goes back."""
    while True:
        console.clear()
        console.write(_banner("     GESTORE PRENOTAZIONI"))
        console.write(
            "1. Prenota Corso\n2. Ricerca Prenotazione\n3. Elenco Prenotazione\n"
            "4. Elimina Prenotazione\n5. Torna al Menù\n"
        )
        choice = console.read_choice()
        if choice == "5":
            return
        action = _ACTIONS.get(choice)
        if action is None:
            console.write("Scelta non valida \n")
            continue
        action(gym, console)
        return