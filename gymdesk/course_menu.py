"""Interactive menu for managing courses."""

from __future__ import annotations

import re
from collections.abc import Callable

from .console import Console
from .course_list import CourseList
from .courses import SEPARATOR, Course, LessonTime
from .dates import Date, parse_date
from .storage import BOOKINGS_FILE, COURSES_FILE, Gym

_BACK = "\nPremere invio per tornare indietro\n"
_TIME = re.compile(r"\s*(-?\d+)\s*:\s*(-?\d+)\s*")


def _banner(title: str) -> str:
    return f"{SEPARATOR}\n{title}\n{SEPARATOR}\n"


def _read_date(console: Console) -> Date:
    while True:
        try:
            return parse_date(console.read_token())
        except ValueError:
            console.write("Data non valida\nInserisci la nuova data (GG/MM/AAAA):\n")


def _read_time(console: Console) -> tuple[int, int]:
    token = console.read_token()
    match = _TIME.fullmatch(token)
    if match is None:
        raise ValueError(f"invalid time {token!r}")
    return int(match.group(1)), int(match.group(2))


def _save_courses(gym: Gym) -> None:
    gym.courses.save(gym.directory / COURSES_FILE)


def _show_result(console: Console, result: CourseList, title: str) -> None:
    if not result:
        console.write(_banner(title))
    else:
        console.write(result.describe())
    console.write(_BACK)
    console.pause()


def _add_course(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("        AGGIUNGI CORSO"))
    console.write("Inserisci il nome del corso:\n")
    name = console.read_token()
    console.write("Inserisci la data del corso (GG/MM/AAAA):\n")
    date = _read_date(console)
    console.write("Inserisci l'orario del corso (HH:MM)\n")
    course_id = gym.ids.next_course_id()
    try:
        hour, minute = _read_time(console)
        course = Course(course_id, name, date, LessonTime(hour, minute), 0)
    except ValueError:
        console.clear()
        console.write(_banner("    ERRORE NELLA CREAZIONE"))
        console.write(_BACK)
        console.pause()
        return
    gym.courses.insert(0, course)
    console.write(f"\n{SEPARATOR}\n        CORSO AGGIUNTO\n")
    console.write(course.describe())
    _save_courses(gym)
    console.write(_BACK)
    console.pause()


def _search_by_id(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("        RICERCA PER ID"))
    console.write("Inserisci l'ID del corso:\n")
    result = gym.courses.find_by_id(console.read_token())
    _show_result(console, result, "      CORSO INESISTENTE")


def _search_by_name(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("\tRICERCA PER NOME"))
    console.write("Inserisci il Nome del corso:\n")
    result = gym.courses.find_by_name(console.read_token())
    _show_result(console, result, "\tCORSO INESISTENTE")


def _next_lesson(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("\tLEZIONE IMMINENTE"))
    console.write(_BACK)
    console.pause()


def _search_by_date(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("\tRICERCA PER DATA"))
    console.write("Inserisci la data del corso (GG/MM/AAAA):\n")
    result = gym.courses.find_by_date(_read_date(console))
    _show_result(console, result, "\tCORSO INESISTENTE")


def _search_by_time(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner(" RICERCA PER ORARIO LEZIONI"))
    console.write("Inserisci l'orario del corso (HH:MM):\n")
    try:
        hour, minute = _read_time(console)
    except ValueError:
        result = CourseList()
    else:
        result = gym.courses.find_by_time(hour, minute)
    _show_result(console, result, "      CORSO INESISTENTE")


_SEARCHES: dict[str, Callable[[Gym, Console], None]] = {
    "1": _search_by_id,
    "2": _search_by_name,
    "3": _next_lesson,
    "4": _search_by_date,
    "5": _search_by_time,
}


def _search_course(gym: Gym, console: Console) -> None:
    while True:
        console.clear()
        console.write(_banner("         CERCA CORSO"))
        console.write(
            "1. ID\n2. Nome\n3. Lezione Imminente\n4. Data\n5. Orario\n6. Esci\n"
        )
        choice = console.read_choice()
        if choice == "6":
            return
        search = _SEARCHES.get(choice)
        if search is not None:
            search(gym, console)
            return


def _list_courses(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("         ELENCO CORSI"))
    console.write(gym.courses.describe())
    console.write("Premere invio per tornare indietro\n")
    console.pause()


def _delete_course(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("        ELIMINA CORSO"))
    console.write("Inserisci l'ID del corso da eliminare:\n")
    console.write("NB: Verranno cancellate tutte le prenotazioni associate al corso\n")
    console.write(gym.courses.summary())
    course_id = console.read_token()
    try:
        gym.courses.delete_course(course_id)
    except KeyError:
        console.write(_banner("      CORSO INESISTENTE"))
        console.write(_BACK)
        console.pause()
        return
    console.write(_banner("       CORSO CANCELLATO"))
    removed = gym.bookings.cancel_for_course(course_id)
    console.write(f"N° Prenotazioni Cancellate: {removed}\n")
    _save_courses(gym)
    gym.bookings.save(gym.directory / BOOKINGS_FILE)
    console.write(_BACK)
    console.pause()


_ACTIONS: dict[str, Callable[[Gym, Console], None]] = {
    "1": _add_course,
    "2": _search_course,
    "3": _list_courses,
    "4": _delete_course,
}


def course_menu(gym: Gym, console: Console) -> None:
    """Run the courses menu until one action is done or the user goes back."""
    while True:
        console.clear()
        console.write(_banner("        GESTORE CORSI"))
        console.write(
            "1. Aggiungi Corso\n2. Ricerca Corso\n3. Elenco Corsi\n"
            "4. Elimina Corso\n5. Torna al Menù\n"
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