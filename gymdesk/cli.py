"""Command-line entry point of the gym manager."""

from __future__ import annotations

import argparse
from pathlib import Path

from .booking_menu import booking_menu
from .console import Console
from .course_menu import course_menu
from .dates import Date
from .member_menu import member_menu
from .storage import BOOKINGS_FILE, COURSES_FILE, MEMBERS_FILE, Gym

DEFAULT_DATES_FILE = "testDataInput.txt"

_FILE_LABELS = {
    MEMBERS_FILE: "iscritti",
    COURSES_FILE: "corsi",
    BOOKINGS_FILE: "prenotazioni",
}

_MAIN_MENU = (
    "Gestore Palestra\n"
    "1. Gestione Clienti\n"
    "2. Gestione Corso\n"
    "3. Gestione Prenotazione\n"
    "4. Report Mensile\n"
    "5. Esci\n"
)


def check_dates(path: str | Path) -> list[tuple[Date, Date | None]]:
    """Read day, month, year and duration groups; return each date with its expiry."""
    numbers = [int(token) for token in Path(path).read_text(encoding="utf-8").split()]
    if len(numbers) % 4:
        raise ValueError(f"{path}: incomplete record")
    pairs: list[tuple[Date, Date | None]] = []
    for start in range(0, len(numbers), 4):
        day, month, year, months = numbers[start:start + 4]
        date = Date(day, month, year)
        pairs.append((date, date.expiry(months) if months > 0 else None))
    return pairs


def _run_menus(gym: Gym, console: Console) -> None:
    menus = {"1": member_menu, "2": course_menu, "3": booking_menu}
    while True:
        console.clear()
        console.write(_MAIN_MENU)
        choice = console.read_choice()
        if choice == "5":
            return
        menu = menus.get(choice)
        if menu is not None:
            menu(gym, console)
        elif choice != "4":
            console.write("Scelta non valida \n")


def main(argv: list[str] | None = None) -> int:
    """Run the gym manager; return the exit status."""
    parser = argparse.ArgumentParser(prog="gymdesk", description="Gym members, courses and bookings.")
    parser.add_argument("--data-dir", default=".", help="directory holding the data files")
    parser.add_argument("--no-clear", action="store_true", help="never clear the screen")
    parser.add_argument(
        "--check-dates",
        nargs="?",
        const=DEFAULT_DATES_FILE,
        metavar="PATH",
        help="print dates and expiry dates read from PATH, then exit",
    )
    args = parser.parse_args(argv)

    if args.check_dates is not None:
        try:
            pairs = check_dates(args.check_dates)
        except OSError:
            print("Errore apertura file")
            return 1
        for date, expiry in pairs:
            print(date)
            print(expiry if expiry is not None else "Valori inesistenti")
        return 0

    try:
        gym = Gym.load(args.data_dir)
    except OSError as exc:
        name = Path(exc.filename).name if exc.filename else ""
        print(f"Errore apertura file {_FILE_LABELS.get(name, name)}")
        return 0

    console = Console(clear_command=None) if args.no_clear else Console()
    try:
        _run_menus(gym, console)
    except EOFError:
        pass
    gym.save()
    return 0