"""Interactive menu for managing gym members."""

from __future__ import annotations

from collections.abc import Callable

from .console import Console
from .dates import Date, parse_date
from .members import SEPARATOR, Member
from .storage import BOOKINGS_FILE, MEMBERS_FILE, Gym

_BACK = "\nPremere invio per tornare indietro\n"


def _banner(title: str) -> str:
    return f"{SEPARATOR}\n{title}\n{SEPARATOR}\n"


def _read_date(console: Console) -> Date:
    while True:
        try:
            return parse_date(console.read_token())
        except ValueError:
            console.write("Data non valida\nInserisci la nuova data (GG/MM/AAAA):\n")


def _read_number(console: Console) -> int:
    while True:
        try:
            return console.read_int()
        except ValueError:
            console.write("Valore non valido\n")


def _save_members(gym: Gym) -> None:
    gym.members.save(gym.directory / MEMBERS_FILE)


def _not_found(console: Console) -> None:
    console.clear()
    console.write(_banner("     CLIENTE INESISTENTE"))


def _add_member(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("       AGGIUNGI CLIENTE"))
    console.write("Inserisci nome\n")
    first_name = console.read_token()
    console.write("Inserisci cognome\n")
    last_name = console.read_token()
    console.write("Inserisci la data d'iscrizione(GG/MM/AAAA):\n")
    joined = _read_date(console)
    console.write("Inserisci la durata dell'abbonamento in mesi (ES. 1, 3, 6, ...)\n")
    months = _read_number(console)
    member = Member(gym.ids.next_member_id(), first_name, last_name, joined, months)
    try:
        gym.members.insert(member)
    except ValueError:
        console.clear()
        console.write(_banner("   ERRORE NELL'INSERIMENTO"))
        console.write(_BACK)
        console.pause()
        return
    console.write(f"\n{SEPARATOR}\n       CLIENTE AGGIUNTO\n")
    console.write(member.describe())
    _save_members(gym)
    console.write(_BACK)
    console.pause()


def _renew_member(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("     RINNOVO ABBONAMENTO"))
    console.write("Inserisci l'ID del Cliente\n")
    console.write(gym.members.summary())
    member = gym.members.find(console.read_token())
    if member is None:
        _not_found(console)
        console.write(_BACK)
        console.pause()
        return
    while True:
        console.write("Di quanti mesi vuoi espandere l'abbonamento?\n")
        months = _read_number(console)
        if months >= 0:
            break
    try:
        member.renew(months)
    except ValueError:
        console.write("DATI NON VALIDI\n")
    console.write(f"{SEPARATOR}\n      CLIENTE AGGIORNATO\n")
    console.write(member.describe())
    _save_members(gym)
    console.write(_BACK)
    console.pause()


def _show_matches(console: Console, matches: list[Member]) -> None:
    console.write("\n")
    if not matches:
        _not_found(console)
        return
    for member in matches:
        console.write(member.describe())


def _search_by_id(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("       RICERCA PER ID"))
    console.write("Inserisci l'ID del cliente\n")
    member = gym.members.find(console.read_token())
    console.write("\n")
    if member is None:
        _not_found(console)
        return
    console.write(member.describe())


def _search_by_first_name(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("       RICERCA PER NOME"))
    console.write("Inserisci il nome del cliente\n")
    _show_matches(console, gym.members.search_by_first_name(console.read_token()))


def _search_by_last_name(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("     RICERCA PER COGNOME"))
    console.write("Inserisci il cognome del cliente\n")
    _show_matches(console, gym.members.search_by_last_name(console.read_token()))


def _search_by_months(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("  RICERCA DURATA ABBONAMENTO"))
    console.write("Inserisci il numero di mesi\n")
    _show_matches(console, gym.members.search_by_months(_read_number(console)))


_SEARCHES: dict[str, Callable[[Gym, Console], None]] = {
    "1": _search_by_id,
    "2": _search_by_first_name,
    "3": _search_by_last_name,
    "4": _search_by_months,
}


def _search_member(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("     RICERCA ABBONAMENTO"))
    console.write(
        "Per cosa vuoi Ricercare?\n1. ID\n2. Nome\n3. Cognome\n"
        "4. Durata Abbonamento\n5. Esci\n"
    )
    search = _SEARCHES.get(console.read_choice())
    if search is not None:
        search(gym, console)
    console.write(_BACK)
    console.pause()


def _list_members(gym: Gym, console: Console) -> None:
    while True:
        console.clear()
        console.write(_banner("        ELENCO CLIENTI"))
        console.write(
            "Come vuoi visualizzare l'elenco?\n"
            "1. Visione Essenziale (ID, Cognome, Nome)\n"
            "2. Visione Estesa (Tutti i Dati)\n"
            "3. Esci\n"
        )
        choice = console.read_choice()
        if choice == "3":
            return
        if choice in ("1", "2"):
            console.clear()
            console.write(_banner("        ELENCO CLIENTI"))
            listing = gym.members.summary() if choice == "1" else gym.members.describe()
            console.write(listing)
            console.write("Premere invio per tornare indietro\n")
            console.pause()
            return


def _delete_member(gym: Gym, console: Console) -> None:
    console.clear()
    console.write(_banner("       CANCELLA CLIENTE"))
    console.write("Inserisci l'ID del Cliente da cancellare\n")
    console.write(gym.members.summary())
    try:
        member = gym.members.remove(console.read_token())
    except KeyError:
        _not_found(console)
        console.write(_BACK)
        console.pause()
        return
    console.write(_banner("      CLIENTE CANCELLATO"))
    removed = gym.bookings.cancel_for_member(member.member_id)
    console.write(f"N° Prenotazioni Cancellate: {removed}\n")
    _save_members(gym)
    gym.bookings.save(gym.directory / BOOKINGS_FILE)
    console.write(_BACK)
    console.pause()


_ACTIONS: dict[str, Callable[[Gym, Console], None]] = {
    "1": _add_member,
    "2": _renew_member,
    "3": _search_member,
    "4": _list_members,
    "5": _delete_member,
}


def member_menu(gym: Gym, console: Console) -> None:
    """Run the members menu until one action is done or the user goes back."""
    while True:
        console.clear()
        console.write(_banner("       GESTORE CLIENTI"))
        console.write(
            "1. Crea Abbonamento\n2. Rinnova Abbonamento\n3. Ricerca Abbonamento\n"
            "4. Elenco Clienti\n5. Elimina Abbonamento\n6. Torna al Menù\n"
        )
        choice = console.read_choice()
        if choice == "6":
            return
        action = _ACTIONS.get(choice)
        if action is not None:
            action(gym, console)
            return