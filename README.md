# gymdesk

A console front desk for a small gym. It keeps three registers:

- **members**: first name, last name, date of enrolment, length of the
  subscription in months, and the expiry date worked out from them;
- **courses**: lessons with a date, a start time and a participant count;
- **bookings**: which member has booked which course, and on what day.

The menus and prompts are in Italian.

## Data files

Each register is a plain text file in one directory, one record per line, with
fields separated by spaces:

| file               | line layout                                             |
|--------------------|---------------------------------------------------------|
| `iscritti.txt`     | `ID nome cognome giorno mese anno durata`               |
| `corsi.txt`        | `ID nome giorno mese anno HH:MM partecipanti`           |
| `prenotazioni.txt` | `IDPrenotazione IDCorso IDCliente giorno mese anno`     |

IDs look like `CLT001`, `CRS001` and `PRT001`. New IDs carry on from the
highest number found in the files at start-up. Names are single words, since
fields are split on whitespace.

All three files must exist; empty files are fine for a fresh start. If one is
missing, the program prints `Errore apertura file iscritti` (or `corsi`,
`prenotazioni`) and stops. The files concerned are written again after every
change and all three once more when the program exits, including on end of
input.

## Installing

```
pip install .
```

## Running

```
gymdesk [--data-dir DIR] [--no-clear] [--check-dates [PATH]]
```

- `--data-dir DIR`: directory holding the three data files (default: the
  current directory).
- `--no-clear`: never clear the screen between menus. Without it the screen is
  cleared with `clear` (or `cls` on Windows).
- `--check-dates [PATH]`: read groups of four numbers (day, month, year,
  months) from `PATH` (default `testDataInput.txt`), print each date and its
  expiry date, and exit.

The main menu leads to:

- **Gestione Clienti**: add a member, renew a subscription, search by ID,
  first name, last name or subscription length, list members in short or full
  form, delete a member together with all of their bookings.
- **Gestione Corso**: add a course, search by ID, name, date or time, list
  courses, delete a course together with all of its bookings.
- **Gestione Prenotazione**: book a member on a course (dated today), list a
  member's or a course's bookings, list all bookings, cancel a booking.

Courses hold at most 20 participants in the sense that full courses are left
out of listings; booking does not refuse a full course.

## What it does not do

- The main menu's **Report Mensile** entry does nothing.
- The course search **Lezione Imminente** shows an empty screen.
- Searching members by first or last name compares only the most recently
  added member in each hash-table bucket, so it can miss matches; searching by
  ID or by subscription length looks at every member.

## Using it as a library

```python
from gymdesk.storage import Gym

gym = Gym.load(".")
for member in gym.members:
    print(member.summary_row())
gym.save()
```

The modules:

- `gymdesk.dates`: `Date` (with `expiry` and `compare`), `parse_date` for
  `GG/MM/AAAA` text, and `today`;
- `gymdesk.members`: `Member`, with `expires`, `renew`, `describe`,
  `summary_row` and `to_record`;
- `gymdesk.courses`: `Course` and `LessonTime`;
- `gymdesk.bookings`: `Booking`;
- `gymdesk.member_table`: `MemberTable`, a hash table keyed by member ID using
  `fnv1a_32`;
- `gymdesk.course_list`: `CourseList`;
- `gymdesk.booking_list`: `BookingList`;
- `gymdesk.storage`: `Gym`, `IdGenerator`, `load_members`, `load_courses`,
  `load_bookings`;
- `gymdesk.console`: `Console`, the terminal input/output used by the menus;
- `gymdesk.member_menu`, `gymdesk.course_menu`, `gymdesk.booking_menu`: the
  interactive menus;
- `gymdesk.cli`: `main` and `check_dates`;
- `gymdesk.pqueue`: `MaxHeap`, a bounded max-priority queue of integers
  (capacity 50 by default, `HeapFullError` when full). The menus do not use it.

## Tests

```
pip install .[test]
pytest
```