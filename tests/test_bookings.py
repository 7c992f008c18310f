from gymdesk.bookings import Booking
from gymdesk.dates import Date


def make():
    return Booking("PRT001", "CRS002", "CLT003", Date(4, 7, 2025))


def test_describe_lines():
    assert make().describe().splitlines() == [
        "==============================",
        "ID Prenotazione: PRT001",
        "ID Corso: CRS002",
        "ID Cliente: CLT003",
        "Data Prenotazione: 4/7/2025",
    ]


def test_describe_ends_with_newline():
    assert make().describe().endswith("\n")


def test_to_record():
    assert make().to_record() == "PRT001 CRS002 CLT003 4 7 2025"


def test_record_fields_rebuild_booking():
    booking = make()
    bid, cid, mid, day, month, year = booking.to_record().split()
    assert Booking(bid, cid, mid, Date(int(day), int(month), int(year))) == booking