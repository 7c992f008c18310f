"""Console front desk for a gym: members, courses and bookings in text files."""

__version__ = "0.1.0"