"""Identity types for records and callers.

Usage:
    record_id: SequenceId = 1
    owner: Principal = "alice"
"""

type SequenceId = int
"""Registry primary key. Issued from 1 upwards and never reused."""

type Principal = str
"""Identity that can own records and issue calls."""

FIRST_SEQUENCE_ID: SequenceId = 1
