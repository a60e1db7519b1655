from dataclasses import dataclass
from datetime import date

import pytest

from faculty_schedule.core.enums import AttendanceMark, SelectAllState
from faculty_schedule.core.exceptions import ValidationError
from faculty_schedule.roster import operations
from faculty_schedule.roster.model import Roster, RosterEntry
from faculty_schedule.sessions.model import Session

P = AttendanceMark.PRESENT
A = AttendanceMark.ABSENT


def marks(roster: Roster):
    return [entry.status for entry in roster.entries]


def test_initialize_numbers_students_and_marks_present():
    roster = operations.initialize(5)

    assert [entry.student_number for entry in roster.entries] == [1, 2, 3, 4, 5]
    assert marks(roster) == [P] * 5
    assert roster.select_all_state == SelectAllState.ALL_PRESENT


@pytest.mark.parametrize("size", [0, -3, 2.5, "many", None, True])
def test_initialize_rejects_non_positive_sizes(size):
    with pytest.raises(ValidationError):
        operations.initialize(size)


def test_initialize_from_roster_keeps_order_and_names():
    @dataclass
    class Student:
        roll_number: int
        name: str

    roster = operations.initialize_from_roster(
        [
            {"student_number": 12, "name": "Asha"},
            Student(roll_number=3, name="Ravi"),
            {"roll_number": 7},
        ]
    )

    assert [entry.student_number for entry in roster.entries] == [12, 3, 7]
    assert [entry.name for entry in roster.entries] == ["Asha", "Ravi", None]
    assert marks(roster) == [P, P, P]


def test_initialize_from_roster_rejects_duplicates():
    with pytest.raises(ValidationError):
        operations.initialize_from_roster([{"student_number": 1}, {"student_number": 1}])


def test_hydrate_keeps_statuses_verbatim_and_is_idempotent():
    record = [
        {"student_number": 1, "status": "present"},
        {"student_number": 2, "status": "absent"},
        {"student_number": 3, "status": "present"},
    ]

    first = operations.hydrate(record)
    second = operations.hydrate(record)

    assert marks(first) == [P, A, P]
    assert first == second
    assert first.select_all_state == SelectAllState.ALL_PRESENT


def test_hydrate_numbers_by_position_and_reads_unknown_status_as_absent():
    roster = operations.hydrate([{"status": "present"}, {"status": "late"}, {"status": None}])

    assert [entry.student_number for entry in roster.entries] == [1, 2, 3]
    assert marks(roster) == [P, A, A]


def test_hydrate_all_absent_sets_indicator():
    roster = operations.hydrate([{"status": "absent"}, {"status": "absent"}])
    assert roster.select_all_state == SelectAllState.ALL_ABSENT


def test_hydrate_accepts_roster_entries():
    entries = operations.initialize(3).entries
    assert operations.hydrate(entries).entries == entries


def test_hydrate_fills_missing_numbers_without_clashing():
    roster = operations.hydrate([{"student_number": 2, "status": "present"}, {"status": "absent"}])

    assert [entry.student_number for entry in roster.entries] == [2, 1]
    assert [entry.status for entry in roster.entries] == [AttendanceMark.PRESENT, AttendanceMark.ABSENT]


def test_hydrate_keeps_free_positions_for_unnumbered_records():
    roster = operations.hydrate([{"status": "present"}, {"student_number": 5, "status": "absent"}, {}])
    assert [entry.student_number for entry in roster.entries] == [1, 5, 3]


def test_hydrate_rejects_duplicate_recorded_numbers():
    with pytest.raises(ValidationError):
        operations.hydrate([{"student_number": 4}, {"status": "absent"}, {"student_number": 4}])


def test_roster_built_directly_derives_indicator():
    absent = (
        RosterEntry(student_number=1, status=AttendanceMark.ABSENT),
        RosterEntry(student_number=2, status=AttendanceMark.ABSENT),
    )
    roster = Roster(entries=absent)

    assert roster.select_all_state == SelectAllState.ALL_ABSENT
    assert roster.to_dict()["select_all_state"] == "allAbsent"
    assert operations.invert_all(operations.invert_all(roster)) == roster


def test_toggle_flips_one_entry_and_pins_mixed_state():
    roster = operations.initialize(5)

    toggled = operations.toggle(roster, 2)

    assert marks(toggled) == [P, P, A, P, P]
    assert toggled.select_all_state == SelectAllState.ALL_PRESENT
    assert marks(roster) == [P] * 5


def test_toggle_last_present_student_switches_indicator():
    roster = operations.hydrate([{"status": "absent"}, {"status": "present"}])

    toggled = operations.toggle(roster, 1)

    assert marks(toggled) == [A, A]
    assert toggled.select_all_state == SelectAllState.ALL_ABSENT


def test_toggle_back_restores_all_present():
    roster = operations.initialize(2)
    assert operations.toggle(operations.toggle(roster, 0), 0) == roster


@pytest.mark.parametrize("index", [-1, 5, "1", None])
def test_toggle_out_of_range_is_rejected(index):
    with pytest.raises(ValidationError):
        operations.toggle(operations.initialize(5), index)


def test_toggle_and_invert_on_empty_roster_are_noops():
    empty = Roster()

    assert operations.toggle(empty, 0) is empty
    assert operations.invert_all(empty) is empty


def test_invert_all_on_71_present_students():
    roster = operations.initialize(71)

    inverted = operations.invert_all(roster)

    assert marks(inverted) == [A] * 71
    assert inverted.select_all_state == SelectAllState.ALL_ABSENT


@pytest.mark.parametrize(
    "roster",
    [
        operations.initialize(4),
        operations.hydrate([{"status": "absent"}] * 3),
        operations.initialize(1),
    ],
)
def test_invert_all_twice_restores_uniform_roster(roster):
    assert operations.invert_all(operations.invert_all(roster)) == roster


def test_invert_all_on_mixed_roster_sets_everyone_absent():
    mixed = operations.toggle(operations.initialize(3), 0)

    inverted = operations.invert_all(mixed)

    assert marks(inverted) == [A, A, A]
    assert inverted.select_all_state == SelectAllState.ALL_ABSENT


def test_invert_all_keeps_numbers_and_names():
    roster = operations.initialize_from_roster([{"roll_number": 4, "name": "Meera"}])
    inverted = operations.invert_all(roster)

    assert inverted.entries == (RosterEntry(student_number=4, status=A, name="Meera"),)


@pytest.mark.parametrize(
    "roster",
    [
        Roster(),
        operations.initialize(7),
        operations.toggle(operations.toggle(operations.initialize(7), 1), 4),
        operations.invert_all(operations.initialize(3)),
    ],
)
def test_summary_counts_add_up(roster):
    summary = operations.summarize(roster)
    assert summary.present_count + summary.absent_count == summary.total == len(roster)


def test_summary_counts():
    summary = operations.summarize(operations.toggle(operations.initialize(5), 2))

    assert (summary.present_count, summary.absent_count, summary.total) == (4, 1, 5)


def test_can_submit_requires_topic_and_students():
    roster = operations.initialize(3)

    assert operations.can_submit("Linked lists", roster) is True
    assert operations.can_submit("   ", roster) is False
    assert operations.can_submit(None, roster) is False
    assert operations.can_submit("Linked lists", Roster()) is False


def _session(completed=False):
    return Session.from_record(
        {"id": 31, "start_time": "09:00", "end_time": "10:00", "status": completed},
        date(2026, 3, 2),
    )


def test_build_submission_payload_shape():
    roster = operations.toggle(operations.initialize(3), 1)

    submission = operations.build_submission(
        _session(),
        faculty_id="F7",
        topic="  Binary trees  ",
        roster=roster,
        submitted_on=date(2026, 3, 2),
    )

    assert submission.to_payload() == {
        "schedule_id": 31,
        "faculty_id": "F7",
        "topic": "Binary trees",
        "attendance_date": "2026-03-02",
        "students": [
            {"student_number": 1, "status": "present"},
            {"student_number": 2, "status": "absent"},
            {"student_number": 3, "status": "present"},
        ],
        "mark_class_completed": True,
    }


@pytest.mark.parametrize(
    "topic, roster, completed",
    [
        ("", operations.initialize(3), False),
        ("Graphs", Roster(), False),
        ("Graphs", operations.initialize(3), True),
    ],
)
def test_build_submission_rejects_before_building(topic, roster, completed):
    with pytest.raises(ValidationError):
        operations.build_submission(
            _session(completed=completed),
            faculty_id="F7",
            topic=topic,
            roster=roster,
            submitted_on=date(2026, 3, 2),
        )


def test_roster_from_payload_recomputes_indicator():
    roster = operations.roster_from_payload(
        {"students": [{"student_number": 1, "status": "absent"}], "select_all_state": "allPresent"}
    )
    assert roster.select_all_state == SelectAllState.ALL_ABSENT


def test_roster_from_payload_requires_list():
    with pytest.raises(ValidationError):
        operations.roster_from_payload({"students": "1,2,3"})
