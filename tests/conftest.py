import pytest

from care_call_manager.staff_assignment.manager import CareCallAssignmentManager


ROSTER_CSV = (
    'Full Name,Assoc Phone,Assoc Email,Birthday,MC Start Date,MC Anniversary\n'
    '"Doe, Jane",555-0101,jane@example.com,03/14,2021-03-01,3 years\n'
    '"Smith, Bob",555-0102,bob@example.com,07/02,2022-07-15,\n'
    ',,,,,\n'
    'Adam Whitt,555-0103,adam@example.com,01/01,2019-01-01,\n'
    '"Young, Ann",555-0104,ann@example.com,11/30,2023-11-01,\n'
    '"Brown, Carl",555-0105,carl@example.com,05/05,2020-05-05,\n'
    'Pro Coach B,555-0106,coach@example.com,,,\n'
)


def make_records(names):
    return [{'Name': name} for name in names]


@pytest.fixture
def roster_csv(tmp_path):
    path = tmp_path / 'roster.csv'
    path.write_text(ROSTER_CSV, encoding='utf-8')
    return path


@pytest.fixture
def sample_records():
    return make_records([
        'Doe, Jane', 'Smith, Bob', 'Young, Ann', 'Brown, Carl', 'Adams, Eve',
        'Clark, Dan', 'Evans, Fay', 'Garcia, Hal', 'Hill, Ivy', 'King, Joe'
    ])


@pytest.fixture
def manager():
    return CareCallAssignmentManager(staff_names=['A', 'B', 'C'])
