"""Tests for the HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from care_call_manager.api import main
from care_call_manager.staff_assignment.manager import CareCallAssignmentManager

from .conftest import ROSTER_CSV


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(main, 'session', CareCallAssignmentManager(staff_names=['A', 'B']))
    return TestClient(main.app)


def upload(client, content=ROSTER_CSV, filename='roster.csv'):
    return client.post('/roster/upload', files={'file': (filename, content.encode('utf-8'), 'text/csv')})


class TestRoster:
    def test_health(self, client):
        body = client.get('/').json()
        assert body['status'] == 'healthy'
        assert body['roster_loaded'] is False

    def test_upload(self, client):
        response = upload(client)
        assert response.status_code == 200
        assert response.json()['records'] == 4
        assert 'Assoc Phone' in response.json()['columns']

    def test_upload_rejects_other_extensions(self, client):
        response = upload(client, filename='roster.xlsx')
        assert response.status_code == 400

    def test_upload_without_rows(self, client):
        response = upload(client, content='Full Name,Phone\n')
        assert response.status_code == 400
        assert 'No valid data' in response.json()['detail']


class TestStaffAndMonth:
    def test_add_and_remove(self, client):
        assert client.post('/staff', json={'name': 'C'}).json()['staff_names'] == ['A', 'B', 'C']
        assert client.delete('/staff/0').json()['staff_names'] == ['B', 'C']

    def test_add_duplicate(self, client):
        assert client.post('/staff', json={'name': 'A'}).status_code == 400

    def test_remove_missing(self, client):
        assert client.delete('/staff/5').status_code == 400

    def test_select_month(self, client):
        assert client.put('/month', json={'month': 'March'}).json()['month'] == 'March'
        assert client.get('/months').json()['selected'] == 'March'

    def test_select_bad_month(self, client):
        assert client.put('/month', json={'month': 'Smarch'}).status_code == 400


class TestAssignments:
    def test_process_without_roster(self, client):
        assert client.post('/assignments/process').status_code == 400

    def test_process(self, client):
        upload(client)
        body = client.post('/assignments/process').json()
        assert body['staff_counts'] == {'A': 2, 'B': 2}
        row = body['assignments']['A'][0]
        assert row['swap_targets'] == ['B']
        assert row['index'] == 0

    def test_get_before_processing(self, client):
        assert client.get('/assignments').status_code == 400
        assert client.get('/assignments/counts').json() == {}

    def test_swap(self, client):
        upload(client)
        client.post('/assignments/process')
        moved = client.get('/assignments').json()['assignments']['A'][0]['name']
        response = client.post('/assignments/swap',
                               json={'source_staff': 'A', 'record_index': 0, 'target_staff': 'B'})
        assert response.status_code == 200
        body = response.json()
        assert moved in [row['name'] for row in body['assignments']['B']]
        assert body['staff_counts'] == {'A': 2, 'B': 2}

    def test_swap_unknown_staff(self, client):
        upload(client)
        client.post('/assignments/process')
        response = client.post('/assignments/swap',
                               json={'source_staff': 'A', 'record_index': 0, 'target_staff': 'Z'})
        assert response.status_code == 400

    def test_print_list(self, client):
        upload(client)
        assert client.get('/assignments/print-list').status_code == 400
        client.post('/assignments/process')
        body = client.get('/assignments/print-list').json()
        assert body['lines'] == 4
        assert 'Jane Doe, 555-0101, jane@example.com, 03/14, 2021-03-01, 3 years' in body['text']
