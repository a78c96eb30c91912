"""
Tests for the admin reporting endpoints.
"""

from datetime import datetime

import pytest

from app.models import Job
from app.services.admin_service import parse_time_range, parse_limit, InvalidQueryError
from tests.conftest import HARRY, ROBOT

YEAR_2024 = 'start=2024-01-01&end=2024-12-31'


class TestParseTimeRange:

    def test_date_only_end_covers_whole_day(self):
        start, end = parse_time_range('2024-02-01', '2024-02-01')

        assert start == datetime(2024, 2, 1)
        assert end.date() == start.date()
        assert end.hour == 23 and end.minute == 59

    def test_aware_datetimes_become_utc(self):
        start, _ = parse_time_range('2024-02-01T02:00:00+02:00', '2024-03-01')
        assert start == datetime(2024, 2, 1, 0, 0)

    @pytest.mark.parametrize('start, end', [
        (None, '2024-01-01'),
        ('2024-01-01', ''),
        ('yesterday', '2024-01-01'),
        ('2024-02-01', '2024-01-01'),
    ])
    def test_rejects_bad_ranges(self, start, end):
        with pytest.raises(InvalidQueryError):
            parse_time_range(start, end)

    def test_parse_limit(self):
        assert parse_limit(None, 2) == 2
        assert parse_limit('5', 2) == 5
        with pytest.raises(InvalidQueryError):
            parse_limit('0', 2)


class TestBestProfession:

    def test_highest_earning_profession(self, client):
        response = client.get(f'/admin/best-profession?{YEAR_2024}')

        assert response.status_code == 200
        assert response.get_json() == [{'profession': 'Musician', 'totalEarned': 700}]

    def test_window_limits_jobs(self, client):
        response = client.get('/admin/best-profession?start=2024-02-01&end=2024-02-01')
        assert response.get_json() == [{'profession': 'Programmer', 'totalEarned': 50}]

    def test_no_paid_jobs_in_window(self, client):
        response = client.get('/admin/best-profession?start=2023-01-01&end=2023-12-31')

        assert response.status_code == 200
        assert response.get_json() == []

    def test_ties_broken_by_profession_name(self, client, insert):
        insert(Job(description='audit', price=250, contract_id=1, paid=True,
               payment_date=datetime(2024, 1, 20)))

        response = client.get('/admin/best-profession?start=2024-01-01&end=2024-02-28')

        # Musician 300 vs Programmer 250 + 50
        assert response.get_json() == [{'profession': 'Musician', 'totalEarned': 300}]

    def test_missing_range_is_bad_request(self, client):
        response = client.get('/admin/best-profession?start=2024-01-01')

        assert response.status_code == 400
        assert 'end' in response.get_json()['error']


class TestBestClients:

    def test_default_limit_is_two(self, client):
        response = client.get(f'/admin/best-clients?{YEAR_2024}')

        assert response.status_code == 200
        assert response.get_json() == [
            {'id': ROBOT, 'fullName': 'Mr Robot', 'paid': 400},
            {'id': HARRY, 'fullName': 'Harry Potter', 'paid': 300},
        ]

    def test_ranks_single_jobs_not_client_totals(self, client):
        response = client.get(f'/admin/best-clients?{YEAR_2024}&limit=3')

        assert [row['id'] for row in response.get_json()] == [ROBOT, HARRY, ROBOT]
        assert response.get_json()[2]['paid'] == 50

    @pytest.mark.parametrize('limit', ['0', '-1', 'many'])
    def test_invalid_limit(self, client, limit):
        response = client.get(f'/admin/best-clients?{YEAR_2024}&limit={limit}')
        assert response.status_code == 400

    def test_does_not_require_profile_header(self, client):
        assert client.get(f'/admin/best-clients?{YEAR_2024}').status_code == 200
