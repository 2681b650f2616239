import pytest
from django.urls import reverse

from care.models import Address, AmbulanceBooking, GuidanceRequest, NurseBooking, Subscription, User
from care.pricing import compute_total

pytestmark = pytest.mark.django_db


@pytest.fixture
def alice(make_user, client_for):
    user, token = make_user('alice')
    return user, client_for(token)


def test_nurse_booking_scenario(alice):
    user, client = alice
    r = client.post(reverse('book_nurse'), {'area': 'Koramangala', 'hours': 3}, format='json')
    assert r.status_code == 200
    assert r.data['area'] == 'Koramangala'
    assert r.data['hours'] == 3
    assert r.data['rate_per_hour'] == 200
    assert r.data['total'] == 600
    assert r.data['user_id'] == user.id
    assert r.data['id'] and r.data['created_at']
    assert NurseBooking.objects.get(pk=r.data['id']).total == 600


def test_client_supplied_price_is_ignored(alice):
    _, client = alice
    r = client.post(
        reverse('book_nurse'),
        {'area': 'Koramangala', 'hours': 3, 'total': 1, 'rate_per_hour': 1},
        format='json',
    )
    assert r.status_code == 200
    assert r.data['rate_per_hour'] == 200
    assert r.data['total'] == 600


def test_rate_comes_from_settings(alice, settings):
    settings.NURSE_RATE_PER_HOUR = 250
    _, client = alice
    r = client.post(reverse('book_nurse'), {'area': 'HSR Layout', 'hours': 3}, format='json')
    assert r.data['rate_per_hour'] == 250
    assert r.data['total'] == 750


def test_subscription_scenario(alice):
    _, client = alice
    r = client.post(reverse('create_subscription'), {'type': 'night', 'days': 5}, format='json')
    assert r.status_code == 200
    assert r.data['type'] == 'night'
    assert r.data['rate_per_day'] == 1000
    assert r.data['total'] == 5000


def test_ambulance_scenario(alice):
    _, client = alice
    r = client.post(reverse('book_ambulance'), {'distance_km': 4.5, 'pickup_address': 'X'}, format='json')
    assert r.status_code == 200
    assert r.data['distance_km'] == 4.5
    assert r.data['rate_per_km'] == 50
    assert r.data['total'] == 225


@pytest.mark.parametrize('distance, total', [
    (0.01, 1),
    (1.01, 51),
    (4.35, 218),
    ('2.2', 110),
])
def test_ambulance_total_rounds_half_up(alice, distance, total):
    _, client = alice
    r = client.post(reverse('book_ambulance'), {'distance_km': distance, 'pickup_address': 'X'}, format='json')
    assert r.status_code == 200
    assert r.data['total'] == total


@pytest.mark.parametrize('name, payload, model', [
    ('book_nurse', {'area': 'Koramangala', 'hours': 0}, NurseBooking),
    ('book_nurse', {'area': 'Koramangala', 'hours': -2}, NurseBooking),
    ('book_nurse', {'area': 'Koramangala', 'hours': 2.5}, NurseBooking),
    ('book_nurse', {'area': 'Koramangala'}, NurseBooking),
    ('book_nurse', {'hours': 3}, NurseBooking),
    ('book_nurse', {'area': '<i></i>', 'hours': 3}, NurseBooking),
    ('book_nurse', {'area': 'Koramangala', 'hours': 11_000_000}, NurseBooking),
    ('book_nurse', {'area': 'Koramangala', 'hours': 10**19}, NurseBooking),
    ('create_subscription', {'type': 'day', 'days': 0}, Subscription),
    ('create_subscription', {'type': 'day', 'days': -1}, Subscription),
    ('create_subscription', {'type': 'weekly', 'days': 3}, Subscription),
    ('create_subscription', {'days': 3}, Subscription),
    ('create_subscription', {'type': 'day', 'days': 10**7}, Subscription),
    ('book_ambulance', {'distance_km': 0, 'pickup_address': 'X'}, AmbulanceBooking),
    ('book_ambulance', {'distance_km': -2.5, 'pickup_address': 'X'}, AmbulanceBooking),
    ('book_ambulance', {'distance_km': 'far', 'pickup_address': 'X'}, AmbulanceBooking),
    ('book_ambulance', {'distance_km': 3}, AmbulanceBooking),
    ('book_ambulance', {'distance_km': 1e300, 'pickup_address': 'X'}, AmbulanceBooking),
    ('book_ambulance', {'distance_km': True, 'pickup_address': 'X'}, AmbulanceBooking),
])
def test_invalid_booking_is_rejected(alice, name, payload, model):
    _, client = alice
    r = client.post(reverse(name), payload, format='json')
    assert r.status_code == 400
    assert r.data['ok'] is False
    assert r.data['error']['code'] == 'validation_error'
    assert r.data['error']['message']
    assert not model.objects.exists()


def test_markup_is_stripped_from_free_text(alice):
    _, client = alice
    r = client.post(reverse('book_nurse'), {'area': '<b>Indiranagar</b>', 'hours': 1}, format='json')
    assert r.status_code == 200
    assert r.data['area'] == 'Indiranagar'


def test_plain_text_symbols_are_stored_as_typed(alice):
    _, client = alice
    r = client.post(reverse('addresses'), {'line1': 'Flat 4 & 5, MG Road', 'city': 'Bengaluru'}, format='json')
    assert r.status_code == 200
    assert r.data['line1'] == 'Flat 4 & 5, MG Road'
    assert client.get(reverse('addresses')).data[0]['line1'] == 'Flat 4 & 5, MG Road'

    r = client.post(
        reverse('book_ambulance'), {'distance_km': 2, 'pickup_address': 'Gate <2> near bus stop'}, format='json'
    )
    assert r.status_code == 200
    assert AmbulanceBooking.objects.get(pk=r.data['id']).pickup_address == 'Gate <2> near bus stop'


def test_largest_storable_booking_is_accepted(alice):
    _, client = alice
    r = client.post(reverse('book_nurse'), {'area': 'Koramangala', 'hours': 10_000_000}, format='json')
    assert r.status_code == 200
    assert r.data['total'] == 2_000_000_000


def test_lists_are_own_rows_newest_first(make_user, client_for):
    _, alice_token = make_user('alice')
    bob, bob_token = make_user('bob')
    alice_client, bob_client = client_for(alice_token), client_for(bob_token)

    alice_client.post(reverse('book_nurse'), {'area': 'A', 'hours': 1}, format='json')
    bob_client.post(reverse('book_nurse'), {'area': 'B', 'hours': 2}, format='json')
    alice_client.post(reverse('book_nurse'), {'area': 'C', 'hours': 3}, format='json')

    r = alice_client.get(reverse('my_nurse_bookings'))
    assert r.status_code == 200
    assert [row['area'] for row in r.data] == ['C', 'A']
    ids = [row['id'] for row in r.data]
    assert ids == sorted(ids, reverse=True)

    r = bob_client.get(reverse('my_nurse_bookings'))
    assert [(row['area'], row['user_id']) for row in r.data] == [('B', bob.id)]


def test_subscription_and_ambulance_lists_newest_first(alice):
    _, client = alice
    client.post(reverse('create_subscription'), {'type': 'day', 'days': 1}, format='json')
    client.post(reverse('create_subscription'), {'type': 'night', 'days': 2}, format='json')
    client.post(reverse('book_ambulance'), {'distance_km': 1, 'pickup_address': 'first'}, format='json')
    client.post(reverse('book_ambulance'), {'distance_km': 2, 'pickup_address': 'second'}, format='json')

    assert [row['type'] for row in client.get(reverse('my_subscriptions')).data] == ['night', 'day']
    assert [row['pickup_address'] for row in client.get(reverse('my_ambulance_bookings')).data] == ['second', 'first']


def test_guidance_request_defaults(alice):
    user, client = alice
    r = client.post(reverse('create_guidance_request'), {}, format='json')
    assert r.status_code == 200
    assert r.data['note'] is None
    assert r.data['status'] == 'pending'
    assert r.data['user_id'] == user.id

    client.post(reverse('create_guidance_request'), {'note': 'Post-op diet?', 'status': 'resolved'}, format='json')
    rows = client.get(reverse('my_guidance_requests')).data
    assert [row['note'] for row in rows] == ['Post-op diet?', None]
    assert {row['status'] for row in rows} == {'pending'}


def test_addresses_listed_in_insertion_order(alice):
    user, client = alice
    first = client.post(reverse('addresses'), {'line1': '12 MG Road', 'city': 'Bengaluru'}, format='json')
    assert first.status_code == 200
    assert first.data == {
        'id': first.data['id'], 'user_id': user.id, 'label': None,
        'line1': '12 MG Road', 'city': 'Bengaluru', 'state': None, 'pincode': None,
    }
    client.post(
        reverse('addresses'),
        {'label': 'Home', 'line1': '4 Park St', 'city': 'Kolkata', 'state': 'WB', 'pincode': '700016'},
        format='json',
    )
    r = client.get(reverse('addresses'))
    assert [row['line1'] for row in r.data] == ['12 MG Road', '4 Park St']
    assert r.data[1]['pincode'] == '700016'


@pytest.mark.parametrize('payload', [
    {'city': 'Bengaluru'},
    {'line1': '12 MG Road'},
    {'line1': '', 'city': 'Bengaluru'},
])
def test_address_requires_line1_and_city(alice, payload):
    _, client = alice
    r = client.post(reverse('addresses'), payload, format='json')
    assert r.status_code == 400
    assert not Address.objects.exists()


def test_deleting_user_removes_their_records(alice):
    user, client = alice
    client.post(reverse('addresses'), {'line1': '1 Main', 'city': 'Pune'}, format='json')
    client.post(reverse('book_nurse'), {'area': 'Baner', 'hours': 2}, format='json')
    client.post(reverse('create_subscription'), {'type': 'day', 'days': 3}, format='json')
    client.post(reverse('create_guidance_request'), {'note': 'help'}, format='json')
    client.post(reverse('book_ambulance'), {'distance_km': 3, 'pickup_address': 'Baner'}, format='json')

    User.objects.filter(pk=user.pk).delete()

    for model in (Address, NurseBooking, Subscription, GuidanceRequest, AmbulanceBooking):
        assert not model.objects.exists()


@pytest.mark.parametrize('rate, quantity, total', [
    (200, 3, 600),
    (1000, 5, 5000),
    (50, 4.5, 225),
    (50, 0.1, 5),
    (50, 4.35, 218),
    (50, 0.01, 1),
])
def test_compute_total(rate, quantity, total):
    assert compute_total(rate, quantity) == total
