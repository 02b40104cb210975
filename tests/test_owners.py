import random

import pytest

from rhpsim.owners import Role, assign_roles, select_data_owners


def test_role_values():
    owners = assign_roles(5, 6, random.Random(8))
    consumers = assign_roles(3, 0, random.Random(0))
    assert [role.value for role in owners] == [0] * 5
    assert [role.value for role in consumers] == [1] * 3


def test_select_distinct_and_in_range():
    chosen = select_data_owners(20, 10, random.Random(1))
    assert len(chosen) == 10
    assert len(set(chosen)) == 10
    assert all(0 <= node <= 20 for node in chosen)


def test_select_none():
    assert select_data_owners(5, 0, random.Random(1)) == []


def test_select_every_possible_id():
    chosen = select_data_owners(6, 7, random.Random(4))
    assert sorted(chosen) == list(range(7))


def test_select_reproducible():
    first = select_data_owners(50, 8, random.Random(9))
    second = select_data_owners(50, 8, random.Random(9))
    assert len(first) == 8
    assert len(set(first)) == 8
    assert all(0 <= node <= 50 for node in first)
    assert first == second


@pytest.mark.parametrize("count, owners", [(3, 5), (-1, 0), (4, -1)])
def test_select_invalid(count, owners):
    with pytest.raises(ValueError):
        select_data_owners(count, owners, random.Random(0))


def test_assign_roles_matches_selection():
    owners = select_data_owners(30, 6, random.Random(11))
    roles = assign_roles(30, 6, random.Random(11))
    assert len(roles) == 30
    for node, role in enumerate(roles):
        expected = Role.OWNER if node in owners else Role.CONSUMER_ONLY
        assert role is expected


def test_assign_roles_owner_count_bounded():
    roles = assign_roles(10, 4, random.Random(2))
    owner_count = roles.count(Role.OWNER)
    assert 3 <= owner_count <= 4


def test_assign_roles_all_owners_when_every_id_taken():
    roles = assign_roles(5, 6, random.Random(8))
    assert roles == [Role.OWNER] * 5


def test_assign_roles_no_owners():
    assert assign_roles(4, 0, random.Random(0)) == [Role.CONSUMER_ONLY] * 4