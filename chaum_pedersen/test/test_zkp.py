import pytest

from chaum_pedersen.errors import InvalidParameterError
from chaum_pedersen.models.group import GroupParameters
from chaum_pedersen.zkp import commit, exponentiate, public_values, random_below, respond, verify


@pytest.fixture
def toy():
    return GroupParameters(p=23, q=11, alpha=4, beta=9)


def unsigned_respond(k, c, x, q):
    """Response computed without ever forming a negative number."""
    if k >= c * x:
        return (k - c * x) % q
    return (q - ((c * x - k) % q)) % q


def test_exponentiate_matches_repeated_multiplication():
    result = 1
    for _ in range(13):
        result = (result * 7) % 101
    assert exponentiate(7, 13, 101) == result


def test_exponentiate_edge_cases():
    assert exponentiate(5, 0, 23) == 1
    assert exponentiate(5, 3, 1) == 0
    assert exponentiate(0, 5, 23) == 0


@pytest.mark.parametrize("base, exponent, modulus", [(2, -1, 23), (2, 3, 0), (2, 3, -5)])
def test_exponentiate_rejects_bad_arguments(base, exponent, modulus):
    with pytest.raises(InvalidParameterError):
        exponentiate(base, exponent, modulus)


def test_random_below_stays_in_range():
    assert all(0 <= random_below(11) < 11 for _ in range(500))
    assert random_below(1) == 0


def test_random_below_rejects_empty_range():
    with pytest.raises(InvalidParameterError):
        random_below(0)


def test_toy_scenario(toy):
    x, k, c = 6, 7, 4

    assert public_values(toy, x) == (2, 3)
    assert commit(toy, k) == (8, 4)

    s = respond(toy, k, c, x)
    assert s == 5
    assert verify(toy, 8, 4, 2, 3, c, s)


def test_toy_scenario_with_fake_secret(toy):
    s_fake = respond(toy, 7, 4, 7)
    assert not verify(toy, 8, 4, 2, 3, 4, s_fake)


def test_verify_rejects_tampered_values(toy):
    assert not verify(toy, 9, 4, 2, 3, 4, 5)
    assert not verify(toy, 8, 5, 2, 3, 4, 5)
    assert not verify(toy, 8, 4, 2, 3, 3, 5)
    assert not verify(toy, 8, 4, 2, 3, 4, 6)


def test_response_range_and_branch_equivalence(toy):
    q = toy.q
    for x in range(q):
        for k in range(q):
            for c in range(q):
                s = respond(toy, k, c, x)
                assert 0 <= s < q
                assert s == unsigned_respond(k, c, x, q)
                assert (s - (k - c * x)) % q == 0


def test_response_takes_underflow_branch():
    params = GroupParameters(p=23, q=11, alpha=4, beta=9)
    # k < c*x and c*x - k a multiple of q
    assert respond(params, 1, 4, 3) == 0
    assert unsigned_respond(1, 4, 3, 11) == 0


def test_completeness_exhaustive_on_toy_group(toy):
    for x in range(toy.q):
        y1, y2 = public_values(toy, x)
        for k in range(toy.q):
            r1, r2 = commit(toy, k)
            for c in range(toy.q):
                assert verify(toy, r1, r2, y1, y2, c, respond(toy, k, c, x))


def test_wrong_witness_rejected_for_nonzero_challenge(toy):
    x = 6
    y1, y2 = public_values(toy, x)
    for x_fake in range(toy.q):
        if x_fake == x:
            continue
        for k in range(toy.q):
            r1, r2 = commit(toy, k)
            for c in range(1, toy.q):
                assert not verify(toy, r1, r2, y1, y2, c, respond(toy, k, c, x_fake))


def test_verify_is_deterministic(toy):
    results = {verify(toy, 8, 4, 2, 3, 4, 5) for _ in range(20)}
    assert results == {True}
    assert len({exponentiate(4, 7, 23) for _ in range(20)}) == 1
