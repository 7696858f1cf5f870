import sympy

from chaum_pedersen.errors import InvalidParameterError
from chaum_pedersen.models.group import GroupParameters
from chaum_pedersen.zkp import exponentiate, public_values


def validate_group_parameters(params: GroupParameters) -> GroupParameters:
    """
    Checks the preconditions GroupParameters leaves to the caller.

    Args:
        params (GroupParameters): The parameters to check.

    Returns:
        GroupParameters: The same parameters, so the call can wrap construction.

    Raises:
        InvalidParameterError: If p or q is not prime, q does not divide p-1,
            a generator lies outside (1, p) or does not have order q, or
            alpha equals beta.
    """
    p, q = params.p, params.q

    if not sympy.isprime(p):
        raise InvalidParameterError("p is not prime")
    if not sympy.isprime(q):
        raise InvalidParameterError("q is not prime")
    if (p - 1) % q != 0:
        raise InvalidParameterError("q does not divide p - 1")

    for label, generator in (("alpha", params.alpha), ("beta", params.beta)):
        if not 1 < generator < p:
            raise InvalidParameterError(f"{label} must lie in (1, p)")
        # q is prime and generator != 1, so g^q == 1 means order exactly q
        if exponentiate(generator, q, p) != 1:
            raise InvalidParameterError(f"{label} does not have order q")

    if params.alpha == params.beta:
        raise InvalidParameterError("alpha and beta must be distinct")

    return params


def validate_key_pair(params: GroupParameters, secret: int, y1: int, y2: int) -> bool:
    """
    Validates if (y1, y2) were generated from a secret.

    Returns:
        bool: True if y1 = alpha^x mod p and y2 = beta^x mod p.
    """
    return public_values(params, secret) == (y1, y2)
