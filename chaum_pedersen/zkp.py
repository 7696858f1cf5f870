import secrets

from chaum_pedersen import config
from chaum_pedersen.errors import InvalidParameterError
from chaum_pedersen.models.group import GroupParameters


def parse_hex(value: str) -> int:
    return int(value.replace('\n', '').replace(' ', ''), 16)


def exponentiate(base: int, exponent: int, modulus: int) -> int:
    """Returns base^exponent mod modulus using square-and-multiply."""
    if modulus < 1:
        raise InvalidParameterError(f"Modulus must be at least 1, got {modulus}")
    if exponent < 0:
        raise InvalidParameterError(f"Exponent must be non-negative, got {exponent}")
    return pow(base, exponent, modulus)


def random_below(bound: int) -> int:
    """Uniform value in [0, bound) from the operating system CSPRNG."""
    if bound < 1:
        raise InvalidParameterError(f"Bound must be at least 1, got {bound}")
    return secrets.randbelow(bound)


def derive_beta(p: int, q: int, alpha: int, e: int) -> int:
    """
    Derives the second generator as beta = alpha^e mod p.

    Args:
        p (int): The prime modulus.
        q (int): The order of the subgroup generated by alpha.
        alpha (int): The first generator.
        e (int): The exponent. Must not be 0 or 1 modulo q, otherwise beta
            is the identity or equal to alpha.

    Returns:
        int: beta, a member of the same order q subgroup as alpha.
    """
    if e < 0:
        raise InvalidParameterError("Exponent for beta must be non-negative")
    if e % q == 0:
        raise InvalidParameterError("Exponent for beta is a multiple of q, beta would be the identity")
    if e % q == 1:
        raise InvalidParameterError("Exponent for beta is 1 mod q, beta would equal alpha")
    return exponentiate(alpha, e, p)


def get_group_parameters(name: str = config.DEFAULT_GROUP) -> GroupParameters:
    if name == config.RFC5114_GROUP:
        p = parse_hex(config.RFC5114_P_HEX)
        q = parse_hex(config.RFC5114_Q_HEX)
        alpha = parse_hex(config.RFC5114_ALPHA_HEX)
        beta = derive_beta(p, q, alpha, config.RFC5114_BETA_EXPONENT)
        return GroupParameters(p, q, alpha, beta)

    if name == config.OAKLEY2_GROUP:
        p = parse_hex(config.OAKLEY2_P_HEX)
        return GroupParameters(p, (p - 1) // 2, config.OAKLEY2_ALPHA, config.OAKLEY2_BETA)

    if name == config.TOY_GROUP:
        return GroupParameters(config.TOY_P, config.TOY_Q, config.TOY_ALPHA, config.TOY_BETA)

    raise InvalidParameterError(f"Unknown group '{name}', expected one of {', '.join(config.GROUP_NAMES)}")


def public_values(params: GroupParameters, x: int) -> tuple[int, int]:
    # y1 = alpha^x mod p, y2 = beta^x mod p
    y1 = exponentiate(params.alpha, x, params.p)
    y2 = exponentiate(params.beta, x, params.p)
    return y1, y2


def commit(params: GroupParameters, k: int) -> tuple[int, int]:
    # r1 = alpha^k mod p, r2 = beta^k mod p
    r1 = exponentiate(params.alpha, k, params.p)
    r2 = exponentiate(params.beta, k, params.p)
    return r1, r2


def respond(params: GroupParameters, k: int, c: int, x: int) -> int:
    """
    Computes the response s = (k - c*x) mod q.

    Python's % is floored, so a negative k - c*x still lands in [0, q).
    """
    return (k - c * x) % params.q


def verify(params: GroupParameters, r1: int, r2: int, y1: int, y2: int, c: int, s: int) -> bool:
    """
    Checks a Chaum-Pedersen response against its commitment.

    Returns:
        bool: True if r1 == alpha^s * y1^c and r2 == beta^s * y2^c (mod p).
    """
    p = params.p
    cond1 = r1 == (exponentiate(params.alpha, s, p) * exponentiate(y1, c, p)) % p
    cond2 = r2 == (exponentiate(params.beta, s, p) * exponentiate(y2, c, p)) % p
    return cond1 and cond2
