from dataclasses import dataclass


@dataclass(frozen=True)
class GroupParameters:
    """
    Public description of the group a Chaum-Pedersen proof runs in.

    Attributes:
        p (int): A large prime modulus.
        q (int): A prime divisor of p-1, the order of the subgroup.
        alpha (int): A generator of the subgroup of order q modulo p.
        beta (int): A second, independent generator of the same subgroup.

    Nothing is checked at construction. The caller is responsible for p and q
    being prime, q dividing p-1, and alpha and beta lying in (1, p) with
    multiplicative order exactly q. Use
    chaum_pedersen.utils.validate.validate_group_parameters to check a set
    that does not come from a standardized group.
    """
    p: int
    q: int
    alpha: int
    beta: int

    def __repr__(self):
        return f"GroupParameters(p={self.p.bit_length()} bits, q={self.q.bit_length()} bits)"
