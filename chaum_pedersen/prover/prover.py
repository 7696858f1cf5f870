from chaum_pedersen.errors import SessionStateError
from chaum_pedersen.models.group import GroupParameters
from chaum_pedersen.models.proof import Commitment, PublicValues
from chaum_pedersen.models.session import SessionState
from chaum_pedersen.zkp import commit, public_values, random_below, respond


class Prover:
    def __init__(self, params: GroupParameters, secret: int = None, name: str = "Prover"):
        """
        Initializes a Prover holding a secret exponent.

        Args:
            params (GroupParameters): The shared group parameters.
            secret (int, optional): The witness x in [0, q). Drawn at random when omitted.
            name (str, optional): Tag used in console output. Defaults to "Prover".

        Attributes:
            y1 (int): alpha^x mod p, published once per secret.
            y2 (int): beta^x mod p, published once per secret.
            state (SessionState): Phase of the current proof session.
        """
        self.params = params
        self.name = name
        self.secret = secret if secret is not None else random_below(params.q)
        self.y1, self.y2 = public_values(params, self.secret)

        # Nonce of the pending commitment, None once it has been answered
        self.nonce = None
        self.state = SessionState.UNINITIATED

    def get_public_values(self) -> PublicValues:
        return PublicValues(self.y1, self.y2)

    def create_commitment(self) -> Commitment:
        if self.nonce is not None:
            print(f"[{self.name}] Discarding unanswered commitment")
        self.nonce = random_below(self.params.q)
        r1, r2 = commit(self.params, self.nonce)
        self.state = SessionState.COMMITTED
        return Commitment(r1, r2)

    def compute_response(self, challenge: int) -> int:
        """Answers a challenge. Each commitment answers exactly one challenge."""
        if self.state is not SessionState.COMMITTED or self.nonce is None:
            raise SessionStateError(f"[{self.name}] Cannot respond in state '{self.state.value}', commit first")

        s = respond(self.params, self.nonce, challenge, self.secret)
        self.nonce = None
        self.state = SessionState.RESPONDED
        return s
