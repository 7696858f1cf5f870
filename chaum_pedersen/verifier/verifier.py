from chaum_pedersen.errors import InvalidParameterError, SessionStateError
from chaum_pedersen.models.group import GroupParameters
from chaum_pedersen.models.proof import Commitment, PublicValues
from chaum_pedersen.models.session import SessionState
from chaum_pedersen.zkp import random_below, verify


class Verifier:
    def __init__(self, params: GroupParameters, public_values: PublicValues, name: str = "Verifier"):
        self.params = params
        self.public_values = public_values
        self.name = name

        self.commitment = None
        self.challenge = None
        self.state = SessionState.UNINITIATED

    def receive_commitment(self, commitment: Commitment):
        if self.state is SessionState.COMMITTED:
            raise SessionStateError(f"[{self.name}] Commitment already received, session is '{self.state.value}'")
        if self.state is SessionState.CHALLENGED:
            print(f"[{self.name}] Discarding unanswered challenge")
        self.commitment = commitment
        self.challenge = None
        self.state = SessionState.COMMITTED

    def create_challenge(self) -> int:
        """Draws a fresh challenge c in [0, q) for the pending commitment."""
        return self.set_challenge(random_below(self.params.q))

    def set_challenge(self, challenge: int) -> int:
        if self.state is not SessionState.COMMITTED:
            raise SessionStateError(f"[{self.name}] Cannot issue a challenge in state '{self.state.value}'")
        if not 0 <= challenge < self.params.q:
            raise InvalidParameterError(f"Challenge must lie in [0, q), got {challenge}")
        self.challenge = challenge
        self.state = SessionState.CHALLENGED
        return challenge

    def verify_response(self, response: int) -> bool:
        if self.state is not SessionState.CHALLENGED:
            raise SessionStateError(f"[{self.name}] Cannot verify in state '{self.state.value}', no challenge issued")

        try:
            is_valid = verify(
                self.params,
                self.commitment.r1,
                self.commitment.r2,
                self.public_values.y1,
                self.public_values.y2,
                self.challenge,
                response
            )
        finally:
            # A spent commitment must never see a second response
            self.commitment = None
            self.state = SessionState.VERIFIED

        if is_valid:
            print(f"[{self.name}] Verification successful: both relations hold")
        else:
            print(f"[{self.name}] Verification failed: r1 or r2 does not match")

        return is_valid
