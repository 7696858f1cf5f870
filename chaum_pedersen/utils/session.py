import time

from chaum_pedersen.models.proof import Transcript
from chaum_pedersen.monitor import Monitor
from chaum_pedersen.prover.prover import Prover
from chaum_pedersen.verifier.verifier import Verifier


def run_session(prover: Prover, verifier: Verifier, challenge: int = None,
                monitor: Monitor = None, group: str = "default") -> tuple[Transcript, bool]:
    """
    Runs one commitment, challenge, response exchange.

    Args:
        prover (Prover): The party holding the secret.
        verifier (Verifier): The party holding y1 and y2.
        challenge (int, optional): Fixed challenge to use instead of a random one.
        monitor (Monitor, optional): Records the outcome and latency.
        group (str, optional): Label the monitor files the session under.

    Returns:
        tuple[Transcript, bool]: The exchanged values and the verdict.
    """
    start = time.time()
    if monitor:
        monitor.log_sent(group)

    # Step 1: Commitment
    commitment = prover.create_commitment()
    verifier.receive_commitment(commitment)

    # Step 2: Challenge
    if challenge is None:
        c = verifier.create_challenge()
    else:
        c = verifier.set_challenge(challenge)

    # Step 3: Response and verification
    s = prover.compute_response(c)
    accepted = verifier.verify_response(s)

    if monitor:
        monitor.log_result(group, accepted, time.time() - start)

    return Transcript(verifier.public_values, commitment, c, s), accepted
