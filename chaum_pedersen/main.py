import argparse
import asyncio
import sys

from aioconsole import ainput

from chaum_pedersen import config
from chaum_pedersen.errors import InvalidParameterError
from chaum_pedersen.monitor import Monitor
from chaum_pedersen.prover.prover import Prover
from chaum_pedersen.utils.session import run_session
from chaum_pedersen.verifier.verifier import Verifier
from chaum_pedersen.zkp import get_group_parameters, random_below


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Run Chaum-Pedersen proof sessions')
    parser.add_argument('--group', default=config.DEFAULT_GROUP, choices=config.GROUP_NAMES, help='Named parameter set')
    parser.add_argument('--secret', type=int, default=None, help='Secret exponent x (random when omitted)')
    parser.add_argument('--sessions', type=int, default=1, help='Number of proof sessions to run')
    parser.add_argument('--interactive', action='store_true', help='Type each challenge at the console')
    parser.add_argument('--forge', action='store_true', help='Prove with a wrong secret against the real public values')
    return parser.parse_args(argv)


async def read_challenge(q: int) -> int:
    """Reads a challenge from the console, an empty line draws one at random."""
    while True:
        line = await ainput(f"Enter challenge in [0, {q}) or press enter for a random one:\n")
        line = line.strip()
        if not line:
            return random_below(q)
        try:
            c = int(line)
        except ValueError:
            print("[Session] Challenge must be an integer")
            continue
        if 0 <= c < q:
            return c
        print(f"[Session] Challenge out of range [0, {q})")


async def main(argv=None) -> bool:
    args = parse_args(argv)

    params = get_group_parameters(args.group)
    monitor = Monitor()

    honest = Prover(params, args.secret)
    verifier = Verifier(params, honest.get_public_values())

    if args.forge:
        # Knows some x' != x but claims the honest prover's y1, y2
        prover = Prover(params, (honest.secret + 1) % params.q, name="Forger")
    else:
        prover = honest

    print(f"[Session] Group {args.group}: {params}")
    print(f"[Session] Public values y1={honest.y1}, y2={honest.y2}")

    all_accepted = True
    for i in range(args.sessions):
        challenge = await read_challenge(params.q) if args.interactive else None
        transcript, accepted = run_session(prover, verifier, challenge, monitor, args.group)
        print(f"[Session {i + 1}] {transcript}")
        print(f"[Session {i + 1}] {'Accepted' if accepted else 'Rejected'}")
        all_accepted = all_accepted and accepted

    monitor.report()
    return all_accepted


if __name__ == "__main__":
    try:
        sys.exit(0 if asyncio.run(main()) else 1)
    except InvalidParameterError as e:
        print(f"[Session] Error: {e}")
        sys.exit(2)
    except KeyboardInterrupt:
        print("\n[Session] Received interrupt signal, shutting down...")
        sys.exit(0)
