import argparse
import csv
import statistics
from pathlib import Path

from chaum_pedersen import config
from chaum_pedersen.monitor import Monitor
from chaum_pedersen.prover.prover import Prover
from chaum_pedersen.utils.session import run_session
from chaum_pedersen.verifier.verifier import Verifier
from chaum_pedersen.zkp import get_group_parameters


def run_proof_test(group=config.DEFAULT_GROUP, iterations=config.EVALUATION_ITERATIONS,
                   output_file=config.EVALUATION_OUTPUT) -> dict:
    """
    Run repeated proof sessions for one parameter set and record latencies.

    Args:
        group: Name of the parameter set
        iterations: Number of proof sessions, each with a fresh secret
        output_file: CSV file the summary row is appended to
    """
    params = get_group_parameters(group)
    monitor = Monitor()

    for _ in range(iterations):
        prover = Prover(params)
        verifier = Verifier(params, prover.get_public_values())
        run_session(prover, verifier, monitor=monitor, group=group)

    # Calculate statistics
    latencies = monitor.latencies
    avg_latency = statistics.mean(latencies) if latencies else 0
    std_dev = statistics.stdev(latencies) if len(latencies) > 1 else 0
    stats = monitor.stats[group]

    print(f"\n[Evaluation] Proof Test Results for {group}:")
    print(f"[Evaluation] Total sessions: {len(latencies)}")
    print(f"[Evaluation] Accepted: {stats['accepted']}, rejected: {stats['rejected']}")
    print(f"[Evaluation] Average latency: {avg_latency:.6f} seconds")
    print(f"[Evaluation] Standard deviation: {std_dev:.6f} seconds")

    results = {
        'group': group,
        'iterations': iterations,
        'accepted': stats['accepted'],
        'rejected': stats['rejected'],
        'avg_latency': f"{avg_latency:.6f}",
        'std_dev': f"{std_dev:.6f}",
        'min_latency': f"{min(latencies, default=0):.6f}",
        'max_latency': f"{max(latencies, default=0):.6f}"
    }

    csv_file = Path(output_file)
    csv_file.parent.mkdir(parents=True, exist_ok=True)
    # Headers only go into a new file
    file_exists = csv_file.exists()

    with open(csv_file, 'a', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=results.keys())
        if not file_exists:
            writer.writeheader()
        writer.writerow(results)

    return results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description='Measure Chaum-Pedersen proof latency')
    parser.add_argument('--groups', nargs='+', default=list(config.GROUP_NAMES), choices=config.GROUP_NAMES)
    parser.add_argument('--iterations', type=int, default=config.EVALUATION_ITERATIONS)
    parser.add_argument('--output', default=config.EVALUATION_OUTPUT)
    args = parser.parse_args()

    for name in args.groups:
        print(f"\n[Evaluation] Running {args.iterations} sessions on {name}")
        run_proof_test(name, args.iterations, args.output)
