from collections import defaultdict


class Monitor:
    def __init__(self):
        self.stats = defaultdict(lambda: {
            "sent": 0,
            "accepted": 0,
            "rejected": 0,
            "latencies": []
        })

        self.latencies = []

    def log_sent(self, group):
        self.stats[group]["sent"] += 1

    def log_result(self, group, accepted, latency):
        if accepted:
            self.stats[group]["accepted"] += 1
        else:
            self.stats[group]["rejected"] += 1
        self.stats[group]["latencies"].append(latency)
        self.latencies.append(latency)

    def report(self):
        print(f"\n{'='*64}")
        print(f"{'Proof Session Statistics'.center(64)}")
        print(f"{'='*64}")
        print(f"{'Group':<20} {'Sent':<8} {'Accepted':<10} {'Rejected':<10} {'Avg Latency (s)':<16}")
        print('-'*64)

        for group, data in sorted(self.stats.items()):
            latencies = data["latencies"]
            avg_latency = sum(latencies) / len(latencies) if latencies else 0
            print(f"{group:<20} {data['sent']:<8} {data['accepted']:<10} {data['rejected']:<10} {avg_latency:<16.6f}")
        print()
