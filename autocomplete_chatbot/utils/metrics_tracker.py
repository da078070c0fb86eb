# metrics_tracker.py
# in-memory counters for timings shown on the stats screen (nothing is saved)

from collections import defaultdict


class Metrics:
    def __init__(self):
        self.m = defaultdict(float)
        self.n = defaultdict(int)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def count(self, key):
        return self.n.get(key, 0)

    def avg(self, key):
        if self.n.get(key, 0) == 0: return 0.0
        return self.m[key] / self.n[key]

