import numpy as np


def generate_test_data(series, count, seed=None):
    """Append `count` synthetic latencies to `series`.

    Baseline noise around 20-40 ms with a slow sinusoidal drift and the odd
    spike, so the chart can be looked at without a network.
    """
    if count <= 0:
        return

    rng = np.random.default_rng(seed)
    base_ping = rng.uniform(20, 40, count)
    drift = 15 * np.sin(np.linspace(0, 4 * np.pi, count))
    spikes = rng.random(count) < 0.03
    base_ping[spikes] *= rng.uniform(3, 10, np.sum(spikes))

    for value in np.clip(base_ping + drift, 0, None):
        series.append(float(value))
