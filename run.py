import numpy as np

from hullsim.distributions import DISTRIBUTIONS
from hullsim.hull import Algorithm, compute_hull
from hullsim.metrics.hull_metrics import hull_area
from hullsim.utils import plotting


def main(run=True, plot=True, seed=None, n=200, distribution="circle_area"):
    """
    Computes the hull of a generated point set with both algorithms and
    replays the Kirkpatrick-Seidel event log.
    """
    FILE_PREFIX = "logs/hull"
    rng = np.random.default_rng(seed)
    # 1. Generate the point set
    generator = DISTRIBUTIONS[distribution]
    points = generator(n) if distribution == "fibonacci" else generator(n, rng=rng)

    results = {}
    if run:
        # 2. Run both algorithms, logging each to its own files
        for algorithm in Algorithm:
            results[algorithm] = compute_hull(
                points,
                algorithm=algorithm,
                log_prefix=f"{FILE_PREFIX}-{algorithm.value}",
            )

        # 3. Report
        print("\n--- Hulls ---")
        for algorithm, result in results.items():
            print(
                f"{algorithm.value}: vertices={len(result.hull)}, "
                f"area={hull_area(result.hull):.1f}, "
                f"frames={len(result.frames)}, events={len(result.events)}"
            )

    if plot and results:
        # 4. Plot the hull and the last few animation steps
        print("\nGenerating plots...")
        ks = results[Algorithm.KIRKPATRICK_SEIDEL]
        plotting.plot_hull(points, ks.hull, title="Kirkpatrick-Seidel")
        prefix = f"{FILE_PREFIX}-{Algorithm.KIRKPATRICK_SEIDEL.value}"
        for frame in (len(ks.frames) // 4, len(ks.frames) // 2, len(ks.frames) - 1):
            plotting.plot_event_log(prefix, frame=frame)
        plotting.show()
    return results


if __name__ == "__main__":
    results = main(True, True)
