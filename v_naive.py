import argparse
import dataclasses
import numpy as np
import pathlib
import time
import matplotlib.pyplot as plt

from tqdm import tqdm
from typing import List

import rangesum.prefix as prefix
import rangesum.resolve as res
import rangesum.legacy.naive as naive


@dataclasses.dataclass
class EngineComparison:

    sizes: List[int]
    num_queries: int
    num_reps: int
    seed: int
    output_dir: pathlib.Path

    def random_instance(self, rng, n):
        data = rng.integers(-1000, 1000, size=n)
        lefts = rng.integers(0, n, size=self.num_queries)
        rights = rng.integers(0, n, size=self.num_queries)
        lefts, rights = np.minimum(lefts, rights), np.maximum(lefts, rights)
        kinds = rng.integers(1, 3, size=self.num_queries)
        queries = [
            res.Query(res.QueryKind(int(k)), int(l), int(r))
            for k, l, r in zip(kinds, lefts, rights)
        ]
        return data, queries

    def timings(self):
        rng = np.random.default_rng(self.seed)
        # warm up the jit so compilation is not timed
        tables = prefix.preprocess([1, 2, 3])
        res.resolve_all([res.Query(res.QueryKind.SUM, 0, 2)], tables)

        results = np.zeros((2, len(self.sizes)), dtype=np.float64)
        for i, n in tqdm(enumerate(self.sizes), total=len(self.sizes)):
            for _ in range(self.num_reps):
                data, queries = self.random_instance(rng, n)
                t0 = time.perf_counter()
                tables = prefix.preprocess(data)
                fast = res.resolve_all(queries, tables)
                results[0, i] += time.perf_counter() - t0

                t0 = time.perf_counter()
                slow = naive.naive_resolve_all(data, queries)
                results[1, i] += time.perf_counter() - t0
                assert fast == slow
        results /= self.num_reps

        filename = self.output_dir / "prefix_naive_timings.png"
        plot_timings(self.sizes, results, filename, ["prefix", "naive"])
        return results


def plot_timings(sizes, result, filename, labels):
    fig, ax = plt.subplots(figsize=(10, 10))
    for i in range(result.shape[0]):
        ax.plot(sizes, result[i], marker='o', label=labels[i])
    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_xlabel('sequence length')
    ax.set_ylabel('seconds per batch')
    plt.legend(loc='upper left')
    fig.savefig(filename, dpi=70)


def set_output_dir(output_dir, num_queries):
    output_dir = pathlib.Path(output_dir + f"/q_{num_queries}")
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def main():
    parser = argparse.ArgumentParser()

    parser.add_argument(
        "--sizes",
        "-n",
        nargs="*",
        type=int,
        default=[10, 100, 1_000, 10_000],
        help="sequence lengths to benchmark",
    )

    parser.add_argument(
        "--num-queries",
        "-q",
        type=int,
        default=1_000,
        help="number of queries per batch",
    )

    parser.add_argument(
        "--num-reps",
        "-r",
        type=int,
        default=5,
        help="batches per sequence length",
    )

    parser.add_argument(
        "--output-dir",
        "-d",
        type=str,
        default="_output/v_naive",
        help="specify the base output directory",
    )

    parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=42,
        help="specify used seed",
    )

    args = parser.parse_args()

    output_dir = set_output_dir(args.output_dir, args.num_queries)
    comparison = EngineComparison(
        args.sizes, args.num_queries, args.num_reps, args.seed, output_dir
    )
    comparison.timings()


if __name__ == "__main__":
    main()
