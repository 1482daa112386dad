"""
Example 02: simulate a population and debias the collected reports.

Goal:
    Half of the simulated clients report "Apple", the other half "Banana".
    After aggregation the estimated share of clients with each of Apple's
    Bloom bits set should be close to 0.5, while bits used by neither value
    should stay near 0.

Usage:
    python examples/ldp_examples/02_population_estimate.py --quick
"""
import sys
from pathlib import Path

import numpy as np

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
for p in (project_root, src_root):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from examples._shared import cli, io
from rapporlib import RapporAggregator, RapporClient, RapporParams
from rapporlib.ldp.bits import buffer_to_indices


def main(argv=None):
    args = cli.parse_args("RAPPOR population estimate", argv)
    generator = np.random.default_rng(args.seed)
    params = RapporParams(
        num_bytes=args.num_bytes,
        num_hashes=args.num_hashes,
        num_cohorts=args.num_cohorts,
        hash_name=args.hash,
    )
    n_clients = 4000 if args.quick else 40000

    payloads = []
    for _ in range(n_clients):
        client = RapporClient(params, rng=generator)
        value = "Apple" if generator.random() < 0.5 else "Banana"
        payloads.append(client.create_report(value).to_dict())

    estimate = RapporAggregator(params).aggregate(payloads)
    totals = np.asarray(estimate.metadata["reports_per_cohort"], dtype=float)
    shares = estimate.point / np.maximum(totals, 1.0)[:, None]

    apple_signal = []
    noise = []
    for cohort in range(params.num_cohorts):
        apple = set(buffer_to_indices(RapporClient(params, cohort=cohort).encode("Apple")))
        banana = set(buffer_to_indices(RapporClient(params, cohort=cohort).encode("Banana")))
        apple_signal.extend(shares[cohort, sorted(apple - banana)])
        noise.extend(shares[cohort, [b for b in range(params.num_bits) if b not in apple | banana]])

    result = {
        "name": "ldp_examples/02_population_estimate",
        "config": {"n_clients": n_clients, **params.to_dict()},
        "metrics": {
            "average_signal": float(np.mean(apple_signal)) if apple_signal else 0.0,
            "average_noise": float(np.mean(noise)) if noise else 0.0,
        },
        "artifacts": {},
    }
    out_path = io.write_json(result, Path(args.outdir) / "02_population_estimate.json")
    result["artifacts"]["json"] = str(out_path)
    return result


if __name__ == "__main__":
    io.print_summary(main())
