"""
Example 01: build a single RAPPOR telemetry payload.

Goal:
    Show the client-side flow: pick a cohort, encode the true value into a
    Bloom filter, apply permanent and instantaneous randomized response, and
    render the payload a telemetry transport would submit.

Usage:
    python examples/ldp_examples/01_client_report.py --seed 3
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
for p in (project_root, src_root):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from examples._shared import cli, io
from rapporlib import RapporClient, RapporParams
from rapporlib.internal import bytes_to_hex


def main(argv=None):
    args = cli.parse_args("RAPPOR client report", argv)
    params = RapporParams(
        num_bytes=args.num_bytes,
        num_hashes=args.num_hashes,
        num_cohorts=args.num_cohorts,
        hash_name=args.hash,
    )
    client = RapporClient(params, rng=args.seed, client_secret=b"example-client")

    value = "https://www.mozilla.org/"
    true_report = client.encode(value)
    report = client.create_report(value)

    result = {
        "name": "ldp_examples/01_client_report",
        "config": params.to_dict(),
        "outputs": {
            "cohort": client.cohort,
            "true_report": bytes_to_hex(true_report),
            "payload": report.to_dict(),
        },
        "metrics": {"report_bits": params.num_bits},
        "artifacts": {},
    }
    out_path = io.write_json(result, Path(args.outdir) / "01_client_report.json")
    result["artifacts"]["json"] = str(out_path)
    return result


if __name__ == "__main__":
    io.print_summary(main())
