import argparse
import sys
from pathlib import Path

from taxi_fare_projection.program import main

REPO_ROOT = Path(__file__).resolve().parents[1]

if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", default=str(REPO_ROOT / "configs" / "training.yaml"))
    args = ap.parse_args()
    sys.exit(main(["--config", args.config]))
