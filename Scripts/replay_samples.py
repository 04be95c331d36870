# scripts/replay_samples.py
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from Colourblind_camera.engine.classifier import AdaptiveColorClassifier
from Colourblind_camera.engine.params import params_from_env
from Colourblind_camera.io.replay import load_samples, replay_samples


def main() -> None:
    p = argparse.ArgumentParser(description="Replay a recorded r,g,b sample stream through the colour engine.")
    p.add_argument("--csv", type=str, required=True, help="recording with r, g, b columns")
    p.add_argument("--out", type=str, default="", help="write the replay table here (default: stdout)")
    p.add_argument("--scale", type=float, default=1.0, help="divide channels by this first (255 for 8-bit)")
    p.add_argument("--no-adapt", action="store_true", help="disable white-balance adaptation")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    params = params_from_env()
    if args.no_adapt:
        params = replace(params, adaptive=False)

    df = load_samples(args.csv)
    out = replay_samples(df, classifier=AdaptiveColorClassifier(params), scale=args.scale)

    if args.out:
        path = Path(args.out)
        path.parent.mkdir(parents=True, exist_ok=True)
        out.to_csv(path, index=False)
        logging.getLogger(__name__).info("wrote %d rows -> %s", len(out), path.resolve())
    else:
        out.to_csv(sys.stdout, index=False)


if __name__ == "__main__":
    main()
