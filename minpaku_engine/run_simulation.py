#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path

from minpaku_engine.engine.config import DEFAULT_ENGINE_PATH, SCHEMA_PATH, load_parameters
from minpaku_engine.engine.errors import EngineError
from minpaku_engine.engine.frames import (
    breakdown_frame,
    monthly_frame,
    projection_frame,
    sensitivity_frame,
    summary_frame,
)
from minpaku_engine.engine.simulator import simulate

logger = logging.getLogger("minpaku_engine")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Minpaku revenue projection")
    parser.add_argument("--engine", type=Path, default=DEFAULT_ENGINE_PATH)
    parser.add_argument("--schema", type=Path, default=SCHEMA_PATH)
    parser.add_argument("--out-prefix", type=str, default="out/MINPAKU_V1")
    parser.add_argument("--log-level", type=str, default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s - [%(levelname)s] - %(message)s")

    try:
        base, profiles, assignment = load_parameters(args.engine, args.schema)
        result = simulate(base, profiles, assignment)
    except EngineError as exc:
        logger.error("%s", exc)
        return 2

    out = Path(args.out_prefix)
    out.parent.mkdir(parents=True, exist_ok=True)
    monthly_frame(result).to_csv(out.with_name(out.name + "_Monthly.csv"), index=False)
    sensitivity_frame(result).to_csv(out.with_name(out.name + "_Sensitivity.csv"), index=False)
    projection_frame(result).to_csv(out.with_name(out.name + "_LongTerm.csv"), index=False)
    breakdown_frame(result).to_csv(out.with_name(out.name + "_Breakdown.csv"), index=False)
    summary_frame(result).to_csv(out.with_name(out.name + "_Summary.csv"), index=False)

    s = result.summary
    logger.info("annual net profit %.0f, ROI %.1f%%", s.annual_net_profit, s.roi_pct)
    print("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
