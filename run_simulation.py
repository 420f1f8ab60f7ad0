import argparse
import datetime
import json
import logging
import os

from lca.random_source import RandomSource
from src.config import Config
from src.simulator import simulate_lca

logger = logging.getLogger(__name__)

REQUIRED_PARAMS = ("I", "kappa", "beta", "Z", "ndt")


def load_params(params_file):
    with open(params_file, 'r') as f:
        params = json.load(f)
    missing = [name for name in REQUIRED_PARAMS if name not in params]
    if missing:
        raise ValueError(f"Parameter file {params_file} is missing: {', '.join(missing)}")
    return params


def open_random_source(config):
    """Resumes the stream from the state file if there is one, else seeds a new stream."""
    if config.state_file and os.path.exists(config.state_file):
        if config.seed is not None:
            logger.warning("Resuming random stream from %s; ignoring --seed %s",
                           config.state_file, config.seed)
        return RandomSource.load(config.state_file)
    return RandomSource(config.seed)


def run(config, params):
    """
    Runs one simulation and writes the trial table.

    Returns:
        str: Path of the written CSV.
    """
    config.validate()
    rng = open_random_source(config)

    df = simulate_lca(n_trials=config.n_trials, rng=rng, **params)

    ts = datetime.datetime.now().strftime("%Y%m%d-%H%M%S")
    outdir = os.path.join(config.output_dir, ts)
    os.makedirs(outdir, exist_ok=True)
    raw_fp = os.path.join(outdir, "raw.csv")
    df.to_csv(raw_fp, index=False)
    logger.info("Saved raw trials to %s", raw_fp)

    if config.state_file:
        rng.save(config.state_file)
    return raw_fp


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Leaky, Competing Accumulator simulation runner"
    )
    parser.add_argument(
        "--params", "-p", required=True,
        help="Path to JSON file with model parameters (I, kappa, beta, Z, ndt, ...)"
    )
    parser.add_argument(
        "--n-trials", "-n", type=int, default=Config().n_trials,
        help="Number of trials to run (default: %(default)s)"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for a new random stream"
    )
    parser.add_argument(
        "--state-file", default=None,
        help="JSON file to resume the random stream from and save it to after the run"
    )
    parser.add_argument(
        "--output-dir", "-o", default=Config().output_dir,
        help="Directory for results (default: %(default)s)"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Print progress messages"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s', force=True)

    config = Config(n_trials=args.n_trials, seed=args.seed, state_file=args.state_file,
                    output_dir=args.output_dir, verbose=args.verbose)
    try:
        params = load_params(args.params)
        return run(config, params)
    except (ValueError, TypeError) as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
