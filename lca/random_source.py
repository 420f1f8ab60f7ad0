# Filename: lca/random_source.py
# Purpose: Seedable, resumable standard-normal stream shared by all trials of a run.

import json
import logging
from pathlib import Path

import numpy as np

logger = logging.getLogger(__name__)


class RandomSource:
    """
    Owns the single random stream that is threaded through every trial.

    The stream is never reset between trials. Its state can be exported and
    restored (or saved to disk) so a later run continues where the previous
    one stopped instead of replaying the same numbers.
    """
    def __init__(self, seed=None):
        """
        Args:
            seed (int | np.random.SeedSequence | None): Seed for the stream.
                None draws fresh entropy from the OS.
        """
        if isinstance(seed, np.random.SeedSequence):
            self._seed_seq = seed
        else:
            self._seed_seq = np.random.SeedSequence(seed)
        self.generator = np.random.Generator(np.random.PCG64(self._seed_seq))
        self.n_draws = 0

    @classmethod
    def coerce(cls, rng):
        """Turns None, an int seed or an existing RandomSource into a RandomSource."""
        if isinstance(rng, cls):
            return rng
        if rng is None or isinstance(rng, (int, np.integer, np.random.SeedSequence)):
            return cls(rng)
        raise TypeError(f"Cannot build a RandomSource from {type(rng).__name__}")

    def standard_normal(self, size, out=None):
        """
        Draws `size` N(0, 1) variates in order.

        Args:
            size (int): Number of variates.
            out (np.ndarray): Optional float64 buffer of length `size` to fill.

        Returns:
            np.ndarray: The variates.
        """
        self.n_draws += size
        if out is not None:
            return self.generator.standard_normal(size, out=out)
        return self.generator.standard_normal(size)

    def spawn(self, n_children):
        """Independent child streams, deterministically derived from this one's seed."""
        return [RandomSource(child) for child in self._seed_seq.spawn(n_children)]

    def get_state(self):
        return self.generator.bit_generator.state

    def set_state(self, state):
        try:
            self.generator.bit_generator.state = state
        except (TypeError, ValueError, KeyError) as e:
            raise ValueError(f"Invalid random stream state: {e}") from e

    def _seed_sequence_state(self):
        seq = self._seed_seq
        return {
            'entropy': seq.entropy,
            'spawn_key': list(seq.spawn_key),
            'pool_size': seq.pool_size,
            'n_children_spawned': seq.n_children_spawned,
        }

    def save(self, path):
        """
        Writes the stream to a JSON file.

        Besides the generator state this keeps the seed sequence, so children
        spawned after a resume match those of the uninterrupted source, and
        the draw count.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            json.dump({
                'generator': self.get_state(),
                'seed_sequence': self._seed_sequence_state(),
                'n_draws': self.n_draws,
            }, f)
        logger.debug("Saved random stream state to %s", path)

    @classmethod
    def load(cls, path):
        """Builds a RandomSource that resumes the stream stored in `path`."""
        with open(path, 'r') as f:
            try:
                saved = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Random stream state file {path} is not valid JSON") from e
        try:
            seq = saved['seed_sequence']
            seed_seq = np.random.SeedSequence(
                seq['entropy'],
                spawn_key=tuple(seq['spawn_key']),
                pool_size=seq['pool_size'],
                n_children_spawned=seq['n_children_spawned'],
            )
            generator_state = saved['generator']
            n_draws = int(saved['n_draws'])
        except (TypeError, ValueError, KeyError) as e:
            raise ValueError(f"Random stream state file {path} is malformed: {e}") from e

        source = cls(seed_seq)
        source.set_state(generator_state)
        source.n_draws = n_draws
        logger.debug("Resumed random stream state from %s", path)
        return source
