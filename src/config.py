"""
Run settings for the LCA simulation command line.
"""
from src.lca_config import N_TRIALS


class Config:
    def __init__(self, n_trials=N_TRIALS, seed=None, state_file=None,
                 output_dir="results", verbose=False):
        """
        Initialize run settings.

        Args:
            n_trials (int): Number of trials to simulate
            seed (int): Seed for a fresh random stream (ignored when resuming)
            state_file (str): JSON file the random stream is resumed from and saved to
            output_dir (str): Directory for the trial CSV
            verbose (bool): Log at INFO level
        """
        self.n_trials = n_trials
        self.seed = seed
        self.state_file = state_file
        self.output_dir = output_dir
        self.verbose = verbose

    def validate(self):
        """
        Validate run settings.

        Returns:
            bool: True if configuration is valid
        """
        if isinstance(self.n_trials, bool) or int(self.n_trials) != self.n_trials:
            raise ValueError("Trial count must be an integer")
        if self.n_trials < 0:
            raise ValueError("Trial count cannot be negative")
        if self.seed is not None and self.seed < 0:
            raise ValueError("Seed must be a non-negative integer")
        if not self.output_dir:
            raise ValueError("Output directory must be set")
        return True
