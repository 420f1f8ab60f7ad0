from lca.parameters import LCAParameters
from lca.random_source import RandomSource
from lca.trial_driver import NO_RESPONSE, TrialResult, TrialState, run_trial, simulate_trials
