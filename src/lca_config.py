# Filename: src/lca_config.py
# Default values for the LCA simulation wrapper

# Model defaults (Miletic et al., 2017)
NOISE_SD = 0.1          # Standard deviation of the Gaussian noise 's'
DT = 0.001              # Simulation time step (1 ms)
MAX_TIME = 5.0          # Maximum decision time in seconds
NON_LINEAR = True       # Floor accumulator values at zero

# Trial settings
N_TRIALS = 1000         # Trials per simulation
CORRECT_RESPONSE = 1    # Accumulator coding the correct answer

# Reporting
RT_DECIMALS = 3         # Rounding of reported reaction times
NDT_MS_CUTOFF = 1.0     # Non-decision times above this are read as milliseconds
