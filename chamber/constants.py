# -----------------------
# Chamber geometry (pixels)
# -----------------------
DEFAULT_WIDTH = 800.0
DEFAULT_HEIGHT = 500.0
SPAWN_MARGIN = 60.0          # molecules spawn at least this far from the walls

# -----------------------
# Molecule radii
# -----------------------
ATOM_RADII = {"H": 6.0, "Cl": 10.0}
ENVELOPE_MARGIN = 2.0        # added to the sum of atom radii
FALLBACK_ENVELOPE_RADIUS = 18.0
INITIAL_SPEED_RANGE = 1.0    # velocity components drawn from [-1, 1]
PRODUCT_JITTER = 10.0        # products land within +/- this of the collision midpoint
MIN_CHAMBER_SIZE = 2 * (2 * max(ATOM_RADII.values()) + ENVELOPE_MARGIN)  # twice the Cl2 envelope

# -----------------------
# Kinetics
# -----------------------
GAS_CONSTANT = 8.314         # J/(mol K)
ACTIVATION_ENERGY = 9000.0   # J/mol
PRE_EXPONENTIAL_FACTOR = 0.30
PROBABILITY_CEILING = 0.20
REFERENCE_TEMPERATURE_C = 50.0
SPEED_FLOOR = 0.45
SPEED_CEILING = 2.0
COLD_THRESHOLD_C = 25.0
COLD_PROBABILITY_FACTOR = 0.10
COLD_SPEED_FACTOR = 0.75
TRAP_PROBABILITY_FACTOR = 0.02
TRAP_SPEED_FACTOR = 0.55
KELVIN_OFFSET = 273.15

# -----------------------
# Interaction resolvers
# -----------------------
CONTACT_MULTIPLIER = 1.15    # encounter distance relative to the sum of radii
OVERLAP_PUSH_FRACTION = 0.5
RELAX_ITERATIONS = 240

# -----------------------
# Input limits
# -----------------------
MIN_TEMPERATURE_C = 0.0
MAX_TEMPERATURE_C = 100.0
DEFAULT_TEMPERATURE_C = 20.0
MIN_COUNT = 0
MAX_COUNT = 60
DEFAULT_H2_COUNT = 6
DEFAULT_CL2_COUNT = 10

# -----------------------
# Simulation Manager
# -----------------------
DEFAULT_TICK_INTERVAL = 1.0 / 60.0   # seconds per tick for fixed-timestep driving
MAX_TICKS_PER_ADVANCE = 5
DEFAULT_METRICS_MAXLEN = 2000

# -----------------------
# Logging
# -----------------------
LOGGING_LEVEL = "INFO"  # options: DEBUG, INFO, WARNING, ERROR

# -----------------------
# Misc
# -----------------------
EPSILON = 1e-6  # minimum center distance before a separation vector is trusted
