# Application Global Variables
# Default values shared across the calculation, storage and sheet modules.

# Display defaults
DEFAULT_UNIT = 'inch'
DEFAULT_CURRENCY = 'USD'

# Pricing defaults
DEFAULT_LABOR_COST = 3.0          # Used when a product type has no labor entry
DEFAULT_SETUP_FEE = 10.0
DEFAULT_QUANTITY = 1
DEFAULT_PROFIT_MARGIN = 20.0      # Percent
SETUP_FEE_WAIVER_QUANTITY = 10    # Orders above this quantity skip the setup fee
STRIP_LENGTH_FEET = 10.0          # Strips are always cut from 10' sheets

# Bend defaults
DEFAULT_BEND_RADIUS_RATIO = 1.0   # Inside radius = 1x material thickness

# Material limits (inches)
MAX_THICKNESS_INCHES = 0.25

# Material catalog file name (stored under <data_dir>/resources)
CATALOG_FILENAME = 'materials.json'
