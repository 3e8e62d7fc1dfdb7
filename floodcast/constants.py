# floodcast/constants.py
"""Fixed constants shared by the forecasting and simulation modules."""

DAYS_PER_YEAR = 365

# --- risk thresholds (fractions of river capacity) ---
WARNING_FRACTION = 0.8
HIGH_HEAD_FRACTION = 0.8
MID_HEAD_FRACTION = 0.5
HIGH_HEAD_OUTFLOW_FACTOR = 1.5
MID_HEAD_OUTFLOW_FACTOR = 1.2

# --- runoff coefficient bounds ---
MIN_RUNOFF = 0.1
MAX_RUNOFF = 0.9

# --- soil moisture balance ---
EVAPORATION_PER_DEGREE = 0.03  # % per °C per day
INFILTRATION_PER_MM = 0.1      # % per mm of rain
MIN_MOISTURE = 0.0
MAX_MOISTURE = 100.0

# --- temperature forecast perturbations (°C) ---
SEASONAL_AMPLITUDE = 5.0
DAILY_VARIATION = 2.0
WEATHER_SYSTEM_VARIATION = 1.5

# --- extreme events ---
EXTREME_EVENT_PROBABILITY = 0.05
STORM_RAIN_RANGE = (50.0, 100.0)     # mm
HEAT_EXCURSION_RANGE = (5.0, 15.0)   # °C

# --- archive soil moisture (m³/m³) mapped onto 0…100 % ---
SOIL_MOISTURE_DRY = 0.1
SOIL_MOISTURE_WET = 0.4
