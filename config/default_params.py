"""Default parameters for the badminton session tracker."""

import os

# Shuttlecock weight per qualifying weekday (Monday=0 ... Sunday=6)
WEEKDAY_WEIGHTS = {
    0: 1.0,   # Monday
    2: 1.4,   # Wednesday
}

ROUNDING_UNIT = 1000
CURRENCY = 'VND'

# Current month plus this many following months are offered in the settings form
MONTHS_AHEAD = 3

STORAGE_KEYS = {
    'players': 'badminton_players',
    'sessions': 'badminton_sessions',
    'settings': 'badminton_monthly_settings',
}

DEFAULT_DATA_DIR = os.getenv('BADMINTON_DATA_DIR', 'data')

LOG_LEVEL = os.getenv('BADMINTON_LOG_LEVEL', 'INFO')

# Code-owned roster. When non-empty the roster is read-only at runtime.
FIXED_PLAYERS = [
    name.strip()
    for name in os.getenv('BADMINTON_FIXED_PLAYERS', '').split(',')
    if name.strip()
]

# Placeholders shown in the monthly settings form
SETTINGS_FORM_DEFAULTS = {
    'monthly_court_fee': 2000000,
    'monthly_shuttlecock_price': 1000000,
    'session_water_price': 10000,
}
