# Compass rose: 32 points, 360 / 32 degrees apart
COMPASS_POINTS_COUNT = 32
COMPASS_STEP_DEGREES = 11.25

# Base62 alphabet used by the URL shortener (digits, lowercase, uppercase)
BASE62_ALPHABET = '0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ'

# CSS selector combinators: descendant, next-sibling, subsequent-sibling, child
SELECTOR_COMBINATORS = frozenset({' ', '+', '~', '>'})

# Runtime environment (defaults to 'local')
APP_ENV_ENV = 'KATAS_ENV'

# Logging: level name and output format ('json' or 'text')
LOG_LEVEL_ENV = 'KATAS_LOG_LEVEL'
LOG_FORMAT_ENV = 'KATAS_LOG_FORMAT'
LOG_FORMATS = frozenset({'json', 'text'})
