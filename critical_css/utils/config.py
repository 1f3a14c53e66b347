"""Configuration utility for Critical CSS."""

# Project version
VERSION = "1.0.0"

# Viewport used when none is given on the command line
DEFAULT_WIDTH = 1300
DEFAULT_HEIGHT = 900

# File size limits (in bytes)
MAX_CSS_SIZE = 5 * 1024 * 1024      # 5 MB

# Timeouts (in seconds)
PAGE_LOAD_TIMEOUT = 30

# Settle delay after page load before selectors are tested (in seconds)
RENDER_WAIT_TIME = 0.1

# Output naming when several urls are processed in one run
OUTPUT_FILE_TEMPLATE = 'critical-{index}.css'

# User-Agent for page visits, so analytics can tell these apart
USER_AGENT = 'Critical Path CSS Generator'

# Logging
LOG_FILE = None
LOG_LEVEL = 'INFO'

# Exported config
__all__ = [
    'VERSION',
    'DEFAULT_WIDTH', 'DEFAULT_HEIGHT',
    'MAX_CSS_SIZE',
    'PAGE_LOAD_TIMEOUT',
    'RENDER_WAIT_TIME', 'OUTPUT_FILE_TEMPLATE',
    'USER_AGENT', 'LOG_FILE', 'LOG_LEVEL',
]
