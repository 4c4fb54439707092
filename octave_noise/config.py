# config.py
DEFAULT_OCTAVES = 12
DEFAULT_OUTPUT = "out.png"  # written to the current working directory

# 8-bit grayscale
MAX_SAMPLE = 255

# Preview service limits
DEFAULT_PREVIEW_OCTAVES = 8
MAX_PREVIEW_SIZE = 1024
MAX_PREVIEW_OCTAVES = 16
PREVIEW_PORT = 8081
