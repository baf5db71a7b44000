"""
UI Constants for the classroom reaction chamber window.
"""

# Font Configuration
FONT_FAMILY = "sans-serif"  # Cross-platform generic font family
FONT_SIZES = {
    'label': 10,
    'small': 8,
}

# Color Scheme
COLORS = {
    'background': '#ffffff',
    'text_primary': '#2c2c2c',
    'accent': '#2563eb',
}

# Spacing and Layout
PADDING = {
    'medium': 8,
    'large': 12,
}

# Frame cadence of the tk.after loop (about 60 frames per second)
FRAME_INTERVAL_MS = 16
