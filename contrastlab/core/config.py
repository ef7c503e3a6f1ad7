#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024

RANGE_TOLERANCE = 1e-6             # Float noise accepted when validating channel ranges
ACHROMATIC_EPS = 1e-7              # Chroma below which hue is powerless and reported as 0

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_MIN_RATIO = 1.0               # Lower bound for WCAG calculation
WCAG_MAX_RATIO = 21.0              # Upper bound for WCAG calculation (Black on White)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula

# Usage contexts and their default thresholds
CONTEXT_BODY = "body"              # Body text
CONTEXT_LARGE = "large"            # Large text and UI components
CONTEXTS = (CONTEXT_BODY, CONTEXT_LARGE)
DEFAULT_THRESHOLDS = {
    CONTEXT_BODY: WCAG_AA_NORMAL,
    CONTEXT_LARGE: WCAG_AA_LARGE,
}

# Gamut policies for contrast evaluation
GAMUT_STRICT = "strict"            # Out-of-gamut colors raise DomainError
GAMUT_FIT = "fit"                  # Out-of-gamut colors are chroma-reduced first
GAMUT_MODES = (GAMUT_STRICT, GAMUT_FIT)

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
PERCENT = 100.0                    # Divisor to convert percentages to fractions

GAMUT_TOLERANCE = 0.5 / RGB_MAX      # Distance outside [0, 1] still in gamut (half an 8-bit step)

# Channel ranges
OKLCH_L_MAX = 1.0                  # OKLab lightness upper bound
OKLCH_C_MAX = 0.4                  # CSS reference range for OKLCH chroma (100% == 0.4)

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# Constants for OKLab color space conversions (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0     # Power exponent for perceptual LMS non-linearity

# Linear sRGB to LMS matrix (Source: Björn Ottosson, 2020)
M_LINEAR_TO_LMS = (
    (0.4122214708, 0.5363325363, 0.0514459929),  # Long-wavelength (L) response
    (0.2119034982, 0.6806995451, 0.1073969566),  # Medium-wavelength (M) response
    (0.0883024619, 0.2817188376, 0.6299787005),  # Short-wavelength (S) response
)

# LMS' to OKLab matrix (perceptual lightness and opponency)
M_LMS_TO_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),  # Lightness (L)
    (1.9779984951, -2.4285922050, 0.4505937099),  # Green-red (a)
    (0.0259040371, 0.7827717662, -0.8086757660),  # Blue-yellow (b)
)

# OKLab to LMS' matrix (inverse stage part 1)
M_OKLAB_TO_LMS = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS to linear sRGB matrix (inverse stage part 2)
M_LMS_TO_LINEAR = (
    (4.0767416621, -3.3077115913, 0.2309699292),   # Linear red
    (-1.2684380046, 2.6097574011, -0.3413193965),  # Linear green
    (-0.0041960863, -0.7034186147, 1.7076147010),  # Linear blue
)

# ==========================================
# Search & Repair Constants
# ==========================================

GAMUT_MAP_BINARY_SEARCH_ITERATIONS = 24  # Binary search steps for chroma-based gamut mapping
CONTRAST_BINARY_SEARCH_ITERATIONS = 30   # Binary search steps for target contrast matching
REPAIR_MARGIN = 1e-3                     # Ratio headroom kept by suggested repairs

# ==========================================
# CLI UI & Process Conventions
# ==========================================

EXIT_OK = 0                        # Every rule passed
EXIT_FAIL = 1                      # At least one rule failed
EXIT_CONFIG = 2                    # Configuration or input error

RATIO_DECIMALS = 2                 # Rounding applied to ratios in reports
COORD_DECIMALS = 4                 # Rounding applied to coordinates in output

OUTPUT_FORMATS = ("hex", "oklch", "rgb")

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
