"""
Description:
This module contains precompiled regex patterns for mining structured values out of free-form model output.

Dependencies:
- re: Python's built-in regular expression module for pattern matching.

Author: @kcaparas1630

"""

import re

# Compile regex patterns once for better performance
REGEX_PATTERNS = {
    'score': re.compile(r"Score\s*\(out of 10\)\s*:\s*(\d+)", re.IGNORECASE),
    # Greedy on purpose: first "[{" to the last "}]"
    'json_array': re.compile(r"\[\s*\{[\s\S]*\}\s*\]"),
    'json_object': re.compile(r"\{[\s\S]*\}"),
    'line_break': re.compile(r"\r\n|\r|\n"),
}
