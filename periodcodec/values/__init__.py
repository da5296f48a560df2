"""
Value types and the codecs for the textual forms of their parts.

- dates: compact and extended date-time layouts
- durations: the Duration type and its RFC 5545 token form
- period: the Period type
"""
