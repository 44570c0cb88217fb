"""
Command-line tools.

Modules:
    fontconv: BDF to BF2 / paged Python font converter
"""
