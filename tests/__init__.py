"""
Test suite for gridsheet.

Unit tests for the block catalog, row-group packing, sheet layout, grid
rendering, the sheet parser, the HTML and PDF compilers and the CLI.
"""
