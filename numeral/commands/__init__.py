"""
Each module in this package implements one `numeral` subcommand.
"""
