"""
EuroAlt
European and open-source alternatives to US tech products, with a
rule-based trust score.
"""

__version__ = "0.1.0"
