"""
Funded Hours - UK Childcare Funding Calculation Engine

Computes government-funded childcare entitlements for a single provider's
roster of children and derives parent fee quotations, optimisation advice
and portfolio summaries from them.
"""

__version__ = "0.1.0"
__author__ = "Funded Hours Team"
