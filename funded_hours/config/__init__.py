"""
Configuration module.

Default parameters, YAML-backed provider overrides and validation of
provider, quotation, advisor and term settings.
"""
