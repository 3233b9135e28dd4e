"""Configuration validation utilities."""

from datetime import date
from typing import Any

from ..errors.configuration import ValidationError

MIN_OPERATING_WEEKS = 39
MAX_OPERATING_WEEKS = 52


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_provider_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate provider charging parameters."""
        errors = []

        # Currency amounts
        for field_name in ("hourly_rate", "meal_charge", "consumables_charge"):
            if field_name in params:
                value = params[field_name]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=field_name,
                        message="Must be a non-negative amount",
                        value=value
                    ))

        # Operating weeks must exceed the 38-week term
        if "operating_weeks" in params:
            value = params["operating_weeks"]
            if (not _is_integer(value)
                    or value < MIN_OPERATING_WEEKS
                    or value > MAX_OPERATING_WEEKS):
                errors.append(ValidationError(
                    field="operating_weeks",
                    message=f"Must be an integer between {MIN_OPERATING_WEEKS} and {MAX_OPERATING_WEEKS}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_quotation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate quotation request parameters."""
        errors = []

        if "weeks_to_quote" in params:
            value = params["weeks_to_quote"]
            if not _is_integer(value) or value <= 0:
                errors.append(ValidationError(
                    field="weeks_to_quote",
                    message="Must be a positive integer",
                    value=value
                ))

        if "meals_per_week" in params:
            value = params["meals_per_week"]
            if not _is_integer(value) or value < 0:
                errors.append(ValidationError(
                    field="meals_per_week",
                    message="Must be a non-negative integer",
                    value=value
                ))

        for field_name in ("include_meals", "include_consumables"):
            if field_name in params:
                value = params[field_name]
                if not isinstance(value, bool):
                    errors.append(ValidationError(
                        field=field_name,
                        message="Must be a boolean",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_advisor_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate optimisation advisor thresholds."""
        errors = []

        for field_name in ("under_utilisation_ratio", "stretch_coverage_ratio"):
            if field_name in params:
                value = params[field_name]
                if not _is_number(value) or value <= 0 or value > 1:
                    errors.append(ValidationError(
                        field=field_name,
                        message="Must be a positive number between 0 and 1",
                        value=value
                    ))

        if "over_booking_tolerance_hours" in params:
            value = params["over_booking_tolerance_hours"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="over_booking_tolerance_hours",
                    message="Must be a non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_term_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate term calendar parameters."""
        errors = []

        if "term_start" in params:
            value = params["term_start"]
            # PyYAML loads unquoted ISO dates as date objects
            if not isinstance(value, date):
                try:
                    date.fromisoformat(str(value))
                except ValueError:
                    errors.append(ValidationError(
                        field="term_start",
                        message="Must be an ISO date (YYYY-MM-DD)",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "provider" in config:
            errors.extend(ConfigValidator.validate_provider_params(config["provider"]))

        if "quotation" in config:
            errors.extend(ConfigValidator.validate_quotation_params(config["quotation"]))

        if "advisor" in config:
            errors.extend(ConfigValidator.validate_advisor_params(config["advisor"]))

        if "term" in config:
            errors.extend(ConfigValidator.validate_term_params(config["term"]))

        return errors
