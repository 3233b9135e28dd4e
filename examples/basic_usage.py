#!/usr/bin/env python3
"""
Basic Usage Example - Funded Hours Engine

This script demonstrates the basic usage of the funded hours engine with
the sample roster. It shows how to:
- Initialize the engine
- Load child records
- Produce a fee quotation
- Review optimisation suggestions and roster totals

Run: python examples/basic_usage.py
"""

from funded_hours.data.samples import sample_roster
from funded_hours.engine import FundingEngine
from funded_hours.funding.quotation import format_currency
from funded_hours.logging import configure_logging
from funded_hours.state.roster import record_attended_week


def print_quote(engine: FundingEngine, children, child_id) -> None:
    """Print an itemized quotation for one child."""
    quote = engine.quote(children, engine.new_quotation_request(child_id=child_id))
    if quote is None:
        print(f"No quotation available for child {child_id}")
        return

    funding = "Stretched" if quote.child.stretched else "Term-time"
    print(f"\n📄 Quotation for {quote.child.name} ({funding})")
    for line, value in quote.as_statement().items():
        print(f"  {line:<26} {value}")


def print_optimisations(engine: FundingEngine, children) -> None:
    """Print advisory suggestions for the roster."""
    icons = {"warning": "⚠️ ", "info": "ℹ️ ", "success": "✅"}
    print(f"\n💡 Optimisations (term week {engine.current_term_week()} of 38)")
    for suggestion in engine.optimisations(children):
        print(f"  {icons[suggestion.severity.value]} {suggestion.child_name}: {suggestion.title}")
        print(f"     {suggestion.message}")
        print(f"     → {suggestion.recommendation}")


def print_summary(engine: FundingEngine, children) -> None:
    """Print roster totals."""
    summary = engine.summary(children)
    print("\n📊 Summary")
    print(f"  Children:            {summary.total_children}")
    print(f"  Funded hours:        {summary.total_funded_hours}")
    print(f"  Used hours:          {summary.total_used_hours:g}")
    print(f"  Remaining hours:     {summary.total_remaining_hours:g}")
    print(f"  Average utilisation: {summary.average_utilisation}%")


def print_comparison(engine: FundingEngine) -> None:
    """Print term-time vs stretched weekly hours."""
    print(f"\n📅 Term-time (38 wks) vs stretched ({engine.settings.operating_weeks} wks)")
    for row in engine.funding_comparison():
        print(f"  {row.scheme.name:<26} {row.term_time_weekly:5.1f} → "
              f"{row.stretched_weekly:5.1f} hrs/wk")


def main():
    """Run the basic usage example."""
    configure_logging(level="WARNING")

    print("🚀 Funded Hours Engine - Basic Usage Example")
    engine = FundingEngine.create()
    print(f"✅ Engine initialized: hourly rate {format_currency(engine.settings.hourly_rate)}, "
          f"{engine.settings.operating_weeks} operating weeks")

    children = sample_roster()
    print(f"👶 Loaded {len(children)} children")

    print_quote(engine, children, child_id=1)
    print_quote(engine, children, child_id=2)
    print_optimisations(engine, children)
    print_summary(engine, children)
    print_comparison(engine)

    children = record_attended_week(children, 1)
    print("\n📝 Recorded one attended week for child 1")
    print_summary(engine, children)


if __name__ == "__main__":
    main()
