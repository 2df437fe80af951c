"""
Application Layer for the Coach Booking API.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- use_cases/: Booking, listing, cancellation and feedback workflows
- exceptions.py: Error taxonomy shared by use cases and adapters
"""
