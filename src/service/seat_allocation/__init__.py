"""
Seat Allocation

A dedicated bounded context for choosing seats at the box office
Responsibilities:
- Seating chart topology (rows, aisles, base rows)
- Contiguous block search and scoring
- Phase pipeline for fresh, grown and overflow selections
- Per-session growth state for the +/- seat stepper
"""
