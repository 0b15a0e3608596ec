"""
Feature modules.

- bouldering: Bouldering load (per-climb and grade-fraction modes)
- hangboard: Hangboard load
- session: Session aggregation and rest-day recommendation
"""
