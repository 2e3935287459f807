"""
Precomputed poker hand ranking and parallel equity simulation.
"""
